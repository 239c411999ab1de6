"""API endpoint modules for v1."""

from droword.api.v1.endpoints import practice, proficiency, tags, words

__all__ = [
    "practice",
    "proficiency",
    "tags",
    "words",
]
