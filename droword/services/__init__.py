"""Service layer package."""

from droword.services.practice import PracticeService, PracticeSessionRegistry
from droword.services.profile import ProfileService
from droword.services.tags import TagService
from droword.services.words import WordService

__all__ = [
    "PracticeService",
    "PracticeSessionRegistry",
    "ProfileService",
    "TagService",
    "WordService",
]
