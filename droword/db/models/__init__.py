"""Database models package."""
from droword.db.models.profile import LearnerProfile
from droword.db.models.review import ReviewLog
from droword.db.models.tag import Tag
from droword.db.models.word import Word

__all__ = [
    "LearnerProfile",
    "ReviewLog",
    "Tag",
    "Word",
]
