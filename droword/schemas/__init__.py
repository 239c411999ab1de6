"""Pydantic schemas package."""

from droword.schemas.practice import (
    PracticeCard,
    PracticeSessionRead,
    ReviewRequest,
    ReviewResponse,
)
from droword.schemas.proficiency import ProficiencyRead
from droword.schemas.tag import TagCreate, TagRead
from droword.schemas.word import (
    SchedulingRead,
    WordCreate,
    WordListResponse,
    WordRead,
    WordStats,
)

__all__ = [
    "PracticeCard",
    "PracticeSessionRead",
    "ReviewRequest",
    "ReviewResponse",
    "ProficiencyRead",
    "TagCreate",
    "TagRead",
    "SchedulingRead",
    "WordCreate",
    "WordListResponse",
    "WordRead",
    "WordStats",
]
