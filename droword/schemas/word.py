"""Pydantic schemas for word endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from droword.core.srs.sm2 import ensure_timezone


class WordCreate(BaseModel):
    """Payload for adding a word to the dictionary."""

    word: str = Field(..., min_length=1, max_length=255)
    part_of_speech: str = Field("", max_length=50)
    translation: Optional[str] = None
    example: Optional[str] = None
    comment: Optional[str] = None
    explanation: Optional[str] = None
    transcription: Optional[str] = Field(None, max_length=255)
    tag: Optional[str] = Field(None, max_length=100)
    from_language: str = Field(..., min_length=1, max_length=50)
    to_language: str = Field(..., min_length=1, max_length=50)

    @field_validator("word")
    @classmethod
    def strip_word(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("word must not be blank")
        return value


class SchedulingRead(BaseModel):
    """Scheduler-owned fields of a word."""

    ease_factor: float
    interval_days: int
    repetitions: int
    lapses: int
    due_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("due_date", mode="after")
    @classmethod
    def attach_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_timezone(value)


class WordRead(BaseModel):
    """Representation of a stored word."""

    id: int
    word: str
    part_of_speech: str
    translation: Optional[str] = None
    example: Optional[str] = None
    comment: Optional[str] = None
    explanation: Optional[str] = None
    transcription: Optional[str] = None
    tag: Optional[str] = None
    from_language: str
    to_language: str
    date_added: Optional[datetime] = None
    ease_factor: float
    interval_days: int
    repetitions: int
    lapses: int
    due_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("due_date", mode="after")
    @classmethod
    def attach_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_timezone(value)


class WordListResponse(BaseModel):
    """All words in insertion order."""

    total: int
    items: list[WordRead]


class WordStats(BaseModel):
    """Review forecast and XP progress for the profile header."""

    total_words: int
    total_words_added: int
    overdue: int
    due_today: int
    level: int
    total_xp: int
    words_to_next_level: int
    progress_ratio: float
