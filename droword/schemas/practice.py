"""Pydantic schemas for practice session endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from droword.core.proficiency import LearningLevel
from droword.core.session_queue import SessionStatus
from droword.core.srs.sm2 import Rating
from droword.schemas.word import SchedulingRead


class PracticeCard(BaseModel):
    """Card shown to the learner."""

    word_id: int
    word: str
    part_of_speech: str
    translation: str
    example: str
    transcription: Optional[str] = None
    tag: Optional[str] = None
    from_language: str
    to_language: str
    comment: Optional[str] = None


class PracticeSessionRead(BaseModel):
    """Current state of a practice session."""

    session_id: str
    status: SessionStatus
    position: int
    total: int
    remaining: int
    current: Optional[PracticeCard] = None


class ReviewRequest(BaseModel):
    """Rating for the card currently on screen."""

    word_id: int = Field(..., ge=1)
    rating: Rating


class ReviewResponse(BaseModel):
    """Outcome of a rating event."""

    word_id: int
    rating: Rating
    is_lapse: bool
    reviewed_at: datetime
    scheduling: SchedulingRead
    learning_score: float
    learning_level: LearningLevel
    persisted: bool
    session: PracticeSessionRead
