"""Pydantic schemas for the learner proficiency badge."""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from droword.core.proficiency import LearningLevel


class ProficiencyRead(BaseModel):
    """Smoothed score, its level band and activity streak."""

    learning_score: float = Field(..., ge=0.0, le=1.0)
    learning_level: LearningLevel
    current_streak: int
    days_used_count: int
    last_active_date: Optional[date] = None
