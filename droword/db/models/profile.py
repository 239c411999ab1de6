"""Learner profile model."""
from sqlalchemy import Column, Date, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from droword.db.base import Base

PROFILE_ID = 1


class LearnerProfile(Base):
    """The single learner using this instance."""

    __tablename__ = "learner_profile"

    id = Column(Integer, primary_key=True, default=PROFILE_ID)

    learning_score = Column(Float, nullable=False, default=0.0)
    learning_level = Column(String(2), nullable=False, default="A1")

    # Never decremented when words are deleted
    total_words_added = Column(Integer, nullable=False, default=0)

    current_streak = Column(Integer, nullable=False, default=0)
    days_used_count = Column(Integer, nullable=False, default=0)
    last_active_date = Column(Date, nullable=True)
    first_use_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
