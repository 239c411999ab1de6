"""Vocabulary word model with its spaced repetition fields."""
from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from droword.core.srs.sm2 import DEFAULT_EASE_FACTOR, SchedulingState, ensure_timezone, to_utc
from droword.db.base import Base


class Word(Base):
    """A word the learner added, plus the scheduler's state for it."""

    __tablename__ = "words"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word = Column(String(255), nullable=False)
    part_of_speech = Column(String(50), nullable=False, default="word")
    translation = Column(Text, nullable=True)
    example = Column(Text, nullable=True)
    comment = Column(Text, nullable=True)
    explanation = Column(Text, nullable=True)
    transcription = Column(String(255), nullable=True)
    tag = Column(String(100), nullable=True, index=True)
    from_language = Column(String(50), nullable=False)
    to_language = Column(String(50), nullable=False)
    date_added = Column(DateTime(timezone=True), server_default=func.now())

    # Owned by the scheduler; written only through WordService.update_scheduling
    ease_factor = Column(Float, nullable=False, default=DEFAULT_EASE_FACTOR)
    interval_days = Column(Integer, nullable=False, default=0)
    repetitions = Column(Integer, nullable=False, default=0)
    lapses = Column(Integer, nullable=False, default=0)
    due_date = Column(DateTime(timezone=True), nullable=True, index=True)

    reviews = relationship(
        "ReviewLog", back_populates="word", cascade="all, delete-orphan"
    )

    @property
    def scheduling_state(self) -> SchedulingState:
        return SchedulingState(
            ease_factor=self.ease_factor if self.ease_factor is not None else DEFAULT_EASE_FACTOR,
            interval_days=self.interval_days or 0,
            repetitions=self.repetitions or 0,
            lapses=self.lapses or 0,
            due_date=ensure_timezone(self.due_date),
        )

    def apply_scheduling(self, state: SchedulingState) -> None:
        """Copy scheduler output onto the row."""

        self.ease_factor = state.ease_factor
        self.interval_days = state.interval_days
        self.repetitions = state.repetitions
        self.lapses = state.lapses
        self.due_date = to_utc(state.due_date)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Word id={self.id!r} word={self.word!r} due={self.due_date!r}>"
