"""Review history model."""
from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from droword.db.base import Base


class ReviewLog(Base):
    """Individual rating events for a word."""

    __tablename__ = "review_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word_id = Column(
        Integer, ForeignKey("words.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating = Column(String(10), nullable=False)
    reviewed_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    is_lapse = Column(Boolean, nullable=False, default=False)

    ease_factor_before = Column(Float, nullable=True)
    ease_factor_after = Column(Float, nullable=True)
    interval_before = Column(Integer, nullable=True)
    interval_after = Column(Integer, nullable=True)
    learning_score_after = Column(Float, nullable=True)

    word = relationship("Word", back_populates="reviews")

    def set_transition(self, ease_before: float | None, ease_after: float | None,
                       interval_before: int | None, interval_after: int | None) -> None:
        """Store SM-2 scheduling transition values."""

        self.ease_factor_before = ease_before
        self.ease_factor_after = ease_after
        self.interval_before = interval_before
        self.interval_after = interval_after
