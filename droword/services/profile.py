"""Learner profile, proficiency and streak bookkeeping."""
from __future__ import annotations

from datetime import date

from loguru import logger
from sqlalchemy.orm import Session

from droword.core.profile import StreakState, XPSummary, register_activity, xp_summary
from droword.core.proficiency import (
    LearningLevel,
    ProficiencyState,
    apply_rating,
    level_for_score,
)
from droword.core.srs.sm2 import Rating
from droword.db.models.profile import PROFILE_ID, LearnerProfile


class ProfileService:
    """Read and update the single learner profile row."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_profile(self) -> LearnerProfile:
        """Return the profile, creating it with defaults on first use."""

        profile = self.db.get(LearnerProfile, PROFILE_ID)
        if profile is None:
            profile = LearnerProfile(
                id=PROFILE_ID,
                learning_score=0.0,
                learning_level=LearningLevel.A1.value,
                total_words_added=0,
                current_streak=0,
                days_used_count=0,
            )
            self.db.add(profile)
            self.db.flush()
        return profile

    # ------------------------------------------------------------------
    # Proficiency
    # ------------------------------------------------------------------
    def get_proficiency(self) -> ProficiencyState:
        profile = self.get_profile()
        score = profile.learning_score or 0.0
        # Stored level is derived data; recompute in case thresholds moved.
        return ProficiencyState(learning_score=score, learning_level=level_for_score(score))

    def record_rating(self, rating: Rating) -> ProficiencyState:
        """Fold one rating into the smoothed score and store the new level."""

        profile = self.get_profile()
        previous = self.get_proficiency()
        updated = apply_rating(previous, rating)
        profile.learning_score = updated.learning_score
        profile.learning_level = updated.learning_level.value
        if updated.learning_level is not previous.learning_level:
            logger.info(
                f"Learning level changed {previous.learning_level.value} -> "
                f"{updated.learning_level.value} (score={updated.learning_score:.3f})"
            )
        return updated

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------
    def increment_words_added(self) -> int:
        profile = self.get_profile()
        profile.total_words_added = (profile.total_words_added or 0) + 1
        return profile.total_words_added

    def xp_summary(self) -> XPSummary:
        return xp_summary(self.get_profile().total_words_added or 0)

    def register_activity(self, today: date) -> StreakState:
        """Mark ``today`` as active and update the streak counters."""

        profile = self.get_profile()
        state = register_activity(
            StreakState(
                current_streak=profile.current_streak or 0,
                days_used_count=profile.days_used_count or 0,
                last_active_date=profile.last_active_date,
                first_use_date=profile.first_use_date,
            ),
            today,
        )
        profile.current_streak = state.current_streak
        profile.days_used_count = state.days_used_count
        profile.last_active_date = state.last_active_date
        profile.first_use_date = state.first_use_date
        return state
