"""Smoothed learner proficiency and its CEFR-style level band."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from droword.core.srs.sm2 import Rating

SMOOTHING_FACTOR = 0.06


class LearningLevel(str, Enum):
    """Discrete skill bands shown on the learner's badge."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        return list(LearningLevel).index(self) + 1


# Independent from the ease-factor quality scale in sm2.
PROFICIENCY_QUALITY: dict[Rating, float] = {
    Rating.AGAIN: 0.0,
    Rating.HARD: 0.35,
    Rating.GOOD: 0.7,
    Rating.EASY: 1.0,
}

# Upper bounds are exclusive; anything at or above the last bound is C2.
LEVEL_THRESHOLDS: tuple[tuple[float, LearningLevel], ...] = (
    (0.15, LearningLevel.A1),
    (0.35, LearningLevel.A2),
    (0.55, LearningLevel.B1),
    (0.75, LearningLevel.B2),
    (0.90, LearningLevel.C1),
)


@dataclass(slots=True, frozen=True)
class ProficiencyState:
    """Learner score paired with the level derived from it."""

    learning_score: float = 0.0
    learning_level: LearningLevel = LearningLevel.A1


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def level_for_score(score: float) -> LearningLevel:
    for upper, level in LEVEL_THRESHOLDS:
        if score < upper:
            return level
    return LearningLevel.C2


def update_score(score: float, rating: Rating, *, alpha: float = SMOOTHING_FACTOR) -> float:
    """Exponential moving average of the rating quality, clamped to [0, 1]."""

    quality = PROFICIENCY_QUALITY[Rating(rating)]
    return _clamp(score * (1 - alpha) + quality * alpha, 0.0, 1.0)


def apply_rating(state: ProficiencyState, rating: Rating) -> ProficiencyState:
    """Return the proficiency state after one rating event."""

    score = update_score(state.learning_score, rating)
    return ProficiencyState(learning_score=score, learning_level=level_for_score(score))
