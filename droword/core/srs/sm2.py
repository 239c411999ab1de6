"""SM-2 spaced repetition scheduler for vocabulary words."""
from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, replace
from enum import Enum

MIN_EASE_FACTOR = 1.3
DEFAULT_EASE_FACTOR = 2.5

# Quality below this value takes the lapse branch.
PASSING_QUALITY = 3

FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6

DEFAULT_RELEARN_DELAY = dt.timedelta(minutes=10)

TZ = dt.timezone.utc


class Rating(str, Enum):
    """Learner feedback for the card currently on screen."""

    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"


# Hard maps to 3, which is not below PASSING_QUALITY: only Again lapses.
EASE_QUALITY: dict[Rating, int] = {
    Rating.AGAIN: 1,
    Rating.HARD: 3,
    Rating.GOOD: 4,
    Rating.EASY: 5,
}


@dataclass(slots=True, frozen=True)
class SchedulingState:
    """Scheduling fields carried by a word record."""

    ease_factor: float = DEFAULT_EASE_FACTOR
    interval_days: int = 0
    repetitions: int = 0
    lapses: int = 0
    due_date: dt.datetime | None = None


@dataclass(slots=True, frozen=True)
class ReviewOutcome:
    """Result of scheduling a single rating."""

    state: SchedulingState
    rating: Rating
    is_lapse: bool
    reviewed_at: dt.datetime


def ensure_timezone(value: dt.datetime | None) -> dt.datetime | None:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on round trips)."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=TZ)
    return value


def to_utc(value: dt.datetime | None) -> dt.datetime | None:
    """Normalize to UTC before storage; SQLite keeps only the wall-clock time."""

    value = ensure_timezone(value)
    return value.astimezone(TZ) if value is not None else None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def update_ease_factor(ease_factor: float, quality: int) -> float:
    """Update ease factor based on response quality.

    SM-2 formula: EF = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    """
    new_ef = ease_factor + (0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02))
    return max(MIN_EASE_FACTOR, new_ef)


def next_interval(repetitions: int, interval_days: int, ease_factor: float) -> int:
    """Return the interval for a successful review.

    ``repetitions`` is the streak length *after* counting this review.
    """
    if repetitions == 1:
        return FIRST_INTERVAL_DAYS
    if repetitions == 2:
        return SECOND_INTERVAL_DAYS
    return max(1, _round_half_up(interval_days * ease_factor))


def review_card(
    state: SchedulingState,
    rating: Rating,
    now: dt.datetime | None = None,
    *,
    relearn_delay: dt.timedelta = DEFAULT_RELEARN_DELAY,
) -> ReviewOutcome:
    """Main entry point for reviewing a card.

    Args:
        state: Current scheduling fields of the word
        rating: Learner rating
        now: Review timestamp (defaults to current UTC time)
        relearn_delay: How long a lapsed card waits before it is due again

    Returns:
        ReviewOutcome with the new state; the input state is left untouched.
    """
    now = ensure_timezone(now or dt.datetime.now(TZ))
    quality = EASE_QUALITY[Rating(rating)]
    ease_factor = update_ease_factor(state.ease_factor, quality)

    if quality < PASSING_QUALITY:
        new_state = replace(
            state,
            ease_factor=ease_factor,
            interval_days=0,
            repetitions=0,
            lapses=state.lapses + 1,
            due_date=now + relearn_delay,
        )
        return ReviewOutcome(state=new_state, rating=Rating(rating), is_lapse=True, reviewed_at=now)

    repetitions = state.repetitions + 1
    interval = next_interval(repetitions, state.interval_days, ease_factor)
    new_state = replace(
        state,
        ease_factor=ease_factor,
        interval_days=interval,
        repetitions=repetitions,
        due_date=now + dt.timedelta(days=interval),
    )
    return ReviewOutcome(state=new_state, rating=Rating(rating), is_lapse=False, reviewed_at=now)
