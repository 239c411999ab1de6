"""XP level and daily streak arithmetic for the learner profile."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

XP_PER_WORD = 10
MAX_LEVEL = 50


@dataclass(slots=True, frozen=True)
class XPSummary:
    level: int
    total_xp: int
    words_in_level: int
    words_for_level: int
    words_to_next_level: int
    progress_ratio: float


@dataclass(slots=True, frozen=True)
class StreakState:
    current_streak: int = 0
    days_used_count: int = 0
    last_active_date: dt.date | None = None
    first_use_date: dt.date | None = None


def words_needed_for_level(level: int) -> int:
    """Words required to clear ``level``; grows by two per level."""

    return 3 + (level - 1) * 2


def level_for_words(total_words: int) -> int:
    level = 1
    accumulated = 0
    while level < MAX_LEVEL:
        needed = words_needed_for_level(level)
        if total_words < accumulated + needed:
            break
        accumulated += needed
        level += 1
    return level


def xp_summary(total_words_added: int) -> XPSummary:
    """Return level progress for the number of words ever added."""

    total_words = max(0, total_words_added)
    level = level_for_words(total_words)
    before = sum(words_needed_for_level(lvl) for lvl in range(1, level))
    needed = words_needed_for_level(level)
    in_level = max(0, total_words - before)
    ratio = min(in_level / needed, 1.0) if needed > 0 else 0.0
    return XPSummary(
        level=level,
        total_xp=total_words * XP_PER_WORD,
        words_in_level=in_level,
        words_for_level=needed,
        words_to_next_level=max(0, needed - in_level),
        progress_ratio=ratio,
    )


def register_activity(state: StreakState, today: dt.date) -> StreakState:
    """Count ``today`` as an active day and extend or restart the streak."""

    first_use = state.first_use_date or today
    if state.last_active_date == today:
        if state.current_streak == 0:
            return StreakState(1, state.days_used_count, today, first_use)
        return StreakState(state.current_streak, state.days_used_count, today, first_use)

    if state.last_active_date is not None and state.last_active_date == today - dt.timedelta(days=1):
        streak = max(1, state.current_streak + 1)
    else:
        streak = 1
    return StreakState(
        current_streak=streak,
        days_used_count=state.days_used_count + 1,
        last_active_date=today,
        first_use_date=first_use,
    )
