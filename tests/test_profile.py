"""Tests for XP levels, streaks and the profile service."""
from __future__ import annotations

from datetime import date

import pytest

from droword.core.profile import StreakState, level_for_words, register_activity, xp_summary
from droword.core.proficiency import LearningLevel
from droword.core.srs.sm2 import Rating
from droword.db.models.profile import LearnerProfile
from droword.services.profile import ProfileService


@pytest.mark.parametrize(
    "total_words, level",
    [(0, 1), (2, 1), (3, 2), (7, 2), (8, 3), (15, 4)],
)
def test_level_for_words(total_words, level):
    assert level_for_words(total_words) == level


def test_level_is_capped():
    assert level_for_words(100_000) == 50


def test_xp_summary_reports_progress_within_level():
    summary = xp_summary(5)

    assert summary.level == 2
    assert summary.total_xp == 50
    assert summary.words_in_level == 2
    assert summary.words_for_level == 5
    assert summary.words_to_next_level == 3
    assert summary.progress_ratio == pytest.approx(0.4)


def test_streak_continues_on_consecutive_days():
    state = register_activity(StreakState(), date(2024, 5, 1))
    state = register_activity(state, date(2024, 5, 2))

    assert state.current_streak == 2
    assert state.days_used_count == 2
    assert state.first_use_date == date(2024, 5, 1)


def test_streak_resets_after_gap():
    state = StreakState(current_streak=5, days_used_count=9, last_active_date=date(2024, 5, 1))

    state = register_activity(state, date(2024, 5, 4))

    assert state.current_streak == 1
    assert state.days_used_count == 10


def test_same_day_activity_is_idempotent():
    state = register_activity(StreakState(), date(2024, 5, 1))

    again = register_activity(state, date(2024, 5, 1))

    assert again == state


def test_profile_service_creates_single_profile(db_session):
    service = ProfileService(db_session)

    first = service.get_profile()
    second = service.get_profile()

    assert first is second
    assert db_session.query(LearnerProfile).count() == 1
    assert service.get_proficiency().learning_level is LearningLevel.A1


def test_record_rating_persists_score_and_level(db_session):
    service = ProfileService(db_session)
    service.get_profile().learning_score = 0.149

    state = service.record_rating(Rating.EASY)
    db_session.commit()

    profile = db_session.get(LearnerProfile, 1)
    assert profile.learning_score == pytest.approx(state.learning_score)
    assert profile.learning_level == "A2"
