"""Learner proficiency endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from droword.api import deps
from droword.schemas import ProficiencyRead
from droword.services.profile import ProfileService

router = APIRouter(prefix="/proficiency", tags=["proficiency"])


@router.get("/", response_model=ProficiencyRead)
def get_proficiency(db: Session = Depends(deps.get_db)) -> ProficiencyRead:
    """Return the current (score, level) pair for the level badge."""

    service = ProfileService(db)
    state = service.get_proficiency()
    profile = service.get_profile()
    deps.commit_or_fail(db)
    return ProficiencyRead(
        learning_score=state.learning_score,
        learning_level=state.learning_level,
        current_streak=profile.current_streak or 0,
        days_used_count=profile.days_used_count or 0,
        last_active_date=profile.last_active_date,
    )
