"""Word dictionary endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from droword.api import deps
from droword.schemas import WordCreate, WordListResponse, WordRead, WordStats
from droword.services.profile import ProfileService
from droword.services.words import WordService
from droword.utils.exceptions import WordNotFoundError, handle_not_found_error

router = APIRouter(prefix="/words", tags=["words"])


@router.post("/", response_model=WordRead, status_code=status.HTTP_201_CREATED)
def create_word(payload: WordCreate, db: Session = Depends(deps.get_db)) -> WordRead:
    """Add a word with fresh scheduling fields."""

    service = WordService(db)
    word = service.create_word(payload)
    deps.commit_or_fail(db)
    return WordRead.model_validate(word)


@router.get("/", response_model=WordListResponse)
def list_words(db: Session = Depends(deps.get_db)) -> WordListResponse:
    """Return all words in the order they were added."""

    service = WordService(db)
    items = [WordRead.model_validate(word) for word in service.list_words()]
    return WordListResponse(total=len(items), items=items)


@router.get("/stats", response_model=WordStats)
def get_word_stats(db: Session = Depends(deps.get_db)) -> WordStats:
    """Return overdue/due-today counts and XP progress."""

    profile_service = ProfileService(db)
    service = WordService(db, profile_service=profile_service)
    forecast = service.review_forecast()
    xp = profile_service.xp_summary()
    deps.commit_or_fail(db)
    return WordStats(
        **forecast,
        level=xp.level,
        total_xp=xp.total_xp,
        words_to_next_level=xp.words_to_next_level,
        progress_ratio=xp.progress_ratio,
    )


@router.get("/{word_id}", response_model=WordRead)
def get_word(word_id: int, db: Session = Depends(deps.get_db)) -> WordRead:
    """Retrieve a word with its scheduling state."""

    service = WordService(db)
    try:
        word = service.get_word(word_id)
    except WordNotFoundError as exc:
        raise handle_not_found_error(exc) from exc
    return WordRead.model_validate(word)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_word(word_id: int, db: Session = Depends(deps.get_db)) -> Response:
    """Remove a word and its review history."""

    service = WordService(db)
    try:
        service.delete_word(word_id)
    except WordNotFoundError as exc:
        raise handle_not_found_error(exc) from exc
    deps.commit_or_fail(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
