"""Practice session endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from droword.api import deps
from droword.core.session_queue import SessionQueue
from droword.schemas import (
    PracticeCard,
    PracticeSessionRead,
    ReviewRequest,
    ReviewResponse,
    SchedulingRead,
)
from droword.services.practice import PracticeService
from droword.utils.exceptions import (
    PracticeSessionError,
    WordNotFoundError,
    handle_not_found_error,
    handle_session_error,
)

router = APIRouter(prefix="/practice", tags=["practice"])


def _session_read(
    service: PracticeService, session_id: str, queue: SessionQueue[int]
) -> PracticeSessionRead:
    card = service.session_card(session_id)
    current = None
    if card is not None:
        word = card.word
        current = PracticeCard(
            word_id=word.id,
            word=word.word,
            part_of_speech=card.part_of_speech,
            translation=card.translation,
            example=card.example,
            transcription=word.transcription,
            tag=word.tag,
            from_language=word.from_language,
            to_language=word.to_language,
            comment=word.comment,
        )
    return PracticeSessionRead(
        session_id=session_id,
        status=queue.status,
        position=queue.index,
        total=len(queue),
        remaining=queue.remaining,
        current=current,
    )


@router.post("/sessions", response_model=PracticeSessionRead, status_code=status.HTTP_201_CREATED)
def start_session(
    service: PracticeService = Depends(deps.get_practice_service),
) -> PracticeSessionRead:
    """Build a queue of the words due today."""

    session_id, queue = service.start_session()
    return _session_read(service, session_id, queue)


@router.get("/sessions/{session_id}", response_model=PracticeSessionRead)
def get_session(
    session_id: str,
    service: PracticeService = Depends(deps.get_practice_service),
) -> PracticeSessionRead:
    """Return the session status and the card currently on screen."""

    try:
        queue = service.get_session(session_id)
    except PracticeSessionError as exc:
        raise handle_not_found_error(exc) from exc
    return _session_read(service, session_id, queue)


@router.post("/sessions/{session_id}/review", response_model=ReviewResponse)
def submit_review(
    session_id: str,
    payload: ReviewRequest,
    service: PracticeService = Depends(deps.get_practice_service),
) -> ReviewResponse:
    """Rate the current card and move the session on."""

    try:
        service.get_session(session_id)
    except PracticeSessionError as exc:
        raise handle_not_found_error(exc) from exc

    try:
        result = service.rate(session_id, payload.word_id, payload.rating)
    except WordNotFoundError as exc:
        raise handle_not_found_error(exc) from exc
    except PracticeSessionError as exc:
        raise handle_session_error(exc) from exc

    outcome = result.outcome
    return ReviewResponse(
        word_id=result.word_id,
        rating=outcome.rating,
        is_lapse=outcome.is_lapse,
        reviewed_at=outcome.reviewed_at,
        scheduling=SchedulingRead(
            ease_factor=outcome.state.ease_factor,
            interval_days=outcome.state.interval_days,
            repetitions=outcome.state.repetitions,
            lapses=outcome.state.lapses,
            due_date=outcome.state.due_date,
        ),
        learning_score=result.proficiency.learning_score,
        learning_level=result.proficiency.learning_level,
        persisted=result.persisted,
        session=_session_read(service, session_id, result.queue),
    )
