"""Shared API dependencies."""
from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from droword.db.session import get_db
from droword.services.practice import PracticeService, PracticeSessionRegistry
from droword.utils.exceptions import handle_database_error

__all__ = ["commit_or_fail", "get_db", "get_session_registry", "get_practice_service"]


def commit_or_fail(db: Session) -> None:
    """Commit the request's unit of work, answering 500 if the store refuses it."""

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise handle_database_error(exc) from exc


def get_session_registry(request: Request) -> PracticeSessionRegistry:
    """Return the practice session registry owned by the running app."""

    return request.app.state.practice_sessions


def get_practice_service(
    db: Session = Depends(get_db),
    registry: PracticeSessionRegistry = Depends(get_session_registry),
) -> PracticeService:
    """Assemble the practice service with request-scoped dependencies."""

    return PracticeService(db, registry)
