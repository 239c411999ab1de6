"""Tag palette endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from droword.api import deps
from droword.schemas import TagCreate, TagRead
from droword.services.tags import TagService
from droword.utils.exceptions import (
    TagNotFoundError,
    ValidationError,
    handle_not_found_error,
    handle_validation_error,
)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("/", response_model=list[TagRead])
def list_tags(db: Session = Depends(deps.get_db)) -> list[TagRead]:
    service = TagService(db)
    return [TagRead.model_validate(tag) for tag in service.list_tags()]


@router.post("/", response_model=TagRead)
def upsert_tag(payload: TagCreate, db: Session = Depends(deps.get_db)) -> TagRead:
    """Create a tag or recolour an existing one with the same name."""

    service = TagService(db)
    try:
        tag = service.add_tag(payload.name, payload.color_hex)
    except ValidationError as exc:
        raise handle_validation_error(exc) from exc
    deps.commit_or_fail(db)
    return TagRead.model_validate(tag)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(name: str, db: Session = Depends(deps.get_db)) -> Response:
    service = TagService(db)
    try:
        service.remove_tag(name)
    except TagNotFoundError as exc:
        raise handle_not_found_error(exc) from exc
    deps.commit_or_fail(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
