"""Tag store with case-insensitive names and normalized colours."""
from __future__ import annotations

import string

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from droword.db.models.tag import Tag
from droword.utils.exceptions import TagNotFoundError, ValidationError

HEX_DIGITS = set(string.hexdigits)


def normalize_hex(value: str) -> str:
    """Coerce loosely formatted colour input into ``#RRGGBB``.

    >>> normalize_hex("#abc")
    '#AABBCC'
    >>> normalize_hex("12")
    '#122222'
    """
    digits = "".join(char for char in value.strip().removeprefix("#") if char in HEX_DIGITS)
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    elif len(digits) >= 6:
        digits = digits[:6]
    if len(digits) < 6:
        digits = digits.ljust(6, digits[-1]) if digits else "000000"
    return "#" + digits.upper()


class TagService:
    """Manage the learner's tag palette."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_tags(self) -> list[Tag]:
        return list(self.db.scalars(select(Tag).order_by(Tag.id.asc())))

    def find_tag(self, name: str) -> Tag | None:
        normalized = name.strip()
        if not normalized:
            return None
        stmt = select(Tag).where(func.lower(Tag.name) == normalized.lower())
        return self.db.scalars(stmt.limit(1)).first()

    def add_tag(self, name: str, color_hex: str) -> Tag:
        """Create a tag, or recolour the existing one with the same name."""

        normalized_name = name.strip()
        if not normalized_name:
            raise ValidationError("Tag name must not be blank")
        color = normalize_hex(color_hex)

        tag = self.find_tag(normalized_name)
        if tag is not None:
            tag.color_hex = color
        else:
            tag = Tag(name=normalized_name, color_hex=color)
            self.db.add(tag)
            logger.info(f"Created tag {normalized_name!r}")
        self.db.flush()
        return tag

    def remove_tag(self, name: str) -> None:
        tag = self.find_tag(name)
        if tag is None:
            raise TagNotFoundError("Tag not found", {"name": name})
        self.db.delete(tag)
        self.db.flush()
