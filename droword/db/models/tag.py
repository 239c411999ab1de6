"""Tag model."""
from sqlalchemy import Column, Integer, String

from droword.db.base import Base


class Tag(Base):
    """Named colour label that words can reference."""

    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    color_hex = Column(String(7), nullable=False, default="#000000")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Tag name={self.name!r} color={self.color_hex!r}>"
