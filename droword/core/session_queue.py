"""Ephemeral practice-session queue.

A queue is built from the word collection at the start of a practice session
and lives only as long as that session. Words whose due date is missing or
falls on or before the start of the current local day are selected, keeping
the collection's natural order.

Lapsed words are spliced back a couple of positions ahead so they resurface
within the same session. The splice never changes how many cards remain.
"""
from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any, Callable, Generic, Iterable, TypeVar
from zoneinfo import ZoneInfo

from droword.core.srs.sm2 import ensure_timezone
from droword.utils.exceptions import PracticeSessionError, SessionCompleteError

T = TypeVar("T")

DEFAULT_REINSERT_OFFSET = 2


class SessionStatus(str, Enum):
    BUILDING = "building"
    ACTIVE = "active"
    COMPLETE = "complete"


def start_of_day(now: dt.datetime, tz: str | dt.tzinfo = "UTC") -> dt.datetime:
    """Return midnight of ``now``'s calendar day in ``tz``."""

    if isinstance(tz, str):
        zone = dt.timezone.utc if tz.upper() == "UTC" else ZoneInfo(tz)
    else:
        zone = tz
    local = ensure_timezone(now).astimezone(zone)
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def is_due(due_date: dt.datetime | None, start_of_today: dt.datetime) -> bool:
    """A word without a due date is always available."""

    if due_date is None:
        return True
    return ensure_timezone(due_date) <= ensure_timezone(start_of_today)


def select_due(words: Iterable[Any], start_of_today: dt.datetime) -> list[Any]:
    """Filter objects exposing ``due_date`` down to the ones due for review."""

    return [word for word in words if is_due(word.due_date, start_of_today)]


class SessionQueue(Generic[T]):
    """Ordered, index-addressable working set for one practice session."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._index = 0
        self._status = SessionStatus.BUILDING

    @classmethod
    def build(
        cls,
        words: Iterable[Any],
        start_of_today: dt.datetime,
        *,
        key: Callable[[Any], T] | None = None,
    ) -> "SessionQueue[T]":
        """Select due words and return an already started queue."""

        due = select_due(words, start_of_today)
        queue = cls(key(word) for word in due) if key else cls(due)
        queue.start()
        return queue

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def index(self) -> int:
        return self._index

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def remaining(self) -> int:
        return len(self._items) - self._index

    @property
    def is_complete(self) -> bool:
        return self._status is SessionStatus.COMPLETE

    def __len__(self) -> int:
        return len(self._items)

    @property
    def current(self) -> T:
        self._ensure_active()
        return self._items[self._index]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._status is not SessionStatus.BUILDING:
            raise PracticeSessionError("Session queue has already been started")
        self._status = SessionStatus.ACTIVE
        self._complete_if_exhausted()

    def advance(self) -> None:
        """Move past the current card after a successful review."""

        self._ensure_active()
        self._index += 1
        self._complete_if_exhausted()

    def reinsert_current(self, offset: int = DEFAULT_REINSERT_OFFSET) -> int:
        """Move the current card ``offset`` places ahead and return its new index.

        The index stays put, so the card that followed the lapsed one becomes
        current.
        """
        self._ensure_active()
        card = self._items.pop(self._index)
        position = min(self._index + offset, len(self._items))
        self._items.insert(position, card)
        return position

    def _complete_if_exhausted(self) -> None:
        if self._index >= len(self._items):
            self._status = SessionStatus.COMPLETE

    def _ensure_active(self) -> None:
        if self._status is SessionStatus.COMPLETE:
            raise SessionCompleteError("Practice session is complete")
        if self._status is SessionStatus.BUILDING:
            raise PracticeSessionError("Practice session has not started")
