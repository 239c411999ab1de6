"""Practice session orchestration.

Ties the pure scheduling core to storage: a rating runs the SM-2 scheduler,
writes the new scheduling fields and a review log, folds the rating into the
learner's proficiency score, then re-queues or advances the session.

Sessions are held in memory only. Persistence is best effort: if the commit
fails the error is logged and the session still moves on, so the learner can
finish the session while the stored record lags behind.
"""
from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from droword.config import settings
from droword.core.level_adaptation import adapt_example
from droword.core.proficiency import LearningLevel, ProficiencyState
from droword.core.session_queue import SessionQueue, start_of_day
from droword.core.srs.sm2 import Rating, ReviewOutcome, ensure_timezone, review_card
from droword.db.models.review import ReviewLog
from droword.db.models.word import Word
from droword.services.profile import ProfileService
from droword.services.words import WordService
from droword.utils.exceptions import PracticeSessionError, WordNotFoundError

MAX_SESSIONS = 16

MISSING_EXAMPLE = "Add an example later"
MISSING_TRANSLATION = "No translation yet"


class PracticeSessionRegistry:
    """In-memory map of live session queues, owned by the application."""

    def __init__(self, *, max_sessions: int = MAX_SESSIONS) -> None:
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, tuple[SessionQueue[int], threading.Lock]] = OrderedDict()
        self._lock = threading.Lock()

    def add(self, queue: SessionQueue[int]) -> str:
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = (queue, threading.Lock())
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug(f"Evicted practice session {evicted}")
        return session_id

    def _entry(self, session_id: str) -> tuple[SessionQueue[int], threading.Lock]:
        with self._lock:
            entry = self._sessions.get(session_id)
        if entry is None:
            raise PracticeSessionError("Practice session not found", {"session_id": session_id})
        return entry

    def get(self, session_id: str) -> SessionQueue[int]:
        return self._entry(session_id)[0]

    @contextmanager
    def locked(self, session_id: str) -> Iterator[SessionQueue[int]]:
        """Hold the session's own lock while its queue is read and mutated."""

        queue, lock = self._entry(session_id)
        with lock:
            yield queue

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


@dataclass(slots=True)
class PracticeCardData:
    """What the UI needs to render the current card."""

    word: Word
    translation: str
    example: str
    part_of_speech: str


@dataclass(slots=True)
class RatingResult:
    word_id: int
    outcome: ReviewOutcome
    proficiency: ProficiencyState
    persisted: bool
    queue: SessionQueue[int]


class PracticeService:
    """Run practice sessions against the word store."""

    def __init__(
        self,
        db: Session,
        registry: PracticeSessionRegistry,
        *,
        word_service: WordService | None = None,
        profile_service: ProfileService | None = None,
        relearn_delay: timedelta | None = None,
        reinsert_offset: int | None = None,
        tz: str | None = None,
    ) -> None:
        self.db = db
        self.registry = registry
        self.profile_service = profile_service or ProfileService(db)
        self.word_service = word_service or WordService(db, profile_service=self.profile_service)
        self.relearn_delay = (
            relearn_delay
            if relearn_delay is not None
            else timedelta(minutes=settings.RELEARN_DELAY_MINUTES)
        )
        self.reinsert_offset = (
            reinsert_offset if reinsert_offset is not None else settings.REINSERT_OFFSET
        )
        self.tz = tz or settings.TIMEZONE

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def start_session(self, now: datetime | None = None) -> tuple[str, SessionQueue[int]]:
        """Build a fresh queue of due words and register it."""

        now = ensure_timezone(now or datetime.now(timezone.utc))
        today_start = start_of_day(now, self.tz)
        queue: SessionQueue[int] = SessionQueue.build(
            self.word_service.list_words(), today_start, key=lambda word: word.id
        )
        self.profile_service.register_activity(today_start.date())
        self._commit("session start")

        session_id = self.registry.add(queue)
        logger.info(f"Started practice session {session_id} with {len(queue)} due words")
        return session_id, queue

    def get_session(self, session_id: str) -> SessionQueue[int]:
        return self.registry.get(session_id)

    def current_card(self, queue: SessionQueue[int]) -> PracticeCardData | None:
        """Return the card on screen, skipping words deleted mid-session."""

        while not queue.is_complete:
            word = self.db.get(Word, queue.current)
            if word is not None:
                return self.build_card(word, self.profile_service.get_proficiency().learning_level)
            logger.warning(f"Word {queue.current} vanished during practice; skipping")
            queue.advance()
        return None

    def session_card(self, session_id: str) -> PracticeCardData | None:
        with self.registry.locked(session_id) as queue:
            return self.current_card(queue)

    @staticmethod
    def build_card(word: Word, level: LearningLevel) -> PracticeCardData:
        example = word.example or MISSING_EXAMPLE
        if word.example:
            example = adapt_example(example, word.from_language, level)
        return PracticeCardData(
            word=word,
            translation=word.translation or MISSING_TRANSLATION,
            example=example,
            part_of_speech=word.part_of_speech or "word",
        )

    # ------------------------------------------------------------------
    # Rating
    # ------------------------------------------------------------------
    def rate(
        self,
        session_id: str,
        word_id: int,
        rating: Rating,
        now: datetime | None = None,
    ) -> RatingResult:
        """Apply a rating to the current card of a session.

        The session lock is held from the current-card check until the queue
        has moved on, so a repeated submission of the same card is rejected.
        """

        with self.registry.locked(session_id) as queue:
            return self._rate_current(session_id, queue, word_id, rating, now)

    def _rate_current(
        self,
        session_id: str,
        queue: SessionQueue[int],
        word_id: int,
        rating: Rating,
        now: datetime | None,
    ) -> RatingResult:
        current_id = queue.current
        if current_id != word_id:
            raise PracticeSessionError(
                "Rated word is not the current card",
                {"expected_word_id": current_id, "word_id": word_id},
            )

        try:
            word = self.word_service.get_word(word_id)
        except WordNotFoundError:
            queue.advance()
            raise

        before = word.scheduling_state
        outcome = review_card(before, rating, now, relearn_delay=self.relearn_delay)
        self.word_service.update_scheduling(word.id, outcome.state)
        proficiency = self.profile_service.record_rating(outcome.rating)

        log = ReviewLog(
            word_id=word.id,
            rating=outcome.rating.value,
            reviewed_at=outcome.reviewed_at,
            is_lapse=outcome.is_lapse,
            learning_score_after=proficiency.learning_score,
        )
        log.set_transition(
            before.ease_factor,
            outcome.state.ease_factor,
            before.interval_days,
            outcome.state.interval_days,
        )
        self.db.add(log)
        persisted = self._commit(f"review of word {word_id}")

        if outcome.is_lapse:
            position = queue.reinsert_current(self.reinsert_offset)
            logger.debug(f"Word {word_id} lapsed; re-queued at position {position}")
        else:
            queue.advance()
        if queue.is_complete:
            logger.info(f"Practice session {session_id} complete")

        return RatingResult(
            word_id=word_id,
            outcome=outcome,
            proficiency=proficiency,
            persisted=persisted,
            queue=queue,
        )

    def _commit(self, action: str) -> bool:
        try:
            self.db.commit()
        except SQLAlchemyError:
            logger.exception(f"Failed to persist {action}; continuing with in-memory state")
            self.db.rollback()
            return False
        return True
