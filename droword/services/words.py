"""Word store: the persistence collaborator of the scheduler."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from droword.config import settings
from droword.core.session_queue import start_of_day
from droword.core.srs.sm2 import SchedulingState, ensure_timezone
from droword.db.models.word import Word
from droword.schemas.word import WordCreate
from droword.services.profile import ProfileService
from droword.utils.exceptions import WordNotFoundError


class WordService:
    """Create, list and reschedule stored words.

    Methods flush but never commit; callers own the transaction.
    """

    def __init__(
        self,
        db: Session,
        *,
        profile_service: ProfileService | None = None,
        tz: str | None = None,
    ) -> None:
        self.db = db
        self.profile_service = profile_service or ProfileService(db)
        self.tz = tz or settings.TIMEZONE

    def create_word(self, payload: WordCreate) -> Word:
        """Persist a new word with default scheduling fields."""

        word = Word(
            word=payload.word,
            part_of_speech=payload.part_of_speech.strip() or "word",
            translation=payload.translation,
            example=payload.example,
            comment=payload.comment,
            explanation=payload.explanation,
            transcription=payload.transcription,
            tag=payload.tag,
            from_language=payload.from_language,
            to_language=payload.to_language,
            date_added=datetime.now(timezone.utc),
        )
        word.apply_scheduling(SchedulingState())
        self.db.add(word)
        self.profile_service.increment_words_added()
        self.db.flush()
        logger.info(f"Added word {word.word!r} (id={word.id})")
        return word

    def list_words(self) -> list[Word]:
        """Return every word in insertion order."""

        stmt = select(Word).order_by(Word.id.asc())
        return list(self.db.scalars(stmt))

    def get_word(self, word_id: int) -> Word:
        word = self.db.get(Word, word_id)
        if not word:
            raise WordNotFoundError("Word not found", {"word_id": word_id})
        return word

    def delete_word(self, word_id: int) -> None:
        word = self.get_word(word_id)
        self.db.delete(word)
        self.db.flush()
        logger.info(f"Deleted word {word.word!r} (id={word_id})")

    def update_scheduling(self, word_id: int, state: SchedulingState) -> Word:
        """Store scheduler output for a word; the only writer of those fields."""

        word = self.get_word(word_id)
        word.apply_scheduling(state)
        return word

    def review_forecast(self, now: datetime | None = None) -> dict[str, int]:
        """Count overdue and due-today words relative to the local day."""

        now = ensure_timezone(now or datetime.now(timezone.utc))
        today_start = start_of_day(now, self.tz)
        # Midday offset keeps the next boundary correct across DST shifts
        tomorrow_start = start_of_day(today_start + timedelta(days=1, hours=12), self.tz)

        overdue = 0
        due_today = 0
        words = self.list_words()
        for word in words:
            due = ensure_timezone(word.due_date)
            if due is None:
                continue
            if due < today_start:
                overdue += 1
            elif due < tomorrow_start:
                due_today += 1

        profile = self.profile_service.get_profile()
        return {
            "total_words": len(words),
            "total_words_added": profile.total_words_added or 0,
            "overdue": overdue,
            "due_today": due_today,
        }
