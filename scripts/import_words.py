"""Import words from a CSV file into the dictionary."""
from __future__ import annotations

import csv
import sys
from pathlib import Path

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session

sys.path.append(str(Path(__file__).resolve().parent.parent))

from droword.db.models.word import Word
from droword.db.session import SessionLocal
from droword.schemas.word import WordCreate
from droword.services.words import WordService


def import_words_from_csv(
    db: Session, csv_path: str | Path, *, from_language: str, to_language: str
) -> int:
    """Add every CSV row not already in the dictionary; return the count added.

    Expected columns: ``word`` (required), ``part_of_speech``, ``translation``,
    ``example``, ``comment``, ``tag``.
    """
    service = WordService(db)
    loaded = 0

    with open(csv_path, "r", encoding="utf-8") as file:
        reader = csv.DictReader(file)
        for row in reader:
            surface = (row.get("word") or "").strip()
            if not surface:
                continue

            existing = db.scalars(
                select(Word)
                .where(func.lower(Word.word) == surface.lower())
                .where(Word.from_language == from_language)
                .limit(1)
            ).first()
            if existing:
                continue

            service.create_word(
                WordCreate(
                    word=surface,
                    part_of_speech=row.get("part_of_speech") or "",
                    translation=row.get("translation") or None,
                    example=row.get("example") or None,
                    comment=row.get("comment") or None,
                    tag=row.get("tag") or None,
                    from_language=from_language,
                    to_language=to_language,
                )
            )
            loaded += 1

            if loaded % 100 == 0:
                db.commit()
                logger.info(f"Loaded {loaded} words...")

    db.commit()
    return loaded


if __name__ == "__main__":  # pragma: no cover - CLI execution
    import argparse

    parser = argparse.ArgumentParser(description="Import words into the dictionary")
    parser.add_argument("csv", type=str, help="Path to CSV file")
    parser.add_argument("--from-language", type=str, default="es", help="Language being learned")
    parser.add_argument("--to-language", type=str, default="en", help="Translation language")
    args = parser.parse_args()

    session = SessionLocal()
    try:
        count = import_words_from_csv(
            session, args.csv, from_language=args.from_language, to_language=args.to_language
        )
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
    print(f"Successfully loaded {count} words")
