"""Tests for the CSV import script."""
from __future__ import annotations

from droword.db.models.profile import LearnerProfile
from droword.db.models.word import Word
from scripts.import_words import import_words_from_csv

CSV_TEXT = """word,part_of_speech,translation,example
casa,noun,house,Mi casa es tu casa.
Casa,noun,house,
perro,,dog,
,noun,blank,
"""


def test_import_skips_duplicates_and_blank_rows(db_session, tmp_path):
    csv_path = tmp_path / "words.csv"
    csv_path.write_text(CSV_TEXT, encoding="utf-8")

    loaded = import_words_from_csv(db_session, csv_path, from_language="es", to_language="en")

    assert loaded == 2
    words = db_session.query(Word).order_by(Word.id).all()
    assert [word.word for word in words] == ["casa", "perro"]
    assert words[0].example == "Mi casa es tu casa."
    assert words[1].part_of_speech == "word"
    assert words[1].example is None
    assert db_session.get(LearnerProfile, 1).total_words_added == 2


def test_reimport_adds_nothing(db_session, tmp_path):
    csv_path = tmp_path / "words.csv"
    csv_path.write_text(CSV_TEXT, encoding="utf-8")

    import_words_from_csv(db_session, csv_path, from_language="es", to_language="en")
    again = import_words_from_csv(db_session, csv_path, from_language="es", to_language="en")

    assert again == 0
    assert db_session.query(Word).count() == 2
