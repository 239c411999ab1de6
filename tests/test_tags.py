"""Tests for the tag store."""
from __future__ import annotations

import pytest

from droword.services.tags import TagService, normalize_hex
from droword.utils.exceptions import TagNotFoundError, ValidationError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#abc", "#AABBCC"),
        ("ff8800", "#FF8800"),
        ("  #12345678 ", "#123456"),
        ("12", "#122222"),
        ("#zz1", "#111111"),
        ("", "#000000"),
        ("#", "#000000"),
    ],
)
def test_normalize_hex(raw, expected):
    assert normalize_hex(raw) == expected


def test_add_tag_upserts_case_insensitively(db_session):
    service = TagService(db_session)

    created = service.add_tag("  Food ", "abc")
    updated = service.add_tag("food", "#010203")
    db_session.commit()

    assert created.id == updated.id
    assert updated.name == "Food"
    assert updated.color_hex == "#010203"
    assert len(service.list_tags()) == 1


def test_blank_tag_name_is_rejected(db_session):
    with pytest.raises(ValidationError):
        TagService(db_session).add_tag("   ", "#fff")


def test_remove_tag_by_name(db_session):
    service = TagService(db_session)
    service.add_tag("Travel", "#00ff00")
    db_session.commit()

    service.remove_tag("TRAVEL")
    db_session.commit()

    assert service.list_tags() == []
    with pytest.raises(TagNotFoundError):
        service.remove_tag("travel")
