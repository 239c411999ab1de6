"""Smoke tests for word endpoints using HTTPX."""
from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError


@pytest.fixture()
def sample_words(add_word):
    return [
        add_word("hola", part_of_speech="interjection", translation="hello"),
        add_word("gracias", translation="thank you", example="Muchas gracias."),
    ]


@pytest.mark.asyncio
async def test_list_words_in_insertion_order(async_client, sample_words):
    response = await async_client.get("/api/v1/words/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["total"] == 2
    assert [item["word"] for item in payload["items"]] == ["hola", "gracias"]
    assert payload["items"][0]["ease_factor"] == pytest.approx(2.5)
    assert payload["items"][0]["repetitions"] == 0
    assert payload["items"][0]["due_date"] is None


@pytest.mark.asyncio
async def test_get_word(async_client, sample_words):
    word_id = sample_words[1].id
    response = await async_client.get(f"/api/v1/words/{word_id}")

    assert response.status_code == 200
    payload = response.json()
    assert payload["word"] == "gracias"
    assert payload["example"] == "Muchas gracias."


@pytest.mark.asyncio
async def test_get_missing_word_returns_404(async_client):
    response = await async_client.get("/api/v1/words/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_word_defaults(async_client):
    response = await async_client.post(
        "/api/v1/words/",
        json={"word": "  casa ", "from_language": "es", "to_language": "en"},
    )

    assert response.status_code == 201
    payload = response.json()
    assert payload["word"] == "casa"
    assert payload["part_of_speech"] == "word"
    assert payload["interval_days"] == 0
    assert payload["lapses"] == 0


@pytest.mark.asyncio
async def test_create_word_rejects_blank_word(async_client):
    response = await async_client.post(
        "/api/v1/words/",
        json={"word": "   ", "from_language": "es", "to_language": "en"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_stats_keep_lifetime_counter_after_delete(async_client, sample_words):
    delete_response = await async_client.delete(f"/api/v1/words/{sample_words[0].id}")
    assert delete_response.status_code == 204

    response = await async_client.get("/api/v1/words/stats")

    assert response.status_code == 200
    payload = response.json()
    assert payload["total_words"] == 1
    assert payload["total_words_added"] == 2
    assert payload["overdue"] == 0
    assert payload["due_today"] == 0
    assert payload["level"] == 1
    assert payload["total_xp"] == 20


@pytest.mark.asyncio
async def test_create_word_commit_failure_returns_500(async_client, db_session, monkeypatch):
    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    response = await async_client.post(
        "/api/v1/words/",
        json={"word": "casa", "from_language": "es", "to_language": "en"},
    )
    monkeypatch.undo()

    assert response.status_code == 500
    assert response.json()["detail"] == "Database operation failed. Please try again later."
    listed = await async_client.get("/api/v1/words/")
    assert listed.json()["total"] == 0
