"""API tests for practice sessions, proficiency and tags."""
from __future__ import annotations

import pytest


@pytest.fixture()
def two_words(add_word):
    return [add_word("hola", translation="hello"), add_word("adiós", translation="goodbye")]


def start_session(client):
    response = client.post("/api/v1/practice/sessions")
    assert response.status_code == 201
    return response.json()


def test_start_session_shows_first_due_word(client, two_words):
    session = start_session(client)

    assert session["status"] == "active"
    assert session["total"] == 2
    assert session["remaining"] == 2
    assert session["current"]["word_id"] == two_words[0].id
    assert session["current"]["translation"] == "hello"
    assert session["current"]["example"] == "Add an example later"


def test_empty_session_is_complete(client):
    session = start_session(client)

    assert session["status"] == "complete"
    assert session["total"] == 0
    assert session["current"] is None


def test_review_flow(client, two_words):
    session = start_session(client)
    url = f"/api/v1/practice/sessions/{session['session_id']}/review"

    response = client.post(url, json={"word_id": two_words[0].id, "rating": "good"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["is_lapse"] is False
    assert payload["persisted"] is True
    assert payload["scheduling"]["interval_days"] == 1
    assert payload["scheduling"]["repetitions"] == 1
    assert payload["session"]["position"] == 1
    assert payload["session"]["current"]["word_id"] == two_words[1].id

    lapse = client.post(url, json={"word_id": two_words[1].id, "rating": "again"})

    assert lapse.status_code == 200
    assert lapse.json()["is_lapse"] is True
    assert lapse.json()["session"]["current"]["word_id"] == two_words[1].id
    assert lapse.json()["session"]["remaining"] == 1


def test_review_of_wrong_word_conflicts(client, two_words):
    session = start_session(client)
    url = f"/api/v1/practice/sessions/{session['session_id']}/review"

    response = client.post(url, json={"word_id": two_words[1].id, "rating": "good"})

    assert response.status_code == 409
    assert response.json()["detail"]["details"]["expected_word_id"] == two_words[0].id


def test_review_after_completion_conflicts(client, add_word):
    word = add_word("uno")
    session = start_session(client)
    url = f"/api/v1/practice/sessions/{session['session_id']}/review"

    first = client.post(url, json={"word_id": word.id, "rating": "easy"})
    second = client.post(url, json={"word_id": word.id, "rating": "easy"})

    assert first.json()["session"]["status"] == "complete"
    assert second.status_code == 409


def test_unknown_rating_is_rejected(client, two_words):
    session = start_session(client)
    url = f"/api/v1/practice/sessions/{session['session_id']}/review"

    response = client.post(url, json={"word_id": two_words[0].id, "rating": "Again"})

    assert response.status_code == 422


def test_unknown_session_returns_404(client, two_words):
    assert client.get("/api/v1/practice/sessions/nope").status_code == 404

    response = client.post(
        "/api/v1/practice/sessions/nope/review",
        json={"word_id": two_words[0].id, "rating": "good"},
    )
    assert response.status_code == 404


def test_get_session_reports_progress(client, two_words):
    session = start_session(client)
    session_id = session["session_id"]
    client.post(
        f"/api/v1/practice/sessions/{session_id}/review",
        json={"word_id": two_words[0].id, "rating": "hard"},
    )

    response = client.get(f"/api/v1/practice/sessions/{session_id}")

    assert response.status_code == 200
    assert response.json()["position"] == 1
    assert response.json()["current"]["word"] == "adiós"


def test_proficiency_follows_ratings(client, add_word):
    word = add_word("perro")
    before = client.get("/api/v1/proficiency/").json()
    assert before["learning_score"] == 0.0
    assert before["learning_level"] == "A1"

    session = start_session(client)
    client.post(
        f"/api/v1/practice/sessions/{session['session_id']}/review",
        json={"word_id": word.id, "rating": "easy"},
    )
    after = client.get("/api/v1/proficiency/").json()

    assert after["learning_score"] == pytest.approx(0.06)
    assert after["learning_level"] == "A1"
    assert after["current_streak"] == 1
    assert after["days_used_count"] == 1


def test_tag_endpoints(client):
    created = client.post("/api/v1/tags/", json={"name": "Food", "color_hex": "f80"})
    assert created.status_code == 200
    assert created.json()["color_hex"] == "#FF8800"

    updated = client.post("/api/v1/tags/", json={"name": "food", "color_hex": "#123456"})
    assert updated.json()["id"] == created.json()["id"]

    listed = client.get("/api/v1/tags/").json()
    assert [(tag["name"], tag["color_hex"]) for tag in listed] == [("Food", "#123456")]

    assert client.post("/api/v1/tags/", json={"name": " ", "color_hex": "#000"}).status_code == 422
    assert client.delete("/api/v1/tags/FOOD").status_code == 204
    assert client.delete("/api/v1/tags/FOOD").status_code == 404
