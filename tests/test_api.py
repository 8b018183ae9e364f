"""End-to-end tests for the read API over the seeded database."""

import pytest

from app.core.setting import settings


def item_ids(response):
    return [item["id"] for item in response.json()["items"]]


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert "X-Process-Time" in response.headers


@pytest.mark.asyncio
async def test_list_questions_default_order(client):
    response = await client.get("/questions")
    assert response.status_code == 200
    body = response.json()
    assert item_ids(response) == [3, 2, 1]
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["pages"] == 1


@pytest.mark.asyncio
async def test_list_questions_descending(client):
    response = await client.get("/questions", params={"order": "-vote_count"})
    assert item_ids(response) == [2, 1, 3]


@pytest.mark.asyncio
async def test_disallowed_order_falls_back(client):
    response = await client.get("/questions", params={"order": "title"})
    assert item_ids(response) == [3, 2, 1]


@pytest.mark.asyncio
async def test_filter_and_unknown_params(client):
    response = await client.get("/questions", params={"user_id": "1", "title": "x"})
    assert item_ids(response) == [3, 1]


@pytest.mark.asyncio
async def test_pagination(client):
    response = await client.get("/questions", params={"per_page": "2", "page": "2"})
    body = response.json()
    assert item_ids(response) == [1]
    assert body["pages"] == 2
    assert body["per_page"] == 2


@pytest.mark.asyncio
async def test_get_question(client):
    response = await client.get("/questions/2")
    assert response.status_code == 200
    assert response.json()["title"] == "How do I filter?"


@pytest.mark.asyncio
async def test_get_missing_question(client):
    response = await client.get("/questions/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Question '99' not found"


@pytest.mark.asyncio
async def test_list_answers(client):
    response = await client.get("/questions/1/answers")
    assert item_ids(response) == [2, 1]

    response = await client.get("/questions/1/answers", params={"order": "vote_count"})
    assert item_ids(response) == [1, 2]


@pytest.mark.asyncio
async def test_list_answers_missing_question(client):
    response = await client.get("/questions/99/answers")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_users_hide_email(client):
    response = await client.get("/users")
    assert item_ids(response) == [1, 2]
    assert all("email" not in item for item in response.json()["items"])

    response = await client.get("/users/1")
    assert response.json()["username"] == "alice"
    assert "email" not in response.json()


@pytest.mark.asyncio
async def test_user_by_username(client):
    response = await client.get("/users/by-name/bob")
    assert response.json()["id"] == 2

    response = await client.get("/users/by-name/zed")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_comments(client):
    response = await client.get("/comments", params={"commentable_type": "answer"})
    assert item_ids(response) == [2]


@pytest.mark.asyncio
async def test_list_votes(client):
    response = await client.get("/votes", params={"type": "up", "order": "created_at"})
    assert item_ids(response) == [1, 2]


@pytest.mark.asyncio
async def test_oversized_page_falls_back_to_first_page(client):
    response = await client.get("/questions", params={"page": "99999999999999999999"})
    assert response.status_code == 200
    assert response.json()["page"] == 1
    assert item_ids(response) == [3, 2, 1]


@pytest.mark.asyncio
async def test_oversized_per_page_is_clamped(client):
    response = await client.get("/questions", params={"per_page": "99999999999999999999"})
    assert response.status_code == 200
    assert response.json()["per_page"] == settings.MAX_PER_PAGE


@pytest.mark.asyncio
async def test_oversized_integer_filter_matches_nothing(client):
    response = await client.get("/questions", params={"user_id": "99999999999999999999"})
    assert response.status_code == 200
    assert item_ids(response) == []
    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_shutdown_disposes_engine(monkeypatch):
    import app.main as main

    disposed = []

    class RecordingEngine:
        async def dispose(self):
            disposed.append(True)

    monkeypatch.setattr(main, "engine", RecordingEngine())

    assert main.shutdown_event in main.app.router.on_shutdown
    await main.shutdown_event()
    assert disposed == [True]
