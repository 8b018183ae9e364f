"""Tests for ModelAbstract against a seeded SQLite database."""

import pytest

from app.core.container import model_key
from app.models import QuestionModel, UserModel


@pytest.fixture
def questions(db_container) -> QuestionModel:
    return db_container.get(model_key("QuestionModel"))


@pytest.fixture
def users(db_container) -> UserModel:
    return db_container.get(model_key("UserModel"))


def ids(records):
    return [record.id for record in records]


@pytest.mark.asyncio
async def test_select_filters_and_orders(questions):
    records = await questions.select(where={"user_id": 1}, order={"vote_count": "DESC"})
    assert ids(records) == [1, 3]


@pytest.mark.asyncio
async def test_select_coerces_query_string_integers(questions):
    records = await questions.select(where={"user_id": "2"})
    assert ids(records) == [2]


@pytest.mark.asyncio
async def test_select_out_of_range_integer_matches_nothing(questions):
    records = await questions.select(where={"user_id": "99999999999999999999"})
    assert records == []
    assert await questions.count({"user_id": "-99999999999999999999"}) == 0


@pytest.mark.asyncio
async def test_select_limit_and_offset(questions):
    records = await questions.select(order={"created_at": "ASC"}, limit=2, offset=1)
    assert ids(records) == [2, 3]


@pytest.mark.asyncio
async def test_unknown_fields_are_ignored(questions):
    records = await questions.select(where={"nope": 1}, order={"nope": "ASC", "id": "DESC"})
    assert ids(records) == [3, 2, 1]


@pytest.mark.asyncio
async def test_count(questions):
    assert await questions.count() == 3
    assert await questions.count({"user_id": 1}) == 2
    assert await questions.count({"user_id": 42}) == 0


@pytest.mark.asyncio
async def test_get(questions):
    question = await questions.get(2)
    assert question.title == "How do I filter?"
    assert await questions.get(99) is None


@pytest.mark.asyncio
async def test_get_by_username(users):
    bob = await users.get_by_username("bob")
    assert bob.id == 2
    assert await users.get_by_username("zed") is None


def test_model_is_scoped_to_container(db_container):
    first = db_container.get(model_key("QuestionModel"))
    assert first is db_container.get(model_key("QuestionModel"))
    assert QuestionModel.entity_name() == "Question"
