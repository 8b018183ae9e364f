"""
Test infrastructure: temporary SQLite database, seeded session, container
and httpx client fixtures.

Each test gets its own database file under pytest's tmp_path, so tests never
share state.
"""

from collections.abc import AsyncGenerator
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.core.container import SESSION_KEY, Container
from app.core.providers import build_container
from app.db.models import Answer, Comment, Question, User, Vote
from app.db.sqlite_adapter import SQLiteAdapter


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    adapter = SQLiteAdapter()
    eng = adapter.create_engine(f"sqlite+aiosqlite:///{tmp_path / 'forum.db'}")
    await adapter.create_tables(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on a database seeded with a small forum."""
    factory = async_sessionmaker(engine, class_=SQLModelAsyncSession, expire_on_commit=False)

    async with factory() as db:
        db.add_all([
            User(id=1, username="alice", email="alice@example.com", follower_count=10,
                 created_at=datetime(2026, 1, 1)),
            User(id=2, username="bob", email="bob@example.com", follower_count=3,
                 created_at=datetime(2026, 1, 2)),
            Question(id=1, user_id=1, title="How do I sort?", vote_count=5, answer_count=2,
                     created_at=datetime(2026, 2, 1), updated_at=datetime(2026, 2, 1)),
            Question(id=2, user_id=2, title="How do I filter?", vote_count=9, answer_count=0,
                     created_at=datetime(2026, 2, 2), updated_at=datetime(2026, 2, 5)),
            Question(id=3, user_id=1, title="How do I page?", vote_count=1, answer_count=1,
                     created_at=datetime(2026, 2, 3), updated_at=datetime(2026, 2, 3)),
            Answer(id=1, question_id=1, user_id=2, content="Use order=field", vote_count=4,
                   created_at=datetime(2026, 3, 1)),
            Answer(id=2, question_id=1, user_id=1, content="Or order=-field", vote_count=7,
                   created_at=datetime(2026, 3, 2)),
            Answer(id=3, question_id=3, user_id=2, content="Use page and per_page", vote_count=0,
                   created_at=datetime(2026, 3, 3)),
            Comment(id=1, commentable_type="question", commentable_id=1, user_id=2,
                    content="Good question", created_at=datetime(2026, 4, 1)),
            Comment(id=2, commentable_type="answer", commentable_id=2, user_id=1,
                    content="Thanks", created_at=datetime(2026, 4, 2)),
            Vote(id=1, user_id=1, votable_type="question", votable_id=2, type="up",
                 created_at=datetime(2026, 5, 1)),
            Vote(id=2, user_id=2, votable_type="answer", votable_id=2, type="up",
                 created_at=datetime(2026, 5, 2)),
            Vote(id=3, user_id=2, votable_type="question", votable_id=3, type="down",
                 created_at=datetime(2026, 5, 3)),
        ])
        await db.commit()
        yield db


@pytest.fixture
def root_container() -> Container:
    return build_container()


@pytest.fixture
def db_container(root_container: Container, session: AsyncSession) -> Container:
    """Request-scoped container bound to the seeded session (no request yet)."""
    container = root_container.scope()
    container.set(SESSION_KEY, session)
    return container


@pytest_asyncio.fixture
async def client(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """API client whose requests run against the seeded session."""
    from app.core.rate_limit import limiter
    from app.db.session import get_session
    from app.main import app

    async def _override_get_session() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = _override_get_session
    limiter.enabled = False
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        limiter.enabled = True
        app.dependency_overrides.clear()
