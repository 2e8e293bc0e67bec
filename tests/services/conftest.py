"""Service test fixtures — fresh in-memory database and the two-article scenario.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - seed_articles stores A1 (order 1, link to T1 order 1) and
      A2 (order 1, link to T2 order 0)

Design Decisions:
    - Database object owned by the fixture: no process-wide engine to patch
"""

import uuid

import pytest

from replication_order.infrastructure.database import Database
from replication_order.models.article import Article
from replication_order.models.article_tag import ArticleTag
from replication_order.models.tag import Tag
from replication_order.services.article_store import ArticleStore


@pytest.fixture
async def database():
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_schema()
    yield db
    await db.drop_schema()
    await db.dispose()


@pytest.fixture
async def test_db(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def store(test_db):
    return ArticleStore(test_db)


@pytest.fixture
async def seed_articles(store):
    """Insert the two-article scenario and return the stored objects by label."""
    t1 = Tag(id=uuid.uuid4(), label="T1")
    t2 = Tag(id=uuid.uuid4(), label="T2")
    a1 = Article(
        id=uuid.uuid4(), label="A1", replication_order=1,
        article_tags=[ArticleTag(tag=t1, replication_order=1)],
    )
    a2 = Article(
        id=uuid.uuid4(), label="A2", replication_order=1,
        article_tags=[ArticleTag(tag=t2, replication_order=0)],
    )
    await store.add_tags([t1, t2])
    await store.add_articles([a1, a2])
    return {"T1": t1, "T2": t2, "A1": a1, "A2": a2}
