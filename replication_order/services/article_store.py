"""Article Store — persists articles, tags and links; loads them as core records.

Invariants:
    - Loads return core value records (ArticleRecord, ArticleTagRecord, TagRecord)
    - add_* commits: the store is a unit of work per call
    - Satisfies core.repository_protocols.ArticleRepository

Design Decisions:
    - Links loaded from their own table, not through Article.article_tags:
      the reconciler needs every link row, including ones whose article is filtered out
"""

import logging
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from replication_order.core.domain_types import ArticleId, TagId, ReplicationOrder
from replication_order.core.records import ArticleRecord, ArticleTagRecord, TagRecord
from replication_order.models.article import Article
from replication_order.models.article_tag import ArticleTag
from replication_order.models.tag import Tag

logger = logging.getLogger(__name__)


class ArticleStore:
    """ORM-backed article repository."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_tags(self, tags: Iterable[Tag]) -> None:
        tags = list(tags)
        self.db.add_all(tags)
        await self.db.commit()
        logger.debug(f"Stored {len(tags)} tag(s)")

    async def add_articles(self, articles: Iterable[Article]) -> None:
        """Store articles together with their tag links."""
        articles = list(articles)
        self.db.add_all(articles)
        await self.db.commit()
        logger.debug(
            f"Stored {len(articles)} article(s)",
            extra={"article_count": len(articles)},
        )

    async def load_articles(self) -> list[ArticleRecord]:
        result = await self.db.execute(
            select(Article.id, Article.label, Article.replication_order)
            .order_by(Article.label, Article.id)
        )
        return [
            ArticleRecord(
                id=ArticleId(row.id),
                label=row.label,
                replication_order=ReplicationOrder(row.replication_order),
            )
            for row in result
        ]

    async def load_links(self) -> list[ArticleTagRecord]:
        result = await self.db.execute(
            select(
                ArticleTag.article_id, ArticleTag.tag_id,
                ArticleTag.replication_order,
            )
        )
        return [
            ArticleTagRecord(
                article_id=ArticleId(row.article_id),
                tag_id=TagId(row.tag_id),
                replication_order=ReplicationOrder(row.replication_order),
            )
            for row in result
        ]

    async def load_tags(self) -> dict[TagId, TagRecord]:
        result = await self.db.execute(select(Tag.id, Tag.label))
        return {
            TagId(row.id): TagRecord(id=TagId(row.id), label=row.label)
            for row in result
        }
