"""Replication Queries — the reconciliation expressed as one SQL statement.

Invariants:
    - UNION ALL of (articles.id, order) and (article_tags.article_id, order):
      duplicates kept, same multiset as core.reconcile.collect_order_entries
    - GROUP BY id with MIN(order), then INNER JOIN back onto articles
    - Results ordered by label, then id, for stable output
    - Same answers as core.reconcile.reconcile on the same stored data

Design Decisions:
    - SQLAlchemy Core constructs (union_all, subquery, func.min) over raw SQL:
      portable between SQLite and PostgreSQL
    - Tag labels read from article_tags JOIN tags, joined into a string in Python:
      string aggregation differs per dialect (group_concat vs string_agg)
"""

import logging

from sqlalchemy import func, select, union_all
from sqlalchemy.sql.expression import Subquery
from sqlalchemy.ext.asyncio import AsyncSession

from replication_order.core.domain_types import ArticleId, ReplicationOrder
from replication_order.core.projections import DEFAULT_TAG_SEPARATOR, join_tag_labels
from replication_order.core.records import ReconciledArticle
from replication_order.models.article import Article
from replication_order.models.article_tag import ArticleTag
from replication_order.models.tag import Tag
from replication_order.schemas.article import ReconciledArticleView

logger = logging.getLogger(__name__)


def minimum_orders_subquery() -> Subquery:
    """Per-article minimum replication order over articles and their links."""
    orders = union_all(
        select(
            Article.id.label("article_id"),
            Article.replication_order.label("replication_order"),
        ),
        select(ArticleTag.article_id, ArticleTag.replication_order),
    ).subquery("orders")
    return (
        select(
            orders.c.article_id,
            func.min(orders.c.replication_order).label("replication_order"),
        )
        .group_by(orders.c.article_id)
        .subquery("minimums")
    )


class ReplicationOrderQueries:
    """Runs the union / group-by-min / join composition against a session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def minimum_orders(self) -> dict[ArticleId, ReplicationOrder]:
        """Grouped minimums before the join, including groups without an article."""
        minimums = minimum_orders_subquery()
        result = await self.db.execute(
            select(minimums.c.article_id, minimums.c.replication_order)
        )
        return {
            ArticleId(row.article_id): ReplicationOrder(row.replication_order)
            for row in result
        }

    async def reconciled(self, order: int | None = None) -> list[ReconciledArticle]:
        """Articles joined with their minimum order, optionally filtered on it."""
        minimums = minimum_orders_subquery()
        query = (
            select(Article.id, Article.label, minimums.c.replication_order)
            .join(minimums, minimums.c.article_id == Article.id)
            .order_by(Article.label, Article.id)
        )
        if order is not None:
            query = query.where(minimums.c.replication_order == order)

        result = await self.db.execute(query)
        articles = [
            ReconciledArticle(
                id=ArticleId(row.id),
                label=row.label,
                replication_order=ReplicationOrder(row.replication_order),
            )
            for row in result
        ]
        logger.debug(
            f"SQL reconciliation returned {len(articles)} article(s)",
            extra={"article_count": len(articles)},
        )
        return articles

    async def reconciled_views(
        self,
        order: int | None = None,
        include_tags: bool = False,
        separator: str = DEFAULT_TAG_SEPARATOR,
    ) -> list[ReconciledArticleView]:
        """Projection of reconciled articles, with joined tag labels on request."""
        articles = await self.reconciled(order)
        if not include_tags:
            return [ReconciledArticleView.from_reconciled(a) for a in articles]

        labels = await self.tag_labels([a.id for a in articles])
        return [
            ReconciledArticleView.from_reconciled(
                a, join_tag_labels(labels.get(a.id, []), separator),
            )
            for a in articles
        ]

    async def tag_labels(
        self, article_ids: list[ArticleId],
    ) -> dict[ArticleId, list[str]]:
        """Sorted tag labels per article, read from the link table.

        Inner join on tags: links whose tag row is missing contribute nothing.
        """
        if not article_ids:
            return {}
        result = await self.db.execute(
            select(ArticleTag.article_id, Tag.label)
            .join(Tag, Tag.id == ArticleTag.tag_id)
            .where(ArticleTag.article_id.in_(article_ids))
            .order_by(ArticleTag.article_id, Tag.label)
        )
        labels: dict[ArticleId, list[str]] = {}
        for row in result:
            labels.setdefault(ArticleId(row.article_id), []).append(row.label)
        return labels
