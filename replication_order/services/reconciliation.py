"""Reconciliation Service — loads records, runs the pure reconciler, projects the result.

Invariants:
    - Records read once per call through the repository; no re-query for projections
    - Orphan link groups are logged before the inner join drops them
    - strict=True turns orphan links into UnknownArticleError instead

Design Decisions:
    - Repository injected (ArticleRepository protocol): works with ArticleStore
      or any in-memory fake
    - Logging lives here, not in core/: the reconciler stays pure
"""

import logging

from replication_order.config import Settings
from replication_order.core.domain_types import ArticleId
from replication_order.core.errors import ReconcilerError
from replication_order.core.projections import (
    DEFAULT_TAG_SEPARATOR, filter_by_order, join_tag_labels, tag_labels_by_article,
)
from replication_order.core.reconcile import find_orphan_links, reconcile
from replication_order.core.records import ReconciledArticle
from replication_order.core.repository_protocols import ArticleRepository
from replication_order.schemas.article import ReconciledArticleView

logger = logging.getLogger(__name__)


class ReconciliationService:
    """Per-article minimum replication order over a repository's records."""

    def __init__(
        self,
        repository: ArticleRepository,
        strict: bool = False,
        separator: str = DEFAULT_TAG_SEPARATOR,
    ):
        self.repository = repository
        self.strict = strict
        self.separator = separator

    @classmethod
    def from_settings(
        cls, repository: ArticleRepository, settings: Settings,
    ) -> "ReconciliationService":
        return cls(
            repository,
            strict=settings.strict_references,
            separator=settings.tag_separator,
        )

    async def reconcile(self) -> dict[ArticleId, ReconciledArticle]:
        articles = await self.repository.load_articles()
        links = await self.repository.load_links()
        return self._reconcile(articles, links)

    async def winners(
        self, order: int = 0, include_tags: bool = False,
    ) -> list[ReconciledArticleView]:
        """Reconciled articles whose minimum order equals `order`, as views."""
        articles = await self.repository.load_articles()
        links = await self.repository.load_links()
        selected = filter_by_order(self._reconcile(articles, links), order)

        if not include_tags:
            return [ReconciledArticleView.from_reconciled(a) for a in selected]

        labels = tag_labels_by_article(links, await self.repository.load_tags())
        return [
            ReconciledArticleView.from_reconciled(
                a, join_tag_labels(labels.get(a.id, []), self.separator),
            )
            for a in selected
        ]

    def _reconcile(self, articles, links) -> dict[ArticleId, ReconciledArticle]:
        orphans = find_orphan_links(articles, links)
        if orphans and not self.strict:
            logger.warning(
                f"Dropping {len(orphans)} link group(s) without a matching article",
                extra={"dropped_groups": len(orphans)},
            )
        try:
            result = reconcile(articles, links, strict=self.strict)
        except ReconcilerError as e:
            logger.error(
                f"Reconciliation failed: {e.message}",
                extra={"error_code": e.code},
            )
            raise
        logger.info(
            f"Reconciled {len(result)} article(s) from {len(links)} link(s)",
            extra={
                "article_count": len(articles),
                "link_count": len(links),
                "group_count": len(result),
            },
        )
        return result
