"""Projections — downstream views over reconciled articles.

Invariants:
    - Operate only on reconciler output and the original records (no re-query)
    - Never change ids, labels or reconciled orders

Design Decisions:
    - Kept outside reconcile.py: filtering and tag display are consumer
      concerns, not part of the minimum-order contract
    - Tag labels sorted before joining: link order carries no meaning
"""

from typing import Iterable

from replication_order.core.domain_types import ArticleId, TagId
from replication_order.core.records import (
    ArticleTagRecord, ReconciledArticle, TagRecord,
)

DEFAULT_TAG_SEPARATOR = ", "


def filter_by_order(
    reconciled: dict[ArticleId, ReconciledArticle], order: int,
) -> list[ReconciledArticle]:
    """Reconciled articles whose minimum order equals `order`, sorted by label."""
    return sorted(
        (a for a in reconciled.values() if a.replication_order == order),
        key=lambda a: (a.label, str(a.id)),
    )


def tag_labels_by_article(
    links: Iterable[ArticleTagRecord], tags: dict[TagId, TagRecord],
) -> dict[ArticleId, list[str]]:
    """Sorted tag labels per article; links to unknown tags are skipped."""
    labels: dict[ArticleId, list[str]] = {}
    for link in links:
        tag = tags.get(link.tag_id)
        if tag is None:
            continue
        labels.setdefault(link.article_id, []).append(tag.label)
    return {article_id: sorted(names) for article_id, names in labels.items()}


def join_tag_labels(
    labels: Iterable[str], separator: str = DEFAULT_TAG_SEPARATOR,
) -> str:
    return separator.join(labels)
