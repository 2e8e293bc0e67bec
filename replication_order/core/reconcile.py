"""Reconciler — per-article minimum replication order across articles and their links.

Invariants:
    - Union keeps every contribution (multiset): one entry per article, one per link
    - Grouping keeps only the numeric minimum per id, never the winning record
    - Join is inner: groups without a matching article are dropped (or rejected in strict mode)
    - Output ids are always a subset of the input article ids
    - Pure: same inputs always give an equal result; inputs are never mutated

Design Decisions:
    - Explicit dict-based grouping instead of itertools.groupby: no sort required,
      input order is irrelevant
    - Steps exposed as separate functions so the SQL path can be tested step by step
      against the same semantics
"""

from typing import Iterable

from replication_order.core.domain_types import ArticleId, ReplicationOrder
from replication_order.core.errors import (
    DuplicateArticleError, MissingIdentifierError, UnknownArticleError,
)
from replication_order.core.records import (
    ArticleRecord, ArticleTagRecord, OrderEntry, ReconciledArticle,
)


def collect_order_entries(
    articles: Iterable[ArticleRecord], links: Iterable[ArticleTagRecord],
) -> list[OrderEntry]:
    """Union of (id, order) pairs from articles and links, duplicates kept."""
    entries = []
    for article in articles:
        if article.id is None:
            raise MissingIdentifierError("Article")
        entries.append(OrderEntry(article.id, article.replication_order))
    for link in links:
        if link.article_id is None:
            raise MissingIdentifierError("ArticleTag")
        entries.append(OrderEntry(link.article_id, link.replication_order))
    return entries


def minimum_orders(entries: Iterable[OrderEntry]) -> dict[ArticleId, ReplicationOrder]:
    """Group entries by id and keep the minimum replication order of each group."""
    minimums: dict[ArticleId, ReplicationOrder] = {}
    for entry in entries:
        current = minimums.get(entry.id)
        if current is None or entry.replication_order < current:
            minimums[entry.id] = entry.replication_order
    return minimums


def join_minimums(
    articles: Iterable[ArticleRecord],
    minimums: dict[ArticleId, ReplicationOrder],
) -> dict[ArticleId, ReconciledArticle]:
    """Inner-join per-id minimums back onto articles."""
    reconciled: dict[ArticleId, ReconciledArticle] = {}
    for article in articles:
        if article.id in reconciled:
            raise DuplicateArticleError(article.id)
        if article.id not in minimums:
            continue
        reconciled[article.id] = ReconciledArticle(
            id=article.id,
            label=article.label,
            replication_order=minimums[article.id],
        )
    return reconciled


def find_orphan_links(
    articles: Iterable[ArticleRecord], links: Iterable[ArticleTagRecord],
) -> list[ArticleId]:
    """Article ids referenced by links but absent from articles, in first-seen order."""
    known = {a.id for a in articles}
    seen: set[ArticleId] = set()
    orphans: list[ArticleId] = []
    for link in links:
        if link.article_id in known or link.article_id in seen:
            continue
        seen.add(link.article_id)
        orphans.append(link.article_id)
    return orphans


def reconcile(
    articles: Iterable[ArticleRecord],
    links: Iterable[ArticleTagRecord],
    strict: bool = False,
) -> dict[ArticleId, ReconciledArticle]:
    """Map each article id to the article with its minimum replication order.

    The minimum is taken over the article's own order and the orders of all
    links whose article_id matches. With strict=True, links pointing at an
    unknown article raise UnknownArticleError instead of being dropped.
    """
    articles = list(articles)
    links = list(links)
    if strict:
        orphans = find_orphan_links(articles, links)
        if orphans:
            raise UnknownArticleError(orphans)
    entries = collect_order_entries(articles, links)
    return join_minimums(articles, minimum_orders(entries))
