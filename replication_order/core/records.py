"""Value Records — immutable inputs and outputs of the reconciler.

Invariants:
    - All records are frozen: built once per scenario, never mutated
    - ArticleTagRecord identity is the (article_id, tag_id) pair
    - ReconciledArticle keeps the article's id and label; only the order changes

Design Decisions:
    - Plain dataclasses instead of ORM rows: the core never touches a session
    - OrderEntry is the common shape of both union sources (article and link)
"""

from dataclasses import dataclass

from replication_order.core.domain_types import ArticleId, TagId, ReplicationOrder


@dataclass(frozen=True)
class ArticleRecord:
    """An article with its own replication order."""
    id: ArticleId
    label: str
    replication_order: ReplicationOrder


@dataclass(frozen=True)
class ArticleTagRecord:
    """A link between an article and a tag, carrying its own replication order."""
    article_id: ArticleId
    tag_id: TagId
    replication_order: ReplicationOrder


@dataclass(frozen=True)
class TagRecord:
    id: TagId
    label: str


@dataclass(frozen=True)
class OrderEntry:
    """One (id, replication_order) contribution to the union."""
    id: ArticleId
    replication_order: ReplicationOrder


@dataclass(frozen=True)
class ReconciledArticle:
    """Article with replication_order replaced by the per-id minimum."""
    id: ArticleId
    label: str
    replication_order: ReplicationOrder
