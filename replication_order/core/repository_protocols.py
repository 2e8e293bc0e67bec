"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Repositories return core value records, never ORM rows

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM store and test fakes
      satisfy it without inheriting anything
"""

from typing import Protocol

from replication_order.core.domain_types import TagId
from replication_order.core.records import ArticleRecord, ArticleTagRecord, TagRecord


class ArticleRepository(Protocol):
    """Read contract for the records the reconciler consumes — implemented by shell."""
    async def load_articles(self) -> list[ArticleRecord]: ...
    async def load_links(self) -> list[ArticleTagRecord]: ...
    async def load_tags(self) -> dict[TagId, TagRecord]: ...
