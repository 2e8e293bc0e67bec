"""Article Schemas — Pydantic view of a reconciled article.

Invariants:
    - replication_order is the reconciled minimum, never the stored value
    - tags is None when the tag projection was not requested, "" when requested
      for an article without links

Design Decisions:
    - Separate from core records: the view is a presentation shape, the
      records are the reconciler's contract
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from replication_order.core.records import ReconciledArticle


class ReconciledArticleView(BaseModel):
    """Projection of a reconciled article, optionally with its tag labels."""
    model_config = ConfigDict(frozen=True)

    id: UUID
    label: str
    replication_order: int
    tags: str | None = None

    @classmethod
    def from_reconciled(
        cls, article: ReconciledArticle, tags: str | None = None,
    ) -> "ReconciledArticleView":
        return cls(
            id=article.id,
            label=article.label,
            replication_order=article.replication_order,
            tags=tags,
        )
