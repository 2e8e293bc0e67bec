"""ArticleTag ORM — link between an article and a tag with its own replication order.

Invariants:
    - Composite primary key (article_id, tag_id): one link per article/tag pair
    - article_id always references an existing article (FK, cascade on delete)

Design Decisions:
    - tag loaded with selectin: the tag label projection reads it without re-querying
    - article back-reference is non-owning and never loaded implicitly
"""

import uuid

from sqlalchemy import Integer, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from replication_order.db.base import Base


class ArticleTag(Base):
    """Link record — contributes its replication_order to the article's minimum."""
    __tablename__ = "article_tags"

    article_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True,
    )
    tag_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
    )
    replication_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    # Relationships
    article: Mapped["Article"] = relationship(
        "Article", back_populates="article_tags", lazy="raise",
    )
    tag: Mapped["Tag"] = relationship(
        "Tag", back_populates="article_tags", lazy="selectin",
    )
