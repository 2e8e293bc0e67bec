"""Article ORM — the parent entity whose replication order is reconciled.

Invariants:
    - id is a UUID primary key (client-side default)
    - label is non-nullable text
    - replication_order is the article's own order; reconciled order is never stored

Design Decisions:
    - Generic Uuid type: stored as CHAR(32) on SQLite, native on PostgreSQL
    - article_tags loaded with selectin: async sessions cannot lazy-load on access
"""

import uuid

from sqlalchemy import String, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from replication_order.db.base import Base


class Article(Base):
    """Article entity — owns its tag links."""
    __tablename__ = "articles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    replication_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    # Relationships
    article_tags: Mapped[list["ArticleTag"]] = relationship(
        "ArticleTag", back_populates="article",
        cascade="all, delete-orphan", lazy="selectin",
    )
