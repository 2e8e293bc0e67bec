"""Tag ORM — label referenced by article links.

Invariants:
    - replication_order is stored but never read by the reconciler
"""

import uuid

from sqlalchemy import String, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from replication_order.db.base import Base


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    replication_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    article_tags: Mapped[list["ArticleTag"]] = relationship(
        "ArticleTag", back_populates="tag", lazy="raise",
    )
