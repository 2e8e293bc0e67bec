"""ORM Models — SQLAlchemy declarative models for articles, tags and their links.

Invariants:
    - All models inherit from Base (db/base.py)
    - Article owns its ArticleTag links (cascade delete-orphan)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from replication_order.models.article import Article  # noqa: F401
from replication_order.models.tag import Tag  # noqa: F401
from replication_order.models.article_tag import ArticleTag  # noqa: F401
