"""Domain Types — identity and value types used across the reconciler.

Invariants:
    - ArticleId and TagId wrap UUIDs — never mix the two in domain logic
    - ReplicationOrder is a plain int; lower means earlier in sequence

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ArticleId = NewType("ArticleId", UUID)
TagId = NewType("TagId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

ReplicationOrder = NewType("ReplicationOrder", int)
