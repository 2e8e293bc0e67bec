"""Error Hierarchy — typed, categorized exceptions for reconciler failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Precondition violations (bad input records) are VALIDATION or
      REFERENTIAL_INTEGRITY; infrastructure errors are CRITICAL
    - to_dict() produces a flat, JSON-serializable envelope for structured logs

Design Decisions:
    - Single hierarchy with ReconcilerError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone
from uuid import UUID


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    article_id: UUID | None = None
    record_type: str | None = None
    debug_info: dict[str, Any] | None = None


class ReconcilerError(Exception):
    """Base exception for all reconciler errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "article_id": (
                    str(self.context.article_id)
                    if self.context.article_id else None
                ),
                "record_type": self.context.record_type,
                "debug_info": self.context.debug_info,
            },
        }


# ─── Precondition Errors ────────────────────────────────────────

class MissingIdentifierError(ReconcilerError):
    """An input record has no identifier to group or join on."""
    def __init__(self, record_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_type = record_type
        super().__init__(
            f"{record_type} record is missing its article id",
            "MISSING_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )


class DuplicateArticleError(ReconcilerError):
    """The same article id appears more than once in the article input."""
    def __init__(self, article_id: UUID, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.article_id = article_id
        super().__init__(
            f"Article '{article_id}' appears more than once",
            "DUPLICATE_ARTICLE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.article_id = article_id


class UnknownArticleError(ReconcilerError):
    """Strict mode: one or more links reference an article that is not present."""
    def __init__(self, article_ids: list[UUID], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"article_ids": [str(a) for a in article_ids]}
        super().__init__(
            f"{len(article_ids)} link group(s) reference unknown articles: "
            f"{', '.join(str(a) for a in article_ids)}",
            "UNKNOWN_ARTICLE", ErrorCategory.REFERENTIAL_INTEGRITY,
            ErrorSeverity.ERROR, ctx,
        )
        self.article_ids = article_ids


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(ReconcilerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
