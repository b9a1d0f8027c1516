# consistent_seeding/exceptions.py
"""Exceptions raised by the seeding helpers.

Errors coming from SQLAlchemy or Faker are never wrapped by the factory; these
types only cover conditions the package itself detects.

- Each exception is serializable via ``to_dict`` for logs.
- Exceptions carry an explicit ``code`` for consistent handling by callers.
"""
from __future__ import annotations

from typing import Optional, Any, Dict, Mapping
from datetime import datetime, timezone


class SeedingError(Exception):
    """Base seeding exception with structured metadata.

    Attributes
    ----------
    message
        Human readable message.
    code
        Machine friendly error code (snake_case).
    details
        Arbitrary extra data useful for debugging.
    timestamp
        UTC ISO timestamp when the exception was created.
    cause
        Optional underlying exception instance.
    context
        Optional lightweight context dict (model names, filters, seeder names).
    """

    code: str = "seeding_error"

    def __init__(
        self,
        message: str = "A seeding error occurred",
        *,
        details: Optional[Any] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.cause = cause
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}({self.code}): {self.message}"
        if self.context:
            base += f" | context={self.context}"
        if self.details is not None:
            base += f" | details={self.details}"
        if self.cause is not None:
            base += f" | cause={repr(self.cause)}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Return a serializable representation suitable for structured logs."""
        return {
            "error": {
                "type": self.__class__.__name__,
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "context": self.context,
                "timestamp": self.timestamp,
            }
        }

    def with_context(self, **ctx: Any) -> "SeedingError":
        """Return self after extending the context dict. Useful for chaining.

        Example:
        raise err.with_context(seeder=seeder.get_name())
        """
        self.context.update({k: v for k, v in ctx.items() if v is not None})
        return self


class RecordNotFoundError(SeedingError):
    """Raised by strict column lookups when no record matches the filters."""

    code = "record_not_found"

    def __init__(
        self,
        model_type: Optional[type] = None,
        filters: Optional[Mapping[str, Any]] = None,
        message: Optional[str] = None,
        *,
        details: Optional[Any] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        model_name = model_type.__name__ if model_type is not None else None
        msg = message or (
            f"No {model_name} record matches the given columns"
            if model_name
            else "Record not found"
        )
        super().__init__(msg, details=details, cause=cause, context=context)
        self.model_type = model_type
        self.filters = dict(filters or {})
        if model_name is not None:
            self.context.setdefault("model", model_name)
        if self.filters:
            self.context.setdefault("filters", {k: repr(v) for k, v in self.filters.items()})


class SeederLoadError(SeedingError):
    """Raised when a seeder or metadata import path cannot be resolved."""

    code = "seeder_load_error"

    def __init__(
        self,
        path: Optional[str] = None,
        message: Optional[str] = None,
        *,
        details: Optional[Any] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        msg = message or (f"Cannot load '{path}'" if path else "Cannot load seeder")
        super().__init__(msg, details=details, cause=cause, context=context)
        if path is not None:
            self.context.setdefault("path", path)
