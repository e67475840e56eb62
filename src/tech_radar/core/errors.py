"""
Structured error types for tech-radar.

The store itself never raises for a missing id (it returns ``None``), so this
hierarchy is small: it covers bad input reaching the boundary, malformed seed
data, and configuration problems.

Architecture:
    ::

        ┌───────────────────────────────────────────────┐
        │                  RadarError                    │
        │        (category, context, cause)              │
        ├───────────────────────────────────────────────┤
        │  ValidationError          ConfigError          │
        │  (VALIDATION)             (CONFIG)             │
        │       │                                        │
        │  SeedDataError                                 │
        └───────────────────────────────────────────────┘

Tags:
    tech-radar, errors, exceptions, error-category

Doc-Types:
    api-reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    VALIDATION = "VALIDATION"  # Bad input, schema violations
    CONFIG = "CONFIG"  # Missing or invalid settings
    NOT_FOUND = "NOT_FOUND"  # Referenced entity absent
    INTERNAL = "INTERNAL"  # Bugs, unexpected state


class RadarError(Exception):
    """Base exception for all tech-radar errors.

    Attributes:
        message: Human-readable description.
        category: :class:`ErrorCategory` used for routing and status mapping.
        context: Extra key/value metadata (field names, file paths, ...).
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RadarError:
        """Attach metadata fluently and return ``self``."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialise for structured logging."""
        d: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            d["context"] = self.context
        if self.cause is not None:
            d["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return d

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


class ValidationError(RadarError):
    """Input failed validation at the boundary."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field:
            self.context.setdefault("field", field)


class SeedDataError(ValidationError):
    """Seed data could not be parsed or references unknown entries."""


class ConfigError(RadarError):
    """Configuration is missing or invalid."""

    default_category = ErrorCategory.CONFIG


def categorize_error(error: Exception) -> ErrorCategory:
    """Best-effort category for any exception."""
    if isinstance(error, RadarError):
        return error.category
    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.VALIDATION
    return ErrorCategory.INTERNAL
