"""
Shared API envelopes and RFC 7807 errors.

Every endpoint returns :class:`SuccessResponse` (200/201),
:class:`PagedResponse` for lists, or :class:`ProblemDetail` for 4xx/5xx.
``elapsed_ms`` is server-side processing time and ``warnings`` carries
non-fatal issues such as dangling link references.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


# ── RFC 7807 Problem Detail ─────────────────────────────────────────────


class ErrorDetail(BaseModel):
    """Field-level error inside a :class:`ProblemDetail`."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    field: str | None = Field(default=None, description="Offending field, if any")


class ProblemDetail(BaseModel):
    """RFC 7807 problem document.

    Error codes:
        - ``NOT_FOUND`` (404): no entity with that id
        - ``INVALID_INPUT`` (400): body passed schema validation but not semantic checks
        - ``INTERNAL`` (500): unexpected server error

    Example:
        {
            "type": "about:blank",
            "title": "Technology '99' not found",
            "status": 404,
            "detail": "",
            "instance": "/api/technologies/99",
            "errors": []
        }
    """

    type: str = Field(default="about:blank", description="Error type URI")
    title: str = Field(description="Short human-readable summary")
    status: int = Field(description="HTTP status code")
    detail: str = Field(default="", description="Longer explanation")
    instance: str = Field(default="", description="URI of the failing request")
    errors: list[ErrorDetail] = Field(default_factory=list)


# ── Success envelopes ────────────────────────────────────────────────────


class PageMeta(BaseModel):
    """Pagination metadata for list responses."""

    total: int = Field(description="Items across all pages")
    limit: int = Field(description="Page size actually applied")
    offset: int = Field(description="Items skipped (0-based)")
    has_more: bool = Field(description="True if items remain after this page")

    @classmethod
    def from_result(cls, result) -> PageMeta:
        """Build from a :class:`~tech_radar.ops.result.PagedResult`."""
        return cls(
            total=result.total,
            limit=result.limit,
            offset=result.offset,
            has_more=result.has_more,
        )


class SuccessResponse(BaseModel, Generic[T]):
    """Single-item success envelope."""

    data: T
    elapsed_ms: float = Field(default=0.0, description="Server-side processing time in milliseconds")
    warnings: list[str] = Field(default_factory=list)


class PagedResponse(BaseModel, Generic[T]):
    """List success envelope."""

    data: list[T]
    page: PageMeta
    elapsed_ms: float = Field(default=0.0, description="Server-side processing time in milliseconds")
    warnings: list[str] = Field(default_factory=list)
