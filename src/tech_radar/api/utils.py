"""
Shared router helpers.

- ``_handle_error()`` turns a failed ``OperationResult`` into a problem response
- ``_paged()`` / ``_single()`` wrap successful results in the response envelopes
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Request

from tech_radar.api.middleware.errors import problem_response, status_for_error_code
from tech_radar.api.schemas.common import PagedResponse, PageMeta, SuccessResponse


def _handle_error(result, request: Request | None = None):
    """Convert a failed ``OperationResult`` into a Problem Details response.

    The error code picks the HTTP status; the error message becomes the title.
    """
    error = result.error
    code = error.code if error else "INTERNAL"
    errors = None
    if error and error.details.get("field"):
        errors = [{"code": code, "message": error.message, "field": error.details["field"]}]
    return problem_response(
        status=status_for_error_code(code),
        title=error.message if error else "Operation failed",
        instance=request.url.path if request is not None else "",
        errors=errors,
    )


def _single(result, convert: Callable[[Any], Any]) -> SuccessResponse:
    return SuccessResponse(
        data=convert(result.data),
        elapsed_ms=round(result.elapsed_ms, 2),
        warnings=result.warnings,
    )


def _paged(result, convert: Callable[[Any], Any]) -> PagedResponse:
    return PagedResponse(
        data=[convert(item) for item in (result.data or [])],
        page=PageMeta.from_result(result),
        elapsed_ms=round(result.elapsed_ms, 2),
        warnings=result.warnings,
    )
