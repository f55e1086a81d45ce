# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Error response decoding.

Non-200 responses carry ``{"error": {"type": ..., "message": ...}}``. A body
that does not match this shape still produces an error, preserving the
status code and raw body for diagnosis.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import APIError, DecodeError


class ErrorDetails(BaseModel):
    """The ``error`` object of an error response."""

    model_config = ConfigDict(extra="allow")

    type: str = ""
    message: str = ""


class ErrorResponse(BaseModel):
    """Envelope of an error response."""

    model_config = ConfigDict(extra="allow")

    error: ErrorDetails | None = None


def decode_error(status_code: int, body: bytes) -> APIError | DecodeError:
    """
    Map a non-200 response to an exception instance.

    Args:
        status_code: HTTP status of the response.
        body: Raw response body.

    Returns:
        APIError for a well-formed error body with a non-empty type,
        DecodeError otherwise. The error is returned, not raised.
    """
    text = body.decode("utf-8", errors="replace")
    try:
        parsed = ErrorResponse.model_validate_json(body)
    except PydanticValidationError as exc:
        return DecodeError(
            f"couldn't unmarshal error response: {exc.__class__.__name__} "
            f"(code: {status_code}, raw body: {text})",
            status_code=status_code,
            body=text,
        )
    if parsed.error is None or not parsed.error.type:
        return DecodeError(
            f"couldn't unmarshal error response: missing error type "
            f"(code: {status_code}, raw body: {text})",
            status_code=status_code,
            body=text,
        )
    return APIError(parsed.error.type, parsed.error.message, status_code=status_code)


__all__ = ["ErrorDetails", "ErrorResponse", "decode_error"]
