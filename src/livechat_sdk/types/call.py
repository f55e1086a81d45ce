# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Per-call value types used by the request dispatcher.

This module defines the options a caller can attach to a single Web API call,
the statistics reported to a stats sink when the call completes, and the
result of a file upload.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

HTTPMethod = Literal["GET", "POST"]


@dataclass(frozen=True)
class CallOptions:
    """
    Per-call overrides for the dispatcher.

    Attributes:
        method: HTTP verb. POST sends the payload as a JSON body, GET encodes
            it into the query string.
        timeout: Optional deadline for each attempt, in seconds. Falls back to
            the transport's own timeout when None.
        headers: Extra headers for this call only. Applied after the client's
            custom headers. Stored as a read-only copy, so shared option
            sets such as ``GET`` cannot be changed after creation.
    """

    method: HTTPMethod = "POST"
    timeout: float | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.method not in ("GET", "POST"):
            raise ValueError(f"method must be GET or POST, got {self.method!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


GET = CallOptions(method="GET")
"""Shared options for query-string encoded calls."""


@dataclass(frozen=True)
class CallStats:
    """
    Outcome of one logical Web API call, reported once per call.

    Attributes:
        action: Remote action name (e.g. ``list_chats``).
        execution_time: Wall-clock time since the call started, in seconds.
            Includes every retry attempt.
        success: False iff the call ended with an error.
    """

    action: str
    execution_time: float
    success: bool


@dataclass(frozen=True)
class UploadedFile:
    """Result of a file upload: a temporary URL to reference in events."""

    url: str


__all__ = ["GET", "CallOptions", "CallStats", "HTTPMethod", "UploadedFile"]
