# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base wire model and small shared structures.

Every request and response object is a WireModel. Unknown response fields
are kept (``extra="allow"``) so newer API versions do not break decoding,
and the dispatcher serializes models with None fields omitted.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

Properties = dict[str, dict[str, Any]]
"""Properties in the form ``namespace -> property -> value``."""


class WireModel(BaseModel):
    """Base class for all Web API payloads."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible form as sent to the API (None fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Access(WireModel):
    """Groups a chat or thread is visible to."""

    group_ids: list[int] = []


class Queue(WireModel):
    """Position of a thread in the queue."""

    position: int = 0
    wait_time: int = 0
    queued_at: datetime | None = None


class EmptyResponse(WireModel):
    """Response of actions that return ``{}``."""


__all__ = ["Access", "EmptyResponse", "Properties", "Queue", "WireModel"]
