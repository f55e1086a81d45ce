# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for call statistics sinks."""

from typing import Protocol, runtime_checkable

from ..types.call import CallStats


@runtime_checkable
class StatsSink(Protocol):
    """
    Receives the outcome of every Web API call.

    Called exactly once per logical call, after the terminal attempt,
    on the caller's thread. Implementations should return quickly. An
    exception raised by a sink is logged and never fails the call.
    """

    def __call__(self, stats: CallStats) -> None:
        """Record the outcome of a finished call."""
        ...
