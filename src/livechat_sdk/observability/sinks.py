# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Ready-made stats sinks.

MetricsStatsSink records call counts and durations in a MetricsCollector.
LoggingStatsSink writes one log line per call.
"""

from __future__ import annotations

import logging

from ..types.call import CallStats
from .collector import MetricsCollector
from .constants import (
    API_CALL_DURATION_SECONDS,
    API_CALLS_TOTAL,
    OUTCOME_FAILURE,
    OUTCOME_SUCCESS,
)


class MetricsStatsSink:
    """
    Stats sink feeding a MetricsCollector.

    Example:
        >>> collector = MetricsCollector()
        >>> api.set_stats_sink(MetricsStatsSink(collector))
    """

    def __init__(self, collector: MetricsCollector) -> None:
        self._collector = collector

    @property
    def collector(self) -> MetricsCollector:
        return self._collector

    def __call__(self, stats: CallStats) -> None:
        outcome = OUTCOME_SUCCESS if stats.success else OUTCOME_FAILURE
        self._collector.inc_counter(
            API_CALLS_TOTAL, labels={"action": stats.action, "outcome": outcome}
        )
        self._collector.observe_histogram(
            API_CALL_DURATION_SECONDS,
            stats.execution_time,
            labels={"action": stats.action},
        )


class LoggingStatsSink:
    """Stats sink logging one line per call at a fixed level."""

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.DEBUG
    ) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._level = level

    def __call__(self, stats: CallStats) -> None:
        self._logger.log(
            self._level,
            f"{stats.action} {'succeeded' if stats.success else 'failed'} "
            f"in {stats.execution_time * 1000:.1f}ms",
        )


__all__ = ["LoggingStatsSink", "MetricsStatsSink"]
