# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for Web API calls and webhooks.

Classes:
    MetricsCollector: Thread-safe metrics store with optional Prometheus export.
    MetricsStatsSink: Stats sink recording call counts and durations.
    LoggingStatsSink: Stats sink logging one line per call.

Constants:
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
    All metric name constants from constants module.
"""

from .collector import (
    METRIC_DEFINITIONS,
    PROMETHEUS_AVAILABLE,
    MetricDefinition,
    MetricsCollector,
)
from .constants import (
    API_CALL_DURATION_SECONDS,
    API_CALLS_TOTAL,
    LATENCY_BUCKETS,
    METRIC_PREFIX,
    OUTCOME_FAILURE,
    OUTCOME_SUCCESS,
    OUTCOME_UNHANDLED,
    OUTCOME_UNKNOWN,
    WEBHOOKS_RECEIVED_TOTAL,
)
from .sinks import LoggingStatsSink, MetricsStatsSink

__all__ = [
    "API_CALLS_TOTAL",
    "API_CALL_DURATION_SECONDS",
    "LATENCY_BUCKETS",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "OUTCOME_FAILURE",
    "OUTCOME_SUCCESS",
    "OUTCOME_UNHANDLED",
    "OUTCOME_UNKNOWN",
    "PROMETHEUS_AVAILABLE",
    "LoggingStatsSink",
    "MetricDefinition",
    "MetricsCollector",
    "MetricsStatsSink",
    "WEBHOOKS_RECEIVED_TOTAL",
]
