# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the ``livechat_sdk_`` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Histogram metrics for time end with `_seconds`

Label Best Practices:
    To prevent label cardinality explosion, use only:
    - `action` - Web API action or webhook action (bounded set of names)
    - `outcome` - Call outcome (enum: success, failure)

    NEVER use:
    - `chat_id` - Unique per chat (unbounded!)
    - `customer_id` - Unique per customer (unbounded!)

Usage:
    >>> from livechat_sdk.observability.constants import API_CALLS_TOTAL
    >>> print(API_CALLS_TOTAL)
    'livechat_sdk_api_calls_total'
"""


METRIC_PREFIX = "livechat_sdk"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# Web API Call Metrics (observability/sinks.py)
# =============================================================================

API_CALLS_TOTAL = f"{METRIC_PREFIX}_api_calls_total"
"""Total Web API calls, labeled by action and outcome."""

API_CALL_DURATION_SECONDS = f"{METRIC_PREFIX}_api_call_duration_seconds"
"""Duration of Web API calls including retries."""


# =============================================================================
# Webhook Metrics (webhooks/handler.py)
# =============================================================================

WEBHOOKS_RECEIVED_TOTAL = f"{METRIC_PREFIX}_webhooks_received_total"
"""Total webhooks received, labeled by action and outcome."""


# =============================================================================
# Outcome label values
# =============================================================================

OUTCOME_SUCCESS = "success"
OUTCOME_FAILURE = "failure"
OUTCOME_UNHANDLED = "unhandled"
OUTCOME_UNKNOWN = "unknown"


# =============================================================================
# Histogram Buckets
# =============================================================================

LATENCY_BUCKETS: list[float] = [
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
    20.0,
    60.0,
]
"""Buckets for call durations, in seconds. Covers the default 20s timeout."""


__all__ = [
    "API_CALLS_TOTAL",
    "API_CALL_DURATION_SECONDS",
    "LATENCY_BUCKETS",
    "METRIC_PREFIX",
    "OUTCOME_FAILURE",
    "OUTCOME_SUCCESS",
    "OUTCOME_UNHANDLED",
    "OUTCOME_UNKNOWN",
    "WEBHOOKS_RECEIVED_TOTAL",
]
