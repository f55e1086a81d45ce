# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
In-memory store for the call and webhook metrics.

Counters and duration histograms are kept per label set, so a snapshot can be
exported as JSON or asserted on in tests. When ``prometheus_client`` is
installed (``pip install livechat-sdk[prometheus]``) every known metric is
mirrored into a Prometheus registry as well.

Usage:
    >>> collector = MetricsCollector()
    >>> api.set_stats_sink(MetricsStatsSink(collector))
    >>> collector.get_metrics()["counters"]
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from .constants import (
    API_CALL_DURATION_SECONDS,
    API_CALLS_TOTAL,
    LATENCY_BUCKETS,
    WEBHOOKS_RECEIVED_TOTAL,
)

logger = logging.getLogger(__name__)

try:
    from prometheus_client import (
        REGISTRY,
        Counter,
        Histogram,
        start_http_server as _prometheus_http_server,
    )

    start_http_server: Callable[..., Any] | None = _prometheus_http_server
    PROMETHEUS_AVAILABLE = True
except ImportError:
    REGISTRY = None
    Counter = None  # type: ignore[assignment,misc]
    Histogram = None  # type: ignore[assignment,misc]
    start_http_server = None
    PROMETHEUS_AVAILABLE = False


MetricKind = Literal["counter", "histogram"]


@dataclass(frozen=True)
class MetricDefinition:
    name: str
    kind: MetricKind
    description: str
    label_names: tuple[str, ...] = ()
    buckets: tuple[float, ...] | None = None


METRIC_DEFINITIONS: dict[str, MetricDefinition] = {
    defn.name: defn
    for defn in (
        MetricDefinition(
            API_CALLS_TOTAL,
            "counter",
            "Web API calls by action and outcome",
            ("action", "outcome"),
        ),
        MetricDefinition(
            API_CALL_DURATION_SECONDS,
            "histogram",
            "Web API call duration in seconds, retries included",
            ("action",),
            buckets=tuple(LATENCY_BUCKETS),
        ),
        MetricDefinition(
            WEBHOOKS_RECEIVED_TOTAL,
            "counter",
            "Webhooks dispatched by action and outcome",
            ("action", "outcome"),
        ),
    )
}


def _series_key(labels: dict[str, str] | None) -> str:
    if not labels:
        return ""
    return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))


class MetricsCollector:
    """
    Thread-safe counter and histogram store.

    One collector may be shared by several clients, webhook handlers and
    threads. Each metric tracks at most ``MAX_LABEL_COMBINATIONS`` label sets;
    new sets beyond that are dropped with a warning, which keeps a flood of
    unexpected action names from growing memory without bound. Histograms
    keep the latest ``MAX_OBSERVATIONS`` values per label set.

    Only metrics listed in ``METRIC_DEFINITIONS`` are mirrored to Prometheus.
    Other names are still recorded in memory.

    Example:
        >>> collector = MetricsCollector(enable_prometheus=False)
        >>> collector.inc_counter(API_CALLS_TOTAL,
        ...                       labels={'action': 'list_chats', 'outcome': 'success'})
        >>> collector.get_counter(API_CALLS_TOTAL,
        ...                       {'action': 'list_chats', 'outcome': 'success'})
        1
    """

    MAX_LABEL_COMBINATIONS: ClassVar[int] = 1000
    MAX_OBSERVATIONS: ClassVar[int] = 10000

    def __init__(
        self,
        enable_prometheus: bool = True,
        registry: Any | None = None,
    ) -> None:
        """
        Args:
            enable_prometheus: Mirror metrics into Prometheus when
                ``prometheus_client`` is importable.
            registry: Prometheus ``CollectorRegistry`` to register with. The
                process-wide default registry is used when omitted.
        """
        self._enable_prometheus = enable_prometheus and PROMETHEUS_AVAILABLE
        self._registry = registry if registry is not None else REGISTRY
        self._lock = threading.RLock()

        self._counters: dict[str, dict[str, int]] = {}
        self._observations: dict[str, dict[str, deque[float]]] = {}
        self._mirrors: dict[str, Any] = {}
        self._server_running = False

    def _admit(self, series: dict[str, Any], name: str, key: str) -> bool:
        # Callers hold the lock.
        if key in series or len(series) < self.MAX_LABEL_COMBINATIONS:
            return True
        logger.warning(
            f"Cardinality limit ({self.MAX_LABEL_COMBINATIONS}) reached "
            f"for metric {name}. Dropping label combination: {key}"
        )
        return False

    def _mirror(self, name: str) -> Any | None:
        """Prometheus metric for ``name``, registered on first use."""
        if not self._enable_prometheus:
            return None
        defn = METRIC_DEFINITIONS.get(name)
        if defn is None:
            return None

        with self._lock:
            if name in self._mirrors:
                return self._mirrors[name]
            try:
                if defn.kind == "counter":
                    mirror = Counter(
                        name,
                        defn.description,
                        list(defn.label_names),
                        registry=self._registry,
                    )
                else:
                    mirror = Histogram(
                        name,
                        defn.description,
                        list(defn.label_names),
                        buckets=defn.buckets or tuple(LATENCY_BUCKETS),
                        registry=self._registry,
                    )
            except ValueError as e:
                # Duplicated timeseries in the registry.
                logger.warning(f"Failed to register Prometheus metric {name}: {e}")
                mirror = None
            self._mirrors[name] = mirror
            return mirror

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Add ``value`` to a counter series.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        key = _series_key(labels)
        with self._lock:
            series = self._counters.setdefault(name, {})
            if not self._admit(series, name, key):
                return
            series[key] = series.get(key, 0) + value

        mirror = self._mirror(name)
        if mirror is not None:
            (mirror.labels(**labels) if labels else mirror).inc(value)

    def observe_histogram(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        key = _series_key(labels)
        with self._lock:
            series = self._observations.setdefault(name, {})
            if not self._admit(series, name, key):
                return
            if key not in series:
                series[key] = deque(maxlen=self.MAX_OBSERVATIONS)
            series[key].append(value)

        mirror = self._mirror(name)
        if mirror is not None:
            (mirror.labels(**labels) if labels else mirror).observe(value)

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Current value of one counter series, 0 if never incremented."""
        with self._lock:
            return self._counters.get(name, {}).get(_series_key(labels), 0)

    def get_metrics(self) -> dict[str, Any]:
        """
        Snapshot of everything recorded so far.

        Counters map label keys (``"action=list_chats,outcome=success"``) to
        totals. Histograms map label keys to ``count``, ``sum``, ``avg``,
        ``min`` and ``max`` of the retained observations.
        """
        with self._lock:
            counters = {name: dict(series) for name, series in self._counters.items()}
            histograms = {
                name: {
                    key: {
                        "count": len(values),
                        "sum": sum(values),
                        "avg": sum(values) / len(values),
                        "min": min(values),
                        "max": max(values),
                    }
                    for key, values in series.items()
                    if values
                }
                for name, series in self._observations.items()
            }
        return {"counters": counters, "histograms": histograms}

    def reset(self) -> None:
        """Forget all in-memory series. Prometheus mirrors are left alone."""
        with self._lock:
            self._counters.clear()
            self._observations.clear()

    def start_http_server(self, host: str = "127.0.0.1", port: int = 9090) -> bool:
        """
        Expose the registry for scraping. Binds to localhost by default.

        Returns:
            True if the server is running, False if it could not be started
        """
        if not PROMETHEUS_AVAILABLE or start_http_server is None:
            logger.warning(
                "Cannot start Prometheus server: prometheus_client not installed"
            )
            return False
        if self._server_running:
            return True

        try:
            start_http_server(port, addr=host, registry=self._registry)
        except OSError as e:
            logger.error(f"Failed to start Prometheus server on {host}:{port}: {e}")
            return False
        self._server_running = True
        logger.info(f"Prometheus metrics server started on {host}:{port}")
        return True

    @property
    def prometheus_enabled(self) -> bool:
        return self._enable_prometheus

    @property
    def server_running(self) -> bool:
        return self._server_running


__all__ = [
    "METRIC_DEFINITIONS",
    "PROMETHEUS_AVAILABLE",
    "MetricDefinition",
    "MetricKind",
    "MetricsCollector",
]
