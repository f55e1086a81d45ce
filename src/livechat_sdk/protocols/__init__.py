# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocols for collaborators plugged into the request dispatcher."""

from .retry import RetryStrategy
from .stats import StatsSink

__all__ = ["RetryStrategy", "StatsSink"]
