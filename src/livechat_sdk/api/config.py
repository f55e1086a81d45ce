# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration for Web API clients.

This module contains the APIConfig dataclass, which controls where and how
the dispatcher talks to the LiveChat Web API.
"""

from dataclasses import dataclass

API_VERSION = "3.6"
"""Web API version embedded in every endpoint URL."""

DEFAULT_HOST = "https://api.livechatinc.com"
"""Production Web API host."""

DEFAULT_TIMEOUT = 20.0
"""Timeout in seconds applied by the default HTTP transport."""


@dataclass
class APIConfig:
    """
    Web API client configuration.

    Attributes:
        host: Scheme and authority of the Web API, without a trailing slash.
        timeout: Timeout in seconds for the HTTP client built when the caller
            does not supply one. Ignored for caller-supplied clients.
        client_id: Application client id, sent in the User-Agent header.
    """

    host: str = DEFAULT_HOST
    timeout: float = DEFAULT_TIMEOUT
    client_id: str = ""

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.host.startswith(("http://", "https://")):
            raise ValueError(f"host must start with http:// or https://, got {self.host!r}")
        self.host = self.host.rstrip("/")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def user_agent(self) -> str:
        """User-Agent header value identifying this application."""
        return f"Python SDK Application {self.client_id}"


__all__ = ["API_VERSION", "DEFAULT_HOST", "DEFAULT_TIMEOUT", "APIConfig"]
