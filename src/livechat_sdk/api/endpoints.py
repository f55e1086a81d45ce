# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Endpoint templating.

Endpoint URLs have the form ``<host>/v<version>/<namespace>/action/<action>``.
They are recomputed for every attempt because some namespaces embed data
taken from the current token.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from urllib.parse import urlencode

from ..authorization import Token
from .config import API_VERSION

EndpointGenerator = Callable[[Token, str, str], str]
"""Builds a URL from (token, host, action)."""


def action_url(host: str, namespace: str, action: str) -> str:
    """Return ``host/v<API_VERSION>/<namespace>/action/<action>``."""
    return f"{host}/v{API_VERSION}/{namespace}/action/{action}"


def append_query(
    url: str, params: Mapping[str, str] | Sequence[tuple[str, str]]
) -> str:
    """Append ``params`` to ``url``, joining with ``?`` or ``&`` as needed."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"


def namespace_endpoint(namespace: str) -> EndpointGenerator:
    """Endpoint generator for namespaces that need nothing from the token."""

    def generate(token: Token, host: str, action: str) -> str:
        return action_url(host, namespace, action)

    return generate


def organization_endpoint(namespace: str) -> EndpointGenerator:
    """
    Endpoint generator carrying the token's organization id in the query string.

    The customer namespace identifies the license this way.
    """

    def generate(token: Token, host: str, action: str) -> str:
        return append_query(
            action_url(host, namespace, action),
            {"organization_id": token.organization_id},
        )

    return generate


__all__ = [
    "EndpointGenerator",
    "action_url",
    "append_query",
    "namespace_endpoint",
    "organization_endpoint",
]
