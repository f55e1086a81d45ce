# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Tokens and token getters.

A token getter is a zero-argument callable returning a Token, or None when
the caller declines to authenticate. The dispatcher invokes it on every call
attempt, so getters may return short-lived or rotating credentials.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .exceptions import UnsupportedTokenTypeError


class TokenType(str, Enum):
    """Supported authorization header styles."""

    BEARER = "Bearer"
    BASIC = "Basic"


@dataclass(frozen=True)
class Token:
    """
    Credential used to authorize Web API requests.

    Attributes:
        access_token: Secret placed in the Authorization header.
        region: Datacenter of the license (e.g. ``dal`` or ``fra``).
        type: Authorization header style.
        organization_id: ID of the organization that owns the token.
    """

    access_token: str
    region: str = ""
    type: TokenType = TokenType.BEARER
    organization_id: str = ""

    @property
    def authorization_header(self) -> str:
        """
        Value for the Authorization header, e.g. ``Bearer <secret>``.

        Raises:
            UnsupportedTokenTypeError: If ``type`` is not Bearer or Basic.
        """
        try:
            kind = TokenType(self.type)
        except ValueError as exc:
            raise UnsupportedTokenTypeError(self.type) from exc
        return f"{kind.value} {self.access_token}"


TokenGetter = Callable[[], Token | None]
"""Called before each request attempt to obtain a valid Token."""


def static_token_getter(token: Token) -> TokenGetter:
    """Return a getter that always yields ``token``."""

    def getter() -> Token | None:
        return token

    return getter


def env_token_getter(prefix: str = "LIVECHAT_") -> TokenGetter:
    """
    Return a getter that reads the token from environment variables.

    Variables are read on every invocation, so a rotated secret is picked up
    without recreating the client:

    - ``<prefix>ACCESS_TOKEN`` (required; the getter yields None when unset)
    - ``<prefix>REGION``
    - ``<prefix>TOKEN_TYPE`` (``Bearer`` or ``Basic``, default ``Bearer``)
    - ``<prefix>ORGANIZATION_ID``

    Raises:
        UnsupportedTokenTypeError: From the getter, if TOKEN_TYPE holds an
            unknown value.
    """

    def getter() -> Token | None:
        access_token = os.environ.get(f"{prefix}ACCESS_TOKEN", "").strip()
        if not access_token:
            return None
        raw_type = os.environ.get(f"{prefix}TOKEN_TYPE", "").strip()
        token_type = TokenType.BEARER
        if raw_type:
            try:
                token_type = TokenType(raw_type.capitalize())
            except ValueError as exc:
                raise UnsupportedTokenTypeError(raw_type) from exc
        return Token(
            access_token=access_token,
            region=os.environ.get(f"{prefix}REGION", "").strip(),
            type=token_type,
            organization_id=os.environ.get(f"{prefix}ORGANIZATION_ID", "").strip(),
        )

    return getter


__all__ = [
    "Token",
    "TokenGetter",
    "TokenType",
    "env_token_getter",
    "static_token_getter",
]
