# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the LiveChat SDK.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from LiveChatError, making it easy to catch
every SDK-related failure with a single except clause.

The hierarchy mirrors the four failure categories of a Web API call:

- configuration errors (missing token getter, unsupported token type)
- transport errors (connection, DNS, timeout failures from httpx)
- API errors (well-formed non-200 responses carrying a category)
- decode errors (malformed success or error response bodies)
"""

from __future__ import annotations


class LiveChatError(Exception):
    """Base exception for all LiveChat SDK errors.

    Example:
        try:
            api.follow_chat("PJ0MRSHTDG")
        except LiveChatError as e:
            logger.error(f"LiveChat call failed: {e}")
    """

    pass


class ConfigurationError(LiveChatError):
    """Raised when the client is constructed or used with invalid configuration.

    Common causes include:
    - No token getter supplied at construction
    - A token getter returning an unsupported token type

    Configuration errors are never retried.
    """

    pass


class UnsupportedTokenTypeError(ConfigurationError):
    """Raised when a token getter returns a token of an unknown type.

    Attributes:
        token_type: The offending token type value.
    """

    def __init__(self, token_type: object):
        super().__init__(f"unsupported token type: {token_type!r}")
        self.token_type = token_type


class TokenUnavailableError(LiveChatError):
    """Raised when the token getter declines to provide a token.

    The call is not attempted and no request is sent.
    """

    def __init__(self, message: str = "couldn't get token"):
        super().__init__(message)


class TransportError(LiveChatError):
    """Raised when the underlying HTTP transport fails.

    Wraps connection, DNS and timeout failures raised by httpx. The original
    exception is available as ``__cause__``. Transport errors are never passed
    to the retry strategy.

    Attributes:
        action: The action that was being called.
    """

    def __init__(self, message: str, action: str | None = None):
        super().__init__(message)
        self.action = action


class APIError(LiveChatError):
    """Raised when the API answers with a well-formed error response.

    The response body has the shape
    ``{"error": {"type": <category>, "message": <text>}}``.

    Attributes:
        type: Stable error category (e.g. "authentication", "validation").
        message: Human readable description.
        status_code: HTTP status code of the response, if known.

    Example:
        try:
            api.get_chat("PJ0MRSHTDG")
        except APIError as e:
            if e.is_type("authentication"):
                refresh_credentials()
    """

    def __init__(self, type: str, message: str, status_code: int | None = None):
        super().__init__(f"API error: {type} - {message}")
        self.type = type
        self.message = message
        self.status_code = status_code

    def is_type(self, *types: str) -> bool:
        """Check the error category against any of ``types`` (case-insensitive)."""
        own = self.type.lower()
        return any(own == t.lower() for t in types)


class DecodeError(LiveChatError):
    """Raised when a response body cannot be decoded.

    Covers both malformed success bodies and error bodies that do not match
    the API error shape. Decode errors are terminal and never retried.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response body, kept for diagnosis.
    """

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestEncodingError(LiveChatError):
    """Raised when a request payload cannot be encoded for the wire."""

    pass


class ValidationError(LiveChatError):
    """Raised by typed operations when arguments are rejected locally.

    No request is sent when this error is raised.
    """

    pass


class WebhookError(LiveChatError):
    """Base exception for webhook decoding and dispatch errors.

    Attributes:
        action: Webhook action name, if it could be determined.
    """

    def __init__(self, message: str, action: str | None = None):
        super().__init__(message)
        self.action = action


class WebhookAuthenticationError(WebhookError):
    """Raised when an incoming webhook carries an invalid secret key."""

    pass


class UnknownWebhookActionError(WebhookError):
    """Raised when a webhook action has no registered payload type."""

    def __init__(self, action: str):
        super().__init__(f"unknown webhook action: {action}", action=action)


__all__ = [
    "APIError",
    "ConfigurationError",
    "DecodeError",
    "LiveChatError",
    "RequestEncodingError",
    "TokenUnavailableError",
    "TransportError",
    "UnknownWebhookActionError",
    "UnsupportedTokenTypeError",
    "ValidationError",
    "WebhookAuthenticationError",
    "WebhookError",
]
