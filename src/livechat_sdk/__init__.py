# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""LiveChat SDK - Typed Python client for the LiveChat Web API.

This library wraps the Agent Chat, Customer Chat and Configuration APIs of
the LiveChat platform behind synchronous clients sharing one request
dispatcher, and decodes the webhooks the platform sends.

Key Features:
    - Typed pydantic models for requests, responses, events and users
    - Pluggable token getters with per-call token refresh
    - Caller-defined retry strategies for API errors
    - Per-call statistics with logging and Prometheus sinks
    - Deprecation notices for legacy API versions
    - Webhook decoding with secret key verification

Quick Start:
    >>> from livechat_sdk import AgentAPI, Token, static_token_getter
    >>> from livechat_sdk.retry import retry_on
    >>>
    >>> api = AgentAPI(static_token_getter(Token("dal:...", region="dal")),
    ...                client_id="my-app")
    >>> api.set_retry_strategy(retry_on("internal", max_retries=3))
    >>> with api:
    ...     chats = api.list_chats(limit=10)

Main Exports:
    - AgentAPI, CustomerAPI, ConfigurationAPI: Specialized clients
    - WebAPI, FileUploadWebAPI: Shared request dispatcher
    - Token, TokenType, static_token_getter, env_token_getter: Authorization
    - CallOptions, CallStats: Call value types
    - WebhookHandler, decode_webhook: Webhook handling
    - LiveChatError and subclasses: Error taxonomy

Note: Prometheus export requires the 'prometheus' extra. Install with:
    pip install livechat-sdk[prometheus]

Version: 1.0.0
"""

__version__ = "1.0.0"

from .agent import AgentAPI
from .api import API_VERSION, APIConfig, FileUploadWebAPI, WebAPI
from .authorization import (
    Token,
    TokenGetter,
    TokenType,
    env_token_getter,
    static_token_getter,
)
from .configuration import ConfigurationAPI
from .customer import CustomerAPI
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    LiveChatError,
    RequestEncodingError,
    TokenUnavailableError,
    TransportError,
    UnknownWebhookActionError,
    UnsupportedTokenTypeError,
    ValidationError,
    WebhookAuthenticationError,
    WebhookError,
)
from .protocols import RetryStrategy, StatsSink
from .types import GET, CallOptions, CallStats, UploadedFile
from .webhooks import Webhook, WebhookHandler, decode_webhook

__all__ = [
    "API_VERSION",
    "GET",
    # Exceptions
    "APIError",
    "APIConfig",
    # Clients
    "AgentAPI",
    # Call types
    "CallOptions",
    "CallStats",
    "ConfigurationAPI",
    "ConfigurationError",
    "CustomerAPI",
    "DecodeError",
    "FileUploadWebAPI",
    "LiveChatError",
    "RequestEncodingError",
    # Protocols
    "RetryStrategy",
    "StatsSink",
    # Authorization
    "Token",
    "TokenGetter",
    "TokenType",
    "TokenUnavailableError",
    "TransportError",
    "UnknownWebhookActionError",
    "UnsupportedTokenTypeError",
    "UploadedFile",
    "ValidationError",
    "WebAPI",
    # Webhooks
    "Webhook",
    "WebhookAuthenticationError",
    "WebhookError",
    "WebhookHandler",
    "decode_webhook",
    "env_token_getter",
    "static_token_getter",
]
