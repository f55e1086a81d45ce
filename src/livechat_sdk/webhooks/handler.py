# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Webhook decoding and dispatch.

Usage:
    >>> def on_incoming_event(webhook: Webhook) -> None:
    ...     print(webhook.parsed_payload.event)
    >>> handler = WebhookHandler(
    ...     {"incoming_event": on_incoming_event},
    ...     secret_key="s3cr3t",
    ... )
    >>> handler.handle(request_body)
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import Field, ValidationError

from ..exceptions import UnknownWebhookActionError, WebhookAuthenticationError, WebhookError
from ..models.common import WireModel
from ..observability.collector import MetricsCollector
from ..observability.constants import (
    OUTCOME_FAILURE,
    OUTCOME_SUCCESS,
    OUTCOME_UNHANDLED,
    OUTCOME_UNKNOWN,
    WEBHOOKS_RECEIVED_TOTAL,
)
from .payloads import PAYLOAD_TYPES

logger = logging.getLogger(__name__)


class Webhook(WireModel):
    """
    General webhook envelope.

    Attributes:
        payload: The raw payload as received.
        parsed_payload: The payload decoded into the model registered for
            ``action``; None until decoded.
    """

    webhook_id: str = ""
    secret_key: str = ""
    action: str
    organization_id: str = ""
    additional_data: Any = None
    payload: dict[str, Any] = {}
    parsed_payload: WireModel | None = Field(default=None, exclude=True)


WebhookCallback = Callable[[Webhook], None]


def _decode_envelope(body: bytes | str) -> Webhook:
    try:
        return Webhook.model_validate_json(body)
    except ValidationError as exc:
        raise WebhookError(f"couldn't decode webhook: {exc}") from exc


def _decode_payload(webhook: Webhook) -> Webhook:
    payload_type = PAYLOAD_TYPES.get(webhook.action)
    if payload_type is None:
        raise UnknownWebhookActionError(webhook.action)
    try:
        webhook.parsed_payload = payload_type.model_validate(webhook.payload)
    except ValidationError as exc:
        raise WebhookError(
            f"couldn't decode {webhook.action} payload: {exc}", action=webhook.action
        ) from exc
    return webhook


def decode_webhook(body: bytes | str) -> Webhook:
    """
    Decode a webhook request body, including its typed payload.

    Raises:
        UnknownWebhookActionError: If the action has no registered payload type.
        WebhookError: If the envelope or payload is malformed.
    """
    return _decode_payload(_decode_envelope(body))


class WebhookHandler:
    """
    Dispatches incoming webhooks to callbacks registered per action.

    Actions missing from the payload registry, or without a registered
    callback, are logged and passed to ``on_unknown_action`` instead of
    raising. Exceptions raised by callbacks propagate to the caller.

    Example:
        >>> handler = WebhookHandler({"incoming_chat": on_chat}, secret_key="key")
        >>> handler.handle(body)
    """

    def __init__(
        self,
        handlers: Mapping[str, WebhookCallback],
        secret_key: str | None = None,
        on_unknown_action: WebhookCallback | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._handlers = dict(handlers)
        self._secret_key = secret_key
        self._on_unknown_action = on_unknown_action
        self._metrics = metrics

    def register(self, action: str, callback: WebhookCallback) -> None:
        """Register or replace the callback for ``action``."""
        self._handlers[action] = callback

    def handle(self, body: bytes | str) -> None:
        """
        Decode, authenticate and dispatch one webhook.

        Raises:
            WebhookAuthenticationError: If a secret key is configured and the
                webhook carries a different one.
            WebhookError: If the webhook is malformed.
        """
        webhook = _decode_envelope(body)
        self._authenticate(webhook)

        if webhook.action not in PAYLOAD_TYPES:
            logger.warning(f"Received webhook with unknown action: {webhook.action}")
            self._record(webhook.action, OUTCOME_UNKNOWN)
            self._report_unknown(webhook)
            return

        callback = self._handlers.get(webhook.action)
        if callback is None:
            logger.warning(f"No handler registered for webhook action: {webhook.action}")
            self._record(webhook.action, OUTCOME_UNHANDLED)
            self._report_unknown(webhook)
            return

        try:
            callback(_decode_payload(webhook))
        except Exception:
            self._record(webhook.action, OUTCOME_FAILURE)
            raise
        self._record(webhook.action, OUTCOME_SUCCESS)

    def _authenticate(self, webhook: Webhook) -> None:
        if self._secret_key is None:
            return
        if not hmac.compare_digest(
            webhook.secret_key.encode(), self._secret_key.encode()
        ):
            self._record(webhook.action, OUTCOME_FAILURE)
            raise WebhookAuthenticationError(
                "invalid webhook secret key", action=webhook.action
            )

    def _report_unknown(self, webhook: Webhook) -> None:
        if self._on_unknown_action is not None:
            self._on_unknown_action(webhook)

    def _record(self, action: str, outcome: str) -> None:
        if self._metrics is None:
            return
        # Unknown action names are unbounded
        label = action if action in PAYLOAD_TYPES else OUTCOME_UNKNOWN
        self._metrics.inc_counter(
            WEBHOOKS_RECEIVED_TOTAL, labels={"action": label, "outcome": outcome}
        )


__all__ = ["Webhook", "WebhookCallback", "WebhookHandler", "decode_webhook"]
