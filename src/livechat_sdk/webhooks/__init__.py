# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Webhooks sent by the LiveChat platform.

Classes:
    Webhook: Envelope of an incoming webhook.
    WebhookHandler: Authenticates webhooks and dispatches them per action.

Functions:
    decode_webhook: Decode a webhook body with its typed payload.
"""

from .handler import Webhook, WebhookCallback, WebhookHandler, decode_webhook
from .payloads import (
    PAYLOAD_TYPES,
    BotChanged,
    ChatAccessUpdated,
    ChatDeactivated,
    ChatPropertiesDeleted,
    ChatPropertiesUpdated,
    ChatTransferred,
    CustomerSessionFieldsUpdated,
    EventPropertiesDeleted,
    EventPropertiesUpdated,
    EventUpdated,
    EventsMarkedAsSeen,
    GroupChanged,
    GroupIDPayload,
    IDPayload,
    IncomingChat,
    IncomingEvent,
    IncomingRichMessagePostback,
    RoutingStatusSet,
    ThreadPropertiesDeleted,
    ThreadPropertiesUpdated,
    ThreadTagged,
    ThreadUntagged,
    UserAddedToChat,
    UserRemovedFromChat,
)

__all__ = [
    "PAYLOAD_TYPES",
    "BotChanged",
    "ChatAccessUpdated",
    "ChatDeactivated",
    "ChatPropertiesDeleted",
    "ChatPropertiesUpdated",
    "ChatTransferred",
    "CustomerSessionFieldsUpdated",
    "EventPropertiesDeleted",
    "EventPropertiesUpdated",
    "EventUpdated",
    "EventsMarkedAsSeen",
    "GroupChanged",
    "GroupIDPayload",
    "IDPayload",
    "IncomingChat",
    "IncomingEvent",
    "IncomingRichMessagePostback",
    "RoutingStatusSet",
    "ThreadPropertiesDeleted",
    "ThreadPropertiesUpdated",
    "ThreadTagged",
    "ThreadUntagged",
    "UserAddedToChat",
    "UserRemovedFromChat",
    "Webhook",
    "WebhookCallback",
    "WebhookHandler",
    "decode_webhook",
]
