# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Wire models shared by the agent and customer clients.

Events and users are tagged unions: decode them as Event or User and use the
``as_*`` accessors, or ``parse_event`` to obtain the concrete variant.
"""

from .chats import (
    Chat,
    ChatSummary,
    InitialChat,
    InitialThread,
    LastEvent,
    Thread,
    ThreadSummary,
)
from .common import Access, EmptyResponse, Properties, Queue, WireModel
from .events import (
    EVENT_TYPES,
    SENDABLE_EVENT_TYPES,
    Event,
    File,
    FilledForm,
    FormField,
    Message,
    Postback,
    RichMessage,
    RichMessageButton,
    RichMessageElement,
    RichMessageImage,
    SystemMessage,
    parse_event,
    validate_event,
)
from .users import (
    Agent,
    Customer,
    CustomerStatistics,
    Geolocation,
    User,
    Visit,
    VisitedPage,
)

__all__ = [
    "EVENT_TYPES",
    "SENDABLE_EVENT_TYPES",
    "Access",
    "Agent",
    "Chat",
    "ChatSummary",
    "Customer",
    "CustomerStatistics",
    "EmptyResponse",
    "Event",
    "File",
    "FilledForm",
    "FormField",
    "Geolocation",
    "InitialChat",
    "InitialThread",
    "LastEvent",
    "Message",
    "Postback",
    "Properties",
    "Queue",
    "RichMessage",
    "RichMessageButton",
    "RichMessageElement",
    "RichMessageImage",
    "SystemMessage",
    "Thread",
    "ThreadSummary",
    "User",
    "Visit",
    "VisitedPage",
    "WireModel",
    "parse_event",
    "validate_event",
]
