# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Webhook payload models and the action registry.

``PAYLOAD_TYPES`` maps every supported webhook action to the model its
payload decodes into.
"""

from __future__ import annotations

from pydantic import model_validator
from typing_extensions import Self

from ..configuration.models import Agent as ConfigurationAgent
from ..configuration.models import AutoAccess, GroupConfig, GroupPriority, WorkScheduler
from ..models.chats import Chat
from ..models.common import Access, Properties, WireModel
from ..models.events import Event, parse_event
from ..models.users import Customer, User


class ChatThreadPayload(WireModel):
    chat_id: str
    thread_id: str = ""


class IncomingChat(WireModel):
    """
    A new chat, or a new thread in an existing chat.

    The current thread is also appended to ``chat.threads``.
    """

    chat: Chat

    @model_validator(mode="after")
    def _collect_thread(self) -> Self:
        thread = self.chat.thread
        if thread is not None and thread not in self.chat.threads:
            self.chat.threads.append(thread)
        return self


class IncomingEvent(ChatThreadPayload):
    event: Event

    @model_validator(mode="after")
    def _concrete_event(self) -> Self:
        self.event = parse_event(self.event)
        return self


class EventUpdated(IncomingEvent):
    pass


class PostbackData(WireModel):
    id: str
    toggled: bool = False


class IncomingRichMessagePostback(ChatThreadPayload):
    user_id: str = ""
    event_id: str = ""
    postback: PostbackData


class ChatDeactivated(ChatThreadPayload):
    user_id: str = ""


class ChatPropertiesUpdated(WireModel):
    chat_id: str
    properties: Properties = {}


class ThreadPropertiesUpdated(ChatThreadPayload):
    properties: Properties = {}


class EventPropertiesUpdated(ChatThreadPayload):
    event_id: str
    properties: Properties = {}


class ChatPropertiesDeleted(WireModel):
    chat_id: str
    properties: dict[str, list[str]] = {}


class ThreadPropertiesDeleted(ChatThreadPayload):
    properties: dict[str, list[str]] = {}


class EventPropertiesDeleted(ChatThreadPayload):
    event_id: str
    properties: dict[str, list[str]] = {}


class UserAddedToChat(ChatThreadPayload):
    user: User
    user_type: str = ""
    reason: str = ""
    requester_id: str = ""


class UserRemovedFromChat(ChatThreadPayload):
    user_id: str
    user_type: str = ""
    reason: str = ""
    requester_id: str = ""


class ThreadTagged(ChatThreadPayload):
    tag: str


class ThreadUntagged(ThreadTagged):
    pass


class IDPayload(WireModel):
    """Payload of webhooks that only carry the id of the affected entity."""

    id: str


class GroupIDPayload(WireModel):
    id: int


class EventsMarkedAsSeen(WireModel):
    user_id: str
    chat_id: str
    seen_up_to: str


class ChatAccessUpdated(WireModel):
    id: str
    access: Access


class RoutingStatusSet(WireModel):
    agent_id: str
    status: str


class TransferredTo(WireModel):
    agent_ids: list[str] = []
    group_ids: list[int] = []


class TransferQueue(WireModel):
    position: int = 0
    wait_time: int = 0
    queued_at: str = ""


class ChatTransferred(WireModel):
    chat_id: str
    thread_id: str | None = None
    requester_id: str | None = None
    reason: str = ""
    transferred_to: TransferredTo
    queue: TransferQueue | None = None


class ActiveChat(WireModel):
    chat_id: str = ""
    thread_id: str = ""


class CustomerSessionFieldsUpdated(WireModel):
    id: str
    active_chat: ActiveChat | None = None
    session_fields: list[dict[str, str]] = []


class GroupChanged(WireModel):
    """Payload of ``group_created`` and ``group_updated``."""

    id: int
    name: str | None = None
    language_code: str | None = None
    agent_priorities: dict[str, str] = {}


class BotChanged(WireModel):
    """Payload of ``bot_created`` and ``bot_updated``."""

    id: str
    name: str | None = None
    avatar: str | None = None
    max_chats_count: int | None = None
    default_group_priority: GroupPriority | None = None
    groups: list[GroupConfig] | None = None
    work_scheduler: WorkScheduler | None = None
    timezone: str | None = None
    owner_client_id: str | None = None
    job_title: str | None = None


PAYLOAD_TYPES: dict[str, type[WireModel]] = {
    "incoming_chat": IncomingChat,
    "incoming_event": IncomingEvent,
    "event_updated": EventUpdated,
    "incoming_rich_message_postback": IncomingRichMessagePostback,
    "chat_deactivated": ChatDeactivated,
    "chat_properties_updated": ChatPropertiesUpdated,
    "thread_properties_updated": ThreadPropertiesUpdated,
    "event_properties_updated": EventPropertiesUpdated,
    "chat_properties_deleted": ChatPropertiesDeleted,
    "thread_properties_deleted": ThreadPropertiesDeleted,
    "event_properties_deleted": EventPropertiesDeleted,
    "user_added_to_chat": UserAddedToChat,
    "user_removed_from_chat": UserRemovedFromChat,
    "thread_tagged": ThreadTagged,
    "thread_untagged": ThreadUntagged,
    "agent_created": ConfigurationAgent,
    "agent_updated": ConfigurationAgent,
    "agent_deleted": IDPayload,
    "agent_suspended": IDPayload,
    "agent_unsuspended": IDPayload,
    "agent_approved": IDPayload,
    "events_marked_as_seen": EventsMarkedAsSeen,
    "chat_access_updated": ChatAccessUpdated,
    "incoming_customer": Customer,
    "routing_status_set": RoutingStatusSet,
    "chat_transferred": ChatTransferred,
    "customer_session_fields_updated": CustomerSessionFieldsUpdated,
    "group_created": GroupChanged,
    "group_updated": GroupChanged,
    "group_deleted": GroupIDPayload,
    "auto_access_added": AutoAccess,
    "auto_access_updated": AutoAccess,
    "auto_access_deleted": IDPayload,
    "bot_created": BotChanged,
    "bot_updated": BotChanged,
    "bot_deleted": IDPayload,
}
"""Payload model of each webhook action."""


__all__ = [
    "PAYLOAD_TYPES",
    "ActiveChat",
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
    "PostbackData",
    "RoutingStatusSet",
    "ThreadPropertiesDeleted",
    "ThreadPropertiesUpdated",
    "ThreadTagged",
    "ThreadUntagged",
    "TransferQueue",
    "TransferredTo",
    "UserAddedToChat",
    "UserRemovedFromChat",
]
