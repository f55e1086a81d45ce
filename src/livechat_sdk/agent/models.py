# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request and response models of the Agent Chat API."""

from __future__ import annotations

from typing import Any

from ..models.chats import Chat, ChatSummary, InitialChat, Thread
from ..models.common import Properties, WireModel
from .filters import ArchivesFilters, ChatsFilters, RoutingStatusesFilter, ThreadsFilters


class HashedPagination(WireModel):
    page_id: str | None = None
    limit: int | None = None
    sort_order: str | None = None


class PageResponse(WireModel):
    previous_page_id: str | None = None
    next_page_id: str | None = None


# === Options ===


class TransferChatOptions(WireModel):
    """Optional flags of ``transfer_chat``."""

    ignore_requester_presence: bool | None = None
    ignore_agents_availability: bool | None = None


class MulticastRecipientsAgents(WireModel):
    groups: list[int] | None = None
    ids: list[str] | None = None
    all: bool | None = None


class MulticastRecipientsCustomers(WireModel):
    ids: list[str] | None = None


class MulticastRecipients(WireModel):
    """Agents and customers a multicast is sent to."""

    agents: MulticastRecipientsAgents | None = None
    customers: MulticastRecipientsCustomers | None = None


# === Requests ===


class ListChatsRequest(HashedPagination):
    filters: ChatsFilters | None = None


class GetChatRequest(WireModel):
    chat_id: str
    thread_id: str | None = None


class ListThreadsRequest(HashedPagination):
    chat_id: str
    min_events_count: int | None = None
    filters: ThreadsFilters | None = None


class ListArchivesRequest(HashedPagination):
    filters: ArchivesFilters | None = None


class StartChatRequest(WireModel):
    chat: InitialChat | None = None
    continuous: bool | None = None
    active: bool


class ResumeChatRequest(WireModel):
    chat: InitialChat
    continuous: bool | None = None
    active: bool


class ChatIDRequest(WireModel):
    id: str


class DeactivateChatRequest(ChatIDRequest):
    ignore_requester_presence: bool | None = None


class TransferTarget(WireModel):
    type: str
    ids: list[Any]


class TransferChatRequest(TransferChatOptions):
    id: str
    target: TransferTarget | None = None


class AddUserToChatRequest(WireModel):
    chat_id: str
    user_id: str
    user_type: str
    visibility: str
    ignore_requester_presence: bool | None = None


class RemoveUserFromChatRequest(WireModel):
    chat_id: str
    user_id: str
    user_type: str
    ignore_requester_presence: bool | None = None


class SendEventRequest(WireModel):
    chat_id: str
    event: Any
    attach_to_last_thread: bool | None = None


class RichMessagePostback(WireModel):
    id: str
    toggled: bool


class SendRichMessagePostbackRequest(WireModel):
    chat_id: str
    event_id: str
    thread_id: str
    postback: RichMessagePostback


class UpdateChatPropertiesRequest(WireModel):
    id: str
    properties: Properties


class DeleteChatPropertiesRequest(WireModel):
    id: str
    properties: dict[str, list[str]]


class UpdateThreadPropertiesRequest(WireModel):
    chat_id: str
    thread_id: str
    properties: Properties


class DeleteThreadPropertiesRequest(WireModel):
    chat_id: str
    thread_id: str
    properties: dict[str, list[str]]


class UpdateEventPropertiesRequest(UpdateThreadPropertiesRequest):
    event_id: str


class DeleteEventPropertiesRequest(DeleteThreadPropertiesRequest):
    event_id: str


class ThreadTagRequest(WireModel):
    chat_id: str
    thread_id: str
    tag: str


class CustomerFields(WireModel):
    name: str | None = None
    email: str | None = None
    avatar: str | None = None
    session_fields: list[dict[str, str]] | None = None


class UpdateCustomerRequest(CustomerFields):
    id: str


class Ban(WireModel):
    days: int


class BanCustomerRequest(WireModel):
    id: str
    ban: Ban


class SetRoutingStatusRequest(WireModel):
    agent_id: str | None = None
    status: str | None = None


class MarkEventsAsSeenRequest(WireModel):
    chat_id: str
    seen_up_to: str


class SendTypingIndicatorRequest(WireModel):
    chat_id: str
    visibility: str | None = None
    is_typing: bool


class MulticastRequest(WireModel):
    recipients: MulticastRecipients
    content: Any
    type: str | None = None


class ListAgentsForTransferRequest(WireModel):
    chat_id: str


class ListRoutingStatusesRequest(WireModel):
    filters: RoutingStatusesFilter


# === Responses ===


class ListChatsResponse(PageResponse):
    chats_summary: list[ChatSummary] = []
    found_chats: int = 0


class ListThreadsResponse(PageResponse):
    threads: list[Thread] = []
    found_threads: int = 0


class ListArchivesResponse(PageResponse):
    chats: list[Chat] = []
    found_chats: int = 0


class StartChatResponse(WireModel):
    chat_id: str = ""
    thread_id: str = ""
    event_ids: list[str] = []


class ResumeChatResponse(WireModel):
    thread_id: str = ""
    event_ids: list[str] = []


class SendEventResponse(WireModel):
    event_id: str


class CreateCustomerResponse(WireModel):
    customer_id: str


class AgentForTransfer(WireModel):
    agent_id: str
    total_active_chats: int = 0


class AgentStatus(WireModel):
    agent_id: str | None = None
    status: str | None = None


__all__ = [
    "AgentForTransfer",
    "AgentStatus",
    "CreateCustomerResponse",
    "ListArchivesResponse",
    "ListChatsResponse",
    "ListThreadsResponse",
    "MulticastRecipients",
    "MulticastRecipientsAgents",
    "MulticastRecipientsCustomers",
    "ResumeChatResponse",
    "SendEventResponse",
    "StartChatResponse",
    "TransferChatOptions",
]
