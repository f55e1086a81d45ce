# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Agent Chat API client.

Every operation builds a request model, dispatches it through the shared
WebAPI core under the ``agent`` namespace and returns the decoded response.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

import httpx

from ..api.config import APIConfig
from ..api.endpoints import namespace_endpoint
from ..api.web_api import FileUploadWebAPI
from ..authorization import TokenGetter
from ..models.chats import Chat, InitialChat
from ..models.common import EmptyResponse, Properties
from ..models.events import Event, validate_event
from ..models.users import Customer
from .filters import ArchivesFilters, ChatsFilters, RoutingStatusesFilter, ThreadsFilters
from .models import (
    AddUserToChatRequest,
    AgentForTransfer,
    AgentStatus,
    Ban,
    BanCustomerRequest,
    ChatIDRequest,
    CreateCustomerResponse,
    CustomerFields,
    DeactivateChatRequest,
    DeleteChatPropertiesRequest,
    DeleteEventPropertiesRequest,
    DeleteThreadPropertiesRequest,
    GetChatRequest,
    ListAgentsForTransferRequest,
    ListArchivesRequest,
    ListArchivesResponse,
    ListChatsRequest,
    ListChatsResponse,
    ListRoutingStatusesRequest,
    ListThreadsRequest,
    ListThreadsResponse,
    MarkEventsAsSeenRequest,
    MulticastRecipients,
    MulticastRequest,
    RemoveUserFromChatRequest,
    ResumeChatRequest,
    ResumeChatResponse,
    RichMessagePostback,
    SendEventRequest,
    SendEventResponse,
    SendRichMessagePostbackRequest,
    SendTypingIndicatorRequest,
    SetRoutingStatusRequest,
    StartChatRequest,
    StartChatResponse,
    ThreadTagRequest,
    TransferChatOptions,
    TransferChatRequest,
    TransferTarget,
    UpdateChatPropertiesRequest,
    UpdateCustomerRequest,
    UpdateEventPropertiesRequest,
    UpdateThreadPropertiesRequest,
)

AUTHOR_ID_HEADER = "X-Author-Id"


class AgentAPI(FileUploadWebAPI):
    """
    Client for the Agent Chat API.

    The setter methods inherited from WebAPI are not synchronized; configure
    the client before sharing it between threads.

    Example:
        >>> api = AgentAPI(static_token_getter(token), client_id="my-app")
        >>> page = api.list_chats(limit=10)
        >>> for summary in page.chats_summary:
        ...     print(summary.id)
    """

    NAMESPACE = "agent"

    def __init__(
        self,
        token_getter: TokenGetter | None,
        *,
        client_id: str = "",
        http_client: httpx.Client | None = None,
        config: APIConfig | None = None,
    ) -> None:
        super().__init__(
            token_getter,
            namespace_endpoint(self.NAMESPACE),
            config=config if config is not None else APIConfig(client_id=client_id),
            http_client=http_client,
        )

    def set_author_id(self, author_id: str) -> None:
        """Act on behalf of another author, e.g. send events as a bot."""
        self.set_custom_header(AUTHOR_ID_HEADER, author_id)

    # === Chats ===

    def list_chats(
        self,
        filters: ChatsFilters | None = None,
        sort_order: str | None = None,
        page_id: str | None = None,
        limit: int | None = None,
    ) -> ListChatsResponse:
        """Return one page of chat summaries."""
        return self.call(
            "list_chats",
            ListChatsRequest(
                filters=filters, sort_order=sort_order, page_id=page_id, limit=limit
            ),
            ListChatsResponse,
        )

    def get_chat(self, chat_id: str, thread_id: str | None = None) -> Chat:
        """Return a chat with the given thread, or its latest thread."""
        return self.call(
            "get_chat", GetChatRequest(chat_id=chat_id, thread_id=thread_id), Chat
        )

    def list_threads(
        self,
        chat_id: str,
        sort_order: str | None = None,
        page_id: str | None = None,
        limit: int | None = None,
        min_events_count: int | None = None,
        filters: ThreadsFilters | None = None,
    ) -> ListThreadsResponse:
        return self.call(
            "list_threads",
            ListThreadsRequest(
                chat_id=chat_id,
                sort_order=sort_order,
                page_id=page_id,
                limit=limit,
                min_events_count=min_events_count,
                filters=filters,
            ),
            ListThreadsResponse,
        )

    def list_archives(
        self,
        filters: ArchivesFilters | None = None,
        page_id: str | None = None,
        limit: int | None = None,
    ) -> ListArchivesResponse:
        return self.call(
            "list_archives",
            ListArchivesRequest(filters=filters, page_id=page_id, limit=limit),
            ListArchivesResponse,
        )

    def start_chat(
        self,
        initial_chat: InitialChat | None = None,
        continuous: bool = False,
        active: bool = True,
    ) -> StartChatResponse:
        """
        Start a new chat.

        Raises:
            ValidationError: If the initial thread holds an unsupported event.
        """
        if initial_chat is not None:
            initial_chat.validate_events()
        return self.call(
            "start_chat",
            StartChatRequest(
                chat=initial_chat, continuous=continuous or None, active=active
            ),
            StartChatResponse,
        )

    def resume_chat(
        self,
        initial_chat: InitialChat,
        continuous: bool = False,
        active: bool = True,
    ) -> ResumeChatResponse:
        """
        Start a new thread in the existing chat ``initial_chat.id``.

        Raises:
            ValidationError: If the initial thread holds an unsupported event.
        """
        initial_chat.validate_events()
        return self.call(
            "resume_chat",
            ResumeChatRequest(
                chat=initial_chat, continuous=continuous or None, active=active
            ),
            ResumeChatResponse,
        )

    def deactivate_chat(
        self, chat_id: str, ignore_requester_presence: bool = False
    ) -> None:
        """Deactivate the active thread of a chat. No-op without an active thread."""
        self.call(
            "deactivate_chat",
            DeactivateChatRequest(
                id=chat_id, ignore_requester_presence=ignore_requester_presence or None
            ),
            EmptyResponse,
        )

    def follow_chat(self, chat_id: str) -> None:
        self.call("follow_chat", ChatIDRequest(id=chat_id), EmptyResponse)

    def unfollow_chat(self, chat_id: str) -> None:
        self.call("unfollow_chat", ChatIDRequest(id=chat_id), EmptyResponse)

    def transfer_chat(
        self,
        chat_id: str,
        target_type: str = "",
        ids: Iterable[Any] = (),
        options: TransferChatOptions | None = None,
    ) -> None:
        """
        Transfer a chat to agents or groups.

        The target is omitted when neither a type nor ids are given, letting
        the API pick the target.
        """
        id_list = list(ids)
        target = (
            TransferTarget(type=target_type, ids=id_list)
            if target_type or id_list
            else None
        )
        self.call(
            "transfer_chat",
            TransferChatRequest(
                id=chat_id,
                target=target,
                **(options.to_wire() if options is not None else {}),
            ),
            EmptyResponse,
        )

    def add_user_to_chat(
        self,
        chat_id: str,
        user_id: str,
        user_type: str,
        visibility: str,
        ignore_requester_presence: bool = False,
    ) -> None:
        """Add a user to a chat. A chat holds at most one customer."""
        self.call(
            "add_user_to_chat",
            AddUserToChatRequest(
                chat_id=chat_id,
                user_id=user_id,
                user_type=user_type,
                visibility=visibility,
                ignore_requester_presence=ignore_requester_presence or None,
            ),
            EmptyResponse,
        )

    def remove_user_from_chat(
        self,
        chat_id: str,
        user_id: str,
        user_type: str,
        ignore_requester_presence: bool = False,
    ) -> None:
        self.call(
            "remove_user_from_chat",
            RemoveUserFromChatRequest(
                chat_id=chat_id,
                user_id=user_id,
                user_type=user_type,
                ignore_requester_presence=ignore_requester_presence or None,
            ),
            EmptyResponse,
        )

    # === Events ===

    def send_event(
        self, chat_id: str, event: Event, attach_to_last_thread: bool = False
    ) -> str:
        """
        Send an event to a chat and return its id.

        Supported events are Event, Message, File, SystemMessage and
        RichMessage.

        Raises:
            ValidationError: If the event type is not supported.
        """
        validate_event(event)
        response = self.call(
            "send_event",
            SendEventRequest(
                chat_id=chat_id,
                event=event,
                attach_to_last_thread=attach_to_last_thread or None,
            ),
            SendEventResponse,
        )
        return response.event_id

    def send_rich_message_postback(
        self,
        chat_id: str,
        event_id: str,
        thread_id: str,
        postback_id: str,
        toggled: bool,
    ) -> None:
        self.call(
            "send_rich_message_postback",
            SendRichMessagePostbackRequest(
                chat_id=chat_id,
                event_id=event_id,
                thread_id=thread_id,
                postback=RichMessagePostback(id=postback_id, toggled=toggled),
            ),
            EmptyResponse,
        )

    def mark_events_as_seen(self, chat_id: str, seen_up_to: datetime) -> None:
        """
        Mark events of a chat up to ``seen_up_to`` as seen by the requester.

        Naive datetimes are taken as UTC.
        """
        if seen_up_to.tzinfo is None:
            seen_up_to = seen_up_to.replace(tzinfo=timezone.utc)
        self.call(
            "mark_events_as_seen",
            MarkEventsAsSeenRequest(chat_id=chat_id, seen_up_to=seen_up_to.isoformat()),
            EmptyResponse,
        )

    def send_typing_indicator(
        self, chat_id: str, is_typing: bool, visibility: str | None = None
    ) -> None:
        self.call(
            "send_typing_indicator",
            SendTypingIndicatorRequest(
                chat_id=chat_id, visibility=visibility, is_typing=is_typing
            ),
            EmptyResponse,
        )

    def multicast(
        self,
        recipients: MulticastRecipients,
        content: Any,
        multicast_type: str | None = None,
    ) -> None:
        """Send chat-unrelated content to agents or customers. Not persisted."""
        self.call(
            "multicast",
            MulticastRequest(recipients=recipients, content=content, type=multicast_type),
            EmptyResponse,
        )

    # === Properties and tags ===

    def update_chat_properties(self, chat_id: str, properties: Properties) -> None:
        self.call(
            "update_chat_properties",
            UpdateChatPropertiesRequest(id=chat_id, properties=properties),
            EmptyResponse,
        )

    def delete_chat_properties(
        self, chat_id: str, properties: dict[str, list[str]]
    ) -> None:
        self.call(
            "delete_chat_properties",
            DeleteChatPropertiesRequest(id=chat_id, properties=properties),
            EmptyResponse,
        )

    def update_thread_properties(
        self, chat_id: str, thread_id: str, properties: Properties
    ) -> None:
        self.call(
            "update_thread_properties",
            UpdateThreadPropertiesRequest(
                chat_id=chat_id, thread_id=thread_id, properties=properties
            ),
            EmptyResponse,
        )

    def delete_thread_properties(
        self, chat_id: str, thread_id: str, properties: dict[str, list[str]]
    ) -> None:
        self.call(
            "delete_thread_properties",
            DeleteThreadPropertiesRequest(
                chat_id=chat_id, thread_id=thread_id, properties=properties
            ),
            EmptyResponse,
        )

    def update_event_properties(
        self, chat_id: str, thread_id: str, event_id: str, properties: Properties
    ) -> None:
        self.call(
            "update_event_properties",
            UpdateEventPropertiesRequest(
                chat_id=chat_id,
                thread_id=thread_id,
                event_id=event_id,
                properties=properties,
            ),
            EmptyResponse,
        )

    def delete_event_properties(
        self,
        chat_id: str,
        thread_id: str,
        event_id: str,
        properties: dict[str, list[str]],
    ) -> None:
        self.call(
            "delete_event_properties",
            DeleteEventPropertiesRequest(
                chat_id=chat_id,
                thread_id=thread_id,
                event_id=event_id,
                properties=properties,
            ),
            EmptyResponse,
        )

    def tag_thread(self, chat_id: str, thread_id: str, tag: str) -> None:
        self.call(
            "tag_thread",
            ThreadTagRequest(chat_id=chat_id, thread_id=thread_id, tag=tag),
            EmptyResponse,
        )

    def untag_thread(self, chat_id: str, thread_id: str, tag: str) -> None:
        self.call(
            "untag_thread",
            ThreadTagRequest(chat_id=chat_id, thread_id=thread_id, tag=tag),
            EmptyResponse,
        )

    # === Customers ===

    def get_customer(self, customer_id: str) -> Customer:
        return self.call("get_customer", ChatIDRequest(id=customer_id), Customer)

    def create_customer(
        self,
        name: str | None = None,
        email: str | None = None,
        avatar: str | None = None,
        session_fields: list[dict[str, str]] | None = None,
    ) -> str:
        """Create a customer and return its id."""
        response = self.call(
            "create_customer",
            CustomerFields(
                name=name, email=email, avatar=avatar, session_fields=session_fields
            ),
            CreateCustomerResponse,
        )
        return response.customer_id

    def update_customer(
        self,
        customer_id: str,
        name: str | None = None,
        email: str | None = None,
        avatar: str | None = None,
        session_fields: list[dict[str, str]] | None = None,
    ) -> None:
        self.call(
            "update_customer",
            UpdateCustomerRequest(
                id=customer_id,
                name=name,
                email=email,
                avatar=avatar,
                session_fields=session_fields,
            ),
            EmptyResponse,
        )

    def ban_customer(self, customer_id: str, days: int) -> None:
        """Ban a customer for the given number of days."""
        self.call(
            "ban_customer",
            BanCustomerRequest(id=customer_id, ban=Ban(days=days)),
            EmptyResponse,
        )

    def follow_customer(self, customer_id: str) -> None:
        self.call("follow_customer", ChatIDRequest(id=customer_id), EmptyResponse)

    def unfollow_customer(self, customer_id: str) -> None:
        self.call("unfollow_customer", ChatIDRequest(id=customer_id), EmptyResponse)

    # === Routing ===

    def set_routing_status(self, status: str, agent_id: str | None = None) -> None:
        """Change the routing status of the requester, or of ``agent_id``."""
        self.call(
            "set_routing_status",
            SetRoutingStatusRequest(agent_id=agent_id, status=status),
            EmptyResponse,
        )

    def list_agents_for_transfer(self, chat_id: str) -> list[AgentForTransfer]:
        return self.call(
            "list_agents_for_transfer",
            ListAgentsForTransferRequest(chat_id=chat_id),
            list[AgentForTransfer],
        )

    def list_routing_statuses(
        self, group_ids: Iterable[int] | None = None
    ) -> list[AgentStatus]:
        return self.call(
            "list_routing_statuses",
            ListRoutingStatusesRequest(
                filters=RoutingStatusesFilter(
                    group_ids=list(group_ids) if group_ids is not None else None
                )
            ),
            list[AgentStatus],
        )


__all__ = ["AUTHOR_ID_HEADER", "AgentAPI"]
