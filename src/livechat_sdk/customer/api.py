# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Customer Chat API client.

Requests go to the ``customer`` namespace with the organization id of the
token in the query string.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

import httpx

from ..api.config import APIConfig
from ..api.endpoints import organization_endpoint
from ..api.web_api import FileUploadWebAPI
from ..authorization import TokenGetter
from ..models.chats import Chat, InitialChat
from ..models.common import EmptyResponse, Properties
from ..models.events import Event, Message, SystemMessage, validate_event
from ..models.users import Customer
from ..types.call import GET
from .models import (
    AcceptGreetingRequest,
    CancelGreetingRequest,
    ChatIDRequest,
    CheckGoalsRequest,
    Configuration,
    DeleteChatPropertiesRequest,
    DeleteEventPropertiesRequest,
    DeleteThreadPropertiesRequest,
    DynamicConfiguration,
    FormType,
    GetChatRequest,
    GetConfigurationQuery,
    GetDynamicConfigurationQuery,
    GetFormRequest,
    GetFormResponse,
    GetLocalizationQuery,
    GetPredictedAgentRequest,
    GetURLInfoRequest,
    ListChatsResponse,
    ListGroupPropertiesQuery,
    ListGroupStatusesRequest,
    ListGroupStatusesResponse,
    ListLicensePropertiesQuery,
    ListThreadsRequest,
    ListThreadsResponse,
    MarkEventsAsSeenRequest,
    Pagination,
    PredictedAgent,
    Recipients,
    RequestEmailVerificationRequest,
    ResumeChatRequest,
    ResumeChatResponse,
    RichMessagePostback,
    SendEventRequest,
    SendEventResponse,
    SendRichMessagePostbackRequest,
    SessionFieldsRequest,
    SneakPeekRequest,
    StartChatRequest,
    StartChatResponse,
    UpdateChatPropertiesRequest,
    UpdateCustomerRequest,
    UpdateEventPropertiesRequest,
    UpdateThreadPropertiesRequest,
    URLInfo,
)


class CustomerAPI(FileUploadWebAPI):
    """
    Client for the Customer Chat API.

    The token must carry the organization id; it is sent as the
    ``organization_id`` query parameter of every request.

    Example:
        >>> api = CustomerAPI(static_token_getter(token), client_id="my-app")
        >>> started = api.start_chat()
        >>> api.send_message(started.chat_id, "Hello!")
    """

    NAMESPACE = "customer"

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
            organization_endpoint(self.NAMESPACE),
            config=config if config is not None else APIConfig(client_id=client_id),
            http_client=http_client,
        )

    # === Chats ===

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
        initial_chat.validate_events()
        return self.call(
            "resume_chat",
            ResumeChatRequest(
                chat=initial_chat, continuous=continuous or None, active=active
            ),
            ResumeChatResponse,
        )

    def list_chats(
        self,
        sort_order: str | None = None,
        page_id: str | None = None,
        limit: int | None = None,
    ) -> ListChatsResponse:
        return self.call(
            "list_chats",
            Pagination(sort_order=sort_order, page_id=page_id, limit=limit),
            ListChatsResponse,
        )

    def get_chat(self, chat_id: str, thread_id: str | None = None) -> Chat:
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
    ) -> ListThreadsResponse:
        return self.call(
            "list_threads",
            ListThreadsRequest(
                chat_id=chat_id,
                sort_order=sort_order,
                page_id=page_id,
                limit=limit,
                min_events_count=min_events_count,
            ),
            ListThreadsResponse,
        )

    def deactivate_chat(self, chat_id: str) -> None:
        self.call("deactivate_chat", ChatIDRequest(id=chat_id), EmptyResponse)

    # === Events ===

    def send_event(
        self, chat_id: str, event: Event, attach_to_last_thread: bool = False
    ) -> str:
        """
        Send an event to a chat and return its id.

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

    def send_message(
        self, chat_id: str, text: str, recipients: Recipients | str = Recipients.ALL
    ) -> str:
        """Send a plain text message and return its event id."""
        return self.send_event(
            chat_id, Message(text=text, recipients=Recipients(recipients).value)
        )

    def send_system_message(
        self,
        chat_id: str,
        text: str,
        message_type: str,
        text_vars: Mapping[str, str] | None = None,
        recipients: Recipients | str = Recipients.ALL,
        attach_to_last_thread: bool = False,
    ) -> str:
        event = SystemMessage(
            text=text,
            system_message_type=message_type,
            text_vars=dict(text_vars) if text_vars is not None else None,
            recipients=Recipients(recipients).value,
        )
        return self.send_event(chat_id, event, attach_to_last_thread)

    def send_rich_message_postback(
        self,
        chat_id: str,
        thread_id: str,
        event_id: str,
        postback_id: str,
        toggled: bool,
    ) -> None:
        self.call(
            "send_rich_message_postback",
            SendRichMessagePostbackRequest(
                chat_id=chat_id,
                thread_id=thread_id,
                event_id=event_id,
                postback=RichMessagePostback(id=postback_id, toggled=toggled),
            ),
            EmptyResponse,
        )

    def send_sneak_peek(self, chat_id: str, text: str) -> None:
        """Show the agents what the customer is typing. Not persisted."""
        self.call(
            "send_sneak_peek",
            SneakPeekRequest(chat_id=chat_id, sneak_peek_text=text),
            EmptyResponse,
        )

    def mark_events_as_seen(self, chat_id: str, seen_up_to: datetime) -> None:
        if seen_up_to.tzinfo is None:
            seen_up_to = seen_up_to.replace(tzinfo=timezone.utc)
        self.call(
            "mark_events_as_seen",
            MarkEventsAsSeenRequest(chat_id=chat_id, seen_up_to=seen_up_to.isoformat()),
            EmptyResponse,
        )

    # === Properties ===

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

    def list_license_properties(
        self, namespace: str | None = None, name: str | None = None
    ) -> Properties:
        return self.call(
            "list_license_properties",
            ListLicensePropertiesQuery(namespace=namespace, name=name),
            Properties,
            GET,
        )

    def list_group_properties(
        self, group_id: int, namespace: str | None = None, name: str | None = None
    ) -> Properties:
        return self.call(
            "list_group_properties",
            ListGroupPropertiesQuery(id=group_id, namespace=namespace, name=name),
            Properties,
            GET,
        )

    # === Customer ===

    def get_customer(self) -> Customer:
        """Return the customer the token belongs to."""
        return self.call("get_customer", None, Customer)

    def update_customer(
        self,
        name: str | None = None,
        email: str | None = None,
        avatar: str | None = None,
        session_fields: list[dict[str, str]] | None = None,
    ) -> None:
        self.call(
            "update_customer",
            UpdateCustomerRequest(
                name=name, email=email, avatar=avatar, session_fields=session_fields
            ),
            EmptyResponse,
        )

    def set_customer_session_fields(self, session_fields: list[dict[str, str]]) -> None:
        self.call(
            "set_customer_session_fields",
            SessionFieldsRequest(session_fields=session_fields),
            EmptyResponse,
        )

    def request_email_verification(self, callback_uri: str) -> None:
        self.call(
            "request_email_verification",
            RequestEmailVerificationRequest(callback_uri=callback_uri),
            EmptyResponse,
        )

    def list_group_statuses(
        self, group_ids: Iterable[int] | None = None
    ) -> dict[int, str]:
        """
        Return the status of each group.

        Every group of the license is listed when ``group_ids`` is None.
        """
        if group_ids is None:
            request = ListGroupStatusesRequest(all=True)
        else:
            request = ListGroupStatusesRequest(group_ids=list(group_ids))
        response = self.call(
            "list_group_statuses", request, ListGroupStatusesResponse
        )
        return response.groups_status

    def check_goals(
        self, page_url: str, group_id: int, session_fields: Mapping[str, str]
    ) -> None:
        self.call(
            "check_goals",
            CheckGoalsRequest(
                page_url=page_url, group_id=group_id, session_fields=dict(session_fields)
            ),
            EmptyResponse,
        )

    def get_form(self, group_id: int, form_type: FormType | str) -> GetFormResponse:
        """Return the form of the given type and whether it is enabled."""
        return self.call(
            "get_form",
            GetFormRequest(group_id=group_id, type=FormType(form_type)),
            GetFormResponse,
        )

    def get_predicted_agent(self, group_id: int | None = None) -> PredictedAgent:
        return self.call(
            "get_predicted_agent",
            GetPredictedAgentRequest(group_id=group_id),
            PredictedAgent,
        )

    def get_url_info(self, url: str) -> URLInfo:
        return self.call("get_url_info", GetURLInfoRequest(url=url), URLInfo)

    def accept_greeting(self, greeting_id: int, unique_id: str) -> None:
        self.call(
            "accept_greeting",
            AcceptGreetingRequest(greeting_id=greeting_id, unique_id=unique_id),
            EmptyResponse,
        )

    def cancel_greeting(self, unique_id: str) -> None:
        self.call(
            "cancel_greeting",
            CancelGreetingRequest(unique_id=unique_id),
            EmptyResponse,
        )

    # === Widget configuration ===

    def get_dynamic_configuration(
        self,
        group_id: int | None = None,
        url: str | None = None,
        channel_type: str | None = None,
        test: bool = False,
    ) -> DynamicConfiguration:
        return self.call(
            "get_dynamic_configuration",
            GetDynamicConfigurationQuery(
                group_id=group_id, url=url, channel_type=channel_type, test=test or None
            ),
            DynamicConfiguration,
            GET,
        )

    def get_configuration(
        self, group_id: int | None = None, version: str | None = None
    ) -> Configuration:
        """Return the widget configuration of a group at ``version``."""
        return self.call(
            "get_configuration",
            GetConfigurationQuery(group_id=group_id, version=version),
            Configuration,
            GET,
        )

    def get_localization(
        self,
        group_id: int | None = None,
        language: str | None = None,
        version: str | None = None,
    ) -> dict[str, str]:
        return self.call(
            "get_localization",
            GetLocalizationQuery(group_id=group_id, language=language, version=version),
            dict[str, str],
            GET,
        )


__all__ = ["CustomerAPI"]
