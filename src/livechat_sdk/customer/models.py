# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request and response models of the Customer Chat API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from ..models.chats import ChatSummary, InitialChat, Thread
from ..models.common import Properties, WireModel


class FormType(str, Enum):
    PRECHAT = "prechat"
    POSTCHAT = "postchat"
    TICKET = "ticket"


class Recipients(str, Enum):
    """Audience of an event."""

    ALL = "all"
    AGENTS = "agents"


# === Requests ===


class Pagination(WireModel):
    page_id: str | None = None
    limit: int | None = None
    sort_order: str | None = None


class ListThreadsRequest(Pagination):
    chat_id: str
    min_events_count: int | None = None


class ChatRequest(WireModel):
    chat_id: str


class ChatIDRequest(WireModel):
    id: str


class GetChatRequest(ChatRequest):
    thread_id: str | None = None


class StartChatRequest(WireModel):
    chat: InitialChat | None = None
    continuous: bool | None = None
    active: bool


class ResumeChatRequest(WireModel):
    chat: InitialChat
    continuous: bool | None = None
    active: bool


class SendEventRequest(ChatRequest):
    event: Any
    attach_to_last_thread: bool | None = None


class SneakPeekRequest(ChatRequest):
    sneak_peek_text: str


class RichMessagePostback(WireModel):
    id: str
    toggled: bool


class SendRichMessagePostbackRequest(ChatRequest):
    thread_id: str
    event_id: str
    postback: RichMessagePostback


class UpdateChatPropertiesRequest(WireModel):
    id: str
    properties: Properties


class DeleteChatPropertiesRequest(WireModel):
    id: str
    properties: dict[str, list[str]]


class UpdateThreadPropertiesRequest(ChatRequest):
    thread_id: str
    properties: Properties


class DeleteThreadPropertiesRequest(ChatRequest):
    thread_id: str
    properties: dict[str, list[str]]


class UpdateEventPropertiesRequest(UpdateThreadPropertiesRequest):
    event_id: str


class DeleteEventPropertiesRequest(DeleteThreadPropertiesRequest):
    event_id: str


class UpdateCustomerRequest(WireModel):
    name: str | None = None
    email: str | None = None
    avatar: str | None = None
    session_fields: list[dict[str, str]] | None = None


class SessionFieldsRequest(WireModel):
    session_fields: list[dict[str, str]]


class ListGroupStatusesRequest(WireModel):
    all: bool | None = None
    group_ids: list[int] | None = None


class CheckGoalsRequest(WireModel):
    page_url: str
    group_id: int
    session_fields: dict[str, str]


class GetFormRequest(WireModel):
    group_id: int
    type: FormType


class GetPredictedAgentRequest(WireModel):
    group_id: int | None = None


class GetURLInfoRequest(WireModel):
    url: str


class MarkEventsAsSeenRequest(ChatRequest):
    seen_up_to: str


class RequestEmailVerificationRequest(WireModel):
    callback_uri: str


class AcceptGreetingRequest(WireModel):
    greeting_id: int
    unique_id: str


class CancelGreetingRequest(WireModel):
    unique_id: str


class ListLicensePropertiesQuery(WireModel):
    namespace: str | None = None
    name: str | None = None


class ListGroupPropertiesQuery(ListLicensePropertiesQuery):
    id: int


class GetDynamicConfigurationQuery(WireModel):
    group_id: int | None = None
    url: str | None = None
    channel_type: str | None = None
    test: bool | None = None


class GetConfigurationQuery(WireModel):
    group_id: int | None = None
    version: str | None = None


class GetLocalizationQuery(WireModel):
    group_id: int | None = None
    language: str | None = None
    version: str | None = None


# === Responses ===


class StartChatResponse(WireModel):
    chat_id: str = ""
    thread_id: str = ""
    event_ids: list[str] = []


class ResumeChatResponse(WireModel):
    thread_id: str = ""
    event_ids: list[str] = []


class SendEventResponse(WireModel):
    event_id: str


class ListChatsResponse(WireModel):
    chats_summary: list[ChatSummary] = []
    total_chats: int = 0
    previous_page_id: str | None = None
    next_page_id: str | None = None


class ListThreadsResponse(WireModel):
    threads: list[Thread] = []
    found_threads: int = 0
    previous_page_id: str | None = None
    next_page_id: str | None = None


class ListGroupStatusesResponse(WireModel):
    groups_status: dict[int, str] = {}


class FormFieldOption(WireModel):
    id: str = ""
    group_id: int = 0
    label: str = ""


class FormField(WireModel):
    id: str = ""
    type: str = ""
    label: str = ""
    required: bool = False
    options: list[FormFieldOption] = []


class Form(WireModel):
    """Schema of a custom form: ticket, prechat or postchat survey."""

    id: str = ""
    fields: list[FormField] = []


class GetFormResponse(WireModel):
    form: Form | None = None
    enabled: bool = False


class PredictedAgentDetails(WireModel):
    id: str = ""
    name: str = ""
    avatar: str = ""
    is_bot: bool = False
    job_title: str = ""
    type: str = ""


class PredictedAgent(WireModel):
    agent: PredictedAgentDetails
    queue: bool = False


class URLInfo(WireModel):
    """OpenGraph information of a URL."""

    title: str = ""
    description: str = ""
    url: str = ""
    image_url: str = ""
    image_original_url: str = ""
    image_width: int = 0
    image_height: int = 0


class DynamicConfiguration(WireModel):
    group_id: int = 0
    organization_id: str = ""
    client_limit_exceeded: bool = False
    domain_allowed: bool = False
    config_version: str = ""
    localization_version: str = ""
    language: str = ""


class ConfigButton(WireModel):
    id: str = ""
    type: str = ""
    online_value: str = ""
    offline_value: str = ""


class ConfigurationProperties(WireModel):
    group: Properties = {}
    license: Properties = {}


class Configuration(WireModel):
    """Chat widget configuration of a group."""

    buttons: list[ConfigButton] = []
    ticket_form: Form | None = None
    prechat_form: Form | None = None
    allowed_domains: list[str] | None = None
    integrations: dict[str, Any] = {}
    properties: ConfigurationProperties = Field(default_factory=ConfigurationProperties)


__all__ = [
    "ConfigButton",
    "Configuration",
    "ConfigurationProperties",
    "DynamicConfiguration",
    "Form",
    "FormField",
    "FormFieldOption",
    "FormType",
    "GetFormResponse",
    "ListChatsResponse",
    "ListThreadsResponse",
    "PredictedAgent",
    "PredictedAgentDetails",
    "Recipients",
    "ResumeChatResponse",
    "StartChatResponse",
    "URLInfo",
]
