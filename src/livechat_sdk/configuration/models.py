# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request and response models of the Configuration API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field
from typing_extensions import Self

from ..models.common import Properties, WireModel


class GroupPriority(str, Enum):
    """Routing priority of an agent or bot within a group."""

    FIRST = "first"
    NORMAL = "normal"
    LAST = "last"
    # Allowed only as a bot's default group priority.
    DO_NOT_ASSIGN = "supervisor"


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


# === Webhooks ===


class UserIDsFilter(WireModel):
    values: list[str] | None = None
    exclude_values: list[str] | None = None


class ChatPresenceFilter(WireModel):
    """Trigger webhooks based on who is present in the chat."""

    user_ids: UserIDsFilter | None = None
    my_bots: bool | None = None

    def with_my_bots(self) -> Self:
        """Trigger when any bot owned by the integration is in the chat."""
        self.my_bots = True
        return self

    def with_user_ids(self, user_ids: list[str], inclusive: bool = True) -> Self:
        """Trigger when any of ``user_ids`` is present (or, if not ``inclusive``, absent)."""
        if inclusive:
            self.user_ids = UserIDsFilter(values=list(user_ids))
        else:
            self.user_ids = UserIDsFilter(exclude_values=list(user_ids))
        return self


class WebhookFilters(WireModel):
    author_type: str | None = None
    only_my_chats: bool | None = None
    chat_presence: ChatPresenceFilter | None = None
    source_type: list[str] | None = None


class WebhookDefinition(WireModel):
    """A webhook to register."""

    action: str
    secret_key: str
    url: str
    type: str
    additional_data: list[str] | None = None
    description: str | None = None
    filters: WebhookFilters | None = None


class RegisteredWebhook(WebhookDefinition):
    id: str
    owner_client_id: str = ""


class WebhookData(WireModel):
    """A webhook available in an API version."""

    action: str
    additional_data: list[str] | None = None
    filters: list[str] | None = None


class WebhooksState(WireModel):
    enabled: bool = Field(default=False, alias="license_webhooks_enabled")


class RegisterWebhookRequest(WebhookDefinition):
    owner_client_id: str | None = None


class OwnerRequest(WireModel):
    owner_client_id: str | None = None


class UnregisterWebhookRequest(OwnerRequest):
    id: str


class ListWebhookNamesRequest(WireModel):
    version: str | None = None


# === Bots and agents ===


class GroupConfig(WireModel):
    """Membership and priority of an agent or bot in a group."""

    id: int
    priority: GroupPriority


class Schedule(WireModel):
    enabled: bool
    day: Weekday
    start: str
    end: str


class WorkScheduler(WireModel):
    timezone: str
    schedule: list[Schedule] = []


class BotOptions(WireModel):
    """Optional fields of ``create_bot`` and ``update_bot``."""

    avatar: str | None = None
    default_group_priority: GroupPriority | None = None
    job_title: str | None = None
    max_chats_count: int | None = None
    groups: list[GroupConfig] | None = None
    owner_client_id: str | None = None
    work_scheduler: WorkScheduler | None = None


class Bot(BotOptions):
    id: str
    name: str | None = None


class CreateBotRequest(BotOptions):
    name: str


class UpdateBotRequest(BotOptions):
    id: str
    name: str | None = None


class IDRequest(WireModel):
    id: str


class GetWithFieldsRequest(IDRequest):
    fields: list[str] | None = None


class ListBotsRequest(WireModel):
    all: bool
    fields: list[str] | None = None


class AgentFields(WireModel):
    """Configurable agent fields."""

    name: str | None = None
    role: str | None = None
    avatar: str | None = None
    job_title: str | None = None
    mobile: str | None = None
    max_chats_count: int | None = None
    awaiting_approval: bool | None = None
    suspended: bool | None = None
    groups: list[GroupConfig] | None = None
    work_scheduler: WorkScheduler | None = None
    notifications: list[str] | None = None
    email_subscriptions: list[str] | None = None


class Agent(AgentFields):
    id: str
    account_id: str | None = None
    last_logout: str | None = None


class AgentsFilters(WireModel):
    group_ids: list[int]


class ListAgentsRequest(WireModel):
    filters: AgentsFilters | None = None
    fields: list[str] | None = None


class CreatedResponse(WireModel):
    id: str


# === Groups ===


class Group(WireModel):
    id: int
    name: str = ""
    language_code: str = ""
    agent_priorities: dict[str, GroupPriority] = {}
    routing_status: str = ""


class CreateGroupRequest(WireModel):
    name: str
    agent_priorities: dict[str, GroupPriority]
    language_code: str | None = None


class UpdateGroupRequest(WireModel):
    id: int
    name: str | None = None
    language_code: str | None = None
    agent_priorities: dict[str, GroupPriority] | None = None


class GroupIDRequest(WireModel):
    id: int


class GetGroupRequest(GroupIDRequest):
    fields: list[str] | None = None


class ListGroupsRequest(WireModel):
    fields: list[str] | None = None


class CreateGroupResponse(WireModel):
    id: int


# === Properties ===


class PropertyAccess(WireModel):
    agent: list[str] = []
    customer: list[str] = []


class PropertyRange(WireModel):
    from_: int = Field(alias="from")
    to: int


class PropertyConfig(WireModel):
    """Definition of a private property."""

    name: str
    type: str
    access: dict[str, PropertyAccess]
    owner_client_id: str | None = None
    description: str | None = None
    domain: list[Any] | None = None
    range: PropertyRange | None = None
    public_access: list[str] | None = None
    default_value: Any = None


class UnregisterPropertyRequest(OwnerRequest):
    name: str


class PublishPropertyRequest(OwnerRequest):
    name: str
    access_type: list[str]


class PropertiesQuery(WireModel):
    namespace: str | None = None
    name_prefix: str | None = None


class ListGroupsPropertiesRequest(PropertiesQuery):
    group_ids: list[int]


class GroupProperties(WireModel):
    id: int
    properties: Properties = {}


class UpdateLicensePropertiesRequest(WireModel):
    properties: Properties


class UpdateGroupPropertiesRequest(GroupIDRequest):
    properties: Properties


class DeleteLicensePropertiesRequest(WireModel):
    properties: dict[str, list[str]]


class DeleteGroupPropertiesRequest(GroupIDRequest):
    properties: dict[str, list[str]]


# === Auto access ===


class Match(WireModel):
    value: str
    exact_match: bool | None = None


class Condition(WireModel):
    values: list[Match] = []
    exclude_values: list[Match] = []


class GeolocationMatch(WireModel):
    country: str | None = None
    country_code: str | None = None
    region: str | None = None
    city: str | None = None


class GeolocationCondition(WireModel):
    values: list[GeolocationMatch] = []


class AutoAccessConditions(WireModel):
    """At least one of ``url``, ``domain`` or ``geolocation`` must be set."""

    url: Condition | None = None
    domain: Condition | None = None
    geolocation: GeolocationCondition | None = None


class AutoAccessGroups(WireModel):
    groups: list[int]


class AutoAccess(WireModel):
    id: str
    access: AutoAccessGroups
    conditions: AutoAccessConditions
    description: str | None = None
    next_id: str | None = None


class AddAutoAccessRequest(WireModel):
    access: AutoAccessGroups
    conditions: AutoAccessConditions
    description: str | None = None
    next_id: str | None = None


class UpdateAutoAccessRequest(WireModel):
    id: str
    access: AutoAccessGroups | None = None
    conditions: AutoAccessConditions | None = None
    description: str | None = None
    next_id: str | None = None


# === License ===


class PlanLimit(WireModel):
    resource: str
    limit_balance: int
    id: str | None = None


class ChannelActivity(WireModel):
    channel_type: str
    channel_subtype: str = ""
    first_activity_timestamp: str = ""


class PlanRequest(WireModel):
    plan: str


class Tag(WireModel):
    name: str
    group_ids: list[int] = []
    created_at: str = ""
    author_id: str = ""


class TagRequest(WireModel):
    name: str
    group_ids: list[int] | None = None


class GroupIDsRequest(WireModel):
    group_ids: list[int]


class ReactivateEmailRequest(WireModel):
    agent_id: str


class CompanyDetails(WireModel):
    invoice_name: str | None = None
    company: str | None = None
    street: str | None = None
    postal_code: str | None = None
    city: str | None = None
    country: str | None = None
    nip: str | None = None
    state: str | None = None
    province: str | None = None
    phone: str | None = None
    url: str | None = None
    invoice_email: str | None = None
    company_size: str | None = None
    chat_purpose: str | None = None
    audience: str | None = None
    industry: str | None = None


class UpdateCompanyDetailsRequest(CompanyDetails):
    enrich: bool


__all__ = [
    "Agent",
    "AgentFields",
    "AutoAccess",
    "AutoAccessConditions",
    "AutoAccessGroups",
    "Bot",
    "BotOptions",
    "ChannelActivity",
    "ChatPresenceFilter",
    "CompanyDetails",
    "Condition",
    "GeolocationCondition",
    "GeolocationMatch",
    "Group",
    "GroupConfig",
    "GroupPriority",
    "GroupProperties",
    "Match",
    "PlanLimit",
    "PropertyAccess",
    "PropertyConfig",
    "PropertyRange",
    "RegisteredWebhook",
    "Schedule",
    "Tag",
    "UserIDsFilter",
    "WebhookData",
    "WebhookDefinition",
    "WebhookFilters",
    "WebhooksState",
    "Weekday",
    "WorkScheduler",
]
