# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration API client.

Manages the license setup: webhooks, bots, agents, groups, properties,
auto access rules and tags.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from ..api.config import APIConfig
from ..api.endpoints import namespace_endpoint
from ..api.web_api import WebAPI
from ..authorization import TokenGetter
from ..exceptions import ValidationError
from ..models.common import EmptyResponse, Properties
from .models import (
    AddAutoAccessRequest,
    Agent,
    AgentFields,
    AgentsFilters,
    AutoAccess,
    AutoAccessConditions,
    AutoAccessGroups,
    Bot,
    BotOptions,
    ChannelActivity,
    CompanyDetails,
    CreateBotRequest,
    CreatedResponse,
    CreateGroupRequest,
    CreateGroupResponse,
    DeleteGroupPropertiesRequest,
    DeleteLicensePropertiesRequest,
    GetGroupRequest,
    GetWithFieldsRequest,
    Group,
    GroupConfig,
    GroupIDRequest,
    GroupIDsRequest,
    GroupPriority,
    GroupProperties,
    IDRequest,
    ListAgentsRequest,
    ListBotsRequest,
    ListGroupsPropertiesRequest,
    ListGroupsRequest,
    ListWebhookNamesRequest,
    OwnerRequest,
    PlanLimit,
    PlanRequest,
    PropertiesQuery,
    PropertyConfig,
    PublishPropertyRequest,
    ReactivateEmailRequest,
    RegisteredWebhook,
    RegisterWebhookRequest,
    Tag,
    TagRequest,
    UnregisterPropertyRequest,
    UnregisterWebhookRequest,
    UpdateAutoAccessRequest,
    UpdateBotRequest,
    UpdateCompanyDetailsRequest,
    UpdateGroupPropertiesRequest,
    UpdateGroupRequest,
    UpdateLicensePropertiesRequest,
    WebhookData,
    WebhookDefinition,
    WebhooksState,
)


def validate_bot_groups(groups: Iterable[GroupConfig] | None) -> None:
    """
    Check the group assignment of a bot.

    Raises:
        ValidationError: If a group uses the DoNotAssign priority, which is
            only valid as the bot's default group priority.
    """
    for group in groups or ():
        if group.priority is GroupPriority.DO_NOT_ASSIGN:
            raise ValidationError(
                "DoNotAssign priority is allowed only as default group priority"
            )


class ConfigurationAPI(WebAPI):
    """
    Client for the Configuration API.

    Webhook management calls take ``owner_client_id``; set it when
    authorizing with a Personal Access Token, which carries no client id.
    """

    NAMESPACE = "configuration"

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

    # === Webhooks ===

    def register_webhook(
        self, webhook: WebhookDefinition, owner_client_id: str | None = None
    ) -> str:
        """Register a webhook and return its id."""
        response = self.call(
            "register_webhook",
            RegisterWebhookRequest(
                **webhook.to_wire(), owner_client_id=owner_client_id or None
            ),
            CreatedResponse,
        )
        return response.id

    def list_webhooks(
        self, owner_client_id: str | None = None
    ) -> list[RegisteredWebhook]:
        return self.call(
            "list_webhooks",
            OwnerRequest(owner_client_id=owner_client_id or None),
            list[RegisteredWebhook],
        )

    def unregister_webhook(
        self, webhook_id: str, owner_client_id: str | None = None
    ) -> None:
        self.call(
            "unregister_webhook",
            UnregisterWebhookRequest(
                id=webhook_id, owner_client_id=owner_client_id or None
            ),
            EmptyResponse,
        )

    def list_webhook_names(self, version: str | None = None) -> list[WebhookData]:
        """List the webhooks available in an API version."""
        return self.call(
            "list_webhook_names",
            ListWebhookNamesRequest(version=version),
            list[WebhookData],
        )

    def enable_license_webhooks(self, owner_client_id: str | None = None) -> None:
        self.call(
            "enable_license_webhooks",
            OwnerRequest(owner_client_id=owner_client_id or None),
            EmptyResponse,
        )

    def disable_license_webhooks(self, owner_client_id: str | None = None) -> None:
        self.call(
            "disable_license_webhooks",
            OwnerRequest(owner_client_id=owner_client_id or None),
            EmptyResponse,
        )

    def get_license_webhooks_state(
        self, owner_client_id: str | None = None
    ) -> WebhooksState:
        return self.call(
            "get_license_webhooks_state",
            OwnerRequest(owner_client_id=owner_client_id or None),
            WebhooksState,
        )

    # === Bots ===

    def create_bot(self, name: str, options: BotOptions | None = None) -> str:
        """
        Create a bot and return its id.

        Raises:
            ValidationError: If a group is assigned the DoNotAssign priority.
        """
        request = CreateBotRequest(
            name=name, **(options.model_dump(exclude_none=True) if options else {})
        )
        validate_bot_groups(request.groups)
        response = self.call("create_bot", request, CreatedResponse)
        return response.id

    def update_bot(
        self,
        bot_id: str,
        name: str | None = None,
        options: BotOptions | None = None,
    ) -> None:
        """
        Raises:
            ValidationError: If a group is assigned the DoNotAssign priority.
        """
        request = UpdateBotRequest(
            id=bot_id,
            name=name,
            **(options.model_dump(exclude_none=True) if options else {}),
        )
        validate_bot_groups(request.groups)
        self.call("update_bot", request, EmptyResponse)

    def delete_bot(self, bot_id: str) -> None:
        self.call("delete_bot", IDRequest(id=bot_id), EmptyResponse)

    def list_bots(
        self, get_all: bool = False, fields: Iterable[str] | None = None
    ) -> list[Bot]:
        """List the bots of the requester's client, or every bot with ``get_all``."""
        return self.call(
            "list_bots",
            ListBotsRequest(all=get_all, fields=_opt_list(fields)),
            list[Bot],
        )

    def get_bot(self, bot_id: str, fields: Iterable[str] | None = None) -> Bot:
        return self.call(
            "get_bot",
            GetWithFieldsRequest(id=bot_id, fields=_opt_list(fields)),
            Bot,
        )

    # === Agents ===

    def create_agent(self, agent_id: str, fields: AgentFields | None = None) -> str:
        """Create an agent identified by ``agent_id`` (its login) and return its id."""
        response = self.call(
            "create_agent", _agent(agent_id, fields), CreatedResponse
        )
        return response.id

    def get_agent(self, agent_id: str, fields: Iterable[str] | None = None) -> Agent:
        return self.call(
            "get_agent",
            GetWithFieldsRequest(id=agent_id, fields=_opt_list(fields)),
            Agent,
        )

    def list_agents(
        self,
        group_ids: Iterable[int] | None = None,
        fields: Iterable[str] | None = None,
    ) -> list[Agent]:
        """List the agents of the license, optionally limited to some groups."""
        group_list = _opt_list(group_ids)
        return self.call(
            "list_agents",
            ListAgentsRequest(
                filters=AgentsFilters(group_ids=group_list) if group_list else None,
                fields=_opt_list(fields),
            ),
            list[Agent],
        )

    def update_agent(self, agent_id: str, fields: AgentFields | None = None) -> None:
        self.call("update_agent", _agent(agent_id, fields), EmptyResponse)

    def delete_agent(self, agent_id: str) -> None:
        self.call("delete_agent", IDRequest(id=agent_id), EmptyResponse)

    def suspend_agent(self, agent_id: str) -> None:
        self.call("suspend_agent", IDRequest(id=agent_id), EmptyResponse)

    def unsuspend_agent(self, agent_id: str) -> None:
        self.call("unsuspend_agent", IDRequest(id=agent_id), EmptyResponse)

    def request_agent_unsuspension(self) -> None:
        """Ask the license owners to unsuspend the requester."""
        self.call("request_agent_unsuspension", None, EmptyResponse)

    def approve_agent(self, agent_id: str) -> None:
        self.call("approve_agent", IDRequest(id=agent_id), EmptyResponse)

    def reactivate_email(self, agent_id: str) -> None:
        """Reactivate the bounced email address of an agent."""
        self.call(
            "reactivate_email", ReactivateEmailRequest(agent_id=agent_id), EmptyResponse
        )

    # === Groups ===

    def create_group(
        self,
        name: str,
        agent_priorities: Mapping[str, GroupPriority | str],
        language_code: str | None = None,
    ) -> int:
        """Create a group and return its id."""
        response = self.call(
            "create_group",
            CreateGroupRequest(
                name=name,
                agent_priorities=dict(agent_priorities),
                language_code=language_code,
            ),
            CreateGroupResponse,
        )
        return response.id

    def update_group(
        self,
        group_id: int,
        name: str | None = None,
        language_code: str | None = None,
        agent_priorities: Mapping[str, GroupPriority | str] | None = None,
    ) -> None:
        self.call(
            "update_group",
            UpdateGroupRequest(
                id=group_id,
                name=name,
                language_code=language_code,
                agent_priorities=(
                    dict(agent_priorities) if agent_priorities is not None else None
                ),
            ),
            EmptyResponse,
        )

    def delete_group(self, group_id: int) -> None:
        self.call("delete_group", GroupIDRequest(id=group_id), EmptyResponse)

    def list_groups(self, fields: Iterable[str] | None = None) -> list[Group]:
        return self.call(
            "list_groups", ListGroupsRequest(fields=_opt_list(fields)), list[Group]
        )

    def get_group(self, group_id: int, fields: Iterable[str] | None = None) -> Group:
        return self.call(
            "get_group",
            GetGroupRequest(id=group_id, fields=_opt_list(fields)),
            Group,
        )

    # === Properties ===

    def register_property(self, prop: PropertyConfig) -> None:
        """Register a private property."""
        self.call("register_property", prop, EmptyResponse)

    def unregister_property(self, name: str, owner_client_id: str | None = None) -> None:
        self.call(
            "unregister_property",
            UnregisterPropertyRequest(name=name, owner_client_id=owner_client_id or None),
            EmptyResponse,
        )

    def publish_property(
        self,
        name: str,
        owner_client_id: str | None = None,
        read: bool = False,
        write: bool = False,
    ) -> None:
        """Make a private property public with read and/or write access."""
        access_type = []
        if read:
            access_type.append("read")
        if write:
            access_type.append("write")
        self.call(
            "publish_property",
            PublishPropertyRequest(
                name=name,
                owner_client_id=owner_client_id or None,
                access_type=access_type,
            ),
            EmptyResponse,
        )

    def list_properties(
        self, owner_client_id: str | None = None
    ) -> dict[str, PropertyConfig]:
        """Return the configured properties keyed by name."""
        return self.call(
            "list_properties",
            OwnerRequest(owner_client_id=owner_client_id or None),
            dict[str, PropertyConfig],
        )

    def list_license_properties(
        self, namespace: str | None = None, name_prefix: str | None = None
    ) -> Properties:
        return self.call(
            "list_license_properties",
            PropertiesQuery(namespace=namespace, name_prefix=name_prefix),
            Properties,
        )

    def list_groups_properties(
        self,
        group_ids: Iterable[int],
        namespace: str | None = None,
        name_prefix: str | None = None,
    ) -> list[GroupProperties]:
        return self.call(
            "list_groups_properties",
            ListGroupsPropertiesRequest(
                group_ids=list(group_ids), namespace=namespace, name_prefix=name_prefix
            ),
            list[GroupProperties],
        )

    def update_license_properties(self, properties: Properties) -> None:
        self.call(
            "update_license_properties",
            UpdateLicensePropertiesRequest(properties=properties),
            EmptyResponse,
        )

    def update_group_properties(self, group_id: int, properties: Properties) -> None:
        self.call(
            "update_group_properties",
            UpdateGroupPropertiesRequest(id=group_id, properties=properties),
            EmptyResponse,
        )

    def delete_license_properties(self, properties: dict[str, list[str]]) -> None:
        self.call(
            "delete_license_properties",
            DeleteLicensePropertiesRequest(properties=properties),
            EmptyResponse,
        )

    def delete_group_properties(
        self, group_id: int, properties: dict[str, list[str]]
    ) -> None:
        self.call(
            "delete_group_properties",
            DeleteGroupPropertiesRequest(id=group_id, properties=properties),
            EmptyResponse,
        )

    # === Auto access ===

    def add_auto_access(
        self,
        group_ids: Iterable[int],
        conditions: AutoAccessConditions,
        description: str | None = None,
        next_id: str | None = None,
    ) -> str:
        """Create an auto access rule and return its id."""
        response = self.call(
            "add_auto_access",
            AddAutoAccessRequest(
                access=AutoAccessGroups(groups=list(group_ids)),
                conditions=conditions,
                description=description,
                next_id=next_id,
            ),
            CreatedResponse,
        )
        return response.id

    def update_auto_access(
        self,
        auto_access_id: str,
        group_ids: Iterable[int] | None = None,
        conditions: AutoAccessConditions | None = None,
        description: str | None = None,
        next_id: str | None = None,
    ) -> None:
        group_list = _opt_list(group_ids)
        self.call(
            "update_auto_access",
            UpdateAutoAccessRequest(
                id=auto_access_id,
                access=AutoAccessGroups(groups=group_list) if group_list is not None else None,
                conditions=conditions,
                description=description,
                next_id=next_id,
            ),
            EmptyResponse,
        )

    def delete_auto_access(self, auto_access_id: str) -> None:
        self.call("delete_auto_access", IDRequest(id=auto_access_id), EmptyResponse)

    def list_auto_accesses(self) -> list[AutoAccess]:
        return self.call("list_auto_accesses", None, list[AutoAccess])

    # === Tags ===

    def create_tag(self, name: str, group_ids: Iterable[int]) -> None:
        self.call(
            "create_tag", TagRequest(name=name, group_ids=list(group_ids)), EmptyResponse
        )

    def delete_tag(self, name: str) -> None:
        self.call("delete_tag", TagRequest(name=name), EmptyResponse)

    def list_tags(self, group_ids: Iterable[int] = ()) -> list[Tag]:
        """List the tags assigned to the given groups."""
        return self.call(
            "list_tags", GroupIDsRequest(group_ids=list(group_ids)), list[Tag]
        )

    def update_tag(self, name: str, group_ids: Iterable[int]) -> None:
        self.call(
            "update_tag", TagRequest(name=name, group_ids=list(group_ids)), EmptyResponse
        )

    # === License ===

    def check_product_limits_for_plan(self, plan: str) -> list[PlanLimit]:
        """Return the resources exceeding the limits of ``plan``."""
        return self.call(
            "check_product_limits_for_plan", PlanRequest(plan=plan), list[PlanLimit]
        )

    def list_channels(self) -> list[ChannelActivity]:
        return self.call("list_channels", None, list[ChannelActivity])

    def update_company_details(
        self, details: CompanyDetails, enrich: bool = False
    ) -> None:
        self.call(
            "update_company_details",
            UpdateCompanyDetailsRequest(**details.model_dump(), enrich=enrich),
            EmptyResponse,
        )


def _opt_list(values: Iterable[Any] | None) -> list[Any] | None:
    return list(values) if values is not None else None


def _agent(agent_id: str, fields: AgentFields | None) -> Agent:
    return Agent(id=agent_id, **(fields.model_dump(exclude_none=True) if fields else {}))


__all__ = ["ConfigurationAPI", "validate_bot_groups"]
