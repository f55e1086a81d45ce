# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration API.

Classes:
    ConfigurationAPI: Client for the ``configuration`` namespace.
    GroupPriority: Routing priority of an agent or bot in a group.
"""

from .api import ConfigurationAPI, validate_bot_groups
from .models import (
    Agent,
    AgentFields,
    AutoAccess,
    AutoAccessConditions,
    AutoAccessGroups,
    Bot,
    BotOptions,
    ChannelActivity,
    ChatPresenceFilter,
    CompanyDetails,
    Condition,
    GeolocationCondition,
    GeolocationMatch,
    Group,
    GroupConfig,
    GroupPriority,
    GroupProperties,
    Match,
    PlanLimit,
    PropertyAccess,
    PropertyConfig,
    PropertyRange,
    RegisteredWebhook,
    Schedule,
    Tag,
    UserIDsFilter,
    WebhookData,
    WebhookDefinition,
    WebhookFilters,
    WebhooksState,
    Weekday,
    WorkScheduler,
)

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
    "ConfigurationAPI",
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
    "validate_bot_groups",
]
