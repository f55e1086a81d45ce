# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Agent Chat API.

Classes:
    AgentAPI: Client for the ``agent`` namespace, with file upload.
    ChatsFilters, ThreadsFilters, ArchivesFilters: Listing filters.

Functions:
    property_filter: Build a property filter.
    integer_filter: Build an integer filter.
"""

from .api import AUTHOR_ID_HEADER, AgentAPI
from .filters import (
    ArchivesFilters,
    ChatsFilters,
    EventTypesFilter,
    GreetingsFilter,
    IntegerFilter,
    PropertiesFilters,
    PropertyFilter,
    SurveyFilter,
    ThreadsFilters,
    integer_filter,
    property_filter,
)
from .models import (
    AgentForTransfer,
    AgentStatus,
    ListArchivesResponse,
    ListChatsResponse,
    ListThreadsResponse,
    MulticastRecipients,
    MulticastRecipientsAgents,
    MulticastRecipientsCustomers,
    ResumeChatResponse,
    StartChatResponse,
    TransferChatOptions,
)

__all__ = [
    "AUTHOR_ID_HEADER",
    "AgentAPI",
    "AgentForTransfer",
    "AgentStatus",
    "ArchivesFilters",
    "ChatsFilters",
    "EventTypesFilter",
    "GreetingsFilter",
    "IntegerFilter",
    "ListArchivesResponse",
    "ListChatsResponse",
    "ListThreadsResponse",
    "MulticastRecipients",
    "MulticastRecipientsAgents",
    "MulticastRecipientsCustomers",
    "PropertiesFilters",
    "PropertyFilter",
    "ResumeChatResponse",
    "StartChatResponse",
    "SurveyFilter",
    "ThreadsFilters",
    "TransferChatOptions",
    "integer_filter",
    "property_filter",
]
