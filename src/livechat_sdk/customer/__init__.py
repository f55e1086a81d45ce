# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Customer Chat API.

Classes:
    CustomerAPI: Client for the ``customer`` namespace, with file upload.
"""

from .api import CustomerAPI
from .models import (
    ConfigButton,
    Configuration,
    ConfigurationProperties,
    DynamicConfiguration,
    Form,
    FormField,
    FormFieldOption,
    FormType,
    GetFormResponse,
    ListChatsResponse,
    ListThreadsResponse,
    PredictedAgent,
    PredictedAgentDetails,
    Recipients,
    ResumeChatResponse,
    StartChatResponse,
    URLInfo,
)

__all__ = [
    "ConfigButton",
    "Configuration",
    "ConfigurationProperties",
    "CustomerAPI",
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
