# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request dispatch core shared by all specialized clients.

Classes:
    APIConfig: Host, timeout and client id configuration.
    WebAPI: Request dispatcher with token handling, retries and stats.
    FileUploadWebAPI: WebAPI with the multipart file upload path.

Functions:
    namespace_endpoint: Endpoint generator for a plain namespace.
    organization_endpoint: Endpoint generator adding the organization id.
    decode_error: Map a non-200 response to an error.
"""

from .config import API_VERSION, DEFAULT_HOST, DEFAULT_TIMEOUT, APIConfig
from .endpoints import (
    EndpointGenerator,
    action_url,
    namespace_endpoint,
    organization_endpoint,
)
from .errors import decode_error
from .web_api import UPLOAD_ACTION, FileUploadWebAPI, WebAPI

__all__ = [
    "API_VERSION",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "UPLOAD_ACTION",
    "APIConfig",
    "EndpointGenerator",
    "FileUploadWebAPI",
    "WebAPI",
    "action_url",
    "decode_error",
    "namespace_endpoint",
    "organization_endpoint",
]
