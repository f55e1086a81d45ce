# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Value types shared across the LiveChat SDK."""

from .call import GET, CallOptions, CallStats, HTTPMethod, UploadedFile

__all__ = ["GET", "CallOptions", "CallStats", "HTTPMethod", "UploadedFile"]
