# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Ready-made retry strategies.

A retry strategy is any callable ``(attempts, error) -> bool``. The
dispatcher itself never caps retries: a strategy that always returns True
combined with a permanently invalid credential retries forever. Use
``retry_on`` with ``max_retries`` to bound the loop.

Example:
    >>> from livechat_sdk.retry import retry_on
    >>> api.set_retry_strategy(retry_on("authentication", max_retries=3))
"""

from __future__ import annotations

from .exceptions import APIError
from .protocols.retry import RetryStrategy


def no_retry(attempts: int, error: APIError) -> bool:
    """Never retry. Equivalent to configuring no strategy at all."""
    return False


def retry_on(*error_types: str, max_retries: int | None = None) -> RetryStrategy:
    """
    Build a strategy retrying API errors of the given categories.

    Args:
        *error_types: Error categories to retry (case-insensitive). When
            empty, every API error is retried.
        max_retries: Upper bound on retries per call. None means unbounded.

    Returns:
        A callable usable with ``set_retry_strategy``.

    Raises:
        ValueError: If max_retries is negative.
    """
    if max_retries is not None and max_retries < 0:
        raise ValueError("max_retries must be non-negative")

    def strategy(attempts: int, error: APIError) -> bool:
        if max_retries is not None and attempts >= max_retries:
            return False
        if not error_types:
            return True
        return error.is_type(*error_types)

    return strategy


__all__ = ["no_retry", "retry_on"]
