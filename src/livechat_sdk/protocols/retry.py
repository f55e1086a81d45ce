# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for retry strategies."""

from typing import Protocol, runtime_checkable

from ..exceptions import APIError


@runtime_checkable
class RetryStrategy(Protocol):
    """
    Decides whether a failed call attempt should be retried.

    The dispatcher only consults the strategy for API errors, i.e. non-200
    responses with a decodable error body. Transport, configuration and
    decode errors are terminal and never reach it.

    Any callable with this signature satisfies the protocol, including plain
    functions and lambdas.
    """

    def __call__(self, attempts: int, error: APIError) -> bool:
        """
        Decide whether to retry.

        Args:
            attempts: Number of retries already performed for this call,
                starting at 0 for the first failure.
            error: The decoded error of the failed attempt.

        Returns:
            True to re-fetch the token and send the request again.
        """
        ...
