"""
Shared fixtures for the unit test suite.

HTTP traffic is served by an httpx.MockTransport, so no test touches the
network.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from livechat_sdk.authorization import Token, static_token_getter


class StubServer:
    """Replays queued responses and records every request it receives.

    The last queued response is repeated once the queue is drained, which
    lets tests exercise unbounded retries.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Callable[[], httpx.Response]] = []
        self._last: Callable[[], httpx.Response] | None = None

    def queue(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if content is None:
            content = json.dumps({} if json_body is None else json_body).encode()
        body = content
        self._responses.append(
            lambda: httpx.Response(status_code, content=body, headers=headers)
        )

    def queue_error(self, error: Exception) -> None:
        def fail() -> httpx.Response:
            raise error

        self._responses.append(fail)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self._responses:
            self._last = self._responses.pop(0)
        if self._last is None:
            raise AssertionError(f"unexpected request to {request.url}")
        return self._last()

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self._handle))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def server() -> StubServer:
    return StubServer()


@pytest.fixture
def token() -> Token:
    return Token(access_token="access_token", region="region", organization_id="xD")


@pytest.fixture
def token_getter(token):
    return static_token_getter(token)
