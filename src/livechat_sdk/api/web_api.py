# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Web API request dispatcher.

This module contains the WebAPI class shared by every specialized client.
One ``call`` executes one logical remote action to completion:

1. Fetch a token from the token getter
2. Build the endpoint URL and encode the payload (JSON body or query string)
3. Send the request over httpx
4. On a non-200 response decode the error and consult the retry strategy;
   a retry re-fetches the token and resends the same body bytes
5. On a 200 response decode the body into the requested response type
6. Report the outcome to the stats sink exactly once

FileUploadWebAPI adds the multipart upload path used by the agent and
customer clients.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from functools import lru_cache
from types import TracebackType
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Self

from ..authorization import Token, TokenGetter
from ..exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    TokenUnavailableError,
    TransportError,
)
from ..protocols.retry import RetryStrategy
from ..protocols.stats import StatsSink
from ..types.call import CallOptions, CallStats, UploadedFile
from .config import APIConfig
from .encoding import encode_body, encode_query
from .endpoints import EndpointGenerator, append_query
from .errors import decode_error

logger = logging.getLogger(__name__)

UPLOAD_ACTION = "upload_file"
"""Action name of the multipart file upload endpoint."""

LEGACY_HEADER = "Legacy"
DEPRECATION_HEADER = "Deprecation"

_DEFAULT_OPTIONS = CallOptions()


@lru_cache(maxsize=256)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


class WebAPI:
    """
    Dispatcher for LiveChat Web API calls.

    A WebAPI instance owns its token getter, HTTP client, custom headers,
    retry strategy, stats sink and logger. Calls may be issued concurrently
    from several threads because httpx.Client is thread-safe, but the setter
    methods are not synchronized: configure the instance before sharing it,
    or protect setter calls externally.

    Example:
        >>> api = WebAPI(static_token_getter(token), namespace_endpoint("agent"))
        >>> chat = api.call("get_chat", {"chat_id": "PJ0MRSHTDG"}, Chat)
    """

    def __init__(
        self,
        token_getter: TokenGetter | None,
        endpoint: EndpointGenerator,
        *,
        config: APIConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            token_getter: Called before every attempt to obtain a token.
            endpoint: Builds the URL of an action from (token, host, action).
            config: Host, timeout and client id. Defaults to APIConfig().
            http_client: Transport to use. When omitted an httpx.Client with
                ``config.timeout`` is created and closed by ``close()``.

        Raises:
            ConfigurationError: If token_getter is None.
        """
        if token_getter is None:
            raise ConfigurationError("token getter must be provided")

        self._config = config if config is not None else APIConfig()
        self._token_getter = token_getter
        self._endpoint = endpoint
        self._owns_client = http_client is None
        self._client = (
            http_client
            if http_client is not None
            else httpx.Client(timeout=self._config.timeout)
        )
        self._custom_headers: dict[str, str] = {}
        self._retry_strategy: RetryStrategy | None = None
        self._stats_sink: StatsSink | None = None
        self._logger = logger

    # === Configuration ===

    @property
    def config(self) -> APIConfig:
        """Current client configuration."""
        return self._config

    @property
    def custom_headers(self) -> dict[str, str]:
        """Copy of the headers added to every request."""
        return dict(self._custom_headers)

    def set_custom_header(self, key: str, value: str) -> None:
        """
        Add a header to every subsequent request.

        Custom headers are applied after the standard ones and override them,
        except Content-Type, which always follows the request encoding.
        """
        self._custom_headers[key] = value

    def set_retry_strategy(self, strategy: RetryStrategy | None) -> None:
        """
        Set the strategy consulted when a call fails with an API error.

        The dispatcher enforces no retry limit of its own. A strategy that
        always returns True retries forever while the API keeps failing, for
        example with a permanently invalid credential. Bound it with
        ``livechat_sdk.retry.retry_on(max_retries=...)`` or similar.
        """
        self._retry_strategy = strategy

    def set_stats_sink(self, sink: StatsSink | None) -> None:
        """Set the sink that receives a CallStats record after every call."""
        self._stats_sink = sink

    def set_logger(self, logger: logging.Logger) -> None:
        """Replace the logger used for deprecation notices and retries."""
        self._logger = logger

    def set_custom_host(self, host: str) -> None:
        """
        Point the client at another Web API host.

        Raises:
            ValueError: If host is not an http(s) URL.
        """
        self._config = APIConfig(
            host=host, timeout=self._config.timeout, client_id=self._config.client_id
        )

    # === Lifecycle ===

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # === Dispatch ===

    def call(
        self,
        action: str,
        payload: Any = None,
        response_type: Any = None,
        options: CallOptions | None = None,
    ) -> Any:
        """
        Execute one remote action to completion.

        Args:
            action: Remote action name, e.g. ``list_chats``.
            payload: Request payload: a pydantic model, a mapping or None.
            response_type: Type the 200 response body is validated into.
                Anything pydantic's TypeAdapter accepts works, including
                models, ``dict[str, Any]`` and ``list[Model]``. When None
                the body is not decoded and None is returned.
            options: HTTP verb, per-call timeout and extra headers.

        Returns:
            The decoded response body.

        Raises:
            TokenUnavailableError: The token getter returned None.
            UnsupportedTokenTypeError: The token has an unknown type.
            RequestEncodingError: The payload could not be encoded.
            TransportError: The HTTP request failed. Never retried.
            APIError: The API returned an error and no retry was granted.
            DecodeError: A response body could not be decoded. Never retried.
        """
        if not action:
            raise ValueError("action must be a non-empty string")
        options = options if options is not None else _DEFAULT_OPTIONS
        start = time.perf_counter()
        success = False
        try:
            result = self._execute(action, payload, response_type, options)
            success = True
            return result
        finally:
            self._report(action, time.perf_counter() - start, success)

    def _execute(
        self,
        action: str,
        payload: Any,
        response_type: Any,
        options: CallOptions,
    ) -> Any:
        token = self._get_token()

        body: bytes | None = None
        params: list[tuple[str, str]] = []
        if options.method == "GET":
            params = encode_query(payload)
        else:
            body = encode_body(payload)

        attempts = 0
        while True:
            url = append_query(self._endpoint(token, self._config.host, action), params)
            headers = self._build_headers(token, options.headers, json_body=body is not None)
            request = self._client.build_request(
                options.method,
                url,
                content=body,
                headers=headers,
                timeout=(
                    options.timeout
                    if options.timeout is not None
                    else httpx.USE_CLIENT_DEFAULT
                ),
            )
            response = self._send(request, action)
            if response.status_code == 200:
                break

            error = decode_error(response.status_code, response.content)
            if not self._should_retry(attempts, error):
                raise error

            self._logger.debug(
                f"Retrying {action} after {error.type} error "
                f"(status={error.status_code}, attempt={attempts + 1})"
            )
            token = self._get_token()
            attempts += 1

        self._log_deprecation(response)
        return self._decode(response, response_type)

    def _should_retry(self, attempts: int, error: APIError | DecodeError) -> bool:
        if isinstance(error, DecodeError) or self._retry_strategy is None:
            return False
        return bool(self._retry_strategy(attempts, error))

    # === Shared primitives ===

    def _get_token(self) -> Token:
        token = self._token_getter()
        if token is None:
            raise TokenUnavailableError()
        return token

    def _build_headers(
        self,
        token: Token,
        extra: Mapping[str, str],
        *,
        json_body: bool,
    ) -> httpx.Headers:
        headers = httpx.Headers(
            {
                "User-Agent": self._config.user_agent,
                "Authorization": token.authorization_header,
                "X-Region": token.region,
            }
        )
        headers.update(self._custom_headers)
        headers.update(extra)
        # Content-Type follows the encoding; multipart sets its own boundary.
        if "Content-Type" in headers:
            del headers["Content-Type"]
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(self, request: httpx.Request, action: str) -> httpx.Response:
        try:
            return self._client.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"{action} request failed: {exc}", action=action) from exc

    def _decode(self, response: httpx.Response, response_type: Any) -> Any:
        if response_type is None:
            return None
        try:
            return _adapter(response_type).validate_json(response.content)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"couldn't decode response: {exc.error_count()} validation error(s)",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def _log_deprecation(self, response: httpx.Response) -> None:
        legacy = response.headers.get(LEGACY_HEADER)
        if legacy:
            self._logger.info(
                f"[Notice] This is a legacy version. "
                f"It will be deprecated after {legacy}."
            )
        deprecation = response.headers.get(DEPRECATION_HEADER)
        if deprecation:
            self._logger.warning(
                f"[Warning] This version is deprecated. "
                f"It will be decommissioned after {deprecation}."
            )

    def _report(self, action: str, execution_time: float, success: bool) -> None:
        if self._stats_sink is None:
            return
        try:
            self._stats_sink(
                CallStats(action=action, execution_time=execution_time, success=success)
            )
        except Exception as e:
            self._logger.warning(f"Stats sink failed for {action}: {e}")


class FileUploadWebAPI(WebAPI):
    """
    WebAPI with the multipart file upload path.

    Uploads reuse the dispatcher's token handling, endpoint templating,
    error decoding and stats reporting, but are never retried.
    """

    def upload_file(self, filename: str, data: bytes) -> str:
        """
        Upload a file and return its temporary URL.

        The URL is valid for a limited time and can be referenced in file
        events sent to a chat.

        Raises:
            TokenUnavailableError: The token getter returned None.
            TransportError: The HTTP request failed.
            APIError: The API rejected the upload.
            DecodeError: A response body could not be decoded.
        """
        start = time.perf_counter()
        success = False
        try:
            token = self._get_token()
            request = self._client.build_request(
                "POST",
                self._endpoint(token, self._config.host, UPLOAD_ACTION),
                files={"file": (filename, data)},
                headers=self._build_headers(token, {}, json_body=False),
            )
            response = self._send(request, UPLOAD_ACTION)
            if response.status_code != 200:
                raise decode_error(response.status_code, response.content)
            self._log_deprecation(response)
            uploaded: UploadedFile = self._decode(response, UploadedFile)
            success = True
            return uploaded.url
        finally:
            self._report(UPLOAD_ACTION, time.perf_counter() - start, success)


__all__ = ["UPLOAD_ACTION", "FileUploadWebAPI", "WebAPI"]
