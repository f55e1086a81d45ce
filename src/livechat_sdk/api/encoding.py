# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request payload encoding.

POST calls carry the payload as a JSON body; GET calls carry it as URL query
parameters. Pydantic models are serialized by alias. None values are omitted
at every level, from model fields and plain mappings alike, so optional
fields never appear on the wire as null.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic_core import PydanticSerializationError, to_json, to_jsonable_python

from ..exceptions import RequestEncodingError

EMPTY_BODY = b"{}"


def to_wire(payload: Any) -> Any:
    """
    Convert a payload to JSON-compatible Python data.

    Raises:
        RequestEncodingError: If the payload contains unserializable values.
    """
    try:
        return to_jsonable_python(payload, by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise RequestEncodingError(f"couldn't encode request payload: {exc}") from exc


def _drop_none(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(item) for item in value]
    return value


def encode_body(payload: Any) -> bytes:
    """
    Serialize a payload into a JSON request body.

    A None payload becomes an empty object. None values inside mappings are
    dropped, matching the query string encoding. The returned bytes are reused
    unchanged by every retry of the call.

    Raises:
        RequestEncodingError: If the payload cannot be serialized.
    """
    if payload is None:
        return EMPTY_BODY
    data = _drop_none(to_wire(payload))
    try:
        return to_json(data)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise RequestEncodingError(f"couldn't encode request payload: {exc}") from exc


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(prefix: str, value: Any, out: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, out)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(prefix, item, out)
    else:
        out.append((prefix, _query_value(value)))


def encode_query(payload: Any) -> list[tuple[str, str]]:
    """
    Encode payload fields as query parameters.

    Top-level fields become keys, list items repeat their key, booleans are
    rendered as ``true``/``false``, nested objects use ``key[sub]`` notation
    and None values are skipped.

    Raises:
        RequestEncodingError: If the payload is not an object.
    """
    if payload is None:
        return []
    data = to_wire(payload)
    if not isinstance(data, Mapping):
        raise RequestEncodingError(
            f"query payload must encode to an object, got {type(data).__name__}"
        )
    params: list[tuple[str, str]] = []
    for key, value in data.items():
        _flatten(str(key), value, params)
    return params


__all__ = ["EMPTY_BODY", "encode_body", "encode_query", "to_wire"]
