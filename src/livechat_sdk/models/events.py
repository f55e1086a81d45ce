# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Chat events.

Events share a common envelope and a ``type`` tag selecting the variant:

- ``message``: Message
- ``file``: File
- ``system_message``: SystemMessage
- ``rich_message``: RichMessage
- ``filled_form``: FilledForm

An Event decoded from a response keeps the variant-specific fields as extra
data. The ``as_*`` accessors return the typed variant, or None when the tag
does not match or the variant fields are missing or malformed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, TypeVar

from pydantic import ValidationError

from ..exceptions import ValidationError as LiveChatValidationError
from .common import Properties, WireModel

E = TypeVar("E", bound="Event")


class Event(WireModel):
    """Common part of all chat events."""

    id: str | None = None
    custom_id: str | None = None
    created_at: datetime | None = None
    author_id: str | None = None
    properties: Properties | None = None
    recipients: str | None = None
    type: str = ""

    def _as(self, variant: type[E]) -> E | None:
        if self.type != variant.model_fields["type"].default:
            return None
        if isinstance(self, variant):
            return self
        try:
            return variant.model_validate(self.model_dump())
        except ValidationError:
            return None

    def as_message(self) -> Message | None:
        return self._as(Message)

    def as_file(self) -> File | None:
        return self._as(File)

    def as_system_message(self) -> SystemMessage | None:
        return self._as(SystemMessage)

    def as_rich_message(self) -> RichMessage | None:
        return self._as(RichMessage)

    def as_filled_form(self) -> FilledForm | None:
        return self._as(FilledForm)


class Postback(WireModel):
    """Postback attached to a message sent from a rich message button."""

    id: str
    thread_id: str = ""
    event_id: str = ""
    type: str | None = None
    value: str | None = None


class Message(Event):
    type: Literal["message"] = "message"
    text: str
    postback: Postback | None = None


class SystemMessage(Event):
    type: Literal["system_message"] = "system_message"
    system_message_type: str
    text: str | None = None
    text_vars: dict[str, str] | None = None


class File(Event):
    type: Literal["file"] = "file"
    content_type: str
    name: str
    url: str
    thumbnail_url: str | None = None
    thumbnail2x_url: str | None = None
    width: int | None = None
    height: int | None = None
    size: int | None = None
    alternative_text: str | None = None


class RichMessageImage(WireModel):
    url: str
    name: str | None = None
    content_type: str | None = None
    size: int | None = None
    width: int | None = None
    height: int | None = None
    alternative_text: str | None = None


class RichMessageButton(WireModel):
    text: str = ""
    type: str = ""
    value: str = ""
    user_ids: list[str] = []
    postback_id: str = ""
    # compact, full or tall
    webview_height: str | None = None
    # new or current
    target: str | None = None


class RichMessageElement(WireModel):
    buttons: list[RichMessageButton] = []
    title: str = ""
    subtitle: str = ""
    image: RichMessageImage | None = None


class RichMessage(Event):
    type: Literal["rich_message"] = "rich_message"
    template_id: str
    elements: list[RichMessageElement]


class FormField(WireModel):
    id: str = ""
    label: str = ""
    type: str = ""
    value: str = ""


class FilledForm(Event):
    type: Literal["filled_form"] = "filled_form"
    fields: list[FormField]


EVENT_TYPES: dict[str, type[Event]] = {
    "message": Message,
    "file": File,
    "system_message": SystemMessage,
    "rich_message": RichMessage,
    "filled_form": FilledForm,
}
"""Event variants by their ``type`` tag."""

SENDABLE_EVENT_TYPES: tuple[type[Event], ...] = (
    Message,
    File,
    SystemMessage,
    RichMessage,
)
"""Variants accepted by ``send_event``, ``start_chat`` and ``resume_chat``."""


def parse_event(data: dict[str, Any] | Event) -> Event:
    """
    Decode an event into its concrete variant.

    Unknown tags and malformed variant data yield a plain Event, so no data
    is lost.
    """
    event = data if isinstance(data, Event) else Event.model_validate(data)
    variant = EVENT_TYPES.get(event.type)
    if variant is None:
        return event
    return event._as(variant) or event


def validate_event(event: object) -> None:
    """
    Check that ``event`` can be sent to a chat.

    Raises:
        ValidationError: If the object is not a plain Event or a sendable
            variant.
    """
    if type(event) is Event or isinstance(event, SENDABLE_EVENT_TYPES):
        return
    raise LiveChatValidationError(f"event type {type(event).__name__} not supported")


__all__ = [
    "EVENT_TYPES",
    "SENDABLE_EVENT_TYPES",
    "Event",
    "File",
    "FilledForm",
    "FormField",
    "Message",
    "Postback",
    "RichMessage",
    "RichMessageButton",
    "RichMessageElement",
    "RichMessageImage",
    "SystemMessage",
    "parse_event",
    "validate_event",
]
