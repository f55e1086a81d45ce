# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Chats, threads and the structures used to start or resume a chat."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from .common import Access, Properties, Queue, WireModel
from .events import Event, parse_event, validate_event
from .users import Agent, Customer, User


class Thread(WireModel):
    """A chat thread with its events."""

    id: str = ""
    active: bool = False
    user_ids: list[str] = []
    restricted_access: str | None = None
    properties: Properties | None = None
    access: Access | None = None
    tags: list[str] = []
    events: list[Event] = []
    previous_thread_id: str | None = None
    next_thread_id: str | None = None
    created_at: datetime | None = None
    queue: Queue | None = None
    queues_duration: int | None = None

    @field_validator("events")
    @classmethod
    def _concrete_events(cls, events: list[Event]) -> list[Event]:
        return [parse_event(event) for event in events]


class Chat(WireModel):
    """
    A chat with its current thread.

    The API returns a single ``users`` list; it is split by type into the
    ``agents`` and ``customers`` maps keyed by user id. Users of other types
    are dropped.
    """

    id: str = ""
    properties: Properties | None = None
    access: Access | None = None
    thread: Thread | None = None
    threads: list[Thread] = []
    is_followed: bool = False
    agents: dict[str, Agent] = {}
    customers: dict[str, Customer] = {}

    @model_validator(mode="before")
    @classmethod
    def _split_users(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "users" not in data:
            return data
        data = dict(data)
        agents: dict[str, Any] = dict(data.get("agents") or {})
        customers: dict[str, Any] = dict(data.get("customers") or {})
        for user in data.pop("users") or []:
            raw = user.model_dump() if isinstance(user, BaseModel) else user
            if not isinstance(raw, dict):
                continue
            if raw.get("type") == "agent":
                agents[raw.get("id", "")] = raw
            elif raw.get("type") == "customer":
                customers[raw.get("id", "")] = raw
        data["agents"] = agents
        data["customers"] = customers
        return data

    def users(self) -> list[User]:
        """Agents and customers of the chat combined."""
        return [*self.agents.values(), *self.customers.values()]


class ThreadSummary(WireModel):
    id: str = ""
    user_ids: list[str] = []
    properties: Properties | None = None
    active: bool = False
    access: Access | None = None
    tags: list[str] = []
    created_at: datetime | None = None
    queue: Queue | None = None


class LastEvent(WireModel):
    """Most recent event of one type in a chat summary."""

    thread_id: str = ""
    thread_created_at: datetime | None = None
    restricted_access: str | None = None
    event: Event

    @field_validator("event")
    @classmethod
    def _concrete_event(cls, event: Event) -> Event:
        return parse_event(event)


class ChatSummary(WireModel):
    """Short summary of a chat, as returned by ``list_chats``."""

    id: str = ""
    last_event_per_type: dict[str, LastEvent] = {}
    users: list[User] = []
    last_thread_summary: ThreadSummary | None = None
    last_thread_id: str | None = None
    last_thread_created_at: datetime | None = None
    properties: Properties | None = None
    access: Access | None = None
    is_followed: bool = False
    active: bool = False


class InitialThread(WireModel):
    """Thread content used to start or resume a chat."""

    events: list[Any] | None = None
    properties: Properties | None = None
    tags: list[str] | None = None


class InitialChat(WireModel):
    """Chat content used to start or resume a chat."""

    id: str | None = None
    access: Access | None = None
    properties: Properties | None = None
    thread: InitialThread | None = None
    users: list[User] | None = None

    def validate_events(self) -> None:
        """
        Check that every initial event can be sent.

        Raises:
            ValidationError: On the first unsupported event.
        """
        if self.thread is None or not self.thread.events:
            return
        for event in self.thread.events:
            validate_event(event)


__all__ = [
    "Chat",
    "ChatSummary",
    "InitialChat",
    "InitialThread",
    "LastEvent",
    "Thread",
    "ThreadSummary",
]
