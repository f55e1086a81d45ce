# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Chat users.

A User carries a ``type`` tag of ``agent`` or ``customer``. Use
``as_agent()`` or ``as_customer()`` to obtain the typed variant; both return
None when the tag does not match or the data is malformed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import ValidationError

from .common import WireModel


class User(WireModel):
    """Common part of agents and customers."""

    id: str = ""
    type: str = ""
    name: str = ""
    avatar: str = ""
    email: str = ""
    present: bool = False
    events_seen_up_to: datetime | None = None

    def as_agent(self) -> Agent | None:
        """Return this user as an Agent, or None if it is not a valid agent."""
        if self.type != "agent":
            return None
        try:
            return Agent.model_validate(self.model_dump())
        except ValidationError:
            return None

    def as_customer(self) -> Customer | None:
        """Return this user as a Customer, or None if it is not a valid customer."""
        if self.type != "customer":
            return None
        try:
            return Customer.model_validate(self.model_dump())
        except ValidationError:
            return None


class Agent(User):
    type: Literal["agent"] = "agent"
    routing_status: str = ""


class Geolocation(WireModel):
    country: str = ""
    country_code: str = ""
    region: str = ""
    city: str = ""
    timezone: str = ""


class VisitedPage(WireModel):
    opened_at: datetime | None = None
    url: str = ""
    title: str = ""


class Visit(WireModel):
    """A customer's visit to the tracked website."""

    ip: str = ""
    user_agent: str = ""
    geolocation: Geolocation | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None
    referrer: str = ""
    last_pages: list[VisitedPage] = []


class CustomerStatistics(WireModel):
    visits_count: int = 0
    threads_count: int = 0
    chats_count: int = 0
    page_views_count: int = 0
    greetings_shown_count: int = 0
    greetings_accepted_count: int = 0


class Customer(User):
    """
    A customer as seen by agents or by the customer itself.

    The customer-facing API returns only the email and session fields; the
    remaining attributes keep their defaults there.
    """

    type: Literal["customer"] = "customer"
    email_verified: bool = False
    last_visit: Visit | None = None
    statistics: CustomerStatistics | None = None
    agent_last_event_created_at: datetime | None = None
    customer_last_event_created_at: datetime | None = None
    created_at: datetime | None = None
    session_fields: list[dict[str, str]] = []
    followed: bool = False
    online: bool = False
    state: str = ""
    group_ids: list[int] = []


__all__ = [
    "Agent",
    "Customer",
    "CustomerStatistics",
    "Geolocation",
    "User",
    "Visit",
    "VisitedPage",
]
