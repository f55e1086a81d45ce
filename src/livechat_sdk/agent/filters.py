# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Filters for the agent listing operations.

Filter objects are pydantic models with chainable builder methods. Fields
left unset are omitted from the request.

Example:
    >>> filters = (
    ...     ArchivesFilters()
    ...     .by_groups([1, 2])
    ...     .from_date("2026-01-01")
    ...     .by_tags(True, ["vip"])
    ... )
    >>> api.list_archives(filters=filters)
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import Field
from typing_extensions import Self

from ..models.common import WireModel


class PropertyFilter(WireModel):
    """Matches a property by existence, by values or by excluded values."""

    exists: bool | None = None
    values: list[Any] | None = None
    exclude_values: list[Any] | None = None
    require_every_value: bool | None = None


PropertiesFilters = dict[str, dict[str, PropertyFilter]]
"""Property filters in the form ``namespace -> property -> filter``."""


def property_filter(
    includes: bool,
    values: Iterable[Any] | None = None,
    require_every_value: bool = False,
) -> PropertyFilter:
    """
    Build a property filter.

    With ``values`` None the filter only checks whether the property exists
    (``includes``) or not, and ``require_every_value`` is ignored. Otherwise
    it matches (``includes=True``) or excludes the given values;
    ``require_every_value`` requires all of them rather than any.
    """
    if values is None:
        return PropertyFilter(exists=includes)
    if includes:
        return PropertyFilter(values=list(values), require_every_value=require_every_value)
    return PropertyFilter(
        exclude_values=list(values), require_every_value=require_every_value
    )


class IntegerFilter(WireModel):
    values: list[int] | None = None
    exclude_values: list[int] | None = None


def integer_filter(values: Iterable[int], inclusive: bool = True) -> IntegerFilter:
    """Build a filter matching (``inclusive``) or excluding integer values."""
    if inclusive:
        return IntegerFilter(values=list(values))
    return IntegerFilter(exclude_values=list(values))


class SurveyFilter(WireModel):
    type: str
    answer_id: str


class GreetingsFilter(WireModel):
    from_: str | datetime | None = Field(default=None, alias="from")
    to: str | datetime | None = None
    values: list[int] | None = None
    exclude_values: list[int] | None = None
    exists: bool | None = None
    groups: IntegerFilter | None = None


class EventTypesFilter(WireModel):
    values: list[str] | None = None
    exclude_values: list[str] | None = None
    require_every_value: bool | None = None


class ChatsFilters(WireModel):
    """
    Filters for ``list_chats``.

    Active chats are included unless ``without_active_chats`` is called.
    """

    include_active: bool | None = True
    include_chats_without_threads: bool | None = None
    group_ids: list[int] | None = None
    properties: PropertiesFilters | None = None

    def without_active_chats(self) -> Self:
        self.include_active = False
        return self

    def with_chats_without_threads(self) -> Self:
        self.include_chats_without_threads = True
        return self

    def by_groups(self, group_ids: Iterable[int]) -> Self:
        self.group_ids = list(group_ids)
        return self

    def by_properties(self, properties: PropertiesFilters) -> Self:
        self.properties = properties
        return self


class ThreadsFilters(WireModel):
    """Date range filter for ``list_threads``."""

    from_: str | datetime | None = Field(default=None, alias="from")
    to: str | datetime | None = None

    def from_date(self, date: str | datetime) -> Self:
        """Exclude threads created before ``date``."""
        self.from_ = date
        return self

    def to_date(self, date: str | datetime) -> Self:
        """Exclude threads created after ``date``."""
        self.to = date
        return self


class ArchivesFilters(WireModel):
    """Filters for ``list_archives``."""

    agents: PropertyFilter | None = None
    group_ids: list[int] | None = None
    from_: str | datetime | None = Field(default=None, alias="from")
    to: str | datetime | None = None
    properties: PropertiesFilters | None = None
    tags: PropertyFilter | None = None
    sales: PropertyFilter | None = None
    goals: PropertyFilter | None = None
    surveys: list[SurveyFilter] | None = None
    thread_ids: list[str] | None = None
    query: str | None = None
    event_types: EventTypesFilter | None = None
    greetings: GreetingsFilter | None = None

    def by_agents(
        self,
        includes: bool,
        values: Iterable[Any] | None = None,
        require_every_value: bool = False,
    ) -> Self:
        """Match chats by agents; see ``property_filter`` for the semantics."""
        self.agents = property_filter(includes, values, require_every_value)
        return self

    def by_groups(self, group_ids: Iterable[int]) -> Self:
        self.group_ids = list(group_ids)
        return self

    def by_threads(self, thread_ids: Iterable[str]) -> Self:
        """
        Match the given threads only.

        Clears every other filter, since thread ids cannot be combined with
        other criteria.
        """
        for name in type(self).model_fields:
            setattr(self, name, None)
        self.thread_ids = list(thread_ids)
        return self

    def by_query(self, query: str) -> Self:
        self.query = query
        return self

    def from_date(self, date: str | datetime) -> Self:
        """Exclude chats before ``date``."""
        self.from_ = date
        return self

    def to_date(self, date: str | datetime) -> Self:
        """Exclude chats after ``date``."""
        self.to = date
        return self

    def by_properties(self, properties: PropertiesFilters) -> Self:
        self.properties = properties
        return self

    def by_surveys(self, surveys: Iterable[SurveyFilter]) -> Self:
        self.surveys = list(surveys)
        return self

    def by_tags(
        self,
        includes: bool,
        values: Iterable[Any] | None = None,
        require_every_value: bool = False,
    ) -> Self:
        self.tags = property_filter(includes, values, require_every_value)
        return self

    def by_sales(
        self,
        includes: bool,
        values: Iterable[Any] | None = None,
        require_every_value: bool = False,
    ) -> Self:
        self.sales = property_filter(includes, values, require_every_value)
        return self

    def by_goals(
        self,
        includes: bool,
        values: Iterable[Any] | None = None,
        require_every_value: bool = False,
    ) -> Self:
        self.goals = property_filter(includes, values, require_every_value)
        return self

    def by_event_types(
        self,
        includes: bool,
        values: Iterable[str],
        require_every_value: bool = False,
    ) -> Self:
        """Match (``includes``) or exclude chats containing the given event types."""
        if includes:
            self.event_types = EventTypesFilter(values=list(values))
        else:
            self.event_types = EventTypesFilter(exclude_values=list(values))
        self.event_types.require_every_value = require_every_value
        return self

    def by_greetings(self, greetings: GreetingsFilter) -> Self:
        self.greetings = greetings
        return self


class RoutingStatusesFilter(WireModel):
    group_ids: list[int] | None = None


__all__ = [
    "ArchivesFilters",
    "ChatsFilters",
    "EventTypesFilter",
    "GreetingsFilter",
    "IntegerFilter",
    "PropertiesFilters",
    "PropertyFilter",
    "RoutingStatusesFilter",
    "SurveyFilter",
    "ThreadsFilters",
    "integer_filter",
    "property_filter",
]
