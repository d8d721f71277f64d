# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional, TypedDict, TypeVar, cast

import pendulum

from stagetimeline.logger import get_logger
from stagetimeline.model.calendar import CalendarCell, DayBuckets
from stagetimeline.model.category import ALL
from stagetimeline.model.facet import (
    DayQuickFilter,
    FacetState,
    SortMode,
    facet_cache_key,
)
from stagetimeline.model.occurrence import CalendarOccurrence
from stagetimeline.model.summary import DeadlineSummary
from stagetimeline.model.timeline_config import CategoryFacet
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.query.filter import apply_facets, filter_day, filter_toolbar
from stagetimeline.query.sort import sort_events
from stagetimeline.service.calendar_grid import build_month_grid
from stagetimeline.service.day_group import (
    day_occurrences,
    group_by_day,
    group_events_by_day,
)
from stagetimeline.service.occurrence import expand_occurrences
from stagetimeline.service.summary import deadline_summary
from stagetimeline.time import now_local, start_of_local_month, to_day_key

logger = get_logger(__name__)

T = TypeVar("T")

MAX_CACHED_PROJECTIONS = 128


class AppendResult(TypedDict):
    events: list[TimelineEvent]
    event: TimelineEvent
    day_key: Optional[str]


class GroupedHistory(TypedDict):
    by_day: dict[str, list[TimelineEvent]]
    ordered_keys: list[str]


def sort_by_recency(events: list[TimelineEvent]) -> list[TimelineEvent]:
    return sort_events(events, SortMode.RECENT)


def append_event(
    events: list[TimelineEvent],
    event: TimelineEvent,
    day_key: Optional[str] = None,
) -> AppendResult:
    """
    Add a well-formed event to a collection.

    The given list is left as it is; a new list holding the event, sorted most
    recent first, is returned along with the day hint the caller passed.
    """
    updated = sort_by_recency([*events, event])
    logger.info("Appended timeline event %s (day hint: %s)", event["id"], day_key)
    return {"events": updated, "event": event, "day_key": day_key}


class TimelineQuery:
    """
    Owner of one event collection and memoized projections over it.

    Every projection is keyed by the collection revision and the query inputs,
    so an unchanged query returns the previously computed value and any append
    invalidates all of them. Projections that depend on the reference instant
    are memoized only when the caller passes ``now``; without it the current
    instant is captured once and the result is computed fresh. At most
    ``MAX_CACHED_PROJECTIONS`` results are kept, oldest evicted first.
    """

    def __init__(self, events: list[TimelineEvent]) -> None:
        self._events: list[TimelineEvent] = sort_by_recency(events)
        self._revision = 0
        self._cache: dict[tuple[Any, ...], Any] = {}

    @property
    def events(self) -> list[TimelineEvent]:
        return list(self._events)

    @property
    def revision(self) -> int:
        return self._revision

    def append(
        self, event: TimelineEvent, day_key: Optional[str] = None
    ) -> AppendResult:
        result = append_event(self._events, event, day_key)
        self._events = result["events"]
        self._revision += 1
        self._cache.clear()
        return result

    def _memo(self, key: tuple[Any, ...], compute: Callable[[], T]) -> T:
        full_key = (self._revision, *key)
        if full_key in self._cache:
            return cast(T, self._cache[full_key])

        value = compute()
        if len(self._cache) >= MAX_CACHED_PROJECTIONS:
            self._cache.pop(next(iter(self._cache)))
        self._cache[full_key] = value
        return value

    def _memo_at(
        self,
        key: tuple[Any, ...],
        now: Optional[pendulum.DateTime],
        compute: Callable[[pendulum.DateTime], T],
    ) -> T:
        if now is None:
            return compute(now_local())
        return self._memo((*key, now), lambda: compute(now))

    def history(
        self, facets: FacetState, now: Optional[pendulum.DateTime] = None
    ) -> list[TimelineEvent]:
        return self._memo_at(
            ("history", facet_cache_key(facets)),
            now,
            lambda reference: apply_facets(self._events, facets, reference),
        )

    def grouped_history(
        self, facets: FacetState, now: Optional[pendulum.DateTime] = None
    ) -> GroupedHistory:
        def compute(reference: pendulum.DateTime) -> GroupedHistory:
            by_day, ordered_keys = group_events_by_day(self.history(facets, reference))
            return {"by_day": by_day, "ordered_keys": ordered_keys}

        return self._memo_at(("grouped", facet_cache_key(facets)), now, compute)

    def toolbar(
        self, category: CategoryFacet = ALL, query: str = ""
    ) -> list[TimelineEvent]:
        return self._memo(
            ("toolbar", str(category), query),
            lambda: filter_toolbar(self._events, category, query),
        )

    def buckets(self, category: CategoryFacet = ALL, query: str = "") -> DayBuckets:
        return self._memo(
            ("buckets", str(category), query),
            lambda: group_by_day(expand_occurrences(self.toolbar(category, query))),
        )

    def month_grid(
        self,
        month: pendulum.DateTime,
        category: CategoryFacet = ALL,
        query: str = "",
        now: Optional[pendulum.DateTime] = None,
    ) -> list[CalendarCell]:
        month_key = to_day_key(start_of_local_month(month))
        return self._memo_at(
            ("grid", month_key, str(category), query),
            now,
            lambda reference: build_month_grid(
                month, reference, self.buckets(category, query), reference
            ),
        )

    def day(
        self,
        day_key: str,
        category: CategoryFacet = ALL,
        query: str = "",
        quick_filter: DayQuickFilter = DayQuickFilter.ALL,
        now: Optional[pendulum.DateTime] = None,
    ) -> list[CalendarOccurrence]:
        reference = now if now is not None else now_local()
        occurrences = day_occurrences(self.buckets(category, query), day_key)
        return filter_day(occurrences, quick_filter, reference)

    def summary(self, now: Optional[pendulum.DateTime] = None) -> DeadlineSummary:
        return self._memo_at(
            ("summary",),
            now,
            lambda reference: deadline_summary(self._events, reference),
        )
