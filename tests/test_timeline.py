"""Tests for appending events and the memoized timeline query."""

from __future__ import annotations

import pendulum

from stagetimeline.model.category import Category, DeadlineStatus, Severity
from stagetimeline.model.facet import DayQuickFilter, default_facets
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.timeline import (
    MAX_CACHED_PROJECTIONS,
    TimelineQuery,
    append_event,
)
from stagetimeline.template.event import build_event

NOW = pendulum.datetime(2026, 1, 15, 12, tz="UTC")


def _new_event(occurred_at: str = "2026-01-16T09:00:00.000Z") -> TimelineEvent:
    return build_event(
        "  Proposal received ",
        occurred_at,
        NOW,
        category=Category.COMMENT,
        severity=Severity.WARNING,
        description="   ",
        due_at="2026-01-15T18:00:00.000Z",
        author_name="Eva",
    )


def test_build_event() -> None:
    event = _new_event()
    assert event["id"].startswith("evt_")
    assert event["title"] == "Proposal received"
    assert event["description"] is None
    assert event["author"] == {"id": None, "name": "Eva", "role": None}
    assert event["deadline"] == {
        "is_deadline": True,
        "due_at": "2026-01-15T18:00:00.000Z",
        "status": DeadlineStatus.DUE_TODAY,
    }
    assert _new_event()["id"] != event["id"]


def test_append_does_not_mutate(mixed_events: list[TimelineEvent]) -> None:
    before = [event["id"] for event in mixed_events]
    event = _new_event("2026-01-10T00:00:00.000Z")
    result = append_event(mixed_events, event, "2026-01-10")

    assert [e["id"] for e in mixed_events] == before
    assert result["event"] is event
    assert result["day_key"] == "2026-01-10"
    assert [e["id"] for e in result["events"]] == [
        "e5",
        "e4",
        event["id"],
        "e3",
        "e2",
        "e1",
    ]


def test_query_memoizes_until_append(mixed_events: list[TimelineEvent]) -> None:
    query = TimelineQuery(mixed_events)
    facets = default_facets()

    first = query.history(facets, NOW)
    assert query.history(facets, NOW) is first
    assert query.toolbar() is query.toolbar()
    grid = query.month_grid(NOW, now=NOW)
    assert query.month_grid(NOW, now=NOW) is grid

    event = _new_event()
    query.append(event)
    assert query.revision == 1

    after = query.history(facets, NOW)
    assert after is not first
    assert after[0]["id"] == event["id"]
    assert len(after) == len(first) + 1
    assert query.month_grid(NOW, now=NOW) is not grid


def test_query_without_now_is_not_memoized(
    mixed_events: list[TimelineEvent],
) -> None:
    query = TimelineQuery(mixed_events)
    facets = default_facets()

    for _ in range(200):
        query.history(facets)
        query.grouped_history(facets)
        query.summary()
    assert len(query._cache) == 0


def test_query_cache_is_bounded(mixed_events: list[TimelineEvent]) -> None:
    query = TimelineQuery(mixed_events)

    for minutes in range(300):
        query.summary(NOW.add(minutes=minutes))
    assert len(query._cache) <= MAX_CACHED_PROJECTIONS

    latest = NOW.add(minutes=299)
    assert query.summary(latest) is query.summary(latest)


def test_query_keeps_facets_apart(mixed_events: list[TimelineEvent]) -> None:
    query = TimelineQuery(mixed_events)
    facets = default_facets()
    deadlines = default_facets()
    deadlines["only_deadlines"] = True

    assert len(query.history(facets, NOW)) == 5
    assert len(query.history(deadlines, NOW)) == 3
    later = pendulum.datetime(2026, 2, 1, tz="UTC")
    assert query.summary(NOW)["overdue_count"] == 1
    assert query.summary(later)["overdue_count"] == 3


def test_query_views(mixed_events: list[TimelineEvent]) -> None:
    query = TimelineQuery(mixed_events)

    grouped = query.grouped_history(default_facets(), NOW)
    assert grouped["ordered_keys"][0] == "2026-01-15"

    buckets = query.buckets(Category.ACTION)
    assert set(buckets["ordered_keys"]) == {
        "2026-01-08",
        "2026-01-09",
        "2026-01-12",
        "2026-01-30",
    }

    day = query.day("2026-01-15", now=NOW)
    assert [o["id"] for o in day] == ["e5", "e5__deadline"]
    later = pendulum.datetime(2026, 1, 16, tz="UTC")
    overdue = query.day("2026-01-15", quick_filter=DayQuickFilter.OVERDUE, now=later)
    assert [o["id"] for o in overdue] == ["e5__deadline"]


def test_events_property_is_a_copy(mixed_events: list[TimelineEvent]) -> None:
    query = TimelineQuery(mixed_events)
    query.events.clear()
    assert len(query.events) == 5
