"""Tests for occurrence expansion and day grouping."""

from __future__ import annotations

import pendulum

from stagetimeline.model.category import DeadlineStatus
from stagetimeline.model.occurrence import OccurrenceKind
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.day_group import (
    day_occurrences,
    group_by_day,
    group_events_by_day,
)
from stagetimeline.service.deadline import compute_deadline_status
from stagetimeline.service.normalize import normalize_events
from stagetimeline.service.occurrence import expand_occurrences, occurrence_title


def _one(raw: dict[str, object]) -> TimelineEvent:
    return normalize_events([{"title": "Event", "occurredAt": "2026-01-05", **raw}])[0]


def test_expansion_counts() -> None:
    plain = _one({"id": "plain"})
    with_deadline = _one(
        {"id": "due", "deadline": {"isDeadline": True, "dueAt": "2026-01-09T10:00:00Z"}}
    )
    broken_due = _one(
        {"id": "broken", "deadline": {"isDeadline": True, "dueAt": "next week"}}
    )

    assert len(expand_occurrences([plain])) == 1
    pair = expand_occurrences([with_deadline])
    assert len(pair) == 2
    assert pair[0]["id"] != pair[1]["id"]
    assert [o["kind"] for o in pair] == [OccurrenceKind.CREATED, OccurrenceKind.DEADLINE]
    assert pair[1]["id"] == "due__deadline"
    assert pair[1]["timestamp"] == "2026-01-09T10:00:00Z"
    assert len(expand_occurrences([broken_due])) == 1


def test_deadline_suffix_collision_keeps_structural_keys_apart() -> None:
    owner = _one(
        {"id": "x", "deadline": {"isDeadline": True, "dueAt": "2026-01-09T10:00:00Z"}}
    )
    impostor = _one({"id": "x__deadline"})
    occurrences = expand_occurrences([owner, impostor])

    display_ids = [o["id"] for o in occurrences]
    assert display_ids.count("x__deadline") == 2
    keys = {o["key"] for o in occurrences}
    assert len(keys) == 3


def test_occurrence_title() -> None:
    event = _one(
        {"id": "due", "deadline": {"isDeadline": True, "dueAt": "2026-01-09T10:00:00Z"}}
    )
    created, deadline = expand_occurrences([event])
    assert occurrence_title(created) == "Event"
    assert occurrence_title(deadline) == "Deadline: Event"


def test_scenario_expansion_and_grouping(
    scenario_events: list[TimelineEvent], scenario_now: pendulum.DateTime
) -> None:
    occurrences = expand_occurrences(scenario_events)
    assert len(occurrences) == 3
    assert {o["id"] for o in occurrences} == {"t1", "t5", "t5__deadline"}

    deadline = next(o for o in occurrences if o["kind"] == OccurrenceKind.DEADLINE)
    status = compute_deadline_status(deadline["timestamp"], scenario_now)
    assert status == DeadlineStatus.OVERDUE

    buckets = group_by_day(occurrences)
    assert buckets["ordered_keys"] == ["2026-01-20", "2026-01-14", "2026-01-10"]
    assert [o["id"] for o in day_occurrences(buckets, "2026-01-20")] == ["t5__deadline"]


def test_buckets_run_oldest_first_within_a_day() -> None:
    events = normalize_events(
        [
            {"id": "late", "title": "Late", "occurredAt": "2026-01-05T18:00:00Z"},
            {"id": "early", "title": "Early", "occurredAt": "2026-01-05T08:00:00Z"},
            {"id": "lost", "title": "Lost", "occurredAt": "no date"},
        ]
    )
    buckets = group_by_day(expand_occurrences(events))
    assert buckets["ordered_keys"] == ["2026-01-05"]
    assert [o["id"] for o in buckets["by_day"]["2026-01-05"]] == ["early", "late"]
    assert day_occurrences(buckets, "2026-01-06") == []
    assert day_occurrences(buckets, None) == []


def test_group_events_by_day(mixed_events: list[TimelineEvent]) -> None:
    by_day, ordered_keys = group_events_by_day(mixed_events)
    assert ordered_keys == [
        "2026-01-15",
        "2026-01-11",
        "2026-01-09",
        "2026-01-08",
        "2026-01-05",
    ]
    assert [event["id"] for event in by_day["2026-01-15"]] == ["e5"]
