"""Tests for deadline, day and category summaries."""

from __future__ import annotations

import pendulum

from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.day_group import group_by_day
from stagetimeline.service.occurrence import expand_occurrences
from stagetimeline.service.summary import day_summary, deadline_summary, timeline_stats


def test_deadline_summary(mixed_events: list[TimelineEvent]) -> None:
    now = pendulum.datetime(2026, 1, 15, 12, tz="UTC")
    assert deadline_summary(mixed_events, now) == {
        "total": 5,
        "deadline_count": 3,
        "overdue_count": 1,
        "due_today_count": 1,
        # e5 later today; e3 is more than a week away
        "due_within_7_days_count": 1,
    }


def test_upcoming_window_includes_its_end(mixed_events: list[TimelineEvent]) -> None:
    now = pendulum.datetime(2026, 1, 23, 18, tz="UTC")
    summary = deadline_summary(mixed_events, now)
    assert summary["due_within_7_days_count"] == 1
    assert summary["overdue_count"] == 2


def test_empty_summary() -> None:
    now = pendulum.datetime(2026, 1, 15, tz="UTC")
    assert deadline_summary([], now) == {
        "total": 0,
        "deadline_count": 0,
        "overdue_count": 0,
        "due_today_count": 0,
        "due_within_7_days_count": 0,
    }


def test_day_summary(
    scenario_events: list[TimelineEvent], scenario_now: pendulum.DateTime
) -> None:
    buckets = group_by_day(expand_occurrences(scenario_events))
    assert day_summary(buckets["by_day"]["2026-01-20"], scenario_now) == {
        "total": 1,
        "deadlines": 1,
        "overdue": 1,
    }
    assert day_summary(buckets["by_day"]["2026-01-14"], scenario_now) == {
        "total": 1,
        "deadlines": 0,
        "overdue": 0,
    }


def test_timeline_stats(mixed_events: list[TimelineEvent]) -> None:
    stats = timeline_stats(mixed_events, mixed_events[:2])
    assert stats["total"] == 5
    assert stats["shown"] == 2
    assert stats["by_category"] == {"status": 2, "action": 2, "attachment": 1}
