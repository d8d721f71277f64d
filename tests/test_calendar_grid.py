"""Tests for the six-week month grid."""

from __future__ import annotations

import pendulum
import pytest

from stagetimeline.model.calendar import DayBuckets, GlyphKind
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.calendar_grid import (
    GRID_DAYS,
    MAX_GLYPHS,
    build_month_grid,
    calendar_glyphs,
    shift_month,
    start_of_grid,
)
from stagetimeline.service.day_group import group_by_day
from stagetimeline.service.normalize import normalize_events
from stagetimeline.service.occurrence import expand_occurrences

EMPTY: DayBuckets = {"by_day": {}, "ordered_keys": []}


@pytest.mark.parametrize("month", range(1, 13))
def test_grid_is_always_six_weeks_from_sunday(month: int) -> None:
    target = pendulum.datetime(2026, month, 15, tz="UTC")
    cells = build_month_grid(target, target, EMPTY, target)

    assert len(cells) == GRID_DAYS
    assert cells[0]["date"].isoweekday() == 7
    assert cells[0]["date"] <= target.start_of("month")
    in_month = [cell for cell in cells if cell["in_month"]]
    assert len(in_month) == target.days_in_month
    assert in_month[0]["day_key"] == target.start_of("month").format("YYYY-MM-DD")


def test_grid_start() -> None:
    # 2026-01-01 is a Thursday, 2026-02-01 a Sunday
    assert start_of_grid(pendulum.datetime(2026, 1, 1, tz="UTC")).format(
        "YYYY-MM-DD"
    ) == "2025-12-28"
    assert start_of_grid(pendulum.datetime(2026, 2, 10, tz="UTC")).format(
        "YYYY-MM-DD"
    ) == "2026-02-01"


def test_shift_month_crosses_years() -> None:
    december = pendulum.datetime(2025, 12, 31, 20, tz="UTC")
    assert shift_month(december, 1).format("YYYY-MM-DD") == "2026-01-01"
    assert shift_month(december, -12).format("YYYY-MM-DD") == "2024-12-01"


def test_today_is_flagged_once() -> None:
    today = pendulum.datetime(2026, 1, 21, 9, tz="UTC")
    cells = build_month_grid(today, today, EMPTY, today)
    flagged = [cell["day_key"] for cell in cells if cell["is_today"]]
    assert flagged == ["2026-01-21"]


def _busy_day() -> list[TimelineEvent]:
    raw = []
    for index in range(3):
        raw.append(
            {
                "id": f"due{index}",
                "title": f"Deadline {index}",
                "occurredAt": "2026-01-02T10:00:00Z",
                "deadline": {"isDeadline": True, "dueAt": f"2026-01-20T1{index}:00:00Z"},
            }
        )
    for index in range(2):
        raw.append(
            {
                "id": f"new{index}",
                "title": f"Created {index}",
                "occurredAt": f"2026-01-20T0{index}:00:00Z",
            }
        )
    return normalize_events(raw)


def test_glyphs_are_capped_and_overflow_counted() -> None:
    now = pendulum.datetime(2026, 1, 10, tz="UTC")
    buckets = group_by_day(expand_occurrences(_busy_day()))
    cells = build_month_grid(now, now, buckets, now)

    busy = next(cell for cell in cells if cell["day_key"] == "2026-01-20")
    assert busy["count"] == 5
    assert len(busy["glyphs"]) == MAX_GLYPHS
    assert [glyph["kind"] for glyph in busy["glyphs"]] == [
        GlyphKind.DEADLINE_FUTURE,
        GlyphKind.DEADLINE_FUTURE,
        GlyphKind.CREATED,
    ]
    assert busy["overflow"] == 2

    quiet = next(cell for cell in cells if cell["day_key"] == "2026-01-19")
    assert quiet["glyphs"] == []
    assert quiet["overflow"] == 0


def test_glyph_urgency_follows_reference_time() -> None:
    occurrences = group_by_day(expand_occurrences(_busy_day()))["by_day"]["2026-01-20"]

    same_day = pendulum.datetime(2026, 1, 20, 23, tz="UTC")
    assert calendar_glyphs(occurrences, same_day)[0]["kind"] == GlyphKind.DEADLINE_TODAY

    after = pendulum.datetime(2026, 1, 22, tz="UTC")
    glyphs = calendar_glyphs(occurrences, after)
    assert glyphs[0]["kind"] == GlyphKind.DEADLINE_OVERDUE
    assert glyphs[0]["label"] == "Deadline overdue"
    assert glyphs[-1]["occurrence_id"] == "new0"
