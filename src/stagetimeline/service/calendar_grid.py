# SPDX-License-Identifier: MIT

import pendulum

from stagetimeline.model.calendar import CalendarCell, DayBuckets, Glyph, GlyphKind
from stagetimeline.model.category import DeadlineStatus
from stagetimeline.model.occurrence import CalendarOccurrence, OccurrenceKind
from stagetimeline.service.deadline import compute_deadline_status
from stagetimeline.time import start_of_local_day, start_of_local_month, to_day_key

GRID_DAYS = 42
MAX_GLYPHS = 3
MAX_DEADLINE_GLYPHS = 2

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

GLYPH_LABELS: dict[GlyphKind, str] = {
    GlyphKind.DEADLINE_OVERDUE: "Deadline overdue",
    GlyphKind.DEADLINE_TODAY: "Deadline is today",
    GlyphKind.DEADLINE_FUTURE: "Deadline",
    GlyphKind.CREATED: "Event created",
}


def start_of_grid(month: pendulum.DateTime) -> pendulum.DateTime:
    """The Sunday on or before the first day of ``month``, at local midnight."""
    month_start = start_of_local_month(month)
    # isoweekday: Monday = 1, ..., Sunday = 7
    days_since_sunday = month_start.isoweekday() % 7
    return month_start.subtract(days=days_since_sunday)


def shift_month(month: pendulum.DateTime, delta: int) -> pendulum.DateTime:
    return start_of_local_month(month).add(months=delta)


def deadline_glyph_kind(
    occurrence: CalendarOccurrence, now: pendulum.DateTime
) -> GlyphKind:
    match compute_deadline_status(occurrence["timestamp"], now):
        case DeadlineStatus.OVERDUE:
            return GlyphKind.DEADLINE_OVERDUE
        case DeadlineStatus.DUE_TODAY:
            return GlyphKind.DEADLINE_TODAY
    return GlyphKind.DEADLINE_FUTURE


def calendar_glyphs(
    occurrences: list[CalendarOccurrence], now: pendulum.DateTime
) -> list[Glyph]:
    """
    Pick the markers shown in a day cell.

    Up to two deadline markers come first, each by its own urgency, then one
    marker standing for all events created that day. Never more than three.
    """
    glyphs: list[Glyph] = []

    deadlines = [o for o in occurrences if o["kind"] == OccurrenceKind.DEADLINE]
    created = [o for o in occurrences if o["kind"] == OccurrenceKind.CREATED]

    for occurrence in deadlines[:MAX_DEADLINE_GLYPHS]:
        kind = deadline_glyph_kind(occurrence, now)
        glyphs.append(
            {"kind": kind, "label": GLYPH_LABELS[kind], "occurrence_id": occurrence["id"]}
        )

    if created:
        glyphs.append(
            {
                "kind": GlyphKind.CREATED,
                "label": GLYPH_LABELS[GlyphKind.CREATED],
                "occurrence_id": created[0]["id"],
            }
        )

    return glyphs[:MAX_GLYPHS]


def build_month_grid(
    month: pendulum.DateTime,
    today: pendulum.DateTime,
    buckets: DayBuckets,
    now: pendulum.DateTime,
) -> list[CalendarCell]:
    """
    Lay out ``month`` as six full weeks starting on Sunday.

    Always 42 cells, whatever the number of weeks the month touches. Days
    outside the month are still filled in and flagged ``in_month=False``.
    """
    month_start = start_of_local_month(month)
    today_key = to_day_key(start_of_local_day(today))
    current_date = start_of_grid(month_start)

    cells: list[CalendarCell] = []
    for _ in range(GRID_DAYS):
        day_key = to_day_key(current_date)
        day_items = buckets["by_day"].get(day_key, [])
        glyphs = calendar_glyphs(day_items, now)

        cells.append(
            {
                "date": current_date,
                "day_key": day_key,
                "in_month": current_date.month == month_start.month
                and current_date.year == month_start.year,
                "is_today": day_key == today_key,
                "count": len(day_items),
                "glyphs": glyphs,
                "overflow": max(0, len(day_items) - len(glyphs)),
            }
        )
        current_date = current_date.add(days=1)

    return cells
