# SPDX-License-Identifier: MIT

import pendulum

from stagetimeline.model.category import DeadlineStatus
from stagetimeline.model.occurrence import CalendarOccurrence, OccurrenceKind
from stagetimeline.model.summary import DaySummary, DeadlineSummary, TimelineStats
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.query.filter import is_overdue_occurrence
from stagetimeline.service.deadline import (
    compute_deadline_status,
    declared_due_at,
    is_deadline,
)
from stagetimeline.time import parse_timestamp

UPCOMING_WINDOW = pendulum.duration(days=7)


def deadline_summary(
    events: list[TimelineEvent], now: pendulum.DateTime
) -> DeadlineSummary:
    """
    Aggregate deadline counts over the whole, unfiltered collection.

    ``due_within_7_days_count`` counts deadlines due between now and seven
    days from now, both ends included.
    """
    overdue = 0
    due_today = 0
    upcoming = 0
    deadline_count = 0

    for event in events:
        if not is_deadline(event):
            continue
        deadline_count += 1

        due_at = declared_due_at(event)
        if due_at is None:
            continue

        status = compute_deadline_status(due_at, now)
        if status == DeadlineStatus.OVERDUE:
            overdue += 1
        elif status == DeadlineStatus.DUE_TODAY:
            due_today += 1

        due = parse_timestamp(due_at)
        if due is not None and now <= due <= now + UPCOMING_WINDOW:
            upcoming += 1

    return {
        "total": len(events),
        "deadline_count": deadline_count,
        "overdue_count": overdue,
        "due_today_count": due_today,
        "due_within_7_days_count": upcoming,
    }


def day_summary(
    occurrences: list[CalendarOccurrence], now: pendulum.DateTime
) -> DaySummary:
    return {
        "total": len(occurrences),
        "deadlines": len(
            [o for o in occurrences if o["kind"] == OccurrenceKind.DEADLINE]
        ),
        "overdue": len([o for o in occurrences if is_overdue_occurrence(o, now)]),
    }


def timeline_stats(
    events: list[TimelineEvent], shown: list[TimelineEvent]
) -> TimelineStats:
    by_category: dict[str, int] = {}
    for event in events:
        category = str(event["category"])
        by_category[category] = by_category.get(category, 0) + 1

    return {"total": len(events), "shown": len(shown), "by_category": by_category}
