# SPDX-License-Identifier: MIT

from typing import Callable, Optional, TypeVar

import pendulum

from stagetimeline.model.calendar import DayBuckets
from stagetimeline.model.occurrence import CalendarOccurrence
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.time import parse_timestamp, to_day_key

T = TypeVar("T")


def _group(
    items: list[T], timestamp_of: Callable[[T], str]
) -> tuple[dict[str, list[T]], list[str]]:
    dated: dict[str, list[tuple[pendulum.DateTime, T]]] = {}

    for item in items:
        parsed = parse_timestamp(timestamp_of(item))
        # Unparseable timestamps are left out rather than sharing a bucket
        if parsed is None:
            continue
        dated.setdefault(to_day_key(parsed), []).append((parsed, item))

    by_day: dict[str, list[T]] = {}
    for day_key, entries in dated.items():
        entries.sort(key=lambda entry: entry[0])
        by_day[day_key] = [item for _, item in entries]

    # 'YYYY-MM-DD' keys order chronologically as strings
    ordered_keys = sorted(by_day.keys(), reverse=True)
    return by_day, ordered_keys


def group_by_day(occurrences: list[CalendarOccurrence]) -> DayBuckets:
    """
    Bucket occurrences by local calendar day.

    Within a day occurrences run oldest first; ``ordered_keys`` lists the
    days newest first.
    """
    by_day, ordered_keys = _group(occurrences, lambda o: o["timestamp"])
    return {"by_day": by_day, "ordered_keys": ordered_keys}


def group_events_by_day(
    events: list[TimelineEvent],
) -> tuple[dict[str, list[TimelineEvent]], list[str]]:
    """Same grouping over plain events by their own timestamp, for list views."""
    return _group(events, lambda event: event["occurred_at"])


def day_occurrences(
    buckets: DayBuckets, day_key: Optional[str]
) -> list[CalendarOccurrence]:
    if day_key is None:
        return []
    return list(buckets["by_day"].get(day_key, []))
