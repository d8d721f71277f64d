# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from stagetimeline.model.category import DeadlineStatus
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.time import parse_timestamp, to_day_key


def compute_deadline_status(
    due_at: Optional[str], now: pendulum.DateTime
) -> DeadlineStatus:
    """
    Classify a due timestamp against ``now``.

    The calendar day is compared first so that anything due later today, or
    earlier today, reads as DUE_TODAY. Only then are the instants compared.
    An unparseable due date is FUTURE.
    """
    due = parse_timestamp(due_at)
    if due is None:
        return DeadlineStatus.FUTURE

    if to_day_key(due) == to_day_key(now):
        return DeadlineStatus.DUE_TODAY

    if due < now:
        return DeadlineStatus.OVERDUE
    return DeadlineStatus.FUTURE


def declared_due_at(event: TimelineEvent) -> Optional[str]:
    """The due timestamp of a declared deadline, None when there is none."""
    deadline = event["deadline"]
    if deadline is None or not deadline["is_deadline"]:
        return None
    return deadline["due_at"] or None


def is_deadline(event: TimelineEvent) -> bool:
    deadline = event["deadline"]
    return deadline is not None and deadline["is_deadline"]


def live_deadline_status(
    event: TimelineEvent, now: pendulum.DateTime
) -> Optional[DeadlineStatus]:
    due_at = declared_due_at(event)
    if due_at is None:
        return None
    return compute_deadline_status(due_at, now)


def is_overdue(event: TimelineEvent, now: pendulum.DateTime) -> bool:
    return live_deadline_status(event, now) == DeadlineStatus.OVERDUE
