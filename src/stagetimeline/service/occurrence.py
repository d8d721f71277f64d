# SPDX-License-Identifier: MIT

from stagetimeline.model.occurrence import (
    DEADLINE_ID_SUFFIX,
    CalendarOccurrence,
    OccurrenceKind,
)
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.deadline import declared_due_at
from stagetimeline.time import parse_timestamp


def created_occurrence(event: TimelineEvent) -> CalendarOccurrence:
    return {
        "kind": OccurrenceKind.CREATED,
        "event": event,
        "timestamp": event["occurred_at"],
        "id": event["id"],
        "key": (event["id"], OccurrenceKind.CREATED),
    }


def deadline_occurrence(event: TimelineEvent, due_at: str) -> CalendarOccurrence:
    return {
        "kind": OccurrenceKind.DEADLINE,
        "event": event,
        "timestamp": due_at,
        "id": f"{event['id']}{DEADLINE_ID_SUFFIX}",
        "key": (event["id"], OccurrenceKind.DEADLINE),
    }


def expand_occurrences(events: list[TimelineEvent]) -> list[CalendarOccurrence]:
    """
    Materialize events as calendar occurrences.

    Every event appears on its creation day. An event with a declared deadline
    whose due date parses also appears on its due day; a due date that does
    not parse adds nothing.
    """
    occurrences: list[CalendarOccurrence] = []

    for event in events:
        occurrences.append(created_occurrence(event))

        due_at = declared_due_at(event)
        if due_at is not None and parse_timestamp(due_at) is not None:
            occurrences.append(deadline_occurrence(event, due_at))

    return occurrences


def occurrence_title(occurrence: CalendarOccurrence) -> str:
    if occurrence["kind"] == OccurrenceKind.DEADLINE:
        return f"Deadline: {occurrence['event']['title']}"
    return occurrence["event"]["title"]
