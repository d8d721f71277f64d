# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypeAlias, TypedDict

from stagetimeline.model.timeline_event import EventId, TimelineEvent

DEADLINE_ID_SUFFIX = "__deadline"


class OccurrenceKind(StrEnum):
    CREATED = "created"
    DEADLINE = "deadline"


OccurrenceKey: TypeAlias = tuple[EventId, OccurrenceKind]


class CalendarOccurrence(TypedDict):
    """
    One appearance of an event on a calendar day.

    ``key`` is the identity of the occurrence. ``id`` is only a display id and
    may collide when a caller-supplied event id already ends with the deadline
    suffix.
    """

    kind: OccurrenceKind
    event: TimelineEvent
    timestamp: str
    id: str
    key: OccurrenceKey
