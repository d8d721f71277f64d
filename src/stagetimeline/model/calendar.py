# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum

from stagetimeline.model.occurrence import CalendarOccurrence


class GlyphKind(StrEnum):
    DEADLINE_OVERDUE = "deadline_overdue"
    DEADLINE_TODAY = "deadline_today"
    DEADLINE_FUTURE = "deadline_future"
    CREATED = "created"


class Glyph(TypedDict):
    kind: GlyphKind
    label: str
    occurrence_id: str


class DayBuckets(TypedDict):
    """
    Occurrences keyed by local day ('YYYY-MM-DD').

    Each bucket is ordered oldest first, ``ordered_keys`` newest day first.
    """

    by_day: dict[str, list[CalendarOccurrence]]
    ordered_keys: list[str]


class CalendarCell(TypedDict):
    date: pendulum.DateTime
    day_key: str
    in_month: bool
    is_today: bool
    count: int
    glyphs: list[Glyph]
    overflow: int
