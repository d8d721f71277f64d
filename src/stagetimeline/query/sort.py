# SPDX-License-Identifier: MIT

from typing import Any, Callable

from stagetimeline.model.category import category_label, severity_rank
from stagetimeline.model.facet import SortMode
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.time import timestamp_or_epoch


def _sort_key(mode: SortMode) -> tuple[Callable[[TimelineEvent], Any], bool]:
    match mode:
        case SortMode.OLDEST:
            return (lambda event: timestamp_or_epoch(event["occurred_at"]), False)
        case SortMode.CATEGORY_AZ:
            return (lambda event: category_label(event["category"]), False)
        case SortMode.SEVERITY:
            return (lambda event: severity_rank(event["severity"]), True)
    return (lambda event: timestamp_or_epoch(event["occurred_at"]), True)


def sort_events(events: list[TimelineEvent], mode: SortMode) -> list[TimelineEvent]:
    """
    Return a new list ordered by ``mode``.

    RECENT and OLDEST order by the parsed timestamp, unparseable ones counting
    as the epoch. CATEGORY_AZ orders by the human category label. SEVERITY puts
    the most severe first. The sort is stable.
    """
    key, descending = _sort_key(mode)
    return sorted(events, key=key, reverse=descending)
