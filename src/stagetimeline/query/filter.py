# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod

import pendulum

from stagetimeline.model.category import ALL, Category, DeadlineStatus, Severity
from stagetimeline.model.facet import DayQuickFilter, FacetState
from stagetimeline.model.occurrence import CalendarOccurrence, OccurrenceKind
from stagetimeline.model.timeline_config import CategoryFacet
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.query.sort import sort_events
from stagetimeline.service.deadline import (
    compute_deadline_status,
    is_deadline,
    is_overdue,
)


def generate_filter(facets: FacetState, now: pendulum.DateTime) -> "Predicate":
    """Build the AND of every active facet. Inactive facets add no predicate."""
    filter_obj = And()
    if facets["category"] != ALL:
        filter_obj.add_predicate(CategoryPredicate(Category(facets["category"])))
    if facets["severity"] != ALL:
        filter_obj.add_predicate(SeverityPredicate(Severity(facets["severity"])))
    if facets["only_deadlines"]:
        filter_obj.add_predicate(DeadlinePredicate())
    if facets["only_overdue"]:
        filter_obj.add_predicate(OverduePredicate(now))
    if facets["query"].strip():
        filter_obj.add_predicate(TextPredicate(facets["query"]))
    return filter_obj


class Predicate(ABC):
    @abstractmethod
    def include(self, event: TimelineEvent) -> bool: ...

    def filter(self, events: list[TimelineEvent]) -> list[TimelineEvent]:
        return [event for event in events if self.include(event)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, event: TimelineEvent) -> bool:
        return all(predicate.include(event) for predicate in self.predicates)


class CategoryPredicate(Predicate):
    def __init__(self, category: Category) -> None:
        self.category = category

    def include(self, event: TimelineEvent) -> bool:
        return event["category"] == self.category


class SeverityPredicate(Predicate):
    def __init__(self, severity: Severity) -> None:
        self.severity = severity

    def include(self, event: TimelineEvent) -> bool:
        # No badge reads as INFO, as it is displayed
        severity = event["severity"] or Severity.INFO
        return severity == self.severity


class DeadlinePredicate(Predicate):
    def include(self, event: TimelineEvent) -> bool:
        return is_deadline(event)


class OverduePredicate(Predicate):
    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def include(self, event: TimelineEvent) -> bool:
        return is_overdue(event, self.now)


class TextPredicate(Predicate):
    def __init__(self, query: str) -> None:
        self.query = query.strip().lower()

    def include(self, event: TimelineEvent) -> bool:
        if not self.query:
            return True
        return self.query in search_text(event)


def search_text(event: TimelineEvent) -> str:
    author = event["author"]
    parts = [
        event["title"],
        event["description"] or "",
        (author["name"] if author is not None else None) or "",
        (author["role"] if author is not None else None) or "",
        event["occurred_at"],
    ]
    return " ".join(parts).lower()


def filter_events(
    events: list[TimelineEvent], facets: FacetState, now: pendulum.DateTime
) -> list[TimelineEvent]:
    return generate_filter(facets, now).filter(events)


def apply_facets(
    events: list[TimelineEvent], facets: FacetState, now: pendulum.DateTime
) -> list[TimelineEvent]:
    """Filter then order ``events``, as the full history view shows them."""
    return sort_events(filter_events(events, facets, now), facets["sort"])


def filter_toolbar(
    events: list[TimelineEvent], category: CategoryFacet, query: str
) -> list[TimelineEvent]:
    """The compact toolbar's two facets: category and free text."""
    filter_obj = And()
    if category != ALL:
        filter_obj.add_predicate(CategoryPredicate(Category(category)))
    filter_obj.add_predicate(TextPredicate(query))
    return filter_obj.filter(events)


def is_overdue_occurrence(
    occurrence: CalendarOccurrence, now: pendulum.DateTime
) -> bool:
    if occurrence["kind"] != OccurrenceKind.DEADLINE:
        return False
    status = compute_deadline_status(occurrence["timestamp"], now)
    return status == DeadlineStatus.OVERDUE


def filter_day(
    occurrences: list[CalendarOccurrence],
    quick_filter: DayQuickFilter,
    now: pendulum.DateTime,
) -> list[CalendarOccurrence]:
    """Quick filter of the selected-day view, over that day's occurrences."""
    match quick_filter:
        case DayQuickFilter.DEADLINES:
            return [o for o in occurrences if o["kind"] == OccurrenceKind.DEADLINE]
        case DayQuickFilter.OVERDUE:
            return [o for o in occurrences if is_overdue_occurrence(o, now)]
    return list(occurrences)
