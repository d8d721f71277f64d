# SPDX-License-Identifier: MIT

from typing import Any, Literal, Optional, TypeAlias, TypedDict

from stagetimeline.model.category import Category, DeadlineStatus, Severity

EventId: TypeAlias = str


class Author(TypedDict):
    id: Optional[str]
    name: Optional[str]
    role: Optional[str]


class Deadline(TypedDict):
    is_deadline: bool
    due_at: Optional[str]
    # Classification cached at creation time; filters always recompute it
    status: Optional[DeadlineStatus]


class TimelineEvent(TypedDict):
    id: EventId
    title: str
    description: Optional[str]
    category: Category
    severity: Optional[Severity]
    occurred_at: str
    author: Optional[Author]
    deadline: Optional[Deadline]
    openable: bool
    href: Optional[str]
    meta: Optional[dict[str, Any]]


RejectionReason = Literal[
    "not_a_mapping", "missing_id", "missing_title", "missing_occurred_at"
]


class Accepted(TypedDict):
    status: Literal["accepted"]
    event: TimelineEvent


class Rejected(TypedDict):
    status: Literal["rejected"]
    reason: RejectionReason


ParseResult = Accepted | Rejected
