# SPDX-License-Identifier: MIT

import uuid
from typing import Optional

import pendulum

from stagetimeline.model.category import Category, Severity
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.deadline import compute_deadline_status


def generate_event_id() -> str:
    return f"evt_{uuid.uuid4().hex}"


def get_event_template() -> TimelineEvent:
    return {
        "id": generate_event_id(),
        "title": "",
        "description": None,
        "category": Category.STATUS,
        "severity": Severity.INFO,
        "occurred_at": "",
        "author": None,
        "deadline": None,
        "openable": True,
        "href": None,
        "meta": None,
    }


def build_event(
    title: str,
    occurred_at: str,
    now: pendulum.DateTime,
    category: Category = Category.STATUS,
    severity: Severity = Severity.INFO,
    description: Optional[str] = None,
    due_at: Optional[str] = None,
    author_name: Optional[str] = None,
    author_role: Optional[str] = None,
) -> TimelineEvent:
    """Assemble a creation-form event. Field validation is the caller's job."""
    event = get_event_template()
    event["title"] = title.strip()
    event["occurred_at"] = occurred_at
    event["category"] = category
    event["severity"] = severity
    event["description"] = (description or "").strip() or None

    name = (author_name or "").strip() or None
    role = (author_role or "").strip() or None
    if name is not None or role is not None:
        event["author"] = {"id": None, "name": name, "role": role}

    if due_at:
        event["deadline"] = {
            "is_deadline": True,
            "due_at": due_at,
            "status": compute_deadline_status(due_at, now),
        }
    return event
