# SPDX-License-Identifier: MIT

from typing import Any

from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.normalize import normalize_events

# Shown when a stage supplies no items
DEMO_RAW_ITEMS: list[dict[str, Any]] = [
    {
        "id": "t1",
        "title": "DFD created",
        "description": "First version of the document was started.",
        "category": "version",
        "severity": "info",
        "occurredAt": "2026-01-10T12:10:00.000Z",
        "author": {"name": "Gabriel Miranda", "role": "Analyst"},
    },
    {
        "id": "t2",
        "title": "Sent for review",
        "description": "Document sent to the procurement office.",
        "category": "status",
        "severity": "warning",
        "occurredAt": "2026-01-12T16:25:00.000Z",
        "author": {"name": "User", "role": "Requester"},
    },
    {
        "id": "t3",
        "title": "Attachment added",
        "description": "ETP_v2.pdf",
        "category": "attachment",
        "severity": "info",
        "occurredAt": "2026-01-13T09:05:00.000Z",
        "author": {"name": "User", "role": "Requester"},
    },
    {
        "id": "t4",
        "title": "Comment recorded",
        "description": "Adjust the justification of need and the measurement criteria.",
        "category": "comment",
        "severity": "info",
        "occurredAt": "2026-01-13T11:40:00.000Z",
        "author": {"name": "Procurement analyst", "role": "Procurement"},
    },
    {
        "id": "t5",
        "title": "Stage approved",
        "description": "Stage completed and next stage released.",
        "category": "action",
        "severity": "success",
        "occurredAt": "2026-01-14T15:00:00.000Z",
        "author": {"name": "Procurement analyst", "role": "Procurement"},
        "deadline": {
            "isDeadline": True,
            "dueAt": "2026-01-20T15:00:00.000Z",
            "status": "future",
        },
    },
]


def get_demo_events() -> list[TimelineEvent]:
    return normalize_events(DEMO_RAW_ITEMS)
