# SPDX-License-Identifier: MIT

import math
from collections.abc import Mapping
from typing import Any, Optional

from stagetimeline.logger import get_logger
from stagetimeline.model.category import (
    ALL,
    CATEGORY_ALIASES,
    DEADLINE_STATUS_ALIASES,
    Category,
    DeadlineStatus,
    Severity,
)
from stagetimeline.model.facet import SortMode
from stagetimeline.model.timeline_config import (
    DEFAULT_MAX_PREVIEW_ITEMS,
    CategoryFacet,
    ResolvedTimelineConfig,
    TimelineConfig,
)
from stagetimeline.model.timeline_event import (
    Author,
    Deadline,
    ParseResult,
    TimelineEvent,
)
from stagetimeline.query.sort import sort_events

logger = get_logger(__name__)

DEFAULT_TITLE = "Timeline"
DEFAULT_DESCRIPTION = "Stage event history"


def safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def safe_bool(value: Any, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    return fallback


def safe_number(value: Any, fallback: float) -> float:
    if isinstance(value, bool):
        return fallback
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(number):
        return fallback
    if number.is_integer():
        return int(number)
    return number


def _first(obj: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in obj and obj[key] is not None:
            return obj[key]
    return None


def _first_str(obj: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = safe_str(obj.get(key))
        if value:
            return value
    return ""


def _optional_str(value: Any) -> Optional[str]:
    return safe_str(value) or None


def normalize_category(value: Any) -> Category:
    token = safe_str(value).lower()
    if token in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[token]
    try:
        return Category(token)
    except ValueError:
        return Category.SYSTEM


def normalize_severity(value: Any) -> Optional[Severity]:
    try:
        return Severity(safe_str(value).lower())
    except ValueError:
        return None


def normalize_deadline_status(value: Any) -> Optional[DeadlineStatus]:
    token = safe_str(value).lower()
    if token in DEADLINE_STATUS_ALIASES:
        return DEADLINE_STATUS_ALIASES[token]
    try:
        return DeadlineStatus(token)
    except ValueError:
        return None


def normalize_category_facet(value: Any) -> CategoryFacet:
    token = safe_str(value).lower()
    if token == "" or token == ALL:
        return ALL
    if token in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[token]
    try:
        return Category(token)
    except ValueError:
        return ALL


def _normalize_author(value: Any) -> Optional[Author]:
    if not isinstance(value, Mapping):
        return None
    author: Author = {
        "id": _first_str(value, "id", "_id") or None,
        "name": _first_str(value, "name", "nome") or None,
        "role": _first_str(value, "role", "cargo") or None,
    }
    if author["id"] is None and author["name"] is None and author["role"] is None:
        return None
    return author


def _normalize_deadline(
    obj: Mapping[str, Any], meta: Optional[Mapping[str, Any]]
) -> Optional[Deadline]:
    source: Mapping[str, Any] = {}
    deadline_value = obj.get("deadline")
    if isinstance(deadline_value, Mapping):
        source = deadline_value
    elif meta is not None:
        source = meta

    is_deadline = safe_bool(_first(source, "is_deadline", "isDeadline"), False)
    due_at = _first_str(source, "due_at", "dueAt") or None
    status = normalize_deadline_status(
        _first(source, "status", "deadline_status", "deadlineStatus")
    )

    if is_deadline and due_at is None:
        is_deadline = False
    if not is_deadline and due_at is None:
        return None
    return {"is_deadline": is_deadline, "due_at": due_at, "status": status}


def try_parse_event(raw: Any) -> ParseResult:
    """
    Admit one untrusted record.

    The record is rejected as a whole when id, title or timestamp is missing;
    every other field degrades to its documented default.
    """
    if not isinstance(raw, Mapping):
        return {"status": "rejected", "reason": "not_a_mapping"}

    event_id = _first_str(raw, "id", "_id")
    if not event_id:
        return {"status": "rejected", "reason": "missing_id"}
    title = safe_str(raw.get("title"))
    if not title:
        return {"status": "rejected", "reason": "missing_title"}
    occurred_at = _first_str(
        raw, "occurred_at", "occurredAt", "createdAt", "created_at"
    )
    if not occurred_at:
        return {"status": "rejected", "reason": "missing_occurred_at"}

    meta_value = raw.get("meta")
    meta = dict(meta_value) if isinstance(meta_value, Mapping) else None

    event: TimelineEvent = {
        "id": event_id,
        "title": title,
        "description": _optional_str(raw.get("description")),
        "category": normalize_category(_first(raw, "category", "type")),
        "severity": normalize_severity(raw.get("severity")),
        "occurred_at": occurred_at,
        "author": _normalize_author(raw.get("author")),
        "deadline": _normalize_deadline(raw, meta),
        "openable": safe_bool(_first(raw, "openable", "canOpen", "can_open"), True),
        "href": _optional_str(raw.get("href")),
        "meta": meta,
    }
    return {"status": "accepted", "event": event}


def normalize_events(raw_items: Any) -> list[TimelineEvent]:
    if not isinstance(raw_items, list | tuple):
        return []

    events: list[TimelineEvent] = []
    for index, raw in enumerate(raw_items):
        result = try_parse_event(raw)
        if result["status"] == "accepted":
            events.append(result["event"])
        else:
            logger.debug("Dropped timeline record %d: %s", index, result["reason"])
    return events


def normalize_config(raw: Any) -> TimelineConfig:
    obj: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    return {
        "title": _first_str(obj, "title", "titulo") or None,
        "description": _first_str(obj, "description", "descricao") or None,
        "items": normalize_events(obj.get("items")),
        "can_open_detail": safe_bool(
            _first(obj, "can_open_detail", "canOpenDetail", "canOpenModal"), True
        ),
        "show_search": safe_bool(_first(obj, "show_search", "showSearch"), True),
        "show_filters": safe_bool(_first(obj, "show_filters", "showFilters"), True),
        "default_filter": normalize_category_facet(
            _first(obj, "default_filter", "defaultFilter")
        ),
        "max_preview_items": safe_number(
            _first(obj, "max_preview_items", "maxPreviewItems", "maxItemsPreview"),
            DEFAULT_MAX_PREVIEW_ITEMS,
        ),
    }


def resolve_config(
    raw: Any,
    demo_items: Optional[list[TimelineEvent]] = None,
    fallback_title: Optional[str] = None,
    fallback_description: Optional[str] = None,
) -> ResolvedTimelineConfig:
    """
    Normalize a bundle and apply the caller-side defaults.

    An empty item list is replaced by ``demo_items`` when given. Items come
    back sorted most recent first.
    """
    config = normalize_config(raw)
    items = config["items"]
    uses_demo_items = False
    if not items and demo_items:
        items = list(demo_items)
        uses_demo_items = True
        logger.info("No timeline items supplied, using demonstration data")

    return {
        "title": config["title"] or safe_str(fallback_title) or DEFAULT_TITLE,
        "description": config["description"]
        or safe_str(fallback_description)
        or DEFAULT_DESCRIPTION,
        "items": sort_events(items, SortMode.RECENT),
        "can_open_detail": config["can_open_detail"],
        "show_search": config["show_search"],
        "show_filters": config["show_filters"],
        "default_filter": config["default_filter"],
        "max_preview_items": config["max_preview_items"],
        "uses_demo_items": uses_demo_items,
    }
