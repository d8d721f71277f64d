# SPDX-License-Identifier: MIT

import datetime
import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from stagetimeline.logger import get_logger
from stagetimeline.model.timeline_event import TimelineEvent

logger = get_logger(__name__)


class BundleError(ValueError):
    """A bundle file is missing, unreadable or not a mapping."""


class BundleRepository:
    """
    Reads and writes the configuration bundle a stage hands to the timeline.

    YAML and JSON files are both read with the YAML loader; files ending in
    ``.json`` are written back as JSON.
    """

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        self._bundle: Optional[dict[str, Any]] = None

    @property
    def bundle(self) -> dict[str, Any]:
        if self._bundle is None:
            self.__load_data()
        if self._bundle is None:
            raise ValueError()
        return self._bundle

    def __load_data(self) -> None:
        if self.path is None:
            self._bundle = {}
            return
        if not self.path.is_file():
            raise BundleError(f"bundle file not found: {self.path}")

        try:
            raw = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError) as error:
            raise BundleError(f"cannot read bundle {self.path}: {error}") from error

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise BundleError(f"bundle {self.path} must contain a mapping")
        logger.debug("Loaded bundle %s", self.path)
        self._bundle = _dates_to_str(raw)

    def get_bundle(self) -> dict[str, Any]:
        return deepcopy(self.bundle)

    def append_item(self, event: TimelineEvent) -> None:
        items = self.bundle.get("items")
        if not isinstance(items, list):
            items = []
            self.bundle["items"] = items
        items.append(convert_event_for_serialization(event))

    def flush(self) -> None:
        if self.path is None or self._bundle is None:
            return
        if self.path.suffix.lower() == ".json":
            text = json.dumps(self._bundle, indent=2, ensure_ascii=False)
        else:
            text = dump(self._bundle, Dumper=Dumper, allow_unicode=True, sort_keys=False)
        self.path.write_text(text, encoding="utf-8")
        logger.info("Wrote bundle %s", self.path)


def _dates_to_str(value: Any) -> Any:
    # YAML resolves unquoted timestamps to datetime objects
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _dates_to_str(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_dates_to_str(item) for item in value]
    return value


def convert_event_for_serialization(event: TimelineEvent) -> dict[str, Any]:
    serializable_event: dict[str, Any] = {
        "id": event["id"],
        "title": event["title"],
        "category": str(event["category"]),
        "occurred_at": event["occurred_at"],
        "openable": event["openable"],
    }
    if event["description"] is not None:
        serializable_event["description"] = event["description"]
    if event["severity"] is not None:
        serializable_event["severity"] = str(event["severity"])
    if event["author"] is not None:
        serializable_event["author"] = {
            key: value for key, value in event["author"].items() if value is not None
        }
    deadline = event["deadline"]
    if deadline is not None:
        serializable_event["deadline"] = {
            "is_deadline": deadline["is_deadline"],
            "due_at": deadline["due_at"],
            "status": str(deadline["status"]) if deadline["status"] is not None else None,
        }
    if event["href"] is not None:
        serializable_event["href"] = event["href"]
    if event["meta"] is not None:
        serializable_event["meta"] = deepcopy(event["meta"])
    return serializable_event
