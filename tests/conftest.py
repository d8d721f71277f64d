"""Shared fixtures: a fixed local timezone and an isolated app configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pendulum
import pytest

from stagetimeline.configuration import CONFIG_PATH_ENV
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.repository.configuration import CONFIGURATION_REPO
from stagetimeline.service.normalize import normalize_events
from stagetimeline.view import state as view_state


@pytest.fixture(autouse=True)
def utc_local_timezone() -> Iterator[None]:
    """Pin 'local time' to UTC so day keys do not depend on the host."""
    pendulum.set_local_timezone(pendulum.timezone("UTC"))
    yield
    pendulum.set_local_timezone()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the app configuration at a file that does not exist yet."""
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_path))
    CONFIGURATION_REPO.reload()
    yield config_path
    CONFIGURATION_REPO.reload()
    view_state.set_show_header(True)


@pytest.fixture
def scenario_raw() -> list[dict[str, Any]]:
    return [
        {
            "id": "t1",
            "title": "DFD created",
            "category": "version",
            "occurredAt": "2026-01-10T12:10:00Z",
        },
        {
            "id": "t5",
            "title": "Stage approved",
            "category": "action",
            "occurredAt": "2026-01-14T15:00:00Z",
            "deadline": {"isDeadline": True, "dueAt": "2026-01-20T15:00:00Z"},
        },
    ]


@pytest.fixture
def scenario_events(scenario_raw: list[dict[str, Any]]) -> list[TimelineEvent]:
    return normalize_events(scenario_raw)


@pytest.fixture
def scenario_now() -> pendulum.DateTime:
    return pendulum.datetime(2026, 1, 21, tz="UTC")


@pytest.fixture
def mixed_events() -> list[TimelineEvent]:
    """A small collection touching every facet."""
    return normalize_events(
        [
            {
                "id": "e1",
                "title": "Request opened",
                "category": "status",
                "severity": "info",
                "occurredAt": "2026-01-05T09:00:00Z",
                "author": {"name": "Ana", "role": "Requester"},
            },
            {
                "id": "e2",
                "title": "Budget check",
                "description": "Waiting on finance",
                "category": "action",
                "severity": "warning",
                "occurredAt": "2026-01-08T10:00:00Z",
                "deadline": {"isDeadline": True, "dueAt": "2026-01-12T18:00:00Z"},
            },
            {
                "id": "e3",
                "title": "Legal review",
                "category": "action",
                "severity": "danger",
                "occurredAt": "2026-01-09T14:00:00Z",
                "deadline": {"isDeadline": True, "dueAt": "2026-01-30T18:00:00Z"},
            },
            {
                "id": "e4",
                "title": "Draft attached",
                "category": "attachment",
                "occurredAt": "2026-01-11T08:30:00Z",
                "author": {"name": "Bruno", "role": "Analyst"},
            },
            {
                "id": "e5",
                "title": "Approved",
                "category": "status",
                "severity": "success",
                "occurredAt": "2026-01-15T16:00:00Z",
                "deadline": {"isDeadline": True, "dueAt": "2026-01-15T20:00:00Z"},
            },
        ]
    )
