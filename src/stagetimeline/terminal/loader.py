# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import typer
from rich.console import Console

from stagetimeline.model.timeline_config import ResolvedTimelineConfig
from stagetimeline.repository.bundle import BundleError, BundleRepository
from stagetimeline.repository.configuration import CONFIGURATION_REPO
from stagetimeline.service.normalize import resolve_config
from stagetimeline.service.timeline import TimelineQuery
from stagetimeline.template.demo import get_demo_events

console = Console()
error_console = Console(stderr=True)


class LoadedTimeline(TypedDict):
    repository: BundleRepository
    config: ResolvedTimelineConfig
    query: TimelineQuery


def load_timeline(bundle_path: Optional[Path]) -> LoadedTimeline:
    """Read a bundle (or none), normalize it and wrap its events for querying."""
    repository = BundleRepository(bundle_path)
    try:
        raw_bundle = repository.get_bundle()
    except BundleError as error:
        error_console.print(f"[red]{error}[/red]")
        raise typer.Exit(code=1)

    app_config = CONFIGURATION_REPO.get_config()
    demo_items = get_demo_events() if app_config["use_demo_when_empty"] else None
    config = resolve_config(raw_bundle, demo_items=demo_items)
    return {
        "repository": repository,
        "config": config,
        "query": TimelineQuery(config["items"]),
    }
