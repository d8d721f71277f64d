# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from stagetimeline.model.facet import FacetState
from stagetimeline.model.timeline_config import CategoryFacet, ResolvedTimelineConfig
from stagetimeline.repository.configuration import CONFIGURATION_REPO
from stagetimeline.service.calendar_grid import shift_month
from stagetimeline.service.summary import day_summary, timeline_stats
from stagetimeline.terminal.loader import console, load_timeline
from stagetimeline.terminal.parse import (
    parse_category_facet,
    parse_day,
    parse_month,
    parse_quick_filter,
    parse_reference_time,
    parse_severity_facet,
    parse_sort_mode,
)
from stagetimeline.time import now_local, start_of_local_month
from stagetimeline.view.views import calendar as calendar_report
from stagetimeline.view.views import day as day_report
from stagetimeline.view.views import history as history_report
from stagetimeline.view.views.header import header

BundleArgument = Annotated[
    Optional[Path],
    typer.Argument(help="bundle file (YAML or JSON); demonstration data when omitted"),
]
NowOption = Annotated[
    Optional[str],
    typer.Option("--now", help="reference time: ISO-8601, dd/mm/yyyy [hh:mm], now"),
]
CategoryOption = Annotated[
    Optional[str],
    typer.Option("--category", "-c", help="all or one category"),
]
QueryOption = Annotated[
    str, typer.Option("--query", "-q", help="case-insensitive text search")
]


def _category_or_default(
    value: Optional[str], config: ResolvedTimelineConfig
) -> CategoryFacet:
    if value is None:
        return config["default_filter"]
    return parse_category_facet(value)


def calendar(
    bundle: BundleArgument = None,
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="valid inputs: YYYY-MM, YYYY-MM-DD, today"),
    ] = None,
    shift: Annotated[
        int, typer.Option("--shift", "-s", help="months to move from --month")
    ] = 0,
    category: CategoryOption = None,
    query: QueryOption = "",
    now: NowOption = None,
) -> None:
    """Show a month as a six-week calendar grid."""
    reference = parse_reference_time(now) or now_local()
    selected_month = parse_month(month) or start_of_local_month(reference)
    loaded = load_timeline(bundle)
    config = loaded["config"]
    category_facet = _category_or_default(category, config)

    target_month = shift_month(selected_month, shift)
    cells = loaded["query"].month_grid(target_month, category_facet, query, reference)
    shown = len(loaded["query"].toolbar(category_facet, query))

    calendar_report.calendar_month_view(
        console, config, target_month, cells, shown, len(config["items"])
    )


def history(
    bundle: BundleArgument = None,
    category: CategoryOption = None,
    severity: Annotated[
        Optional[str], typer.Option("--severity", "-sv", help="all or one severity")
    ] = None,
    query: QueryOption = "",
    only_deadlines: Annotated[bool, typer.Option("--only-deadlines", "-dl")] = False,
    only_overdue: Annotated[bool, typer.Option("--only-overdue", "-od")] = False,
    sort: Annotated[
        Optional[str],
        typer.Option("--sort", help="recent, oldest, category_az, severity"),
    ] = None,
    compact: Annotated[
        bool, typer.Option("--compact", help="flat list capped at the preview size")
    ] = False,
    now: NowOption = None,
) -> None:
    """Show the full event history grouped by day, newest day first."""
    reference = parse_reference_time(now) or now_local()
    severity_facet = parse_severity_facet(severity)
    sort_mode = parse_sort_mode(sort or CONFIGURATION_REPO.get_config()["default_sort"])
    loaded = load_timeline(bundle)
    config = loaded["config"]
    facets: FacetState = {
        "category": _category_or_default(category, config),
        "severity": severity_facet,
        "query": query,
        "only_deadlines": only_deadlines,
        "only_overdue": only_overdue,
        "sort": sort_mode,
    }
    timeline = loaded["query"]

    if compact:
        limit = max(0, int(config["max_preview_items"]))
        history_report.compact_view(
            console, config, timeline.history(facets, reference), reference, limit
        )
        return

    grouped = timeline.grouped_history(facets, reference)
    history_report.history_view(
        console,
        config,
        grouped["by_day"],
        grouped["ordered_keys"],
        timeline.summary(reference),
        reference,
    )


def day(
    day_key: Annotated[str, typer.Argument(help="valid inputs: YYYY-MM-DD, today")],
    bundle: BundleArgument = None,
    quick: Annotated[
        Optional[str],
        typer.Option("--quick", help="all, deadlines, overdue"),
    ] = None,
    category: CategoryOption = None,
    query: QueryOption = "",
    now: NowOption = None,
) -> None:
    """Show everything that falls on one calendar day."""
    reference = parse_reference_time(now) or now_local()
    selected_day = parse_day(day_key)
    quick_filter = parse_quick_filter(quick)
    loaded = load_timeline(bundle)
    category_facet = _category_or_default(category, loaded["config"])
    timeline = loaded["query"]

    every_occurrence = timeline.day(selected_day, category_facet, query, now=reference)
    shown = timeline.day(selected_day, category_facet, query, quick_filter, reference)
    day_report.day_view(
        console,
        loaded["config"],
        selected_day,
        shown,
        day_summary(every_occurrence, reference),
        reference,
    )


def summary(bundle: BundleArgument = None, now: NowOption = None) -> None:
    """Show deadline counts over the whole collection."""
    reference = parse_reference_time(now) or now_local()
    loaded = load_timeline(bundle)
    config = loaded["config"]
    timeline = loaded["query"]

    header(console, config["title"], config["description"], "Summary")
    console.print()
    console.print(history_report.render_summary(timeline.summary(reference)))
    stats = timeline_stats(timeline.events, timeline.toolbar())
    console.print(history_report.render_category_counts(stats))
