# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stagetimeline.color import CATEGORY_COLORS, DEADLINE_STATUS_COLORS, severity_color
from stagetimeline.model.category import (
    DEADLINE_STATUS_LABELS,
    SEVERITY_LABELS,
    Category,
    Severity,
    category_label,
)
from stagetimeline.model.summary import DeadlineSummary, TimelineStats
from stagetimeline.model.timeline_config import ResolvedTimelineConfig
from stagetimeline.model.timeline_event import TimelineEvent
from stagetimeline.service.deadline import declared_due_at, live_deadline_status
from stagetimeline.time import (
    format_display_date,
    format_display_datetime,
    parse_day_key,
)
from stagetimeline.view.views.header import header

EMPTY_MESSAGE = "No events match the current filters."


def history_view(
    console: Console,
    config: ResolvedTimelineConfig,
    by_day: dict[str, list[TimelineEvent]],
    ordered_keys: list[str],
    summary: DeadlineSummary,
    now: pendulum.DateTime,
) -> None:
    """Display the full history, newest day first, with the deadline summary."""
    header(console, config["title"], config["description"], "History")

    console.print()
    console.print(render_summary(summary))

    if not ordered_keys:
        console.print(f"\n[dim]{EMPTY_MESSAGE}[/dim]\n")
        return

    for day_key in ordered_keys:
        day = parse_day_key(day_key)
        day_label = format_display_date(day) if day is not None else day_key
        console.print(f"\n[bold]{day_label}[/bold]")
        console.print(
            render_event_table(by_day[day_key], now, config["can_open_detail"])
        )
    console.print()


def compact_view(
    console: Console,
    config: ResolvedTimelineConfig,
    events: list[TimelineEvent],
    now: pendulum.DateTime,
    limit: Optional[int] = None,
) -> None:
    """Display the toolbar list: most recent events, optionally capped."""
    header(console, config["title"], config["description"], "Recent")

    if not events:
        console.print(f"\n[dim]{EMPTY_MESSAGE}[/dim]\n")
        return

    shown = events if limit is None else events[:limit]
    console.print(render_event_table(shown, now, config["can_open_detail"]))
    if len(shown) < len(events):
        console.print(f"[dim]  +{len(events) - len(shown)} more[/dim]")
    console.print()


def render_summary(summary: DeadlineSummary) -> Text:
    line = Text()
    line.append(f"{summary['total']} events", style="bold")
    line.append(f"  {summary['deadline_count']} deadlines", style="dim")
    line.append(f"  {summary['overdue_count']} overdue", style="red")
    line.append(f"  {summary['due_today_count']} due today", style="yellow")
    line.append(f"  {summary['due_within_7_days_count']} due within 7 days", style="blue")
    return line


def render_event_table(
    events: list[TimelineEvent], now: pendulum.DateTime, show_details: bool = True
) -> Table:
    """Event rows; details are shown only for openable events."""
    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("when", no_wrap=True)
    table.add_column("category")
    table.add_column("title")
    table.add_column("severity")
    table.add_column("deadline")
    table.add_column("author")

    for event in events:
        table.add_row(
            format_display_datetime(event["occurred_at"]),
            Text(category_label(event["category"]), style=CATEGORY_COLORS[event["category"]]),
            _title_cell(event, show_details),
            _severity_cell(event["severity"]),
            _deadline_cell(event, now),
            _author_cell(event),
        )
    return table


def _title_cell(event: TimelineEvent, show_details: bool) -> Text:
    title = Text(event["title"], style="bold")
    if not (show_details and event["openable"]):
        return title
    if event["description"]:
        title.append(f"\n{event['description']}", style="dim")
    if event["href"]:
        title.append(f"\n{event['href']}", style="dim underline")
    return title


def _severity_cell(severity: Optional[Severity]) -> Text:
    if severity is None:
        return Text("")
    return Text(SEVERITY_LABELS[severity], style=severity_color(severity))


def _deadline_cell(event: TimelineEvent, now: pendulum.DateTime) -> Text:
    status = live_deadline_status(event, now)
    if status is None:
        return Text("")
    cell = Text(DEADLINE_STATUS_LABELS[status], style=DEADLINE_STATUS_COLORS[status])
    cell.append(f" {format_display_datetime(declared_due_at(event))}", style="dim")
    return cell


def _author_cell(event: TimelineEvent) -> str:
    author = event["author"]
    if author is None:
        return ""
    return " · ".join(part for part in (author["name"], author["role"]) if part)


def render_category_counts(stats: TimelineStats) -> Table:
    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("category")
    table.add_column("events", justify="right")

    for category in Category:
        count = stats["by_category"].get(str(category), 0)
        if count:
            table.add_row(
                Text(category_label(category), style=CATEGORY_COLORS[category]),
                str(count),
            )
    return table
