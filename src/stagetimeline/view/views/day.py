# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stagetimeline.color import DEADLINE_STATUS_COLORS
from stagetimeline.model.category import DEADLINE_STATUS_LABELS, category_label
from stagetimeline.model.occurrence import CalendarOccurrence, OccurrenceKind
from stagetimeline.model.summary import DaySummary
from stagetimeline.model.timeline_config import ResolvedTimelineConfig
from stagetimeline.service.deadline import compute_deadline_status
from stagetimeline.service.occurrence import occurrence_title
from stagetimeline.time import format_display_date, parse_day_key, parse_timestamp
from stagetimeline.view.views.header import header


def day_view(
    console: Console,
    config: ResolvedTimelineConfig,
    day_key: str,
    occurrences: list[CalendarOccurrence],
    summary: DaySummary,
    now: pendulum.DateTime,
) -> None:
    """
    Display the occurrences of one calendar day, oldest first.

    Args:
        console: Console to print to
        config: The resolved timeline bundle
        day_key: The day shown, as 'YYYY-MM-DD'
        occurrences: The day's occurrences after the quick filter
        summary: Counts over the unfiltered day
        now: Reference instant for deadline urgency
    """
    day = parse_day_key(day_key)
    day_label = format_display_date(day) if day is not None else day_key
    header(console, config["title"], config["description"], f"Day {day_label}")

    console.print(
        f"\n[bold]{summary['total']}[/bold] occurrences"
        f"  [dim]{summary['deadlines']} deadlines[/dim]"
        f"  [red]{summary['overdue']} overdue[/red]\n"
    )
    if not occurrences:
        console.print("[dim]Nothing on this day.[/dim]\n")
        return

    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("time", no_wrap=True)
    table.add_column("kind")
    table.add_column("category")
    table.add_column("title")

    for occurrence in occurrences:
        parsed = parse_timestamp(occurrence["timestamp"])
        time_str = parsed.in_tz("local").format("HH:mm") if parsed is not None else "-"
        table.add_row(
            time_str,
            _kind_cell(occurrence, now),
            category_label(occurrence["event"]["category"]),
            occurrence_title(occurrence),
        )
    console.print(table)
    console.print()


def _kind_cell(occurrence: CalendarOccurrence, now: pendulum.DateTime) -> Text:
    if occurrence["kind"] == OccurrenceKind.CREATED:
        return Text("created", style="green")
    status = compute_deadline_status(occurrence["timestamp"], now)
    return Text(
        f"deadline {DEADLINE_STATUS_LABELS[status]}", style=DEADLINE_STATUS_COLORS[status]
    )
