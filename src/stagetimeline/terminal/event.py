# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from stagetimeline.template.event import build_event
from stagetimeline.terminal.loader import console, load_timeline
from stagetimeline.terminal.parse import (
    parse_category,
    parse_day,
    parse_form_datetime,
    parse_reference_time,
    parse_severity,
)
from stagetimeline.time import format_display_datetime, now_local
from stagetimeline.view.views import history as history_report

MIN_TITLE_LENGTH = 3


def add(
    bundle: Annotated[Path, typer.Argument(help="bundle file to append to")],
    title: Annotated[str, typer.Argument(help="event title")],
    date: Annotated[
        Optional[str], typer.Option("--date", help="valid input: YYYY-MM-DD")
    ] = None,
    time: Annotated[
        Optional[str], typer.Option("--time", help="valid input: HH:mm")
    ] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
    severity: Annotated[Optional[str], typer.Option("--severity", "-sv")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    due_date: Annotated[
        Optional[str], typer.Option("--due-date", help="valid input: YYYY-MM-DD")
    ] = None,
    due_time: Annotated[
        Optional[str], typer.Option("--due-time", help="valid input: HH:mm")
    ] = None,
    author: Annotated[Optional[str], typer.Option("--author")] = None,
    role: Annotated[Optional[str], typer.Option("--role")] = None,
    day_hint: Annotated[
        Optional[str],
        typer.Option("--day", help="day the event was added from: YYYY-MM-DD, today"),
    ] = None,
    now: Annotated[Optional[str], typer.Option("--now")] = None,
) -> None:
    """Append a new event to a bundle file."""
    if len(title.strip()) < MIN_TITLE_LENGTH:
        raise typer.BadParameter(
            f"title needs at least {MIN_TITLE_LENGTH} characters", param_hint="TITLE"
        )

    reference = parse_reference_time(now) or now_local()
    occurred_date = date or reference.in_tz("local").format("YYYY-MM-DD")
    occurred_time = time or reference.in_tz("local").format("HH:mm")
    occurred_at = parse_form_datetime(occurred_date, occurred_time, "event date")

    due_at = None
    if due_date is not None:
        due_at = parse_form_datetime(due_date, due_time, "due date")
    elif due_time is not None:
        raise typer.BadParameter("--due-time needs --due-date")

    event = build_event(
        title,
        occurred_at,
        reference,
        category=parse_category(category),
        severity=parse_severity(severity),
        description=description,
        due_at=due_at,
        author_name=author,
        author_role=role,
    )

    loaded = load_timeline(bundle)
    day_key = parse_day(day_hint) if day_hint is not None else None
    result = loaded["query"].append(event, day_key)
    loaded["repository"].append_item(result["event"])
    loaded["repository"].flush()

    console.print(
        f"Added event [bold]{event['title']}[/bold] "
        f"({format_display_datetime(event['occurred_at'])}), id [dim]{event['id']}[/dim]"
    )
    console.print(
        history_report.render_event_table(
            [event], reference, loaded["config"]["can_open_detail"]
        )
    )
