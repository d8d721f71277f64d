# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stagetimeline.color import GLYPH_STYLES, OUT_OF_MONTH_STYLE, TODAY_STYLE
from stagetimeline.model.calendar import CalendarCell, GlyphKind
from stagetimeline.model.timeline_config import ResolvedTimelineConfig
from stagetimeline.service.calendar_grid import GLYPH_LABELS, WEEKDAY_LABELS
from stagetimeline.time import format_month_title
from stagetimeline.view.views.header import header


def calendar_month_view(
    console: Console,
    config: ResolvedTimelineConfig,
    month: pendulum.DateTime,
    cells: list[CalendarCell],
    shown: int,
    total: int,
    cell_width: int = 9,
) -> None:
    """
    Display a month as a six-week grid with glyph summaries per day.

    Args:
        console: Console to print to
        config: The resolved timeline bundle
        month: Any instant within the month shown
        cells: The 42 cells of the month grid
        shown: Number of events left after the toolbar filters
        total: Number of events in the collection
        cell_width: Width of each day cell in characters
    """
    header(console, config["title"], config["description"], "Calendar")

    console.print(
        f"\n[bold]{format_month_title(month)}[/bold]  [dim]{shown}/{total}[/dim]\n"
    )
    console.print(render_month_grid(cells, cell_width))
    console.print(render_legend())
    console.print()


def render_month_grid(cells: list[CalendarCell], cell_width: int = 9) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in WEEKDAY_LABELS:
        table.add_column(day_name, style="bold", width=cell_width)

    week_cells: list[Text] = []
    for cell in cells:
        week_cells.append(_render_cell(cell))
        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []

    return table


def _render_cell(cell: CalendarCell) -> Text:
    cell_content = Text()
    day_num = cell["date"].day

    if cell["is_today"]:
        cell_content.append(f"{day_num:2d}", style=TODAY_STYLE)
        cell_content.append("\n")
    elif not cell["in_month"]:
        cell_content.append(f"{day_num:2d}\n", style=OUT_OF_MONTH_STYLE)
    else:
        cell_content.append(f"{day_num:2d}\n", style="bold")

    for glyph in cell["glyphs"]:
        marker, style = GLYPH_STYLES[glyph["kind"]]
        if not cell["in_month"]:
            style = OUT_OF_MONTH_STYLE
        cell_content.append(f"{marker} ", style=style)

    if cell["overflow"] > 0:
        cell_content.append(f"+{cell['overflow']}", style="dim")

    return cell_content


def render_legend() -> Text:
    legend = Text()
    for kind in (
        GlyphKind.CREATED,
        GlyphKind.DEADLINE_FUTURE,
        GlyphKind.DEADLINE_TODAY,
        GlyphKind.DEADLINE_OVERDUE,
    ):
        marker, style = GLYPH_STYLES[kind]
        legend.append(f" {marker} ", style=style)
        legend.append(f"{GLYPH_LABELS[kind]}  ", style="dim")
    return legend
