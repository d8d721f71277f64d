# SPDX-License-Identifier: MIT

from typing import Optional

from stagetimeline.model.calendar import GlyphKind
from stagetimeline.model.category import Category, DeadlineStatus, Severity

CATEGORY_COLORS: dict[Category, str] = {
    Category.ACTION: "green",
    Category.STATUS: "blue",
    Category.ATTACHMENT: "white",
    Category.COMMENT: "bright_black",
    Category.VERSION: "dark_orange",
    Category.SYSTEM: "grey62",
}

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.INFO: "blue",
    Severity.SUCCESS: "green",
    Severity.WARNING: "yellow",
    Severity.DANGER: "red",
}

DEADLINE_STATUS_COLORS: dict[DeadlineStatus, str] = {
    DeadlineStatus.FUTURE: "blue",
    DeadlineStatus.DUE_TODAY: "yellow",
    DeadlineStatus.OVERDUE: "red",
}

# Marker and style per calendar glyph
GLYPH_STYLES: dict[GlyphKind, tuple[str, str]] = {
    GlyphKind.DEADLINE_OVERDUE: ("!", "bold red"),
    GlyphKind.DEADLINE_TODAY: ("*", "bold yellow"),
    GlyphKind.DEADLINE_FUTURE: ("▶", "blue"),
    GlyphKind.CREATED: ("●", "green"),
}

TODAY_STYLE = "bold black on bright_cyan"
OUT_OF_MONTH_STYLE = "dim"


def severity_color(severity: Optional[Severity]) -> str:
    return SEVERITY_COLORS[severity or Severity.INFO]
