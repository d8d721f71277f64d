# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from stagetimeline.model.category import ALL, CATEGORY_ALIASES, Category, Severity
from stagetimeline.model.facet import DayQuickFilter, SeverityFacet, SortMode
from stagetimeline.model.timeline_config import CategoryFacet
from stagetimeline.time import build_iso_from_date_time, parse_day_key, parse_timestamp

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_reference_time(value: Optional[str]) -> Optional[pendulum.DateTime]:
    """Parse the --now override; accepts everything an event timestamp accepts."""
    if value is None:
        return None
    if value in ("now", "n"):
        return pendulum.now("local")
    parsed = parse_timestamp(value)
    if parsed is None:
        raise typer.BadParameter(
            "valid inputs: ISO-8601 timestamp, dd/mm/yyyy, dd/mm/yyyy hh:mm, now"
        )
    return parsed


def parse_month(value: Optional[str]) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    if value in ("today", "t"):
        return pendulum.today("local").start_of("month")

    month_match = _MONTH_PATTERN.match(value)
    if month_match is not None:
        year, month = int(month_match.group(1)), int(month_match.group(2))
        if not 1 <= month <= 12:
            raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")
        return pendulum.local(year, month, 1)

    day = parse_day_key(value)
    if day is not None:
        return day.start_of("month")
    raise typer.BadParameter("valid inputs: YYYY-MM, YYYY-MM-DD, today")


def parse_day(value: str) -> str:
    """Validate a 'YYYY-MM-DD' day key; 'today' is resolved in local time."""
    if value in ("today", "t"):
        return pendulum.today("local").format("YYYY-MM-DD")
    if parse_day_key(value) is None:
        raise typer.BadParameter("valid inputs: YYYY-MM-DD, today")
    return value


def parse_category_facet(value: Optional[str]) -> CategoryFacet:
    token = (value or ALL).strip().lower()
    if token == ALL:
        return ALL
    if token in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[token]
    try:
        return Category(token)
    except ValueError:
        choices = ", ".join([ALL, *[str(category) for category in Category]])
        raise typer.BadParameter(f"valid inputs: {choices}")


def parse_category(value: Optional[str]) -> Category:
    category = parse_category_facet(value or str(Category.STATUS))
    if category == ALL:
        raise typer.BadParameter("an event needs a concrete category")
    return Category(category)


def parse_severity_facet(value: Optional[str]) -> SeverityFacet:
    token = (value or ALL).strip().lower()
    if token == ALL:
        return ALL
    try:
        return Severity(token)
    except ValueError:
        choices = ", ".join([ALL, *[str(severity) for severity in Severity]])
        raise typer.BadParameter(f"valid inputs: {choices}")


def parse_severity(value: Optional[str]) -> Severity:
    severity = parse_severity_facet(value or str(Severity.INFO))
    if severity == ALL:
        raise typer.BadParameter("an event needs a concrete severity")
    return Severity(severity)


def parse_sort_mode(value: Optional[str]) -> SortMode:
    token = (value or str(SortMode.RECENT)).strip().lower().replace("-", "_")
    try:
        return SortMode(token)
    except ValueError:
        choices = ", ".join(str(mode) for mode in SortMode)
        raise typer.BadParameter(f"valid inputs: {choices}")


def parse_quick_filter(value: Optional[str]) -> DayQuickFilter:
    token = (value or str(DayQuickFilter.ALL)).strip().lower()
    try:
        return DayQuickFilter(token)
    except ValueError:
        choices = ", ".join(str(quick) for quick in DayQuickFilter)
        raise typer.BadParameter(f"valid inputs: {choices}")


def parse_form_datetime(date_value: str, time_value: Optional[str], label: str) -> str:
    """Turn form-style date and time inputs into a UTC ISO string, or fail."""
    iso_value = build_iso_from_date_time(date_value, time_value)
    if not iso_value:
        raise typer.BadParameter(f"{label}: expected YYYY-MM-DD and HH:mm")
    return iso_value
