# SPDX-License-Identifier: MIT

from typing import TypedDict


class DeadlineSummary(TypedDict):
    total: int
    deadline_count: int
    overdue_count: int
    due_today_count: int
    due_within_7_days_count: int


class DaySummary(TypedDict):
    total: int
    deadlines: int
    overdue: int


class TimelineStats(TypedDict):
    total: int
    shown: int
    by_category: dict[str, int]
