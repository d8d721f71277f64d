# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Literal, TypeAlias, TypedDict

from stagetimeline.model.category import ALL, Severity
from stagetimeline.model.timeline_config import CategoryFacet

SeverityFacet: TypeAlias = Literal["all"] | Severity


class SortMode(StrEnum):
    RECENT = "recent"
    OLDEST = "oldest"
    CATEGORY_AZ = "category_az"
    SEVERITY = "severity"


class DayQuickFilter(StrEnum):
    ALL = "all"
    DEADLINES = "deadlines"
    OVERDUE = "overdue"


class FacetState(TypedDict):
    category: CategoryFacet
    severity: SeverityFacet
    query: str
    only_deadlines: bool
    only_overdue: bool
    sort: SortMode


def default_facets() -> FacetState:
    return {
        "category": ALL,
        "severity": ALL,
        "query": "",
        "only_deadlines": False,
        "only_overdue": False,
        "sort": SortMode.RECENT,
    }


def facet_cache_key(facets: FacetState) -> tuple[str, str, str, bool, bool, str]:
    return (
        str(facets["category"]),
        str(facets["severity"]),
        facets["query"],
        facets["only_deadlines"],
        facets["only_overdue"],
        str(facets["sort"]),
    )
