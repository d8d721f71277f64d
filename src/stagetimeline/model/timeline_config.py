# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

from stagetimeline.model.category import Category
from stagetimeline.model.timeline_event import TimelineEvent

CategoryFacet: TypeAlias = Literal["all"] | Category

DEFAULT_MAX_PREVIEW_ITEMS = 6


class TimelineConfig(TypedDict):
    title: Optional[str]
    description: Optional[str]
    items: list[TimelineEvent]
    can_open_detail: bool
    show_search: bool
    show_filters: bool
    default_filter: CategoryFacet
    max_preview_items: float


class ResolvedTimelineConfig(TypedDict):
    """Bundle after caller-side defaults: titles filled, items sorted by recency."""

    title: str
    description: str
    items: list[TimelineEvent]
    can_open_detail: bool
    show_search: bool
    show_filters: bool
    default_filter: CategoryFacet
    max_preview_items: float
    uses_demo_items: bool
