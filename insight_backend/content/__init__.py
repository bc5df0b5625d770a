"""Unified content feed: charts, SQL charts, dashboards and spaces in one query."""

from .configuration import ContentConfiguration
from .model import ContentModel, SummaryContentPage, build_summary_query
from .registry import CONTENT_REGISTRY, ContentRegistry
from .types import (
    ChartContent,
    ChartSourceType,
    ContentArgs,
    ContentFilters,
    ContentType,
    DashboardContent,
    SortDirection,
    SpaceContent,
    SummaryContent,
)

__all__ = [
    "ContentConfiguration",
    "ContentModel", "SummaryContentPage", "build_summary_query",
    "CONTENT_REGISTRY", "ContentRegistry",
    "ChartContent", "ChartSourceType", "ContentArgs", "ContentFilters", "ContentType",
    "DashboardContent", "SortDirection", "SpaceContent", "SummaryContent",
]
