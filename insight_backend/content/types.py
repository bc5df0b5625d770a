"""Content feed types — filters, sort args, raw row shape and summary models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Literal, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentType(StrEnum):
    CHART = "chart"
    DASHBOARD = "dashboard"
    SPACE = "space"


class ChartSourceType(StrEnum):
    DBT_EXPLORE = "dbt_explore"
    SQL = "sql"


class SortDirection(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


# Columns every union branch exposes that are meaningful to order by.
SORTABLE_COLUMNS: tuple[str, ...] = (
    "name",
    "created_at",
    "last_updated_at",
    "views",
    "space_name",
)


class ContentFilters(BaseModel):
    """Type-agnostic criteria; ``None`` means unrestricted, ``[]`` matches nothing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_uuids: list[str] | None = None
    space_uuids: list[str] | None = None
    content_types: list[ContentType] | None = None
    chart_source_types: list[ChartSourceType] | None = None
    search: str | None = None
    created_by_user_uuids: list[str] | None = None
    root_spaces_only: bool = False


class ContentArgs(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    sort_by: str | None = None
    sort_direction: SortDirection | None = None


class SummaryContentRow(TypedDict):
    """Shape of one row of the unioned summary query, in column order."""

    uuid: str
    content_type: str
    project_uuid: str
    project_name: str
    space_uuid: str | None
    space_name: str | None
    name: str
    description: str | None
    views: int
    created_at: datetime
    created_by_user_uuid: str | None
    created_by_user_first_name: str | None
    created_by_user_last_name: str | None
    last_updated_at: datetime
    last_updated_by_user_uuid: str | None
    last_updated_by_user_first_name: str | None
    last_updated_by_user_last_name: str | None
    metadata: dict[str, Any]
    content_type_rank: int


# ---------------------------------------------------------------------------
# Summary models
# ---------------------------------------------------------------------------
class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ProjectRef(_Frozen):
    uuid: str
    name: str


class SpaceRef(_Frozen):
    uuid: str
    name: str


class UserRef(_Frozen):
    uuid: str
    first_name: str = ""
    last_name: str = ""


class DbtExploreChartMetadata(_Frozen):
    source: Literal["dbt_explore"] = "dbt_explore"
    chart_kind: str | None = None
    explore_name: str | None = None
    dashboard_uuid: str | None = None
    dashboard_name: str | None = None


class SqlChartMetadata(_Frozen):
    source: Literal["sql"] = "sql"
    chart_kind: str | None = None
    slug: str | None = None
    dashboard_uuid: str | None = None
    dashboard_name: str | None = None


class DashboardMetadata(_Frozen):
    chart_count: int = 0


class SpaceMetadata(_Frozen):
    is_private: bool = False
    chart_count: int = 0
    dashboard_count: int = 0
    child_space_count: int = 0


class _SummaryBase(_Frozen):
    uuid: str
    project: ProjectRef
    space: SpaceRef | None = None
    name: str
    description: str | None = None
    views: int = 0
    created_at: datetime
    created_by: UserRef | None = None
    last_updated_at: datetime
    last_updated_by: UserRef | None = None
    content_type_rank: int


ChartMetadata = Annotated[
    Union[DbtExploreChartMetadata, SqlChartMetadata],
    Field(discriminator="source"),
]


class ChartContent(_SummaryBase):
    content_type: Literal["chart"] = "chart"
    metadata: ChartMetadata


class DashboardContent(_SummaryBase):
    content_type: Literal["dashboard"] = "dashboard"
    metadata: DashboardMetadata = Field(default_factory=DashboardMetadata)


class SpaceContent(_SummaryBase):
    content_type: Literal["space"] = "space"
    metadata: SpaceMetadata = Field(default_factory=SpaceMetadata)


SummaryContent = Annotated[
    Union[ChartContent, DashboardContent, SpaceContent],
    Field(discriminator="content_type"),
]
