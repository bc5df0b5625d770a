"""Dashboards."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Select, func, select

from ...db.json import build_json_object
from ...db.models import Dashboard, Project, SavedChart, SavedSqlChart, Space
from ..configuration import (
    Discriminant,
    apply_common_filters,
    creator_and_editor,
    includes_content_type,
    row_discriminant,
    row_metadata,
    summary_columns,
    summary_fields,
)
from ..types import ContentFilters, ContentType, DashboardContent, DashboardMetadata


def _chart_count():
    """Charts of either source saved inside the outer dashboard."""
    dbt_charts = (
        select(func.count(SavedChart.id))
        .where(SavedChart.dashboard_id == Dashboard.id)
        .correlate(Dashboard)
        .scalar_subquery()
    )
    sql_charts = (
        select(func.count(SavedSqlChart.id))
        .where(SavedSqlChart.dashboard_id == Dashboard.id)
        .correlate(Dashboard)
        .scalar_subquery()
    )
    return dbt_charts + sql_charts


class DashboardContentConfiguration:
    content_type = ContentType.DASHBOARD
    source = None
    rank = 2

    @property
    def discriminant(self) -> Discriminant:
        return self.content_type, self.source

    def should_query_be_included(self, filters: ContentFilters) -> bool:
        return includes_content_type(filters, self.content_type)

    def get_summary_query(self, filters: ContentFilters) -> Select:
        created_by, updated_by = creator_and_editor()
        query = (
            select(
                *summary_columns(
                    uuid=Dashboard.id,
                    content_type=self.content_type,
                    project_uuid=Dashboard.project_id,
                    project_name=Project.name,
                    space_uuid=Space.id,
                    space_name=Space.name,
                    name=Dashboard.name,
                    description=Dashboard.description,
                    views=Dashboard.views_count,
                    created_at=Dashboard.created_at,
                    created_by=created_by,
                    last_updated_at=Dashboard.updated_at,
                    updated_by=updated_by,
                    metadata=build_json_object(chart_count=_chart_count()),
                    rank=self.rank,
                )
            )
            .select_from(Dashboard)
            .join(Project, Project.id == Dashboard.project_id)
            .join(Space, Space.id == Dashboard.space_id)
            .outerjoin(created_by, created_by.id == Dashboard.created_by)
            .outerjoin(updated_by, updated_by.id == Dashboard.updated_by)
        )
        if filters.space_uuids is not None:
            query = query.where(Dashboard.space_id.in_(filters.space_uuids))
        return apply_common_filters(
            query,
            filters,
            project_id=Dashboard.project_id,
            name=Dashboard.name,
            created_by=Dashboard.created_by,
        )

    def should_row_be_converted(self, row: Mapping[str, Any]) -> bool:
        return row_discriminant(row) == self.discriminant

    def convert_summary_row(self, row: Mapping[str, Any]) -> DashboardContent:
        return DashboardContent(
            **summary_fields(row),
            metadata=DashboardMetadata(**row_metadata(row)),
        )


dashboard_content_configuration = DashboardContentConfiguration()
