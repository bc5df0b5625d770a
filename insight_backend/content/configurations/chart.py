"""Saved charts built on a dbt explore."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Select, String, literal, select

from ...db.json import build_json_object
from ...db.models import Dashboard, Project, SavedChart, Space
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
from ..types import ChartContent, ChartSourceType, ContentFilters, ContentType, DbtExploreChartMetadata


class DbtExploreChartContentConfiguration:
    content_type = ContentType.CHART
    source = ChartSourceType.DBT_EXPLORE
    rank = 3

    @property
    def discriminant(self) -> Discriminant:
        return self.content_type, self.source

    def should_query_be_included(self, filters: ContentFilters) -> bool:
        if not includes_content_type(filters, self.content_type):
            return False
        return filters.chart_source_types is None or self.source in filters.chart_source_types

    def get_summary_query(self, filters: ContentFilters) -> Select:
        created_by, updated_by = creator_and_editor()
        query = (
            select(
                *summary_columns(
                    uuid=SavedChart.id,
                    content_type=self.content_type,
                    project_uuid=SavedChart.project_id,
                    project_name=Project.name,
                    space_uuid=Space.id,
                    space_name=Space.name,
                    name=SavedChart.name,
                    description=SavedChart.description,
                    views=SavedChart.views_count,
                    created_at=SavedChart.created_at,
                    created_by=created_by,
                    last_updated_at=SavedChart.updated_at,
                    updated_by=updated_by,
                    metadata=build_json_object(
                        source=literal(self.source.value, String),
                        chart_kind=SavedChart.chart_kind,
                        explore_name=SavedChart.explore_name,
                        dashboard_uuid=Dashboard.id,
                        dashboard_name=Dashboard.name,
                    ),
                    rank=self.rank,
                )
            )
            .select_from(SavedChart)
            .join(Project, Project.id == SavedChart.project_id)
            .join(Space, Space.id == SavedChart.space_id)
            .outerjoin(Dashboard, Dashboard.id == SavedChart.dashboard_id)
            .outerjoin(created_by, created_by.id == SavedChart.created_by)
            .outerjoin(updated_by, updated_by.id == SavedChart.updated_by)
        )
        if filters.space_uuids is not None:
            query = query.where(SavedChart.space_id.in_(filters.space_uuids))
        return apply_common_filters(
            query,
            filters,
            project_id=SavedChart.project_id,
            name=SavedChart.name,
            created_by=SavedChart.created_by,
        )

    def should_row_be_converted(self, row: Mapping[str, Any]) -> bool:
        return row_discriminant(row) == self.discriminant

    def convert_summary_row(self, row: Mapping[str, Any]) -> ChartContent:
        metadata = row_metadata(row)
        metadata.pop("source", None)
        return ChartContent(
            **summary_fields(row),
            metadata=DbtExploreChartMetadata(**metadata),
        )


dbt_explore_chart_content_configuration = DbtExploreChartContentConfiguration()
