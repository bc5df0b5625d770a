"""Ad-hoc SQL charts."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Select, String, literal, select

from ...db.json import build_json_object
from ...db.models import Dashboard, Project, SavedSqlChart, Space
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
from ..types import ChartContent, ChartSourceType, ContentFilters, ContentType, SqlChartMetadata


class SqlChartContentConfiguration:
    content_type = ContentType.CHART
    source = ChartSourceType.SQL
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
                    uuid=SavedSqlChart.id,
                    content_type=self.content_type,
                    project_uuid=SavedSqlChart.project_id,
                    project_name=Project.name,
                    space_uuid=Space.id,
                    space_name=Space.name,
                    name=SavedSqlChart.name,
                    description=SavedSqlChart.description,
                    views=SavedSqlChart.views_count,
                    created_at=SavedSqlChart.created_at,
                    created_by=created_by,
                    last_updated_at=SavedSqlChart.updated_at,
                    updated_by=updated_by,
                    metadata=build_json_object(
                        source=literal(self.source.value, String),
                        chart_kind=SavedSqlChart.chart_kind,
                        slug=SavedSqlChart.slug,
                        dashboard_uuid=Dashboard.id,
                        dashboard_name=Dashboard.name,
                    ),
                    rank=self.rank,
                )
            )
            .select_from(SavedSqlChart)
            .join(Project, Project.id == SavedSqlChart.project_id)
            .join(Space, Space.id == SavedSqlChart.space_id)
            .outerjoin(Dashboard, Dashboard.id == SavedSqlChart.dashboard_id)
            .outerjoin(created_by, created_by.id == SavedSqlChart.created_by)
            .outerjoin(updated_by, updated_by.id == SavedSqlChart.updated_by)
        )
        if filters.space_uuids is not None:
            query = query.where(SavedSqlChart.space_id.in_(filters.space_uuids))
        return apply_common_filters(
            query,
            filters,
            project_id=SavedSqlChart.project_id,
            name=SavedSqlChart.name,
            created_by=SavedSqlChart.created_by,
        )

    def should_row_be_converted(self, row: Mapping[str, Any]) -> bool:
        return row_discriminant(row) == self.discriminant

    def convert_summary_row(self, row: Mapping[str, Any]) -> ChartContent:
        metadata = row_metadata(row)
        metadata.pop("source", None)
        return ChartContent(
            **summary_fields(row),
            metadata=SqlChartMetadata(**metadata),
        )


sql_chart_content_configuration = SqlChartContentConfiguration()
