"""Spaces. The location of a space is its parent space, if any."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Select, func, select
from sqlalchemy.orm import aliased

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
from ..types import ContentFilters, ContentType, SpaceContent, SpaceMetadata


def _count_in_space(model):
    return (
        select(func.count(model.id))
        .where(model.space_id == Space.id)
        .correlate(Space)
        .scalar_subquery()
    )


def _child_space_count():
    child = aliased(Space, name="child_space")
    return (
        select(func.count(child.id))
        .where(child.parent_space_id == Space.id)
        .correlate(Space)
        .scalar_subquery()
    )


class SpaceContentConfiguration:
    content_type = ContentType.SPACE
    source = None
    rank = 1

    @property
    def discriminant(self) -> Discriminant:
        return self.content_type, self.source

    def should_query_be_included(self, filters: ContentFilters) -> bool:
        return includes_content_type(filters, self.content_type)

    def get_summary_query(self, filters: ContentFilters) -> Select:
        created_by, updated_by = creator_and_editor()
        parent = aliased(Space, name="parent_space")
        query = (
            select(
                *summary_columns(
                    uuid=Space.id,
                    content_type=self.content_type,
                    project_uuid=Space.project_id,
                    project_name=Project.name,
                    space_uuid=parent.id,
                    space_name=parent.name,
                    name=Space.name,
                    description=None,
                    views=None,
                    created_at=Space.created_at,
                    created_by=created_by,
                    last_updated_at=Space.updated_at,
                    updated_by=updated_by,
                    metadata=build_json_object(
                        is_private=Space.is_private,
                        chart_count=_count_in_space(SavedChart) + _count_in_space(SavedSqlChart),
                        dashboard_count=_count_in_space(Dashboard),
                        child_space_count=_child_space_count(),
                    ),
                    rank=self.rank,
                )
            )
            .select_from(Space)
            .join(Project, Project.id == Space.project_id)
            .outerjoin(parent, parent.id == Space.parent_space_id)
            .outerjoin(created_by, created_by.id == Space.created_by)
            .outerjoin(updated_by, updated_by.id == Space.updated_by)
        )
        # Scoping to spaces lists what is inside them: their child spaces.
        if filters.space_uuids is not None:
            query = query.where(Space.parent_space_id.in_(filters.space_uuids))
        if filters.root_spaces_only:
            query = query.where(Space.parent_space_id.is_(None))
        return apply_common_filters(
            query,
            filters,
            project_id=Space.project_id,
            name=Space.name,
            created_by=Space.created_by,
        )

    def should_row_be_converted(self, row: Mapping[str, Any]) -> bool:
        return row_discriminant(row) == self.discriminant

    def convert_summary_row(self, row: Mapping[str, Any]) -> SpaceContent:
        return SpaceContent(
            **summary_fields(row),
            metadata=SpaceMetadata(**row_metadata(row)),
        )


space_content_configuration = SpaceContentConfiguration()
