"""Content configuration protocol and the common column contract.

Every configuration contributes one branch to a ``UNION ALL``. The branches
must expose identical column names, order and types, so all of them are
built through :func:`summary_columns`; anything type-specific goes into the
``metadata`` JSON column.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from sqlalchemy import ColumnElement, Integer, Select, String, Text, cast, literal, null
from sqlalchemy.orm import aliased

from ..db.models import User
from ..db.types import GUID
from .types import (
    ChartSourceType,
    ContentFilters,
    ContentType,
    ProjectRef,
    SpaceRef,
    SummaryContent,
    SummaryContentRow,
    UserRef,
)

Discriminant = tuple[ContentType, ChartSourceType | None]


@runtime_checkable
class ContentConfiguration(Protocol):
    content_type: ContentType
    source: ChartSourceType | None
    rank: int

    @property
    def discriminant(self) -> Discriminant: ...

    def should_query_be_included(self, filters: ContentFilters) -> bool: ...

    def get_summary_query(self, filters: ContentFilters) -> Select: ...

    def should_row_be_converted(self, row: SummaryContentRow) -> bool: ...

    def convert_summary_row(self, row: SummaryContentRow) -> SummaryContent: ...


def row_discriminant(row: Mapping[str, Any]) -> Discriminant | None:
    """Read ``(content_type, metadata.source)`` off a raw summary row."""
    try:
        content_type = ContentType(row.get("content_type"))
    except ValueError:
        return None
    metadata = row.get("metadata") or {}
    source = metadata.get("source")
    if source is None:
        return content_type, None
    try:
        return content_type, ChartSourceType(source)
    except ValueError:
        return None


def includes_content_type(filters: ContentFilters, content_type: ContentType) -> bool:
    return filters.content_types is None or content_type in filters.content_types


def creator_and_editor():
    """Fresh aliases of ``users`` for the created_by / updated_by joins."""
    return aliased(User, name="created_by_user"), aliased(User, name="updated_by_user")


def summary_columns(
    *,
    uuid: ColumnElement,
    content_type: ContentType,
    project_uuid: ColumnElement,
    project_name: ColumnElement,
    space_uuid: ColumnElement | None,
    space_name: ColumnElement | None,
    name: ColumnElement,
    description: ColumnElement | None,
    views: ColumnElement | None,
    created_at: ColumnElement,
    created_by,
    last_updated_at: ColumnElement,
    updated_by,
    metadata: ColumnElement,
    rank: int,
) -> list[ColumnElement]:
    """Return the labelled common columns in union order.

    ``None`` for an optional column emits a typed NULL (or 0 for ``views``)
    so branches without that concept stay union-compatible.
    """
    return [
        uuid.label("uuid"),
        literal(content_type.value, String).label("content_type"),
        project_uuid.label("project_uuid"),
        project_name.label("project_name"),
        _or_null(space_uuid, GUID()).label("space_uuid"),
        _or_null(space_name, String()).label("space_name"),
        name.label("name"),
        _or_null(description, Text()).label("description"),
        (views if views is not None else literal(0, Integer)).label("views"),
        created_at.label("created_at"),
        created_by.id.label("created_by_user_uuid"),
        created_by.first_name.label("created_by_user_first_name"),
        created_by.last_name.label("created_by_user_last_name"),
        last_updated_at.label("last_updated_at"),
        updated_by.id.label("last_updated_by_user_uuid"),
        updated_by.first_name.label("last_updated_by_user_first_name"),
        updated_by.last_name.label("last_updated_by_user_last_name"),
        metadata.label("metadata"),
        literal(rank, Integer).label("content_type_rank"),
    ]


def _or_null(expr: ColumnElement | None, type_) -> ColumnElement:
    if expr is None:
        return cast(null(), type_)
    return expr


def apply_common_filters(
    query: Select,
    filters: ContentFilters,
    *,
    project_id: ColumnElement,
    name: ColumnElement,
    created_by: ColumnElement,
) -> Select:
    """Filters every content type honours identically."""
    if filters.project_uuids is not None:
        query = query.where(project_id.in_(filters.project_uuids))
    if filters.created_by_user_uuids is not None:
        query = query.where(created_by.in_(filters.created_by_user_uuids))
    if filters.search:
        query = query.where(name.ilike(f"%{filters.search.strip()}%"))
    return query


# ---------------------------------------------------------------------------
# Row -> summary helpers
# ---------------------------------------------------------------------------
def _user_ref(row: Mapping[str, Any], prefix: str) -> UserRef | None:
    uuid = row.get(f"{prefix}_uuid")
    if not uuid:
        return None
    return UserRef(
        uuid=uuid,
        first_name=row.get(f"{prefix}_first_name") or "",
        last_name=row.get(f"{prefix}_last_name") or "",
    )


def summary_fields(row: Mapping[str, Any]) -> dict[str, Any]:
    """Fields shared by every summary model, read off a raw row."""
    space = None
    if row.get("space_uuid"):
        space = SpaceRef(uuid=row["space_uuid"], name=row.get("space_name") or "")
    return {
        "uuid": row["uuid"],
        "project": ProjectRef(uuid=row["project_uuid"], name=row.get("project_name") or ""),
        "space": space,
        "name": row["name"],
        "description": row.get("description"),
        "views": row.get("views") or 0,
        "created_at": row["created_at"],
        "created_by": _user_ref(row, "created_by_user"),
        "last_updated_at": row["last_updated_at"],
        "last_updated_by": _user_ref(row, "last_updated_by_user"),
        "content_type_rank": row["content_type_rank"],
    }


def row_metadata(row: Mapping[str, Any]) -> dict[str, Any]:
    """Metadata payload with JSON nulls dropped so model defaults apply."""
    metadata = row.get("metadata") or {}
    return {key: value for key, value in metadata.items() if value is not None}
