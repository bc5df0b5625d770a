"""Content feed endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..content.model import ContentModel
from ..content.types import ChartSourceType, ContentArgs, ContentFilters, ContentType, SortDirection
from ..core.settings import Settings
from ..db.pagination import PaginateArgs
from .deps import get_content_model, get_settings

router = APIRouter(prefix="/api/v1/content", tags=["content"])


@router.get("")
async def list_content(
    project_uuids: list[str] | None = Query(default=None),
    space_uuids: list[str] | None = Query(default=None),
    content_types: list[ContentType] | None = Query(default=None),
    chart_source_types: list[ChartSourceType] | None = Query(default=None),
    search: str | None = None,
    created_by_user_uuids: list[str] | None = Query(default=None),
    root_spaces_only: bool = False,
    sort_by: str | None = None,
    sort_direction: SortDirection | None = None,
    page: int | None = Query(default=None, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    model: ContentModel = Depends(get_content_model),
    settings: Settings = Depends(get_settings),
):
    filters = ContentFilters(
        project_uuids=project_uuids,
        space_uuids=space_uuids,
        content_types=content_types,
        chart_source_types=chart_source_types,
        search=search,
        created_by_user_uuids=created_by_user_uuids,
        root_spaces_only=root_spaces_only,
    )
    paginate_args = None
    if page is not None or page_size is not None:
        paginate_args = PaginateArgs(
            page=page or 1,
            page_size=min(page_size or settings.default_page_size, settings.max_page_size),
        )

    results = await model.find_summary_contents(
        filters,
        ContentArgs(sort_by=sort_by, sort_direction=sort_direction),
        paginate_args,
    )
    return {"status": "ok", "results": results.model_dump(mode="json")}
