"""ContentModel: every content type in one sorted, paginated feed.

All matching content types are fetched with a single ``UNION ALL`` query.
Configurations decide which branches to include and how to convert the rows
back. The branches must have exactly the same columns; any additional data
goes in the ``metadata`` JSON column.

To add a content type, write a configuration and register it in
``CONTENT_REGISTRY``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from sqlalchemy import Select, select, union_all
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ContentConfigurationError, InvalidSortColumnError
from ..db.pagination import PaginateArgs, PaginatedData, paginate
from .configuration import ContentConfiguration
from .registry import CONTENT_REGISTRY, ContentRegistry
from .types import SORTABLE_COLUMNS, ContentArgs, ContentFilters, SortDirection, SummaryContent

logger = logging.getLogger(__name__)

SummaryContentPage = PaginatedData[list[SummaryContent]]

DEFAULT_SORT_COLUMN = "last_updated_at"


class ContentModel:
    def __init__(self, session: AsyncSession, registry: ContentRegistry = CONTENT_REGISTRY):
        self._session = session
        self._registry = registry

    async def find_summary_contents(
        self,
        filters: ContentFilters,
        args: ContentArgs | None = None,
        paginate_args: PaginateArgs | None = None,
    ) -> SummaryContentPage:
        matching = self._registry.matching(filters)
        if not matching:
            logger.debug("no content type matches filters, skipping query")
            return SummaryContentPage(data=[])

        query = build_summary_query(matching, filters, args or ContentArgs())
        page = await paginate(self._session, query, paginate_args)
        logger.debug(
            "content query returned %d rows",
            len(page.data),
            extra={"extra": {"content_types": [str(c.discriminant) for c in matching]}},
        )

        return SummaryContentPage(
            data=[self._convert(row, matching) for row in page.data],
            pagination=page.pagination,
        )

    def _convert(
        self, row: Mapping[str, Any], matching: Sequence[ContentConfiguration]
    ) -> SummaryContent:
        config = self._registry.owner_of(row, matching)
        if config is None:
            logger.error(
                "content row has no owning configuration",
                extra={"extra": {"uuid": row.get("uuid"), "content_type": row.get("content_type")}},
            )
            raise ContentConfigurationError(row.get("uuid"), row.get("content_type"))
        return config.convert_summary_row(row)


def build_summary_query(
    configurations: Sequence[ContentConfiguration],
    filters: ContentFilters,
    args: ContentArgs,
) -> Select:
    """Union the branches in registration order, then order the whole set.

    Rows are grouped by ``content_type_rank`` first; within a group they
    follow the requested sort, or most recently updated first. ``uuid``
    breaks remaining ties so pages never overlap.
    """
    if args.sort_by is not None and args.sort_by not in SORTABLE_COLUMNS:
        raise InvalidSortColumnError(args.sort_by, SORTABLE_COLUMNS)

    branches = [config.get_summary_query(filters) for config in configurations]
    combined = branches[0] if len(branches) == 1 else union_all(*branches)
    content = combined.subquery("content")

    if args.sort_by is not None:
        sort_column = content.c[args.sort_by]
        direction = args.sort_direction or SortDirection.DESC
    else:
        sort_column = content.c[DEFAULT_SORT_COLUMN]
        direction = SortDirection.DESC

    return select(content).order_by(
        content.c.content_type_rank.asc(),
        sort_column.asc() if direction == SortDirection.ASC else sort_column.desc(),
        content.c.uuid.asc(),
    )
