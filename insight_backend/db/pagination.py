"""Offset pagination over an arbitrary SELECT, with total-count metadata."""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class PaginateArgs(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=25, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    page_size: int
    total_results: int
    total_page_count: int


class PaginatedData(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    data: T
    pagination: Pagination | None = None


async def paginate(
    session: AsyncSession,
    query: Select,
    paginate_args: PaginateArgs | None = None,
) -> PaginatedData[list[dict[str, Any]]]:
    """Execute ``query`` and return its rows as plain mappings.

    Without ``paginate_args`` every row is returned and ``pagination`` is
    None. With them, the total is counted over the unordered query first,
    then only the requested page is fetched.
    """
    if paginate_args is None:
        result = await session.execute(query)
        return PaginatedData(data=[dict(row) for row in result.mappings().all()])

    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total_results = (await session.execute(count_query)).scalar_one()

    result = await session.execute(
        query.offset(paginate_args.offset).limit(paginate_args.page_size)
    )
    return PaginatedData(
        data=[dict(row) for row in result.mappings().all()],
        pagination=Pagination(
            page=paginate_args.page,
            page_size=paginate_args.page_size,
            total_results=total_results,
            total_page_count=math.ceil(total_results / paginate_args.page_size),
        ),
    )
