"""Ordered, immutable registry of content configurations."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from ..core.exceptions import ContentRegistryError
from .configuration import ContentConfiguration, Discriminant, row_discriminant
from .configurations import (
    dashboard_content_configuration,
    dbt_explore_chart_content_configuration,
    space_content_configuration,
    sql_chart_content_configuration,
)
from .types import ContentFilters


class ContentRegistry:
    """Registration order is union order; ``rank`` orders the results.

    Lookups by discriminant replace scanning every configuration per row.
    """

    def __init__(self, configurations: Iterable[ContentConfiguration]):
        self._configurations: tuple[ContentConfiguration, ...] = tuple(configurations)
        index: dict[Discriminant, ContentConfiguration] = {}
        for config in self._configurations:
            if config.discriminant in index:
                raise ContentRegistryError(
                    f"Duplicate content configuration for {config.discriminant!r}: "
                    f"{type(index[config.discriminant]).__name__} and {type(config).__name__}"
                )
            index[config.discriminant] = config
        self._by_discriminant: Mapping[Discriminant, ContentConfiguration] = index

    @property
    def configurations(self) -> tuple[ContentConfiguration, ...]:
        return self._configurations

    def __iter__(self):
        return iter(self._configurations)

    def __len__(self) -> int:
        return len(self._configurations)

    def matching(self, filters: ContentFilters) -> tuple[ContentConfiguration, ...]:
        return tuple(c for c in self._configurations if c.should_query_be_included(filters))

    def owner_of(
        self,
        row: Mapping[str, Any],
        candidates: Sequence[ContentConfiguration] | None = None,
    ) -> ContentConfiguration | None:
        """Configuration that converts ``row``, restricted to ``candidates`` if given."""
        discriminant = row_discriminant(row)
        config = self._by_discriminant.get(discriminant) if discriminant else None
        if config is None or not config.should_row_be_converted(row):
            return None
        if candidates is not None and config not in candidates:
            return None
        return config


CONTENT_REGISTRY = ContentRegistry(
    [
        sql_chart_content_configuration,
        dbt_explore_chart_content_configuration,
        dashboard_content_configuration,
        space_content_configuration,
    ]
)
