"""Content registry — registration order, duplicate detection, row owner lookup."""

from __future__ import annotations

import pytest
from sqlalchemy.dialects import postgresql, sqlite

from insight_backend.content.configuration import ContentConfiguration
from insight_backend.content.configurations import (
    SqlChartContentConfiguration,
    dashboard_content_configuration,
    dbt_explore_chart_content_configuration,
    space_content_configuration,
    sql_chart_content_configuration,
)
from insight_backend.content.model import build_summary_query
from insight_backend.content.registry import CONTENT_REGISTRY, ContentRegistry
from insight_backend.content.types import ContentArgs, ContentFilters, ContentType
from insight_backend.core.exceptions import ContentRegistryError


def test_default_registry_order():
    assert CONTENT_REGISTRY.configurations == (
        sql_chart_content_configuration,
        dbt_explore_chart_content_configuration,
        dashboard_content_configuration,
        space_content_configuration,
    )


def test_duplicate_discriminant_rejected():
    with pytest.raises(ContentRegistryError):
        ContentRegistry([sql_chart_content_configuration, SqlChartContentConfiguration()])


def test_matching_keeps_registration_order():
    filters = ContentFilters(content_types=[ContentType.SPACE, ContentType.CHART])
    assert CONTENT_REGISTRY.matching(filters) == (
        sql_chart_content_configuration,
        dbt_explore_chart_content_configuration,
        space_content_configuration,
    )


def test_owner_of_respects_candidates():
    row = {"content_type": "dashboard", "metadata": {"chart_count": 0}}
    assert CONTENT_REGISTRY.owner_of(row) is dashboard_content_configuration
    assert CONTENT_REGISTRY.owner_of(row, [space_content_configuration]) is None


def test_owner_of_unknown_row():
    assert CONTENT_REGISTRY.owner_of({"content_type": None, "metadata": None}) is None


@pytest.mark.parametrize(
    "dialect, json_function",
    [(sqlite.dialect(), "json_object("), (postgresql.dialect(), "jsonb_build_object(")],
)
def test_union_query_compiles_per_dialect(dialect, json_function):
    query = build_summary_query(CONTENT_REGISTRY.configurations, ContentFilters(), ContentArgs())
    sql = str(query.compile(dialect=dialect))
    assert sql.count("UNION ALL") == len(CONTENT_REGISTRY) - 1
    assert json_function in sql
    assert "ORDER BY content.content_type_rank ASC, content.last_updated_at DESC" in sql


def test_single_branch_is_not_unioned():
    configs = CONTENT_REGISTRY.matching(ContentFilters(content_types=[ContentType.DASHBOARD]))
    sql = str(build_summary_query(configs, ContentFilters(), ContentArgs()).compile(dialect=sqlite.dialect()))
    assert "UNION" not in sql


def test_registered_configurations_satisfy_protocol():
    assert all(isinstance(config, ContentConfiguration) for config in CONTENT_REGISTRY)
