"""Concrete content configurations, one per content type."""

from .chart import DbtExploreChartContentConfiguration, dbt_explore_chart_content_configuration
from .dashboard import DashboardContentConfiguration, dashboard_content_configuration
from .space import SpaceContentConfiguration, space_content_configuration
from .sql_chart import SqlChartContentConfiguration, sql_chart_content_configuration

__all__ = [
    "DbtExploreChartContentConfiguration", "dbt_explore_chart_content_configuration",
    "DashboardContentConfiguration", "dashboard_content_configuration",
    "SpaceContentConfiguration", "space_content_configuration",
    "SqlChartContentConfiguration", "sql_chart_content_configuration",
]
