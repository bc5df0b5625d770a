"""Insight backend: unified content feed over charts, dashboards and spaces."""

__version__ = "0.1.0"
