"""SQLAlchemy ORM models for the content store, dual-dialect (Postgres/SQLite).

Each content type lives in its own table with its own columns; the content
feed never reads these classes as entities, only their columns, so the
tables can evolve independently.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from .types import GUID


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Provides created_at and updated_at columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


class AuthoredMixin:
    """Creator / last editor references shared by every content table."""

    created_by: Mapped[str | None] = mapped_column(GUID(), ForeignKey("users.id"), nullable=True, index=True)
    updated_by: Mapped[str | None] = mapped_column(GUID(), ForeignKey("users.id"), nullable=True)


# ---------------------------------------------------------------------------
# users
# ---------------------------------------------------------------------------
class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(GUID(), primary_key=True, default=GUID.new)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)


# ---------------------------------------------------------------------------
# projects
# ---------------------------------------------------------------------------
class Project(TimestampMixin, Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(GUID(), primary_key=True, default=GUID.new)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    spaces: Mapped[list[Space]] = relationship(back_populates="project", cascade="all, delete-orphan")


# ---------------------------------------------------------------------------
# spaces
# ---------------------------------------------------------------------------
class Space(TimestampMixin, AuthoredMixin, Base):
    __tablename__ = "spaces"
    __table_args__ = (
        Index("ix_spaces_project_parent", "project_id", "parent_space_id"),
    )

    id: Mapped[str] = mapped_column(GUID(), primary_key=True, default=GUID.new)
    project_id: Mapped[str] = mapped_column(GUID(), ForeignKey("projects.id"), nullable=False, index=True)
    parent_space_id: Mapped[str | None] = mapped_column(GUID(), ForeignKey("spaces.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project: Mapped[Project] = relationship(back_populates="spaces")


# ---------------------------------------------------------------------------
# dashboards
# ---------------------------------------------------------------------------
class Dashboard(TimestampMixin, AuthoredMixin, Base):
    __tablename__ = "dashboards"

    id: Mapped[str] = mapped_column(GUID(), primary_key=True, default=GUID.new)
    project_id: Mapped[str] = mapped_column(GUID(), ForeignKey("projects.id"), nullable=False, index=True)
    space_id: Mapped[str] = mapped_column(GUID(), ForeignKey("spaces.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    views_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


# ---------------------------------------------------------------------------
# saved_charts (built on a dbt explore)
# ---------------------------------------------------------------------------
class SavedChart(TimestampMixin, AuthoredMixin, Base):
    __tablename__ = "saved_charts"

    id: Mapped[str] = mapped_column(GUID(), primary_key=True, default=GUID.new)
    project_id: Mapped[str] = mapped_column(GUID(), ForeignKey("projects.id"), nullable=False, index=True)
    space_id: Mapped[str] = mapped_column(GUID(), ForeignKey("spaces.id"), nullable=False, index=True)
    dashboard_id: Mapped[str | None] = mapped_column(GUID(), ForeignKey("dashboards.id"), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    chart_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="table")
    explore_name: Mapped[str] = mapped_column(String(255), nullable=False)
    views_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


# ---------------------------------------------------------------------------
# saved_sql (ad-hoc SQL charts)
# ---------------------------------------------------------------------------
class SavedSqlChart(TimestampMixin, AuthoredMixin, Base):
    __tablename__ = "saved_sql"

    id: Mapped[str] = mapped_column(GUID(), primary_key=True, default=GUID.new)
    project_id: Mapped[str] = mapped_column(GUID(), ForeignKey("projects.id"), nullable=False, index=True)
    space_id: Mapped[str] = mapped_column(GUID(), ForeignKey("spaces.id"), nullable=False, index=True)
    dashboard_id: Mapped[str | None] = mapped_column(GUID(), ForeignKey("dashboards.id"), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    chart_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="table")
    sql: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    views_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
