"""Test fixtures — async SQLite in-memory database and a content seeder."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from insight_backend.db.models import (
    Base,
    Dashboard,
    Project,
    SavedChart,
    SavedSqlChart,
    Space,
    User,
)
from insight_backend.db.types import GUID

BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


def at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


class ContentSeeder:
    """Inserts content rows with explicit timestamps so ordering is predictable."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _add(self, obj):
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def user(self, first_name="Ada", last_name="Lovelace") -> User:
        return await self._add(User(id=GUID.new(), first_name=first_name, last_name=last_name))

    async def project(self, name="Analytics") -> Project:
        return await self._add(Project(id=GUID.new(), name=name))

    async def space(self, project, name, *, parent=None, is_private=False, user=None, updated=0) -> Space:
        return await self._add(
            Space(
                id=GUID.new(),
                project_id=project.id,
                parent_space_id=parent.id if parent else None,
                name=name,
                is_private=is_private,
                created_by=user.id if user else None,
                updated_by=user.id if user else None,
                created_at=at(0),
                updated_at=at(updated),
            )
        )

    async def dashboard(self, space, name, *, user=None, updated=0, views=0, description=None) -> Dashboard:
        return await self._add(
            Dashboard(
                id=GUID.new(),
                project_id=space.project_id,
                space_id=space.id,
                name=name,
                description=description,
                views_count=views,
                created_by=user.id if user else None,
                updated_by=user.id if user else None,
                created_at=at(0),
                updated_at=at(updated),
            )
        )

    async def chart(self, space, name, *, dashboard=None, user=None, updated=0, views=0,
                    chart_kind="bar", explore_name="orders") -> SavedChart:
        return await self._add(
            SavedChart(
                id=GUID.new(),
                project_id=space.project_id,
                space_id=space.id,
                dashboard_id=dashboard.id if dashboard else None,
                name=name,
                chart_kind=chart_kind,
                explore_name=explore_name,
                views_count=views,
                created_by=user.id if user else None,
                updated_by=user.id if user else None,
                created_at=at(0),
                updated_at=at(updated),
            )
        )

    async def sql_chart(self, space, name, *, dashboard=None, user=None, updated=0, views=0,
                        chart_kind="line", slug=None) -> SavedSqlChart:
        return await self._add(
            SavedSqlChart(
                id=GUID.new(),
                project_id=space.project_id,
                space_id=space.id,
                dashboard_id=dashboard.id if dashboard else None,
                name=name,
                chart_kind=chart_kind,
                sql="select 1",
                slug=slug or name.lower().replace(" ", "-"),
                views_count=views,
                created_by=user.id if user else None,
                updated_by=user.id if user else None,
                created_at=at(0),
                updated_at=at(updated),
            )
        )


@pytest_asyncio.fixture
async def engine():
    """Create an async in-memory SQLite engine for tests."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    """Provide an async session factory."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    """Provide a single async session for test use."""
    async with session_factory() as sess:
        async with sess.begin():
            yield sess


@pytest_asyncio.fixture
async def seeder(session):
    return ContentSeeder(session)


@pytest_asyncio.fixture
async def catalog(seeder):
    """One project with every content type.

    Layout::

        Sales (root, by Ada)            updated +10
          Pipeline (child, private)     updated +5
            Forecast dashboard          updated +25
        Marketing (root, by Grace)      updated +20
          Campaigns dashboard           updated +30, views 7
            Revenue chart (dbt, bar)    updated +40, views 11, in dashboard
          Signups chart (sql, line)     updated +50
          Churn chart (dbt, pie)        updated +45
    """
    ada = await seeder.user("Ada", "Lovelace")
    grace = await seeder.user("Grace", "Hopper")
    project = await seeder.project("Analytics")

    sales = await seeder.space(project, "Sales", user=ada, updated=10)
    pipeline = await seeder.space(project, "Pipeline", parent=sales, is_private=True, updated=5)
    marketing = await seeder.space(project, "Marketing", user=grace, updated=20)

    forecast = await seeder.dashboard(pipeline, "Forecast", updated=25)
    campaigns = await seeder.dashboard(marketing, "Campaigns", user=grace, updated=30, views=7,
                                       description="Campaign performance")

    revenue = await seeder.chart(marketing, "Revenue", dashboard=campaigns, user=ada, updated=40, views=11)
    churn = await seeder.chart(marketing, "Churn", chart_kind="pie", explore_name="customers", updated=45)
    signups = await seeder.sql_chart(marketing, "Signups", user=grace, updated=50, slug="signups")

    return {
        "ada": ada,
        "grace": grace,
        "project": project,
        "sales": sales,
        "pipeline": pipeline,
        "marketing": marketing,
        "forecast": forecast,
        "campaigns": campaigns,
        "revenue": revenue,
        "churn": churn,
        "signups": signups,
    }


@pytest.fixture
def seeder_factory():
    """Seeder bound to a caller-managed session (e.g. one that commits)."""
    return ContentSeeder
