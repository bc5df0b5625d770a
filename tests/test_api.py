"""HTTP surface: /api/v1/content and /health."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from insight_backend.app import create_app
from insight_backend.core.settings import Settings

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def seeded(session_factory, seeder_factory):
    """Commit a small catalog so request-scoped sessions can see it."""
    async with session_factory() as session:
        async with session.begin():
            seeder = seeder_factory(session)
            project = await seeder.project("Analytics")
            sales = await seeder.space(project, "Sales", updated=10)
            board = await seeder.dashboard(sales, "Pipeline board", updated=20)
            await seeder.chart(sales, "Revenue", dashboard=board, updated=30)
            await seeder.sql_chart(sales, "Signups", updated=40)
    return {"project": project, "sales": sales}


@pytest_asyncio.fixture
async def client(session_factory, seeded):
    settings = Settings(env="test", default_page_size=2, max_page_size=3)
    app = create_app(settings, session_factory=session_factory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_list_all_content(client):
    res = await client.get("/api/v1/content")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["results"]["pagination"] is None
    data = body["results"]["data"]
    assert [item["name"] for item in data] == ["Sales", "Pipeline board", "Signups", "Revenue"]
    assert data[2]["metadata"]["source"] == "sql"
    assert data[3]["metadata"]["dashboard_name"] == "Pipeline board"


async def test_filters_from_query_string(client, seeded):
    res = await client.get(
        "/api/v1/content",
        params={"content_types": ["chart"], "chart_source_types": ["dbt_explore"]},
    )
    assert [item["name"] for item in res.json()["results"]["data"]] == ["Revenue"]

    res = await client.get("/api/v1/content", params={"space_uuids": [seeded["sales"].id]})
    assert len(res.json()["results"]["data"]) == 3


async def test_page_size_defaults_and_caps(client):
    res = await client.get("/api/v1/content", params={"page": 1})
    assert res.json()["results"]["pagination"] == {
        "page": 1,
        "page_size": 2,
        "total_results": 4,
        "total_page_count": 2,
    }

    res = await client.get("/api/v1/content", params={"page": 1, "page_size": 50})
    assert res.json()["results"]["pagination"]["page_size"] == 3
    assert len(res.json()["results"]["data"]) == 3


async def test_sort_params(client):
    res = await client.get("/api/v1/content", params={"sort_by": "name", "sort_direction": "ASC"})
    assert [item["name"] for item in res.json()["results"]["data"]] == [
        "Sales", "Pipeline board", "Revenue", "Signups",
    ]


async def test_invalid_sort_column_is_a_client_error(client):
    res = await client.get("/api/v1/content", params={"sort_by": "slug"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "E4001"
    assert error["details"]["sort_by"] == "slug"


async def test_invalid_enum_value_rejected(client):
    res = await client.get("/api/v1/content", params={"content_types": ["notebook"]})
    assert res.status_code == 422


async def test_health(client):
    res = await client.get("/health")
    assert res.json() == {"status": "ok", "db_ok": True}
