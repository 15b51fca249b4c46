"""
Tests for map settings endpoints.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from pinmap.models.settings import MapSettings


@pytest.mark.asyncio
async def test_get_settings_absent(client: AsyncClient):
    response = await client.get("/api/settings")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_put_settings_fills_defaults(client: AsyncClient):
    """Only center and zoom are required; lists fall back to defaults."""
    response = await client.put("/api/settings", json={"defaultCenter": [50.0, 20.0], "defaultZoom": 8})

    assert response.status_code == 200
    assert response.json() == {
        "defaultCenter": [50.0, 20.0],
        "defaultZoom": 8,
        "allowedContentTypes": ["text", "image", "video", "pdf"],
        "contentDisplayOrder": ["text", "image", "video", "pdf"],
        "enabledFilters": ["title", "mainTag", "supportingTags", "createdAt"],
        "enabledSorting": ["title", "mainTag", "createdAt", "updatedAt"],
    }


@pytest.mark.asyncio
async def test_put_settings_upserts_single_row(client: AsyncClient, db_session):
    await client.put("/api/settings", json={"defaultCenter": [50.0, 20.0], "defaultZoom": 8})
    response = await client.put(
        "/api/settings",
        json={
            "defaultCenter": [52.0, 21.0],
            "defaultZoom": 10,
            "enabledSorting": ["title"],
        },
    )

    assert response.status_code == 200
    assert response.json()["enabledSorting"] == ["title"]

    count = await db_session.scalar(select(func.count()).select_from(MapSettings))
    assert count == 1

    stored = (await client.get("/api/settings")).json()
    assert stored["defaultCenter"] == [52.0, 21.0]
    assert stored["defaultZoom"] == 10


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"defaultZoom": 8},
        {"defaultCenter": [50.0, 20.0]},
        {"defaultCenter": "Warsaw", "defaultZoom": 8},
    ],
)
async def test_put_settings_requires_center_and_zoom(client: AsyncClient, body: dict):
    response = await client.put("/api/settings", json=body)

    assert response.status_code == 400
    assert "error" in response.json()
