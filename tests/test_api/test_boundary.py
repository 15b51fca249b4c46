"""
Tests for region boundary endpoints.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from pinmap.models.boundary import RegionBoundary


@pytest.mark.asyncio
async def test_get_boundary_absent(client: AsyncClient):
    """No boundary is a 404, not an empty boundary."""
    response = await client.get("/api/boundary")

    assert response.status_code == 404
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_set_and_get_boundary(client: AsyncClient, sample_boundary_data: dict):
    response = await client.put("/api/boundary", json=sample_boundary_data)

    assert response.status_code == 200
    assert response.json() == sample_boundary_data

    response = await client.get("/api/boundary")

    assert response.status_code == 200
    assert response.json() == sample_boundary_data


@pytest.mark.asyncio
async def test_set_boundary_zoom_defaults(client: AsyncClient, sample_boundary_data: dict):
    data = {"name": sample_boundary_data["name"], "coordinates": sample_boundary_data["coordinates"]}
    response = await client.put("/api/boundary", json=data)

    assert response.status_code == 200
    assert response.json()["minZoom"] == 5
    assert response.json()["maxZoom"] == 18


@pytest.mark.asyncio
async def test_set_boundary_twice_keeps_one(client: AsyncClient, db_session, sample_boundary_data: dict):
    """Setting a boundary replaces the previous one."""
    await client.put("/api/boundary", json=sample_boundary_data)
    second = {**sample_boundary_data, "name": "Lesser Poland", "minZoom": 7}
    await client.put("/api/boundary", json=second)

    count = await db_session.scalar(select(func.count()).select_from(RegionBoundary))
    assert count == 1

    response = await client.get("/api/boundary")
    assert response.json() == second


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "coordinates",
    [
        [[53.4, 19.3], [53.4, 23.1]],
        [[53.4, 19.3], [53.4], [51.0, 23.1]],
        "not a polygon",
    ],
)
async def test_set_boundary_malformed_coordinates(
    client: AsyncClient, sample_boundary_data: dict, coordinates
):
    response = await client.put("/api/boundary", json={**sample_boundary_data, "coordinates": coordinates})

    assert response.status_code == 400
    assert "coordinates" in response.json()["error"]


@pytest.mark.asyncio
async def test_set_boundary_requires_name(client: AsyncClient, sample_boundary_data: dict):
    data = {key: value for key, value in sample_boundary_data.items() if key != "name"}
    response = await client.put("/api/boundary", json=data)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_set_boundary_inverted_zoom(client: AsyncClient, sample_boundary_data: dict):
    response = await client.put(
        "/api/boundary", json={**sample_boundary_data, "minZoom": 12, "maxZoom": 4}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_boundary(client: AsyncClient, sample_boundary_data: dict):
    await client.put("/api/boundary", json=sample_boundary_data)

    response = await client.delete("/api/boundary")

    assert response.status_code == 200
    assert (await client.get("/api/boundary")).status_code == 404
    # Deleting again is harmless
    assert (await client.delete("/api/boundary")).status_code == 200
