"""
Tests for the admin token guard on mutating endpoints.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient

from pinmap.config import Settings

ADMIN_TOKEN = "s3cret-admin-token"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with an admin token, so mutating routes are guarded."""
    return Settings(ADMIN_TOKEN=ADMIN_TOKEN, SEED_DATABASE=False)


@pytest_asyncio.fixture
async def admin_client(asgi_transport):
    async with AsyncClient(
        transport=asgi_transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {ADMIN_TOKEN}"},
    ) as client:
        yield client


@pytest.mark.asyncio
async def test_create_pin_without_token(client: AsyncClient, sample_pin_data: dict):
    response = await client.post("/api/pins", json=sample_pin_data)

    assert response.status_code == 401
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_create_pin_with_wrong_token(client: AsyncClient, sample_pin_data: dict):
    response = await client.post(
        "/api/pins",
        json=sample_pin_data,
        headers={"Authorization": "Bearer not-the-token"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_authorization_header(client: AsyncClient):
    response = await client.post(
        "/api/tags",
        json={"name": "culture"},
        headers={"Authorization": ADMIN_TOKEN},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_pin_with_admin_token(admin_client: AsyncClient, sample_pin_data: dict):
    response = await admin_client.post("/api/pins", json=sample_pin_data)

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_reads_stay_public(client: AsyncClient, admin_client: AsyncClient, sample_pin_data: dict):
    """Reading endpoints need no token even when one is configured."""
    await admin_client.post("/api/pins", json=sample_pin_data)

    response = await client.get("/api/pins")

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert (await client.get("/api/tags")).status_code == 200
    assert (await client.get("/api/health")).status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path",
    [
        ("DELETE", "/api/pins/some-id"),
        ("PUT", "/api/pins/some-id"),
        ("DELETE", "/api/tags/some-id"),
        ("PUT", "/api/tags/some-id"),
        ("DELETE", "/api/boundary"),
        ("PUT", "/api/boundary"),
        ("PUT", "/api/settings"),
    ],
)
async def test_every_mutation_is_guarded(client: AsyncClient, method: str, path: str):
    response = await client.request(method, path, json={})

    assert response.status_code == 401
