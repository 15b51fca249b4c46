"""
Async HTTP client for the Pin Map API.
One coroutine per route the client store uses; non-2xx responses raise ApiError.
"""

from typing import Any

import httpx

from pinmap.schemas.boundary import RegionBoundarySchema
from pinmap.schemas.pin import PinResponse
from pinmap.schemas.settings import MapSettingsSchema
from pinmap.schemas.tag import TagResponse


class ApiError(Exception):
    """A request reached the API and came back with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class MapApiClient:
    """
    Thin wrapper over httpx.AsyncClient for the /api routes.

    Args:
        base_url: Server root, e.g. "http://localhost:8000"
        admin_token: Bearer token sent with every request when set
        transport: Optional httpx transport (tests use MockTransport)
        timeout: Request timeout in seconds; None waits indefinitely
    """

    def __init__(
        self,
        base_url: str,
        admin_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        api_prefix: str = "/api",
    ):
        headers = {"Authorization": f"Bearer {admin_token}"} if admin_token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + api_prefix,
            headers=headers,
            transport=transport,
            timeout=timeout,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "MapApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.is_success:
            return response.json()

        try:
            message = response.json().get("error") or response.reason_phrase
        except (ValueError, AttributeError):
            message = response.reason_phrase
        raise ApiError(response.status_code, f"{method} {path} failed ({response.status_code}): {message}")

    # Pins

    async def list_pins(self, tag: str | None = None) -> list[PinResponse]:
        params = {"tag": tag} if tag else None
        data = await self._request("GET", "/pins", params=params)
        return [PinResponse.model_validate(item) for item in data]

    async def create_pin(self, pin: dict[str, Any]) -> PinResponse:
        return PinResponse.model_validate(await self._request("POST", "/pins", json=pin))

    async def update_pin(self, pin_id: str, updates: dict[str, Any]) -> PinResponse:
        return PinResponse.model_validate(await self._request("PUT", f"/pins/{pin_id}", json=updates))

    async def delete_pin(self, pin_id: str) -> None:
        await self._request("DELETE", f"/pins/{pin_id}")

    # Tags

    async def list_tags(self) -> list[TagResponse]:
        return [TagResponse.model_validate(item) for item in await self._request("GET", "/tags")]

    async def create_tag(self, name: str, color: str) -> TagResponse:
        data = await self._request("POST", "/tags", json={"name": name, "color": color})
        return TagResponse.model_validate(data)

    async def update_tag(self, tag_id: str, updates: dict[str, Any]) -> TagResponse:
        return TagResponse.model_validate(await self._request("PUT", f"/tags/{tag_id}", json=updates))

    async def delete_tag(self, tag_id: str) -> None:
        await self._request("DELETE", f"/tags/{tag_id}")

    # Boundary

    async def get_boundary(self) -> RegionBoundarySchema | None:
        """Fetch the boundary; None when the server has none (404)."""
        try:
            data = await self._request("GET", "/boundary")
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        return RegionBoundarySchema.model_validate(data)

    async def set_boundary(self, boundary: RegionBoundarySchema) -> RegionBoundarySchema:
        data = await self._request("PUT", "/boundary", json=boundary.model_dump(mode="json", by_alias=True))
        return RegionBoundarySchema.model_validate(data)

    async def delete_boundary(self) -> None:
        await self._request("DELETE", "/boundary")

    # Settings

    async def get_settings(self) -> MapSettingsSchema | None:
        """Fetch the map settings; None when the server has none (404)."""
        try:
            data = await self._request("GET", "/settings")
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        return MapSettingsSchema.model_validate(data)

    async def update_settings(self, settings: MapSettingsSchema) -> MapSettingsSchema:
        data = await self._request("PUT", "/settings", json=settings.model_dump(mode="json", by_alias=True))
        return MapSettingsSchema.model_validate(data)
