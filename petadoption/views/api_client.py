"""Pets API Client — the views' only way to reach the data (HTTP over httpx).

Invariants:
    - One method per JSON endpoint; paths and payloads match the REST contract
    - Non-2xx responses raise ApiError carrying the server's "error" string
    - Transport failures raise ApiError with status_code None
    - forwarded_for is sent as X-Forwarded-For so adoptions are recorded
      against the visitor, not the process rendering the page

Design Decisions:
    - Same client for in-process (ASGITransport) and remote API deployments
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request to the pets API failed."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        error = response.json().get("error")
    except (ValueError, AttributeError):
        error = None
    if isinstance(error, str) and error:
        return error
    return f"Request failed with status {response.status_code}"


class PetsApiClient:
    """Async client for the pet adoption REST API."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        forwarded_for: str | None = None,
        token: str | None = None,
        timeout_seconds: float = 10.0,
    ):
        self.forwarded_for = forwarded_for
        self.token = token
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout_seconds,
        )

    async def __aenter__(self) -> "PetsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {}
        if self.forwarded_for:
            headers["X-Forwarded-For"] = self.forwarded_for
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._http.request(
                method, path, headers=self._headers(), **kwargs,
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(None, str(e) or type(e).__name__) from e
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    # ─── Public ─────────────────────────────────────────────────

    async def get_ip(self) -> str:
        return (await self._request("GET", "/get-ip"))["ip"]

    async def list_pets(self) -> list[dict]:
        return await self._request("GET", "/pets")

    async def check_adoption(self, ip: str) -> bool:
        data = await self._request("GET", f"/check-adoption/{ip}")
        return bool(data["hasAdopted"])

    async def adopt(self, pet_id: int, adoptee_name: str) -> str:
        data = await self._request(
            "POST", "/adopt", json={"id": pet_id, "adopteeName": adoptee_name},
        )
        return data["message"]

    async def page_details(self) -> dict:
        return await self._request("GET", "/page-details")

    async def website_title(self) -> dict:
        return await self._request("GET", "/website-title")

    # ─── Admin ──────────────────────────────────────────────────

    async def login(self, password: str) -> str:
        data = await self._request("POST", "/admin-login", json={"password": password})
        self.token = data["token"]
        return self.token

    async def logout(self) -> None:
        await self._request("POST", "/admin-logout")
        self.token = None

    async def session_active(self) -> bool:
        try:
            await self._request("GET", "/admin-session")
        except ApiError as e:
            if e.status_code == 401:
                return False
            raise
        return True

    async def add_pet(
        self, name: str, description: str, image: tuple[str, bytes, str],
    ) -> int:
        data = await self._request(
            "POST", "/add-animal",
            data={"name": name, "description": description},
            files={"image": image},
        )
        return data["id"]

    async def update_pet(
        self,
        pet_id: int,
        name: str,
        description: str,
        image: tuple[str, bytes, str] | None = None,
    ) -> int:
        kwargs: dict = {"data": {"name": name, "description": description}}
        if image is not None:
            kwargs["files"] = {"image": image}
        data = await self._request("PUT", f"/update-animal/{pet_id}", **kwargs)
        return data["updated"]

    async def remove_pet(self, pet_id: int) -> int:
        return (await self._request("DELETE", f"/remove-animal/{pet_id}"))["deleted"]

    async def unadopt_pet(self, pet_id: int) -> int:
        return (await self._request("PUT", f"/unadopt-animal/{pet_id}"))["updated"]

    async def update_page_details(self, title: str, description: str) -> int:
        data = await self._request(
            "PUT", "/update-page-details",
            json={"title": title, "description": description},
        )
        return data["updated"]

    async def update_website_title(self, title: str) -> int:
        data = await self._request(
            "PUT", "/update-website-title", json={"title": title},
        )
        return data["updated"]
