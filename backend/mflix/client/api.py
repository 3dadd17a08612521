"""
Async HTTP client for the catalog API
─────────────────────────────────────
Thin wrapper over `httpx.AsyncClient`; every helper raises
`httpx.HTTPStatusError` on a non-2xx answer and `httpx.RequestError` on
transport failure. No retries: the caller decides what a failure means.
"""
from __future__ import annotations

from typing import Any

import httpx

DEFAULT_TIMEOUT = 15.0


class CatalogClient:
    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.token: str | None = None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        resp = await self._http.request(method, url, headers=self._headers(), **kwargs)
        resp.raise_for_status()
        return resp.json()

    # ----------------------------------------------------------------- movies
    async def list_movies(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        search: str = "",
        sort_by: str = "",
        sort_order: str = "",
    ) -> dict:
        """Return `{"movies": [...], "totalPages": n}` for one listing page."""
        params = {"page": page, "limit": limit, "search": search}
        if sort_by:
            params["sortBy"] = sort_by
        if sort_order:
            params["sortOrder"] = sort_order
        return await self._request("GET", "/api/movies", params=params)

    async def get_movie(self, movie_id: str) -> dict:
        return await self._request("GET", f"/api/movies/{movie_id}")

    async def update_movie(self, movie_id: str, fields: dict) -> dict:
        return await self._request("PUT", f"/api/movies/{movie_id}", json=fields)

    # ------------------------------------------------------------------- auth
    async def register(self, name: str, email: str, password: str) -> dict:
        return await self._request(
            "POST", "/api/auth/register", json={"name": name, "email": email, "password": password}
        )

    async def login(self, email: str, password: str) -> dict:
        """Log in and keep the token for later calls."""
        data = await self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data
