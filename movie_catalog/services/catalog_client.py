"""Thin async wrapper around the remote movie catalog HTTP service."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import pydantic
from pydantic import TypeAdapter

from movie_catalog.core.config import get_settings
from movie_catalog.services.models import MovieFields, MovieRecord


logger = logging.getLogger(__name__)

_MOVIE_LIST = TypeAdapter(list[MovieRecord])


class CatalogError(Exception):
    """Base exception for catalog service failures."""


class NetworkFailure(CatalogError):
    """Raised when a request fails at the transport level or returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteCatalogClient:
    """One request per call, no retry. Every failure surfaces as NetworkFailure."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.catalog_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.catalog_timeout
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("%s %s returned %s", method, url, status_code)
            raise NetworkFailure(
                f"{method} {path} returned {status_code}", status_code=status_code
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise NetworkFailure(f"{method} {path} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    async def list_movies(self) -> list[MovieRecord]:
        """Fetch the full catalog in the order the service returns it."""

        response = await self._request("GET", "/movies")
        try:
            return _MOVIE_LIST.validate_python(response.json())
        except (ValueError, pydantic.ValidationError) as exc:
            logger.warning("Malformed catalog payload: %s", exc)
            raise NetworkFailure(f"GET /movies returned a malformed body: {exc}") from exc

    async def create_movie(self, fields: MovieFields) -> None:
        # The response body is not trusted for the assigned id; callers re-list.
        await self._request("POST", "/movies", payload=fields.model_dump())

    async def update_movie(self, movie_id: int, fields: MovieFields) -> None:
        await self._request("PUT", f"/movies/{movie_id}", payload=fields.model_dump())

    async def delete_movie(self, movie_id: int) -> None:
        await self._request("DELETE", f"/movies/{movie_id}")
