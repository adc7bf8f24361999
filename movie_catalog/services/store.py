"""In-memory catalog kept consistent with the remote service."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from movie_catalog.services.catalog_client import NetworkFailure, RemoteCatalogClient
from movie_catalog.services.models import (
    MovieFields,
    MovieRecord,
    Notice,
    NoticeContext,
    NoticeLevel,
    Notifier,
    log_notice,
)


logger = logging.getLogger(__name__)


class CatalogStore:
    """Owns the list of confirmed records.

    Every successful mutation is followed by a full re-list; the store never
    patches its list locally. Only one operation may be in flight at a time,
    re-entrant calls are ignored with a warning notice and return False.
    """

    def __init__(self, client: RemoteCatalogClient, *, notify: Notifier | None = None) -> None:
        self.client = client
        self._notify = notify or log_notice
        self._movies: list[MovieRecord] = []
        self._in_flight: str | None = None
        self.last_error: NetworkFailure | None = None

    @property
    def movies(self) -> list[MovieRecord]:
        return list(self._movies)

    @property
    def busy(self) -> bool:
        return self._in_flight is not None

    @contextmanager
    def _flight(self, operation: str, context: NoticeContext) -> Iterator[bool]:
        if self._in_flight is not None:
            logger.warning("Ignoring %s while %s is in flight", operation, self._in_flight)
            self._emit(
                NoticeLevel.WARNING, context, "Please wait", "Another operation is still running"
            )
            yield False
            return
        self._in_flight = operation
        try:
            yield True
        finally:
            self._in_flight = None

    async def refresh(self) -> bool:
        """Replace the local list with the service's list; keep it on failure."""

        with self._flight("refresh", NoticeContext.LOAD) as acquired:
            if not acquired:
                return False
            return await self._reload()

    async def submit(self, target_id: int | None, fields: MovieFields) -> bool:
        """Update ``target_id`` or create a new record, then re-list."""

        with self._flight("submit", NoticeContext.SAVE) as acquired:
            if not acquired:
                return False
            try:
                if target_id is None:
                    await self.client.create_movie(fields)
                else:
                    await self.client.update_movie(target_id, fields)
            except NetworkFailure as exc:
                self.last_error = exc
                self._emit(NoticeLevel.ERROR, NoticeContext.SAVE, "Error", "Could not save the movie")
                return False
            logger.info("Saved movie %s", "(new)" if target_id is None else target_id)
            await self._reload()
            message = "Movie added!" if target_id is None else "Movie updated!"
            self._emit(NoticeLevel.SUCCESS, NoticeContext.SAVE, "Success", message)
            return True

    async def remove(self, movie_id: int) -> bool:
        """Delete ``movie_id`` remotely, then re-list. Only call after confirmation."""

        with self._flight("remove", NoticeContext.DELETE) as acquired:
            if not acquired:
                return False
            try:
                await self.client.delete_movie(movie_id)
            except NetworkFailure as exc:
                self.last_error = exc
                self._emit(
                    NoticeLevel.ERROR, NoticeContext.DELETE, "Error", "Could not delete the movie"
                )
                return False
            logger.info("Deleted movie %s", movie_id)
            await self._reload()
            self._emit(NoticeLevel.SUCCESS, NoticeContext.DELETE, "Success", "Movie deleted!")
            return True

    async def _reload(self) -> bool:
        try:
            movies = await self.client.list_movies()
        except NetworkFailure as exc:
            self.last_error = exc
            self._emit(NoticeLevel.ERROR, NoticeContext.LOAD, "Error", "Could not load the movies")
            return False
        self._movies = movies
        self.last_error = None
        logger.debug("Catalog refreshed with %d movies", len(movies))
        return True

    def _emit(self, level: NoticeLevel, context: NoticeContext, title: str, message: str) -> None:
        self._notify(Notice(level=level, context=context, title=title, message=message))
