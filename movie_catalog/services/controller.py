"""Presentation boundary: the one object a UI forwards intents to and renders from."""

from __future__ import annotations

import logging

from movie_catalog.core.logging_config import configure_logging
from movie_catalog.services.catalog_client import RemoteCatalogClient
from movie_catalog.services.deletion import DeleteConfirmation, DeletePrompt
from movie_catalog.services.models import DraftRecord, MovieRecord, Notice, log_notice
from movie_catalog.services.session import EditingSession, SessionMode
from movie_catalog.services.store import CatalogStore


logger = logging.getLogger(__name__)

MAX_STARS = 5


def render_stars(rating: int) -> str:
    return "⭐" * max(0, min(rating, MAX_STARS))


class CatalogController:
    """Wires store, editing session and delete confirmation behind UI intents."""

    def __init__(self, client: RemoteCatalogClient) -> None:
        self._notices: list[Notice] = []
        self.store = CatalogStore(client, notify=self._push_notice)
        self.session = EditingSession(self.store, notify=self._push_notice)
        self.deletion = DeleteConfirmation(self.store)

    @classmethod
    def from_settings(cls) -> CatalogController:
        """Configure logging and build the controller against the configured service."""

        configure_logging()
        return cls(RemoteCatalogClient())

    # outputs

    @property
    def movies(self) -> list[MovieRecord]:
        return self.store.movies

    @property
    def draft(self) -> DraftRecord:
        return self.session.draft

    @property
    def mode(self) -> SessionMode:
        return self.session.mode

    @property
    def target_id(self) -> int | None:
        return self.session.target_id

    @property
    def form_title(self) -> str | None:
        if not self.session.is_editing:
            return None
        return "New movie" if self.session.is_creating else "Edit movie"

    @property
    def delete_prompt(self) -> DeletePrompt | None:
        return self.deletion.pending

    @property
    def busy(self) -> bool:
        return self.store.busy

    def drain_notices(self) -> list[Notice]:
        notices, self._notices = self._notices, []
        return notices

    # intents

    async def start(self) -> bool:
        logger.info("Loading catalog from %s", self.store.client.base_url)
        return await self.store.refresh()

    def open_create(self) -> None:
        self.session.open_create()

    def open_edit(self, record: MovieRecord) -> None:
        self.session.open_edit(record)

    def change_field(self, field: str, text: str) -> None:
        self.session.change_field(field, text)

    def cancel(self) -> None:
        self.session.cancel()

    async def submit(self) -> bool:
        return await self.session.submit()

    def request_delete(self, record: MovieRecord) -> DeletePrompt:
        return self.deletion.request(record)

    async def confirm_delete(self, prompt: DeletePrompt | None = None) -> bool:
        return await self.deletion.confirm(prompt)

    def deny_delete(self) -> None:
        self.deletion.deny()

    def _push_notice(self, notice: Notice) -> None:
        log_notice(notice)
        self._notices.append(notice)
