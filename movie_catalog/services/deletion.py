"""Two-step delete: a prompt naming the record, then an explicit answer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from movie_catalog.services.models import MovieRecord
from movie_catalog.services.store import CatalogStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletePrompt:
    movie: MovieRecord
    title: str
    message: str
    cancel_label: str = "Cancel"
    confirm_label: str = "Delete"


class DeleteConfirmation:
    """Holds at most one pending prompt; only ``confirm`` reaches the store."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store
        self.pending: DeletePrompt | None = None

    def request(self, record: MovieRecord) -> DeletePrompt:
        prompt = DeletePrompt(
            movie=record,
            title="Confirm deletion",
            message=f'Do you really want to delete "{record.title}"?',
        )
        self.pending = prompt
        return prompt

    async def confirm(self, prompt: DeletePrompt | None = None) -> bool:
        pending = self.pending
        if pending is None:
            logger.debug("Delete confirmed with no pending prompt; ignoring")
            return False
        if prompt is not None and prompt is not pending:
            logger.warning("Stale delete prompt for movie %s; ignoring", prompt.movie.id)
            return False
        if self.store.busy:
            # Prompt stays pending; the store reports why nothing happened.
            return await self.store.remove(pending.movie.id)
        self.pending = None
        return await self.store.remove(pending.movie.id)

    def deny(self) -> None:
        self.pending = None
