"""Editing session: idle, creating a record, or editing an existing one."""

from __future__ import annotations

import logging
from enum import Enum

from movie_catalog.services import draft_form
from movie_catalog.services.models import (
    DraftRecord,
    MovieRecord,
    Notice,
    NoticeContext,
    NoticeLevel,
    Notifier,
    log_notice,
)
from movie_catalog.services.store import CatalogStore


logger = logging.getLogger(__name__)


class SessionMode(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


class SessionStateError(RuntimeError):
    """Raised for an intent that the current session state does not accept."""


class EditingSession:
    """Mediates between the draft and the store.

    ``target_id`` is None both when idle and when creating; ``mode`` tells
    them apart.
    """

    def __init__(self, store: CatalogStore, *, notify: Notifier | None = None) -> None:
        self.store = store
        self._notify = notify or log_notice
        self.mode = SessionMode.IDLE
        self.target_id: int | None = None
        self.draft = DraftRecord()
        # Bumped whenever a session opens or closes
        self._generation = 0

    @property
    def is_editing(self) -> bool:
        return self.mode is SessionMode.EDITING

    @property
    def is_creating(self) -> bool:
        return self.is_editing and self.target_id is None

    def open_create(self) -> None:
        self._require(SessionMode.IDLE, "open_create")
        self.mode = SessionMode.EDITING
        self.target_id = None
        self._generation += 1
        self.draft = draft_form.from_record(None)

    def open_edit(self, record: MovieRecord) -> None:
        self._require(SessionMode.IDLE, "open_edit")
        self.mode = SessionMode.EDITING
        self.target_id = record.id
        self._generation += 1
        self.draft = draft_form.from_record(record)

    def cancel(self) -> None:
        if self.is_editing:
            logger.debug("Editing session cancelled (target=%s)", self.target_id)
        self._reset()

    def change_field(self, field: str, value: str) -> None:
        self._require(SessionMode.EDITING, "change_field")
        self.draft = draft_form.update(self.draft, field, value)

    async def submit(self) -> bool:
        """Validate and save the draft. True once the store acknowledged it."""

        self._require(SessionMode.EDITING, "submit")
        try:
            fields = draft_form.validate_for_submission(self.draft)
        except draft_form.ValidationError as exc:
            logger.info("Draft rejected: %s", exc)
            self._notify(
                Notice(
                    level=NoticeLevel.WARNING,
                    context=NoticeContext.VALIDATION,
                    title="Attention",
                    message="Fill in title, director and year",
                )
            )
            return False

        generation = self._generation
        saved = await self.store.submit(self.target_id, fields)
        # The user may have cancelled, or opened another form, while the request was pending.
        if saved and self._generation == generation:
            self._reset()
        return saved

    def _require(self, mode: SessionMode, intent: str) -> None:
        if self.mode is not mode:
            raise SessionStateError(f"{intent} is not allowed while {self.mode.value}")

    def _reset(self) -> None:
        self.mode = SessionMode.IDLE
        self.target_id = None
        self.draft = DraftRecord()
        self._generation += 1
