"""Shared data types for the catalog services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict


class MovieRecord(BaseModel):
    """A catalog entry as confirmed by the remote service."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    director: str
    # null when the service accepted a record whose year text was unparsable
    year: int | None = None
    rating: int = 0


class MovieFields(BaseModel):
    """Request body for create/update calls."""

    title: str
    director: str
    year: int | None
    rating: int = 0


@dataclass(frozen=True, slots=True)
class DraftRecord:
    """Text-typed, freely editable form of a record."""

    title: str = ""
    director: str = ""
    year: str = ""
    rating: str = ""


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NoticeContext(str, Enum):
    LOAD = "load"
    SAVE = "save"
    DELETE = "delete"
    VALIDATION = "validation"


@dataclass(frozen=True, slots=True)
class Notice:
    """User-visible status or error message."""

    level: NoticeLevel
    context: NoticeContext
    title: str
    message: str


Notifier = Callable[[Notice], None]

_notice_logger = logging.getLogger("movie_catalog.notices")


def log_notice(notice: Notice) -> None:
    """Fallback notifier used when no presentation layer is attached."""

    level = logging.INFO if notice.level is NoticeLevel.SUCCESS else logging.WARNING
    _notice_logger.log(level, "[%s] %s: %s", notice.context.value, notice.title, notice.message)
