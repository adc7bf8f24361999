"""Draft helpers: build, edit and validate the text form of a movie record."""

from __future__ import annotations

import re
from dataclasses import replace

from movie_catalog.services.models import DraftRecord, MovieFields, MovieRecord


DRAFT_FIELDS = ("title", "director", "year", "rating")
REQUIRED_FIELDS = ("title", "director", "year")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ValidationError(Exception):
    """Raised when a draft is missing one of the required fields."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        super().__init__(f"missing required fields: {', '.join(missing)}")
        self.missing = missing


def parse_int(raw: str) -> int | None:
    """Read the leading integer of ``raw`` ("2021abc" -> 2021), None if there is none."""

    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def from_record(record: MovieRecord | None) -> DraftRecord:
    """Empty draft for creation, or a text copy of ``record`` for editing."""

    if record is None:
        return DraftRecord()
    return DraftRecord(
        title=record.title,
        director=record.director,
        year="" if record.year is None else str(record.year),
        rating=str(record.rating),
    )


def update(draft: DraftRecord, field: str, value: str) -> DraftRecord:
    # No validation here; the user may type transiently invalid text.
    if field not in DRAFT_FIELDS:
        raise ValueError(f"unknown draft field: {field!r}")
    return replace(draft, **{field: value})


def validate_for_submission(draft: DraftRecord) -> MovieFields:
    """Coerce a draft into request fields.

    Title, director and year must be non-blank. An unparsable year is sent as
    null and left for the service to judge; an empty or unparsable rating
    becomes 0.
    """

    missing = tuple(name for name in REQUIRED_FIELDS if not getattr(draft, name).strip())
    if missing:
        raise ValidationError(missing)

    rating = parse_int(draft.rating)
    return MovieFields(
        title=draft.title.strip(),
        director=draft.director.strip(),
        year=parse_int(draft.year),
        rating=0 if rating is None else rating,
    )
