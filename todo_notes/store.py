"""In-memory note store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import datetime
from enum import Enum
from typing import Any

import pydantic

from .config import Settings, settings as default_settings
from .errors import ConfirmationRequiredError, NotFoundError, ValidationError
from .models import Note, NoteStats, NoteStatus, NoteUpdate, ensure_utc, utcnow

logger = logging.getLogger("todo_notes.store")


class SortCriteria(str, Enum):
    """Keys accepted by :meth:`NoteStore.sort`."""

    STATUS = "status"
    CREATED_AT = "created_at"

    @classmethod
    def _missing_(cls, value: object) -> SortCriteria | None:
        if value == "createdAt":
            return cls.CREATED_AT
        return None


_SORT_KEYS: dict[SortCriteria, Callable[[Note], Any]] = {
    SortCriteria.STATUS: lambda note: NoteStatus(note.status).value,
    SortCriteria.CREATED_AT: lambda note: note.created_at,
}


class NoteStore:
    """Ordered, in-memory collection of notes.

    Notes keep their insertion order. Ids are not required to be unique
    unless ``unique_ids`` is enabled: lookups and edits act on the first
    match while :meth:`delete` removes every match.

    The store does no locking; share it across threads only behind a lock
    owned by the caller.
    """

    def __init__(
        self,
        config: Settings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config or default_settings
        self._clock = clock or utcnow
        self._notes: list[Note] = []

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find(self, note_id: str) -> Note | None:
        return next((n for n in self._notes if n.id == note_id), None)

    def _require(self, note_id: str) -> Note:
        note = self._find(note_id)
        if note is None:
            logger.warning("Note %s not found", note_id)
            raise NotFoundError(note_id)
        return note

    def _touch(self, note: Note) -> None:
        """Refresh ``updated_at`` without ever moving it backwards."""
        now = ensure_utc(self._clock())
        note.updated_at = max(now, note.updated_at, note.created_at)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, note: Note) -> None:
        """Append a note after checking its title and content are not blank."""
        for field in ("title", "content"):
            if not getattr(note, field).strip():
                logger.warning("Rejected note %s — empty %s", note.id, field)
                raise ValidationError("Note title and content cannot be empty.", field)
        if self._config.unique_ids and self._find(note.id) is not None:
            logger.warning("Rejected note %s — duplicate id", note.id)
            raise ValidationError(f"Note '{note.id}' already exists.", "id")
        self._notes.append(note)
        logger.info("Added note %s — '%s'", note.id, note.title)

    def delete(self, note_id: str) -> int:
        """Remove every note with ``note_id``; return how many were removed."""
        before = len(self._notes)
        self._notes = [n for n in self._notes if n.id != note_id]
        removed = before - len(self._notes)
        if removed:
            logger.info("Deleted %d note(s) with id %s", removed, note_id)
        return removed

    def edit(
        self,
        note_id: str,
        changes: NoteUpdate | Mapping[str, Any],
        confirmed: bool = False,
    ) -> None:
        """Apply a partial update to the first note with ``note_id``.

        Raises:
            NotFoundError: No note has this id.
            ConfirmationRequiredError: The note is confirmable and
                ``confirmed`` is false.
            ValidationError: ``changes`` holds keys outside the editable
                fields or values of the wrong type. Raised from the
                underlying ``pydantic.ValidationError``.
        """
        note = self._require(note_id)
        if note.requires_confirmation and not confirmed:
            logger.warning("Edit of note %s blocked — confirmation required", note_id)
            raise ConfirmationRequiredError(note_id)

        if not isinstance(changes, NoteUpdate):
            try:
                changes = NoteUpdate.model_validate(dict(changes))
            except pydantic.ValidationError as exc:
                error = exc.errors()[0]
                field = ".".join(str(part) for part in error["loc"])
                logger.warning(
                    "Edit of note %s rejected — %s: %s", note_id, field, error["msg"]
                )
                raise ValidationError(
                    f"Cannot edit '{field}': {error['msg']}", field
                ) from exc

        fields = changes.applied_fields()
        for name, value in fields.items():
            setattr(note, name, value)
        self._touch(note)
        logger.info("Edited note %s — fields=%s", note_id, sorted(fields))

    def mark_as_completed(self, note_id: str) -> None:
        """Complete the first note with ``note_id``, confirmable or not."""
        note = self._require(note_id)
        note.status = NoteStatus.COMPLETED
        self._touch(note)
        logger.info("Completed note %s", note_id)

    def clear(self) -> int:
        """Drop every note and return how many there were."""
        removed = len(self._notes)
        self._notes = []
        logger.info("Cleared %d note(s)", removed)
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, note_id: str) -> Note | None:
        """Return the first note with ``note_id``, or None."""
        return self._find(note_id)

    def get_all(self) -> list[Note]:
        """Return every stored note in insertion order."""
        return list(self._notes)

    def get_stats(self) -> NoteStats:
        """Count all notes and the pending ones."""
        pending = sum(1 for n in self._notes if n.is_pending)
        return NoteStats(total=len(self._notes), pending=pending)

    def search(self, query: str) -> list[Note]:
        """Return notes whose title or content contains the query (case-sensitive)."""
        return [n for n in self._notes if query in n.title or query in n.content]

    def sort(self, criteria: SortCriteria | str) -> list[Note]:
        """Return a sorted copy of the notes; stored order is left alone."""
        key = _SORT_KEYS[SortCriteria(criteria)]
        return sorted(self._notes, key=key)

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def __contains__(self, note_id: object) -> bool:
        return any(n.id == note_id for n in self._notes)
