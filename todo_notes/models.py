"""Pydantic models for the note store."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so every timestamp is comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class NoteStatus(str, Enum):
    """Lifecycle state of a note."""

    PENDING = "pending"
    COMPLETED = "completed"


class Note(BaseModel):
    """A single todo note.

    ``requires_confirmation`` splits notes into confirmable notes, whose
    edits must be explicitly confirmed, and default notes. It is fixed when
    the note is created, as are ``id`` and ``created_at``.
    """

    id: str = Field(..., frozen=True, description="Caller-assigned identifier")
    title: str = Field(..., description="Note title")
    content: str = Field(..., description="Note content")
    status: NoteStatus = Field(default=NoteStatus.PENDING, description="Lifecycle state")
    requires_confirmation: bool = Field(
        default=False,
        frozen=True,
        description="Whether edits need an explicit confirmation",
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        frozen=True,
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last mutation timestamp",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_updated_at(cls, data: Any) -> Any:
        # A fresh note has not been updated since it was created.
        if isinstance(data, dict) and data.get("updated_at") is None:
            data = dict(data)
            data["created_at"] = data.get("created_at") or utcnow()
            data["updated_at"] = data["created_at"]
        return data

    @field_validator("created_at", "updated_at")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def is_pending(self) -> bool:
        return self.status == NoteStatus.PENDING

    @property
    def is_confirmable(self) -> bool:
        return self.requires_confirmation


class NoteUpdate(BaseModel):
    """Partial edit of a note.

    Only the editable fields are accepted. Identity, timestamps and the
    confirmation flag are rejected as unknown keys.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    content: str | None = None
    status: NoteStatus | None = None

    def applied_fields(self) -> dict[str, Any]:
        """Return the explicitly provided, non-null fields."""
        return {
            name: getattr(self, name)
            for name in sorted(self.model_fields_set)
            if getattr(self, name) is not None
        }


class NoteStats(BaseModel):
    """Summary counts over the store."""

    total: int = 0
    pending: int = 0
