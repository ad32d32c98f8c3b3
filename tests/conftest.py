"""Shared fixtures for the note store tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from todo_notes.config import Settings
from todo_notes.models import Note
from todo_notes.store import NoteStore

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture()
def t0() -> datetime:
    """Creation time given to notes built by ``make_note``."""
    return T0


@pytest.fixture()
def make_note() -> Callable[..., Note]:
    """Return a factory for valid default notes; any field can be overridden."""

    def _make(note_id: str = "1", **overrides) -> Note:
        fields = {
            "id": note_id,
            "title": f"Title {note_id}",
            "content": f"Content {note_id}",
            "created_at": T0,
        }
        fields.update(overrides)
        return Note(**fields)

    return _make


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> NoteStore:
    """Return an empty store with default settings and a fake clock."""
    return NoteStore(config=Settings(), clock=clock)
