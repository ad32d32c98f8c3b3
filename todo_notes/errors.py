"""Exceptions raised by the note store."""


class NoteStoreError(Exception):
    """Base class for note store failures."""


class ValidationError(NoteStoreError, ValueError):
    """A note was rejected on add."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(NoteStoreError, LookupError):
    """No note with the requested id exists."""

    def __init__(self, note_id: str) -> None:
        super().__init__(f"Note '{note_id}' not found.")
        self.note_id = note_id


class ConfirmationRequiredError(NoteStoreError):
    """The note requires confirmation to edit and none was given."""

    def __init__(self, note_id: str) -> None:
        super().__init__(f"Note '{note_id}' requires confirmation to edit.")
        self.note_id = note_id
