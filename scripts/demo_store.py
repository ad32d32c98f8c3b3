#!/usr/bin/env python3
"""
Note Store Walkthrough

Adds a default note and a confirmable note, then exercises search, stats,
the confirmation gate on edits, completion, sorting and deletion.  Runs
entirely in memory.

Usage:
    python scripts/demo_store.py
"""

import logging
from datetime import UTC, datetime, timedelta

from todo_notes.config import configure_logging, settings
from todo_notes.errors import ConfirmationRequiredError, NotFoundError
from todo_notes.models import Note
from todo_notes.store import NoteStore, SortCriteria

logger = logging.getLogger("todo_notes.demo")

# Outcome -> ANSI style for walkthrough output
_STYLES = {
    "heading": "\033[1;96m",
    "note": "\033[2m",
    "ok": "\033[92m",
    "error": "\033[91m",
}
_RESET = "\033[0m"


def say(kind: str, msg: str) -> None:
    """Print one indented line styled by outcome."""
    indent = "" if kind == "heading" else "  "
    print(f"{indent}{_STYLES[kind]}{msg}{_RESET}")


def heading(title: str) -> None:
    print()
    say("heading", f"## {title}")


def show(notes: list[Note]) -> None:
    """Print one line per note."""
    for n in notes:
        flag = "confirm" if n.requires_confirmation else "default"
        say("note", f"[{n.id}] {n.title!r} — {n.content!r} ({n.status.value}, {flag})")


def main() -> None:
    configure_logging(settings)
    store = NoteStore()
    start = datetime.now(UTC)

    heading("Note Store Walkthrough")

    heading("1. Add notes")
    store.add(
        Note(id="1", title="Buy milk", content="2%", created_at=start)
    )
    store.add(
        Note(
            id="2",
            title="Pay rent",
            content="due 1st",
            requires_confirmation=True,
            created_at=start - timedelta(days=1),
        )
    )
    show(store.get_all())

    heading("2. Stats and search")
    stats = store.get_stats()
    say("ok", f"total={stats.total} pending={stats.pending}")
    show(store.search("Buy"))

    heading("3. Edit a confirmable note")
    try:
        store.edit("2", {"content": "due 5th"})
    except ConfirmationRequiredError as exc:
        say("error", f"Blocked: {exc}")
    store.edit("2", {"content": "due 5th"}, confirmed=True)
    say("ok", f"Confirmed edit applied: {store.get_by_id('2').content!r}")

    heading("4. Complete and sort")
    store.mark_as_completed("1")
    say("note", "By status:")
    show(store.sort(SortCriteria.STATUS))
    say("note", "By creation time:")
    show(store.sort(SortCriteria.CREATED_AT))

    heading("5. Delete")
    store.delete("1")
    store.delete("missing")
    try:
        store.mark_as_completed("1")
    except NotFoundError as exc:
        say("error", f"{exc}")
    stats = store.get_stats()
    say("ok", f"total={stats.total} pending={stats.pending}")

    logger.info("Walkthrough finished with %d note(s)", store.count)


if __name__ == "__main__":
    main()
