"""
Note storage.

The note collection is kept in memory, newest first, and written back as a
single JSON array after every change. Every change also refreshes the
reminder board so reminders always reflect the current notes.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from habitiq.models import Note, NoteType
from habitiq.notes.persistence import get_notes_path, read_notes_blob, write_notes_blob
from habitiq.notes.tagging import extract_tags
from habitiq.state import reminder_board

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class NoteStore:
    """
    In-memory store with JSON persistence for notes.

    Missing items are reported with ``None``/``False``; blank input raises
    ``ValueError``.
    """

    __slots__ = ("path", "_notes", "_dirty")

    def __init__(self, path: Optional[Path] = None):
        self.path = path or get_notes_path()
        self._notes: list[Note] = []
        self._dirty = False

    def load(self) -> None:
        """Load notes from disk. Unreadable data is logged and ignored."""
        try:
            data = read_notes_blob(self.path)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load notes from {self.path}: {e}")
            data = []

        if not isinstance(data, list):
            logger.warning(f"Ignoring notes blob at {self.path}: expected a list")
            data = []

        notes = []
        for item in data:
            try:
                notes.append(Note.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed note: {e.error_count()} errors")
        self._notes = notes
        self._dirty = False

    def save(self) -> None:
        """Save notes to disk if modified."""
        if not self._dirty:
            return
        write_notes_blob(self.path, [n.model_dump(mode="json", by_alias=True, exclude_none=True) for n in self._notes])
        self._dirty = False

    def _add(self, note: Note) -> Note:
        self._notes.insert(0, note)
        self._dirty = True
        logger.info(f"Added {note.type.value} note {note.id} tags={note.tags}")
        return note

    def add_text(self, content: str) -> Note:
        """Create a typed note."""
        if not content or not content.strip():
            raise ValueError("Note content is empty")
        return self._add(Note(
            id=str(uuid.uuid4()),
            content=content,
            timestamp=_now_iso(),
            type=NoteType.TEXT,
            tags=extract_tags(content),
        ))

    def add_voice(self, transcript: str) -> Note:
        """Create a note from a speech transcript."""
        if not transcript or not transcript.strip():
            raise ValueError("Transcript is empty")
        return self._add(Note(
            id=str(uuid.uuid4()),
            content="",
            transcript=transcript,
            timestamp=_now_iso(),
            type=NoteType.VOICE,
            tags=extract_tags(transcript),
        ))

    def get(self, note_id: str) -> Optional[Note]:
        """Get note by ID."""
        return next((n for n in self._notes if n.id == note_id), None)

    def update(
        self,
        note_id: str,
        content: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Optional[Note]:
        """Edit a note's text and/or tags. Voice notes keep edits in the transcript."""
        for i, note in enumerate(self._notes):
            if note.id != note_id:
                continue

            changes: dict = {}
            if content is not None:
                field = "transcript" if note.type == NoteType.VOICE else "content"
                changes[field] = content
            if tags is not None:
                changes["tags"] = list(dict.fromkeys(tags))

            updated = note.model_copy(update=changes)
            self._notes[i] = updated
            self._dirty = True
            return updated
        return None

    def delete(self, note_id: str) -> bool:
        """Delete a note. Returns True if it existed."""
        before = len(self._notes)
        self._notes = [n for n in self._notes if n.id != note_id]
        if len(self._notes) == before:
            return False
        self._dirty = True
        return True

    def search(self, term: str = "", note_type: Optional[NoteType] = None) -> list[Note]:
        """Case-insensitive substring search over content and transcript."""
        needle = term.lower()
        return [
            n for n in self._notes
            if (needle in n.content.lower() or needle in (n.transcript or "").lower())
            and (note_type is None or n.type == note_type)
        ]

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))


# --- Store Registry ---

_store: Optional[NoteStore] = None


def get_note_store() -> NoteStore:
    """Get or create the process-wide note store."""
    global _store
    if _store is None:
        store = NoteStore()
        store.load()
        reminder_board.refresh(store)
        _store = store
    return _store


def reset_note_store() -> None:
    """Forget the cached store and reminders (e.g. after a settings change)."""
    global _store
    _store = None
    reminder_board.clear()


# --- Convenience Functions ---

def _commit(store: NoteStore) -> None:
    store.save()
    reminder_board.refresh(store)


def add_text_note(content: str) -> Note:
    """Add a typed note, persist, and refresh reminders."""
    store = get_note_store()
    note = store.add_text(content)
    _commit(store)
    return note


def add_voice_note(transcript: str) -> Note:
    """Add a voice note, persist, and refresh reminders."""
    store = get_note_store()
    note = store.add_voice(transcript)
    _commit(store)
    return note


def update_note(note_id: str, content: Optional[str] = None, tags: Optional[list[str]] = None) -> Optional[Note]:
    """Edit a note, persist, and refresh reminders."""
    store = get_note_store()
    note = store.update(note_id, content=content, tags=tags)
    if note:
        _commit(store)
    return note


def delete_note(note_id: str) -> bool:
    """Delete a note, persist, and refresh reminders."""
    store = get_note_store()
    removed = store.delete(note_id)
    if removed:
        _commit(store)
    return removed
