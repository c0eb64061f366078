"""Notes module - the user's note collection."""
from habitiq.notes.store import (
    NoteStore,
    get_note_store,
    add_text_note,
    add_voice_note,
    update_note,
    delete_note,
)
from habitiq.notes.tagging import extract_tags

__all__ = [
    "NoteStore",
    "get_note_store",
    "add_text_note",
    "add_voice_note",
    "update_note",
    "delete_note",
    "extract_tags",
]
