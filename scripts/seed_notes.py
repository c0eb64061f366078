#!/usr/bin/env python3
"""Seed sample notes and print the reminders derived from them."""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from habitiq.config import get_settings
from habitiq.notes import NoteStore, get_note_store
from habitiq.notes.persistence import get_notes_path
from habitiq.reminders import format_reminders
from habitiq.state import reminder_board

# (kind, text) - voice entries are stored as transcripts
SAMPLE_NOTES = [
    ("text", "I need to exercise tomorrow morning before work."),
    ("voice", "Remind me to drink more water during the afternoon."),
    ("text", "Urgent: call the doctor asap about the test results."),
    ("text", "Maybe I should read a book before bed tonight."),
    ("voice", "Felt calm after I meditated for ten minutes. Breathe daily."),
    ("text", "Don't forget to cook a healthy meal this week."),
    ("text", "Went for a walk today, should stretch more."),
]


def seed(reset: bool = False) -> NoteStore:
    """Add the sample notes to the configured store."""
    path = get_notes_path()
    if reset and path.exists():
        path.unlink()
        print(f"Removed {path}")

    store = get_note_store()
    for kind, text in SAMPLE_NOTES:
        note = store.add_voice(text) if kind == "voice" else store.add_text(text)
        print(f"  + [{note.type.value}] {text} tags={note.tags}")

    store.save()
    reminder_board.refresh(store)
    return store


def main():
    parser = argparse.ArgumentParser(description="Seed sample HabitIQ notes")
    parser.add_argument("--reset", action="store_true", help="Delete existing notes first")
    args = parser.parse_args()

    settings = get_settings()
    print(f"Seeding notes into {settings.data_dir}/{settings.storage_key}.json")

    store = seed(reset=args.reset)

    print(f"\n{len(store)} notes stored")
    print(format_reminders(reminder_board.active()) or "No reminders detected")


if __name__ == "__main__":
    main()
