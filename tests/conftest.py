"""
Pytest configuration and fixtures for HabitIQ tests.
"""

import pytest

from habitiq.config import get_settings
from habitiq.models import Note, NoteType
from habitiq.notes.store import reset_note_store


def make_note(note_id, text="", transcript=None, timestamp="2024-05-10T08:00:00.000Z", tags=None):
    """Build a note; passing a transcript makes it a voice note."""
    return Note(
        id=note_id,
        content=text,
        transcript=transcript,
        timestamp=timestamp,
        type=NoteType.VOICE if transcript is not None else NoteType.TEXT,
        tags=tags or [],
    )


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point settings at a temporary data directory with a fresh store."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    reset_note_store()
    yield tmp_path
    reset_note_store()
    get_settings.cache_clear()


@pytest.fixture
def client(data_dir):
    """API test client backed by the temporary data directory."""
    from fastapi.testclient import TestClient
    from habitiq.main import app

    with TestClient(app) as c:
        yield c
