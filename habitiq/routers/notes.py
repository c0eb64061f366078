"""Note endpoints."""
import logging

from fastapi import APIRouter, HTTPException

from habitiq.models import NoteCreateRequest, NoteType, NoteUpdateRequest, VoiceNoteCreateRequest
from habitiq.notes import (
    add_text_note,
    add_voice_note,
    delete_note,
    get_note_store,
    update_note,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("")
async def list_notes(q: str = "", type: str | None = None):
    """List notes, optionally filtered by search term and type."""
    note_type = None
    if type and type != "all":
        try:
            note_type = NoteType(type)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid note type: {type}")

    notes = get_note_store().search(q, note_type)
    return {
        "count": len(notes),
        "notes": [n.model_dump(mode="json", by_alias=True) for n in notes],
    }


@router.post("", status_code=201)
async def create_note(request: NoteCreateRequest):
    """Capture a typed note."""
    try:
        note = add_text_note(request.content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return note.model_dump(mode="json", by_alias=True)


@router.post("/voice", status_code=201)
async def create_voice_note(request: VoiceNoteCreateRequest):
    """Capture a note from a speech transcript."""
    try:
        note = add_voice_note(request.transcript)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return note.model_dump(mode="json", by_alias=True)


@router.get("/{note_id}")
async def get_note(note_id: str):
    note = get_note_store().get(note_id)
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return note.model_dump(mode="json", by_alias=True)


@router.patch("/{note_id}")
async def edit_note(note_id: str, request: NoteUpdateRequest):
    """Edit a note's text or tags."""
    note = update_note(note_id, content=request.content, tags=request.tags)
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return note.model_dump(mode="json", by_alias=True)


@router.delete("/{note_id}")
async def remove_note(note_id: str):
    if not delete_note(note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return {"status": "deleted", "id": note_id}
