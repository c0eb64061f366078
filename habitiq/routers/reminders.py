"""Reminder endpoints."""
import logging

from fastapi import APIRouter, HTTPException

from habitiq.notes import get_note_store
from habitiq.state import reminder_board

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.get("")
async def list_reminders(show_completed: bool = False):
    """List reminders that are still on the board."""
    get_note_store()  # reminders are derived on first load
    reminders = reminder_board.active(show_completed=show_completed)
    return {
        "count": len(reminders),
        "completed": reminder_board.completed_count(),
        "reminders": [r.model_dump(mode="json", by_alias=True) for r in reminders],
    }


@router.post("/{reminder_id}/complete")
async def complete_reminder(reminder_id: str):
    """Toggle a reminder's completed flag."""
    get_note_store()
    reminder = reminder_board.complete(reminder_id)
    if not reminder:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder.model_dump(mode="json", by_alias=True)


@router.post("/{reminder_id}/dismiss")
async def dismiss_reminder(reminder_id: str):
    """Hide a reminder."""
    get_note_store()
    reminder = reminder_board.dismiss(reminder_id)
    if not reminder:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder.model_dump(mode="json", by_alias=True)
