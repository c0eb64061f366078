"""API routers."""
from habitiq.routers.insights import router as insights_router
from habitiq.routers.notes import router as notes_router
from habitiq.routers.reminders import router as reminders_router

__all__ = ["insights_router", "notes_router", "reminders_router"]
