"""Insight endpoints."""
import logging

from fastapi import APIRouter

from habitiq.insights import analyze_notes, overview
from habitiq.models import Insights
from habitiq.notes import get_note_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("")
async def get_insights():
    """Habit patterns, suggestions and activity scores."""
    store = get_note_store()
    insights = analyze_notes(store) or Insights()
    return {
        "noteCount": len(store),
        **insights.model_dump(mode="json", by_alias=True),
    }


@router.get("/overview")
async def get_overview():
    """Totals shown on the dashboard."""
    return overview(get_note_store()).model_dump(mode="json", by_alias=True)
