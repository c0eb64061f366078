"""Insights module - habit statistics computed from notes."""
from habitiq.insights.engine import analyze_notes, overview

__all__ = ["analyze_notes", "overview"]
