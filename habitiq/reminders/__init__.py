"""Reminders module - reminders derived from note text."""
from habitiq.reminders.extractor import extract_reminders
from habitiq.reminders.board import ReminderBoard, format_reminders
from habitiq.reminders.similarity import levenshtein_distance, similarity

__all__ = [
    "extract_reminders",
    "ReminderBoard",
    "format_reminders",
    "levenshtein_distance",
    "similarity",
]
