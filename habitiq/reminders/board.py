"""
Reminder board - the live reminder list shown to the user.

Re-derived from the note collection on every note change. Completing and
dismissing only flip flags; they never re-run extraction.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from habitiq.models import Note, Reminder
from habitiq.reminders.extractor import extract_reminders

logger = logging.getLogger(__name__)


class ReminderBoard:
    """In-memory reminder list with flag carry-over across refreshes."""

    __slots__ = ("_reminders",)

    def __init__(self):
        self._reminders: list[Reminder] = []

    def refresh(self, notes: Iterable[Note]) -> list[Reminder]:
        """Recompute reminders from notes, keeping user flags."""
        self._reminders = extract_reminders(notes, previous=self._reminders)
        return list(self._reminders)

    def get(self, reminder_id: str) -> Optional[Reminder]:
        """Get reminder by ID."""
        return next((r for r in self._reminders if r.id == reminder_id), None)

    def _replace(self, reminder_id: str, **changes) -> Optional[Reminder]:
        for i, reminder in enumerate(self._reminders):
            if reminder.id == reminder_id:
                updated = reminder.model_copy(update=changes)
                self._reminders[i] = updated
                return updated
        return None

    def complete(self, reminder_id: str) -> Optional[Reminder]:
        """Toggle completion."""
        reminder = self.get(reminder_id)
        if reminder is None:
            return None
        logger.info(f"Reminder {reminder_id} completed={not reminder.is_completed}")
        return self._replace(reminder_id, is_completed=not reminder.is_completed)

    def dismiss(self, reminder_id: str) -> Optional[Reminder]:
        """Hide a reminder; it stays hidden while its note keeps producing it."""
        return self._replace(reminder_id, is_dismissed=True)

    def active(self, show_completed: bool = False) -> list[Reminder]:
        """Reminders still on the board."""
        return [
            r for r in self._reminders
            if not r.is_dismissed and (show_completed or not r.is_completed)
        ]

    def clear(self) -> None:
        self._reminders = []

    def completed_count(self) -> int:
        return sum(1 for r in self._reminders if r.is_completed and not r.is_dismissed)

    def __len__(self) -> int:
        return len(self._reminders)

    def __iter__(self) -> Iterator[Reminder]:
        return iter(list(self._reminders))


def format_reminders(reminders: list[Reminder]) -> str:
    """Format reminders as a plain-text numbered list."""
    if not reminders:
        return ""

    lines = ["Reminders from your notes:"]
    lines.extend(
        f"{i}. [{r.priority.value}] {r.text} ({r.category})"
        + (f" - {r.suggested_time}" if r.suggested_time else "")
        + (" [done]" if r.is_completed else "")
        for i, r in enumerate(reminders, 1)
    )
    return "\n".join(lines)
