"""
In-memory state for the running app.

Note: reminders are derived data and are never written to disk; user flags
(completed/dismissed) live here for the lifetime of the process.
"""
from habitiq.reminders.board import ReminderBoard

# Current reminders, refreshed whenever the note collection changes
reminder_board = ReminderBoard()
