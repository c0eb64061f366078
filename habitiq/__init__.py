"""HabitIQ - habit notes, smart reminders and insights."""
