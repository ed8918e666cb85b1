"""Background job modules for periodic PrepYatra tasks."""

from app.jobs.follow_up_reminders import follow_up_reminders

__all__ = [
    "follow_up_reminders",
]
