"""APScheduler setup and job registration."""

from __future__ import annotations

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from app.config import settings
from app.jobs.follow_up_reminders import follow_up_reminders

scheduler = AsyncIOScheduler(timezone=settings.timezone)


def register_jobs() -> None:
    """Register all periodic jobs if not already present."""
    if scheduler.get_job("follow_up_reminders") is None:
        scheduler.add_job(
            follow_up_reminders,
            CronTrigger(hour=settings.reminder_hour, minute=0, timezone=settings.timezone),
            id="follow_up_reminders",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
