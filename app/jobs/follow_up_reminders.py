"""Daily recruiter follow-up reminder job."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from app.config import settings
from app.services.notification_service import NotificationService
from app.services.recruiter_service import RecruiterService
from app.utils.supabase_client import get_service_client
from app.utils.time import local_today
from supabase import Client

logger = logging.getLogger(__name__)


def send_follow_up_reminders(client: Client, today: date) -> int:
    """Notify owners of contacts due today; returns how many were created."""
    notifier = NotificationService(client)
    # Reruns on the same calendar day must not remind twice.
    since = datetime.combine(today, time.min, tzinfo=ZoneInfo(settings.timezone)).isoformat()

    sent = 0
    for contact in RecruiterService(client).due_follow_ups(today):
        if notifier.remind_follow_up(contact, since) is not None:
            sent += 1
    return sent


async def follow_up_reminders() -> None:
    """Scheduled entrypoint for the reminder run."""
    sent = send_follow_up_reminders(get_service_client(), local_today())
    logger.info("follow_up_reminders completed, %s notifications created", sent)
