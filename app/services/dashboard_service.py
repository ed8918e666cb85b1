"""Dashboard aggregation service."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.config import settings
from app.services.prep_log_service import PrepLogService
from app.services.profile_service import ProfileService
from app.services.recruiter_service import RecruiterService
from app.services.streaks import compute_streak, longest_streak
from app.utils.time import date_window, local_today
from supabase import Client


class DashboardService:
    """Combine profile, prep and recruiter data into dashboard widgets."""

    def __init__(self, client: Client) -> None:
        self.profiles = ProfileService(client)
        self.prep_logs = PrepLogService(client)
        self.recruiters = RecruiterService(client)

    def summary(self, user_id: str, today: date | None = None) -> dict[str, Any]:
        """Return the dashboard payload for an onboarded user."""
        today = today or local_today()
        profile = self.profiles.require_onboarded(user_id)

        days = self.prep_logs.log_dates(user_id)
        start, end = date_window(today, settings.upcoming_follow_up_days)

        return {
            "profile": profile,
            "current_streak": compute_streak(days, today),
            "longest_streak": longest_streak(days),
            "logged_today": today in days,
            **self.prep_logs.totals(user_id),
            "status_counts": self.recruiters.status_counts(user_id),
            "upcoming_follow_ups": self.recruiters.upcoming_follow_ups(user_id, start, end),
        }
