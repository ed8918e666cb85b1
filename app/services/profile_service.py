"""Profile lookup and onboarding."""

from __future__ import annotations

import logging
from typing import Any

from app.services.common import SupabaseService
from app.utils.errors import OnboardingRequiredError
from app.utils.time import now_utc
from supabase import Client

logger = logging.getLogger(__name__)


class ProfileService:
    """Read and complete user profiles."""

    def __init__(self, client: Client) -> None:
        self.db = SupabaseService(client)

    def get_profile(self, user_id: str) -> dict[str, Any]:
        """Return the user's profile."""
        return self.db.get_profile(user_id)

    def require_onboarded(self, user_id: str) -> dict[str, Any]:
        """Return the profile, or raise when onboarding is unfinished."""
        profile = self.get_profile(user_id)
        if not profile.get("onboarding_completed"):
            raise OnboardingRequiredError()
        return profile

    def complete_onboarding(
        self,
        user_id: str,
        username: str,
        experience_level: str,
        linkedin_url: str | None = None,
    ) -> dict[str, Any]:
        """Store onboarding answers and mark the profile as onboarded."""
        current = self.get_profile(user_id)
        payload = {
            "username": username.strip(),
            "linkedin_url": (linkedin_url or "").strip() or None,
            "experience_level": experience_level,
            "onboarding_completed": True,
            "updated_at": now_utc().isoformat(),
        }
        rows = self.db.update("profiles", {"id": user_id}, payload)
        self.db.forget_profile(user_id)
        logger.info("Onboarding completed for %s", user_id[:8])
        return rows[0] if rows else {**current, **payload}
