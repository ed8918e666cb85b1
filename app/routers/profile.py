"""Profile and onboarding endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from app.dependencies import get_current_user, get_current_user_id, get_db_client
from app.schemas.profile import OnboardingRequest, ProfileResponse
from app.services.profile_service import ProfileService
from supabase import Client

router = APIRouter()


@router.get("", response_model=ProfileResponse)
def get_profile(
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Return the current user's profile."""
    return ProfileService(client).get_profile(get_current_user_id(user))


@router.put("/onboarding", response_model=ProfileResponse)
def complete_onboarding(
    payload: OnboardingRequest,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Save onboarding answers."""
    service = ProfileService(client)
    return service.complete_onboarding(
        user_id=get_current_user_id(user),
        username=payload.username,
        experience_level=payload.experience_level,
        linkedin_url=payload.linkedin_url,
    )
