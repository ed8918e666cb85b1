"""Profile and onboarding schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ExperienceLevel = Literal["entry", "mid", "senior", "lead", "executive"]


class OnboardingRequest(BaseModel):
    """Request body submitted from the onboarding form."""

    username: str = Field(..., min_length=3, max_length=40)
    experience_level: ExperienceLevel
    linkedin_url: str | None = Field(default=None, max_length=300)


class ProfileResponse(BaseModel):
    """Public profile representation."""

    id: str
    username: str | None = None
    linkedin_url: str | None = None
    experience_level: ExperienceLevel | None = None
    onboarding_completed: bool = False
    updated_at: datetime | None = None
