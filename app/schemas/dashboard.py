"""Dashboard schemas."""

from pydantic import BaseModel

from app.schemas.profile import ProfileResponse
from app.schemas.recruiter import RecruiterResponse


class DashboardResponse(BaseModel):
    """Pre-computed dashboard widgets."""

    profile: ProfileResponse
    current_streak: int = 0
    longest_streak: int = 0
    logged_today: bool = False
    total_logs: int = 0
    total_minutes: int = 0
    status_counts: dict[str, int]
    upcoming_follow_ups: list[RecruiterResponse]
