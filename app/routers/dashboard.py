"""Dashboard endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from app.dependencies import get_current_user, get_current_user_id, get_db_client
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import DashboardService
from supabase import Client

router = APIRouter()


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Return streaks, prep totals and recruiter pipeline for the current user."""
    return DashboardService(client).summary(get_current_user_id(user))
