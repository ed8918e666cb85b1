"""Authentication endpoints.

Sign-in happens against Supabase directly from the frontend; the API only
needs to confirm which user a bearer token belongs to.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from app.dependencies import get_current_user

router = APIRouter()


@router.get("/session")
def auth_session(user: Any = Depends(get_current_user)) -> dict:
    """Return the currently authenticated user."""
    return {"user": user}


@router.post("/signout")
def auth_signout() -> dict:
    """Return success for stateless sign-out handling."""
    return {"success": True}
