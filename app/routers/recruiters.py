"""Recruiter contact endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_current_user, get_current_user_id, get_db_client
from app.schemas.recruiter import (
    RecruiterCreate,
    RecruiterListResponse,
    RecruiterResponse,
    RecruiterStatus,
    RecruiterUpdate,
)
from app.services.recruiter_service import RecruiterService
from supabase import Client

router = APIRouter()


@router.get("", response_model=RecruiterListResponse)
def list_recruiters(
    status: RecruiterStatus | None = Query(default=None),
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """List the current user's recruiter contacts."""
    service = RecruiterService(client)
    recruiters = service.list_contacts(get_current_user_id(user), status=status)
    return {"recruiters": recruiters}


@router.post("", response_model=RecruiterResponse, status_code=201)
def create_recruiter(
    payload: RecruiterCreate,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Add a recruiter contact."""
    service = RecruiterService(client)
    return service.create_contact(
        get_current_user_id(user),
        payload.model_dump(mode="json", exclude_none=True),
    )


@router.get("/{recruiter_id}", response_model=RecruiterResponse)
def get_recruiter(
    recruiter_id: str,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Return one recruiter contact."""
    return RecruiterService(client).get_contact(get_current_user_id(user), recruiter_id)


@router.patch("/{recruiter_id}", response_model=RecruiterResponse)
def update_recruiter(
    recruiter_id: str,
    payload: RecruiterUpdate,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Edit a recruiter contact; only fields sent in the body change."""
    service = RecruiterService(client)
    return service.update_contact(
        get_current_user_id(user),
        recruiter_id,
        payload.model_dump(mode="json", exclude_unset=True),
    )


@router.delete("/{recruiter_id}")
def delete_recruiter(
    recruiter_id: str,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Delete a recruiter contact."""
    RecruiterService(client).delete_contact(get_current_user_id(user), recruiter_id)
    return {"deleted": True}
