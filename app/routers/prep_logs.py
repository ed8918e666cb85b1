"""Prep log endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_current_user, get_current_user_id, get_db_client
from app.schemas.prep_log import (
    PrepLogCreate,
    PrepLogListResponse,
    PrepLogResponse,
    PrepLogUpdate,
)
from app.services.prep_log_service import PrepLogService
from supabase import Client

router = APIRouter()


@router.get("", response_model=PrepLogListResponse)
def list_prep_logs(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Return the current user's prep logs, newest day first."""
    service = PrepLogService(client)
    logs, total = service.list_logs(get_current_user_id(user), limit=limit, offset=offset)
    return {"logs": logs, "total": total}


@router.post("", response_model=PrepLogResponse, status_code=201)
def create_prep_log(
    payload: PrepLogCreate,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Log a prep session."""
    service = PrepLogService(client)
    return service.create_log(
        user_id=get_current_user_id(user),
        logs=payload.logs,
        hours_in_minutes=payload.hours_in_minutes,
        log_date=payload.log_date,
    )


@router.get("/{log_id}", response_model=PrepLogResponse)
def get_prep_log(
    log_id: str,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Return one prep log."""
    return PrepLogService(client).get_log(get_current_user_id(user), log_id)


@router.patch("/{log_id}", response_model=PrepLogResponse)
def update_prep_log(
    log_id: str,
    payload: PrepLogUpdate,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Edit a prep log."""
    service = PrepLogService(client)
    return service.update_log(
        user_id=get_current_user_id(user),
        log_id=log_id,
        logs=payload.logs,
        hours_in_minutes=payload.hours_in_minutes,
        log_date=payload.log_date,
    )


@router.delete("/{log_id}")
def delete_prep_log(
    log_id: str,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Delete a prep log."""
    PrepLogService(client).delete_log(get_current_user_id(user), log_id)
    return {"deleted": True}
