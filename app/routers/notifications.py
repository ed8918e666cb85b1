"""Endpoints the web push worker and the notification bell read."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_current_user, get_current_user_id, get_db_client
from app.schemas.notification import (
    NotificationListResponse,
    NotificationResponse,
    NotificationType,
    ReadAllResponse,
)
from app.services.notification_service import NotificationService
from supabase import Client

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    unread_only: bool = Query(default=False),
    notification_type: NotificationType | None = Query(default=None, alias="type"),
    limit: int = Query(default=50, ge=1, le=200),
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    """Return the current user's reminders, newest first."""
    user_id = get_current_user_id(user)
    service = NotificationService(client)
    return {
        "notifications": service.list_notifications(
            user_id,
            unread_only=unread_only,
            notification_type=notification_type,
            limit=limit,
        ),
        "unread": service.unread_count(user_id),
    }


@router.put("/read-all", response_model=ReadAllResponse)
def mark_all_read(
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    count = NotificationService(client).mark_all_read(get_current_user_id(user))
    return {"count": count}


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: str,
    user: Any = Depends(get_current_user),
    client: Client = Depends(get_db_client),
) -> dict:
    return NotificationService(client).mark_read(get_current_user_id(user), notification_id)
