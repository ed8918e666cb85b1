"""Notification schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

NotificationType = Literal["follow_up"]


class NotificationResponse(BaseModel):
    """A notification picked up by the web push worker.

    For ``follow_up`` notifications ``reference_id`` is the recruiter contact
    the reminder is about.
    """

    id: str
    user_id: str
    type: NotificationType
    title: str
    body: str
    reference_id: str | None = None
    read: bool = False
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Newest notifications first, plus the user's total unread count."""

    notifications: list[NotificationResponse]
    unread: int


class ReadAllResponse(BaseModel):
    count: int
