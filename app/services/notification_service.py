"""Follow-up reminder notifications."""

from __future__ import annotations

from typing import Any

from app.services.common import SupabaseService
from app.utils.errors import NotFoundError
from supabase import Client

TABLE = "notifications"
FOLLOW_UP = "follow_up"


def follow_up_message(contact: dict[str, Any]) -> tuple[str, str]:
    """Return the ``(title, body)`` of a reminder for one recruiter contact."""
    company = contact.get("company")
    who = f"{contact['name']} ({company})" if company else contact["name"]
    return "Follow up today", f"Time to follow up with {who}."


class NotificationService:
    """Store reminders for the push worker and track what the user has read."""

    def __init__(self, client: Client) -> None:
        self.db = SupabaseService(client)

    def reminded_since(self, user_id: str, recruiter_id: str, since_iso: str) -> bool:
        """Return whether a follow-up for this contact was created at or after ``since_iso``."""
        rows = self.db.execute(
            self.db.client.table(TABLE)
            .select("id")
            .eq("user_id", user_id)
            .eq("type", FOLLOW_UP)
            .eq("reference_id", recruiter_id)
            .gte("created_at", since_iso)
            .limit(1),
            default=[],
        )
        return bool(rows)

    def remind_follow_up(self, contact: dict[str, Any], since_iso: str) -> dict[str, Any] | None:
        """Create a follow-up reminder for the contact's owner.

        Returns ``None`` when the contact was already reminded since
        ``since_iso``.
        """
        user_id = str(contact["user_id"])
        recruiter_id = str(contact["id"])
        if self.reminded_since(user_id, recruiter_id, since_iso):
            return None

        title, body = follow_up_message(contact)
        return self.db.insert_one(
            TABLE,
            {
                "user_id": user_id,
                "type": FOLLOW_UP,
                "title": title,
                "body": body,
                "reference_id": recruiter_id,
            },
        )

    def list_notifications(
        self,
        user_id: str,
        unread_only: bool = False,
        notification_type: str | None = None,
        limit: int = 50,
    ) -> list[dict[str, Any]]:
        """Return the user's notifications, newest first."""
        filters: dict[str, Any] = {"user_id": user_id}
        if unread_only:
            filters["read"] = False
        if notification_type:
            filters["type"] = notification_type
        return self.db.select_many(
            TABLE, filters=filters, order_by="created_at", descending=True, limit=limit
        )

    def unread_count(self, user_id: str) -> int:
        return self.db.count(TABLE, {"user_id": user_id, "read": False})

    def mark_read(self, user_id: str, notification_id: str) -> dict[str, Any]:
        rows = self.db.update(TABLE, {"id": notification_id, "user_id": user_id}, {"read": True})
        if not rows:
            raise NotFoundError("Notification")
        return rows[0]

    def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification read; returns how many changed."""
        return len(self.db.update(TABLE, {"user_id": user_id, "read": False}, {"read": True}))
