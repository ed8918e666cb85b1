"""Recruiter contact service."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.schemas.recruiter import CLOSED_STATUSES, RECRUITER_STATUSES
from app.services.common import SupabaseService
from app.utils.errors import InvalidInputError
from supabase import Client

TABLE = "recruiters"


class RecruiterService:
    """CRUD and follow-up queries over a user's recruiter contacts."""

    def __init__(self, client: Client) -> None:
        self.db = SupabaseService(client)

    @staticmethod
    def _clean(payload: dict[str, Any]) -> dict[str, Any]:
        cleaned = dict(payload)
        if "name" in cleaned:
            name = (cleaned["name"] or "").strip()
            if not name:
                raise InvalidInputError("Recruiter name is required.")
            cleaned["name"] = name
        status = cleaned.get("status")
        if status is not None and status not in RECRUITER_STATUSES:
            raise InvalidInputError(f"Unknown status: {status}")
        return cleaned

    def list_contacts(self, user_id: str, status: str | None = None) -> list[dict[str, Any]]:
        """Return contacts newest first, optionally filtered by status."""
        filters: dict[str, Any] = {"user_id": user_id}
        if status:
            filters["status"] = status
        return self.db.select_many(
            TABLE, filters=filters, order_by="created_at", descending=True
        )

    def get_contact(self, user_id: str, recruiter_id: str) -> dict[str, Any]:
        """Return one contact owned by the user."""
        return self.db.select_one(
            TABLE, {"id": recruiter_id, "user_id": user_id}, not_found_label="Recruiter"
        )

    def create_contact(self, user_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a recruiter contact for the user."""
        if "name" not in payload:
            raise InvalidInputError("Recruiter name is required.")
        row = self._clean(payload)
        row["user_id"] = user_id
        return self.db.insert_one(TABLE, row)

    def update_contact(
        self,
        user_id: str,
        recruiter_id: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Apply a partial update; ownership fields cannot be changed."""
        current = self.get_contact(user_id, recruiter_id)
        changes = {
            key: value
            for key, value in self._clean(payload).items()
            if key not in {"id", "user_id", "created_at"}
        }
        if not changes:
            return current
        rows = self.db.update(TABLE, {"id": recruiter_id, "user_id": user_id}, changes)
        return rows[0] if rows else {**current, **changes}

    def delete_contact(self, user_id: str, recruiter_id: str) -> None:
        """Delete a contact owned by the user."""
        self.get_contact(user_id, recruiter_id)
        self.db.delete(TABLE, {"id": recruiter_id, "user_id": user_id})

    def status_counts(self, user_id: str) -> dict[str, int]:
        """Count contacts per status; every known status is present."""
        counts = dict.fromkeys(RECRUITER_STATUSES, 0)
        rows = self.db.select_all(TABLE, filters={"user_id": user_id}, columns="id,status")
        for row in rows:
            status = row.get("status")
            if status in counts:
                counts[status] += 1
        return counts

    def upcoming_follow_ups(self, user_id: str, start: date, end: date) -> list[dict[str, Any]]:
        """Return open contacts with a follow-up date in ``[start, end]``."""
        rows = self.db.execute(
            self.db.client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .gte("follow_up_date", start.isoformat())
            .lte("follow_up_date", end.isoformat())
            .order("follow_up_date"),
            default=[],
        )
        return [row for row in rows if row.get("status") not in CLOSED_STATUSES]

    def due_follow_ups(self, on_date: date) -> list[dict[str, Any]]:
        """Return every user's open contacts due for follow-up on ``on_date``."""
        rows = self.db.select_all(TABLE, filters={"follow_up_date": on_date.isoformat()})
        return [row for row in rows if row.get("status") not in CLOSED_STATUSES]
