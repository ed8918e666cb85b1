"""Prep log CRUD and streak inputs."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.services.common import SupabaseService
from app.services.streaks import parse_log_dates
from app.utils.errors import InvalidInputError
from app.utils.time import local_today, now_utc
from supabase import Client

TABLE = "prep_logs"


def clean_log_points(points: list[str]) -> list[str]:
    """Trim log points and drop blank ones."""
    return [point.strip() for point in points if point and point.strip()]


class PrepLogService:
    """Create, edit and query a user's prep logs."""

    def __init__(self, client: Client) -> None:
        self.db = SupabaseService(client)

    @staticmethod
    def _validate(
        logs: list[str] | None,
        minutes: int | None,
        log_date: date | None,
        today: date,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if logs is not None:
            cleaned = clean_log_points(logs)
            if not cleaned:
                raise InvalidInputError("At least one log point is required.")
            payload["logs"] = cleaned
        if minutes is not None:
            if minutes <= 0:
                raise InvalidInputError("Minutes must be a positive number.")
            payload["hours_in_minutes"] = minutes
        if log_date is not None:
            if log_date > today:
                raise InvalidInputError("Log date cannot be in the future.")
            payload["log_date"] = log_date.isoformat()
        return payload

    def list_logs(
        self,
        user_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[dict[str, Any]], int]:
        """Return prep logs newest day first, with total count for pagination."""
        rows = self.db.select_many(
            TABLE,
            filters={"user_id": user_id},
            order_by="log_date",
            descending=True,
            limit=limit,
            offset=offset,
        )
        total = self.db.count(TABLE, {"user_id": user_id})
        return rows, total

    def get_log(self, user_id: str, log_id: str) -> dict[str, Any]:
        """Return one prep log owned by the user."""
        return self.db.select_one(
            TABLE, {"id": log_id, "user_id": user_id}, not_found_label="Prep log"
        )

    def create_log(
        self,
        user_id: str,
        logs: list[str],
        hours_in_minutes: int,
        log_date: date | None = None,
        today: date | None = None,
    ) -> dict[str, Any]:
        """Create a prep log; the date defaults to today in the reference timezone."""
        today = today or local_today()
        payload = self._validate(logs, hours_in_minutes, log_date or today, today)
        payload["user_id"] = user_id
        return self.db.insert_one(TABLE, payload)

    def update_log(
        self,
        user_id: str,
        log_id: str,
        logs: list[str] | None = None,
        hours_in_minutes: int | None = None,
        log_date: date | None = None,
        today: date | None = None,
    ) -> dict[str, Any]:
        """Apply a partial update to one prep log."""
        current = self.get_log(user_id, log_id)
        payload = self._validate(logs, hours_in_minutes, log_date, today or local_today())
        if not payload:
            return current

        payload["updated_at"] = now_utc().isoformat()
        rows = self.db.update(TABLE, {"id": log_id, "user_id": user_id}, payload)
        return rows[0] if rows else {**current, **payload}

    def delete_log(self, user_id: str, log_id: str) -> None:
        """Delete one prep log owned by the user."""
        self.get_log(user_id, log_id)
        self.db.delete(TABLE, {"id": log_id, "user_id": user_id})

    def log_dates(self, user_id: str) -> set[date]:
        """Return the distinct calendar days on which the user logged prep."""
        rows = self.db.select_all(
            TABLE,
            filters={"user_id": user_id},
            columns="id,log_date",
            order_by="log_date",
            descending=True,
        )
        try:
            return parse_log_dates(row.get("log_date") for row in rows)
        except ValueError as exc:
            raise InvalidInputError("Stored prep log has an invalid date") from exc

    def totals(self, user_id: str) -> dict[str, int]:
        """Return lifetime log count and minutes for the dashboard."""
        rows = self.db.select_all(
            TABLE, filters={"user_id": user_id}, columns="id,hours_in_minutes"
        )
        return {
            "total_logs": self.db.count(TABLE, {"user_id": user_id}),
            "total_minutes": sum(int(row.get("hours_in_minutes") or 0) for row in rows),
        }
