"""Follow-up reminder job tests."""

from __future__ import annotations

from datetime import date

from app.jobs.follow_up_reminders import send_follow_up_reminders
from tests.fakes import OTHER_USER_ID, USER_ID, FakeClient

TODAY = date(2026, 10, 19)


def test_reminders_are_sent_once_per_contact_per_day(fake_db: FakeClient) -> None:
    fake_db.rows("recruiters").extend(
        [
            {"id": "r1", "user_id": USER_ID, "name": "Sarah", "company": "Google",
             "follow_up_date": "2026-10-19"},
            {"id": "r2", "user_id": OTHER_USER_ID, "name": "Dev",
             "follow_up_date": "2026-10-19", "status": "Interviewing"},
            {"id": "r3", "user_id": USER_ID, "name": "Old",
             "follow_up_date": "2026-10-19", "status": "Offer Letter"},
            {"id": "r4", "user_id": USER_ID, "name": "Later", "follow_up_date": "2026-10-20"},
        ]
    )
    fake_db.clock = "2026-10-19T09:00:00+00:00"

    assert send_follow_up_reminders(fake_db, TODAY) == 2

    notifications = fake_db.rows("notifications")
    assert {row["reference_id"] for row in notifications} == {"r1", "r2"}
    sarah = next(row for row in notifications if row["reference_id"] == "r1")
    assert sarah["user_id"] == USER_ID
    assert sarah["type"] == "follow_up"
    assert "Sarah (Google)" in sarah["body"]

    assert send_follow_up_reminders(fake_db, TODAY) == 0
