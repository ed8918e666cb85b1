"""Recruiter service tests."""

from __future__ import annotations

from datetime import date

import pytest

from app.services.recruiter_service import RecruiterService
from app.utils.errors import InvalidInputError, NotFoundError
from tests.fakes import OTHER_USER_ID, USER_ID, FakeClient


@pytest.fixture
def service(fake_db: FakeClient) -> RecruiterService:
    return RecruiterService(fake_db)


def test_create_contact_strips_name(service: RecruiterService) -> None:
    row = service.create_contact(USER_ID, {"name": "  Sarah  ", "company": "Google"})
    assert row["name"] == "Sarah"
    assert row["user_id"] == USER_ID


@pytest.mark.parametrize("payload", [{}, {"name": "   "}, {"name": "Sam", "status": "Ghosted"}])
def test_create_contact_rejects_bad_payloads(service: RecruiterService, payload: dict) -> None:
    with pytest.raises(InvalidInputError):
        service.create_contact(USER_ID, payload)


def test_list_contacts_filters_by_status(service: RecruiterService) -> None:
    service.create_contact(USER_ID, {"name": "A", "status": "Interviewing"})
    service.create_contact(USER_ID, {"name": "B", "status": "Rejected"})
    service.create_contact(OTHER_USER_ID, {"name": "C", "status": "Interviewing"})

    assert len(service.list_contacts(USER_ID)) == 2
    assert [row["name"] for row in service.list_contacts(USER_ID, "Interviewing")] == ["A"]


def test_update_contact_ignores_ownership_fields(service: RecruiterService) -> None:
    created = service.create_contact(USER_ID, {"name": "A"})

    updated = service.update_contact(
        USER_ID, created["id"], {"status": "Offer Letter", "user_id": OTHER_USER_ID}
    )

    assert updated["status"] == "Offer Letter"
    assert updated["user_id"] == USER_ID


def test_foreign_contact_is_not_found(service: RecruiterService) -> None:
    created = service.create_contact(OTHER_USER_ID, {"name": "A"})
    with pytest.raises(NotFoundError):
        service.update_contact(USER_ID, created["id"], {"name": "B"})


def test_status_counts_zero_fill(service: RecruiterService) -> None:
    service.create_contact(USER_ID, {"name": "A", "status": "Interviewing"})
    service.create_contact(USER_ID, {"name": "B", "status": "Interviewing"})
    service.create_contact(USER_ID, {"name": "C"})

    counts = service.status_counts(USER_ID)

    assert counts["Interviewing"] == 2
    assert counts["Rejected"] == 0
    assert len(counts) == 5


def test_follow_up_queries_skip_closed_contacts(service: RecruiterService) -> None:
    service.create_contact(USER_ID, {"name": "Due", "follow_up_date": "2026-10-19"})
    service.create_contact(
        USER_ID, {"name": "Closed", "follow_up_date": "2026-10-19", "status": "Rejected"}
    )
    service.create_contact(USER_ID, {"name": "Later", "follow_up_date": "2026-10-24"})
    service.create_contact(USER_ID, {"name": "Far", "follow_up_date": "2026-12-01"})

    due = service.due_follow_ups(date(2026, 10, 19))
    upcoming = service.upcoming_follow_ups(USER_ID, date(2026, 10, 19), date(2026, 10, 26))

    assert [row["name"] for row in due] == ["Due"]
    assert [row["name"] for row in upcoming] == ["Due", "Later"]
