"""Recruiter contact schemas."""

from datetime import date, datetime
from typing import Literal, get_args

from pydantic import BaseModel, Field

RecruiterStatus = Literal[
    "Screening in Process",
    "Interviewing",
    "Final Round Offer",
    "Offer Letter",
    "Rejected",
]

RECRUITER_STATUSES: tuple[str, ...] = get_args(RecruiterStatus)
CLOSED_STATUSES = frozenset({"Offer Letter", "Rejected"})


class RecruiterCreate(BaseModel):
    """Request body for adding a recruiter contact."""

    name: str = Field(..., min_length=1, max_length=120)
    company: str | None = Field(default=None, max_length=120)
    email: str | None = Field(default=None, max_length=254)
    phone: str | None = Field(default=None, max_length=40)
    status: RecruiterStatus | None = None
    follow_up_date: date | None = None
    last_interview_date: date | None = None
    link: str | None = Field(default=None, max_length=500)
    comments: str | None = Field(default=None, max_length=2000)


class RecruiterUpdate(BaseModel):
    """Partial update for a recruiter contact."""

    name: str | None = Field(default=None, min_length=1, max_length=120)
    company: str | None = Field(default=None, max_length=120)
    email: str | None = Field(default=None, max_length=254)
    phone: str | None = Field(default=None, max_length=40)
    status: RecruiterStatus | None = None
    follow_up_date: date | None = None
    last_interview_date: date | None = None
    link: str | None = Field(default=None, max_length=500)
    comments: str | None = Field(default=None, max_length=2000)


class RecruiterResponse(BaseModel):
    """A stored recruiter contact."""

    id: str
    user_id: str
    name: str
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    status: RecruiterStatus | None = None
    follow_up_date: date | None = None
    last_interview_date: date | None = None
    link: str | None = None
    comments: str | None = None
    created_at: datetime


class RecruiterListResponse(BaseModel):
    recruiters: list[RecruiterResponse]
