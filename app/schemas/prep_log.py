"""Prep log schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class PrepLogCreate(BaseModel):
    """Request body for logging one prep session."""

    log_date: date | None = None
    logs: list[str] = Field(default_factory=list, max_length=50)
    hours_in_minutes: int


class PrepLogUpdate(BaseModel):
    """Partial update for a prep log; omitted fields are left unchanged."""

    log_date: date | None = None
    logs: list[str] | None = Field(default=None, max_length=50)
    hours_in_minutes: int | None = None


class PrepLogResponse(BaseModel):
    """A stored prep log."""

    id: str
    user_id: str
    log_date: date
    logs: list[str]
    hours_in_minutes: int
    created_at: datetime
    updated_at: datetime | None = None


class PrepLogListResponse(BaseModel):
    """Paged prep logs, newest day first."""

    logs: list[PrepLogResponse]
    total: int
