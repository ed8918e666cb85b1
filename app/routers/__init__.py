"""API router package."""

from app.routers import (
    auth,
    dashboard,
    notifications,
    prep_logs,
    profile,
    recruiters,
)

__all__ = [
    "auth",
    "dashboard",
    "notifications",
    "prep_logs",
    "profile",
    "recruiters",
]
