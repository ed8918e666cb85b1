"""Service package exports with lazy loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "DashboardService": "app.services.dashboard_service",
    "NotificationService": "app.services.notification_service",
    "PrepLogService": "app.services.prep_log_service",
    "ProfileService": "app.services.profile_service",
    "RecruiterService": "app.services.recruiter_service",
    "SupabaseService": "app.services.common",
    "compute_streak": "app.services.streaks",
    "longest_streak": "app.services.streaks",
}

__all__ = sorted(_EXPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(_EXPORTS[name])
    return getattr(module, name)
