"""Trailing time window helpers for issue collection."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC.

    Older PyGithub releases hand back naive timestamps that are UTC anyway.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def window_start(now: datetime, window: timedelta) -> datetime:
    """Return the cutoff for a trailing window ending at ``now``."""
    return ensure_aware(now) - window


def is_within_window(moment: datetime, now: datetime, window: timedelta) -> bool:
    """Check whether ``moment`` falls inside ``[now - window, now]``.

    Timestamps in the future (clock skew) are outside the window.
    """
    moment = ensure_aware(moment)
    now = ensure_aware(now)
    return window_start(now, window) <= moment <= now
