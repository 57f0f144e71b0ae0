"""Time helpers for tests."""

from datetime import datetime, timedelta, timezone

DAY = datetime(2030, 1, 7, tzinfo=timezone.utc)


def at(hour: int, minute: int = 0, days: int = 0) -> datetime:
    """UTC instant on the reference day."""
    return DAY + timedelta(days=days, hours=hour, minutes=minute)
