from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching how SQLite DateTime columns round-trip."""
    return datetime.now(UTC).replace(tzinfo=None)
