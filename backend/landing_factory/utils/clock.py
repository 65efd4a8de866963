from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Current time as a naive UTC datetime.

    Every timestamp column stores naive UTC so values compare the same way
    on SQLite and PostgreSQL.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
