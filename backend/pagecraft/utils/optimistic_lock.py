from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import parse
from flask import abort, request

LOCK_HEADER = "If-Unmodified-Since"


def as_utc(ts: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def requested_unmodified_since() -> Optional[datetime]:
    raw = request.headers.get(LOCK_HEADER)
    if not raw:
        return None

    try:
        return as_utc(parse(raw))
    except (ValueError, OverflowError):
        abort(400, description=f"Invalid {LOCK_HEADER} header")


def enforce_optimistic_lock(entity):
    """
    Abort with 409 when `entity` changed after the client's If-Unmodified-Since.

    No header means the caller did not ask for a lock. HTTP dates carry whole
    seconds, so the stored timestamp is truncated before comparing.
    """
    client_ts = requested_unmodified_since()
    if client_ts is None or entity.updated_at is None:
        return

    server_ts = as_utc(entity.updated_at).replace(microsecond=0)
    if server_ts > client_ts:
        abort(409, description=f"{type(entity).__name__} {entity.id} was modified by someone else.")
