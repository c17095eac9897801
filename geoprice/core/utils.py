import time
from datetime import datetime, timezone

_last_id_ms = 0

def timestamp_id() -> str:
    """
    Millisecond timestamp as a string. Bumped by one when two ids are
    requested in the same millisecond so ids stay monotonic in-process.
    """
    global _last_id_ms
    now = int(time.time() * 1000)
    if now <= _last_id_ms:
        now = _last_id_ms + 1
    _last_id_ms = now
    return str(now)

def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
