from datetime import datetime, timezone


def utc_now() -> datetime:
    """Naive UTC timestamp, as stored in the ``leads.created_at`` column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def millis_stamp(moment: datetime | None = None) -> int:
    """Milliseconds since the epoch, used for generated media file names."""
    moment = moment or datetime.now(timezone.utc)
    return int(moment.timestamp() * 1000)
