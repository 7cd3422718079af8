"""Helpers producing ISO‑8601 timestamps in UTC with a ``Z`` suffix."""

from datetime import datetime, timezone


def isoformat_utc(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return isoformat_utc(datetime.now(timezone.utc))


def date_string(value: str) -> str:
    """Convert a ``YYYY-MM-DD`` date into an ISO timestamp at midnight UTC."""
    return isoformat_utc(datetime.strptime(value, "%Y-%m-%d"))
