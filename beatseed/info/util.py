from datetime import UTC, date, datetime
import arrow


def to_utc_aware(dt: datetime | date) -> datetime:
    """Converts a datetime or date to an aware datetime in UTC.

    Naive datetimes are assumed to be in UTC. A date becomes midnight UTC of
    that day, since BSON has no date-only type.

    Args:
      dt: The datetime or date to convert.

    Returns:
      An aware datetime object in UTC.
    """
    return arrow.get(dt).to(UTC).datetime


def get_current_time() -> datetime:
    """
    Gets the current time in UTC.

    Returns:
        datetime: The current time in UTC.
    """
    return arrow.utcnow().datetime


def years_ago(years: int, now: datetime | None = None) -> datetime:
    """
    Gets the UTC time `years` calendar years before `now`.
    """
    anchor = arrow.get(now) if now is not None else arrow.utcnow()
    return anchor.shift(years=-years).to(UTC).datetime
