"""Date utilities for the Big Match bot.

Centralizes kickoff parsing and the date arithmetic used to pick which
day's fixtures a delivery reports on.
"""

import logging

import pendulum

from config.constants import TIMEZONE

logger = logging.getLogger(__name__)


def parse_kickoff(value: str) -> pendulum.DateTime:
    """Parse an ISO 8601 kickoff timestamp from the fixtures API.

    Args:
        value: Timestamp such as "2025-11-24T20:00:00+00:00".

    Returns:
        Timezone-aware pendulum datetime.

    Raises:
        ValueError: If the value is empty or cannot be parsed.
    """
    if not value:
        raise ValueError("Empty kickoff timestamp")
    try:
        parsed = pendulum.parse(value)
    except ValueError as e:
        logger.error(f"Parse error: kickoff='{value}': {e}")
        raise ValueError(f"Invalid kickoff timestamp: '{value}'") from e
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Kickoff is not a datetime: '{value}'")
    return parsed


def format_kickoff_time(
    kickoff: pendulum.DateTime, timezone: str = TIMEZONE
) -> str:
    """Format a kickoff as two-digit HH:mm in the given timezone.

    Thailand and Laos share UTC+7, so both locales use TIMEZONE.
    """
    return kickoff.in_timezone(timezone).format("HH:mm")


def target_date(
    day_offset: int, today: pendulum.Date | None = None
) -> pendulum.Date:
    """Get the calendar date ``day_offset`` days from today.

    Args:
        day_offset: 0 for today, -1 for yesterday.
        today: Reference date, defaults to the process's local date.

    Returns:
        Shifted date.
    """
    if today is None:
        today = pendulum.today().date()
    return today.add(days=day_offset)
