"""Tests for core.utils.date_parser module."""

import pendulum
import pytest

from core.utils.date_parser import (
    format_kickoff_time,
    parse_kickoff,
    target_date,
)


def test_parse_kickoff_utc_offset():
    kickoff = parse_kickoff("2025-11-24T20:00:00+00:00")

    assert kickoff == pendulum.datetime(2025, 11, 24, 20, 0, tz="UTC")


def test_parse_kickoff_keeps_offset():
    kickoff = parse_kickoff("2025-11-24T21:00:00+01:00")

    assert kickoff.in_timezone("UTC").hour == 20


@pytest.mark.parametrize("value", ["", "not a date", "25/11/2025 20h"])
def test_parse_kickoff_invalid(value):
    with pytest.raises(ValueError):
        parse_kickoff(value)


def test_format_kickoff_time_bangkok():
    """Test kickoff is shown at UTC+7 with two-digit hours."""
    kickoff = pendulum.datetime(2025, 11, 24, 20, 0, tz="UTC")

    assert format_kickoff_time(kickoff) == "03:00"


def test_format_kickoff_time_other_zone():
    kickoff = pendulum.datetime(2025, 11, 24, 20, 5, tz="UTC")

    assert format_kickoff_time(kickoff, "Europe/Lisbon") == "20:05"


def test_target_date_today_and_yesterday():
    today = pendulum.date(2025, 3, 1)

    assert target_date(0, today) == pendulum.date(2025, 3, 1)
    assert target_date(-1, today) == pendulum.date(2025, 2, 28)


def test_target_date_crosses_year():
    assert target_date(-1, pendulum.date(2026, 1, 1)) == pendulum.date(
        2025, 12, 31
    )


def test_target_date_defaults_to_local_today():
    assert target_date(0) == pendulum.today().date()
