"""Tests for core.fixtures module."""

from unittest.mock import AsyncMock, patch

import aiohttp
import pendulum
import pytest

from core.fixtures import (
    FixtureClient,
    FixtureFetchError,
    parse_fixture,
)


def _record(
    league="Premier League",
    home="Arsenal",
    away="Chelsea",
    date="2025-11-24T20:00:00+00:00",
    fulltime=None,
):
    return {
        "fixture": {"id": 1, "date": date},
        "league": {"name": league, "logo": "https://example.com/39.png"},
        "teams": {"home": {"name": home}, "away": {"name": away}},
        "score": {"fulltime": fulltime or {"home": None, "away": None}},
    }


def test_parse_fixture_upcoming():
    fixture = parse_fixture(_record())

    assert fixture.league == "Premier League"
    assert fixture.league_logo == "https://example.com/39.png"
    assert fixture.home_team == "Arsenal"
    assert fixture.away_team == "Chelsea"
    assert fixture.kickoff == pendulum.datetime(2025, 11, 24, 20, 0)
    assert fixture.fulltime_score is None
    assert fixture.is_played is False


def test_parse_fixture_finished():
    fixture = parse_fixture(_record(fulltime={"home": 3, "away": 1}))

    assert fixture.fulltime_score == (3, 1)
    assert fixture.is_played is True


def test_parse_fixture_partial_score_treated_as_not_played():
    fixture = parse_fixture(_record(fulltime={"home": 1, "away": None}))

    assert fixture.fulltime_score is None


def test_parse_fixture_missing_score_block():
    record = _record()
    del record["score"]

    assert parse_fixture(record).fulltime_score is None


def test_parse_fixture_missing_logo():
    record = _record()
    record["league"]["logo"] = ""

    assert parse_fixture(record).league_logo is None


@pytest.mark.parametrize(
    "mutate",
    [
        lambda r: r.pop("teams"),
        lambda r: r["league"].pop("name"),
        lambda r: r["fixture"].update(date="not a date"),
        lambda r: r["fixture"].update(date=None),
    ],
)
def test_parse_fixture_malformed_returns_none(mutate):
    record = _record()
    mutate(record)

    assert parse_fixture(record) is None


@pytest.mark.asyncio
async def test_fetch_fixtures_success():
    """Test fixtures are requested by date and parsed."""
    payload = {
        "errors": [],
        "response": [
            _record(),
            _record(league="La Liga", home="Real Madrid", away="Barcelona"),
            {"broken": True},
        ],
    }
    client = FixtureClient("key")

    with patch.object(
        FixtureClient, "_get_json", AsyncMock(return_value=payload)
    ) as mock_get:
        result = await client.fetch_fixtures(pendulum.date(2025, 11, 24))

    mock_get.assert_awaited_once_with({"date": "2025-11-24"})
    assert [f.home_team for f in result] == ["Arsenal", "Real Madrid"]


@pytest.mark.asyncio
async def test_fetch_fixtures_empty_response():
    client = FixtureClient("key")

    with patch.object(
        FixtureClient,
        "_get_json",
        AsyncMock(return_value={"errors": [], "response": []}),
    ):
        result = await client.fetch_fixtures(pendulum.date(2025, 11, 24))

    assert result == []


@pytest.mark.asyncio
async def test_fetch_fixtures_api_error_raises():
    """Test API-reported errors (e.g. bad key) raise FixtureFetchError."""
    client = FixtureClient("bad-key")
    payload = {"errors": {"token": "Error/Missing application key."}}

    with patch.object(
        FixtureClient, "_get_json", AsyncMock(return_value=payload)
    ):
        with pytest.raises(FixtureFetchError, match="application key"):
            await client.fetch_fixtures(pendulum.date(2025, 11, 24))


@pytest.mark.asyncio
async def test_fetch_fixtures_network_error_raises():
    client = FixtureClient("key")

    with patch.object(
        FixtureClient,
        "_get_json",
        AsyncMock(side_effect=aiohttp.ClientConnectionError("refused")),
    ):
        with pytest.raises(FixtureFetchError, match="2025-11-24"):
            await client.fetch_fixtures(pendulum.date(2025, 11, 24))


def test_client_strips_trailing_slash():
    client = FixtureClient("key", base_url="https://api.example.com/")
    assert client.base_url == "https://api.example.com"
