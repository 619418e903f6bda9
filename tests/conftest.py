"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pendulum
import pytest

from config.locales import Locale
from core.dispatcher import Destinations, Dispatcher
from core.fixtures import Fixture
from core.render import RenderRequest
from core.selector import select_big_matches

THAI_CHANNEL_ID = 111111111111111111
LAO_GROUP_ID = 222222222222222222


def make_fixture(
    home: str,
    away: str,
    league: str = "Premier League",
    kickoff: str = "2025-11-24T20:00:00+00:00",
    score: tuple[int, int] | None = None,
    logo: str | None = None,
) -> Fixture:
    """Build a Fixture with sensible defaults."""
    return Fixture(
        league=league,
        league_logo=logo,
        kickoff=pendulum.parse(kickoff),
        home_team=home,
        away_team=away,
        fulltime_score=score,
    )


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv("DISCORD_TOKEN", "x" * 60)
    monkeypatch.setenv("FOOTBALL_API_KEY", "0123456789abcdef0123456789abcdef")
    monkeypatch.setenv("THAI_CHANNEL_ID", str(THAI_CHANNEL_ID))
    monkeypatch.setenv("LAO_GROUP_ID", str(LAO_GROUP_ID))


@pytest.fixture
def sample_fixtures():
    """A day of fixtures across big and small leagues."""
    return [
        make_fixture(
            "Manchester United",
            "Fulham",
            kickoff="2025-11-24T15:00:00+00:00",
            logo="https://media.example.com/leagues/39.png",
        ),
        make_fixture(
            "Real Madrid",
            "Barcelona",
            league="La Liga",
            kickoff="2025-11-24T20:00:00+00:00",
            score=(2, 1),
            logo="https://media.example.com/leagues/140.png",
        ),
        make_fixture(
            "Ajax",
            "PSV",
            league="Eredivisie",
            kickoff="2025-11-24T13:30:00+00:00",
        ),
    ]


@pytest.fixture
def destinations():
    return Destinations(
        thai_channel_id=THAI_CHANNEL_ID, lao_group_id=LAO_GROUP_ID
    )


@pytest.fixture
def fake_transport():
    """Transport double recording every send."""
    transport = MagicMock()
    transport.send_text = AsyncMock()
    transport.send_image = AsyncMock()
    return transport


@pytest.fixture
def fake_fixture_client(sample_fixtures):
    client = MagicMock()
    client.fetch_fixtures = AsyncMock(return_value=sample_fixtures)
    return client


@pytest.fixture
def dispatcher(fake_transport, fake_fixture_client, destinations):
    return Dispatcher(
        transport=fake_transport,
        fixture_client=fake_fixture_client,
        destinations=destinations,
    )


@pytest.fixture
def render_request(sample_fixtures):
    """A Thai render request with a fixed date."""
    return RenderRequest(
        matches=tuple(select_big_matches(sample_fixtures)),
        title="🔥 โปรแกรม Big Match วันนี้ 🔥",
        locale=Locale.TH,
        now=pendulum.datetime(2025, 11, 24, 16, 0, tz="Asia/Bangkok"),
    )


@pytest.fixture(name="make_fixture")
def make_fixture_factory():
    """Factory fixture exposing make_fixture to tests."""
    return make_fixture
