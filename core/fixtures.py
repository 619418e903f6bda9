"""API-Football client for fixtures by date."""

import logging
from dataclasses import dataclass
from typing import Any

import aiohttp
import pendulum

from config.constants import FOOTBALL_API_KEY_HEADER, FOOTBALL_API_URL
from core.retry import retry_on_failure
from core.utils.date_parser import parse_kickoff

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 20.0


class FixtureFetchError(Exception):
    """Raised when fixtures cannot be obtained from the API."""


@dataclass(frozen=True)
class Fixture:
    """A scheduled or completed match as reported by the API."""

    league: str
    kickoff: pendulum.DateTime
    home_team: str
    away_team: str
    league_logo: str | None = None
    fulltime_score: tuple[int, int] | None = None

    @property
    def is_played(self) -> bool:
        return self.fulltime_score is not None


def _parse_score(score: Any) -> tuple[int, int] | None:
    """Extract the full-time score, or None when the match has no result."""
    if not isinstance(score, dict):
        return None
    fulltime = score.get("fulltime") or {}
    home = fulltime.get("home")
    away = fulltime.get("away")
    if home is None or away is None:
        return None
    return int(home), int(away)


def parse_fixture(record: dict) -> Fixture | None:
    """Convert one API record into a Fixture.

    Args:
        record: Element of the API's ``response`` array.

    Returns:
        Fixture, or None if the record lacks league, teams or kickoff.
    """
    try:
        league = record["league"]
        teams = record["teams"]
        fixture = Fixture(
            league=league["name"],
            league_logo=league.get("logo") or None,
            kickoff=parse_kickoff(record["fixture"]["date"]),
            home_team=teams["home"]["name"],
            away_team=teams["away"]["name"],
            fulltime_score=_parse_score(record.get("score")),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed fixture record: {e}")
        return None
    return fixture


class FixtureClient:
    """Client for the API-Football ``/fixtures`` endpoint.

    Args:
        api_key: API-Football key sent in the ``x-apisports-key`` header.
        base_url: API root, overridable for tests.
        timeout: Total request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = FOOTBALL_API_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @retry_on_failure(
        max_attempts=3,
        delay=1.0,
        exceptions=(aiohttp.ClientError, TimeoutError),
    )
    async def _get_json(self, params: dict[str, str]) -> dict:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        headers = {FOOTBALL_API_KEY_HEADER: self.api_key}
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(
                f"{self.base_url}/fixtures", params=params, headers=headers
            ) as response:
                response.raise_for_status()
                return await response.json()

    async def fetch_fixtures(self, date: pendulum.Date) -> list[Fixture]:
        """Fetch every fixture played on ``date``.

        Raises:
            FixtureFetchError: On network, HTTP or API-reported errors.
        """
        date_iso = date.to_date_string()
        logger.info(f"Fetching fixtures for {date_iso}")
        try:
            payload = await self._get_json({"date": date_iso})
        except (aiohttp.ClientError, TimeoutError) as e:
            raise FixtureFetchError(
                f"Fixtures request for {date_iso} failed: {e}"
            ) from e

        # API-Football reports auth/quota problems with HTTP 200
        errors = payload.get("errors")
        if errors:
            raise FixtureFetchError(f"Fixtures API error: {errors}")

        records = payload.get("response") or []
        fixtures = [
            fixture
            for fixture in (parse_fixture(record) for record in records)
            if fixture is not None
        ]
        logger.info(
            f"Got {len(fixtures)} fixtures for {date_iso} "
            f"({len(records) - len(fixtures)} skipped)"
        )
        return fixtures
