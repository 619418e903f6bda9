"""Big match selection: filter to the big leagues, rank, keep the top few."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from config.constants import (
    BIG_LEAGUES,
    BIG_TEAMS,
    MAX_MATCHES,
    UNKNOWN_LEAGUE_WEIGHT,
)
from config.locales import Locale
from core.fixtures import Fixture
from core.utils.date_parser import format_kickoff_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectedMatch:
    """A ranked fixture with its kickoff time preformatted per locale."""

    fixture: Fixture
    kickoff_times: dict[Locale, str]

    def kickoff_time(self, locale: Locale) -> str:
        return self.kickoff_times[locale]

    @property
    def score_text(self) -> str | None:
        if self.fixture.fulltime_score is None:
            return None
        home, away = self.fixture.fulltime_score
        return f"{home} - {away}"


def team_weight(fixture: Fixture) -> int:
    """0 if both teams are big, 1 if one is, 2 if neither."""
    big = (fixture.home_team in BIG_TEAMS) + (fixture.away_team in BIG_TEAMS)
    return 2 - big


def league_weight(league: str) -> int:
    """Position of the league in BIG_LEAGUES (lower is bigger)."""
    try:
        return BIG_LEAGUES.index(league)
    except ValueError:
        return UNKNOWN_LEAGUE_WEIGHT


def ranking_key(fixture: Fixture) -> tuple:
    return (
        team_weight(fixture),
        league_weight(fixture.league),
        fixture.kickoff,
    )


def _annotate(fixture: Fixture) -> SelectedMatch:
    # Thai and Lao share TIMEZONE and the HH:mm clock
    return SelectedMatch(
        fixture=fixture,
        kickoff_times={
            locale: format_kickoff_time(fixture.kickoff) for locale in Locale
        },
    )


def select_big_matches(
    fixtures: Iterable[Fixture], limit: int = MAX_MATCHES
) -> list[SelectedMatch]:
    """Pick the most newsworthy fixtures of the day.

    Fixtures outside BIG_LEAGUES are dropped, the rest are sorted by
    team prominence, then league prominence, then kickoff time.

    Args:
        fixtures: All fixtures for one calendar date.
        limit: Maximum number of matches to return.

    Returns:
        At most ``limit`` matches, best first.
    """
    candidates = [f for f in fixtures if f.league in BIG_LEAGUES]
    ranked = sorted(candidates, key=ranking_key)[:limit]
    logger.info(
        f"Selected {len(ranked)} of {len(candidates)} big-league fixtures"
    )
    return [_annotate(fixture) for fixture in ranked]
