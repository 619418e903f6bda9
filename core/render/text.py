"""Text card formatter for Discord."""

from config.locales import strings_for
from core.render.models import RenderRequest


def render_text(request: RenderRequest) -> str:
    """Generate the big match message.

    Layout: brand header, title, one block per match (league in bold,
    kickoff time, teams with the full-time score when known), then the
    locale's promotional footer.

    Args:
        request: Matches, title and locale to render.

    Returns:
        Markdown-formatted message.
    """
    strings = strings_for(request.locale)
    lines = [strings.brand_header, request.title, ""]

    for match in request.matches:
        fixture = match.fixture
        score = f" ({match.score_text})" if match.score_text else ""
        lines.append(f"⚽️ **{fixture.league}**")
        lines.append(f"⏰ {match.kickoff_time(request.locale)}")
        lines.append(f"{fixture.home_team} vs {fixture.away_team}{score}")
        lines.append("")

    lines.append(strings.footer)
    return "\n".join(lines)
