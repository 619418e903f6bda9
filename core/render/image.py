"""Image card renderer.

Draws the selected matches onto a gradient card with Pillow and returns
PNG bytes. League logos are downloaded while rendering; a logo that
fails to download or decode leaves its ring empty and nothing else.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import lru_cache
from io import BytesIO

import aiohttp
from PIL import Image, ImageDraw, ImageFont, ImageOps

from config import settings
from config.locales import strings_for
from core.render.models import RenderRequest
from core.selector import SelectedMatch

logger = logging.getLogger(__name__)

WIDTH = 1080
MIN_HEIGHT = 720
HEADER_HEIGHT = 160
ROW_HEIGHT = 90
PADDING = 60
BORDER_WIDTH = 12
LOGO_SIZE = 72
LOGO_RING_WIDTH = 4
LOGO_OFFSET_X = 330  # left of centre
LOGO_TIMEOUT = 5.0

BLACK = (0, 0, 0)
DARK_RED = (120, 0, 0)
GOLD = (212, 175, 55)
WHITE = (255, 255, 255)
OUTLINE = (20, 20, 20)
HEADER_FILL = (0, 0, 0, 150)
DIVIDER_FILL = (212, 175, 55, 110)

LogoFetcher = Callable[[str], Awaitable[bytes]]


@lru_cache(maxsize=8)
def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load the card font, falling back to DejaVu then Pillow's default."""
    font_path = settings.get("FONT_PATH")
    for candidate in (font_path, "DejaVuSans.ttf"):
        if not candidate:
            continue
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            logger.warning(f"Font {candidate} not available")
    return ImageFont.load_default(size=size)


async def _download_logo(url: str) -> bytes:
    """Download a league logo.

    Raises:
        aiohttp.ClientError: If the request fails.
    """
    timeout = aiohttp.ClientTimeout(total=LOGO_TIMEOUT)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.read()


def group_by_league(
    matches: tuple[SelectedMatch, ...],
) -> dict[str, list[SelectedMatch]]:
    """Group matches by league, leagues in order of first appearance."""
    groups: dict[str, list[SelectedMatch]] = {}
    for match in matches:
        groups.setdefault(match.fixture.league, []).append(match)
    return groups


def match_line(match: SelectedMatch, request: RenderRequest) -> str:
    fixture = match.fixture
    if match.score_text:
        return f"{fixture.home_team}  {match.score_text}  {fixture.away_team}"
    return (
        f"{match.kickoff_time(request.locale)}  "
        f"{fixture.home_team} vs {fixture.away_team}"
    )


def card_height(groups: dict[str, list[SelectedMatch]]) -> int:
    rows = len(groups) + sum(len(matches) for matches in groups.values())
    return max(MIN_HEIGHT, HEADER_HEIGHT + rows * ROW_HEIGHT + PADDING * 2)


def _gradient(width: int, height: int) -> Image.Image:
    """Diagonal black -> dark red -> gold gradient."""
    span = width + height
    colors = []
    for i in range(span):
        t = i / (span - 1)
        if t < 0.5:
            start, end, local = BLACK, DARK_RED, t / 0.5
        else:
            start, end, local = DARK_RED, GOLD, (t - 0.5) / 0.5
        colors.append(
            tuple(round(s + (e - s) * local) for s, e in zip(start, end))
        )
    strip = Image.new("RGB", (span, 1))
    strip.putdata(colors)

    canvas = Image.new("RGB", (width, height))
    for y in range(height):
        canvas.paste(strip.crop((y, 0, y + width, 1)), (0, y))
    return canvas.convert("RGBA")


def _text_size(draw: ImageDraw.ImageDraw, text: str, font) -> tuple[int, int]:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return right - left, bottom - top


def _draw_header(canvas: Image.Image, request: RenderRequest) -> None:
    band = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    ImageDraw.Draw(band).rectangle(
        (0, 0, canvas.width, HEADER_HEIGHT), fill=HEADER_FILL
    )
    canvas.alpha_composite(band)

    draw = ImageDraw.Draw(canvas)
    title_font = _load_font(52)
    title_w, title_h = _text_size(draw, request.title, title_font)
    x = (canvas.width - title_w) // 2
    y = (HEADER_HEIGHT - title_h) // 2
    draw.text((x + 3, y + 3), request.title, font=title_font, fill=BLACK)
    draw.text((x, y), request.title, font=title_font, fill=WHITE)

    date_text = request.now.format(strings_for(request.locale).date_format)
    date_font = _load_font(26)
    date_w, _ = _text_size(draw, date_text, date_font)
    draw.text(
        (canvas.width - date_w - BORDER_WIDTH - 24, BORDER_WIDTH + 14),
        date_text,
        font=date_font,
        fill=GOLD,
    )


def _draw_logo(
    canvas: Image.Image, logo_data: bytes | None, center_y: int
) -> None:
    """Draw the gold ring and, when available, the clipped logo inside."""
    x0 = canvas.width // 2 - LOGO_OFFSET_X - LOGO_SIZE // 2
    y0 = center_y - LOGO_SIZE // 2
    box = (x0, y0, x0 + LOGO_SIZE, y0 + LOGO_SIZE)

    if logo_data is not None:
        try:
            logo = Image.open(BytesIO(logo_data)).convert("RGBA")
            logo = ImageOps.fit(logo, (LOGO_SIZE, LOGO_SIZE))
            mask = Image.new("L", (LOGO_SIZE, LOGO_SIZE), 0)
            ImageDraw.Draw(mask).ellipse(
                (0, 0, LOGO_SIZE - 1, LOGO_SIZE - 1), fill=255
            )
            canvas.paste(logo, (x0, y0), mask)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not draw league logo: {e}")

    ImageDraw.Draw(canvas).ellipse(
        box, outline=GOLD, width=LOGO_RING_WIDTH
    )


def _draw_league_header(
    draw: ImageDraw.ImageDraw, league: str, center_y: int
) -> None:
    font = _load_font(38)
    text_w, text_h = _text_size(draw, league, font)
    draw.text(
        ((WIDTH - text_w) // 2, center_y - text_h // 2),
        league,
        font=font,
        fill=GOLD,
        stroke_width=2,
        stroke_fill=OUTLINE,
    )


def _draw_match_line(
    draw: ImageDraw.ImageDraw, text: str, center_y: int
) -> None:
    font = _load_font(34)
    text_w, text_h = _text_size(draw, text, font)
    draw.text(
        ((WIDTH - text_w) // 2, center_y - text_h // 2),
        text,
        font=font,
        fill=WHITE,
        stroke_width=3,
        stroke_fill=OUTLINE,
    )
    rule_y = center_y + ROW_HEIGHT // 2 - 4
    draw.line(
        (PADDING * 2, rule_y, WIDTH - PADDING * 2, rule_y),
        fill=DIVIDER_FILL,
        width=1,
    )


async def _fetch_logo(url: str | None, fetch_logo: LogoFetcher) -> bytes | None:
    if not url:
        return None
    try:
        return await fetch_logo(url)
    except Exception as e:
        logger.warning(f"Skipping league logo {url}: {e}")
        return None


def draw_card(
    request: RenderRequest,
    groups: dict[str, list[SelectedMatch]],
    logos: list[bytes | None],
) -> bytes:
    """Draw the card and encode it as PNG. Blocking, CPU bound."""
    height = card_height(groups)
    canvas = _gradient(WIDTH, height)
    _draw_header(canvas, request)

    overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    overlay_draw = ImageDraw.Draw(overlay)
    y = HEADER_HEIGHT + PADDING + ROW_HEIGHT // 2
    for (league, matches), logo_data in zip(groups.items(), logos):
        _draw_logo(canvas, logo_data, y)
        _draw_league_header(ImageDraw.Draw(canvas), league, y)
        y += ROW_HEIGHT
        for match in matches:
            _draw_match_line(overlay_draw, match_line(match, request), y)
            y += ROW_HEIGHT
    canvas.alpha_composite(overlay)

    ImageDraw.Draw(canvas).rectangle(
        (0, 0, WIDTH - 1, height - 1), outline=GOLD, width=BORDER_WIDTH
    )

    buffer = BytesIO()
    canvas.convert("RGB").save(buffer, format="PNG")
    logger.info(
        f"Rendered image card {WIDTH}x{height} with "
        f"{len(request.matches)} matches"
    )
    return buffer.getvalue()


async def render_image(
    request: RenderRequest, fetch_logo: LogoFetcher | None = None
) -> bytes:
    """Render the big match card as PNG.

    Logos are downloaded on the event loop; drawing runs in the default
    thread executor.

    Args:
        request: Matches, title, locale and current date.
        fetch_logo: Coroutine returning logo bytes for a URL; defaults to
            an aiohttp download.

    Returns:
        PNG-encoded image.
    """
    fetch_logo = fetch_logo or _download_logo
    groups = group_by_league(request.matches)
    logos = await asyncio.gather(
        *(
            _fetch_logo(matches[0].fixture.league_logo, fetch_logo)
            for matches in groups.values()
        )
    )

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, draw_card, request, groups, list(logos)
    )
