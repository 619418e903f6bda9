"""Card rendering - turns selected matches into a deliverable card.

Two strategies share one entry point, :func:`render_card`:
- ``text``: a Markdown message (default)
- ``image``: a PNG card drawn with Pillow
"""

from config.constants import CARD_FORMAT_IMAGE, CARD_FORMAT_TEXT
from core.render.image import render_image
from core.render.models import CardPayload, ImageCard, RenderRequest, TextCard
from core.render.text import render_text


async def render_card(
    request: RenderRequest, card_format: str = CARD_FORMAT_TEXT
) -> CardPayload:
    """Render ``request`` in the configured format.

    Raises:
        ValueError: If ``card_format`` is unknown.
    """
    if card_format == CARD_FORMAT_TEXT:
        return TextCard(render_text(request))
    if card_format == CARD_FORMAT_IMAGE:
        return ImageCard(await render_image(request))
    raise ValueError(f"Unknown card format: {card_format}")


__all__ = [
    "CardPayload",
    "ImageCard",
    "RenderRequest",
    "TextCard",
    "render_card",
    "render_image",
    "render_text",
]
