"""Render inputs and outputs."""

from dataclasses import dataclass

import pendulum

from config.locales import Locale
from core.selector import SelectedMatch


@dataclass(frozen=True)
class RenderRequest:
    """Everything a renderer needs to draw one card.

    ``now`` is injected so rendering stays deterministic.
    """

    matches: tuple[SelectedMatch, ...]
    title: str
    locale: Locale
    now: pendulum.DateTime


@dataclass(frozen=True)
class TextCard:
    text: str


@dataclass(frozen=True)
class ImageCard:
    data: bytes
    filename: str = "bigmatch.png"


CardPayload = TextCard | ImageCard
