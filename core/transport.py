"""Chat transport - sends cards and notices to a destination channel."""

import logging
from collections.abc import Sequence
from io import BytesIO
from typing import Protocol

import discord

from config.locales import LinkButton

logger = logging.getLogger(__name__)

ButtonRows = Sequence[Sequence[LinkButton]]


class Transport(Protocol):
    """What the dispatcher needs from a chat platform."""

    async def send_text(
        self, destination_id: int, text: str, buttons: ButtonRows | None = None
    ) -> None: ...

    async def send_image(
        self,
        destination_id: int,
        data: bytes,
        filename: str,
        buttons: ButtonRows | None = None,
    ) -> None: ...


class DestinationNotFound(Exception):
    """Raised when a destination channel cannot be resolved."""


def build_link_view(buttons: ButtonRows) -> discord.ui.View:
    """Convert button rows into a view of link buttons, one UI row each."""
    view = discord.ui.View(timeout=None)
    for row_index, row in enumerate(buttons):
        for button in row:
            view.add_item(
                discord.ui.Button(
                    style=discord.ButtonStyle.link,
                    label=button.label,
                    url=button.url,
                    row=row_index,
                )
            )
    return view


class DiscordTransport:
    """Transport backed by a connected discord.py client."""

    def __init__(self, client: discord.Client):
        self.client = client

    async def _resolve_channel(self, destination_id: int):
        channel = self.client.get_channel(destination_id)
        if channel is not None:
            return channel
        logger.debug(f"Channel {destination_id} not cached, fetching")
        try:
            return await self.client.fetch_channel(destination_id)
        except (discord.NotFound, discord.Forbidden) as e:
            raise DestinationNotFound(
                f"Channel {destination_id} is not reachable: {e}"
            ) from e

    async def send_text(
        self, destination_id: int, text: str, buttons: ButtonRows | None = None
    ) -> None:
        channel = await self._resolve_channel(destination_id)
        if buttons:
            await channel.send(content=text, view=build_link_view(buttons))
        else:
            await channel.send(content=text)
        logger.info(f"Text sent to channel {destination_id}")

    async def send_image(
        self,
        destination_id: int,
        data: bytes,
        filename: str,
        buttons: ButtonRows | None = None,
    ) -> None:
        channel = await self._resolve_channel(destination_id)
        file = discord.File(BytesIO(data), filename=filename)
        if buttons:
            await channel.send(file=file, view=build_link_view(buttons))
        else:
            await channel.send(file=file)
        logger.info(f"Image {filename} sent to channel {destination_id}")
