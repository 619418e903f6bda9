"""Tests for core.transport module."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from config.locales import LOCALES, LinkButton, Locale
from core.transport import (
    DestinationNotFound,
    DiscordTransport,
    build_link_view,
)

CHANNEL_ID = 111111111111111111


@pytest.fixture
def channel():
    channel = MagicMock()
    channel.send = AsyncMock()
    return channel


@pytest.fixture
def client(channel):
    client = MagicMock()
    client.get_channel.return_value = channel
    client.fetch_channel = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_build_link_view_rows():
    buttons = LOCALES[Locale.TH].buttons

    view = build_link_view(buttons)

    assert len(view.children) == 3
    assert [item.row for item in view.children] == [0, 0, 1]
    assert all(item.style is discord.ButtonStyle.link for item in view.children)
    assert view.children[2].url == buttons[1][0].url


@pytest.mark.asyncio
async def test_send_text_with_buttons(client, channel):
    transport = DiscordTransport(client)
    buttons = ((LinkButton("Site", "https://example.com"),),)

    await transport.send_text(CHANNEL_ID, "hello", buttons=buttons)

    client.get_channel.assert_called_once_with(CHANNEL_ID)
    kwargs = channel.send.call_args.kwargs
    assert kwargs["content"] == "hello"
    assert isinstance(kwargs["view"], discord.ui.View)


@pytest.mark.asyncio
async def test_send_text_without_buttons(client, channel):
    transport = DiscordTransport(client)

    await transport.send_text(CHANNEL_ID, "no matches")

    channel.send.assert_awaited_once_with(content="no matches")


@pytest.mark.asyncio
async def test_send_image_attaches_file(client, channel):
    transport = DiscordTransport(client)

    await transport.send_image(CHANNEL_ID, b"png-bytes", "bigmatch.png")

    sent_file = channel.send.call_args.kwargs["file"]
    assert isinstance(sent_file, discord.File)
    assert sent_file.filename == "bigmatch.png"


@pytest.mark.asyncio
async def test_uncached_channel_is_fetched(client, channel):
    client.get_channel.return_value = None
    client.fetch_channel.return_value = channel
    transport = DiscordTransport(client)

    await transport.send_text(CHANNEL_ID, "hello")

    client.fetch_channel.assert_awaited_once_with(CHANNEL_ID)
    channel.send.assert_awaited_once()


@pytest.mark.asyncio
async def test_unreachable_channel_raises(client):
    client.get_channel.return_value = None
    client.fetch_channel.side_effect = discord.NotFound(
        MagicMock(status=404), "Unknown Channel"
    )
    transport = DiscordTransport(client)

    with pytest.raises(DestinationNotFound):
        await transport.send_text(CHANNEL_ID, "hello")
