"""Tests for plain-text chat commands."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from commands.text import TextCommand, handle_text_command, match_text_command
from config.constants import (
    ERROR_COMMAND,
    ERROR_RATE_LIMITED,
    START_MESSAGE,
    SUCCESS_TODAY_BROADCAST,
)
from config.locales import RequestType
from core.dispatcher import Outcome
from core.rate_limit import _rate_limiter


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    _rate_limiter._last_calls.clear()
    yield
    _rate_limiter._last_calls.clear()


@pytest.fixture
def mock_dispatcher():
    dispatcher = MagicMock()
    dispatcher.broadcast = AsyncMock(return_value=[Outcome.SENT, Outcome.SENT])
    return dispatcher


def _message(content: str, guild_id: int | None = 67890) -> MagicMock:
    message = MagicMock()
    message.content = content
    message.author.id = 12345
    message.channel.send = AsyncMock()
    if guild_id is None:
        message.guild = None
    else:
        message.guild.id = guild_id
    return message


@pytest.mark.parametrize(
    "content,expected",
    [
        ("/start", TextCommand.START),
        ("/START", TextCommand.START),
        ("/start@BigMatchBot", TextCommand.START),
        ("/bigmatch", TextCommand.TODAY),
        ("/today", TextCommand.TODAY),
        ("/Today@BigMatchBot", TextCommand.TODAY),
        ("/today <@123456789012345678>", TextCommand.TODAY),
        ("/today please", TextCommand.TODAY),
        ("  /result  ", TextCommand.RESULTS),
        ("/yesterday<@!123456789012345678>", TextCommand.RESULTS),
    ],
)
def test_match_text_command(content, expected):
    assert match_text_command(content) is expected


@pytest.mark.parametrize(
    "content",
    ["/todayx", "/results", "today", "hello /today", "/help", ""],
)
def test_match_text_command_ignores_other_text(content):
    assert match_text_command(content) is None


@pytest.mark.asyncio
async def test_non_command_is_ignored(mock_dispatcher):
    message = _message("good morning")

    assert await handle_text_command(message, mock_dispatcher) is False
    message.channel.send.assert_not_called()


@pytest.mark.asyncio
async def test_start_replies(mock_dispatcher):
    message = _message("/start")

    assert await handle_text_command(message, mock_dispatcher) is True
    message.channel.send.assert_awaited_once_with(START_MESSAGE)
    mock_dispatcher.broadcast.assert_not_called()


@pytest.mark.asyncio
async def test_today_broadcasts_and_confirms(mock_dispatcher):
    message = _message("/today")

    with patch(
        "core.rate_limit.broadcast_cooldown",
        return_value=timedelta(minutes=10),
    ):
        await handle_text_command(message, mock_dispatcher)

    mock_dispatcher.broadcast.assert_awaited_once_with(
        RequestType.TODAY_FIXTURES
    )
    message.channel.send.assert_awaited_once_with(SUCCESS_TODAY_BROADCAST)


@pytest.mark.asyncio
async def test_shares_cooldown_with_slash_command(mock_dispatcher):
    _rate_limiter._last_calls[f"{RequestType.TODAY_FIXTURES.value}:67890"] = (
        datetime.now()
    )
    message = _message("/bigmatch")

    await handle_text_command(message, mock_dispatcher)

    mock_dispatcher.broadcast.assert_not_called()
    reply = message.channel.send.call_args.args[0]
    assert reply.startswith(ERROR_RATE_LIMITED)


@pytest.mark.asyncio
async def test_direct_message_uses_global_key(mock_dispatcher):
    message = _message("/result", guild_id=None)

    await handle_text_command(message, mock_dispatcher)

    assert RequestType.YESTERDAY_RESULTS.value in _rate_limiter._last_calls


@pytest.mark.asyncio
async def test_error_replies_with_generic_message(mock_dispatcher):
    mock_dispatcher.broadcast.side_effect = RuntimeError("boom")
    message = _message("/yesterday")

    assert await handle_text_command(message, mock_dispatcher) is True
    message.channel.send.assert_awaited_once_with(ERROR_COMMAND)


@pytest.mark.asyncio
async def test_bypass_user_skips_text_cooldown(mock_dispatcher):
    first = _message("/today", guild_id=7)
    second = _message("/today", guild_id=7)
    first.author.id = second.author.id = 42

    with patch(
        "core.rate_limit.settings.get_bypass_user_ids", return_value={42}
    ):
        await handle_text_command(first, mock_dispatcher)
        await handle_text_command(second, mock_dispatcher)

    assert mock_dispatcher.broadcast.await_count == 2
    second.channel.send.assert_awaited_once_with(SUCCESS_TODAY_BROADCAST)


@pytest.mark.asyncio
async def test_second_text_broadcast_is_rate_limited(mock_dispatcher):
    first = _message("/today", guild_id=7)
    second = _message("/bigmatch", guild_id=7)

    with patch(
        "core.rate_limit.settings.get_bypass_user_ids", return_value=set()
    ):
        await handle_text_command(first, mock_dispatcher)
        await handle_text_command(second, mock_dispatcher)

    assert mock_dispatcher.broadcast.await_count == 1
    assert second.channel.send.call_args.args[0].startswith(
        ERROR_RATE_LIMITED
    )
