"""Plain-text commands typed in chat, e.g. ``/today`` or ``/result@Bot``."""

import logging
import re
from enum import Enum

import discord

from commands.bigmatch import run_broadcast
from config.constants import ERROR_COMMAND, START_MESSAGE
from config.locales import RequestType
from core.dispatcher import Dispatcher
from core.rate_limit import check_cooldown

logger = logging.getLogger(__name__)


class TextCommand(Enum):
    START = "start"
    TODAY = "today"
    RESULTS = "results"


# Optional trailing mention: "@BotName" or a Discord mention "<@123>"
_MENTION = r"(?:@\w+|\s*<@!?\d+>)?"

COMMAND_PATTERNS: list[tuple[re.Pattern, TextCommand]] = [
    (
        re.compile(rf"^/start{_MENTION}(?=\s|$)", re.IGNORECASE),
        TextCommand.START,
    ),
    (
        re.compile(
            rf"^/(?:bigmatch|today){_MENTION}(?=\s|$)", re.IGNORECASE
        ),
        TextCommand.TODAY,
    ),
    (
        re.compile(
            rf"^/(?:result|yesterday){_MENTION}(?=\s|$)", re.IGNORECASE
        ),
        TextCommand.RESULTS,
    ),
]

REQUEST_TYPES = {
    TextCommand.TODAY: RequestType.TODAY_FIXTURES,
    TextCommand.RESULTS: RequestType.YESTERDAY_RESULTS,
}


def match_text_command(content: str) -> TextCommand | None:
    """Find which command, if any, a message starts with."""
    text = content.strip()
    for pattern, command in COMMAND_PATTERNS:
        if pattern.match(text):
            return command
    return None


async def handle_text_command(
    message: discord.Message, dispatcher: Dispatcher
) -> bool:
    """Run the command in ``message`` and reply in the same channel.

    Returns:
        True if the message was a command.
    """
    command = match_text_command(message.content or "")
    if command is None:
        return False

    logger.info(
        f"Text command {command.value} from {message.author}",
        extra={"command": command.value, "user_id": message.author.id},
    )
    try:
        if command is TextCommand.START:
            await message.channel.send(START_MESSAGE)
            return True

        request_type = REQUEST_TYPES[command]
        # Same key as the slash command so both share one cooldown
        key = request_type.value
        if message.guild:
            key = f"{key}:{message.guild.id}"
        reply = check_cooldown(key, message.author.id)
        if reply is not None:
            await message.channel.send(reply)
            return True

        confirmation = await run_broadcast(dispatcher, request_type)
        await message.channel.send(confirmation)
    except Exception as e:
        logger.error(
            f"Error in text command {command.value}: {e}", exc_info=True
        )
        await message.channel.send(ERROR_COMMAND)
    return True
