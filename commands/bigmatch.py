"""Discord slash commands for big match broadcasts."""

import logging

import discord

from commands.decorators import async_command
from config.constants import (
    ERROR_COMMAND,
    START_MESSAGE,
    SUCCESS_RESULTS_BROADCAST,
    SUCCESS_TODAY_BROADCAST,
)
from config.locales import RequestType
from core.dispatcher import Dispatcher
from core.rate_limit import rate_limit

logger = logging.getLogger(__name__)

CONFIRMATIONS = {
    RequestType.TODAY_FIXTURES: SUCCESS_TODAY_BROADCAST,
    RequestType.YESTERDAY_RESULTS: SUCCESS_RESULTS_BROADCAST,
}


async def run_broadcast(
    dispatcher: Dispatcher, request_type: RequestType
) -> str:
    """Broadcast to both destinations and return the confirmation text."""
    outcomes = await dispatcher.broadcast(request_type)
    logger.info(
        f"Broadcast {request_type.value} finished: "
        f"{[outcome.value for outcome in outcomes]}"
    )
    return CONFIRMATIONS[request_type]


@async_command(error_message=ERROR_COMMAND)
async def start_command(interaction: discord.Interaction) -> None:
    """Handle /start slash command."""
    await interaction.followup.send(START_MESSAGE)


@async_command(error_message=ERROR_COMMAND)
@rate_limit(key=RequestType.TODAY_FIXTURES.value)
async def bigmatch_command(
    interaction: discord.Interaction, dispatcher: Dispatcher
) -> None:
    """Handle /bigmatch and /today slash commands.

    Args:
        interaction: Discord interaction from slash command.
        dispatcher: Delivery orchestrator.
    """
    logger.info(f"Today broadcast triggered by {interaction.user}")
    confirmation = await run_broadcast(
        dispatcher, RequestType.TODAY_FIXTURES
    )
    await interaction.followup.send(confirmation)


@async_command(error_message=ERROR_COMMAND)
@rate_limit(key=RequestType.YESTERDAY_RESULTS.value)
async def results_command(
    interaction: discord.Interaction, dispatcher: Dispatcher
) -> None:
    """Handle /result and /yesterday slash commands.

    Args:
        interaction: Discord interaction from slash command.
        dispatcher: Delivery orchestrator.
    """
    logger.info(f"Results broadcast triggered by {interaction.user}")
    confirmation = await run_broadcast(
        dispatcher, RequestType.YESTERDAY_RESULTS
    )
    await interaction.followup.send(confirmation)
