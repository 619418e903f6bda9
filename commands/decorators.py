"""Decorators for Discord command handlers."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

import discord

logger = logging.getLogger(__name__)


def async_command(*, error_message: str):
    """Decorator for async Discord command handlers.

    Logs any exception raised by the handler and answers the invoker with
    ``error_message`` instead of letting it reach discord.py.

    Args:
        error_message: Error message to send if command fails.

    Example:
        @async_command(error_message="Failed to fetch data")
        async def my_command(interaction: discord.Interaction) -> None:
            result = await some_async_operation()
            await interaction.followup.send(result)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(
            interaction: discord.Interaction, *args: Any, **kwargs: Any
        ) -> None:
            try:
                await func(interaction, *args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error in {func.__name__}: {e}",
                    exc_info=True,
                    extra={"command": func.__name__},
                )
                await interaction.followup.send(error_message)

        return wrapper

    return decorator
