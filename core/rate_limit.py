"""Cooldowns for the broadcast commands."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from functools import wraps
from typing import Any

import discord

from config import settings
from config.constants import ERROR_RATE_LIMITED

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN_MINUTES = 10


class RateLimiter:
    """In-memory tracker of the last call time per key."""

    def __init__(self):
        self._last_calls: dict[str, datetime] = {}

    def is_allowed(self, key: str, min_interval: timedelta) -> bool:
        """Check if an action is allowed, recording the call if it is.

        Args:
            key: Unique key for the rate-limited action.
            min_interval: Minimum time between allowed calls.

        Returns:
            True if action is allowed, False if rate limited.
        """
        now = datetime.now()
        last_call = self._last_calls.get(key)

        if last_call is None or (now - last_call) >= min_interval:
            self._last_calls[key] = now
            return True

        return False

    def get_remaining_time(self, key: str, min_interval: timedelta) -> int:
        """Get remaining seconds until the key may be used again."""
        last_call = self._last_calls.get(key)
        if last_call is None:
            return 0

        remaining = min_interval - (datetime.now() - last_call)
        return max(0, int(remaining.total_seconds()))

    def reset(self, key: str) -> None:
        self._last_calls.pop(key, None)


_rate_limiter = RateLimiter()


def _format_remaining_time(seconds: int) -> str:
    """Format remaining seconds as "2h", "45m" or "30s"."""
    if seconds >= 3600:
        return f"{seconds // 3600}h"
    elif seconds >= 60:
        return f"{seconds // 60}m"
    else:
        return f"{seconds}s"


def broadcast_cooldown() -> timedelta:
    """Cooldown between broadcasts, from BROADCAST_COOLDOWN_MINUTES."""
    minutes = settings.get_int(
        "BROADCAST_COOLDOWN_MINUTES", DEFAULT_COOLDOWN_MINUTES
    )
    return timedelta(minutes=max(minutes, 0))


def check_cooldown(
    key: str, user_id: int, message: str = ERROR_RATE_LIMITED
) -> str | None:
    """Record a broadcast attempt against ``key`` if its cooldown allows.

    Users in BYPASS_USER_IDS always pass and leave no trace.

    Args:
        key: Limiter key, e.g. "today-fixtures:1234".
        user_id: ID of the invoking user.
        message: Reply prefix when rate limited.

    Returns:
        None if allowed, otherwise the reply with the time left.
    """
    if user_id in settings.get_bypass_user_ids():
        logger.info(f"User {user_id} bypassing cooldown for {key}")
        return None

    interval = broadcast_cooldown()
    if _rate_limiter.is_allowed(key, interval):
        return None

    remaining = _rate_limiter.get_remaining_time(key, interval)
    formatted_time = _format_remaining_time(remaining)
    logger.info(
        f"Cooldown hit by user {user_id} (key={key}, "
        f"{formatted_time} left)"
    )
    return f"{message} ({formatted_time})"


def rate_limit(
    *,
    key: str | None = None,
    per_guild: bool = True,
    message: str = ERROR_RATE_LIMITED,
):
    """Decorator limiting how often a command may run.

    Broadcast commands post to the same two destinations whoever calls
    them, so the cooldown is shared per guild rather than per user.

    Args:
        key: Shared key for commands that should share one cooldown.
            Defaults to the function name.
        per_guild: If True, each guild has its own cooldown.
        message: Reply sent when rate limited.

    Example:
        @rate_limit(key="broadcast")
        async def my_command(interaction: discord.Interaction) -> None:
            ...
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(
            interaction: discord.Interaction, *args: Any, **kwargs: Any
        ) -> Any:
            key_parts = [key or func.__name__]
            if per_guild and interaction.guild_id:
                key_parts.append(str(interaction.guild_id))

            reply = check_cooldown(
                ":".join(key_parts), interaction.user.id, message
            )
            if reply is not None:
                await interaction.followup.send(reply, ephemeral=True)
                return None

            return await func(interaction, *args, **kwargs)

        return wrapper

    return decorator
