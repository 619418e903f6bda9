"""Configuration validation utilities."""

import logging
from typing import Any

from config.constants import CARD_FORMAT_IMAGE, CARD_FORMATS

logger = logging.getLogger(__name__)


def validate_discord_token(token: str) -> bool:
    """Validate Discord bot token format.

    Args:
        token: Discord bot token to validate.

    Returns:
        True if token format is valid, False otherwise.
    """
    # Discord tokens are base64 encoded, typically 59+ chars
    # Should not start with placeholder text
    return (
        len(token) > 50
        and not token.startswith("your_")
        and not token.startswith("YOUR_")
    )


def validate_api_key(key: str) -> bool:
    """Validate API-Football key format (32 hex characters)."""
    return len(key) == 32 and all(c in "0123456789abcdefABCDEF" for c in key)


def validate_channel_id(channel_id: str) -> bool:
    """Validate Discord channel ID format.

    Args:
        channel_id: Discord channel ID to validate.

    Returns:
        True if channel ID format is valid, False otherwise.
    """
    # Discord channel IDs are snowflakes (64-bit integers)
    # Typically 17-20 digits
    return channel_id.isdigit() and len(channel_id) >= 17


def validate_schedule_hour(hour: str) -> bool:
    """Validate schedule hour is 0-23.

    Args:
        hour: Hour value to validate.

    Returns:
        True if hour is valid (0-23), False otherwise.
    """
    if not hour.isdigit():
        return False

    hour_int = int(hour)
    return 0 <= hour_int <= 23


def validate_port(port: str) -> bool:
    """Validate listening port is 1-65535."""
    if not port.isdigit():
        return False
    return 0 < int(port) <= 65535


def validate_cooldown_minutes(minutes: str) -> bool:
    """Validate cooldown is a positive integer.

    Args:
        minutes: Minutes value to validate.

    Returns:
        True if minutes is valid (positive integer), False otherwise.
    """
    if not minutes.isdigit():
        return False

    return int(minutes) > 0


def validate_card_format(card_format: str) -> bool:
    return card_format in CARD_FORMATS


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate all configuration values.

    Args:
        config: Dictionary of configuration key-value pairs.

    Returns:
        List of validation error messages (empty if all valid).

    Example:
        >>> errors = validate_config({"DISCORD_TOKEN": "short"})
        >>> "Invalid DISCORD_TOKEN" in errors[0]
        True
    """
    errors = []

    token = config.get("DISCORD_TOKEN", "")
    if not validate_discord_token(token):
        errors.append(
            "Invalid DISCORD_TOKEN format (must be >50 chars "
            "and not be a placeholder)"
        )

    if not validate_api_key(config.get("FOOTBALL_API_KEY", "")):
        errors.append(
            "Invalid FOOTBALL_API_KEY format (must be 32 hex characters)"
        )

    for key in ("THAI_CHANNEL_ID", "LAO_GROUP_ID"):
        if not validate_channel_id(config.get(key, "")):
            errors.append(
                f"Invalid {key} format (must be numeric and >= 17 digits)"
            )

    if config.get("THAI_CHANNEL_ID") and config.get(
        "THAI_CHANNEL_ID"
    ) == config.get("LAO_GROUP_ID"):
        errors.append("THAI_CHANNEL_ID and LAO_GROUP_ID must differ")

    if not validate_port(config.get("PORT", "3000")):
        errors.append("PORT must be a number between 1 and 65535")

    for key in ("TODAY_HOUR", "RESULTS_HOUR"):
        if key in config and not validate_schedule_hour(config[key]):
            errors.append(f"{key} must be a number between 0 and 23")

    if not validate_card_format(config.get("CARD_FORMAT", "text")):
        errors.append(
            f"CARD_FORMAT must be one of: {', '.join(CARD_FORMATS)}"
        )
    elif config.get("CARD_FORMAT") == CARD_FORMAT_IMAGE and not config.get(
        "FONT_PATH"
    ):
        # Default fonts have no Thai or Lao glyphs
        errors.append("FONT_PATH is required when CARD_FORMAT is image")

    cooldown = config.get("BROADCAST_COOLDOWN_MINUTES", "10")
    if not validate_cooldown_minutes(cooldown):
        errors.append("BROADCAST_COOLDOWN_MINUTES must be a positive integer")

    if errors:
        logger.error(f"Configuration validation failed: {errors}")
    else:
        logger.info("Configuration validation passed")

    return errors
