"""Runtime settings loaded from the environment and the project .env file."""

import logging
import os

from dotenv import load_dotenv, set_key

from config.paths import ENV_FILE

logger = logging.getLogger(__name__)

env_path = ENV_FILE

# Prompts for the setup wizard: (key, question, default)
_SETUP_PROMPTS = [
    ("DISCORD_TOKEN", "Discord bot token", None),
    ("FOOTBALL_API_KEY", "API-Football key", None),
    ("THAI_CHANNEL_ID", "Thai channel ID", None),
    ("LAO_GROUP_ID", "Lao group channel ID", None),
    ("PORT", "Liveness HTTP port", "3000"),
    ("CARD_FORMAT", "Card format (text/image)", "text"),
]

load_dotenv(env_path)


def exists() -> bool:
    """Check whether the .env file exists."""
    return env_path.exists()


def get(key: str, default: str | None = None) -> str | None:
    """Get a setting, falling back to ``default`` when unset."""
    return os.environ.get(key, default)


def get_required(key: str) -> str:
    """Get a setting that must be present.

    Raises:
        ValueError: If the key is missing or empty.
    """
    value = os.environ.get(key)
    if not value:
        raise ValueError(f"Required environment variable {key} is not set")
    return value


def get_int(key: str, default: int) -> int:
    """Get an integer setting, falling back to ``default`` if unparsable."""
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {key}: {raw!r}, using {default}")
        return default


def get_bypass_user_ids() -> set[int]:
    """Get user IDs allowed to skip command cooldowns.

    Returns:
        Set of user IDs, empty if unset or malformed.
    """
    raw = os.environ.get("BYPASS_USER_IDS", "")
    if not raw.strip():
        return set()
    try:
        return {int(part.strip()) for part in raw.split(",") if part.strip()}
    except ValueError:
        logger.warning(f"Invalid BYPASS_USER_IDS format: {raw!r}")
        return set()


def setup_interactive() -> None:
    """Ask for the required settings on the terminal and write .env."""
    print("Big Match bot setup\n")
    env_path.touch(exist_ok=True)
    for key, question, default in _SETUP_PROMPTS:
        suffix = f" [{default}]" if default else ""
        value = input(f"{question}{suffix}: ").strip() or default
        if value:
            set_key(str(env_path), key, value)
            os.environ[key] = value
    logger.info(f"Configuration written to {env_path}")
