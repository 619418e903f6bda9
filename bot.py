"""Big Match Bot - Main entry point.

A Discord bot that posts the day's big football matches and the previous
night's results to a Thai channel and a Lao channel.
"""

import logging
from dataclasses import dataclass

import discord
from aiohttp import web
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from discord.ext import commands

from commands.bigmatch import bigmatch_command, results_command, start_command
from commands.help import help_command
from commands.text import handle_text_command
from config import settings
from config.constants import (
    CARD_FORMAT_TEXT,
    DEFAULT_PORT,
    DEFAULT_RESULTS_HOUR,
    DEFAULT_TODAY_HOUR,
    ERROR_COMMAND,
    TIMEZONE,
)
from config.paths import LOG_FILE
from config.validation import validate_config
from core.dispatcher import Destinations, Dispatcher
from core.fixtures import FixtureClient
from core.health_check import start_health_server
from core.logging_config import configure_logging
from core.transport import DiscordTransport
from tasks.daily import create_scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BotConfig:
    token: str
    football_api_key: str
    thai_channel_id: int
    lao_group_id: int
    port: int
    card_format: str
    today_hour: str
    results_hour: str


def load_configuration() -> BotConfig:
    """Load configuration from .env file or run setup wizard.

    Raises:
        ValueError: If configuration is missing or invalid.
    """
    if not settings.exists() and not settings.get("DISCORD_TOKEN"):
        logger.info("No configuration found, running setup wizard")
        settings.setup_interactive()

    config = {
        "DISCORD_TOKEN": settings.get("DISCORD_TOKEN", ""),
        "FOOTBALL_API_KEY": settings.get("FOOTBALL_API_KEY", ""),
        "THAI_CHANNEL_ID": settings.get("THAI_CHANNEL_ID", ""),
        "LAO_GROUP_ID": settings.get("LAO_GROUP_ID", ""),
        "PORT": settings.get("PORT", DEFAULT_PORT),
        "CARD_FORMAT": settings.get("CARD_FORMAT", CARD_FORMAT_TEXT),
        "FONT_PATH": settings.get("FONT_PATH", ""),
        "TODAY_HOUR": settings.get("TODAY_HOUR", DEFAULT_TODAY_HOUR),
        "RESULTS_HOUR": settings.get("RESULTS_HOUR", DEFAULT_RESULTS_HOUR),
        "BROADCAST_COOLDOWN_MINUTES": settings.get(
            "BROADCAST_COOLDOWN_MINUTES", "10"
        ),
    }
    validation_errors = validate_config(config)
    if validation_errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(
            f"  - {err}" for err in validation_errors
        )
        logger.error(error_msg)
        raise ValueError(error_msg)

    logger.info("Configuration loaded and validated successfully")
    return BotConfig(
        token=config["DISCORD_TOKEN"],
        football_api_key=config["FOOTBALL_API_KEY"],
        thai_channel_id=int(config["THAI_CHANNEL_ID"]),
        lao_group_id=int(config["LAO_GROUP_ID"]),
        port=int(config["PORT"]),
        card_format=config["CARD_FORMAT"],
        today_hour=config["TODAY_HOUR"],
        results_hour=config["RESULTS_HOUR"],
    )


async def safe_defer(interaction: discord.Interaction) -> bool:
    """Safely defer an interaction with fallback error handling.

    Returns:
        True if defer succeeded, False if it failed.
    """
    try:
        await interaction.response.defer()
        return True
    except discord.NotFound:
        logger.warning(
            f"Interaction {interaction.id} expired (10062). "
            "This usually means network latency >3s."
        )
        return False
    except discord.HTTPException as e:
        logger.error(f"HTTP error deferring interaction {interaction.id}: {e}")
        return False


class BigMatchBot(commands.Bot):
    """Discord bot wiring commands, daily jobs and the liveness server."""

    def __init__(self, config: BotConfig):
        intents = discord.Intents.default()
        # Needed for plain-text commands such as "/today@BigMatchBot"
        intents.message_content = True
        super().__init__(
            # No prefix commands are registered
            command_prefix=commands.when_mentioned,
            description="Big Match โปรแกรมและผลบอลคู่ใหญ่",
            intents=intents,
        )
        self.config = config
        self.dispatcher = Dispatcher(
            transport=DiscordTransport(self),
            fixture_client=FixtureClient(config.football_api_key),
            destinations=Destinations(
                thai_channel_id=config.thai_channel_id,
                lao_group_id=config.lao_group_id,
            ),
            card_format=config.card_format,
        )
        self.scheduler: AsyncIOScheduler | None = None
        self.health_runner: web.AppRunner | None = None

    async def setup_hook(self) -> None:
        register_commands(self)

        self.scheduler = create_scheduler(
            self.dispatcher, self.config.today_hour, self.config.results_hour
        )
        self.scheduler.start()
        logger.info(
            f"Scheduler started: fixtures at {self.config.today_hour}:00, "
            f"results at {self.config.results_hour}:00 ({TIMEZONE})"
        )

        self.health_runner = await start_health_server(self.config.port)

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user} (ID: {self.user.id})")
        try:
            synced = await self.tree.sync()
            logger.info(f"Synced {len(synced)} slash command(s)")
        except discord.HTTPException as e:
            logger.error(f"Failed to sync commands: {e}")

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        await handle_text_command(message, self.dispatcher)

    async def close(self) -> None:
        logger.info("Shutting down")
        if self.scheduler is not None and self.scheduler.running:
            self.scheduler.shutdown(wait=False)
        if self.health_runner is not None:
            await self.health_runner.cleanup()
        await super().close()
        logger.info("Bot shutdown complete")


def register_commands(bot: BigMatchBot) -> None:
    """Register slash commands on the bot's command tree."""

    @bot.tree.command(name="start", description="ตรวจสอบว่าบอททำงานอยู่")
    async def start(interaction: discord.Interaction) -> None:
        if not await safe_defer(interaction):
            return
        await start_command(interaction)

    @bot.tree.command(name="bigmatch", description="ส่งโปรแกรม Big Match วันนี้")
    async def bigmatch(interaction: discord.Interaction) -> None:
        if not await safe_defer(interaction):
            return
        await bigmatch_command(interaction, bot.dispatcher)

    @bot.tree.command(name="today", description="ส่งโปรแกรม Big Match วันนี้")
    async def today(interaction: discord.Interaction) -> None:
        if not await safe_defer(interaction):
            return
        await bigmatch_command(interaction, bot.dispatcher)

    @bot.tree.command(name="result", description="ส่งผล Big Match เมื่อคืน")
    async def result(interaction: discord.Interaction) -> None:
        if not await safe_defer(interaction):
            return
        await results_command(interaction, bot.dispatcher)

    @bot.tree.command(name="yesterday", description="ส่งผล Big Match เมื่อคืน")
    async def yesterday(interaction: discord.Interaction) -> None:
        if not await safe_defer(interaction):
            return
        await results_command(interaction, bot.dispatcher)

    @bot.tree.command(name="help", description="แสดงคำสั่งทั้งหมด")
    async def help_(interaction: discord.Interaction) -> None:
        if not await safe_defer(interaction):
            return
        await help_command(interaction)

    @bot.tree.error
    async def on_app_command_error(
        interaction: discord.Interaction,
        error: discord.app_commands.AppCommandError,
    ) -> None:
        """Global error handler for slash commands."""
        if isinstance(error, discord.app_commands.CommandNotFound):
            return

        logger.error(f"App command error: {error}", exc_info=True)
        try:
            if not interaction.response.is_done():
                await interaction.response.send_message(
                    ERROR_COMMAND, ephemeral=True
                )
            else:
                await interaction.followup.send(
                    ERROR_COMMAND, ephemeral=True
                )
        except discord.HTTPException as e:
            logger.error(f"Failed to send error message: {e}")


def main() -> None:
    configure_logging(LOG_FILE)
    config = load_configuration()
    bot = BigMatchBot(config)
    try:
        # Logging is already configured above
        bot.run(config.token, log_handler=None)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    finally:
        logger.info("Bot stopped")


if __name__ == "__main__":
    main()
