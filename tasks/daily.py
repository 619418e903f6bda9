"""Scheduled daily broadcasts."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from config.constants import TIMEZONE
from config.locales import RequestType
from core.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


async def daily_broadcast(
    dispatcher: Dispatcher, request_type: RequestType
) -> None:
    """Scheduled task posting a big match card to both destinations.

    Args:
        dispatcher: Delivery orchestrator.
        request_type: Today's fixtures or yesterday's results.
    """
    try:
        logger.info(f"Daily {request_type.value} broadcast started")
        outcomes = await dispatcher.broadcast(request_type)
        logger.info(
            f"Daily {request_type.value} broadcast finished: "
            f"{[outcome.value for outcome in outcomes]}"
        )
    except Exception as e:
        logger.error(
            f"Error in daily {request_type.value} broadcast: {e}",
            exc_info=True,
        )


def create_scheduler(
    dispatcher: Dispatcher, today_hour: str, results_hour: str
) -> AsyncIOScheduler:
    """Build the scheduler with both daily jobs (not started).

    Args:
        dispatcher: Delivery orchestrator.
        today_hour: Hour (TIMEZONE) for today's fixtures.
        results_hour: Hour (TIMEZONE) for yesterday's results.
    """
    scheduler = AsyncIOScheduler(timezone=TIMEZONE)

    scheduler.add_job(
        daily_broadcast,
        CronTrigger(hour=today_hour, minute=0, timezone=TIMEZONE),
        args=[dispatcher, RequestType.TODAY_FIXTURES],
        id="today_fixtures",
        replace_existing=True,
    )
    scheduler.add_job(
        daily_broadcast,
        CronTrigger(hour=results_hour, minute=0, timezone=TIMEZONE),
        args=[dispatcher, RequestType.YESTERDAY_RESULTS],
        id="yesterday_results",
        replace_existing=True,
    )
    return scheduler
