"""Delivery orchestration: fetch, select, render and send one card."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

import pendulum

from config.constants import CARD_FORMAT_TEXT, ERROR_FETCH_FAILED
from config.locales import Locale, RequestType, strings_for, title_for
from core.fixtures import FixtureClient
from core.render import ImageCard, RenderRequest, TextCard, render_card
from core.selector import select_big_matches
from core.transport import Transport
from core.utils.date_parser import target_date

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    SENT = "sent"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class Destinations:
    """The two configured destinations.

    The Lao group gets the Lao locale; any other id is treated as Thai.
    """

    thai_channel_id: int
    lao_group_id: int

    def locale_for(self, destination_id: int) -> Locale:
        return Locale.LO if destination_id == self.lao_group_id else Locale.TH

    def all(self) -> tuple[int, int]:
        return self.thai_channel_id, self.lao_group_id


def _now() -> pendulum.DateTime:
    return pendulum.now()


class Dispatcher:
    """Single entry point for timer- and command-triggered deliveries.

    Args:
        transport: Chat transport used to send cards and notices.
        fixture_client: Source of fixtures by date.
        destinations: Configured Thai and Lao destinations.
        card_format: ``text`` or ``image``.
    """

    def __init__(
        self,
        transport: Transport,
        fixture_client: FixtureClient,
        destinations: Destinations,
        card_format: str = CARD_FORMAT_TEXT,
    ):
        self.transport = transport
        self.fixture_client = fixture_client
        self.destinations = destinations
        self.card_format = card_format

    async def _send_card(
        self, destination_id: int, request: RenderRequest
    ) -> None:
        card = await render_card(request, self.card_format)
        buttons = strings_for(request.locale).buttons
        if isinstance(card, ImageCard):
            await self.transport.send_image(
                destination_id, card.data, card.filename, buttons=buttons
            )
        elif isinstance(card, TextCard):
            await self.transport.send_text(
                destination_id, card.text, buttons=buttons
            )

    async def deliver(
        self, destination_id: int, request_type: RequestType
    ) -> Outcome:
        """Deliver one big match card to one destination.

        Never raises: failures are logged and answered with a fixed
        notice to the destination.

        Returns:
            Which branch was taken.
        """
        locale = self.destinations.locale_for(destination_id)
        log_extra = {
            "destination": destination_id,
            "locale": locale.value,
            "request_type": request_type.value,
        }
        try:
            now = _now()
            date = target_date(request_type.day_offset, now.date())
            logger.info(
                f"Delivering {request_type.value} for {date} to "
                f"{destination_id} ({locale.value})",
                extra=log_extra,
            )

            fixtures = await self.fixture_client.fetch_fixtures(date)
            matches = select_big_matches(fixtures)

            if not matches:
                logger.info(
                    f"No big matches for {date}, sending notice",
                    extra=log_extra,
                )
                await self.transport.send_text(
                    destination_id, strings_for(locale).no_matches
                )
                return Outcome.EMPTY

            request = RenderRequest(
                matches=tuple(matches),
                title=title_for(locale, request_type),
                locale=locale,
                now=now,
            )
            await self._send_card(destination_id, request)
            logger.info(
                f"Delivered {len(matches)} matches to {destination_id}",
                extra=log_extra,
            )
            return Outcome.SENT

        except Exception as e:
            logger.error(
                f"Delivery to {destination_id} failed: {e}",
                exc_info=True,
                extra=log_extra,
            )
            try:
                await self.transport.send_text(
                    destination_id, ERROR_FETCH_FAILED
                )
            except Exception as notice_error:
                logger.error(
                    f"Could not send failure notice to {destination_id}: "
                    f"{notice_error}",
                    extra=log_extra,
                )
            return Outcome.FAILED

    async def broadcast(self, request_type: RequestType) -> list[Outcome]:
        """Deliver to both destinations concurrently."""
        return list(
            await asyncio.gather(
                *(
                    self.deliver(destination_id, request_type)
                    for destination_id in self.destinations.all()
                )
            )
        )
