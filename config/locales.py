"""Per-locale strings and assets.

Every piece of text that differs between the Thai channel and the Lao
group lives in ``LOCALES``, keyed by :class:`Locale`.
"""

from dataclasses import dataclass
from enum import Enum


class Locale(str, Enum):
    """Destination locale."""

    TH = "th"
    LO = "lo"


class RequestType(str, Enum):
    """What a delivery reports on."""

    TODAY_FIXTURES = "today-fixtures"
    YESTERDAY_RESULTS = "yesterday-results"

    @property
    def day_offset(self) -> int:
        return 0 if self is RequestType.TODAY_FIXTURES else -1


@dataclass(frozen=True)
class LinkButton:
    """Clickable URL button attached to a card."""

    label: str
    url: str


@dataclass(frozen=True)
class LocaleStrings:
    brand_header: str
    footer: str
    titles: dict[RequestType, str]
    no_matches: str
    buttons: tuple[tuple[LinkButton, ...], ...]
    # pendulum format tokens for the date in the image card header
    date_format: str


LOCALES: dict[Locale, LocaleStrings] = {
    Locale.TH: LocaleStrings(
        brand_header="✨ Mvphero777 ✨",
        footer=(
            "🟢 Mvphero777 ค่าน้ำดีที่สุด มีครบ จบทุกลีก "
            "🏧 ฝาก-ถอน รวดเร็วทันใจ"
        ),
        titles={
            RequestType.TODAY_FIXTURES: "🔥 โปรแกรม Big Match วันนี้ 🔥",
            RequestType.YESTERDAY_RESULTS: "✅ ผลบอล Big Match เมื่อคืน ✅",
        },
        no_matches="❌ วันนี้ไม่มี Big Match ครับ",
        buttons=(
            (
                LinkButton("🟢 สมัครเลย", "https://bit.ly/4h50mQV"),
                LinkButton("📞 ติดต่อแอดมิน", "https://bit.ly/40Wq98w"),
            ),
            (LinkButton("📲 ทางเข้าเว็บ", "https://bit.ly/4fQ8Dac"),),
        ),
        date_format="DD/MM/YYYY",
    ),
    Locale.LO: LocaleStrings(
        brand_header="✨ Winlaos168 ✨",
        footer=(
            "🟢 Winlaos168  ✔️ໂປຣລູກຄ້າໃໝ່ 🏧  "
            "ຮ້ານເຮົາມີຄົບທຸກຢ່າງທີ່ຕ້ອງການ 📲"
        ),
        titles={
            RequestType.TODAY_FIXTURES: "🔥 ໂປຣແກຣມ Big Match ມື້ນີ້ 🔥",
            RequestType.YESTERDAY_RESULTS: "✅ ຜົນ Big Match ມື້ວານ ✅",
        },
        no_matches="❌ ມື້ນີ້ບໍ່ມີ Big Match",
        buttons=(
            (
                LinkButton(
                    "💬 Fb Messenger", "https://m.me/262413013632590"
                ),
                LinkButton("💚 Line", "https://line.me/ti/p/@winlaos168"),
            ),
            (LinkButton("📱 ສະໝັກ", "https://wa.me/8562076355496"),),
        ),
        date_format="DD-MM-YYYY",
    ),
}


def strings_for(locale: Locale) -> LocaleStrings:
    return LOCALES[locale]


def title_for(locale: Locale, request_type: RequestType) -> str:
    """Get the card title for a locale and request type."""
    return LOCALES[locale].titles[request_type]
