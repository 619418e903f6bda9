"""Immutable constants for the Big Match bot."""

# Regional timezone for schedules and kickoff times
TIMEZONE = "Asia/Bangkok"

# API-Football
FOOTBALL_API_URL = "https://v3.football.api-sports.io"
FOOTBALL_API_KEY_HEADER = "x-apisports-key"

# Order matters: position is the league's prominence weight
BIG_LEAGUES = [
    "UEFA Champions League",
    "UEFA Europa League",
    "UEFA Europa Conference League",
    "Premier League",
    "La Liga",
    "Serie A",
    "Bundesliga",
    "Ligue 1",
]

BIG_TEAMS = frozenset(
    {
        "Manchester United",
        "Manchester City",
        "Arsenal",
        "Chelsea",
        "Liverpool",
        "Tottenham",
        "Real Madrid",
        "Barcelona",
        "Atletico Madrid",
        "Bayern Munich",
        "Borussia Dortmund",
        "Paris Saint Germain",
        "Juventus",
        "Inter",
        "AC Milan",
    }
)

# Weight for a league missing from BIG_LEAGUES
UNKNOWN_LEAGUE_WEIGHT = 999

# Maximum matches per card
MAX_MATCHES = 5

# Card formats
CARD_FORMAT_TEXT = "text"
CARD_FORMAT_IMAGE = "image"
CARD_FORMATS = (CARD_FORMAT_TEXT, CARD_FORMAT_IMAGE)

# Schedule defaults (hour of day, TIMEZONE)
DEFAULT_TODAY_HOUR = "16"
DEFAULT_RESULTS_HOUR = "8"

# Liveness endpoint
DEFAULT_PORT = "3000"
HEALTH_RESPONSE = "Football Bot is running ✅"

# Command messages (operator-facing, Thai)
START_MESSAGE = "สวัสดีครับ! ⚽️ Football Bot พร้อมทำงานแล้ว"
SUCCESS_TODAY_BROADCAST = "✅ ส่งเข้า Channel (ไทย) และ Group (ลาว) แล้ว"
SUCCESS_RESULTS_BROADCAST = (
    "✅ ส่งผล Big Match เมื่อคืน เข้า Channel (ไทย) และ Group (ลาว) แล้วครับ"
)
ERROR_COMMAND = "❌ เกิดข้อผิดพลาดในการทำงานของคำสั่ง"
ERROR_RATE_LIMITED = "⏳ เพิ่งส่งไปแล้ว กรุณารอสักครู่"

# Sent to any destination when a delivery fails
ERROR_FETCH_FAILED = "❌ ไม่สามารถดึงข้อมูลได้"
