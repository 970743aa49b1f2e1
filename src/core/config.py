"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = PROJECT_ROOT / "data" / "db" / "stockroom-calendar.db"

# =============================================================================
# REMOTE INVENTORY API
# =============================================================================

INVENTORY_API_URL = os.environ.get("INVENTORY_API_URL", "http://localhost:4000")
REQUEST_TIMEOUT_SECONDS = float(os.environ.get("REQUEST_TIMEOUT_SECONDS", "10"))

# =============================================================================
# HOLIDAY API (data.go.kr special day info service)
# =============================================================================

# Either the encoded or the decoded key from data.go.kr; it is decoded before sending
HOLIDAY_API_KEY = os.environ.get("HOLIDAY_API_KEY", "")
HOLIDAY_API_BASE_URL = os.environ.get(
    "HOLIDAY_API_BASE_URL",
    "https://apis.data.go.kr/B090041/openapi/service/SpcdeInfoService/getHoliDeInfo",
)

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

CALENDAR_TIMEZONE = ZoneInfo(os.environ.get("CALENDAR_TIMEZONE", "Asia/Seoul"))
DEFAULT_AUTHOR = os.environ.get("DEFAULT_AUTHOR", "")
DEFAULT_EVENT_COLOR = "#1a73e8"

GRID_CELLS = 42  # 6 rows x 7 columns, Sunday first
MINUTES_PER_DAY = 1440
FORM_TIME_STEP_MINUTES = 15

WEEKDAY_LABELS = ["일", "월", "화", "수", "목", "금", "토"]
VIEW_LABELS = {"month": "월", "week": "주", "day": "일"}

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
