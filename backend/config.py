"""
Application Configuration Module

This module holds the runtime settings for the Dairy Accounts backend.
Every value can be overridden through environment variables or a .env file.

The module includes:
- Business timezone used when normalizing stored dates
- Chart label format for the daily series
- Purchase categories that drive product line classification
- Logging and CORS settings
"""

from dotenv import load_dotenv
import os
import pytz

# Load environment variables from .env file
load_dotenv()

# Timezone the dairy operates in. Aware datetimes are converted to this zone
# and then treated as naive local wall-clock values.
DAIRY_TIMEZONE_NAME = os.getenv("DAIRY_TIMEZONE", "Asia/Kolkata")
DAIRY_TIMEZONE = pytz.timezone(DAIRY_TIMEZONE_NAME)

# Label printed for each day of a chart series, e.g. "Oct 05"
CHART_DATE_FORMAT = os.getenv("CHART_DATE_FORMAT", "%b %d")

# Purchase categories
FEED_PURCHASE_CATEGORY = os.getenv("FEED_PURCHASE_CATEGORY", "Pashu Aahar")
GHEE_PURCHASE_CATEGORY = os.getenv("GHEE_PURCHASE_CATEGORY", "Ghee")

# Logging
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated list of allowed CORS origins
CORS_ALLOWED_ORIGINS = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:9002,http://127.0.0.1:9002,http://localhost:3000"
)
