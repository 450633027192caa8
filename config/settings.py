"""
Configuration settings for the review monitor.

Centralized configuration read from the environment at import time.
"""

import os

# Marketplace
BASE_URL = os.getenv("REVIEW_MONITOR_BASE_URL", "https://funpay.com")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REVIEW_MONITOR_TIMEOUT", "10"))
USER_AGENT = os.getenv(
    "REVIEW_MONITOR_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Account credentials (see Account.from_env)
USER_ID_ENV = "REVIEW_MONITOR_USER_ID"
GOLDEN_KEY_ENV = "REVIEW_MONITOR_GOLDEN_KEY"
PHPSESSID_ENV = "REVIEW_MONITOR_PHPSESSID"

# Scheduling
TICK_INTERVAL_SECONDS = float(os.getenv("REVIEW_MONITOR_INTERVAL", "60"))

# Logging
LOG_LEVEL = os.getenv("REVIEW_MONITOR_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("REVIEW_MONITOR_LOG_FILE", "review_monitor.log")
