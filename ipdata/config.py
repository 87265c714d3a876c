"""Package constants and CLI settings."""

import logging

APP_NAME = "ipdata"
VERSION = "0.1.0"

# Upstream limit on IPs per bulk request
MAX_BULK_IPS = 100

# Logging
DEFAULT_LOG_LEVEL = logging.WARNING
VERBOSE_LOG_LEVEL = logging.DEBUG
