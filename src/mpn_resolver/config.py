"""Configuration for the MPN resolver and its MCP server."""

import os

# Server settings
HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))

# Compatibility verdicts
MIN_COMPATIBILITY_SCORE = float(os.getenv("MIN_COMPATIBILITY_SCORE", "0.6"))
VALUE_MATCH_TOLERANCE = float(os.getenv("VALUE_MATCH_TOLERANCE", "0.02"))  # nominal value slack when a tolerance is unknown
RF_GAIN_TOLERANCE_DB = float(os.getenv("RF_GAIN_TOLERANCE_DB", "3.0"))

# Input limits for the tool surface
MAX_MPN_LENGTH = 100
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "2000"))
