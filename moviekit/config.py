"""
Configuration values for moviekit.

Genre rules and print layout are fixed at import time; logging settings
come from environment variables.
"""

import os

# Log level configuration via environment variable
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Development mode switches the log renderer to human-readable console output
DEBUG = os.getenv("DEBUG") == "1" or os.getenv("MOVIEKIT_ENV") == "development"

# Genres accepted by the genre mutator
ALLOWED_GENRES = ("Animation", "Family", "Action", "Comedy", "Drama", "Sci-Fi")

# Movies released before this year are classics
CLASSIC_YEAR_CUTOFF = 2000

PLACEHOLDER = "N/A"
SEPARATOR = "-" * 40
