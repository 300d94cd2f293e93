"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
TIME_BLOCK_DATA_FILE = Path(
    os.getenv("TIME_BLOCK_DATA_FILE", str(DATA_DIR / "time_blocks.csv"))
)

# Storage backend for time blocks: 'csv' or 'memory'
TIME_BLOCK_STORAGE = os.getenv("TIME_BLOCK_STORAGE", "csv").lower()

# Hour band thresholds (upper bounds, exclusive)
HOUR_BAND_THRESHOLDS = {
    "regular": 8.0,
    "warning": 9.0,
    "overtime": 10.0,
}

# Weekly hours after which time counts as overtime
WEEKLY_OVERTIME_HOURS = 40.0

# Harvest calendar settings
HARVEST_CALENDAR_SETTINGS = {
    "weeks_per_year": 52,
    "best_window_weeks": 3,
    "growing_season_start_week": 10,
    "growing_season_end_week": 40,
}

# API settings
API_SETTINGS = {
    "title": "Farm Harvest Timing API",
    "description": "API for harvest window estimation and worker time tracking",
    "version": "1.0.0",
}

# Logging settings
LOG_SETTINGS = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
