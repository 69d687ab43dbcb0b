"""
Configuration constants for the Region Routes project.

All paths, dataset settings, and tunable parameters are defined here.
Overrides are read from environment variables (optionally via a .env file).
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of region_routes/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Data directory (contains the region and adjacency datasets)
DATA_DIR = Path(os.environ.get("REGION_ROUTES_DATA_DIR", PROJECT_ROOT / "data"))

# Individual data file names and paths
REGIONS_FILENAME = "regions.csv"
ADJACENCY_FILENAME = "adjacency.csv"
REGIONS_PATH = DATA_DIR / REGIONS_FILENAME
ADJACENCY_PATH = DATA_DIR / ADJACENCY_FILENAME

# =============================================================================
# Dataset Format
# =============================================================================

DATASET_ENCODING = "utf-8"

# Separator between fields of a record
FIELD_SEPARATOR = ","

# Lines starting with this prefix are ignored by the reader
COMMENT_PREFIX = "#"

# Number of fields in a region record: name,group-label,cost
REGION_FIELD_COUNT = 3

# =============================================================================
# Session Configuration
# =============================================================================

# How many times a region name is prompted for before the command is dropped
MAX_PROMPT_ATTEMPTS = 3

PROMPT = "> "

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files(data_dir: Path = DATA_DIR) -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "regions": (data_dir / REGIONS_FILENAME).exists(),
        "adjacency": (data_dir / ADJACENCY_FILENAME).exists(),
    }


def get_missing_data_files(data_dir: Path = DATA_DIR) -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files(data_dir)
    return [name for name, exists in status.items() if not exists]


def resolve_log_level(name: str = LOG_LEVEL) -> int:
    """Map a level name (any case) to a logging constant, INFO if unknown."""
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO
