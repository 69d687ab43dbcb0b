"""
Raw dataset reading.
"""

from __future__ import annotations

import logging
from pathlib import Path

from region_routes.config import COMMENT_PREFIX, DATASET_ENCODING

logger = logging.getLogger(__name__)


def read_dataset(path: Path | str) -> list[str]:
    """
    Read a line-oriented dataset, dropping blank and comment lines.

    Args:
        path: Path to the dataset file

    Returns:
        Record lines in file order, without trailing newlines

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    logger.info(f"Reading dataset from {path}...")
    with open(path, encoding=DATASET_ENCODING) as f:
        lines = [
            line.rstrip("\r\n")
            for line in f
            if line.strip() and not line.lstrip().startswith(COMMENT_PREFIX)
        ]
    logger.info(f"Read {len(lines):,} records from {path.name}")
    return lines
