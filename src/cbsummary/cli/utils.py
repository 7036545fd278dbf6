# src/cbsummary/cli/utils.py
from datetime import datetime
from typing import Optional

from ..core.config import config


def default_output_path(now: Optional[datetime] = None) -> str:
    """Returns `cbsummary.out.<YYYY-MM-DD-HH:MM:SS>` for the given (default: current) local time."""
    now = now or datetime.now()
    return f"{config.OUTPUT_PREFIX}.{now.strftime('%Y-%m-%d-%H:%M:%S')}"
