"""
Utility functions for SimLab

Provides logging setup, ID generation, numeric helpers and the exception
hierarchy shared by the scenario, report and lab note modules.
"""

import logging
import math
import uuid
from pathlib import Path
from typing import Optional


# ═══════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging for SimLab"""
    level = getattr(logging, log_level.upper())

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


# ═══════════════════════════════════════════════════════════════════
# ID GENERATION
# ═══════════════════════════════════════════════════════════════════

def generate_note_id() -> str:
    """Generate a random identifier for a lab note"""
    return uuid.uuid4().hex


# ═══════════════════════════════════════════════════════════════════
# NUMERIC HELPERS
# ═══════════════════════════════════════════════════════════════════

def clamp01(value: float) -> float:
    """Clamp a value into [0, 1]"""
    return max(0.0, min(1.0, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up.

    Python's round() uses banker's rounding (round(72.5) == 72); scores are
    published with half-up rounding so 72.5 becomes 73.
    """
    return int(math.floor(value + 0.5))


# ═══════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════

class SimLabError(Exception):
    """Base exception for SimLab"""
    pass


class DataLoadError(SimLabError):
    """Scenario dataset could not be read or validated"""
    pass


class StorageUnavailableError(SimLabError):
    """Lab note persistence is disabled or unreachable"""
    pass


class TemplateLookupError(SimLabError):
    """No report template exists, not even for the default scenario"""
    pass
