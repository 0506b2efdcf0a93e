import logging
from pathlib import Path

from .constants import FPS_DENOMINATOR, LOG_SEPARATOR_CHAR, LOG_SEPARATOR_WIDTH


def ensure_dir(path: Path) -> Path:
    """Create directory (and parents) if it doesn't exist, then return it.

    Args:
        path: Directory path to create

    Returns:
        The same path, for chaining
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def format_frame_rate(frame_rate: str) -> str:
    """Format a frames-per-1000-seconds string as fps for display.

    "29970" -> "29.97", "24000" -> "24". Values that are not integers are
    returned unchanged.

    Args:
        frame_rate: Frame rate string as stored in the catalog

    Returns:
        Human-readable frame rate
    """
    try:
        value = int(frame_rate)
    except ValueError:
        return frame_rate
    whole, frac = divmod(value, FPS_DENOMINATOR)
    if frac == 0:
        return str(whole)
    return f"{whole}.{frac:03d}".rstrip("0")


def log_section(log: logging.Logger, title: str) -> None:
    """Log a visual section separator with a title."""
    separator = LOG_SEPARATOR_CHAR * LOG_SEPARATOR_WIDTH
    log.info("")
    log.info(separator)
    log.info(" %s", title.upper())
    log.info(separator)
