"""
Configuration & Global Constants
================================
This module serves as the central registry for package-wide constants.

Values can be overridden through environment variables so that callers
(scripts, notebooks, test runs) do not have to patch the code.

Exports:
    LOGGER_NAME (str): Name of the package logger namespace.
    LOG_LEVEL (int): Default level used by `setup_logging`.
    DEFAULT_POLYLINE_SEGMENTS (int): Sampling resolution of curved outlines.
"""
import logging
import os


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring non-integer {name}={raw!r}")
        return default
    return value if value > 0 else default


def _env_log_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Global Constants
LOGGER_NAME: str = "planegeometry"
LOG_LEVEL: int = _env_log_level("PLANEGEOMETRY_LOG_LEVEL", logging.INFO)
DEFAULT_POLYLINE_SEGMENTS: int = _env_int("PLANEGEOMETRY_POLYLINE_SEGMENTS", 100)
