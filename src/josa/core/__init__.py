"""Core module for josa.

This module provides core functionality including:
- Configuration management (Settings, get_settings)
- Custom exceptions (JosaError and subclasses)
- Protocol definitions for the syllable classifier seam
- Logging utilities
"""

from josa.core.config import Settings, get_settings
from josa.core.exceptions import (
    ConfigurationError,
    EmptyStringError,
    JosaError,
    NotHangulSyllableError,
)
from josa.core.logging import get_logger, setup_logging
from josa.core.protocols import SyllableClassifierProtocol

__all__ = [
    "ConfigurationError",
    "EmptyStringError",
    "JosaError",
    "NotHangulSyllableError",
    "Settings",
    "SyllableClassifierProtocol",
    "get_logger",
    "get_settings",
    "setup_logging",
]
