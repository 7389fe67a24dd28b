"""Core components for OS font resolution."""

from .config import OSFontConfig
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    OSDetectionError,
    OSFontError,
    ValidationError,
)
from .validation import normalize_os_name, normalize_os_version, parse_version

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "OSDetectionError",
    "OSFontError",
    "OSFontConfig",
    "ValidationError",
    "normalize_os_name",
    "normalize_os_version",
    "parse_version",
]
