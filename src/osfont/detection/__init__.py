"""Operating system detection."""

from .detector import detect_os, parse_version_prefix

__all__ = ["detect_os", "parse_version_prefix"]
