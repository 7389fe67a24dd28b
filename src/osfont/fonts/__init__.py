"""UI Font Resolution Module
=========================

This module maps operating system releases to their native user-interface
font and checks the font against a catalog of available fonts.
"""

from .catalog import AnyFontCatalog, FontCatalog, StaticFontCatalog, build_catalog
from .models import Advisory, AdvisoryKind, FontResolution, FontRule, OSFamily
from .resolver import FontResolver, get_os_font
from .rules import iter_rules, supported_os_tags
from .system import SystemFontCatalog

__all__ = [
    "Advisory",
    "AdvisoryKind",
    "AnyFontCatalog",
    "FontCatalog",
    "FontResolution",
    "FontResolver",
    "FontRule",
    "OSFamily",
    "StaticFontCatalog",
    "SystemFontCatalog",
    "build_catalog",
    "get_os_font",
    "iter_rules",
    "supported_os_tags",
]
