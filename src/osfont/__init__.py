"""OS User-Interface Font Resolution
=================================

Resolves the name and point size of an operating system's native
user-interface font, so GUI toolkits can approximate native look-and-feel
when they cannot query the OS themselves.
"""

__version__ = "1.1.3"

from .core.config import OSFontConfig
from .core.exceptions import InvalidArgumentError, OSDetectionError, OSFontError
from .detection import detect_os
from .fonts import (
    Advisory,
    AdvisoryKind,
    FontResolution,
    FontResolver,
    StaticFontCatalog,
    SystemFontCatalog,
    get_os_font,
)

__all__ = [
    "Advisory",
    "AdvisoryKind",
    "FontResolution",
    "FontResolver",
    "InvalidArgumentError",
    "OSDetectionError",
    "OSFontConfig",
    "OSFontError",
    "StaticFontCatalog",
    "SystemFontCatalog",
    "detect_os",
    "get_os_font",
]
