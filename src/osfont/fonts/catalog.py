"""
Font Catalogs
=============

A font catalog answers one question for the resolver: is a font with this
exact name available to the calling environment?
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ..core.config import OSFontConfig
from ..core.exceptions import UnknownCatalogBackendError


@runtime_checkable
class FontCatalog(Protocol):
    """Membership query against the fonts available to the caller."""

    def exists(self, font_name: str) -> bool: ...


class StaticFontCatalog:
    """Catalog backed by a fixed set of font names."""

    def __init__(self, font_names: Iterable[str] = ()):
        self._font_names = frozenset(font_names)

    def exists(self, font_name: str) -> bool:
        return font_name in self._font_names

    def families(self) -> frozenset[str]:
        return self._font_names

    def __len__(self) -> int:
        return len(self._font_names)

    def __repr__(self) -> str:
        return f"StaticFontCatalog({sorted(self._font_names)!r})"


class AnyFontCatalog:
    """Catalog that accepts every non-empty font name.

    For callers that perform their own font substitution and only want the
    nominal name.
    """

    def exists(self, font_name: str) -> bool:
        return bool(font_name)

    def __repr__(self) -> str:
        return "AnyFontCatalog()"


def build_catalog(config: OSFontConfig) -> FontCatalog:
    """Create the font catalog selected by ``config.catalog_backend``."""
    from .system import SystemFontCatalog

    if config.catalog_backend == "system":
        return SystemFontCatalog(
            extra_dirs=config.extra_font_dirs,
            use_fontconfig=config.use_fontconfig,
            fc_list_timeout=config.fc_list_timeout,
        )
    if config.catalog_backend == "static":
        return StaticFontCatalog(config.available_fonts)
    if config.catalog_backend == "any":
        return AnyFontCatalog()
    raise UnknownCatalogBackendError(config.catalog_backend)
