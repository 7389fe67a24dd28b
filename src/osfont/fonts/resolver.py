"""
OS Font Resolver
================

Resolves the native user-interface font of an operating system release.
"""

import logging
from collections.abc import Sequence
from functools import lru_cache
from typing import Any

from ..core.validation import normalize_os_name, normalize_os_version
from .catalog import FontCatalog
from .models import Advisory, AdvisoryKind, FontResolution, MinorVersionDefault, Version
from .rules import get_family
from .system import SystemFontCatalog

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_catalog() -> SystemFontCatalog:
    """Shared system font catalog used when no catalog is supplied."""
    return SystemFontCatalog()


class FontResolver:
    """
    Resolves (OS, version) to the OS user-interface font name and size.

    The resolver holds no per-call state and may be shared between threads.
    """

    def __init__(self, catalog: FontCatalog | None = None):
        """
        Initialize font resolver.

        Args:
            catalog: Font catalog deciding whether the resolved font name is
                returned; defaults to the system font catalog
        """
        self.catalog = catalog if catalog is not None else default_catalog()

    def resolve(self, os_name: str, os_version: Sequence[int] | int | None = None) -> FontResolution:
        """
        Resolve the UI font for an OS release.

        Args:
            os_name: Lowercase OS tag (``windows``, ``macos``, ``ubuntu``,
                ``centos``, ``redhat``) or ``""`` if unknown
            os_version: Version vector such as ``[6, 1, 7601]``; ignored when
                ``os_name`` is empty

        Returns:
            FontResolution; ``font_size`` is None when the OS or version is
            unsupported, and ``font_name`` is empty when additionally the font
            is not in the catalog

        Raises:
            InvalidArgumentError: If ``os_name`` is not a string, or the
                version vector is malformed for a non-empty ``os_name``
        """
        os_name = normalize_os_name(os_name)
        if not os_name:
            return FontResolution()

        version = normalize_os_version(os_version)

        family = get_family(os_name)
        if family is None:
            logger.debug(f"No font rules for OS {os_name!r}")
            return FontResolution()

        result = FontResolution()
        if family.minor_default is not None:
            version = self._apply_minor_default(version, family.minor_default, result)

        rule = next((r for r in family.rules if r.matches(version)), None)
        if rule is None:
            logger.debug(f"No font rule matches {os_name} {_format_version(version)}")
            return result

        logger.debug(f"Matched {os_name} {_format_version(version)}: {rule.description}")
        result.rule = rule
        result.font_size = rule.font_size

        if rule.replaces:
            self._advise(
                result,
                AdvisoryKind.FONT_NOT_AVAILABLE,
                f"Font '{rule.replaces}' not available; replaced by '{rule.font_name}'.",
            )

        if self.catalog.exists(rule.font_name):
            result.font_name = rule.font_name
        else:
            logger.debug(f"Font {rule.font_name!r} is not available; returning size only")

        return result

    def _apply_minor_default(
        self, version: Version, policy: MinorVersionDefault, result: FontResolution
    ) -> Version:
        if not policy.applies_to(version):
            return version
        defaulted = (version[0], policy.minor)
        self._advise(
            result,
            AdvisoryKind.MINOR_VERSION_NEEDED,
            f"Minor version needed; assume OS version [{defaulted[0]}, {defaulted[1]}].",
        )
        return defaulted

    @staticmethod
    def _advise(result: FontResolution, kind: AdvisoryKind, message: str) -> None:
        logger.warning(f"{kind.value}: {message}")
        result.advisories.append(Advisory(kind=kind, message=message))


def get_os_font(
    os_name: str, os_version: Any = None, catalog: FontCatalog | None = None
) -> tuple[str, int | None]:
    """
    Return ``(font_name, font_size)`` of the UI font of ``os_name`` ``os_version``.

    ``font_name`` is ``""`` and ``font_size`` is None if the OS is not
    supported; ``font_name`` alone is ``""`` if the font is not available.

    Example::

        try:
            os_name, os_version = detect_os()
        except OSDetectionError:
            os_name, os_version = "", []
        font_name, font_size = get_os_font(os_name, os_version)
    """
    return FontResolver(catalog).resolve(os_name, os_version).as_tuple()


def _format_version(version: Version) -> str:
    return ".".join(str(v) for v in version)
