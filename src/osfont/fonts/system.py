"""
System Font Catalog
===================

Catalog of the font families installed on the local machine.
Queries fontconfig where available and otherwise scans the standard system
font locations.
"""

import logging
import os
import platform
import shutil
import subprocess
import threading
from collections.abc import Iterable
from pathlib import Path

from .utils import get_font_families, is_font_file

logger = logging.getLogger(__name__)


class SystemFontCatalog:
    """
    Catalog of system font families.

    Family names are loaded on first use and cached; the cache is shared
    safely between threads. Call :meth:`refresh` after installing fonts.
    """

    def __init__(
        self,
        extra_dirs: Iterable[str | Path] | None = None,
        use_fontconfig: bool = True,
        fc_list_timeout: float = 10.0,
    ):
        """
        Initialize system font catalog.

        Args:
            extra_dirs: Additional directories to scan for font files
            use_fontconfig: Query ``fc-list`` when it is on the PATH
            fc_list_timeout: Timeout for the ``fc-list`` call in seconds
        """
        self.system = platform.system().lower()
        self.use_fontconfig = use_fontconfig
        self.fc_list_timeout = fc_list_timeout
        self.extra_dirs = [Path(d) for d in extra_dirs or ()]
        self.font_directories = self._get_system_font_directories()

        self._families: frozenset[str] | None = None
        self._lock = threading.Lock()

        logger.debug(f"SystemFontCatalog initialized for {self.system}")
        logger.debug(f"Font directories: {self.font_directories}")

    def _get_system_font_directories(self) -> list[Path]:
        """Get system font directories based on operating system."""
        directories = []

        if self.system == "windows":
            directories.extend(
                [
                    Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts",
                    Path(os.environ.get("LOCALAPPDATA", "")) / "Microsoft" / "Windows" / "Fonts",
                ]
            )

        elif self.system == "darwin":  # macOS
            directories.extend(
                [
                    Path("/System/Library/Fonts"),
                    Path("/Library/Fonts"),
                    Path.home() / "Library" / "Fonts",
                ]
            )

        else:  # Linux and other Unix-like systems
            directories.extend(
                [
                    Path("/usr/share/fonts"),
                    Path("/usr/local/share/fonts"),
                    Path.home() / ".fonts",
                    Path.home() / ".local" / "share" / "fonts",
                ]
            )

        # Filter to existing directories
        return [d for d in directories if d.exists() and d.is_dir()]

    def exists(self, font_name: str) -> bool:
        """Check whether a font family with exactly this name is installed."""
        if not font_name:
            return False
        found = font_name in self.families()
        logger.debug(f"Font {font_name!r} {'found' if found else 'not found'} in system catalog")
        return found

    def families(self) -> frozenset[str]:
        """Return all installed font family names."""
        families = self._families
        if families is None:
            with self._lock:
                families = self._families
                if families is None:
                    families = self._families = self._load_families()
        return families

    def refresh(self) -> None:
        """Discard cached family names; they are reloaded on next use."""
        with self._lock:
            self._families = None

    def _load_families(self) -> frozenset[str]:
        families: set[str] = set()

        fontconfig_families = self._query_fontconfig() if self.use_fontconfig else None
        if fontconfig_families is not None:
            families.update(fontconfig_families)
            directories = self.extra_dirs
        else:
            directories = self.font_directories + self.extra_dirs

        for font_dir in directories:
            families.update(self._scan_font_directory(font_dir))

        logger.info(f"Loaded {len(families)} font families from system catalog")
        return frozenset(families)

    def _query_fontconfig(self) -> set[str] | None:
        """List installed families with ``fc-list``; None if fontconfig is unusable."""
        fc_list_path = shutil.which("fc-list")
        if not fc_list_path:
            logger.debug("fc-list not found in PATH")
            return None

        try:
            result = subprocess.run(
                [fc_list_path, ":", "family"],
                capture_output=True,
                text=True,
                timeout=self.fc_list_timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Failed to run fc-list: {e}")
            return None

        if result.returncode != 0:
            logger.warning(f"fc-list exited with status {result.returncode}: {result.stderr.strip()}")
            return None

        return parse_fc_list_output(result.stdout)

    def _scan_font_directory(self, font_dir: Path) -> set[str]:
        """Scan a font directory for font files."""
        families: set[str] = set()

        if not font_dir.is_dir():
            logger.debug(f"Font directory not found: {font_dir}")
            return families

        try:
            for font_file in font_dir.rglob("*"):
                if font_file.is_file() and is_font_file(str(font_file)):
                    families.update(get_font_families(str(font_file)))

        except PermissionError:
            logger.debug(f"Permission denied accessing {font_dir}")
        except OSError as e:
            logger.warning(f"Error scanning {font_dir}: {e}")

        return families


def parse_fc_list_output(output: str) -> set[str]:
    """
    Parse ``fc-list : family`` output.

    Each line lists one or more comma-separated names for the same family
    (localized variants); fontconfig escapes literal separators with a backslash.
    """
    families = set()
    for line in output.splitlines():
        for name in _split_unescaped(line, ","):
            name = name.strip()
            if name:
                families.add(name)
    return families


def _split_unescaped(text: str, separator: str) -> list[str]:
    parts = []
    current = []
    escaped = False
    for char in text:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == separator:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts
