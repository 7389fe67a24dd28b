"""
Operating System Detection
==========================

Best-effort identification of the running OS as an ``(os_tag, version)``
pair suitable for :func:`osfont.fonts.get_os_font`.
"""

import logging
import platform
import re

from ..core.exceptions import OSVersionUnavailableError, UnsupportedPlatformError

logger = logging.getLogger(__name__)

_VERSION_PREFIX = re.compile(r"\d+(?:\.\d+)*")

# os-release ID -> OS tag
LINUX_DISTRIBUTION_TAGS = {
    "ubuntu": "ubuntu",
    "centos": "centos",
    "rhel": "redhat",
    "redhat": "redhat",
}


def detect_os() -> tuple[str, list[int]]:
    """
    Detect the running operating system.

    Returns:
        ``(os_tag, version)`` such as ``("windows", [10, 0, 19045])``. Linux
        distributions without font rules keep their os-release ID as tag.

    Raises:
        UnsupportedPlatformError: If the platform is not Windows, macOS or Linux
        OSVersionUnavailableError: If the version cannot be determined
    """
    system = platform.system()

    if system == "Windows":
        os_name, raw_version = "windows", platform.version()
    elif system == "Darwin":
        os_name, raw_version = "macos", platform.mac_ver()[0]
    elif system == "Linux":
        os_name, raw_version = _detect_linux_distribution()
    else:
        raise UnsupportedPlatformError(system)

    version = parse_version_prefix(raw_version)
    if not version:
        raise OSVersionUnavailableError(os_name, raw_version)

    logger.debug(f"Detected OS {os_name} {version}")
    return os_name, version


def _detect_linux_distribution() -> tuple[str, str]:
    try:
        release = platform.freedesktop_os_release()
    except OSError as e:
        raise OSVersionUnavailableError("linux", str(e))

    distribution = release.get("ID", "").lower()
    if not distribution:
        raise UnsupportedPlatformError("linux")
    os_name = LINUX_DISTRIBUTION_TAGS.get(distribution, distribution)
    return os_name, release.get("VERSION_ID", "")


def parse_version_prefix(raw_version: str) -> list[int]:
    """Parse the leading dotted number of ``raw_version``; ``[]`` if there is none."""
    match = _VERSION_PREFIX.search(raw_version or "")
    if not match:
        return []
    return [int(part) for part in match.group(0).split(".")]
