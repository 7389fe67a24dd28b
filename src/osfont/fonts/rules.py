"""
UI Font Rule Table
==================

Native user-interface fonts per operating system family, ordered from the
most recent release downward. The first rule whose version range contains
the OS version wins.
"""

from collections.abc import Iterator

from .models import FontRule, MinorVersionDefault, OSFamily

MACOS = OSFamily(
    tags=("macos",),
    minor_default=MinorVersionDefault(minor=0),
    rules=(
        FontRule(
            lower=(10, 11),
            upper=None,
            font_name="Helvetica Neue",
            font_size=13,
            replaces="San Francisco Text",
            description="OS X El Capitan, macOS Sierra and later",
        ),
        FontRule(
            lower=(10, 10),
            upper=(10, 11),
            font_name="Helvetica Neue",
            font_size=13,
            description="OS X Yosemite",
        ),
        FontRule(
            lower=(10, 0),
            upper=(10, 10),
            font_name="Lucida Grande",
            font_size=13,
            description="Mac OS X Cheetah through OS X Mavericks",
        ),
    ),
)

# https://msdn.microsoft.com/en-us/library/windows/desktop/dn742483(v=vs.85).aspx
WINDOWS = OSFamily(
    tags=("windows",),
    minor_default=MinorVersionDefault(minor=0, major=3),
    rules=(
        FontRule(
            lower=(6,),
            upper=None,
            font_name="Segoe UI",
            font_size=9,
            description="Windows Vista, 7, 8 and 10",
        ),
        FontRule(
            lower=(5,),
            upper=(6,),
            font_name="Tahoma",
            font_size=8,
            description="Windows 2000, XP and Server 2003",
        ),
        FontRule(
            lower=(3, 10),
            upper=(5,),
            font_name="Microsoft Sans Serif",
            font_size=8,
            description="Windows 3.1, 95, 98, ME and NT 4.0",
        ),
    ),
)

UBUNTU = OSFamily(
    tags=("ubuntu",),
    minor_default=MinorVersionDefault(minor=4, major=10),
    rules=(
        FontRule(
            lower=(10, 10),
            upper=None,
            font_name="Ubuntu",
            font_size=11,
            description="Ubuntu 10.10 and later",
        ),
    ),
)

REDHAT = OSFamily(
    tags=("centos", "redhat"),
    minor_default=MinorVersionDefault(minor=0, major=6),
    rules=(
        # GNOME on 6.8 uses "Sans" (Luxi Sans) 10pt, which toolkits usually
        # list as a generic "SansSerif" alias instead
        FontRule(
            lower=(6, 8),
            upper=(7,),
            font_name="DejaVu Sans Condensed",
            font_size=10,
            replaces="Sans",
            description="CentOS / Red Hat 6.8 and later 6.x",
        ),
        FontRule(
            lower=(7,),
            upper=None,
            font_name="Cantarell",
            font_size=11,
            description="CentOS / Red Hat 7 and later",
        ),
    ),
)

OS_FAMILIES: tuple[OSFamily, ...] = (MACOS, WINDOWS, UBUNTU, REDHAT)

_FAMILIES_BY_TAG: dict[str, OSFamily] = {
    tag: family for family in OS_FAMILIES for tag in family.tags
}


def get_family(os_name: str) -> OSFamily | None:
    """Return the rule family for a lowercase OS tag, or None if unsupported."""
    return _FAMILIES_BY_TAG.get(os_name)


def supported_os_tags() -> list[str]:
    """List every OS tag with at least one font rule."""
    return list(_FAMILIES_BY_TAG)


def iter_rules() -> Iterator[tuple[str, FontRule]]:
    """Yield ``(tag, rule)`` for every tag in table order."""
    for family in OS_FAMILIES:
        for tag in family.tags:
            for rule in family.rules:
                yield tag, rule
