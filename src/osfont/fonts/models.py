"""
Font rule and resolution data models.
"""

from dataclasses import dataclass, field
from enum import Enum

Version = tuple[int, ...]


class AdvisoryKind(str, Enum):
    """Kinds of non-fatal advisories issued during resolution."""

    MINOR_VERSION_NEEDED = "MinorVersionNeeded"
    FONT_NOT_AVAILABLE = "FontNotAvailable"


@dataclass(frozen=True)
class Advisory:
    """Non-fatal notification accompanying a resolution result."""

    kind: AdvisoryKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass(frozen=True)
class FontRule:
    """
    Maps a half-open OS version range to a UI font.

    ``lower`` and ``upper`` are compared against the full version tuple, so
    ``(10, 11)`` means "10.11 or later" and ``upper=(7,)`` means "before 7".
    ``replaces`` names the native font that is unavailable to most toolkits
    and for which ``font_name`` is a substitute.
    """

    lower: Version
    upper: Version | None
    font_name: str
    font_size: int
    replaces: str | None = None
    description: str = ""

    def matches(self, version: Version) -> bool:
        if version < self.lower:
            return False
        return self.upper is None or version < self.upper

    def describe_range(self) -> str:
        low = ".".join(str(v) for v in self.lower)
        if self.upper is None:
            return f">= {low}"
        high = ".".join(str(v) for v in self.upper)
        return f">= {low}, < {high}"


@dataclass(frozen=True)
class MinorVersionDefault:
    """Minor version assumed when the caller supplies only a major version.

    ``major`` restricts the default to one boundary release; ``None`` applies
    it to every major version.
    """

    minor: int
    major: int | None = None

    def applies_to(self, version: Version) -> bool:
        if len(version) >= 2:
            return False
        return self.major is None or version[0] == self.major


@dataclass(frozen=True)
class OSFamily:
    """OS tags sharing one ordered rule list, newest release first."""

    tags: tuple[str, ...]
    rules: tuple[FontRule, ...]
    minor_default: MinorVersionDefault | None = None


@dataclass
class FontResolution:
    """Result of resolving the UI font for an OS version."""

    font_name: str = ""
    font_size: int | None = None
    advisories: list[Advisory] = field(default_factory=list)
    rule: FontRule | None = None

    @property
    def matched(self) -> bool:
        """Whether a rule matched, regardless of font availability."""
        return self.rule is not None

    def has_advisory(self, kind: AdvisoryKind) -> bool:
        return any(a.kind == kind for a in self.advisories)

    def as_tuple(self) -> tuple[str, int | None]:
        """Return ``(font_name, font_size)``."""
        return self.font_name, self.font_size

    def to_dict(self) -> dict:
        return {
            "font_name": self.font_name,
            "font_size": self.font_size,
            "advisories": [{"kind": a.kind.value, "message": a.message} for a in self.advisories],
        }
