"""Models the structured result of parsing a version token."""

import logging
import re
from dataclasses import asdict, dataclass
from typing import Final, Self

from .exceptions import InvalidVersionFormatError
from .types import VersionComponents, VersionCore

logger = logging.getLogger(__name__)

_IDENTIFIERS: Final = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

VERSION_PATTERN: Final = re.compile(
    r"\A(?P<major>\d+)"
    r"(?:\.(?P<minor>\d+))?"
    r"(?:\.(?P<patch>\d+))?"
    r"(?:\.(?P<revision>\d+))?"
    rf"(?:-(?P<prerelease>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<buildmetadata>{_IDENTIFIERS}))?\Z",
    re.ASCII,
)


@dataclass(frozen=True)
class ParsedVersion:
    """Loosely formed version decomposed into semantic-version components.

    Attributes:
        major: Major version number.
        minor: Minor version number, 0 when absent from the input.
        patch: Patch version number, 0 when absent from the input.
        revision: Optional fourth numeric component.
        prerelease: Optional prerelease tag, without the leading hyphen.
        buildmetadata: Optional build metadata, without the leading plus sign.
    """

    major: int
    minor: int = 0
    patch: int = 0
    revision: int | None = None
    prerelease: str | None = None
    buildmetadata: str | None = None

    def __post_init__(self: Self) -> None:
        """Reject negative numeric components."""
        for name in ("major", "minor", "patch", "revision"):
            component = getattr(self, name)
            if component is not None and component < 0:
                raise ValueError(f"Version component {name} must be >= 0")

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse a loosely formed version string.

        Args:
            value: Version string such as "23.01" or "1.1.0.0-RC+2019".

        Returns:
            Parsed ParsedVersion instance.

        Raises:
            InvalidVersionFormatError: If the whole string does not match the
                version grammar.
        """
        match = VERSION_PATTERN.fullmatch(value)
        if match is None:
            logger.debug("Rejected version %r", value)
            raise InvalidVersionFormatError(value)

        revision = match["revision"]
        parsed = cls(
            major=int(match["major"]),
            minor=int(match["minor"] or 0),
            patch=int(match["patch"] or 0),
            revision=int(revision) if revision is not None else None,
            prerelease=match["prerelease"],
            buildmetadata=match["buildmetadata"],
        )
        logger.debug("Parsed %r as %r", value, parsed)
        return parsed

    @property
    def core(self: Self) -> VersionCore:
        """The (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)

    def to_dict(self: Self) -> VersionComponents:
        """Return the components as a plain dictionary.

        Returns:
            Mapping of component names to their values.
        """
        return asdict(self)

    def __str__(self: Self) -> str:
        """Return the canonical version string.

        A zero revision is omitted, so "1.1.1.0" and "1.1.1" render the same.

        Returns:
            Version string in format
            "major.minor.patch[.revision][-prerelease][+buildmetadata]".
        """
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            version += f".{self.revision}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.buildmetadata is not None:
            version += f"+{self.buildmetadata}"
        return version
