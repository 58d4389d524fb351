"""semnorm - normalize loosely formed version strings to semantic versions.

Turns tokens such as "23.01", "1-Alpha" or "1.1.0.0-RC+2019" into canonical
"major.minor.patch[.revision][-prerelease][+buildmetadata]" strings.
"""

from ._version import __version__
from .exceptions import ConfigError, InvalidVersionFormatError, SemnormError
from .normalizer import is_valid, normalize, normalize_all, parse
from .parsed_version import VERSION_PATTERN, ParsedVersion
from .types import VersionComponents, VersionCore

__all__ = [
    "VERSION_PATTERN",
    "ConfigError",
    "InvalidVersionFormatError",
    "ParsedVersion",
    "SemnormError",
    "VersionComponents",
    "VersionCore",
    "__version__",
    "is_valid",
    "normalize",
    "normalize_all",
    "parse",
]
