"""Normalization of loosely formed version strings."""

import logging

from .exceptions import InvalidVersionFormatError
from .parsed_version import ParsedVersion
from .types import VersionInputs

logger = logging.getLogger(__name__)


def parse(value: str) -> ParsedVersion:
    """Parse a version string into its components.

    Args:
        value: Version string such as "1", "23.01" or "1-Alpha".

    Returns:
        The parsed version.

    Raises:
        InvalidVersionFormatError: If the value does not match the grammar.
    """
    return ParsedVersion.parse(value)


def normalize(value: str) -> str:
    """Convert a loosely formed version string to canonical semantic form.

    Missing minor and patch numbers become 0 and leading zeros are dropped. A
    revision is kept as a fourth component only when it is greater than 0, so
    "1.1.1.0" normalizes to "1.1.1".

    Args:
        value: Version string to normalize.

    Returns:
        Version string in format
        "major.minor.patch[.revision][-prerelease][+buildmetadata]".

    Raises:
        InvalidVersionFormatError: If the value does not match the grammar.

    Example:
        >>> normalize("1.1.0.0-RC+2019")
        '1.1.0-RC+2019'
    """
    canonical = str(ParsedVersion.parse(value))
    logger.debug("Normalized %r to %r", value, canonical)
    return canonical


def normalize_all(values: VersionInputs) -> list[str]:
    """Normalize several version strings, preserving their order.

    Args:
        values: Version strings to normalize.

    Returns:
        Canonical version strings in input order.

    Raises:
        InvalidVersionFormatError: On the first value that does not match.
    """
    return [normalize(value) for value in values]


def is_valid(value: str) -> bool:
    """Check whether a value matches the version grammar.

    Args:
        value: Version string to check.

    Returns:
        True if the value can be normalized, False otherwise.
    """
    try:
        ParsedVersion.parse(value)
    except InvalidVersionFormatError:
        return False
    return True
