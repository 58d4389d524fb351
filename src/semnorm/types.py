"""Type aliases needed in the package."""

from collections.abc import Iterable
from typing import TypeAlias

VersionCore: TypeAlias = tuple[int, int, int]
VersionComponents: TypeAlias = dict[str, int | str | None]
VersionInputs: TypeAlias = Iterable[str]
