"""Configuration loading for the semnorm CLI."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

SEMNORM_TOML: Final = "semnorm.toml"
PYPROJECT_TOML: Final = "pyproject.toml"


class SemnormConfig(BaseModel):
    """Options read from ``semnorm.toml`` or ``[tool.semnorm]``.

    Attributes:
        output_format: Default output format for the CLI.
        skip_invalid: Keep going past invalid values instead of stopping.
        strip: Strip surrounding whitespace from CLI and stdin values.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_format: Literal["text", "json"] = "text"
    skip_invalid: bool = False
    strip: bool = True


def _read_table(path: Path) -> dict[str, Any] | None:
    """Read the semnorm table from a TOML file, if it has one."""
    try:
        with open(path, "rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, f"not valid TOML: {e}") from e
    except OSError as e:
        raise ConfigError(path, str(e)) from e

    if path.name == PYPROJECT_TOML:
        tool = document.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(path, "tool must be a table")
        table = tool.get("semnorm")
    else:
        table = document.get("semnorm")

    if table is not None and not isinstance(table, dict):
        raise ConfigError(path, "semnorm configuration must be a table")
    return table


def find_config_file(start: Path | None = None) -> Path | None:
    """Locate a configuration file in a directory.

    ``semnorm.toml`` takes precedence over ``pyproject.toml``. A
    ``pyproject.toml`` without a ``[tool.semnorm]`` table is ignored.

    Args:
        start: Directory to look in. Defaults to the current directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    directory = start or Path.cwd()

    semnorm_toml = directory / SEMNORM_TOML
    if semnorm_toml.is_file():
        return semnorm_toml

    pyproject = directory / PYPROJECT_TOML
    if pyproject.is_file():
        try:
            with open(pyproject, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError:
            logger.debug("Ignoring unparsable %s", pyproject)
            return None
        tool = document.get("tool", {})
        if isinstance(tool, dict) and "semnorm" in tool:
            return pyproject

    return None


def load_config(path: Path | None = None) -> SemnormConfig:
    """Load configuration from a file, falling back to defaults.

    Args:
        path: Explicit configuration file. If None, the current directory is
            searched with find_config_file.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or contains
            invalid options.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No configuration file found, using defaults")
            return SemnormConfig()
    elif not path.is_file():
        raise ConfigError(path, "file not found")

    table = _read_table(path)
    if table is None:
        return SemnormConfig()

    try:
        config = SemnormConfig.model_validate(table)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(path, errors) from e

    logger.debug("Loaded configuration from %s: %r", path, config)
    return config
