"""Shared fixtures for semnorm tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from pytest import MonkeyPatch
from rich.logging import RichHandler


@pytest.fixture
def valid_versions() -> list[str]:
    """Loosely formed versions that all match the grammar."""
    return [
        "1",
        "23.01",
        "1.2",
        "1.2.3",
        "1.1.1.0",
        "1.1.1.1",
        "1-Alpha",
        "1.1.0.0-RC+2019",
        "2.0.0-rc.1",
        "3.4.5+build.7",
        "0.0.0",
        "007.008.009.010",
        "1.0.0-x-y-z.--",
    ]


@pytest.fixture
def invalid_versions() -> list[str]:
    """Values rejected by the grammar."""
    return [
        "",
        "abc",
        "v1.0.0",
        "1.",
        ".1",
        "1.2.3.4.5",
        "1.0.0-",
        "1.0.0+",
        "1.0.0-alpha..1",
        "1.0.0+build_1",
        " 1.0.0",
        "1.0.0\n",
        "1.0.0-béta",
    ]


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Empty working directory without any configuration file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def semnorm_toml(project_dir: Path) -> Path:
    """Working directory with a semnorm.toml selecting JSON output."""
    config_file = project_dir / "semnorm.toml"
    config_file.write_text(
        """
[semnorm]
output_format = "json"
skip_invalid = true
"""
    )
    return config_file


@pytest.fixture
def pyproject_toml(project_dir: Path) -> Path:
    """Working directory with a pyproject.toml carrying [tool.semnorm]."""
    config_file = project_dir / "pyproject.toml"
    config_file.write_text(
        """
[project]
name = "example"

[tool.semnorm]
strip = false
"""
    )
    return config_file


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger with its level and rich/null handlers reset afterwards."""
    logger = logging.getLogger()
    level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        if isinstance(handler, RichHandler | logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(level)
