"""Shared pytest fixtures for witprofile tests."""

from pathlib import Path

import pytest

from witprofile.core import ir
from witprofile.core.parser_impl import parse_profile


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def profile_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to profile fixtures directory."""
    return fixtures_dir / "profiles"


@pytest.fixture
def world_profile_path(profile_fixtures_dir: Path) -> Path:
    """Return path to world.profile fixture."""
    return profile_fixtures_dir / "world.profile"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear witprofile environment settings for the duration of a test."""
    monkeypatch.delenv("WITPROFILE_SNIPPET_LINES", raising=False)
    monkeypatch.delenv("WITPROFILE_MAX_SOURCE_BYTES", raising=False)
    return monkeypatch


@pytest.fixture
def world_profile(world_profile_path: Path) -> ir.Profile:
    """Return the parsed world.profile fixture."""
    return parse_profile(world_profile_path.read_text(encoding="utf-8"), world_profile_path)
