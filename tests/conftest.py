"""Shared test fixtures for opsboot tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from opsboot.core.contracts.scaffold import ScaffoldSettings
from opsboot.core.scaffold.layout import REQUIRED_TEMPLATES
from tests.fakes.reporter import RecordingReporter


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project directory named ``demo``."""
    root = tmp_path / "demo"
    root.mkdir()
    return root


@pytest.fixture
def templates_dir(project_root: Path) -> Path:
    """Every required template, each mentioning the placeholder twice."""
    directory = project_root / "scripts" / "templates"
    directory.mkdir(parents=True)
    for name in REQUIRED_TEMPLATES:
        (directory / name).write_text(f"# PROJECT_NAME: {name}\nname: PROJECT_NAME\n", encoding="utf-8")
    return directory


@pytest.fixture
def make_settings(project_root: Path) -> Callable[..., ScaffoldSettings]:
    def _make(**overrides: object) -> ScaffoldSettings:
        values: dict[str, object] = {"project_root": project_root}
        values.update(overrides)
        return ScaffoldSettings.model_validate(values)

    return _make
