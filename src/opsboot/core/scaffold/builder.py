"""Directory tree creation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from opsboot.core.contracts.reporter import NullReporter, Reporter
from opsboot.core.contracts.scaffold import SENTINEL_NAME
from opsboot.core.scaffold.layout import DIRECTORIES

logger = logging.getLogger(__name__)


def touch_sentinel(directory: Path) -> Path:
    """Create the zero-byte sentinel in *directory*, leaving an existing one intact."""
    sentinel = directory / SENTINEL_NAME
    sentinel.touch(exist_ok=True)
    return sentinel


def create_dir_with_placeholder(root: Path, rel_path: str, *, reporter: Reporter | None = None) -> Path:
    reporter = reporter or NullReporter()
    directory = root / rel_path
    directory.mkdir(parents=True, exist_ok=True)
    touch_sentinel(directory)
    logger.debug("Ensured %s", directory)
    reporter.success(f"✓ Created: {rel_path}")
    return directory


def create_directory_structure(
    root: Path,
    *,
    directories: Iterable[str] = DIRECTORIES,
    reporter: Reporter | None = None,
) -> list[str]:
    """Create every directory in *directories* under *root*, each with a sentinel.

    Safe to run repeatedly. Returns the relative paths in creation order.
    """
    reporter = reporter or NullReporter()
    reporter.info("Creating directory structure...")
    created: list[str] = []
    for rel_path in directories:
        create_dir_with_placeholder(root, rel_path, reporter=reporter)
        created.append(rel_path)
    return created
