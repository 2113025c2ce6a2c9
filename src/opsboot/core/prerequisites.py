"""PATH lookups for external commands."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from opsboot.core.contracts.exceptions import PrerequisiteError

logger = logging.getLogger(__name__)


def require_command(command: str) -> Path:
    """Return the absolute path of *command* or raise :class:`PrerequisiteError`."""
    found = shutil.which(command)
    if found is None:
        raise PrerequisiteError(command)
    logger.debug("Resolved %s -> %s", command, found)
    return Path(found)


def check_prerequisites(commands: Iterable[str]) -> dict[str, Path]:
    """Resolve every command in order, failing on the first one that is absent."""
    return {command: require_command(command) for command in commands}
