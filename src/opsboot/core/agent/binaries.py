"""Resolution of the helper programs used by the agent loader."""

from __future__ import annotations

from pathlib import Path

from opsboot.core.contracts.agent import AgentBinaries
from opsboot.core.contracts.exceptions import PrerequisiteError
from opsboot.core.prerequisites import require_command


def resolve_binaries(*, shell: Path | None = None) -> AgentBinaries:
    """Look up ``ssh-agent``, ``ssh-add`` and the interactive shell on PATH.

    An explicit *shell* is used as-is when it exists; otherwise ``bash`` is
    resolved like the other helpers.
    """
    ssh_agent = require_command("ssh-agent")
    ssh_add = require_command("ssh-add")
    if shell is not None:
        if not shell.exists():
            raise PrerequisiteError(str(shell))
        resolved_shell = shell
    else:
        resolved_shell = require_command("bash")
    return AgentBinaries(ssh_agent=ssh_agent, ssh_add=ssh_add, shell=resolved_shell)
