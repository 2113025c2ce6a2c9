"""Session record persistence and ssh-agent liveness checks.

The record is the Bourne-shell output of ``ssh-agent -s`` with its trailing
``echo`` commented out, so the file stays source-able by a login shell. It is
parsed here as key/value lines and never executed.
"""

from __future__ import annotations

import logging
import os
import re
import signal
import subprocess
from pathlib import Path

from opsboot.core.contracts.agent import AgentSession
from opsboot.core.contracts.exceptions import AgentError

logger = logging.getLogger(__name__)

_ASSIGNMENT_RE = re.compile(r"^\s*(?P<name>SSH_AUTH_SOCK|SSH_AGENT_PID)=(?P<value>[^;\n]*)", re.MULTILINE)
_ECHO_RE = re.compile(r"^echo", re.MULTILINE)
_AGENT_COMMAND = "ssh-agent"


def parse_session(text: str) -> AgentSession:
    """Extract ``SSH_AUTH_SOCK`` and ``SSH_AGENT_PID`` from agent output."""
    values = {match.group("name"): match.group("value").strip() for match in _ASSIGNMENT_RE.finditer(text)}
    sock = values.get("SSH_AUTH_SOCK")
    pid = values.get("SSH_AGENT_PID")
    if not sock or not pid:
        raise AgentError("ssh-agent output is missing SSH_AUTH_SOCK or SSH_AGENT_PID")
    try:
        return AgentSession(auth_sock=sock, agent_pid=int(pid))
    except ValueError as exc:
        raise AgentError(f"invalid SSH_AGENT_PID in agent output: {pid!r}") from exc


def load_session(path: Path) -> AgentSession | None:
    """Return the recorded session, ``None`` when there is no record file."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AgentError(f"failed reading agent session file: {path}") from exc
    return parse_session(text)


def write_session(path: Path, agent_output: str) -> AgentSession:
    """Persist *agent_output* to *path* with owner-only permissions and parse it."""
    session = parse_session(agent_output)
    try:
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(_ECHO_RE.sub("#echo", agent_output))
        path.chmod(0o600)
    except OSError as exc:
        raise AgentError(f"failed writing agent session file: {path}") from exc
    return session


def is_agent_process(pid: int) -> bool:
    """Whether *pid* is a running ``ssh-agent`` process."""
    try:
        result = subprocess.run(
            ["ps", "-p", str(pid), "-o", "comm="],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("ps lookup for pid %s failed: %s", pid, exc)
        return False
    if result.returncode != 0:
        return False
    command = result.stdout.strip()
    return Path(command).name == _AGENT_COMMAND


def is_session_alive(session: AgentSession) -> bool:
    """A session is usable when its agent runs and its socket still exists."""
    return is_agent_process(session.agent_pid) and Path(session.auth_sock).exists()


def discard_session(path: Path, session: AgentSession | None) -> None:
    """Remove the record and terminate the recorded agent if it still runs."""
    path.unlink(missing_ok=True)
    if session is None or not is_agent_process(session.agent_pid):
        return
    try:
        os.kill(session.agent_pid, signal.SIGTERM)
        logger.debug("Sent SIGTERM to stale agent %s", session.agent_pid)
    except ProcessLookupError:
        logger.debug("Stale agent %s already gone", session.agent_pid)
    except PermissionError:
        logger.warning("Not allowed to terminate stale agent %s", session.agent_pid)


def start_agent(ssh_agent: Path, path: Path) -> AgentSession:
    """Launch a new ``ssh-agent`` and record its environment in *path*."""
    try:
        result = subprocess.run(
            [str(ssh_agent), "-s"],
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise AgentError(f"failed to execute {ssh_agent}: {exc}") from exc
    if result.returncode != 0:
        details = result.stderr.strip()
        message = f"{ssh_agent} exited with status {result.returncode}"
        if details:
            message = f"{message}: {details}"
        raise AgentError(message)
    return write_session(path, result.stdout)
