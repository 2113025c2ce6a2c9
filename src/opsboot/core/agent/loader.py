"""Start or reuse an ssh-agent, load a key and hand over to a shell."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import NoReturn

from opsboot.core.agent.binaries import resolve_binaries
from opsboot.core.agent.session import discard_session, is_session_alive, load_session, start_agent
from opsboot.core.contracts.agent import AgentBinaries, AgentSession, AgentSettings
from opsboot.core.contracts.exceptions import AgentError, KeyLoadError
from opsboot.core.contracts.reporter import NullReporter, Reporter

logger = logging.getLogger(__name__)


class AgentLoader:
    """Drives one ``loadkey`` invocation.

    The session found or created by :meth:`ensure_session` is passed
    explicitly to :meth:`add_key` and :meth:`exec_shell` instead of being
    read back from the process environment.
    """

    def __init__(
        self,
        settings: AgentSettings,
        *,
        binaries: AgentBinaries | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._settings = settings
        self._binaries = binaries or resolve_binaries(shell=settings.shell)
        self._reporter = reporter or NullReporter()

    @property
    def binaries(self) -> AgentBinaries:
        return self._binaries

    def ensure_session(self) -> AgentSession:
        env_file = self._settings.env_file
        try:
            existing = load_session(env_file)
        except AgentError as exc:
            logger.debug("Ignoring unreadable session record %s: %s", env_file, exc)
            discard_session(env_file, None)
            existing = None

        if existing is not None:
            if is_session_alive(existing):
                logger.debug("Reusing ssh-agent %s at %s", existing.agent_pid, existing.auth_sock)
                self._reporter.success(f"Reuse SSH agent (pid {existing.agent_pid}) [OK]")
                return existing
            logger.debug("Session record %s points at a dead agent", env_file)
            discard_session(env_file, existing)

        session = start_agent(self._binaries.ssh_agent, env_file)
        self._reporter.success("Initialise new SSH agent [OK]")
        return session

    def add_key(self, session: AgentSession) -> bool:
        """Run ``ssh-add``; report the outcome without raising on failure."""
        key = str(self._settings.key) if self._settings.key is not None else None
        label = f" {key}" if key else ""
        self._reporter.info(f"Load SSH Key{label}")

        cmd = [str(self._binaries.ssh_add)]
        if key is not None:
            cmd.append(key)
        env = {**os.environ, **session.as_environ()}
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, env=env, check=False)
            returncode = result.returncode
        except OSError as exc:
            logger.debug("ssh-add could not be executed: %s", exc)
            returncode = 127

        if returncode == 0:
            self._reporter.success(f"SSH Key{label} loading [OK]")
            return True
        self._reporter.error(f"SSH Key{label} loading [Fail]")
        self._reporter.warning(str(KeyLoadError(key, returncode)))
        return False

    def exec_shell(self, session: AgentSession) -> NoReturn:
        shell = str(self._binaries.shell)
        env = {**os.environ, **session.as_environ()}
        logger.debug("Exec %s -i", shell)
        os.execve(shell, [shell, "-i"], env)

    def run(self) -> NoReturn:
        session = self.ensure_session()
        self.add_key(session)
        self.exec_shell(session)

