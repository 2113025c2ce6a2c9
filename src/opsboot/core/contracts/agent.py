"""Agent session contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def default_env_file() -> Path:
    return Path.home() / ".ssh" / "environment"


class AgentSession(BaseModel):
    """Connection metadata of a running ssh-agent."""

    model_config = ConfigDict(frozen=True)

    auth_sock: str = Field(min_length=1)
    agent_pid: int = Field(gt=0)

    def as_environ(self) -> dict[str, str]:
        return {"SSH_AUTH_SOCK": self.auth_sock, "SSH_AGENT_PID": str(self.agent_pid)}


class AgentBinaries(BaseModel):
    """Absolute paths of the helper programs the loader shells out to."""

    model_config = ConfigDict(frozen=True)

    ssh_agent: Path
    ssh_add: Path
    shell: Path


class AgentSettings(BaseModel):
    """Settings for one ``loadkey`` run.

    Attributes:
        env_file: Session record location. Default is ``~/.ssh/environment``.
        key: Private key passed to ``ssh-add``; ``None`` loads the default identities.
        shell: Interactive shell override; resolved from PATH (``bash``) when unset.
    """

    env_file: Path = Field(default_factory=default_env_file)
    key: Path | None = None
    shell: Path | None = None

    @field_validator("env_file", "key", "shell", mode="after")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        return value.expanduser()
