"""SSH agent session management."""

from opsboot.core.agent.binaries import resolve_binaries
from opsboot.core.agent.loader import AgentLoader
from opsboot.core.agent.session import (
    discard_session,
    is_agent_process,
    is_session_alive,
    load_session,
    parse_session,
    start_agent,
    write_session,
)

__all__ = [
    "AgentLoader",
    "discard_session",
    "is_agent_process",
    "is_session_alive",
    "load_session",
    "parse_session",
    "resolve_binaries",
    "start_agent",
    "write_session",
]
