"""Exception hierarchy for opsboot."""

from __future__ import annotations


class OpsbootError(Exception):
    """Base exception for all opsboot errors."""


class UsageError(OpsbootError):
    """Command-line usage failure (unknown option, bad value)."""


class PrerequisiteError(OpsbootError):
    """A required external command is not available on PATH."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Required command '{command}' not found")
        self.command = command


class TemplatesDirError(OpsbootError):
    """The templates directory is missing (or was just created empty)."""

    def __init__(self, message: str, *, templates_dir: object = None) -> None:
        super().__init__(message)
        self.templates_dir = templates_dir


class TemplateValidationError(OpsbootError):
    """Required template files are missing or empty."""

    def __init__(self, *, missing: list[str] | None = None, empty: list[str] | None = None) -> None:
        self.missing = list(missing or [])
        self.empty = list(empty or [])
        lines = []
        if self.missing:
            lines.append("Missing template files:")
            lines.extend(f"  - {name}" for name in self.missing)
        if self.empty:
            lines.append("Empty template files found:")
            lines.extend(f"  - {name}" for name in self.empty)
        super().__init__("\n".join(lines) or "Template validation failed")


class AgentError(OpsbootError):
    """SSH agent could not be started or its output could not be parsed."""


class KeyLoadError(AgentError):
    """``ssh-add`` exited non-zero."""

    def __init__(self, key: str | None, returncode: int) -> None:
        target = key or "default identities"
        super().__init__(f"ssh-add failed for {target} (exit {returncode})")
        self.key = key
        self.returncode = returncode
