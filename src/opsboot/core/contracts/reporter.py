"""Status reporting protocol for the command-line tools.

Core operations emit human-facing status lines through a ``Reporter``;
the CLI's Rich console implements it, tests record it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reporter(ABC):
    """Observer interface for user-facing status messages."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Neutral progress message (section headers, locations)."""
        ...  # pragma: no cover

    @abstractmethod
    def success(self, message: str) -> None:
        """An action completed."""
        ...  # pragma: no cover

    @abstractmethod
    def skip(self, message: str) -> None:
        """An action was intentionally not performed."""
        ...  # pragma: no cover

    @abstractmethod
    def warning(self, message: str) -> None:
        """Something was skipped because of the filesystem state."""
        ...  # pragma: no cover

    @abstractmethod
    def error(self, message: str) -> None:
        """A failure the user must act on."""
        ...  # pragma: no cover

    @abstractmethod
    def blank(self) -> None:
        """An empty separator line."""
        ...  # pragma: no cover

    @abstractmethod
    def plain(self, message: str) -> None:
        """Unstyled text such as summaries and next steps."""
        ...  # pragma: no cover


class NullReporter(Reporter):
    """No-op implementation used when no output is requested."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def skip(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def blank(self) -> None:
        pass

    def plain(self, message: str) -> None:
        pass
