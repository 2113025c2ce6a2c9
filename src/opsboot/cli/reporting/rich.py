"""Rich-based status reporter."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from opsboot.core.contracts.reporter import Reporter


class RichReporter(Reporter):
    """Coloured terminal status lines powered by Rich.

    Messages are escaped, so bracketed text such as ``[OK]`` is printed
    verbatim rather than parsed as markup.
    """

    _STYLES: ClassVar[dict[str, str]] = {
        "info": "bold yellow",
        "success": "green",
        "skip": "blue",
        "warning": "yellow",
        "error": "red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    @property
    def console(self) -> Console:
        return self._console

    def _emit(self, kind: str, message: str) -> None:
        self._console.print(escape(message), style=self._STYLES[kind])

    def blank(self) -> None:
        self._console.print()

    def plain(self, message: str) -> None:
        self._console.print(escape(message))

    def info(self, message: str) -> None:
        self._emit("info", message)

    def success(self, message: str) -> None:
        self._emit("success", message)

    def skip(self, message: str) -> None:
        self._emit("skip", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)
