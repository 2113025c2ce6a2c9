"""Loadkey command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from opsboot.cli.reporting.rich import RichReporter
from opsboot.core.contracts.agent import AgentSettings
from opsboot.core.contracts.reporter import Reporter


def settings_from_args(args: argparse.Namespace) -> AgentSettings:
    values: dict[str, object] = {}
    if args.key:
        values["key"] = Path(args.key)
    if args.env_file:
        values["env_file"] = Path(args.env_file)
    return AgentSettings.model_validate(values)


def run_loadkey(args: argparse.Namespace, *, reporter: Reporter | None = None) -> int:
    """Start/reuse the agent, load the key and exec the shell.

    Returns only if the final ``os.execve`` is intercepted.
    """
    import opsboot.cli as cli

    settings = settings_from_args(args)
    loader = cli.AgentLoader(settings, reporter=reporter or RichReporter())
    loader.run()
    return 0
