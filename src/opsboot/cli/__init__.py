"""Command-line interface for opsboot."""

from __future__ import annotations

import logging as logging

from opsboot import AgentLoader as AgentLoader
from opsboot import run_scaffold as run_scaffold
from opsboot.cli.app import loadkey_main as loadkey_main
from opsboot.cli.app import main as main
from opsboot.cli.app import scaffold_main as scaffold_main
from opsboot.cli.commands import loadkey as loadkey_command
from opsboot.cli.commands import scaffold as scaffold_command
from opsboot.cli.parser import build_loadkey_parser as build_loadkey_parser
from opsboot.cli.parser import build_scaffold_parser as build_scaffold_parser

_run_scaffold = scaffold_command.run_scaffold_command
_run_loadkey = loadkey_command.run_loadkey
