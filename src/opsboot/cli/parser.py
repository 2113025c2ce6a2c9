"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from typing import NoReturn

from opsboot.core.contracts.exceptions import UsageError

_SCAFFOLD_DESCRIPTION = """\
Creates a complete Ansible project structure following best practices.
Templates are read from <root>/scripts/templates unless --templates-dir is given.

Template behavior:
  By default, only directory structure is created
  Use --copy-templates to copy template files to their destinations
  Existing files are never overwritten for safety
"""

_SCAFFOLD_EPILOG = """\
Examples:
  %(prog)s                      # Create project structure only (no template files)
  %(prog)s --copy-templates     # Create structure and copy template files
  %(prog)s --create-templates   # Create empty template files first
  %(prog)s -c -v                # Copy templates with verbose output
"""


def _package_version() -> str:
    try:
        return version("opsboot")
    except PackageNotFoundError:
        return "0.0.0"


class OpsbootArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_scaffold_parser() -> OpsbootArgumentParser:
    parser = OpsbootArgumentParser(
        prog="create-ansible-structure",
        description=_SCAFFOLD_DESCRIPTION,
        epilog=_SCAFFOLD_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--create-templates",
        "-t",
        action="store_true",
        help="Create empty template files, then exit",
    )
    parser.add_argument(
        "--copy-templates",
        "-c",
        action="store_true",
        help="Copy template files to target locations",
    )
    parser.add_argument("--root", default=".", help="Project root (default: current directory)")
    parser.add_argument(
        "--templates-dir",
        default=None,
        help="Templates directory (default: <root>/scripts/templates)",
    )
    parser.add_argument(
        "--project-name",
        default=None,
        help="Value substituted for PROJECT_NAME (default: basename of the project root)",
    )
    return parser


def build_loadkey_parser() -> OpsbootArgumentParser:
    parser = OpsbootArgumentParser(
        prog="loadkey",
        description="Start or reuse an ssh-agent, load a key, then open an interactive shell.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "-k",
        dest="key",
        nargs="?",
        default=None,
        const=None,
        metavar="KEYPATH",
        help="Private key passed to ssh-add (default identities when omitted)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Agent session record (default: ~/.ssh/environment)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["OpsbootArgumentParser", "build_loadkey_parser", "build_scaffold_parser"]
