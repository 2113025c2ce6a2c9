"""CLI app entrypoints and error mapping."""

from __future__ import annotations

import sys

from opsboot.core.contracts.exceptions import OpsbootError, UsageError


def _configure_logging(verbose: bool) -> None:
    import opsboot.cli as cli

    if verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)


def scaffold_main(argv: list[str] | None = None) -> int:
    import opsboot.cli as cli

    parser = cli.build_scaffold_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    _configure_logging(args.verbose)
    try:
        return cli._run_scaffold(args)
    except OpsbootError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


def loadkey_main(argv: list[str] | None = None) -> int:
    import opsboot.cli as cli

    parser = cli.build_loadkey_parser()
    try:
        args, ignored = parser.parse_known_args(argv)
    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _configure_logging(args.verbose)
    if ignored:
        cli.logging.getLogger(__name__).debug("Ignoring unrecognized arguments: %s", " ".join(ignored))
    try:
        return cli._run_loadkey(args)
    except OpsbootError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


main = scaffold_main

__all__ = ["loadkey_main", "main", "scaffold_main"]
