"""Scaffold command handlers."""

from __future__ import annotations

import argparse
from pathlib import Path

from opsboot.cli.reporting.rich import RichReporter
from opsboot.core.contracts.reporter import Reporter
from opsboot.core.contracts.scaffold import ScaffoldReport, ScaffoldSettings


def settings_from_args(args: argparse.Namespace) -> ScaffoldSettings:
    return ScaffoldSettings(
        project_root=Path(args.root),
        templates_dir=Path(args.templates_dir) if args.templates_dir else None,
        project_name=args.project_name,
        create_templates=args.create_templates,
        copy_templates=args.copy_templates,
    )


def format_next_steps(settings: ScaffoldSettings) -> list[str]:
    root = settings.project_root
    if settings.copy_templates:
        return [
            f"  1. cd {root}",
            "  2. Initialize git (if not already done): git init",
            "  3. Install requirements: ansible-galaxy install -r requirements.yml",
            "  4. Configure inventory files for your environments",
            "  5. Start creating your playbooks and roles",
        ]
    return [
        f"  1. cd {root}",
        f"  2. Populate template files in: {settings.resolved_templates_dir}",
        "  3. Run again with --copy-templates to copy configuration files",
        "  4. Or manually create your configuration files",
    ]


def format_scaffold_summary(report: ScaffoldReport) -> str:
    skipped = len(report.files_skipped) + len(report.templates_missing)
    return (
        f"  Directories: {len(report.directories)}, "
        f"files created: {len(report.files_created)}, skipped: {skipped}"
    )


def run_scaffold_command(args: argparse.Namespace, *, reporter: Reporter | None = None) -> int:
    import opsboot.cli as cli

    settings = settings_from_args(args)
    reporter = reporter or RichReporter()

    reporter.info("=== Ansible/AWX Project Structure Generator ===")
    reporter.info(f"Project location: {settings.project_root}")
    reporter.info(f"Templates location: {settings.resolved_templates_dir}")
    reporter.skip(f"Copy templates: {str(settings.copy_templates).lower()}")
    reporter.blank()

    report = cli.run_scaffold(settings, reporter=reporter)
    if settings.create_templates:
        return 0

    reporter.blank()
    reporter.success("=== Project structure created successfully! ===")
    reporter.info(f"Project name: {settings.resolved_project_name}")
    reporter.info(f"Project location: {settings.project_root}")
    reporter.skip(f"Templates copied: {str(settings.copy_templates).lower()}")
    reporter.plain(format_scaffold_summary(report))
    reporter.blank()
    reporter.skip("Next steps:")
    for line in format_next_steps(settings):
        reporter.plain(line)
    reporter.blank()
    reporter.success("Happy automating with Ansible!")
    return 0
