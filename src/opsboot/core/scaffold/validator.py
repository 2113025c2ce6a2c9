"""Fail-fast checks run before any template is copied."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from opsboot.core.contracts.exceptions import TemplatesDirError, TemplateValidationError
from opsboot.core.contracts.reporter import NullReporter, Reporter
from opsboot.core.scaffold.layout import REQUIRED_TEMPLATES

logger = logging.getLogger(__name__)


def ensure_templates_directory(templates_dir: Path, *, reporter: Reporter | None = None) -> None:
    """Abort when the templates directory is absent, creating it empty for next time."""
    if templates_dir.is_dir():
        return
    reporter = reporter or NullReporter()
    reporter.info(f"Creating templates directory: {templates_dir}")
    templates_dir.mkdir(parents=True, exist_ok=True)
    raise TemplatesDirError(
        f"Templates directory was created but is empty: {templates_dir}. "
        "Populate it with the template files or use --create-templates.",
        templates_dir=templates_dir,
    )


def find_template_problems(
    templates_dir: Path, templates: Iterable[str] = REQUIRED_TEMPLATES
) -> tuple[list[str], list[str]]:
    """Return ``(missing, empty)`` template names, each in declaration order."""
    missing: list[str] = []
    empty: list[str] = []
    for name in templates:
        path = templates_dir / name
        if not path.is_file():
            missing.append(name)
        elif path.stat().st_size == 0:
            empty.append(name)
    return missing, empty


def validate_template_files(
    templates_dir: Path,
    *,
    copy_templates: bool,
    templates: Iterable[str] = REQUIRED_TEMPLATES,
    reporter: Reporter | None = None,
) -> None:
    """Raise :class:`TemplateValidationError` when copying would use a missing or empty template.

    Missing files are reported on their own first; empty files are only
    reported once every template exists. Skipped entirely unless
    *copy_templates* is set.
    """
    reporter = reporter or NullReporter()
    if not copy_templates:
        reporter.skip("⏭ Skipping template validation (--copy-templates not specified)")
        return

    reporter.info("Validating template files...")
    missing, empty = find_template_problems(templates_dir, templates)
    if missing:
        logger.debug("Missing templates in %s: %s", templates_dir, missing)
        reporter.warning("Run with --create-templates to create missing template files")
        raise TemplateValidationError(missing=missing)
    if empty:
        logger.debug("Empty templates in %s: %s", templates_dir, empty)
        reporter.warning("Please populate the empty template files before running the script")
        reporter.skip(f"Templates location: {templates_dir}")
        raise TemplateValidationError(empty=empty)

    reporter.success("✓ All template files are present and contain content")
