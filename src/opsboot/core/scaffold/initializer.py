"""Template stub creation (``--create-templates``)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from opsboot.core.contracts.reporter import NullReporter, Reporter
from opsboot.core.contracts.scaffold import PLACEHOLDER
from opsboot.core.scaffold.layout import REQUIRED_TEMPLATES


def create_template_files(
    templates_dir: Path,
    *,
    templates: Iterable[str] = REQUIRED_TEMPLATES,
    reporter: Reporter | None = None,
) -> list[str]:
    """Create every template that does not exist yet as an empty file.

    Returns the names that were created; existing templates are left as-is.
    """
    reporter = reporter or NullReporter()
    reporter.info(f"Creating empty template files in: {templates_dir}")
    templates_dir.mkdir(parents=True, exist_ok=True)

    created: list[str] = []
    for name in templates:
        path = templates_dir / name
        if path.is_file():
            reporter.warning(f"⚠ Template already exists: {name}")
            continue
        path.touch()
        created.append(name)
        reporter.success(f"✓ Created empty template: {name}")

    reporter.info("Template files created successfully!")
    reporter.error("IMPORTANT: All template files are empty and must be populated before running the script.")
    reporter.skip(f"Please edit the template files in: {templates_dir}")
    reporter.skip(f"Use {PLACEHOLDER} as placeholder for the project name in templates.")
    return created
