"""Scaffold run orchestration."""

from __future__ import annotations

import logging

from opsboot.core.contracts.reporter import NullReporter, Reporter
from opsboot.core.contracts.scaffold import ScaffoldReport, ScaffoldSettings
from opsboot.core.prerequisites import check_prerequisites
from opsboot.core.scaffold.builder import create_directory_structure
from opsboot.core.scaffold.initializer import create_template_files
from opsboot.core.scaffold.materializer import TemplateMaterializer
from opsboot.core.scaffold.validator import ensure_templates_directory, validate_template_files

logger = logging.getLogger(__name__)


def run_scaffold(settings: ScaffoldSettings, *, reporter: Reporter | None = None) -> ScaffoldReport:
    """Run the generator for *settings*.

    In ``create_templates`` mode only the template stubs are created.
    Otherwise, in copy mode the templates directory and every required
    template are checked before anything is written, then the directory tree,
    configuration files and sample role are produced.
    """
    reporter = reporter or NullReporter()
    report = ScaffoldReport()
    templates_dir = settings.resolved_templates_dir

    reporter.info("Checking prerequisites...")
    check_prerequisites(settings.required_commands)
    reporter.success("✓ Prerequisites check passed")

    if settings.create_templates:
        report.templates_created = create_template_files(templates_dir, reporter=reporter)
        return report

    if settings.copy_templates:
        ensure_templates_directory(templates_dir, reporter=reporter)
        validate_template_files(templates_dir, copy_templates=True, reporter=reporter)

    logger.debug("Scaffolding %s as %r", settings.project_root, settings.resolved_project_name)
    report.directories = create_directory_structure(settings.project_root, reporter=reporter)

    materializer = TemplateMaterializer(settings, reporter=reporter, report=report)
    materializer.create_configuration_files()
    materializer.create_sample_role()
    return report
