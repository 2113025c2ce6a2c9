"""Template materialization with copy protection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from opsboot.core.contracts.reporter import NullReporter, Reporter
from opsboot.core.contracts.scaffold import BasicFile, ScaffoldReport, ScaffoldSettings, TemplateMapping
from opsboot.core.scaffold.builder import touch_sentinel
from opsboot.core.scaffold.layout import (
    CONFIGURATION_TEMPLATES,
    SAMPLE_ROLE,
    SAMPLE_ROLE_FILES,
    SAMPLE_ROLE_SUBDIRS,
    SAMPLE_ROLE_TEMPLATES,
)

logger = logging.getLogger(__name__)


def render_template(text: str, *, project_name: str, placeholder: str) -> str:
    """Replace every occurrence of *placeholder* with *project_name*."""
    return text.replace(placeholder, project_name)


class TemplateMaterializer:
    """Writes template-derived and literal files under the project root.

    Targets that already exist are never overwritten. Nothing is written
    unless ``settings.copy_templates`` is set.
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        *,
        reporter: Reporter | None = None,
        report: ScaffoldReport | None = None,
    ) -> None:
        self._settings = settings
        self._reporter = reporter or NullReporter()
        self.report = report if report is not None else ScaffoldReport()

    @property
    def root(self) -> Path:
        return self._settings.project_root

    def _write_target(self, target: str, content: bytes) -> bool:
        target_path = self.root / target
        # a dangling symlink counts as existing
        if target_path.is_symlink() or target_path.exists():
            self._reporter.warning(f"⚠ Target file already exists: {target} (not overwritten)")
            self.report.files_skipped.append(target)
            return False
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_bytes(content)
        self.report.files_created.append(target)
        logger.debug("Wrote %s (%d bytes)", target_path, len(content))
        return True

    def create_file_from_template(self, mapping: TemplateMapping) -> bool:
        """Copy one template to its target. Returns whether a file was written."""
        if not self._settings.copy_templates:
            self._reporter.skip(f"⏭ Skipped template: {mapping.target} (--copy-templates not specified)")
            return False

        source = self._settings.resolved_templates_dir / mapping.template
        if not source.is_file():
            self._reporter.error(f"WARNING: Template file not found: {source}")
            self._reporter.warning(f"Skipping: {mapping.target}")
            self.report.templates_missing.append(mapping.template)
            return False

        # templates need not be UTF-8
        placeholder = self._settings.placeholder.encode("utf-8")
        project_name = self._settings.resolved_project_name.encode("utf-8")
        content = source.read_bytes().replace(placeholder, project_name)
        if not self._write_target(mapping.target, content):
            return False
        self._reporter.success(f"✓ Created file: {mapping.target} (from template: {mapping.template})")
        return True

    def create_basic_file(self, basic: BasicFile) -> bool:
        """Write literal content to a target. Returns whether a file was written."""
        if not self._settings.copy_templates:
            self._reporter.skip(f"⏭ Skipped basic file: {basic.target} (--copy-templates not specified)")
            return False

        content = render_template(
            basic.content,
            project_name=self._settings.resolved_project_name,
            placeholder=self._settings.placeholder,
        ).encode("utf-8")
        if not self._write_target(basic.target, content):
            return False
        self._reporter.success(f"✓ Created file: {basic.target}")
        return True

    def create_configuration_files(self, mappings: Iterable[TemplateMapping] = CONFIGURATION_TEMPLATES) -> None:
        if not self._settings.copy_templates:
            self._reporter.info("Skipping configuration files (--copy-templates not specified)...")
            return
        self._reporter.info("Creating configuration files from templates...")
        for mapping in mappings:
            self.create_file_from_template(mapping)

    def create_sample_role(self) -> None:
        """Build ``roles/sample-role`` and populate it when copying is enabled."""
        self._reporter.info("Creating sample role structure...")
        role_root = self.root / SAMPLE_ROLE
        for subdir in SAMPLE_ROLE_SUBDIRS:
            (role_root / subdir).mkdir(parents=True, exist_ok=True)

        if self._settings.copy_templates:
            for mapping in SAMPLE_ROLE_TEMPLATES:
                self.create_file_from_template(mapping)
            for basic in SAMPLE_ROLE_FILES:
                self.create_basic_file(basic)
            return

        self._reporter.skip("⏭ Sample role files skipped (--copy-templates not specified)")
        for subdir in SAMPLE_ROLE_SUBDIRS:
            touch_sentinel(role_root / subdir)
