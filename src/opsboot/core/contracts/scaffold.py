"""Scaffold generator contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

PLACEHOLDER = "PROJECT_NAME"
SENTINEL_NAME = ".donotdelete"


class TemplateMapping(BaseModel):
    """A template file name and the project-relative path it is copied to."""

    model_config = ConfigDict(frozen=True)

    template: str
    target: str


class BasicFile(BaseModel):
    """A project-relative file written from literal content."""

    model_config = ConfigDict(frozen=True)

    target: str
    content: str


class ScaffoldSettings(BaseModel):
    """Settings for one scaffold run.

    Attributes:
        project_root: Directory the structure is created under.
        templates_dir: Template source directory. Default is ``<project_root>/scripts/templates``.
        project_name: Value substituted for the placeholder. Default is the project root's basename.
        create_templates: Create empty template stubs and stop.
        copy_templates: Validate templates and copy them to their targets.
        required_commands: Executables that must be on PATH before anything runs.
    """

    project_root: Path
    templates_dir: Path | None = None
    project_name: str | None = None
    placeholder: str = PLACEHOLDER
    create_templates: bool = False
    copy_templates: bool = False
    required_commands: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _resolve_defaults(self) -> ScaffoldSettings:
        self.project_root = self.project_root.expanduser().resolve()
        if self.templates_dir is None:
            self.templates_dir = self.project_root / "scripts" / "templates"
        else:
            self.templates_dir = self.templates_dir.expanduser().resolve()
        if not self.project_name:
            self.project_name = self.project_root.name
        return self

    @property
    def resolved_templates_dir(self) -> Path:
        assert self.templates_dir is not None
        return self.templates_dir

    @property
    def resolved_project_name(self) -> str:
        assert self.project_name is not None
        return self.project_name


class ScaffoldReport(BaseModel):
    """Outcome of a scaffold run."""

    directories: list[str] = Field(default_factory=list)
    files_created: list[str] = Field(default_factory=list)
    files_skipped: list[str] = Field(default_factory=list)
    templates_missing: list[str] = Field(default_factory=list)
    templates_created: list[str] = Field(default_factory=list)
