"""Ansible/AWX project scaffolding."""

from opsboot.core.scaffold.builder import create_dir_with_placeholder, create_directory_structure
from opsboot.core.scaffold.initializer import create_template_files
from opsboot.core.scaffold.layout import DIRECTORIES, REQUIRED_TEMPLATES
from opsboot.core.scaffold.materializer import TemplateMaterializer, render_template
from opsboot.core.scaffold.runner import run_scaffold
from opsboot.core.scaffold.validator import (
    ensure_templates_directory,
    find_template_problems,
    validate_template_files,
)

__all__ = [
    "DIRECTORIES",
    "REQUIRED_TEMPLATES",
    "TemplateMaterializer",
    "create_dir_with_placeholder",
    "create_directory_structure",
    "create_template_files",
    "ensure_templates_directory",
    "find_template_problems",
    "render_template",
    "run_scaffold",
    "validate_template_files",
]
