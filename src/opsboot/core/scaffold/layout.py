"""Fixed Ansible/AWX project layout."""

from __future__ import annotations

from opsboot.core.contracts.scaffold import BasicFile, TemplateMapping

DIRECTORIES: tuple[str, ...] = (
    # Custom collections
    "collections/ansible_collections",
    "group_vars/all",
    "group_vars/production",
    "group_vars/staging",
    "group_vars/development",
    "host_vars",
    "inventory/production",
    "inventory/staging",
    "inventory/development",
    "playbooks",
    "roles",
    # Custom modules
    "library",
    "plugins/action",
    "plugins/callback",
    "plugins/connection",
    "plugins/filter",
    "plugins/lookup",
    "plugins/vars",
    "templates",
    "files",
    "docs",
    "tests/integration",
    "tests/unit",
    "awx/job_templates",
    "awx/workflows",
    "awx/credentials",
    "awx/projects",
    "awx/inventories",
    "molecule/default",
    # Encrypted files
    "vault",
)

CONFIGURATION_TEMPLATES: tuple[TemplateMapping, ...] = (
    TemplateMapping(template="ansible.cfg.tpl", target="ansible.cfg"),
    TemplateMapping(template="requirements.yml.tpl", target="requirements.yml"),
    TemplateMapping(template="gitignore.tpl", target=".gitignore"),
    TemplateMapping(template="README.md.tpl", target="README.md"),
    TemplateMapping(template="CONTRIBUTING.md.tpl", target="CONTRIBUTING.md"),
    TemplateMapping(template="site.yml.tpl", target="site.yml"),
    TemplateMapping(template="hosts.yml.tpl", target="inventory/development/hosts.yml"),
    TemplateMapping(template="group_vars_all.yml.tpl", target="group_vars/all/main.yml"),
    TemplateMapping(template="awx_job_template.yml.tpl", target="awx/job_templates/deploy-application.yml"),
    TemplateMapping(template="molecule.yml.tpl", target="molecule/default/molecule.yml"),
)

SAMPLE_ROLE = "roles/sample-role"
SAMPLE_ROLE_SUBDIRS: tuple[str, ...] = (
    "tasks",
    "handlers",
    "templates",
    "files",
    "vars",
    "defaults",
    "meta",
    "tests",
)

SAMPLE_ROLE_TEMPLATES: tuple[TemplateMapping, ...] = (
    TemplateMapping(template="role_tasks_main.yml.tpl", target=f"{SAMPLE_ROLE}/tasks/main.yml"),
    TemplateMapping(template="role_meta_main.yml.tpl", target=f"{SAMPLE_ROLE}/meta/main.yml"),
)

SAMPLE_ROLE_FILES: tuple[BasicFile, ...] = (
    BasicFile(target=f"{SAMPLE_ROLE}/defaults/main.yml", content="---\n# Default variables for sample-role\n"),
    BasicFile(target=f"{SAMPLE_ROLE}/vars/main.yml", content="---\n# Variables for sample-role\n"),
    BasicFile(target=f"{SAMPLE_ROLE}/handlers/main.yml", content="---\n# Handlers for sample-role\n"),
    BasicFile(
        target=f"{SAMPLE_ROLE}/tests/test.yml",
        content="---\n- hosts: localhost\n  remote_user: root\n  roles:\n    - sample-role\n",
    ),
)

REQUIRED_TEMPLATES: tuple[str, ...] = tuple(
    mapping.template for mapping in (*CONFIGURATION_TEMPLATES, *SAMPLE_ROLE_TEMPLATES)
)
