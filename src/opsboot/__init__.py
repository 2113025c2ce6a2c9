"""Public API surface for opsboot."""

__version__ = "1.0.0"

from opsboot.core.agent import AgentLoader, parse_session
from opsboot.core.contracts import (
    AgentBinaries,
    AgentError,
    AgentSession,
    AgentSettings,
    BasicFile,
    KeyLoadError,
    NullReporter,
    OpsbootError,
    PrerequisiteError,
    Reporter,
    ScaffoldReport,
    ScaffoldSettings,
    TemplateMapping,
    TemplatesDirError,
    TemplateValidationError,
    UsageError,
)
from opsboot.core.scaffold import (
    create_directory_structure,
    create_template_files,
    run_scaffold,
    validate_template_files,
)

__all__ = [
    "AgentBinaries",
    "AgentError",
    "AgentLoader",
    "AgentSession",
    "AgentSettings",
    "BasicFile",
    "KeyLoadError",
    "NullReporter",
    "OpsbootError",
    "PrerequisiteError",
    "Reporter",
    "ScaffoldReport",
    "ScaffoldSettings",
    "TemplateMapping",
    "TemplateValidationError",
    "TemplatesDirError",
    "UsageError",
    "__version__",
    "create_directory_structure",
    "create_template_files",
    "parse_session",
    "run_scaffold",
    "validate_template_files",
]
