"""Core contracts."""

from opsboot.core.contracts.agent import AgentBinaries, AgentSession, AgentSettings
from opsboot.core.contracts.exceptions import (
    AgentError,
    KeyLoadError,
    OpsbootError,
    PrerequisiteError,
    TemplatesDirError,
    TemplateValidationError,
    UsageError,
)
from opsboot.core.contracts.reporter import NullReporter, Reporter
from opsboot.core.contracts.scaffold import (
    PLACEHOLDER,
    SENTINEL_NAME,
    BasicFile,
    ScaffoldReport,
    ScaffoldSettings,
    TemplateMapping,
)

__all__ = [
    "PLACEHOLDER",
    "SENTINEL_NAME",
    "AgentBinaries",
    "AgentError",
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
]
