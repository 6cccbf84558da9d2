"""
tsorganizer - TypeScript class organizer

Groups declarations and class members into counted #region sections and
orders them by a configurable policy, without changing program behavior.
"""

__version__ = "1.0.0"

# Core exports
from tsorganizer.organizer import organize
from tsorganizer.config import (
    Configuration,
    SectionDefinition,
    default_configuration,
    load_configuration,
    discover_configuration,
)
from tsorganizer.exceptions import OrganizerError, ParseError, ConfigurationError
from tsorganizer.schemas import OrganizeResult, SourceUnit, Declaration, Member, Section

__all__ = [
    "__version__",
    "organize",
    "Configuration",
    "SectionDefinition",
    "default_configuration",
    "load_configuration",
    "discover_configuration",
    "OrganizerError",
    "ParseError",
    "ConfigurationError",
    "OrganizeResult",
    "SourceUnit",
    "Declaration",
    "Member",
    "Section",
]
