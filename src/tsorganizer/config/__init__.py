"""
Configuration package.

Immutable organizer policy plus discovery of tsorganizer.json files.
"""

from .models import (
    Configuration,
    SectionDefinition,
    FilesConfig,
    RegionsConfig,
    MembersConfig,
)
from .defaults import (
    CONFIGURATION_FILE_NAME,
    DEFAULT_SECTIONS,
    DEFAULT_MEMBER_SECTIONS,
    default_configuration,
)
from .loader import (
    load_configuration,
    discover_configuration,
    find_configuration_file,
    write_default_configuration,
)

__all__ = [
    "Configuration",
    "SectionDefinition",
    "FilesConfig",
    "RegionsConfig",
    "MembersConfig",
    "CONFIGURATION_FILE_NAME",
    "DEFAULT_SECTIONS",
    "DEFAULT_MEMBER_SECTIONS",
    "default_configuration",
    "load_configuration",
    "discover_configuration",
    "find_configuration_file",
    "write_default_configuration",
]
