"""
Built-in organizer policy.

Module level: enums, interfaces, types, classes, namespaces, functions and
variables, each split into non-exported and exported sections. Class members:
index signatures, static properties and blocks, properties, constructors, then
accessors and methods by accessibility.

Variables, properties and static blocks keep their original order since
initializers may depend on each other.
"""

from tsorganizer.config.models import Configuration, SectionDefinition

CONFIGURATION_FILE_NAME = "tsorganizer.json"


def _module_sections(label: str, kind: str, sort: bool):
    return [
        SectionDefinition(label=label, kinds=(kind,), exported=False, sort_alphabetically=sort),
        SectionDefinition(label=f"Exported {label}", kinds=(kind,), exported=True, sort_alphabetically=sort),
    ]


def _by_accessibility(noun: str, kind: str):
    return [
        SectionDefinition(label=f"Public Static {noun}", kinds=(kind,), accessibility=("public",), static=True, sort_alphabetically=True),
        SectionDefinition(label=f"Public {noun}", kinds=(kind,), accessibility=("public",), static=False, sort_alphabetically=True),
        SectionDefinition(label=f"Protected Static {noun}", kinds=(kind,), accessibility=("protected",), static=True, sort_alphabetically=True),
        SectionDefinition(label=f"Protected {noun}", kinds=(kind,), accessibility=("protected",), static=False, sort_alphabetically=True),
        SectionDefinition(label=f"Private Static {noun}", kinds=(kind,), accessibility=("private",), static=True, sort_alphabetically=True),
        SectionDefinition(label=f"Private {noun}", kinds=(kind,), accessibility=("private",), static=False, sort_alphabetically=True),
    ]


DEFAULT_SECTIONS = tuple(
    _module_sections("Enums", "enum", True)
    + _module_sections("Interfaces", "interface", True)
    + _module_sections("Types", "type", True)
    + _module_sections("Classes", "class", True)
    + _module_sections("Namespaces", "namespace", True)
    + _module_sections("Functions", "function", True)
    + _module_sections("Variables", "variable", False)
)

DEFAULT_MEMBER_SECTIONS = tuple(
    [
        SectionDefinition(label="Index Signatures", kinds=("index_signature",)),
        # Static fields and blocks initialize in source order
        SectionDefinition(label="Static Properties and Blocks", kinds=("property", "static_block"), static=True),
        SectionDefinition(label="Properties", kinds=("property",), static=False),
        SectionDefinition(label="Constructors", kinds=("constructor",)),
    ]
    + _by_accessibility("Accessors", "accessor")
    + _by_accessibility("Methods", "method")
)


def default_configuration() -> Configuration:
    """Return the built-in configuration."""
    return Configuration(sections=DEFAULT_SECTIONS, member_sections=DEFAULT_MEMBER_SECTIONS)
