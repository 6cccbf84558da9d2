"""
Policy engine: maps declarations and members to sections.

First matching section definition wins, in configuration order. Entries
matching nothing land in a trailing "Other" section so nothing is dropped.
Empty sections are omitted.
"""

from typing import List, Optional, Sequence, Tuple

from tsorganizer.config.models import Configuration, SectionDefinition
from tsorganizer.logging_config import logger
from tsorganizer.schemas import Declaration, Entry, Section

OTHER_SECTION_LABEL = "Other"


def classify(entry: Entry, definitions: Sequence[SectionDefinition]) -> Optional[int]:
    """Index of the first definition matching entry, or None."""
    for index, definition in enumerate(definitions):
        if definition.matches(entry):
            return index
    return None


def sort_entries(entries: List[Entry]) -> List[Entry]:
    """
    Sort by name using ordinal (code point) comparison.

    sorted() is stable, so entries with equal names keep their input order.
    """
    return sorted(entries, key=lambda entry: entry.name)


def build_sections(entries: Sequence[Entry], definitions: Sequence[SectionDefinition]) -> List[Section]:
    """
    Distribute entries over the section definitions.

    Args:
        entries: Entries in original order
        definitions: Ordered section definitions

    Returns:
        Non-empty sections in definition order, "Other" last
    """
    buckets: List[List[Entry]] = [[] for _ in definitions]
    other: List[Entry] = []

    for entry in sorted(entries, key=lambda e: e.position):
        index = classify(entry, definitions)
        if index is None:
            logger.debug(f"No section matches {entry.kind} '{entry.name}', using '{OTHER_SECTION_LABEL}'")
            other.append(entry)
        else:
            buckets[index].append(entry)

    sections = []
    for definition, bucket in zip(definitions, buckets):
        if not bucket:
            continue
        if definition.sort_alphabetically:
            bucket = sort_entries(bucket)
        sections.append(Section(label=definition.label, entries=bucket))

    if other:
        sections.append(Section(label=OTHER_SECTION_LABEL, entries=other))
    return sections


def member_definitions_for(declaration: Declaration, configuration: Configuration) -> Optional[Tuple[SectionDefinition, ...]]:
    """
    Section definitions for the members of a declaration.

    Classes always use member_sections; interfaces only when the configuration
    defines interface_member_sections. Anything else keeps its body untouched.
    """
    if declaration.kind == "class":
        return configuration.member_sections
    if declaration.kind == "interface":
        return configuration.interface_member_sections
    return None
