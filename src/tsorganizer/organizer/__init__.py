"""
Organizer package: the reorganizing engine.

Components:
- policy: section classification and ordering
- renderer: region markers and entry text
- assembler: whole-file text reconstruction
- detector: change detection
- facade: organize() entry point
"""

from .facade import organize
from .policy import OTHER_SECTION_LABEL, build_sections, classify, member_definitions_for
from .renderer import render_sections, render_section, terminate_statements
from .assembler import assemble, render_declaration
from .detector import detect_change

__all__ = [
    "organize",
    "OTHER_SECTION_LABEL",
    "build_sections",
    "classify",
    "member_definitions_for",
    "render_sections",
    "render_section",
    "terminate_statements",
    "assemble",
    "render_declaration",
    "detect_change",
]
