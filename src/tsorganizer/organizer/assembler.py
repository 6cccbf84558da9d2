"""
Text assembler: stitches the untouched leading block, the rendered sections
and the trailing comments back into a file, substituting reorganized member
sections into class (and opted-in interface) bodies.
"""

from tsorganizer.config.models import Configuration
from tsorganizer.organizer.policy import build_sections, member_definitions_for
from tsorganizer.organizer.renderer import (
    continues_previous,
    is_terminated,
    render_comments,
    render_sections,
    terminate,
    terminate_statements,
)
from tsorganizer.schemas import Declaration, SourceUnit


def render_declaration(declaration: Declaration, configuration: Configuration, newline: str) -> Declaration:
    """
    Return the declaration with its body replaced by rendered member sections.

    Declarations without members, or without member sections in the
    configuration, are returned unchanged.
    """
    definitions = member_definitions_for(declaration, configuration)
    if not declaration.members or definitions is None:
        return declaration

    sections = terminate_statements(build_sections(declaration.members, definitions))
    body = render_sections(sections, declaration.member_indent, newline, configuration.regions)
    if declaration.body_trailing:
        body += newline * 2 + render_comments(declaration.body_trailing, declaration.member_indent, newline)

    text = declaration.head + newline + body + newline + declaration.close_indent + declaration.tail
    update = {"text": text}
    if declaration.code_end is not None:
        # The text after the code lies inside the unchanged tail
        update["code_end"] = len(text) - (len(declaration.text) - declaration.code_end)
    return declaration.model_copy(update=update)


def assemble(unit: SourceUnit, configuration: Configuration) -> str:
    """Build the organized text of a whole file."""
    newline = unit.newline
    declarations = [render_declaration(d, configuration, newline) for d in unit.declarations]
    sections = terminate_statements(build_sections(declarations, configuration.sections))

    leading = unit.leading
    first = sections[0].entries[0] if sections else None
    if first is not None and continues_previous(first) and not is_terminated(leading[:unit.leading_code_end]):
        leading = terminate(leading, unit.leading_code_end)

    parts = []
    if leading:
        parts.append(leading)
    parts.append(render_sections(sections, "", newline, configuration.regions))
    if unit.trailing:
        parts.append(render_comments(unit.trailing, "", newline))

    text = (newline * 2).join(parts)
    if unit.final_newline:
        text += newline
    return text
