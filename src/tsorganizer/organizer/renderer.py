"""
Section renderer.

Every non-empty section becomes:

    // #region <label> (<count>)

    <entries>

    // #endregion <label>

Markers are regenerated on every run so counts always match the entries.
"""

from typing import List, Optional, Sequence

from tsorganizer.config.models import RegionsConfig
from tsorganizer.schemas import Comment, Entry, Section

REGION_START = "// #region"
REGION_END = "// #endregion"

# Single-line entries of these kinds are stacked without blank lines
COMPACT_KINDS = {"property", "index_signature", "variable", "type"}

# Tokens that continue the previous line when it has no semicolon
CONTINUATION_STARTS = ("(", "[", "`", "+", "-", "/", "*", "<", ";")

OPEN_ENDED_KINDS = {"variable", "property", "type", "statement"}


def region_start(section: Section, regions: RegionsConfig) -> str:
    marker = f"{REGION_START} {section.label}"
    if regions.add_member_count_in_region_name:
        marker += f" ({section.count})"
    return marker


def region_end(section: Section, regions: RegionsConfig) -> str:
    if regions.add_region_caption_to_region_end:
        return f"{REGION_END} {section.label}"
    return REGION_END


def render_entry(entry: Entry, indent: str, newline: str) -> str:
    """Attached comments, then the entry's original text."""
    parts = []
    for comment in entry.comments:
        parts.append(indent + comment.text + newline)
        if comment.blank_line_after:
            parts.append(newline)
    parts.append(indent + entry.text)
    return "".join(parts)


def render_comments(comments: Sequence[Comment], indent: str, newline: str) -> str:
    """Free-standing comments (file or class body trailers)."""
    text = ""
    for i, comment in enumerate(comments):
        if i:
            text += newline * (2 if comments[i - 1].blank_line_after else 1)
        text += indent + comment.text
    return text


def _is_compact(entry: Entry) -> bool:
    return entry.kind in COMPACT_KINDS and not entry.comments and entry.is_single_line


def continues_previous(entry: Entry) -> bool:
    """True when entry's first token would extend an unterminated statement before it."""
    return entry.text.startswith(CONTINUATION_STARTS)


def is_terminated(code: str, kind: Optional[str] = None) -> bool:
    """
    True when nothing placed after code can join it into one statement.

    A closing brace only ends declarations and members with a body; a
    variable, property, type or statement may end in an object literal.
    """
    code = code.rstrip()
    if not code or code.endswith((";", ",", "{")):
        return True
    return code.endswith("}") and kind not in OPEN_ENDED_KINDS


def terminate(text: str, code_end: Optional[int]) -> str:
    """Insert a semicolon after the code, before any same-line trailing comment."""
    if code_end is None:
        code_end = len(text)
    return text[:code_end] + ";" + text[code_end:]


def terminate_statements(sections: List[Section]) -> List[Section]:
    """
    Add a semicolon to every entry that the next entry would otherwise continue.

    Entries are compared in their final order, across section boundaries.
    """
    entries = [entry for section in sections for entry in section.entries]
    for i in range(1, len(entries)):
        previous = entries[i - 1]
        if continues_previous(entries[i]) and not is_terminated(previous.code, previous.kind):
            code_end = len(previous.code)
            entries[i - 1] = previous.model_copy(update={
                "text": terminate(previous.text, code_end),
                "code_end": code_end + 1,
            })

    result = []
    offset = 0
    for section in sections:
        count = len(section.entries)
        result.append(section.model_copy(update={"entries": entries[offset:offset + count]}))
        offset += count
    return result


def render_section(section: Section, indent: str, newline: str, regions: RegionsConfig) -> str:
    body = ""
    previous = None
    for entry in section.entries:
        if previous is not None:
            body += newline if _is_compact(previous) and _is_compact(entry) else newline * 2
        body += render_entry(entry, indent, newline)
        previous = entry

    return (
        indent + region_start(section, regions) + newline * 2
        + body + newline * 2
        + indent + region_end(section, regions)
    )


def render_sections(sections: List[Section], indent: str, newline: str, regions: RegionsConfig) -> str:
    return (newline * 2).join(render_section(s, indent, newline, regions) for s in sections)
