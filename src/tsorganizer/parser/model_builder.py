"""
Model builder: turns TypeScript source text into a SourceUnit.

Works on the UTF-8 bytes of the source so tree-sitter byte offsets map
exactly onto slices. Every declaration/member keeps its exact original text;
comments are attached to the entry that follows them and region markers
from a previous run are dropped.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tree_sitter import Node

from tsorganizer.config.models import MembersConfig
from tsorganizer.exceptions import ParseError
from tsorganizer.logging_config import logger
from tsorganizer.parser.language_manager import create_parser
from tsorganizer.schemas import Comment, Declaration, Member, SourceUnit

REGION_MARKER = re.compile(rb"^//\s*#(?:end)?region\b")

# Region markers are kept in pending comment lists as this sentinel
MARKER = object()

SEPARATOR_TYPES = {";", ",", "empty_statement"}

LEADING_TYPES = {"hash_bang_line", "import_statement", "import_alias"}

DECLARATION_KINDS_BY_TYPE = {
    "class_declaration": "class",
    "abstract_class_declaration": "class",
    "class": "class",
    "interface_declaration": "interface",
    "enum_declaration": "enum",
    "type_alias_declaration": "type",
    "function_declaration": "function",
    "generator_function_declaration": "function",
    "function_signature": "function",
    "function_expression": "function",
    "function": "function",
    "generator_function": "function",
    "lexical_declaration": "variable",
    "variable_declaration": "variable",
    "internal_module": "namespace",
    "module": "namespace",
}

SIGNATURE_TYPES = {"function_signature", "method_signature", "abstract_method_signature"}

ARROW_FUNCTION_TYPES = {"arrow_function"}


@dataclass
class _Item:
    """A span of source bytes that becomes one entry."""
    node: Node
    start: int
    end: int
    end_row: int
    code_end: int
    pending: list = field(default_factory=list)


@dataclass
class _Classified:
    item: _Item
    kind: str
    name: str
    inner: Node
    exported: bool = False
    accessibility: str = "public"
    is_static: bool = False
    is_signature: bool = False
    is_arrow_function: bool = False


class ModelBuilder:
    """
    Build the structural model of one file.

    Usage:
        unit = ModelBuilder("a.ts", text).build()
    """

    def __init__(self, file_path: str, text: str, members_config: Optional[MembersConfig] = None):
        self.file_path = file_path
        self.text = text
        self.source = text.encode("utf-8")
        self.newline = "\r\n" if "\r\n" in text else "\n"
        self.members_config = members_config or MembersConfig()
        self.indent_unit = "\t" if re.search(r"\n\t", text) else "    "

    def build(self) -> SourceUnit:
        """
        Parse the file and build its SourceUnit.

        Raises:
            ParseError: if the text is not valid TypeScript
        """
        parser = create_parser(self.file_path)
        tree = parser.parse(self.source)
        root = tree.root_node
        if root.has_error:
            self._raise_parse_error(root)

        children = list(root.children)

        # Leading block: hashbang, directives, imports and re-exports (with the comments between them)
        lead_index = -1
        for i, child in enumerate(children):
            if child.type == "comment":
                continue
            if self._is_leading_statement(child):
                lead_index = i
                continue
            break

        lead_end = children[lead_index].end_byte if lead_index >= 0 else 0
        lead_code_end = lead_end
        lead_row = children[lead_index].end_point[0] if lead_index >= 0 else -1
        rest = children[lead_index + 1:]
        while rest and lead_index >= 0 and self._is_trailer(rest[0]) and rest[0].start_point[0] == lead_row:
            lead_end = rest[0].end_byte
            if rest[0].type != "comment":
                lead_code_end = lead_end
            rest.pop(0)

        items, trailing = self._collect(rest)
        unit = SourceUnit(
            file_path=self.file_path,
            newline=self.newline,
            final_newline=self.text.endswith("\n"),
        )

        leading = self._decode(0, lead_end)
        if items:
            extra, own = self._split_first_pending(items[0])
            items[0].pending = own
            leading = self._append_comments(leading, lead_end, extra)
        else:
            leading = self._append_comments(leading, lead_end, trailing)
            trailing = []
        unit.leading = leading
        unit.leading_code_end = len(self._decode(0, lead_code_end))
        unit.trailing = self._comments(trailing, len(self.source))

        classified = [self._classify_declaration(item) for item in items]
        classified = self._merge_overloads(classified)
        unit.declarations = [self._declaration(c, position) for position, c in enumerate(classified)]

        logger.debug(f"Built model for {self.file_path}: {len(unit.declarations)} declarations")
        return unit

    # ------------------------------------------------------------------
    # Sequencing
    # ------------------------------------------------------------------

    def _collect(self, nodes: List[Node]) -> Tuple[List[_Item], list]:
        """
        Group sibling nodes into entry items.

        Comments and separators on the line where the previous item ends
        extend it. Separators and decorators on a later line open the next
        item (`;(x)` in code without semicolons must stay with `(x)`). Every
        other comment waits for the next item.

        Returns:
            (items, pending comments after the last item)
        """
        items: List[_Item] = []
        pending: list = []
        span_start = None

        for node in nodes:
            if node.start_byte == node.end_byte:
                continue

            if self._is_trailer(node):
                previous = items[-1] if items else None
                same_row = previous is not None and node.start_point[0] == previous.end_row
                if same_row and not pending and span_start is None:
                    previous.end = node.end_byte
                    previous.end_row = node.end_point[0]
                    if node.type != "comment":
                        previous.code_end = node.end_byte
                    continue
                if span_start is not None:
                    # already inside the next item's text
                    continue
                if node.type != "comment":
                    span_start = node.start_byte
                    continue
                pending.append(MARKER if self._is_region_marker(node) else node)
                continue

            if node.type == "decorator":
                if span_start is None:
                    span_start = node.start_byte
                continue

            start = node.start_byte if span_start is None else span_start
            items.append(_Item(
                node=node,
                start=start,
                end=node.end_byte,
                end_row=node.end_point[0],
                code_end=node.end_byte,
                pending=pending,
            ))
            pending = []
            span_start = None

        return items, pending

    def _split_first_pending(self, item: _Item) -> Tuple[list, list]:
        """
        Split the comments above the first declaration into (leading block, attached).

        Comments before the last region marker belong to the leading block;
        without markers only the contiguous run directly above stays attached.
        """
        pending = item.pending
        markers = [i for i, n in enumerate(pending) if n is MARKER]
        if markers:
            last = markers[-1]
            return pending[:last], pending[last + 1:]

        split = len(pending)
        next_start = item.start
        while split > 0 and self.source.count(b"\n", pending[split - 1].end_byte, next_start) < 2:
            next_start = pending[split - 1].start_byte
            split -= 1
        return pending[:split], pending[split:]

    def _comments(self, pending: list, next_start: int) -> List[Comment]:
        nodes = [n for n in pending if n is not MARKER]
        comments = []
        for i, node in enumerate(nodes):
            following = nodes[i + 1].start_byte if i + 1 < len(nodes) else next_start
            blank = self.source.count(b"\n", node.end_byte, following) >= 2
            comments.append(Comment(text=self._decode(node.start_byte, node.end_byte).rstrip(), blank_line_after=blank))
        return comments

    def _append_comments(self, text: str, text_end: int, pending: list) -> str:
        nodes = [n for n in pending if n is not MARKER]
        previous_end = text_end
        for node in nodes:
            if text:
                blank = self.source.count(b"\n", previous_end, node.start_byte) >= 2
                text += self.newline * (2 if blank else 1)
            text += self._decode(node.start_byte, node.end_byte).rstrip()
            previous_end = node.end_byte
        return text

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _classify_declaration(self, item: _Item) -> _Classified:
        node = item.node
        exported = False
        inner = node

        if node.type == "export_statement":
            exported = True
            for field_name in ("declaration", "value"):
                exported_node = node.child_by_field_name(field_name)
                if exported_node is not None:
                    inner = exported_node
                    break

        if inner.type == "ambient_declaration":
            inner = next((c for c in inner.named_children if c.type in DECLARATION_KINDS_BY_TYPE), inner)

        if inner.type == "expression_statement" and inner.named_child_count == 1:
            if inner.named_children[0].type == "internal_module":
                inner = inner.named_children[0]

        kind = DECLARATION_KINDS_BY_TYPE.get(inner.type, "statement")
        name = self._name_of(inner)
        is_arrow = False

        if kind == "variable":
            declarators = [c for c in inner.named_children if c.type == "variable_declarator"]
            if declarators:
                name = self._name_of(declarators[0])
            if len(declarators) == 1:
                value = declarators[0].child_by_field_name("value")
                is_arrow = value is not None and value.type in ARROW_FUNCTION_TYPES
                if is_arrow and self.members_config.treat_arrow_function_variables_as_functions:
                    kind = "function"

        return _Classified(
            item=item,
            kind=kind,
            name=name,
            inner=inner,
            exported=exported,
            is_signature=inner.type in SIGNATURE_TYPES,
            is_arrow_function=is_arrow,
        )

    def _declaration(self, classified: _Classified, position: int) -> Declaration:
        item = classified.item
        declaration = Declaration(
            kind=classified.kind,
            name=classified.name,
            exported=classified.exported,
            comments=self._comments(item.pending, item.start),
            text=self._decode(item.start, item.end).rstrip(),
            position=position,
            code_end=self._code_length(item),
        )

        if classified.kind in ("class", "interface"):
            body = classified.inner.child_by_field_name("body")
            if body is not None:
                self._fill_body(declaration, item, body, interface=classified.kind == "interface")
        return declaration

    def _fill_body(self, declaration: Declaration, item: _Item, body: Node, interface: bool) -> None:
        nodes = [c for c in body.children if c.type not in ("{", "}")]

        # Comments on the line of the opening brace belong to the head
        open_end = body.start_byte + 1
        open_row = body.start_point[0]
        while (
            nodes
            and nodes[0].type == "comment"
            and nodes[0].start_point[0] == open_row
            and not self._is_region_marker(nodes[0])
        ):
            open_end = nodes[0].end_byte
            nodes.pop(0)

        items, trailing = self._collect(nodes)
        if not items:
            return

        classified = [self._classify_member(i, interface) for i in items]
        classified = self._merge_overloads(classified)

        close_start = body.end_byte - 1

        declaration.members = [self._member(c, position) for position, c in enumerate(classified)]
        declaration.head = self._decode(item.start, open_end)
        declaration.tail = self._decode(close_start, item.end).rstrip()
        close_indent = self._line_indent(close_start)
        if close_indent is None:
            close_indent = self._line_indent(item.start, strict=False)
        declaration.close_indent = close_indent
        declaration.member_indent = self._line_indent(items[0].start)
        if declaration.member_indent is None:
            declaration.member_indent = declaration.close_indent + self.indent_unit
        declaration.body_trailing = self._comments(trailing, close_start)

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def _classify_member(self, item: _Item, interface: bool) -> _Classified:
        node = item.node
        name = self._name_of(node)
        accessibility = None
        is_static = False
        is_accessor = False

        for child in node.children:
            if child.type == "accessibility_modifier":
                accessibility = self._decode(child.start_byte, child.end_byte).strip()
            elif child.type == "static":
                is_static = True
            elif child.type == "static get":
                is_static = True
                is_accessor = True
            elif child.type in ("get", "set"):
                is_accessor = True

        if accessibility is None:
            accessibility = "private" if name.startswith("#") else "public"

        is_arrow = False
        if node.type in ("method_definition", "method_signature", "abstract_method_signature"):
            if name == "constructor":
                kind = "constructor"
            elif is_accessor:
                kind = "accessor"
            else:
                kind = "method"
        elif node.type in ("public_field_definition", "property_signature"):
            value = node.child_by_field_name("value")
            is_arrow = value is not None and value.type in ARROW_FUNCTION_TYPES
            treat_as_method = is_arrow and self.members_config.treat_arrow_function_properties_as_methods
            kind = "method" if treat_as_method else "property"
        elif node.type == "index_signature":
            kind = "index_signature"
        elif node.type == "class_static_block":
            kind = "static_block"
            is_static = True
        elif node.type == "construct_signature":
            kind = "constructor"
        else:
            # call signatures and anything the grammar adds later
            kind = "method"

        return _Classified(
            item=item,
            kind=kind,
            name=name,
            inner=node,
            accessibility=accessibility,
            is_static=is_static,
            is_signature=node.type in SIGNATURE_TYPES,
            is_arrow_function=is_arrow,
        )

    def _member(self, classified: _Classified, position: int) -> Member:
        item = classified.item
        return Member(
            kind=classified.kind,
            name=classified.name,
            accessibility=classified.accessibility,
            is_static=classified.is_static,
            comments=self._comments(item.pending, item.start),
            text=self._decode(item.start, item.end).rstrip(),
            position=position,
            code_end=self._code_length(item),
            is_arrow_function=classified.is_arrow_function,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _merge_overloads(self, entries: List[_Classified]) -> List[_Classified]:
        """Fold overload signatures into the entry that follows them with the same name."""
        merged: List[_Classified] = []
        for entry in entries:
            previous = merged[-1] if merged else None
            if (
                previous is not None
                and previous.is_signature
                and previous.name
                and previous.name == entry.name
                and previous.kind == entry.kind
                and previous.exported == entry.exported
                and not any(n is MARKER for n in entry.item.pending)
            ):
                previous.item.end = entry.item.end
                previous.item.end_row = entry.item.end_row
                previous.item.code_end = entry.item.code_end
                previous.is_signature = entry.is_signature
                continue
            merged.append(entry)
        return merged

    def _name_of(self, node: Node) -> str:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return ""
        return self._decode(name_node.start_byte, name_node.end_byte)

    def _is_leading_statement(self, node: Node) -> bool:
        if node.type in LEADING_TYPES:
            return True
        if node.type == "export_statement" and node.child_by_field_name("source") is not None:
            return True
        if node.type == "expression_statement" and node.named_child_count == 1:
            return node.named_children[0].type == "string"
        return False

    def _is_trailer(self, node: Node) -> bool:
        return node.type == "comment" or node.type in SEPARATOR_TYPES

    def _is_region_marker(self, node: Node) -> bool:
        return bool(REGION_MARKER.match(self.source[node.start_byte:node.end_byte]))

    def _line_indent(self, offset: int, strict: bool = True) -> Optional[str]:
        """
        Whitespace between the start of the line and offset.

        With strict=True returns None when non-whitespace precedes offset on
        its line; otherwise returns the line's leading whitespace.
        """
        line_start = self.source.rfind(b"\n", 0, offset) + 1
        prefix = self.source[line_start:offset]
        if not prefix.strip():
            return prefix.decode("utf-8")
        if strict:
            return None
        stripped = prefix.lstrip(b" \t")
        return prefix[:len(prefix) - len(stripped)].decode("utf-8")

    def _code_length(self, item: _Item) -> int:
        """Length of the entry text up to the end of its code."""
        return len(self._decode(item.start, item.code_end))

    def _decode(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")

    def _raise_parse_error(self, root: Node) -> None:
        error = self._find_error_node(root) or root
        line = error.start_point[0] + 1
        column = error.start_point[1] + 1
        message = f"missing {error.type}" if error.is_missing else "syntax error"
        logger.debug(f"Parse error in {self.file_path} at {line}:{column}")
        raise ParseError(self.file_path, line, column, message)

    def _find_error_node(self, node: Node) -> Optional[Node]:
        """Depth-first search for the first ERROR or MISSING node."""
        if node.type == "ERROR" or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = self._find_error_node(child)
                if found is not None:
                    return found
        return None


def parse_source(file_path: str, text: str, members_config: Optional[MembersConfig] = None) -> SourceUnit:
    """
    Parse source text into a SourceUnit.

    Raises:
        ParseError: if the text is not syntactically valid
    """
    return ModelBuilder(file_path, text, members_config).build()
