"""
Tests for region marker and section rendering.
"""

from tsorganizer.config import RegionsConfig
from tsorganizer.organizer.renderer import (
    is_terminated,
    region_end,
    region_start,
    render_comments,
    render_entry,
    render_section,
    render_sections,
    terminate,
    terminate_statements,
)
from tsorganizer.schemas import Comment, Declaration, Member, Section


def _section(label, entries):
    return Section(label=label, entries=entries)


class TestMarkers:

    def test_default_markers(self):
        section = _section("Classes", [Declaration(kind="class", name="A", text="class A {}", position=0)])

        assert region_start(section, RegionsConfig()) == "// #region Classes (1)"
        assert region_end(section, RegionsConfig()) == "// #endregion Classes"

    def test_markers_without_count_or_caption(self):
        section = _section("Classes", [Declaration(kind="class", name="A", text="class A {}", position=0)])
        regions = RegionsConfig(add_member_count_in_region_name=False, add_region_caption_to_region_end=False)

        assert region_start(section, regions) == "// #region Classes"
        assert region_end(section, regions) == "// #endregion"


class TestEntries:

    def test_comments_rendered_above_entry(self):
        entry = Member(
            kind="method",
            name="run",
            text="run() {}",
            position=0,
            comments=[Comment(text="// first", blank_line_after=True), Comment(text="/** doc */")],
        )

        assert render_entry(entry, "    ", "\n") == "    // first\n\n    /** doc */\n    run() {}"

    def test_free_standing_comments(self):
        comments = [Comment(text="// a"), Comment(text="// b", blank_line_after=True), Comment(text="// c")]
        assert render_comments(comments, "", "\n") == "// a\n// b\n\n// c"


class TestSections:

    def test_compact_entries_stack(self):
        section = _section("Properties", [
            Member(kind="property", name="a", text="a = 1;", position=0),
            Member(kind="property", name="b", text="b = 2;", position=1),
        ])

        assert render_section(section, "  ", "\n", RegionsConfig()) == (
            "  // #region Properties (2)\n"
            "\n"
            "  a = 1;\n"
            "  b = 2;\n"
            "\n"
            "  // #endregion Properties"
        )

    def test_methods_separated_by_blank_line(self):
        section = _section("Methods", [
            Member(kind="method", name="a", text="a() {}", position=0),
            Member(kind="method", name="b", text="b() {}", position=1),
        ])

        assert render_section(section, "", "\n", RegionsConfig()) == (
            "// #region Methods (2)\n\na() {}\n\nb() {}\n\n// #endregion Methods"
        )

    def test_commented_property_not_compact(self):
        section = _section("Properties", [
            Member(kind="property", name="a", text="a = 1;", position=0),
            Member(kind="property", name="b", text="b = 2;", position=1, comments=[Comment(text="// b")]),
        ])

        rendered = render_section(section, "", "\n", RegionsConfig())
        assert "a = 1;\n\n// b\nb = 2;" in rendered

    def test_sections_joined_with_blank_line_and_crlf(self):
        sections = [
            _section("A", [Declaration(kind="class", name="A", text="class A {}", position=0)]),
            _section("B", [Declaration(kind="function", name="b", text="function b() {}", position=1)]),
        ]

        rendered = render_sections(sections, "", "\r\n", RegionsConfig())

        assert rendered == (
            "// #region A (1)\r\n\r\nclass A {}\r\n\r\n// #endregion A\r\n\r\n"
            "// #region B (1)\r\n\r\nfunction b() {}\r\n\r\n// #endregion B"
        )


class TestStatementTermination:

    def test_closing_brace_ends_declarations_only(self):
        assert is_terminated("function f() {}", "function")
        assert is_terminated("b() {}", "method")
        assert not is_terminated("const o = {}", "variable")
        assert not is_terminated("x = 1", "property")
        assert is_terminated("x = 1;", "property")
        assert is_terminated("", None)

    def test_terminate_before_trailing_comment(self):
        assert terminate("x = 1 // one", 5) == "x = 1; // one"
        assert terminate("x = 1", None) == "x = 1;"

    def test_previous_entry_terminated_across_sections(self):
        sections = [
            _section("Variables", [Declaration(kind="variable", name="x", text="const x = 1", position=0, code_end=11)]),
            _section("Other", [Declaration(kind="statement", text="[1, 2].forEach(f)", position=1)]),
        ]

        result = terminate_statements(sections)

        assert result[0].entries[0].text == "const x = 1;"
        assert result[0].entries[0].code == "const x = 1;"
        assert result[1].entries[0].text == "[1, 2].forEach(f)"

    def test_plain_next_entry_needs_nothing(self):
        sections = [_section("Variables", [
            Declaration(kind="variable", name="x", text="const x = 1", position=0),
            Declaration(kind="variable", name="y", text="const y = 2", position=1),
        ])]

        result = terminate_statements(sections)

        assert [e.text for e in result[0].entries] == ["const x = 1", "const y = 2"]
