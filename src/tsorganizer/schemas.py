from pydantic import BaseModel, Field
from typing import List, Literal, Optional

DeclarationKind = Literal["class", "interface", "enum", "type", "function", "variable", "namespace", "statement"]
MemberKind = Literal["index_signature", "property", "constructor", "accessor", "method", "static_block"]
Accessibility = Literal["public", "protected", "private"]

DECLARATION_KINDS = ("class", "interface", "enum", "type", "function", "variable", "namespace", "statement")
MEMBER_KINDS = ("index_signature", "property", "constructor", "accessor", "method", "static_block")
ACCESSIBILITIES = ("public", "protected", "private")


class Comment(BaseModel):
    """
    A comment attached above a declaration or member.
    """
    text: str
    blank_line_after: bool = False


class Entry(BaseModel):
    """
    Anything that can be placed into a section: a declaration or a member.
    """
    kind: str
    name: str = ""
    comments: List[Comment] = Field(default_factory=list)
    text: str  # Exact original span (decorators, overloads and same-line trailers included)
    position: int  # Original index among its siblings
    code_end: Optional[int] = None  # End of the code in text, before same-line trailing comments

    # Defaults so module-level and member entries share one predicate
    exported: bool = False
    accessibility: Accessibility = "public"
    is_static: bool = False

    @property
    def is_single_line(self) -> bool:
        return "\n" not in self.text

    @property
    def code(self) -> str:
        return self.text if self.code_end is None else self.text[:self.code_end]


class Member(Entry):
    """
    Represents a class or interface element.
    """
    kind: MemberKind
    is_arrow_function: bool = False


class Declaration(Entry):
    """
    Represents one top-level construct of a source file.
    """
    kind: DeclarationKind
    # Class/interface body split, only set when the body has members
    members: Optional[List[Member]] = None
    head: str = ""  # text up to and including the opening brace
    tail: str = ""  # text from the closing brace to the end of the declaration
    close_indent: str = ""
    member_indent: str = ""
    body_trailing: List[Comment] = Field(default_factory=list)  # comments after the last member


class SourceUnit(BaseModel):
    """
    Structural model of a whole file.
    """
    file_path: str
    newline: str = "\n"
    leading: str = ""
    leading_code_end: int = 0  # End of the last leading statement in `leading`
    declarations: List[Declaration] = Field(default_factory=list)
    trailing: List[Comment] = Field(default_factory=list)
    final_newline: bool = True


class Section(BaseModel):
    """
    A labeled bucket of entries in policy order.
    """
    label: str
    entries: List[Entry] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


class OrganizeResult(BaseModel):
    """
    Result of an organize call.
    """
    changed: bool
    output_text: str
