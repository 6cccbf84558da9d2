"""
Organizer configuration models.

The configuration is an immutable value: callers build one (from defaults or
from a tsorganizer.json document) and pass it to every organize call. Picking
up a changed settings file means building a new value.

JSON documents use camelCase keys, e.g.:

{
  "files": {"include": [], "exclude": ["**/*.d.ts"]},
  "regions": {"addMemberCountInRegionName": true},
  "sections": [{"label": "Classes", "kinds": ["class"], "sortAlphabetically": true}],
  "memberSections": [{"label": "Public Methods", "kinds": ["method"], "accessibility": ["public"]}]
}
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from tsorganizer.exceptions import ConfigurationError
from tsorganizer.schemas import ACCESSIBILITIES, DECLARATION_KINDS, MEMBER_KINDS, Entry


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="forbid")


class SectionDefinition(_FrozenModel):
    """
    One section of the policy: a predicate over (kind, accessibility, static, exported)
    plus the alphabetical sort flag.

    A criterion left as None matches anything.
    """
    label: str
    kinds: Tuple[str, ...]
    accessibility: Optional[Tuple[str, ...]] = None
    static: Optional[bool] = None
    exported: Optional[bool] = None
    sort_alphabetically: bool = False

    @field_validator("label")
    @classmethod
    def _label_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("section label must not be empty")
        return value

    @field_validator("kinds")
    @classmethod
    def _kinds_not_empty(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("section must name at least one kind")
        return value

    @field_validator("accessibility")
    @classmethod
    def _known_accessibility(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        if value is not None:
            unknown = [a for a in value if a not in ACCESSIBILITIES]
            if unknown:
                raise ValueError(f"unrecognized accessibility {unknown[0]!r}")
        return value

    def matches(self, entry: Entry) -> bool:
        if entry.kind not in self.kinds:
            return False
        if self.accessibility is not None and entry.accessibility not in self.accessibility:
            return False
        if self.static is not None and entry.is_static != self.static:
            return False
        if self.exported is not None and entry.exported != self.exported:
            return False
        return True


class FilesConfig(_FrozenModel):
    """Include/exclude glob patterns, consumed by the host only."""
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()


class RegionsConfig(_FrozenModel):
    add_member_count_in_region_name: bool = True
    add_region_caption_to_region_end: bool = True


class MembersConfig(_FrozenModel):
    treat_arrow_function_properties_as_methods: bool = False
    treat_arrow_function_variables_as_functions: bool = False


def _check_kinds(definitions: Tuple[SectionDefinition, ...], allowed: Tuple[str, ...], scope: str) -> None:
    for definition in definitions:
        for kind in definition.kinds:
            if kind not in allowed:
                raise ValueError(
                    f"section {definition.label!r} in {scope}: unrecognized kind {kind!r} "
                    f"(expected one of {', '.join(allowed)})"
                )


class Configuration(_FrozenModel):
    """
    Resolved organizer policy.

    `sections` apply to top-level declarations, `member_sections` to class
    members and `interface_member_sections` (optional) to interface members.
    Interfaces keep their member order when the latter is None.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore")

    files: FilesConfig = FilesConfig()
    regions: RegionsConfig = RegionsConfig()
    members: MembersConfig = MembersConfig()
    sections: Tuple[SectionDefinition, ...] = ()
    member_sections: Tuple[SectionDefinition, ...] = ()
    interface_member_sections: Optional[Tuple[SectionDefinition, ...]] = None

    @model_validator(mode="after")
    def _check_section_kinds(self) -> "Configuration":
        _check_kinds(self.sections, DECLARATION_KINDS, "sections")
        _check_kinds(self.member_sections, MEMBER_KINDS, "memberSections")
        if self.interface_member_sections is not None:
            _check_kinds(self.interface_member_sections, MEMBER_KINDS, "interfaceMemberSections")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Configuration":
        """
        Build a configuration from a parsed JSON document.

        Missing section lists fall back to the defaults.

        Raises:
            ConfigurationError: if any part of the document is invalid
        """
        from tsorganizer.config.defaults import DEFAULT_MEMBER_SECTIONS, DEFAULT_SECTIONS

        if not isinstance(data, dict):
            raise ConfigurationError("configuration must be a JSON object", source)

        values = dict(data)
        values.setdefault("sections", [d.model_dump() for d in DEFAULT_SECTIONS])
        if "memberSections" not in values and "member_sections" not in values:
            values["memberSections"] = [d.model_dump() for d in DEFAULT_MEMBER_SECTIONS]
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            message = first["msg"]
            if location:
                message = f"{location}: {message}"
            raise ConfigurationError(message, source) from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
