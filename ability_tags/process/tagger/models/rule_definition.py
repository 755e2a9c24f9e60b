# Path: ability_tags/process/tagger/models/rule_definition.py
"""
Rule Definition Models

Pydantic models for rule files as written in dictionary/rules/*.yaml.
These are the raw, uncompiled form; RuleCompiler turns them into Rule
values.

Rule file layout:

    group: Damage Dealers
    rules:
      - name: ATK boosters
        targets: [captain, special]
        pattern: "Boosts ATK of (.+?) characters by ([?.\\d]+)x"
        submatchers:
          - {type: number, description: Multiplier, groups: [2]}
          - {generator: types, groups: [1]}
        examples:
          - Boosts ATK of all characters by 2x for 3 turns
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from constants import DEFAULT_PATTERN_FLAGS, LEGACY_NAME_PREFIX, SubmatcherKind


class SubmatcherDefinition(BaseModel):
    """A submatcher written out by hand."""
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    kind: SubmatcherKind = Field(
        alias='type',
        description="number, text, option or separator"
    )
    description: str = Field(
        min_length=1,
        description="Label shown to users; unique within a rule"
    )
    groups: list[int] = Field(
        default_factory=list,
        description="Capture group indices, first defined capture wins"
    )
    pattern: Optional[str] = Field(
        default=None,
        description="Option pattern tested against the bound captures"
    )
    radio_group: Optional[str] = Field(
        default=None,
        description="Options sharing a radio group are alternatives"
    )
    style_hints: list[str] = Field(
        default_factory=list,
        description="Presentation classes"
    )

    @model_validator(mode='after')
    def _check_kind_fields(self) -> 'SubmatcherDefinition':
        if self.kind is SubmatcherKind.OPTION and self.pattern is None:
            raise ValueError(f"option '{self.description}' needs a pattern")
        if self.kind is not SubmatcherKind.SEPARATOR and not self.groups:
            raise ValueError(f"submatcher '{self.description}' binds no groups")
        return self


class GeneratorCall(BaseModel):
    """
    A call to one of the submatcher generators.

    Fields left unset keep the generator's defaults. Setting a field the
    named generator does not take (orbs on 'types') is a compile error.
    """
    model_config = ConfigDict(extra='forbid')

    generator: str
    groups: list[int] = Field(min_length=1)
    include_universal: bool = True
    universal_pattern: Optional[str] = None
    orbs: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    use_rows_and_columns: bool = True
    description: Optional[str] = None


class RuleDefinition(BaseModel):
    """One rule as written in a rule file."""
    model_config = ConfigDict(extra='forbid')

    name: str = Field(min_length=1)
    targets: list[str] = Field(min_length=1)
    pattern: str = Field(
        description="Regular expression; a list of parts is concatenated"
    )
    flags: list[str] = Field(default_factory=lambda: list(DEFAULT_PATTERN_FLAGS))
    legacy: Optional[bool] = None
    submatchers: list[Union[GeneratorCall, SubmatcherDefinition]] = Field(
        default_factory=list
    )
    examples: list[str] = Field(default_factory=list)
    non_examples: list[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator('pattern', mode='before')
    @classmethod
    def _join_pattern_parts(cls, value):
        if isinstance(value, (list, tuple)):
            return ''.join(str(part) for part in value)
        return value

    @field_validator('flags', mode='before')
    @classmethod
    def _normalize_flags(cls, value):
        if isinstance(value, str):
            value = [value]
        return [str(flag).upper() for flag in value]

    @field_validator('submatchers', mode='before')
    @classmethod
    def _dispatch_submatchers(cls, value):
        if value is None:
            return []
        parsed = []
        for entry in value:
            if isinstance(entry, dict) and 'generator' in entry:
                parsed.append(GeneratorCall.model_validate(entry))
            elif isinstance(entry, dict):
                parsed.append(SubmatcherDefinition.model_validate(entry))
            else:
                parsed.append(entry)
        return parsed

    @property
    def is_legacy(self) -> bool:
        """Explicit flag, or a name starting with 'old' (any case)."""
        if self.legacy is not None:
            return self.legacy
        return self.name.lower().startswith(LEGACY_NAME_PREFIX)


class RuleFile(BaseModel):
    """One YAML file: a group name and its rules."""
    model_config = ConfigDict(extra='forbid')

    group: str = Field(min_length=1)
    rules: list[RuleDefinition] = Field(default_factory=list)


__all__ = [
    'SubmatcherDefinition',
    'GeneratorCall',
    'RuleDefinition',
    'RuleFile',
]
