# Path: ability_tags/process/tagger/models/rule.py
"""
Compiled Rule Models

Immutable runtime values produced by the rule compiler and held by the
registry. Nothing in here is mutated after construction, so a registry
snapshot can be shared between threads without locking.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from constants import SubmatcherKind, Target


@dataclass(frozen=True)
class SubmatcherSpec:
    """
    A typed extractor bound to capture groups of a rule pattern.

    Attributes:
        kind: number, text, option or separator
        description: Label shown to users; unique within a rule
        groups: 1-based capture group indices, in precedence order
        pattern: Compiled pattern (options only)
        radio_group: Options sharing a radio group are alternatives
        style_hints: Presentation classes (e.g. 'min-width-4')
    """
    kind: SubmatcherKind
    description: str
    groups: tuple[int, ...] = ()
    pattern: Optional[re.Pattern] = None
    radio_group: Optional[str] = None
    style_hints: tuple[str, ...] = ()

    @property
    def produces_value(self) -> bool:
        """Separators only label a section; every other kind yields a value."""
        return self.kind is not SubmatcherKind.SEPARATOR

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'type': self.kind.value,
            'description': self.description,
            'groups': list(self.groups),
            'pattern': self.pattern.pattern if self.pattern is not None else None,
            'radio_group': self.radio_group,
            'style_hints': list(self.style_hints),
        }


@dataclass(frozen=True)
class Rule:
    """
    A compiled rule for one target.

    A definition with several targets compiles into one Rule per target;
    the copies share the same pattern and submatcher objects.

    Attributes:
        name: Resolved name (target placeholder already substituted)
        target: Ability slot this rule applies to
        group: Group the rule is listed under
        pattern: Compiled pattern, run with search() on the ability text
        submatchers: Extractors in declaration order
        legacy: Retired rule kept for reference
        template_name: Name as written in the rule file
    """
    name: str
    target: Target
    group: str
    pattern: re.Pattern
    submatchers: tuple[SubmatcherSpec, ...] = ()
    legacy: bool = False
    template_name: str = ''
    notes: Optional[str] = field(default=None, compare=False)

    @property
    def submatcher_descriptions(self) -> tuple[str, ...]:
        return tuple(sm.description for sm in self.submatchers)

    def get_submatcher(self, description: str) -> Optional[SubmatcherSpec]:
        """Find a value-producing submatcher by its description."""
        for submatcher in self.submatchers:
            if submatcher.produces_value and submatcher.description == description:
                return submatcher
        return None

    def signature(self) -> str:
        """Stable text form of everything that affects matching."""
        parts = [
            self.target.value,
            self.group,
            self.name,
            self.pattern.pattern,
            str(self.pattern.flags),
        ]
        for sm in self.submatchers:
            parts.append(
                f"{sm.kind.value}:{sm.description}:{sm.groups}:"
                f"{sm.pattern.pattern if sm.pattern is not None else ''}:"
                f"{sm.radio_group or ''}"
            )
        return '\x1f'.join(parts)


@dataclass(frozen=True)
class RuleSummary:
    """What a filter sidebar needs to render one rule."""
    name: str
    submatcher_descriptions: tuple[str, ...]
    submatchers: tuple[SubmatcherSpec, ...]

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'submatcher_descriptions': list(self.submatcher_descriptions),
            'submatchers': [sm.to_dict() for sm in self.submatchers],
        }


@dataclass(frozen=True)
class RuleCollision:
    """
    Two registrations resolved to the same (target, group, name).

    The later registration replaced the earlier one.
    """
    target: Target
    group: str
    name: str
    replaced_pattern: str
    winning_pattern: str

    def describe(self) -> str:
        return (
            f"{self.target.value}/{self.group}/{self.name}: "
            f"'{self.replaced_pattern}' replaced by '{self.winning_pattern}'"
        )


__all__ = ['SubmatcherSpec', 'Rule', 'RuleSummary', 'RuleCollision']
