# Path: ability_tags/process/tagger/models/tag.py
"""
Tag Models

Results of running compiled rules against ability text.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from constants import Target
from .rule import Rule


@dataclass(frozen=True)
class NumberValue:
    """
    Number extracted by a number submatcher.

    Attributes:
        low: Value of the winning capture
        high: Value of the next bound capture when present, else low
        candidates: Every defined capture, in declared group order
        raw: Winning capture as it appeared in the text
    """
    low: float
    high: float
    candidates: tuple[float, ...]
    raw: str

    @property
    def is_range(self) -> bool:
        return self.low != self.high

    def to_dict(self) -> dict:
        return {
            'low': self.low,
            'high': self.high,
            'candidates': list(self.candidates),
            'raw': self.raw,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'NumberValue':
        return cls(
            low=float(data['low']),
            high=float(data['high']),
            candidates=tuple(float(c) for c in data.get('candidates', ())),
            raw=data.get('raw', ''),
        )

    def __str__(self) -> str:
        def fmt(value: float) -> str:
            if math.isinf(value):
                return 'max'
            return f"{value:g}"
        if self.is_range:
            return f"{fmt(self.low)}-{fmt(self.high)}"
        return fmt(self.low)


@dataclass(frozen=True)
class MatchResult:
    """
    A rule whose pattern matched, with its capture groups.

    groups holds capture 1..n (index 0 of the tuple is group 1);
    a group that did not participate is None.
    """
    rule: Rule
    groups: tuple[Optional[str], ...]

    def group(self, index: int) -> Optional[str]:
        """1-based capture lookup; out-of-range indices read as missing."""
        if index < 1 or index > len(self.groups):
            return None
        return self.groups[index - 1]


@dataclass(frozen=True)
class Tag:
    """
    One rule matching one ability text.

    values maps submatcher description to its extracted value:
    NumberValue or None for numbers, str or None for text, bool for
    options. Separators contribute nothing.
    """
    rule_name: str
    group: str
    target: Target
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.values, MappingProxyType):
            object.__setattr__(self, 'values', MappingProxyType(dict(self.values)))

    @property
    def key(self) -> tuple[Target, str, str]:
        return (self.target, self.group, self.rule_name)

    def get(self, description: str, default: Any = None) -> Any:
        return self.values.get(description, default)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        values = {}
        for description, value in self.values.items():
            values[description] = value.to_dict() if isinstance(value, NumberValue) else value
        return {
            'rule_name': self.rule_name,
            'group': self.group,
            'target': self.target.value,
            'values': values,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Tag':
        values = {}
        for description, value in data.get('values', {}).items():
            if isinstance(value, dict) and 'low' in value:
                value = NumberValue.from_dict(value)
            values[description] = value
        return cls(
            rule_name=data['rule_name'],
            group=data['group'],
            target=Target(data['target']),
            values=values,
        )


__all__ = ['NumberValue', 'MatchResult', 'Tag']
