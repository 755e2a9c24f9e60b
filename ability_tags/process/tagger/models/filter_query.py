# Path: ability_tags/process/tagger/models/filter_query.py
"""
Filter Query Models

Constraints a user attaches to a selected rule. The constraint mapping
passed to the filter evaluator is keyed by submatcher description.
"""

import operator
import re
from dataclasses import dataclass
from typing import Callable, Union

from constants import Comparator


_COMPARATOR_FUNCS: dict[Comparator, Callable[[float, float], bool]] = {
    Comparator.LT: operator.lt,
    Comparator.LE: operator.le,
    Comparator.EQ: operator.eq,
    Comparator.GE: operator.ge,
    Comparator.GT: operator.gt,
}

# Longest operators first so '<=' is not read as '<' followed by '='
_NUMBER_QUERY = re.compile(r'^\s*(<=|>=|<|>|=)?\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)|inf(?:inity)?)\s*$', re.IGNORECASE)


@dataclass(frozen=True)
class NumberConstraint:
    """Satisfied when an extracted number compares true against value."""
    comparator: Comparator
    value: float

    def __post_init__(self):
        object.__setattr__(self, 'comparator', Comparator(self.comparator))
        object.__setattr__(self, 'value', float(self.value))

    def accepts(self, candidate: float) -> bool:
        return _COMPARATOR_FUNCS[self.comparator](candidate, self.value)


@dataclass(frozen=True)
class OptionConstraint:
    """An option the user switched on (or explicitly off)."""
    enabled: bool = True


@dataclass(frozen=True)
class TextConstraint:
    """User pattern searched case-insensitively in the extracted text."""
    pattern: str


Constraint = Union[NumberConstraint, OptionConstraint, TextConstraint]


def parse_number_query(text: str) -> NumberConstraint:
    """
    Parse a numeric query such as '>=2', '< 1' or '3'.

    A bare number means equality.

    Raises:
        ValueError: If text is not a comparator followed by a number
    """
    match = _NUMBER_QUERY.match(text or '')
    if not match:
        raise ValueError(f"Not a number query: {text!r}")
    comparator = Comparator(match.group(1) or '=')
    return NumberConstraint(comparator, float(match.group(2)))


__all__ = [
    'NumberConstraint',
    'OptionConstraint',
    'TextConstraint',
    'Constraint',
    'parse_number_query',
]
