# Path: ability_tags/process/tagger/evaluators/number_evaluator.py
"""
Number Evaluator

Extracts numbers and ranges from captures.

Sentinels:
    '?' anywhere in a number ("?x", "2.?x") reads as 0, so an unknown
    value only passes queries that ask for zero or less.
    "completely" and open-ended values ("99+") read as +inf.
    Anything else that does not parse also reads as 0.
"""

from typing import Optional

from constants import (
    COMPLETE_TOKENS,
    COMPLETE_VALUE,
    OPEN_ENDED_SUFFIX,
    THOUSANDS_SEPARATOR,
    UNKNOWN_TOKEN,
    UNKNOWN_VALUE,
    SubmatcherKind,
)

from .base_evaluator import BaseEvaluator
from ..models.filter_query import NumberConstraint
from ..models.rule import SubmatcherSpec
from ..models.tag import MatchResult, NumberValue


def parse_number(raw: Optional[str]) -> float:
    """
    Parse a captured number with sentinel normalization.

    Example:
        parse_number('2.5')        # 2.5
        parse_number('?')          # 0.0
        parse_number('1,000')      # 1000.0
        parse_number('completely') # inf
        parse_number('99+')        # inf
    """
    if raw is None:
        return UNKNOWN_VALUE
    text = raw.strip()
    if text.lower() in COMPLETE_TOKENS or text.endswith(OPEN_ENDED_SUFFIX):
        return COMPLETE_VALUE
    text = text.replace(UNKNOWN_TOKEN, '0').replace(THOUSANDS_SEPARATOR, '')
    try:
        return float(text)
    except ValueError:
        return UNKNOWN_VALUE


class NumberEvaluator(BaseEvaluator):
    """
    Number submatchers.

    The winning capture is the low bound. The group declared right after
    it is read as the high bound of a range ("2x-3x"); when it did not
    capture, the range collapses to the low value.
    """

    @property
    def kind(self) -> SubmatcherKind:
        return SubmatcherKind.NUMBER

    def extract(self, spec: SubmatcherSpec, match: MatchResult) -> Optional[NumberValue]:
        captures = self.defined_captures(spec, match)
        if not captures:
            return None

        position, raw = captures[0]
        low = parse_number(raw)
        high = low
        if position + 1 < len(spec.groups):
            upper = match.group(spec.groups[position + 1])
            if upper:
                high = parse_number(upper)

        return NumberValue(
            low=low,
            high=high,
            candidates=tuple(parse_number(capture) for _, capture in captures),
            raw=raw,
        )

    def satisfies(self, value: Optional[NumberValue], constraint: NumberConstraint) -> bool:
        if value is None:
            return False
        return any(constraint.accepts(candidate) for candidate in value.candidates)


__all__ = ['NumberEvaluator', 'parse_number']
