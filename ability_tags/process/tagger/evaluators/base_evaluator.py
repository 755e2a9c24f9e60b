# Path: ability_tags/process/tagger/evaluators/base_evaluator.py
"""
Base Evaluator

Abstract base class for submatcher evaluators.

Each evaluator handles one submatcher kind and does two jobs:
- extract(): turn a rule match into the submatcher's value
- satisfies(): decide whether an extracted value meets a user constraint
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from constants import SubmatcherKind
from core.logger.ipo_logging import get_process_logger

from ..models.rule import SubmatcherSpec
from ..models.tag import MatchResult


class BaseEvaluator(ABC):
    """
    Abstract base class for submatcher evaluators.

    - NumberEvaluator: numbers and ranges with sentinels
    - TextEvaluator: verbatim captures searched by user patterns
    - OptionEvaluator: presence flags from option patterns

    Example:
        evaluator = NumberEvaluator()
        value = evaluator.extract(spec, match_result)
        evaluator.satisfies(value, NumberConstraint('>=', 2))
    """

    def __init__(self):
        self.logger = get_process_logger(f'tagger.evaluators.{self.kind.value}')

    @property
    @abstractmethod
    def kind(self) -> SubmatcherKind:
        """Submatcher kind handled by this evaluator."""

    @abstractmethod
    def extract(self, spec: SubmatcherSpec, match: MatchResult) -> Any:
        """Value of spec for this match (None when nothing was captured)."""

    @abstractmethod
    def satisfies(self, value: Any, constraint: Any) -> bool:
        """Whether an extracted value meets a constraint."""

    @staticmethod
    def defined_captures(spec: SubmatcherSpec, match: MatchResult) -> list[tuple[int, str]]:
        """
        (position in spec.groups, capture) for every bound group that
        captured a non-empty string, in declared order.
        """
        captures = []
        for position, index in enumerate(spec.groups):
            value = match.group(index)
            if value:
                captures.append((position, value))
        return captures

    def first_defined(self, spec: SubmatcherSpec, match: MatchResult) -> Optional[str]:
        """
        First-defined-capture precedence: the first bound group, in the
        order the rule declares them, that captured something wins.
        """
        captures = self.defined_captures(spec, match)
        return captures[0][1] if captures else None


__all__ = ['BaseEvaluator']
