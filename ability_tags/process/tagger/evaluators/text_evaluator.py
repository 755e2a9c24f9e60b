# Path: ability_tags/process/tagger/evaluators/text_evaluator.py
"""
Text Evaluator

Keeps the winning capture verbatim; user queries are regular expressions
searched case-insensitively in it.
"""

import re
from typing import Optional

from constants import SubmatcherKind

from .base_evaluator import BaseEvaluator
from ..models.filter_query import TextConstraint
from ..models.rule import SubmatcherSpec
from ..models.tag import MatchResult


class TextEvaluator(BaseEvaluator):

    @property
    def kind(self) -> SubmatcherKind:
        return SubmatcherKind.TEXT

    def extract(self, spec: SubmatcherSpec, match: MatchResult) -> Optional[str]:
        return self.first_defined(spec, match)

    def satisfies(self, value: Optional[str], constraint: TextConstraint) -> bool:
        if value is None:
            return False
        return self.compile_query(constraint.pattern).search(value) is not None

    def compile_query(self, pattern: str) -> re.Pattern:
        """User pattern, or the literal text when it is not a valid regex."""
        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error:
            self.logger.debug(f"Invalid query pattern {pattern!r}, searching literally")
            return re.compile(re.escape(pattern), re.IGNORECASE)


__all__ = ['TextEvaluator']
