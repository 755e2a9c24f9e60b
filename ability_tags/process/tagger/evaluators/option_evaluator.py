# Path: ability_tags/process/tagger/evaluators/option_evaluator.py
"""
Option Evaluator

An option's pattern is searched in the concatenation of its bound
captures, with groups that did not capture read as empty strings. An
option pattern of '^$' therefore means "none of these groups captured".

Radio groups are not enforced here: every option whose pattern matches
is recorded as true.
"""

from constants import SubmatcherKind

from .base_evaluator import BaseEvaluator
from ..models.filter_query import OptionConstraint
from ..models.rule import SubmatcherSpec
from ..models.tag import MatchResult


class OptionEvaluator(BaseEvaluator):

    @property
    def kind(self) -> SubmatcherKind:
        return SubmatcherKind.OPTION

    def extract(self, spec: SubmatcherSpec, match: MatchResult) -> bool:
        captured = ''.join(match.group(index) or '' for index in spec.groups)
        return spec.pattern is not None and spec.pattern.search(captured) is not None

    def satisfies(self, value, constraint: OptionConstraint) -> bool:
        return bool(value)


__all__ = ['OptionEvaluator']
