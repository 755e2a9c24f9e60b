# Path: ability_tags/process/tagger/models/__init__.py
"""
Tagger Models

- rule_definition: pydantic models for rule files (uncompiled)
- rule: compiled, immutable Rule / SubmatcherSpec values
- tag: MatchResult, Tag and NumberValue produced by matching
- filter_query: constraints for the filter evaluator
"""

from .rule_definition import (
    SubmatcherDefinition,
    GeneratorCall,
    RuleDefinition,
    RuleFile,
)
from .rule import SubmatcherSpec, Rule, RuleSummary, RuleCollision
from .tag import NumberValue, MatchResult, Tag
from .filter_query import (
    NumberConstraint,
    OptionConstraint,
    TextConstraint,
    Constraint,
    parse_number_query,
)

__all__ = [
    'SubmatcherDefinition',
    'GeneratorCall',
    'RuleDefinition',
    'RuleFile',
    'SubmatcherSpec',
    'Rule',
    'RuleSummary',
    'RuleCollision',
    'NumberValue',
    'MatchResult',
    'Tag',
    'NumberConstraint',
    'OptionConstraint',
    'TextConstraint',
    'Constraint',
    'parse_number_query',
]
