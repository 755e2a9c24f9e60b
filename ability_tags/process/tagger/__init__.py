# Path: ability_tags/process/tagger/__init__.py
"""
Ability Tagger - Rule-Based Ability Classification

Classifies free-form ability descriptions into structured Tags: what the
ability does (rule), and the facts a user can filter on (multipliers,
durations, affected types, positions...).

Core Components:
    - TaggingCoordinator: Main entry point
    - RuleLoader / RuleCompiler: YAML rule files -> immutable Rules
    - RegistryBuilder / RuleRegistry: target -> group -> name lookup
    - MatchingEngine: text -> Tags
    - FilterEvaluator: Tags + user constraints -> include/exclude

Key Principle:
    Rules are data. Patterns approximate a grammar of ability text and
    submatchers bound to their capture groups pull out typed values.

Example:
    from process.tagger import TaggingCoordinator, NumberConstraint

    coordinator = TaggingCoordinator()
    tags = coordinator.classify('captain', 'Boosts ATK of all characters by 2.5x')
    coordinator.evaluate_filter(
        tags, 'captain', 'Damage Dealers', 'Captain ATK boosters',
        {'Multiplier': NumberConstraint('>=', 2)}
    )
"""

from .errors import TaggerError, RuleCompileError, RuleLoadError
from .engine import (
    RuleLoader,
    RuleCompiler,
    resolve_rule_name,
    RegistryBuilder,
    RuleRegistry,
    MatchingEngine,
    TaggingCoordinator,
)
from .evaluators import FilterEvaluator, parse_number
from .models import (
    RuleDefinition,
    RuleFile,
    Rule,
    RuleSummary,
    RuleCollision,
    SubmatcherSpec,
    MatchResult,
    NumberValue,
    Tag,
    NumberConstraint,
    OptionConstraint,
    TextConstraint,
    parse_number_query,
)

__all__ = [
    'TaggerError',
    'RuleCompileError',
    'RuleLoadError',
    'RuleLoader',
    'RuleCompiler',
    'resolve_rule_name',
    'RegistryBuilder',
    'RuleRegistry',
    'MatchingEngine',
    'TaggingCoordinator',
    'FilterEvaluator',
    'parse_number',
    'RuleDefinition',
    'RuleFile',
    'Rule',
    'RuleSummary',
    'RuleCollision',
    'SubmatcherSpec',
    'MatchResult',
    'NumberValue',
    'Tag',
    'NumberConstraint',
    'OptionConstraint',
    'TextConstraint',
    'parse_number_query',
]
