# Path: ability_tags/process/tagger/engine/__init__.py
"""
Tagger Engine

Loading, compiling, registering and running rules.
"""

from .rule_loader import RuleLoader
from .rule_compiler import RuleCompiler, resolve_rule_name
from .registry import RegistryBuilder, RuleRegistry
from .matching_engine import MatchingEngine
from .coordinator import TaggingCoordinator

__all__ = [
    'RuleLoader',
    'RuleCompiler',
    'resolve_rule_name',
    'RegistryBuilder',
    'RuleRegistry',
    'MatchingEngine',
    'TaggingCoordinator',
]
