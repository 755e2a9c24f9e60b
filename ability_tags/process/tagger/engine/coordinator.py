# Path: ability_tags/process/tagger/engine/coordinator.py
"""
Tagging Coordinator

The main entry point for the tagger. Loads rule files, builds the
registry and exposes the operations a search UI needs: listing groups
and rules, classifying text and evaluating filters.
"""

import threading
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from constants import Target
from core.logger.ipo_logging import get_process_logger

from .matching_engine import MatchingEngine
from .registry import RegistryBuilder, RuleRegistry
from .rule_compiler import RuleCompiler
from .rule_loader import RuleLoader
from ..evaluators import FilterEvaluator
from ..models.filter_query import Constraint
from ..models.rule import RuleSummary
from ..models.rule_definition import RuleDefinition
from ..models.tag import Tag


class _Snapshot:
    """Registry with the engine and filter evaluator built on it."""

    __slots__ = ('registry', 'engine', 'filter_evaluator')

    def __init__(self, registry: RuleRegistry):
        self.registry = registry
        self.engine = MatchingEngine(registry)
        self.filter_evaluator = FilterEvaluator(registry)


class TaggingCoordinator:
    """
    Main orchestrator for ability tagging.

    The TaggingCoordinator:
    1. Loads rule definitions from the rules directory
    2. Compiles them into an immutable registry
    3. Classifies ability text against the registry
    4. Evaluates user filters against produced tags

    reload() builds a complete new registry before swapping it in, so
    callers never observe a half-built one; if the rebuild fails, the
    previous registry stays in service.

    Example:
        coordinator = TaggingCoordinator(include_legacy=False)

        coordinator.list_groups('captain')
        tags = coordinator.classify('captain', text)
        coordinator.evaluate_filter(
            tags, 'captain', 'Damage Dealers', 'ATK boosters',
            {'Turns': NumberConstraint('>=', 2)}
        )
    """

    def __init__(
        self,
        rules_dir: Optional[Path] = None,
        include_legacy: bool = False,
        alphabetical: bool = True,
        strict_groups: bool = True,
        definitions: Optional[Iterable[tuple[str, RuleDefinition]]] = None
    ):
        """
        Initialize coordinator and build the first registry.

        Args:
            rules_dir: Rule file directory (defaults to the shipped rules)
            include_legacy: Keep rules marked legacy
            alphabetical: Sort rule names within each group
            strict_groups: Fail on submatchers bound to missing groups
            definitions: Use these (group, definition) pairs instead of
                         reading rule files

        Raises:
            RuleLoadError: If a rule file is invalid
            RuleCompileError: If a rule does not compile
        """
        self.logger = get_process_logger('tagger.coordinator')
        self.loader = RuleLoader(rules_dir)
        self.compiler = RuleCompiler(strict_groups=strict_groups)
        self.include_legacy = include_legacy
        self.alphabetical = alphabetical
        self._definitions = list(definitions) if definitions is not None else None
        self._reload_lock = threading.Lock()

        self._snapshot = _Snapshot(self._build_registry())

    @property
    def registry(self) -> RuleRegistry:
        return self._snapshot.registry

    @property
    def engine(self) -> MatchingEngine:
        return self._snapshot.engine

    def list_groups(self, target: Union[Target, str]) -> tuple[str, ...]:
        return self._snapshot.registry.list_groups(target)

    def list_rules(self, target: Union[Target, str], group: str) -> tuple[RuleSummary, ...]:
        return self._snapshot.registry.list_rules(target, group)

    def classify(self, target: Union[Target, str], text: Optional[str]) -> tuple[Tag, ...]:
        return self._snapshot.engine.classify(target, text)

    def evaluate_filter(
        self,
        tags: Iterable[Tag],
        target: Union[Target, str],
        group: str,
        rule_name: str,
        constraints: Optional[Mapping[str, Constraint]] = None
    ) -> bool:
        return self._snapshot.filter_evaluator.evaluate(
            tags, target, group, rule_name, constraints
        )

    def reload(self) -> RuleRegistry:
        """
        Rebuild the registry from the rule files and swap it in.

        Raises:
            RuleLoadError, RuleCompileError: The old registry is kept
        """
        with self._reload_lock:
            previous = self._snapshot.registry.fingerprint
            snapshot = _Snapshot(self._build_registry())
            self._snapshot = snapshot

        if snapshot.registry.fingerprint == previous:
            self.logger.info("Reloaded rules: no changes")
        else:
            self.logger.info(f"Reloaded rules: fingerprint {snapshot.registry.fingerprint[:12]}")
        return snapshot.registry

    def lint(self) -> list[str]:
        """
        Check the rule definitions without affecting the live registry.

        Returns:
            Issues found by the compiler plus name collisions
        """
        definitions = self._load_definitions()
        issues = self.compiler.lint(definitions)
        if not issues:
            builder = RegistryBuilder(self.compiler).exclude_legacy(not self.include_legacy)
            registry = builder.register(definitions).build(self.alphabetical)
            issues.extend(f"collision: {c.describe()}" for c in registry.collisions)
        return issues

    def _load_definitions(self) -> list[tuple[str, RuleDefinition]]:
        if self._definitions is not None:
            return list(self._definitions)
        return self.loader.load_all()

    def _build_registry(self) -> RuleRegistry:
        builder = RegistryBuilder(self.compiler).exclude_legacy(not self.include_legacy)
        builder.register(self._load_definitions())
        registry = builder.build(alphabetical=self.alphabetical)
        self.logger.info(
            f"Registry ready: {len(registry)} rules "
            f"(legacy {'included' if self.include_legacy else 'excluded'})"
        )
        return registry


__all__ = ['TaggingCoordinator']
