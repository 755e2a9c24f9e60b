# Path: ability_tags/process/tagger/engine/registry.py
"""
Rule Registry

RegistryBuilder collects compiled rules into target -> group -> name
tables; build() freezes them into a RuleRegistry snapshot that is never
mutated afterwards. Reloading rules means building a new snapshot and
swapping the reference.

A rule registered under a (target, group, name) that is already taken
replaces the earlier one. The replacement is kept as a RuleCollision
diagnostic on the snapshot and logged as a warning.
"""

import hashlib
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from constants import TARGET_ORDER, Target, parse_target
from core.logger.ipo_logging import get_process_logger

from .rule_compiler import RuleCompiler
from ..models.rule import Rule, RuleCollision, RuleSummary
from ..models.rule_definition import RuleDefinition


_EMPTY: Mapping = MappingProxyType({})


class RuleRegistry:
    """
    Immutable lookup of compiled rules.

    Iteration order is target order, then group order (first time a group
    was registered), then rule order within the group (alphabetical when
    the builder was asked for it, otherwise registration order).

    Example:
        registry.list_groups('captain')
        # ('Damage Dealers', 'Survival', ...)
        rule = registry.get_rule('captain', 'Damage Dealers', 'ATK boosters')
    """

    def __init__(
        self,
        tables: Mapping[Target, Mapping[str, Mapping[str, Rule]]],
        collisions: Iterable[RuleCollision] = ()
    ):
        frozen = {}
        for target in TARGET_ORDER:
            groups = tables.get(target, {})
            frozen[target] = MappingProxyType({
                group: MappingProxyType(dict(rules))
                for group, rules in groups.items()
            })
        self._tables = MappingProxyType(frozen)
        self._collisions = tuple(collisions)
        self._fingerprint: Optional[str] = None

    def lookup(self, target: Union[Target, str]) -> Mapping[str, Mapping[str, Rule]]:
        """Read-only group -> name -> Rule mapping; unknown target is empty."""
        resolved = self._resolve_target(target)
        if resolved is None:
            return _EMPTY
        return self._tables[resolved]

    def list_groups(self, target: Union[Target, str]) -> tuple[str, ...]:
        return tuple(self.lookup(target).keys())

    def list_rules(self, target: Union[Target, str], group: str) -> tuple[RuleSummary, ...]:
        """Rule names and submatchers of one group; unknown group is empty."""
        rules = self.lookup(target).get(group, _EMPTY)
        return tuple(
            RuleSummary(
                name=rule.name,
                submatcher_descriptions=rule.submatcher_descriptions,
                submatchers=rule.submatchers,
            )
            for rule in rules.values()
        )

    def get_rule(self, target: Union[Target, str], group: str, name: str) -> Optional[Rule]:
        return self.lookup(target).get(group, _EMPTY).get(name)

    def rules(self, target: Union[Target, str]) -> Iterator[Rule]:
        """All rules for a target in registry order."""
        for group_rules in self.lookup(target).values():
            yield from group_rules.values()

    def all_rules(self) -> Iterator[Rule]:
        for target in TARGET_ORDER:
            yield from self.rules(target)

    @property
    def collisions(self) -> tuple[RuleCollision, ...]:
        return self._collisions

    @property
    def fingerprint(self) -> str:
        """
        Stable hash of everything that affects matching.

        Two registries built from the same definitions share a
        fingerprint; the tag cache uses it to detect rule changes.
        """
        if self._fingerprint is None:
            digest = hashlib.sha256()
            for rule in self.all_rules():
                digest.update(rule.signature().encode('utf-8'))
                digest.update(b'\x1e')
            self._fingerprint = digest.hexdigest()
        return self._fingerprint

    def as_structure(self) -> dict:
        """Plain nested dict of target -> group -> [rule names], for comparisons and reports."""
        return {
            target.value: {
                group: list(rules.keys())
                for group, rules in self._tables[target].items()
            }
            for target in TARGET_ORDER
        }

    def __len__(self) -> int:
        return sum(
            len(rules)
            for groups in self._tables.values()
            for rules in groups.values()
        )

    def __repr__(self) -> str:
        return f"RuleRegistry(rules={len(self)}, collisions={len(self._collisions)})"

    @staticmethod
    def _resolve_target(target: Union[Target, str]) -> Optional[Target]:
        try:
            return parse_target(target)
        except ValueError:
            return None


class RegistryBuilder:
    """
    Builds a RuleRegistry from rule definitions.

    Example:
        builder = RegistryBuilder(RuleCompiler())
        builder.exclude_legacy(True)
        builder.register(RuleLoader(rules_dir).load_all())
        registry = builder.build(alphabetical=True)
    """

    def __init__(self, compiler: Optional[RuleCompiler] = None):
        self.compiler = compiler or RuleCompiler()
        self.logger = get_process_logger('tagger.registry')
        self._exclude_legacy = False
        self._tables: dict[Target, dict[str, dict[str, Rule]]] = {}
        self._collisions: list[RuleCollision] = []
        self._skipped_legacy = 0

    def exclude_legacy(self, flag: bool = True) -> 'RegistryBuilder':
        """Skip legacy rules in subsequent register() calls."""
        self._exclude_legacy = flag
        return self

    def register(self, group_definitions: Iterable[tuple[str, RuleDefinition]]) -> 'RegistryBuilder':
        """
        Compile and insert definitions in the given order.

        Raises:
            RuleCompileError: If any definition fails to compile
        """
        for group, definition in group_definitions:
            if self._exclude_legacy and definition.is_legacy:
                self._skipped_legacy += 1
                self.logger.debug(f"Skipping legacy rule '{definition.name}'")
                continue
            for rule in self.compiler.compile(definition, group):
                self._insert(rule)
        return self

    def build(self, alphabetical: bool = True) -> RuleRegistry:
        """Freeze the registered rules into a snapshot."""
        tables: dict[Target, dict[str, dict[str, Rule]]] = {}
        for target, groups in self._tables.items():
            tables[target] = {}
            for group, rules in groups.items():
                names = sorted(rules) if alphabetical else list(rules)
                tables[target][group] = {name: rules[name] for name in names}

        registry = RuleRegistry(tables, self._collisions)
        self.logger.info(
            f"Built registry: {len(registry)} rules, "
            f"{len(self._collisions)} collisions, "
            f"{self._skipped_legacy} legacy rules skipped"
        )
        return registry

    def _insert(self, rule: Rule) -> None:
        group_rules = self._tables.setdefault(rule.target, {}).setdefault(rule.group, {})
        previous = group_rules.get(rule.name)
        if previous is not None:
            collision = RuleCollision(
                target=rule.target,
                group=rule.group,
                name=rule.name,
                replaced_pattern=previous.pattern.pattern,
                winning_pattern=rule.pattern.pattern,
            )
            self._collisions.append(collision)
            self.logger.warning(f"Rule collision, last registration wins: {collision.describe()}")
        group_rules[rule.name] = rule


__all__ = ['RuleRegistry', 'RegistryBuilder']
