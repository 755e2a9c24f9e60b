# Path: ability_tags/process/tagger/engine/rule_compiler.py
"""
Rule Compiler

Turns RuleDefinition models into immutable Rule values, one per target.

Compilation is side-effect free: compiling the same definition twice
yields equal rules. Anything wrong with a definition raises
RuleCompileError naming the rule, so a registry is never built from a
partially valid rule set.
"""

import dataclasses
import inspect
import re
from typing import Iterable, Optional

from constants import (
    DEFAULT_STYLE_HINTS,
    TARGET_PLACEHOLDER,
    TARGET_PLURAL_LABELS,
    SubmatcherKind,
    Target,
    parse_target,
)
from core.logger.ipo_logging import get_process_logger

from ..errors import RuleCompileError
from ..generators import GENERATORS
from ..models.rule import Rule, SubmatcherSpec
from ..models.rule_definition import GeneratorCall, RuleDefinition, SubmatcherDefinition


PATTERN_FLAGS: dict[str, re.RegexFlag] = {
    'IGNORECASE': re.IGNORECASE,
    'I': re.IGNORECASE,
    'MULTILINE': re.MULTILINE,
    'M': re.MULTILINE,
    'DOTALL': re.DOTALL,
    'S': re.DOTALL,
}


def resolve_rule_name(template: str, target: Target) -> str:
    """Substitute the target's plural label for the %target% placeholder."""
    return template.replace(TARGET_PLACEHOLDER, TARGET_PLURAL_LABELS[target])


class RuleCompiler:
    """
    Compiles rule definitions.

    Example:
        compiler = RuleCompiler()
        rules = compiler.compile(definition, group='Damage Dealers')
        # one Rule per entry in definition.targets
    """

    def __init__(self, strict_groups: bool = True):
        """
        Initialize compiler.

        Args:
            strict_groups: Raise when a submatcher binds a group the pattern
                           does not define. When False the problem is only
                           logged and the submatcher reads that group as
                           missing.
        """
        self.strict_groups = strict_groups
        self.logger = get_process_logger('tagger.rule_compiler')

    def compile(self, definition: RuleDefinition, group: str) -> tuple[Rule, ...]:
        """
        Compile a definition into one Rule per declared target.

        Raises:
            RuleCompileError: On any invalid part of the definition
        """
        targets = self._parse_targets(definition)
        pattern = self.compile_pattern(definition)
        submatchers = self.build_submatchers(definition, pattern, self.strict_groups)

        rules = tuple(
            Rule(
                name=resolve_rule_name(definition.name, target),
                target=target,
                group=group,
                pattern=pattern,
                submatchers=submatchers,
                legacy=definition.is_legacy,
                template_name=definition.name,
                notes=definition.notes,
            )
            for target in targets
        )
        self.logger.debug(
            f"Compiled '{definition.name}' ({pattern.groups} groups, "
            f"{len(submatchers)} submatchers) for "
            f"{', '.join(t.value for t in targets)}"
        )
        return rules

    def compile_pattern(self, definition: RuleDefinition) -> re.Pattern:
        flags = 0
        for flag in definition.flags:
            if flag not in PATTERN_FLAGS:
                raise RuleCompileError(definition.name, f"unknown pattern flag '{flag}'")
            flags |= PATTERN_FLAGS[flag]
        try:
            return re.compile(definition.pattern, flags)
        except re.error as e:
            raise RuleCompileError(definition.name, f"malformed pattern: {e}") from e

    def build_submatchers(
        self,
        definition: RuleDefinition,
        pattern: re.Pattern,
        strict_groups: bool
    ) -> tuple[SubmatcherSpec, ...]:
        """
        Expand generator calls and compile plain submatchers, in order.

        Raises:
            RuleCompileError: Bad option pattern, unknown generator, duplicate
                              description, or (strict) bad group reference
        """
        specs: list[SubmatcherSpec] = []
        for entry in definition.submatchers:
            if isinstance(entry, GeneratorCall):
                specs.extend(self._expand_generator(definition.name, entry))
            else:
                specs.append(self._compile_submatcher(definition.name, entry))

        specs = [
            spec if spec.style_hints else dataclasses.replace(spec, style_hints=DEFAULT_STYLE_HINTS)
            for spec in specs
        ]

        seen: set[str] = set()
        for spec in specs:
            if not spec.produces_value:
                continue
            if spec.description in seen:
                raise RuleCompileError(
                    definition.name,
                    f"duplicate submatcher description '{spec.description}'"
                )
            seen.add(spec.description)

        for problem in self._group_problems(specs, pattern):
            if strict_groups:
                raise RuleCompileError(definition.name, problem)
            self.logger.warning(f"Rule '{definition.name}': {problem}")

        return tuple(specs)

    def lint(self, definitions: Iterable[tuple[str, RuleDefinition]]) -> list[str]:
        """
        Check definitions without raising.

        Reports compile errors, group references outside the pattern
        (regardless of strict_groups), examples the pattern does not match
        and non_examples it does.

        Returns:
            Human-readable issues; empty when everything is clean
        """
        issues: list[str] = []
        for group, definition in definitions:
            prefix = f"[{group}] {definition.name}"
            try:
                self._parse_targets(definition)
                pattern = self.compile_pattern(definition)
                self.build_submatchers(definition, pattern, strict_groups=True)
            except RuleCompileError as e:
                issues.append(f"{prefix}: {e.reason}")
                continue

            for example in definition.examples:
                if pattern.search(example) is None:
                    issues.append(f"{prefix}: example does not match: {example!r}")
            for counter_example in definition.non_examples:
                if pattern.search(counter_example) is not None:
                    issues.append(f"{prefix}: non-example matches: {counter_example!r}")

        self.logger.info(f"Lint finished with {len(issues)} issues")
        return issues

    def _parse_targets(self, definition: RuleDefinition) -> tuple[Target, ...]:
        targets = []
        for value in definition.targets:
            try:
                target = parse_target(value)
            except ValueError:
                raise RuleCompileError(definition.name, f"unknown target '{value}'") from None
            if target not in targets:
                targets.append(target)
        if not targets:
            raise RuleCompileError(definition.name, "no targets")
        return tuple(targets)

    def _compile_submatcher(
        self,
        rule_name: str,
        entry: SubmatcherDefinition
    ) -> SubmatcherSpec:
        compiled: Optional[re.Pattern] = None
        if entry.pattern is not None:
            try:
                compiled = re.compile(entry.pattern, re.IGNORECASE)
            except re.error as e:
                raise RuleCompileError(
                    rule_name,
                    f"malformed pattern in submatcher '{entry.description}': {e}"
                ) from e
        return SubmatcherSpec(
            kind=entry.kind,
            description=entry.description,
            groups=tuple(entry.groups),
            pattern=compiled,
            radio_group=entry.radio_group,
            style_hints=tuple(entry.style_hints),
        )

    def _expand_generator(
        self,
        rule_name: str,
        call: GeneratorCall
    ) -> tuple[SubmatcherSpec, ...]:
        generator = GENERATORS.get(call.generator)
        if generator is None:
            raise RuleCompileError(
                rule_name,
                f"unknown generator '{call.generator}' "
                f"(expected one of: {', '.join(GENERATORS)})"
            )

        accepted = inspect.signature(generator).parameters
        kwargs = {}
        for field_name in call.model_fields_set:
            if field_name == 'generator':
                continue
            if field_name not in accepted:
                raise RuleCompileError(
                    rule_name,
                    f"generator '{call.generator}' does not take '{field_name}'"
                )
            value = getattr(call, field_name)
            if value is not None:
                kwargs[field_name] = value

        try:
            return generator(**kwargs)
        except (TypeError, ValueError) as e:
            raise RuleCompileError(rule_name, f"generator '{call.generator}': {e}") from e

    @staticmethod
    def _group_problems(specs: list[SubmatcherSpec], pattern: re.Pattern) -> list[str]:
        problems = []
        for spec in specs:
            for index in spec.groups:
                if index < 1 or index > pattern.groups:
                    problems.append(
                        f"submatcher '{spec.description}' binds group {index} "
                        f"but the pattern has {pattern.groups} groups"
                    )
        return problems


__all__ = ['RuleCompiler', 'resolve_rule_name', 'PATTERN_FLAGS']
