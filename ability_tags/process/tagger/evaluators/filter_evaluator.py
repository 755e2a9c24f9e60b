# Path: ability_tags/process/tagger/evaluators/filter_evaluator.py
"""
Filter Evaluator

Decides whether an already tagged ability passes a user's filter: a
selected rule plus optional constraints on its submatchers.

Rules:
- the ability must carry a Tag for exactly (target, group, rule name)
- number constraints pass when any extracted candidate compares true
- enabled options without a radio group must all be true; enabled
  options sharing a radio group pass when at least one of them is true
- text constraints search the user pattern case-insensitively
- a constraint on a submatcher the rule does not have fails, and so
  does one whose kind differs from the stored value's kind
- no constraints: the Tag being present is enough
"""

from typing import Iterable, Mapping, Optional, Union

from constants import SubmatcherKind, Target, parse_target
from core.logger.ipo_logging import get_process_logger

from .number_evaluator import NumberEvaluator
from .option_evaluator import OptionEvaluator
from .text_evaluator import TextEvaluator
from ..models.filter_query import (
    Constraint,
    NumberConstraint,
    OptionConstraint,
    TextConstraint,
)
from ..models.tag import NumberValue, Tag


_CONSTRAINT_KINDS: dict[type, SubmatcherKind] = {
    NumberConstraint: SubmatcherKind.NUMBER,
    OptionConstraint: SubmatcherKind.OPTION,
    TextConstraint: SubmatcherKind.TEXT,
}

# Stored value types per kind; None (nothing captured) is valid for every kind
_VALUE_TYPES: dict[SubmatcherKind, type] = {
    SubmatcherKind.NUMBER: NumberValue,
    SubmatcherKind.OPTION: bool,
    SubmatcherKind.TEXT: str,
}


class FilterEvaluator:
    """
    Evaluates filters against tag sets.

    Given a registry, constraint kinds are checked against the rule's
    submatcher kinds and radio groups are taken from the rule. Without
    one, kinds come from the stored values and every option is treated
    as ungrouped.

    Example:
        evaluator = FilterEvaluator(registry)
        evaluator.evaluate(
            tags, 'captain', 'Damage Dealers', 'ATK boosters',
            {'Multiplier': NumberConstraint('>=', 2)}
        )
    """

    def __init__(self, registry=None):
        self.registry = registry
        self.logger = get_process_logger('tagger.filter_evaluator')
        self.evaluators = {
            SubmatcherKind.NUMBER: NumberEvaluator(),
            SubmatcherKind.OPTION: OptionEvaluator(),
            SubmatcherKind.TEXT: TextEvaluator(),
        }

    def evaluate(
        self,
        tags: Iterable[Tag],
        target: Union[Target, str],
        group: str,
        rule_name: str,
        constraints: Optional[Mapping[str, Constraint]] = None
    ) -> bool:
        """
        Check one ability's tags against a filter.

        Args:
            tags: Tags produced for the ability
            target: Target the filter applies to
            group: Group of the selected rule
            rule_name: Resolved name of the selected rule
            constraints: Submatcher description -> constraint

        Returns:
            True if the ability passes the filter
        """
        try:
            target = parse_target(target)
        except ValueError:
            return False

        tag = self.find_tag(tags, target, group, rule_name)
        if tag is None:
            return False
        if not constraints:
            return True

        rule = self.registry.get_rule(target, group, rule_name) if self.registry else None
        radio_groups: dict[str, list[bool]] = {}

        for description, constraint in constraints.items():
            kind = _CONSTRAINT_KINDS.get(type(constraint))
            if kind is None or description not in tag.values:
                self.logger.debug(f"'{rule_name}' has no {description!r} submatcher to filter on")
                return False

            radio_group = None
            if rule is not None:
                spec = rule.get_submatcher(description)
                if spec is None or spec.kind is not kind:
                    return False
                radio_group = spec.radio_group

            value = tag.values[description]
            if value is not None and not isinstance(value, _VALUE_TYPES[kind]):
                self.logger.debug(f"{description!r} of '{rule_name}' is not a {kind.value} value")
                return False

            if isinstance(constraint, OptionConstraint):
                if not constraint.enabled:
                    continue
                passed = self.evaluators[kind].satisfies(value, constraint)
                if radio_group is not None:
                    radio_groups.setdefault(radio_group, []).append(passed)
                    continue
            else:
                passed = self.evaluators[kind].satisfies(value, constraint)

            if not passed:
                return False

        return all(any(results) for results in radio_groups.values())

    @staticmethod
    def find_tag(tags: Iterable[Tag], target: Target, group: str, rule_name: str) -> Optional[Tag]:
        for tag in tags:
            if tag.target is target and tag.group == group and tag.rule_name == rule_name:
                return tag
        return None


__all__ = ['FilterEvaluator']
