# Path: ability_tags/process/tagger/engine/matching_engine.py
"""
Matching Engine

Runs every rule for a target against one ability text and turns each
match into a Tag.

Every rule is searched against the original text, independently of the
others; a text can match any number of rules. Classification holds no
state between calls, so one engine can serve concurrent callers.
"""

from typing import Iterable, Optional, Union

from constants import SubmatcherKind, Target
from core.logger.ipo_logging import get_process_logger

from .registry import RuleRegistry
from ..evaluators import NumberEvaluator, OptionEvaluator, TextEvaluator
from ..models.rule import Rule
from ..models.tag import MatchResult, Tag


class MatchingEngine:
    """
    Classifies ability text against a registry snapshot.

    Example:
        engine = MatchingEngine(registry)
        tags = engine.classify('captain', 'Boosts ATK of all characters by 2x for 3 turns')
        tags[0].values['Multiplier']
        # NumberValue(low=2.0, high=2.0, candidates=(2.0,), raw='2')
    """

    def __init__(self, registry: RuleRegistry):
        self.registry = registry
        self.logger = get_process_logger('tagger.matching_engine')
        self.evaluators = {
            SubmatcherKind.NUMBER: NumberEvaluator(),
            SubmatcherKind.TEXT: TextEvaluator(),
            SubmatcherKind.OPTION: OptionEvaluator(),
        }

    def match(self, rule: Rule, text: str) -> Optional[MatchResult]:
        """Search one rule's pattern in text."""
        found = rule.pattern.search(text)
        if found is None:
            return None
        return MatchResult(rule=rule, groups=found.groups())

    def build_tag(self, match: MatchResult) -> Tag:
        """Run the rule's submatchers over a match."""
        values = {}
        for spec in match.rule.submatchers:
            evaluator = self.evaluators.get(spec.kind)
            if evaluator is None:
                continue
            values[spec.description] = evaluator.extract(spec, match)
        return Tag(
            rule_name=match.rule.name,
            group=match.rule.group,
            target=match.rule.target,
            values=values,
        )

    def classify(self, target: Union[Target, str], text: Optional[str]) -> tuple[Tag, ...]:
        """
        Tags for one ability text, in registry order.

        A rule that raises is logged and skipped; the remaining rules still
        run. Empty or missing text yields no tags.
        """
        if not text:
            return ()

        tags = []
        for rule in self.registry.rules(target):
            try:
                match = self.match(rule, text)
                if match is None:
                    continue
                tag = self.build_tag(match)
            except Exception as e:
                self.logger.error(
                    f"Rule '{rule.name}' ({rule.target.value}/{rule.group}) failed: {e}",
                    exc_info=True
                )
                continue
            self.logger.debug(f"{rule.target.value}: matched '{rule.name}'")
            tags.append(tag)
        return tuple(tags)

    def classify_many(
        self,
        target: Union[Target, str],
        texts: Iterable[Optional[str]]
    ) -> list[tuple[Tag, ...]]:
        return [self.classify(target, text) for text in texts]


__all__ = ['MatchingEngine']
