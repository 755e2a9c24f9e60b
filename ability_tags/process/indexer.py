# Path: ability_tags/process/indexer.py
"""
Ability Indexer

Classifies every ability of every character in a details source and
collects the results into a TagReport.

With a tag store, an ability is not classified again while its cached
tags were produced from the same text by a registry with the same
fingerprint. Freshness is tracked per (character, target), so indexing a
subset of targets leaves the others untouched.
"""

from typing import Callable, ContextManager, Iterable, Optional

from sqlalchemy.orm import Session

from constants import TARGET_ORDER, Target
from core.logger.ipo_logging import get_process_logger
from database.operations.tag_ops import TagOperations
from loaders.ability_source import AbilityTextSource
from output.report_models import TagReport, TagReportEntry
from process.tagger import MatchingEngine, Tag, TaggingCoordinator


class AbilityIndexer:
    """
    Bulk classification over a details source.

    Example:
        indexer = AbilityIndexer(coordinator, source, store=session_scope)
        report = indexer.index()
        report.summary['tags']
    """

    def __init__(
        self,
        coordinator: TaggingCoordinator,
        source: AbilityTextSource,
        store: Optional[Callable[[], ContextManager[Session]]] = None
    ):
        """
        Args:
            coordinator: Provides the registry and engine
            source: Character details
            store: Session scope factory for the tag cache
                   (database.session_scope); None disables caching
        """
        self.coordinator = coordinator
        self.source = source
        self.store = store
        self.logger = get_process_logger('indexer')

    def index(
        self,
        character_ids: Optional[Iterable[str]] = None,
        targets: Iterable[Target] = TARGET_ORDER
    ) -> TagReport:
        """
        Classify abilities and build a report.

        Args:
            character_ids: Restrict to these characters (default: all)
            targets: Ability slots to classify

        Returns:
            TagReport with one entry per ability that has text
        """
        # One engine for the whole run, even if the coordinator reloads
        engine = self.coordinator.engine
        report = TagReport(
            fingerprint=engine.registry.fingerprint,
            rule_count=len(engine.registry),
        )
        targets = tuple(targets)
        if character_ids is None:
            character_ids = self.source.character_ids()
        ids = [str(character_id) for character_id in character_ids]

        self.logger.info(f"Indexing {len(ids)} characters over {len(targets)} targets")
        for character_id in ids:
            for entry in self._index_character(engine, character_id, targets):
                report.add(entry)

        summary = report.summary
        self.logger.info(
            f"Indexed {summary['abilities']} abilities: {summary['tags']} tags, "
            f"{summary['untagged_abilities']} untagged, "
            f"{summary['cached_abilities']} from cache"
        )
        return report

    def _index_character(
        self,
        engine: MatchingEngine,
        character_id: str,
        targets: tuple[Target, ...]
    ) -> list[TagReportEntry]:
        entries = []
        for target in targets:
            text = self.source.get_ability_text(character_id, target)
            if text is None:
                continue
            if self.store is None:
                tags, cached = engine.classify(target, text), False
            else:
                tags, cached = self._cached_classify(engine, character_id, target, text)
            entries.append(TagReportEntry(
                character_id=character_id,
                target=target.value,
                text=text,
                tags=tags,
                cached=cached,
            ))
        return entries

    def _cached_classify(
        self,
        engine: MatchingEngine,
        character_id: str,
        target: Target,
        text: str
    ) -> tuple[tuple[Tag, ...], bool]:
        """Tags for one ability from the store, classifying and storing when stale."""
        fingerprint = engine.registry.fingerprint
        with self.store() as session:
            if TagOperations.is_current(session, character_id, target, text, fingerprint):
                return TagOperations.get_tags(session, character_id, target), True

        tags = engine.classify(target, text)
        with self.store() as session:
            TagOperations.replace_tags(session, character_id, target, text, tags, fingerprint)
        return tags, False


__all__ = ['AbilityIndexer']
