# Path: ability_tags/output/report_models.py
"""
Report Data Models

Format-agnostic results of an indexing run. The indexer produces these;
formatters consume them.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from process.tagger.models.tag import Tag


@dataclass
class TagReportEntry:
    """
    Tags produced for one character ability.

    Attributes:
        character_id: Character identifier
        target: Ability slot ('captain', 'special', ...)
        text: Ability text that was classified
        tags: Tags in registry order (may be empty)
        cached: Tags came from the tag cache instead of a fresh run
    """
    character_id: str
    target: str
    text: str
    tags: tuple[Tag, ...] = ()
    cached: bool = False


@dataclass
class TagReport:
    """
    Complete indexing run ready for formatting.

    Attributes:
        fingerprint: Fingerprint of the registry used
        rule_count: Rules in that registry
        generated_at: ISO timestamp of report generation
        entries: One entry per classified (character, target)
    """
    fingerprint: str
    rule_count: int = 0
    generated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec='seconds')
    )
    entries: list[TagReportEntry] = field(default_factory=list)

    def add(self, entry: TagReportEntry) -> None:
        self.entries.append(entry)

    def rule_counts(self, target: Optional[str] = None) -> Counter:
        """How many abilities each rule matched."""
        counts = Counter()
        for entry in self.entries:
            if target is not None and entry.target != target:
                continue
            counts.update(tag.rule_name for tag in entry.tags)
        return counts

    @property
    def summary(self) -> dict:
        characters = {entry.character_id for entry in self.entries}
        return {
            'characters': len(characters),
            'abilities': len(self.entries),
            'tags': sum(len(entry.tags) for entry in self.entries),
            'untagged_abilities': sum(1 for entry in self.entries if not entry.tags),
            'cached_abilities': sum(1 for entry in self.entries if entry.cached),
        }


__all__ = ['TagReportEntry', 'TagReport']
