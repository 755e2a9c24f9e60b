# Path: ability_tags/database/operations/tag_ops.py
"""
Tag Operations

Read and write cached Tags.

Tags are cached per ability, one (character, target) at a time. Each
stored ability gets an AbilityCacheEntry holding the registry fingerprint
and the hash of the text that was classified, so neither a rule change
nor a text change can serve stale tags.
"""

import hashlib
import json
from typing import Iterable, Optional, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from constants import Target, parse_target
from core.logger.ipo_logging import get_output_logger
from database.models.ability_tags import AbilityCacheEntry, AbilityTagRecord
from process.tagger.models.tag import Tag


logger = get_output_logger('database.tag_ops')


def text_hash(text: str) -> str:
    """SHA-256 hex digest of an ability text."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()


class TagOperations:
    """
    Operations for AbilityTagRecord and AbilityCacheEntry rows.

    All methods take the session to work in.

    Example:
        with session_scope() as session:
            if not TagOperations.is_current(session, '0001', 'captain', text, fingerprint):
                TagOperations.replace_tags(session, '0001', 'captain', text, tags, fingerprint)
            cached = TagOperations.get_tags(session, '0001', 'captain')
    """

    @staticmethod
    def replace_tags(
        session: Session,
        character_id: str,
        target: Union[Target, str],
        text: str,
        tags: Iterable[Tag],
        fingerprint: str
    ) -> int:
        """
        Replace the cached tags of one ability.

        Rows of the character's other targets are left alone.

        Args:
            session: Session to write in
            character_id: Character identifier
            target: Ability slot the tags belong to
            text: Ability text that was classified
            tags: Tags produced for the text (may be empty)
            fingerprint: Registry fingerprint that produced the tags

        Returns:
            Number of tag rows written
        """
        target = parse_target(target)
        tags = list(tags)
        for tag in tags:
            if tag.target is not target:
                raise ValueError(
                    f"Tag '{tag.rule_name}' belongs to {tag.target.value}, not {target.value}"
                )

        TagOperations.delete_character(session, character_id, [target])

        written = 0
        for position, tag in enumerate(tags):
            data = tag.to_dict()
            session.add(AbilityTagRecord(
                character_id=str(character_id),
                target=target.value,
                position=position,
                group=tag.group,
                rule_name=tag.rule_name,
                values_json=json.dumps(data['values'], ensure_ascii=False),
                fingerprint=fingerprint,
            ))
            written += 1

        session.add(AbilityCacheEntry(
            character_id=str(character_id),
            target=target.value,
            text_hash=text_hash(text),
            fingerprint=fingerprint,
            tag_count=written,
        ))
        session.flush()

        logger.debug(f"Stored {written} tags for character {character_id} ({target.value})")
        return written

    @staticmethod
    def get_tags(
        session: Session,
        character_id: str,
        target: Optional[Union[Target, str]] = None
    ) -> tuple[Tag, ...]:
        """Cached tags of a character (optionally one target), in stored order per target."""
        query = session.query(AbilityTagRecord).filter_by(character_id=str(character_id))
        if target is not None:
            query = query.filter_by(target=parse_target(target).value)
        records = query.order_by(AbilityTagRecord.target, AbilityTagRecord.position).all()

        return tuple(
            Tag.from_dict({
                'rule_name': record.rule_name,
                'group': record.group,
                'target': record.target,
                'values': json.loads(record.values_json),
            })
            for record in records
        )

    @staticmethod
    def is_current(
        session: Session,
        character_id: str,
        target: Union[Target, str],
        text: str,
        fingerprint: str
    ) -> bool:
        """
        Whether the cached tags of one ability are still valid.

        True only when the ability was stored from this exact text by a
        registry with this fingerprint. An ability that was never stored is
        never current.
        """
        entry = session.query(AbilityCacheEntry).filter_by(
            character_id=str(character_id),
            target=parse_target(target).value,
        ).one_or_none()
        if entry is None:
            return False
        return entry.fingerprint == fingerprint and entry.text_hash == text_hash(text)

    @staticmethod
    def delete_character(
        session: Session,
        character_id: str,
        targets: Optional[Iterable[Union[Target, str]]] = None
    ) -> int:
        """
        Delete a character's cached tags and cache entries.

        Args:
            session: Session to write in
            character_id: Character identifier
            targets: Only these targets (default: every target)

        Returns:
            Number of tag rows deleted
        """
        records = session.query(AbilityTagRecord).filter_by(character_id=str(character_id))
        entries = session.query(AbilityCacheEntry).filter_by(character_id=str(character_id))
        if targets is not None:
            values = [parse_target(target).value for target in targets]
            records = records.filter(AbilityTagRecord.target.in_(values))
            entries = entries.filter(AbilityCacheEntry.target.in_(values))

        deleted = records.delete(synchronize_session=False)
        entries.delete(synchronize_session=False)
        return deleted

    @staticmethod
    def count(session: Session, character_id: Optional[str] = None) -> int:
        query = session.query(func.count(AbilityTagRecord.tag_id))
        if character_id is not None:
            query = query.filter(AbilityTagRecord.character_id == str(character_id))
        return query.scalar() or 0


__all__ = ['TagOperations', 'text_hash']
