# Path: ability_tags/database/models/ability_tags.py
"""
Ability Tag Models

Cached classification results: one AbilityTagRecord row per Tag, and one
AbilityCacheEntry per classified (character, target).

The cache entry records the registry fingerprint and a hash of the text
it classified; when either changes, that ability is classified again.
"""

import uuid as uuid_module
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Text, Integer, Index, UniqueConstraint

from database.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AbilityTagRecord(Base):
    """
    One Tag produced for one character ability.

    Example:
        record = AbilityTagRecord(
            character_id='0001',
            target='captain',
            group='Damage Dealers',
            rule_name='ATK boosters',
            values_json='{"Multiplier": {"low": 2.0, ...}}',
            fingerprint='3f9c...',
        )
    """
    __tablename__ = 'ability_tags'
    __table_args__ = (
        Index('ix_ability_tags_character_target', 'character_id', 'target'),
    )

    # Primary key - string UUID for SQLite compatibility
    tag_id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid_module.uuid4()),
        comment="Unique tag row identifier"
    )

    character_id = Column(
        String(64),
        nullable=False,
        index=True,
        comment="Character identifier from the details source"
    )
    target = Column(
        String(32),
        nullable=False,
        comment="Ability slot (captain, special, ...)"
    )
    position = Column(
        Integer,
        nullable=False,
        default=0,
        comment="Order of the tag within its (character, target)"
    )
    group = Column(
        String(255),
        nullable=False,
        comment="Rule group"
    )
    rule_name = Column(
        String(255),
        nullable=False,
        index=True,
        comment="Resolved rule name"
    )
    values_json = Column(
        Text,
        nullable=False,
        default='{}',
        comment="Submatcher description -> extracted value (JSON)"
    )
    fingerprint = Column(
        String(64),
        nullable=False,
        comment="Fingerprint of the registry that produced this tag"
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        comment="When the tag was computed"
    )

    def __repr__(self) -> str:
        return (
            f"<AbilityTagRecord(character='{self.character_id}', "
            f"target='{self.target}', rule='{self.rule_name}')>"
        )


class AbilityCacheEntry(Base):
    """
    Freshness marker for one cached ability.

    One row per (character, target) that has been classified, written even
    when the ability produced no tags. The cached tags are current only
    while both the registry fingerprint and the text hash still match.

    Example:
        entry = AbilityCacheEntry(
            character_id='0001',
            target='special',
            text_hash='9b1d...',
            fingerprint='3f9c...',
            tag_count=2,
        )
    """
    __tablename__ = 'ability_cache'
    __table_args__ = (
        UniqueConstraint('character_id', 'target', name='uq_ability_cache_character_target'),
    )

    entry_id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid_module.uuid4()),
        comment="Unique cache entry identifier"
    )

    character_id = Column(
        String(64),
        nullable=False,
        index=True,
        comment="Character identifier from the details source"
    )
    target = Column(
        String(32),
        nullable=False,
        comment="Ability slot (captain, special, ...)"
    )
    text_hash = Column(
        String(64),
        nullable=False,
        comment="SHA-256 of the ability text that was classified"
    )
    fingerprint = Column(
        String(64),
        nullable=False,
        comment="Fingerprint of the registry that classified the text"
    )
    tag_count = Column(
        Integer,
        nullable=False,
        default=0,
        comment="Number of tags stored for this ability"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="When the ability was last classified"
    )

    def __repr__(self) -> str:
        return (
            f"<AbilityCacheEntry(character='{self.character_id}', "
            f"target='{self.target}', tags={self.tag_count})>"
        )


__all__ = ['AbilityTagRecord', 'AbilityCacheEntry']
