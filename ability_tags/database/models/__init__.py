# Path: ability_tags/database/models/__init__.py
"""Database models for the tag cache."""

from database.models.base import Base
from database.models.ability_tags import AbilityTagRecord, AbilityCacheEntry

__all__ = ['Base', 'AbilityTagRecord', 'AbilityCacheEntry']
