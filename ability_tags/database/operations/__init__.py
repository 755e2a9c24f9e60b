# Path: ability_tags/database/operations/__init__.py
"""Database operations for the tag cache."""

from database.operations.tag_ops import TagOperations

__all__ = ['TagOperations']
