# Path: ability_tags/database/__init__.py
"""
ability_tags Database Module

Optional cache of classification results.

Rows are stamped with the fingerprint of the registry that produced
them, so changing a rule invalidates exactly the cached results it could
affect.

Example:
    from database import initialize_database, session_scope, TagOperations

    initialize_database('sqlite:////srv/ability_tags/tags.db')
    with session_scope() as session:
        TagOperations.count(session)
"""

from typing import Optional

from database.models.base import (
    Base,
    initialize_engine,
    get_engine,
    get_session,
    session_scope,
    create_all_tables,
    reset_engine,
)
from database.models.ability_tags import AbilityTagRecord, AbilityCacheEntry
from database.operations.tag_ops import TagOperations


def initialize_database(db_url: Optional[str] = None) -> None:
    """
    Initialize the engine and create tables.

    Args:
        db_url: SQLAlchemy URL; None for an in-memory SQLite database
    """
    initialize_engine(db_url)
    create_all_tables()


__all__ = [
    'initialize_database',
    'initialize_engine',
    'get_engine',
    'get_session',
    'session_scope',
    'create_all_tables',
    'reset_engine',
    'Base',
    'AbilityTagRecord',
    'AbilityCacheEntry',
    'TagOperations',
]
