# Path: ability_tags/loaders/__init__.py
"""
ability_tags Loaders Package

Readers for character details, the source of ability text.

Example:
    from loaders import AbilityTextSource

    source = AbilityTextSource.from_file(Path('details.json'))
    text = source.get_ability_text('0001', 'captain')
"""

from .ability_source import AbilityTextSource

__all__ = ['AbilityTextSource']
