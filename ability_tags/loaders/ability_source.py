# Path: ability_tags/loaders/ability_source.py
"""
Ability Text Source

Character details keyed by character id, each mapping target names to
ability text:

    {
        "0001": {
            "captain": "Boosts ATK of all characters by 2x",
            "support": [{"Characters": "...", "description": ["..."]}]
        }
    }

Structured values (lists, dicts) are handed to the rules as compact JSON.
Rule patterns are written against that form and exclude '"' from their
wildcards so a match cannot run from one sub-entry into the next.
"""

import json
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Union

from constants import Target, parse_target
from core.logger.ipo_logging import get_input_logger


logger = get_input_logger('ability_source')


def serialize_ability(value: Any) -> Optional[str]:
    """Ability text as matched by rules; None for missing or empty values."""
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, (list, dict)) and not value:
        return None
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)


class AbilityTextSource:
    """
    Ability text lookup over character details.

    Example:
        source = AbilityTextSource({'0001': {'captain': 'Boosts ATK ...'}})
        source.get_ability_text('0001', 'captain')
        # 'Boosts ATK ...'
    """

    def __init__(self, details: Mapping[str, Mapping[str, Any]]):
        self._details = {str(key): value for key, value in details.items()}

    @classmethod
    def from_file(cls, path: Path) -> 'AbilityTextSource':
        """
        Read details from a JSON file.

        Raises:
            FileNotFoundError: If path does not exist
            ValueError: If the file is not a JSON object keyed by character id
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object keyed by character id")
        logger.info(f"Loaded details for {len(data)} characters from {path}")
        return cls(data)

    def get_ability_text(
        self,
        character_id: Union[str, int],
        target: Union[Target, str]
    ) -> Optional[str]:
        """Text for one character's ability slot, or None when absent."""
        details = self._details.get(str(character_id))
        if not isinstance(details, Mapping):
            return None
        try:
            key = parse_target(target).value
        except ValueError:
            return None
        return serialize_ability(details.get(key))

    def character_ids(self) -> Iterator[str]:
        yield from self._details.keys()

    def __len__(self) -> int:
        return len(self._details)


__all__ = ['AbilityTextSource', 'serialize_ability']
