# Path: ability_tags/tests/unit/test_ability_source.py
"""
Unit Tests for AbilityTextSource

Tests:
- Text lookup by character and target
- Serialization of structured abilities
- Loading from JSON files
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import Target
from loaders import AbilityTextSource
from loaders.ability_source import serialize_ability


class TestSerializeAbility:
    """Test serialize_ability."""

    def test_plain_text(self):
        assert serialize_ability('Boosts ATK') == 'Boosts ATK'

    @pytest.mark.parametrize('value', [None, '', [], {}])
    def test_empty_values(self, value):
        assert serialize_ability(value) is None

    def test_structured_value_is_compact_json(self):
        value = [{'Characters': 'Luffy', 'description': ['Boosts ATK by 1.5x']}]
        assert serialize_ability(value) == \
            '[{"Characters":"Luffy","description":["Boosts ATK by 1.5x"]}]'

    def test_non_ascii_kept(self):
        assert serialize_ability(['Rōronoa']) == '["Rōronoa"]'


class TestLookup:
    """Test get_ability_text."""

    def test_text_by_target(self, sample_details):
        source = AbilityTextSource(sample_details)

        assert source.get_ability_text('0001', 'captain') == 'Boosts ATK of all characters by 2.5x'
        assert source.get_ability_text('0001', Target.SAILOR).startswith('Boosts base ATK')

    def test_missing_slot_character_and_target(self, sample_details):
        source = AbilityTextSource(sample_details)

        assert source.get_ability_text('0001', 'swap') is None
        assert source.get_ability_text('9999', 'captain') is None
        assert source.get_ability_text('0001', 'crewmate') is None

    def test_empty_captain(self, sample_details):
        assert AbilityTextSource(sample_details).get_ability_text('0003', 'captain') is None

    def test_list_ability(self, sample_details):
        text = AbilityTextSource(sample_details).get_ability_text('0002', 'limit')
        assert text == '["Acquire Potential 1","Acquire Potential 2"]'

    def test_integer_ids(self):
        source = AbilityTextSource({1: {'captain': 'Boosts ATK'}})
        assert source.get_ability_text(1, 'captain') == 'Boosts ATK'
        assert list(source.character_ids()) == ['1']

    def test_len_and_ids(self, sample_details):
        source = AbilityTextSource(sample_details)
        assert len(source) == 3
        assert list(source.character_ids()) == ['0001', '0002', '0003']


class TestFromFile:
    """Test loading details files."""

    def test_from_file(self, create_details_file):
        source = AbilityTextSource.from_file(create_details_file)
        assert len(source) == 3

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            AbilityTextSource.from_file(temp_dir / 'missing.json')

    def test_not_an_object(self, temp_dir):
        path = temp_dir / 'details.json'
        path.write_text(json.dumps([1, 2, 3]), encoding='utf-8')
        with pytest.raises(ValueError, match='expected a JSON object'):
            AbilityTextSource.from_file(path)
