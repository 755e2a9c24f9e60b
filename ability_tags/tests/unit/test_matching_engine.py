# Path: ability_tags/tests/unit/test_matching_engine.py
"""
Unit Tests for MatchingEngine and Submatcher Evaluators

Tests:
- Rule independence and registry order
- Number extraction: precedence, ranges, sentinels
- Option and text extraction
- Failure isolation
"""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from process.tagger import MatchingEngine, NumberValue, RegistryBuilder, parse_number
from process.tagger.models import RuleDefinition


@pytest.fixture
def engine(atk_boost_rule_data, defense_rule_data):
    definitions = [
        ('Damage Dealers', RuleDefinition.model_validate(atk_boost_rule_data)),
        ('Enemy Debuffs', RuleDefinition.model_validate(defense_rule_data)),
    ]
    return MatchingEngine(RegistryBuilder().register(definitions).build())


class TestParseNumber:
    """Test sentinel normalization."""

    @pytest.mark.parametrize('raw, expected', [
        ('2.5', 2.5),
        ('3', 3.0),
        ('?', 0.0),
        ('2.?', 2.0),
        ('1,000', 1000.0),
        ('abc', 0.0),
        (None, 0.0),
    ])
    def test_finite(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize('raw', ['completely', 'Completely', '99+'])
    def test_maximal(self, raw):
        assert math.isinf(parse_number(raw))


class TestClassify:
    """Test classification."""

    def test_single_match(self, engine):
        tags = engine.classify('captain', 'Boosts ATK of all characters by 2x for 3 turns')

        assert len(tags) == 1
        tag = tags[0]
        assert tag.rule_name == 'ATK boosters'
        assert tag.group == 'Damage Dealers'
        assert tag.values['Multiplier'] == NumberValue(2.0, 2.0, (2.0,), '2')
        assert tag.values['Turns'].low == 3.0
        assert tag.values['All'] is True
        assert tag.values['STR'] is True

    def test_separator_produces_no_value(self, engine):
        tag = engine.classify('captain', 'Boosts ATK of all characters by 2x for 3 turns')[0]
        assert 'Affected types' not in tag.values

    def test_type_restricted(self, engine):
        tag = engine.classify('captain', 'Boosts ATK of [DEX] characters by 2x for 1 turn')[0]
        assert tag.values['DEX'] is True
        assert tag.values['STR'] is False
        assert tag.values['All'] is False

    def test_no_match(self, engine):
        assert engine.classify('captain', 'Recovers 500 HP') == ()

    @pytest.mark.parametrize('text', ['', None])
    def test_empty_text(self, engine, text):
        assert engine.classify('captain', text) == ()

    def test_target_without_rules(self, engine):
        assert engine.classify('sailor', 'Boosts ATK of all characters by 2x for 3 turns') == ()

    def test_unknown_target(self, engine):
        assert engine.classify('crewmate', 'Boosts ATK of all characters by 2x for 3 turns') == ()

    def test_rules_run_independently(self, engine):
        text = (
            'Reduces the defense of all enemies by 50% for 2 turns and '
            'boosts ATK of all characters by 2x for 3 turns'
        )
        tags = engine.classify('special', text)
        assert [tag.rule_name for tag in tags] == ['ATK boosters', 'Defense reducers']

    def test_deterministic(self, engine):
        text = 'Boosts ATK of all characters by 2x-2.5x for 3 turns'
        assert engine.classify('special', text) == engine.classify('special', text)

    def test_classify_many(self, engine):
        results = engine.classify_many('captain', [
            'Boosts ATK of all characters by 2x for 3 turns', None, 'Recovers HP',
        ])
        assert [len(tags) for tags in results] == [1, 0, 0]


class TestNumbers:
    """Test number extraction."""

    def test_range(self, engine):
        tag = engine.classify('special', 'Boosts ATK of all characters by 2x-2.5x for 1-3 turns')[0]
        assert tag.values['Multiplier'] == NumberValue(2.0, 2.5, (2.0, 2.5), '2')
        assert tag.values['Turns'].low == 1.0
        assert tag.values['Turns'].high == 3.0
        assert str(tag.values['Turns']) == '1-3'

    def test_range_collapses_without_upper(self, engine):
        value = engine.classify('special', 'Boosts ATK of all characters by 2x for 3 turns')[0] \
            .values['Multiplier']
        assert value.high == value.low
        assert not value.is_range

    def test_unknown_value(self, engine):
        value = engine.classify('special', 'Boosts ATK of all characters by ?x for 3 turns')[0] \
            .values['Multiplier']
        assert value.low == 0.0
        assert value.raw == '?'

    def test_open_ended_turns(self, engine):
        value = engine.classify('special', 'Boosts ATK of all characters by 2x for 99+ turns')[0] \
            .values['Turns']
        assert math.isinf(value.low)
        assert str(value) == 'max'


class TestOptionsAndText:
    """Test option and text extraction."""

    def test_option_present(self, engine):
        tag = engine.classify(
            'special',
            'Ignores Debuff Protection and reduces the defense of all enemies by 50% for 2 turns'
        )[0]
        assert tag.values['Ignores debuff protection'] is True
        assert tag.values['Percentage'].low == 50.0

    def test_option_absent(self, engine):
        tag = engine.classify('special', 'Reduces the defense of all enemies by 50% for 2 turns')[0]
        assert tag.values['Ignores debuff protection'] is False

    def test_text_submatcher(self, make_definition):
        definition = make_definition(
            pattern=r'Boosts ATK against (?:(\w+) enemies|enemies named (\w+)) by ([?.\d]+)x',
            submatchers=[
                {'type': 'text', 'description': 'Enemy', 'groups': [1, 2]},
                {'type': 'number', 'description': 'Multiplier', 'groups': [3]},
            ],
        )
        engine = MatchingEngine(RegistryBuilder().register([('G', definition)]).build())

        first = engine.classify('captain', 'Boosts ATK against Pirate enemies by 2x')[0]
        second = engine.classify('captain', 'Boosts ATK against enemies named Luffy by 2x')[0]
        assert first.values['Enemy'] == 'Pirate'
        assert second.values['Enemy'] == 'Luffy'

    def test_unbound_number_is_none(self, make_definition):
        definition = make_definition(
            pattern=r'Boosts ATK by ([?.\d]+)x(?: for (\d+) turns)?',
            submatchers=[
                {'type': 'number', 'description': 'Multiplier', 'groups': [1]},
                {'type': 'number', 'description': 'Turns', 'groups': [2]},
            ],
        )
        engine = MatchingEngine(RegistryBuilder().register([('G', definition)]).build())
        tag = engine.classify('captain', 'Boosts ATK by 2x')[0]
        assert tag.values['Turns'] is None


class TestFailureIsolation:
    """A failing rule is logged and skipped."""

    def test_failing_rule_skipped(self, engine, capture_logs, monkeypatch):
        original = engine.build_tag

        def flaky(match):
            if match.rule.name == 'ATK boosters':
                raise RuntimeError('boom')
            return original(match)

        monkeypatch.setattr(engine, 'build_tag', flaky)
        text = (
            'Reduces the defense of all enemies by 50% for 2 turns and '
            'boosts ATK of all characters by 2x for 3 turns'
        )
        tags = engine.classify('special', text)

        assert [tag.rule_name for tag in tags] == ['Defense reducers']
        assert "Rule 'ATK boosters'" in capture_logs.getvalue()
