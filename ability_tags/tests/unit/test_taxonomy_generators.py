# Path: ability_tags/tests/unit/test_taxonomy_generators.py
"""
Unit Tests for Taxonomy Tables and Submatcher Generators

Tests:
- Table contents and lookup
- Option patterns produced by each generator
- Universal alternatives and exclusions
- Purity (same arguments, equal output)
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import SubmatcherKind, WidthHint
from process.tagger import taxonomy
from process.tagger.generators import (
    GENERATORS,
    build_option_set,
    classes_submatchers,
    orbs_submatchers,
    positions_submatchers,
    types_submatchers,
    universal_submatcher,
)


def _by_label(specs):
    return {spec.description: spec for spec in specs}


class TestTaxonomyTables:
    """Test the fixed vocabularies."""

    def test_types_are_bracketed_in_order(self):
        assert taxonomy.entry_ids(taxonomy.TYPES) == ('STR', 'DEX', 'QCK', 'PSY', 'INT')
        assert taxonomy.TYPES[0].match_fragment == r'\[STR\]'

    def test_type_widths(self):
        widths = [entry.width_hint for entry in taxonomy.TYPES]
        assert widths[:3] == [WidthHint.MEDIUM.value] * 3
        assert widths[3:] == [WidthHint.WIDE.value] * 2

    def test_classes_escape_spaces(self):
        free_spirit = _by_label(
            classes_submatchers([1], include_universal=False)
        )['Free Spirit']
        assert free_spirit.pattern.search('Free Spirit ')

    def test_orb_labels_do_not_clash_with_types(self):
        type_labels = {entry.label for entry in taxonomy.TYPES}
        orb_labels = {entry.label for entry in taxonomy.ORBS}
        assert not type_labels & orb_labels
        assert 'Meat orb' in orb_labels

    def test_orb_width_by_id_length(self):
        widths = {entry.id: entry.width_hint for entry in taxonomy.ORBS}
        assert widths['G'] == WidthHint.XS.value
        assert widths['BOMB'] == WidthHint.SMALL.value
        assert widths['SUPERBOMB'] == WidthHint.WIDE.value

    def test_get_table(self):
        assert taxonomy.get_table('orbs') is taxonomy.ORBS
        assert taxonomy.get_table('Types') is taxonomy.TYPES
        with pytest.raises(KeyError):
            taxonomy.get_table('weapons')


class TestTypesAndClasses:
    """Test types and classes generators."""

    def test_types_one_option_per_type(self):
        specs = types_submatchers([1])
        assert [spec.description for spec in specs] == ['STR', 'DEX', 'QCK', 'PSY', 'INT']
        assert all(spec.kind is SubmatcherKind.OPTION for spec in specs)
        assert all(spec.groups == (1,) for spec in specs)

    def test_types_accept_universal(self):
        strength = _by_label(types_submatchers([1]))['STR']
        assert strength.pattern.search('[STR] ')
        assert strength.pattern.search('all ')
        assert strength.pattern.search("captain's Type ")
        assert not strength.pattern.search('[DEX] ')

    def test_types_without_universal(self):
        strength = _by_label(types_submatchers([1], include_universal=False))['STR']
        assert not strength.pattern.search('all ')

    def test_custom_universal_pattern(self):
        strength = _by_label(types_submatchers([1], universal_pattern='^$'))['STR']
        assert strength.pattern.search('')
        assert not strength.pattern.search('all ')

    def test_style_hint_from_table(self):
        specs = _by_label(types_submatchers([1]))
        assert specs['STR'].style_hints == (WidthHint.MEDIUM.value,)
        assert specs['INT'].style_hints == (WidthHint.WIDE.value,)

    def test_option_patterns_ignore_case(self):
        fighter = _by_label(classes_submatchers([2]))['Fighter']
        assert fighter.pattern.search('FIGHTER')
        assert fighter.groups == (2,)


class TestOrbs:
    """Test the orbs generator."""

    def test_orbs_follow_given_order(self):
        specs = orbs_submatchers(['RCV', 'STR'], [1])
        assert [spec.description for spec in specs] == ['Meat orb', 'STR orb']

    def test_orb_ids_case_insensitive(self):
        specs = orbs_submatchers(['rainbow'], [1])
        assert specs[0].description == 'Rainbow orb'
        assert specs[0].pattern.search('[RAINBOW]')

    def test_unknown_orb(self):
        with pytest.raises(ValueError, match='Unknown entry'):
            orbs_submatchers(['PLASMA'], [1])

    def test_empty_orb_list(self):
        with pytest.raises(ValueError):
            orbs_submatchers([], [1])


class TestPositions:
    """Test the positions generator."""

    def test_simple_mode_lists_rows_columns_and_extras(self):
        labels = [spec.description for spec in positions_submatchers([1])]
        assert labels == [
            'Top', 'Middle', 'Bottom', 'Left', 'Right',
            'Adjacent', 'Selected', 'Self',
        ]

    def test_dense_mode_lists_board_cells(self):
        labels = [
            spec.description
            for spec in positions_submatchers([1], use_rows_and_columns=False)
        ]
        assert labels[:6] == [
            'Friend Captain', 'Captain', 'Middle Left',
            'Middle Right', 'Bottom Left', 'Bottom Right',
        ]

    def test_exclude_by_label(self):
        labels = [
            spec.description
            for spec in positions_submatchers([1], exclude=['adjacent', 'Selected'])
        ]
        assert 'Adjacent' not in labels
        assert 'Selected' not in labels
        assert 'Self' in labels

    def test_left_column_covers_left_cells(self):
        cells = _by_label(positions_submatchers(
            [1], include_universal=False, use_rows_and_columns=False
        ))
        text = 'left column '
        assert cells['Friend Captain'].pattern.search(text)
        assert cells['Middle Left'].pattern.search(text)
        assert not cells['Captain'].pattern.search(text)

    def test_friend_captain_is_not_captain(self):
        cells = _by_label(positions_submatchers(
            [1], include_universal=False, use_rows_and_columns=False
        ))
        assert not cells['Captain'].pattern.search('Friend Captain ')
        assert cells['Captain'].pattern.search('Captain ')

    def test_self_option(self):
        self_option = _by_label(positions_submatchers([1]))['Self']
        assert self_option.pattern.search('this ')
        assert self_option.pattern.search('supported ')


class TestUniversalAndPurity:
    """Test the universal generator and generator purity."""

    def test_universal_single_option(self):
        specs = universal_submatcher([1, 2])
        assert len(specs) == 1
        assert specs[0].description == 'All'
        assert specs[0].groups == (1, 2)
        assert specs[0].pattern.search('all ')

    def test_universal_custom_description(self):
        spec = universal_submatcher([1], '^$', description='Everyone')[0]
        assert spec.description == 'Everyone'
        assert spec.pattern.search('')

    def test_generators_are_pure(self):
        assert types_submatchers([1]) == types_submatchers([1])
        assert positions_submatchers([2], exclude=['Self']) == \
            positions_submatchers([2], exclude=['Self'])

    def test_build_option_set_subset(self):
        specs = build_option_set(taxonomy.TYPES, [1], entries=['INT', 'STR'])
        assert [spec.description for spec in specs] == ['INT', 'STR']

    def test_generator_registry(self):
        assert set(GENERATORS) == {'types', 'classes', 'orbs', 'positions', 'universal'}
