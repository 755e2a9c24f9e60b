# Path: ability_tags/tests/unit/test_rule_loader.py
"""
Unit Tests for RuleLoader

Tests:
- Directory scanning and file order
- YAML parsing and schema validation
- Error reporting (RuleLoadError)
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from process.tagger import RuleLoader, RuleLoadError
from process.tagger.models import RuleFile


SIMPLE_RULE = {
    'name': 'ATK boosters',
    'targets': ['captain'],
    'pattern': r'Boosts ATK by ([?.\d]+)x',
}


class TestRuleFiles:
    """Test directory scanning."""

    def test_files_in_name_order(self, write_rule_file):
        write_rule_file('02_survival.yaml', 'Survival', [SIMPLE_RULE])
        write_rule_file('01_damage.yml', 'Damage', [SIMPLE_RULE])
        (write_rule_file.rules_dir / 'README.txt').write_text('not a rule file')

        loader = RuleLoader(write_rule_file.rules_dir)
        assert [path.name for path in loader.rule_files()] == ['01_damage.yml', '02_survival.yaml']

    def test_missing_directory(self, temp_dir):
        loader = RuleLoader(temp_dir / 'missing')
        with pytest.raises(RuleLoadError, match='rules directory not found'):
            loader.load_all()

    def test_default_directory_is_shipped_dictionary(self):
        from dictionary import RULES_DIR
        assert RuleLoader().rules_dir == RULES_DIR


class TestLoadAll:
    """Test loading definitions."""

    def test_group_and_rule_order(self, write_rule_file):
        second = dict(SIMPLE_RULE, name='Chain boosters')
        write_rule_file('01_damage.yaml', 'Damage', [SIMPLE_RULE, second])
        write_rule_file('02_survival.yaml', 'Survival', [dict(SIMPLE_RULE, name='Healers')])

        definitions = RuleLoader(write_rule_file.rules_dir).load_all()

        assert [(group, d.name) for group, d in definitions] == [
            ('Damage', 'ATK boosters'),
            ('Damage', 'Chain boosters'),
            ('Survival', 'Healers'),
        ]

    def test_empty_directory(self, write_rule_file):
        assert RuleLoader(write_rule_file.rules_dir).load_all() == []

    def test_group_without_rules(self, write_rule_file):
        path = write_rule_file('01_empty.yaml', 'Empty', [])
        rule_file = RuleLoader(write_rule_file.rules_dir).load_file(path)
        assert rule_file.group == 'Empty'
        assert rule_file.rules == []


class TestErrors:
    """Test invalid rule files."""

    def test_yaml_syntax_error(self, write_rule_file):
        path = write_rule_file.rules_dir / 'broken.yaml'
        path.write_text('group: Damage\nrules: [\n', encoding='utf-8')

        with pytest.raises(RuleLoadError) as exc_info:
            RuleLoader(write_rule_file.rules_dir).load_all()
        assert exc_info.value.path == path
        assert 'YAML parse error' in exc_info.value.reason

    def test_empty_file(self, write_rule_file):
        path = write_rule_file.rules_dir / 'empty.yaml'
        path.write_text('', encoding='utf-8')
        with pytest.raises(RuleLoadError, match='empty rule file'):
            RuleLoader(write_rule_file.rules_dir).load_file(path)

    def test_top_level_list(self, write_rule_file):
        path = write_rule_file.rules_dir / 'list.yaml'
        path.write_text('- name: ATK boosters\n', encoding='utf-8')
        with pytest.raises(RuleLoadError, match='must be a mapping'):
            RuleLoader(write_rule_file.rules_dir).load_file(path)

    def test_missing_group(self, write_rule_file):
        path = write_rule_file.rules_dir / 'nogroup.yaml'
        path.write_text('rules: []\n', encoding='utf-8')
        with pytest.raises(RuleLoadError, match='invalid rule file'):
            RuleLoader(write_rule_file.rules_dir).load_file(path)

    def test_invalid_rule_fails_whole_file(self, write_rule_file):
        write_rule_file('01_damage.yaml', 'Damage', [
            SIMPLE_RULE,
            {'name': 'No pattern', 'targets': ['captain']},
        ])
        with pytest.raises(RuleLoadError, match='01_damage.yaml'):
            RuleLoader(write_rule_file.rules_dir).load_all()

    def test_parse_in_memory(self):
        loader = RuleLoader(Path('.'))
        rule_file = loader.parse({'group': 'Damage', 'rules': [SIMPLE_RULE]})
        assert isinstance(rule_file, RuleFile)

        with pytest.raises(RuleLoadError) as exc_info:
            loader.parse({'group': ''})
        assert str(exc_info.value).startswith('<memory>:')
