# Path: ability_tags/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for ability_tags

Provides common test fixtures used across all test modules.
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add ability_tags to path for imports
ABILITY_TAGS_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ABILITY_TAGS_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'ABILITY_TAGS_ENVIRONMENT': 'test',
        'ABILITY_TAGS_DEBUG': 'true',

        # Rule dictionary
        'ABILITY_TAGS_INCLUDE_LEGACY': 'false',
        'ABILITY_TAGS_ALPHABETICAL_ORDER': 'true',
        'ABILITY_TAGS_STRICT_GROUPS': 'true',

        # Input / output
        'ABILITY_TAGS_DETAILS_PATH': str(temp_dir / 'details.json'),
        'ABILITY_TAGS_OUTPUT_DIR': str(temp_dir / 'output'),
        'ABILITY_TAGS_OUTPUT_FORMATS': 'json, csv',

        # Logging
        'ABILITY_TAGS_LOG_DIR': str(temp_dir / 'logs'),
        'ABILITY_TAGS_LOG_LEVEL': 'DEBUG',
        'ABILITY_TAGS_LOG_CONSOLE': 'false',

        # Tag cache
        'ABILITY_TAGS_DATABASE_URL': '',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# RULE FIXTURES
# ==============================================================================

@pytest.fixture
def atk_boost_rule_data():
    """A turn-limited ATK boost rule as written in a rule file."""
    return {
        'name': 'ATK boosters',
        'targets': ['captain', 'special'],
        'pattern': [
            r'Boosts ATK of (.+?)characters? by ([?.\d]+)x(?:-([?.\d]+)x)? ',
            r'for ([?\d]+\+?)(?:-([?\d]+))? turns?',
        ],
        'submatchers': [
            {'type': 'number', 'description': 'Multiplier', 'groups': [2, 3]},
            {'type': 'number', 'description': 'Turns', 'groups': [4, 5]},
            {'generator': 'universal', 'groups': [1]},
            {'type': 'separator', 'description': 'Affected types'},
            {'generator': 'types', 'groups': [1]},
        ],
        'examples': ['Boosts ATK of all characters by 2x for 3 turns'],
        'non_examples': ['Boosts ATK of all characters by 2x'],
    }


@pytest.fixture
def defense_rule_data():
    """Enemy debuff rule with an optional leading clause."""
    return {
        'name': 'Defense reducers',
        'targets': ['special'],
        'pattern': (
            r'(ignores? (?:Defense Reduction )?Debuff Protection and )?'
            r'Reduces the defense of all enemies by ([?\d]+)%(?:-([?\d]+)%)? '
            r'for ([?\d]+\+?)(?:-([?\d]+))? turns?'
        ),
        'submatchers': [
            {'type': 'number', 'description': 'Percentage', 'groups': [2, 3]},
            {'type': 'number', 'description': 'Turns', 'groups': [4, 5]},
            {'type': 'option', 'description': 'Ignores debuff protection',
             'pattern': 'i', 'groups': [1]},
        ],
    }


@pytest.fixture
def make_definition():
    """Build a RuleDefinition from keyword overrides."""
    from process.tagger.models import RuleDefinition

    def _make(**overrides):
        data = {
            'name': 'Test rule',
            'targets': ['captain'],
            'pattern': r'Boosts ATK by ([?.\d]+)x',
        }
        data.update(overrides)
        return RuleDefinition.model_validate(data)

    return _make


@pytest.fixture
def write_rule_file(temp_dir):
    """Write a YAML rule file into temp_dir/rules and return its path."""
    import yaml

    rules_dir = temp_dir / 'rules'
    rules_dir.mkdir(exist_ok=True)

    def _write(filename, group, rules):
        path = rules_dir / filename
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump({'group': group, 'rules': rules}, f, sort_keys=False)
        return path

    _write.rules_dir = rules_dir
    return _write


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def sample_details():
    """Character details in the shape AbilityTextSource reads."""
    return {
        '0001': {
            'captain': 'Boosts ATK of all characters by 2.5x',
            'special': 'Boosts ATK of all characters by 2x for 3 turns',
            'sailor': 'Boosts base ATK of [STR] characters by 100',
        },
        '0002': {
            'captain': 'Recovers 1x character\'s RCV in HP at the end of each turn',
            'special': 'Reduces the defense of all enemies by 50% for 2 turns',
            'limit': ['Acquire Potential 1', 'Acquire Potential 2'],
        },
        '0003': {
            'captain': '',
            'special': 'Delays all enemies by 1 turn',
        },
    }


@pytest.fixture
def create_details_file(temp_dir, sample_details):
    """Write the sample details JSON and return its path."""
    path = temp_dir / 'details.json'
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(sample_details, f, indent=2)
    return path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config(temp_dir):
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': True,
        'output_dir': temp_dir / 'output',
        'log_dir': temp_dir / 'logs',
        'output_formats': ['json'],
        'include_legacy': False,
    }.get(key, default)
    return config


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def memory_db():
    """Fresh in-memory tag cache database."""
    from database import initialize_database, reset_engine

    reset_engine()
    initialize_database(':memory:')
    yield
    reset_engine()
