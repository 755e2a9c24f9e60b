# Path: ability_tags/tests/unit/test_logger.py
"""
Unit Tests for IPO Logging

Tests:
- Layer logger naming
- Per-layer log files
- Handler replacement on repeated setup
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from core.logger import (
    IPO_LAYERS,
    get_input_logger,
    get_output_logger,
    get_process_logger,
    setup_ipo_logging,
)


@pytest.fixture
def isolated_root_logger():
    """Restore root logger handlers and level after the test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestLoggerNames:
    """Test layer prefixes."""

    def test_layer_prefixes(self):
        assert get_input_logger('rule_loader').name == 'input.rule_loader'
        assert get_process_logger('tagger.registry').name == 'process.tagger.registry'
        assert get_output_logger('report_writer').name == 'output.report_writer'

    def test_layers(self):
        assert IPO_LAYERS == ('input', 'process', 'output')


class TestSetup:
    """Test setup_ipo_logging."""

    def test_creates_layer_files(self, temp_dir, isolated_root_logger):
        log_dir = temp_dir / 'logs'
        setup_ipo_logging(log_dir, log_level='DEBUG', console_output=False)

        get_input_logger('test').info('reading rules')
        get_process_logger('test').info('compiling rules')
        for handler in isolated_root_logger.handlers:
            handler.flush()

        input_log = (log_dir / 'input_activity.log').read_text(encoding='utf-8')
        process_log = (log_dir / 'process_activity.log').read_text(encoding='utf-8')
        full_log = (log_dir / 'full_activity.log').read_text(encoding='utf-8')

        assert 'reading rules' in input_log
        assert 'compiling rules' not in input_log
        assert 'compiling rules' in process_log
        assert 'reading rules' in full_log and 'compiling rules' in full_log

    def test_repeated_setup_does_not_duplicate_handlers(self, temp_dir, isolated_root_logger):
        setup_ipo_logging(temp_dir, console_output=True)
        first = len(isolated_root_logger.handlers)
        setup_ipo_logging(temp_dir, console_output=True)

        assert len(isolated_root_logger.handlers) == first == len(IPO_LAYERS) + 2

    def test_unknown_level_defaults_to_info(self, temp_dir, isolated_root_logger):
        setup_ipo_logging(temp_dir, log_level='chatty', console_output=False)
        assert isolated_root_logger.level == logging.INFO
