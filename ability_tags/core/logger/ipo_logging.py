# Path: ability_tags/core/logger/ipo_logging.py
"""
IPO-Aware Logging for ability_tags

Input-Process-Output separated logging for the ability tagger.

Log files written to the configured directory:
- input_activity.log: rule files and character details being read
- process_activity.log: rule compilation, registry builds, matching
- output_activity.log: reports and tag cache writes
- full_activity.log: everything combined

Library code only asks for named loggers; nothing is configured until
main.py calls setup_ipo_logging().
"""

import logging
import sys
from pathlib import Path


IPO_LAYERS: tuple[str, ...] = ('input', 'process', 'output')

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class IPOFilter(logging.Filter):
    """Keep only records whose logger name belongs to one IPO layer."""

    def __init__(self, layer: str):
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def _file_handler(path: Path, formatter: logging.Formatter, layer: str = None) -> logging.Handler:
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    if layer:
        handler.addFilter(IPOFilter(layer))
    return handler


def setup_ipo_logging(
    log_dir: Path,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for ability_tags.

    Replaces any handlers already attached to the root logger, so calling
    it twice (for example after a configuration reload) does not duplicate
    output.

    Args:
        log_dir: Directory for log files (created if missing)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also log to stdout

    Example:
        setup_ipo_logging(
            log_dir=Path('/srv/ability_tags/logs'),
            log_level='DEBUG',
            console_output=False
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger.addHandler(_file_handler(log_dir / 'full_activity.log', formatter))
    for layer in IPO_LAYERS:
        root_logger.addHandler(
            _file_handler(log_dir / f'{layer}_activity.log', formatter, layer)
        )

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Example:
        logger = get_input_logger('rule_loader')
        logger.info("Loading rule files")
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Example:
        logger = get_process_logger('rule_compiler')
        logger.debug("Compiled 'ATK boosters' for captain")
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Get logger for OUTPUT layer (formatters, tag cache)."""
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPO_LAYERS',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
