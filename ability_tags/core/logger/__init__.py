# Path: ability_tags/core/logger/__init__.py
"""
ability_tags Logger Package

IPO-aware logging for the ability tagger.

Provides separate log streams for:
- INPUT layer (rule files, character details)
- PROCESS layer (compiler, registry, matching, filtering)
- OUTPUT layer (reports, tag cache)
"""

from .ipo_logging import (
    IPO_LAYERS,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPO_LAYERS',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
