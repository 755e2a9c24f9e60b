# Path: ability_tags/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders a TagReport into one output format. Formatters
know nothing about matching; new formats add new formatters.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .csv_formatter import CsvFormatter


def register_default_formatters() -> None:
    """Register the built-in formats (json, csv)."""
    FormatterRegistry.register(JsonFormatter)
    FormatterRegistry.register(CsvFormatter)


__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'CsvFormatter',
    'register_default_formatters',
]
