# Path: ability_tags/output/__init__.py
"""
Output Module for ability_tags

Reports of indexing runs.

Report flow:
    AbilityIndexer -> TagReport -> [Formatters] -> Files

Usage:
    from output import ReportWriter

    paths = ReportWriter(output_dir).write(report, ['json', 'csv'])
"""

from .report_models import TagReport, TagReportEntry
from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    JsonFormatter,
    CsvFormatter,
    register_default_formatters,
)
from .report_writer import ReportWriter

__all__ = [
    'TagReport',
    'TagReportEntry',
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'CsvFormatter',
    'register_default_formatters',
    'ReportWriter',
]
