# Path: ability_tags/output/formatters/csv_formatter.py
"""
CSV Formatter

Renders a TagReport as CSV for spreadsheet import: one row per extracted
submatcher value, plus one row per tag without values and per ability
without tags.
"""

import csv
import io

from process.tagger.models.tag import NumberValue

from ..report_models import TagReport
from .base_formatter import BaseFormatter


COLUMNS = ['character_id', 'target', 'group', 'rule_name', 'submatcher', 'value', 'cached']


class CsvFormatter(BaseFormatter):
    """Renders report as CSV."""

    @property
    def format_name(self) -> str:
        return 'csv'

    @property
    def file_extension(self) -> str:
        return '.csv'

    def format_report(self, report: TagReport) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(COLUMNS)

        for entry in report.entries:
            cached = 'yes' if entry.cached else ''
            if not entry.tags:
                writer.writerow([entry.character_id, entry.target, '', '', '', '', cached])
                continue
            for tag in entry.tags:
                if not tag.values:
                    writer.writerow([
                        entry.character_id, entry.target, tag.group, tag.rule_name, '', '', cached,
                    ])
                    continue
                for description, value in tag.values.items():
                    writer.writerow([
                        entry.character_id,
                        entry.target,
                        tag.group,
                        tag.rule_name,
                        description,
                        self._format_value(value),
                        cached,
                    ])

        return output.getvalue()

    def _format_value(self, value) -> str:
        if value is None:
            return ''
        if isinstance(value, bool):
            return 'yes' if value else 'no'
        if isinstance(value, NumberValue):
            if value.is_range:
                return f"{self._format_number(value.low)}-{self._format_number(value.high)}"
            return self._format_number(value.low)
        return str(value)


__all__ = ['CsvFormatter']
