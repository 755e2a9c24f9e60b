# Path: ability_tags/output/formatters/json_formatter.py
"""
JSON Formatter

Renders a TagReport as JSON, keeping every extracted value so other
tools (a search index, a diff between rule versions) can consume it.
Unbounded numbers are written as the string "max".
"""

import json
import math
from typing import Any

from ..report_models import TagReport, TagReportEntry
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders report as JSON."""

    @property
    def format_name(self) -> str:
        return 'json'

    @property
    def file_extension(self) -> str:
        return '.json'

    def format_report(self, report: TagReport) -> str:
        data = {
            'fingerprint': report.fingerprint,
            'rule_count': report.rule_count,
            'generated_at': report.generated_at,
            'summary': report.summary,
            'entries': [self._serialize_entry(entry) for entry in report.entries],
        }
        return json.dumps(self._finite(data), indent=2, ensure_ascii=False)

    def _serialize_entry(self, entry: TagReportEntry) -> dict[str, Any]:
        return {
            'character_id': entry.character_id,
            'target': entry.target,
            'text': entry.text,
            'cached': entry.cached,
            'tags': [tag.to_dict() for tag in entry.tags],
        }

    def _finite(self, value: Any) -> Any:
        """Replace inf with 'max' so the output stays strict JSON."""
        if isinstance(value, float) and math.isinf(value):
            return 'max'
        if isinstance(value, dict):
            return {key: self._finite(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._finite(item) for item in value]
        return value


__all__ = ['JsonFormatter']
