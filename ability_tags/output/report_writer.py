# Path: ability_tags/output/report_writer.py
"""
Report Writer

Writes a TagReport in every requested format.
"""

from pathlib import Path
from typing import Iterable

from core.logger.ipo_logging import get_output_logger

from .formatters import FormatterRegistry, register_default_formatters
from .report_models import TagReport


class ReportWriter:
    """
    Writes reports through the formatter registry.

    Example:
        writer = ReportWriter(Path('/srv/ability_tags/output'))
        paths = writer.write(report, ['json', 'csv'])
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.logger = get_output_logger('report_writer')
        if not FormatterRegistry.get_available():
            register_default_formatters()

    def write(self, report: TagReport, formats: Iterable[str]) -> list[Path]:
        """
        Write report once per format; unknown formats are skipped with a warning.

        Returns:
            Paths of the written files
        """
        paths = []
        for format_name in formats:
            formatter = FormatterRegistry.get(format_name)
            if formatter is None:
                self.logger.warning(
                    f"Unknown output format '{format_name}' "
                    f"(available: {', '.join(FormatterRegistry.get_available())})"
                )
                continue
            path = formatter.write_report(report, self.output_dir)
            self.logger.info(f"Wrote {format_name} report: {path}")
            paths.append(path)
        return paths


__all__ = ['ReportWriter']
