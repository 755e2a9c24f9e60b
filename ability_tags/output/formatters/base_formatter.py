# Path: ability_tags/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for report formatters and a registry to look them
up by format name.

To add a new format:
1. Subclass BaseFormatter
2. Implement format_name, file_extension and format_report()
3. Register via FormatterRegistry.register()
"""

import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Type

from ..report_models import TagReport


class BaseFormatter(ABC):
    """Abstract base for tag report formatters."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'csv')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.json')."""

    @abstractmethod
    def format_report(self, report: TagReport) -> str:
        """Render report to string."""

    def write_report(self, report: TagReport, output_path: Path) -> Path:
        """
        Write report into a directory.

        Returns:
            Path to the written file
        """
        output_path = Path(output_path)
        output_path.mkdir(parents=True, exist_ok=True)
        filepath = output_path / self._build_filename(report)
        filepath.write_text(self.format_report(report), encoding='utf-8')
        return filepath

    def _build_filename(self, report: TagReport) -> str:
        return f"ability_tags_{report.fingerprint[:12]}{self.file_extension}"

    @staticmethod
    def _format_number(value: float) -> str:
        if math.isinf(value):
            return 'max'
        return f"{value:g}"


class FormatterRegistry:
    """Registry of available formatters, keyed by format name."""

    _formatters: dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        cls._formatters[formatter_class().format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str) -> Optional[BaseFormatter]:
        """Get a formatter instance by name."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class()
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        return list(cls._formatters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._formatters.clear()


__all__ = ['BaseFormatter', 'FormatterRegistry']
