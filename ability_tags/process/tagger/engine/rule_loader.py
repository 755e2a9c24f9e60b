# Path: ability_tags/process/tagger/engine/rule_loader.py
"""
Rule Loader

Loads rule definitions from YAML files in the rules directory and
validates them into pydantic models.

Files are read in filename order, so numeric prefixes (01_damage.yaml,
02_survival.yaml) fix the group order. Unlike a missing optional file, a
file that fails to parse or validate is fatal: it raises RuleLoadError.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from core.logger.ipo_logging import get_input_logger

from ..errors import RuleLoadError
from ..models.rule_definition import RuleDefinition, RuleFile


RULE_FILE_SUFFIXES = ('.yaml', '.yml')


class RuleLoader:
    """
    Loads rule files from a directory.

    Example:
        loader = RuleLoader(Path('dictionary/rules'))
        for group, definition in loader.load_all():
            print(group, definition.name)
    """

    def __init__(self, rules_dir: Optional[Path] = None):
        """
        Initialize rule loader.

        Args:
            rules_dir: Directory holding *.yaml rule files.
                       Defaults to the shipped dictionary/rules/
        """
        self.logger = get_input_logger('rule_loader')

        if rules_dir is None:
            from dictionary import RULES_DIR
            self.rules_dir = RULES_DIR
        else:
            self.rules_dir = Path(rules_dir)

    def rule_files(self) -> list[Path]:
        """Rule files in load order."""
        if not self.rules_dir.is_dir():
            raise RuleLoadError(self.rules_dir, "rules directory not found")
        return sorted(
            path for path in self.rules_dir.iterdir()
            if path.is_file() and path.suffix.lower() in RULE_FILE_SUFFIXES
        )

    def load_all(self) -> list[tuple[str, RuleDefinition]]:
        """
        Load every rule file.

        Returns:
            (group, definition) pairs in file order, then rule order

        Raises:
            RuleLoadError: If the directory or any file is unreadable/invalid
        """
        files = self.rule_files()
        self.logger.info(f"Found {len(files)} rule files in {self.rules_dir}")

        definitions: list[tuple[str, RuleDefinition]] = []
        for path in files:
            rule_file = self.load_file(path)
            definitions.extend((rule_file.group, rule) for rule in rule_file.rules)

        self.logger.info(f"Loaded {len(definitions)} rule definitions")
        return definitions

    def load_file(self, path: Path) -> RuleFile:
        """
        Load and validate a single rule file.

        Raises:
            RuleLoadError: On I/O, YAML or schema errors
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise RuleLoadError(path, f"cannot read file: {e}") from e
        except yaml.YAMLError as e:
            raise RuleLoadError(path, f"YAML parse error: {e}") from e

        rule_file = self.parse(data, path)
        self.logger.debug(
            f"{path.name}: group '{rule_file.group}', {len(rule_file.rules)} rules"
        )
        return rule_file

    def parse(self, data: Any, path: Optional[Path] = None) -> RuleFile:
        """
        Validate already-parsed YAML data.

        Raises:
            RuleLoadError: If data does not follow the rule file schema
        """
        if data is None:
            raise RuleLoadError(path, "empty rule file")
        if not isinstance(data, dict):
            raise RuleLoadError(path, "rule file must be a mapping with 'group' and 'rules'")
        try:
            return RuleFile.model_validate(data)
        except ValidationError as e:
            raise RuleLoadError(path, f"invalid rule file: {e}") from e


__all__ = ['RuleLoader']
