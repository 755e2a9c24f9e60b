# Path: ability_tags/process/tagger/errors.py
"""
Tagger Errors

Exceptions raised while loading and compiling rules.

Registration problems are fatal: a registry is either fully built or not
built at all. Name collisions are not errors; they are recorded as
RuleCollision diagnostics on the registry instead.
"""

from pathlib import Path
from typing import Optional


class TaggerError(Exception):
    """Base class for all tagger errors."""


class RuleCompileError(TaggerError):
    """
    A rule definition cannot be compiled.

    Raised for malformed patterns, submatchers bound to groups the pattern
    does not have, unknown generators, duplicate submatcher descriptions and
    unknown targets.
    """

    def __init__(self, rule_name: str, reason: str):
        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Rule '{rule_name}': {reason}")


class RuleLoadError(TaggerError):
    """A rule file cannot be read or does not follow the rule file schema."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        location = str(path) if path is not None else '<memory>'
        super().__init__(f"{location}: {reason}")


__all__ = ['TaggerError', 'RuleCompileError', 'RuleLoadError']
