# Path: ability_tags/constants.py
"""
System-Wide Constants for ability_tags

Central repository for constant values used across the tagger.

Constants are organized by category:
- Targets (ability slots a rule can apply to)
- Submatcher kinds and comparators
- Numeric sentinels
- Style hints
- CLI status markers
"""

from enum import Enum
from typing import Final


# ==============================================================================
# TARGETS
# ==============================================================================

class Target(str, Enum):
    """
    Ability slots a rule can be applied to.

    Declaration order is the canonical order of targets: tags for a
    character are listed in this order.
    """
    CAPTAIN = 'captain'
    SPECIAL = 'special'
    SUPER_SPECIAL_CRITERIA = 'superSpecialCriteria'
    SUPER_SPECIAL = 'superSpecial'
    SWAP = 'swap'
    SAILOR = 'sailor'
    LIMIT = 'limit'
    POTENTIAL = 'potential'
    SUPPORT = 'support'


TARGET_ORDER: Final[tuple[Target, ...]] = tuple(Target)

# Plural labels substituted for TARGET_PLACEHOLDER in rule names.
# Most targets pluralize with a trailing "s"; superSpecial is the exception.
TARGET_PLURAL_LABELS: Final[dict[Target, str]] = {
    Target.CAPTAIN: 'captains',
    Target.SPECIAL: 'specials',
    Target.SUPER_SPECIAL_CRITERIA: 'super special criteria',
    Target.SUPER_SPECIAL: 'super specials',
    Target.SWAP: 'swaps',
    Target.SAILOR: 'sailors',
    Target.LIMIT: 'limits',
    Target.POTENTIAL: 'potentials',
    Target.SUPPORT: 'supports',
}

TARGET_PLACEHOLDER: Final[str] = '%target%'


def parse_target(value) -> Target:
    """
    Convert a string (or Target) to a Target.

    Raises:
        ValueError: If value is not a known target
    """
    if isinstance(value, Target):
        return value
    return Target(value)


# ==============================================================================
# SUBMATCHERS
# ==============================================================================

class SubmatcherKind(str, Enum):
    """Kinds of submatchers bound to a rule's capture groups."""
    NUMBER = 'number'
    TEXT = 'text'
    OPTION = 'option'
    SEPARATOR = 'separator'


class Comparator(str, Enum):
    """Numeric comparison operators for number constraints."""
    LT = '<'
    LE = '<='
    EQ = '='
    GE = '>='
    GT = '>'


# ==============================================================================
# NUMERIC SENTINELS
# ==============================================================================

# Placeholder for an unknown/variable digit in ability text ("?x", "2.?x")
UNKNOWN_TOKEN: Final[str] = '?'
UNKNOWN_VALUE: Final[float] = 0.0

# Tokens that mean "maximal" ("completely", "99+ turns")
COMPLETE_TOKENS: Final[tuple[str, ...]] = ('completely',)
OPEN_ENDED_SUFFIX: Final[str] = '+'
COMPLETE_VALUE: Final[float] = float('inf')

THOUSANDS_SEPARATOR: Final[str] = ','


# ==============================================================================
# PATTERN FLAGS
# ==============================================================================

DEFAULT_PATTERN_FLAGS: Final[tuple[str, ...]] = ('IGNORECASE',)
LEGACY_NAME_PREFIX: Final[str] = 'old'


# ==============================================================================
# STYLE HINTS
# ==============================================================================

class WidthHint(str, Enum):
    """Presentation width classes for option chips."""
    XS = 'min-width-2'
    SMALL = 'min-width-3'
    MEDIUM = 'min-width-4'
    WIDE = 'min-width-6'
    FULL = 'min-width-12'


DEFAULT_STYLE_HINTS: Final[tuple[str, ...]] = (WidthHint.FULL.value,)


# ==============================================================================
# CLI STATUS MARKERS
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'

MENU_HEADER: Final[str] = '=' * 60
MENU_SEPARATOR: Final[str] = '-' * 56


__all__ = [
    'Target',
    'TARGET_ORDER',
    'TARGET_PLURAL_LABELS',
    'TARGET_PLACEHOLDER',
    'parse_target',
    'SubmatcherKind',
    'Comparator',
    'UNKNOWN_TOKEN',
    'UNKNOWN_VALUE',
    'COMPLETE_TOKENS',
    'OPEN_ENDED_SUFFIX',
    'COMPLETE_VALUE',
    'THOUSANDS_SEPARATOR',
    'DEFAULT_PATTERN_FLAGS',
    'LEGACY_NAME_PREFIX',
    'WidthHint',
    'DEFAULT_STYLE_HINTS',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
    'MENU_HEADER',
    'MENU_SEPARATOR',
]
