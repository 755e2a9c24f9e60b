# Path: ability_tags/process/tagger/taxonomy.py
"""
Taxonomy Tables

Static vocabularies the submatcher generators expand into option
submatchers: character types, classes, orb kinds and board positions.

Each entry carries the regex fragment that recognizes it in ability text.
Labels are stable English identifiers; translating them is a data concern
of the presentation layer.
"""

import re
from dataclasses import dataclass

from constants import WidthHint


@dataclass(frozen=True)
class TaxonomyEntry:
    """One vocabulary item."""
    id: str
    match_fragment: str
    label: str
    width_hint: str = WidthHint.FULL.value


def _bracketed(entry_id: str) -> str:
    return r'\[' + re.escape(entry_id) + r'\]'


# ==============================================================================
# TYPES
# ==============================================================================

TYPES: tuple[TaxonomyEntry, ...] = tuple(
    TaxonomyEntry(
        id=type_id,
        match_fragment=_bracketed(type_id),
        label=type_id,
        width_hint=(WidthHint.MEDIUM if i < 3 else WidthHint.WIDE).value,
    )
    for i, type_id in enumerate(('STR', 'DEX', 'QCK', 'PSY', 'INT'))
)


# ==============================================================================
# CLASSES
# ==============================================================================

CLASSES: tuple[TaxonomyEntry, ...] = tuple(
    TaxonomyEntry(
        id=class_name,
        match_fragment=re.escape(class_name),
        label=class_name,
        width_hint=WidthHint.WIDE.value,
    )
    for class_name in (
        'Fighter',
        'Shooter',
        'Slasher',
        'Striker',
        'Free Spirit',
        'Cerebral',
        'Powerhouse',
        'Driven',
    )
)


# ==============================================================================
# ORBS
# ==============================================================================

# Orb labels end in "orb" so they never clash with type labels in a rule
# that binds both generators.
_ORB_LABELS: dict[str, str] = {
    'STR': 'STR orb',
    'DEX': 'DEX orb',
    'QCK': 'QCK orb',
    'PSY': 'PSY orb',
    'INT': 'INT orb',
    'G': 'G orb',
    'RCV': 'Meat orb',
    'TND': 'TND orb',
    'BOMB': 'Bomb orb',
    'EMPTY': 'Empty orb',
    'SUPERBOMB': 'Super bomb orb',
    'RAINBOW': 'Rainbow orb',
    'SEMLA': 'Semla orb',
    'WANO': 'Wano orb',
}


def _orb_width(orb_id: str) -> str:
    if len(orb_id) <= 3:
        return WidthHint.XS.value
    if len(orb_id) <= 5:
        return WidthHint.SMALL.value
    return WidthHint.WIDE.value


ORBS: tuple[TaxonomyEntry, ...] = tuple(
    TaxonomyEntry(
        id=orb_id,
        match_fragment=_bracketed(orb_id),
        label=label,
        width_hint=_orb_width(orb_id),
    )
    for orb_id, label in _ORB_LABELS.items()
)


# ==============================================================================
# POSITIONS
# ==============================================================================

ROWS: tuple[TaxonomyEntry, ...] = tuple(
    TaxonomyEntry(row, row, row, WidthHint.MEDIUM.value)
    for row in ('Top', 'Middle', 'Bottom')
)

COLUMNS: tuple[TaxonomyEntry, ...] = tuple(
    TaxonomyEntry(column, column, column, WidthHint.WIDE.value)
    for column in ('Left', 'Right')
)

# Board cells for texts that name rows and columns together ("top and
# bottom rows", "left column"). "top" must not be followed by the opposite
# side, and "Captain" must not be the tail of "Friend Captain".
REGIONS: tuple[TaxonomyEntry, ...] = (
    TaxonomyEntry(
        'Friend Captain',
        r'left column|top(?! right)|Friend Captain',
        'Friend Captain',
        WidthHint.WIDE.value,
    ),
    TaxonomyEntry(
        'Captain',
        r'right column|top(?! left)|(?:^|(?!end ).{4})Captain',
        'Captain',
        WidthHint.WIDE.value,
    ),
    TaxonomyEntry(
        'Middle Left',
        r'left column|middle(?! right)',
        'Middle Left',
        WidthHint.WIDE.value,
    ),
    TaxonomyEntry(
        'Middle Right',
        r'right column|middle(?! left)',
        'Middle Right',
        WidthHint.WIDE.value,
    ),
    TaxonomyEntry(
        'Bottom Left',
        r'left column|bottom(?! right)',
        'Bottom Left',
        WidthHint.WIDE.value,
    ),
    TaxonomyEntry(
        'Bottom Right',
        r'right column|bottom(?! left)',
        'Bottom Right',
        WidthHint.WIDE.value,
    ),
)

EXTRA_POSITIONS: tuple[TaxonomyEntry, ...] = (
    TaxonomyEntry('Adjacent', 'adjacent', 'Adjacent', WidthHint.MEDIUM.value),
    TaxonomyEntry('Selected', 'selected', 'Selected', WidthHint.MEDIUM.value),
    TaxonomyEntry('Self', 'this|own|supported', 'Self', WidthHint.MEDIUM.value),
)


_TABLES: dict[str, tuple[TaxonomyEntry, ...]] = {
    'types': TYPES,
    'classes': CLASSES,
    'orbs': ORBS,
    'rows': ROWS,
    'columns': COLUMNS,
    'regions': REGIONS,
    'extra_positions': EXTRA_POSITIONS,
}


def get_table(name: str) -> tuple[TaxonomyEntry, ...]:
    """
    Get a taxonomy table by name.

    Raises:
        KeyError: If no table has that name
    """
    return _TABLES[name.lower()]


def entry_ids(table: tuple[TaxonomyEntry, ...]) -> tuple[str, ...]:
    return tuple(entry.id for entry in table)


__all__ = [
    'TaxonomyEntry',
    'TYPES',
    'CLASSES',
    'ORBS',
    'ROWS',
    'COLUMNS',
    'REGIONS',
    'EXTRA_POSITIONS',
    'get_table',
    'entry_ids',
]
