# Path: ability_tags/process/tagger/generators.py
"""
Submatcher Generators

Expand taxonomy tables into option submatchers bound to the same capture
groups. Rules use them for the recurring "which types / classes / orbs /
positions does this affect" filters instead of spelling out each option.

Every generator is a pure function: the same arguments always produce
equal SubmatcherSpec tuples.

Example:
    types_submatchers([1])
    # -> (STR, DEX, QCK, PSY, INT) options, each also accepting "all|type"
"""

import re
from typing import Callable, Iterable, Optional, Sequence

from constants import SubmatcherKind
from .models.rule import SubmatcherSpec
from .taxonomy import (
    TaxonomyEntry,
    TYPES,
    CLASSES,
    ORBS,
    ROWS,
    COLUMNS,
    REGIONS,
    EXTRA_POSITIONS,
)


TYPES_UNIVERSAL = 'all|type'
DEFAULT_UNIVERSAL = 'all'


def _select(
    table: Sequence[TaxonomyEntry],
    entries: Optional[Iterable[str]]
) -> list[TaxonomyEntry]:
    if entries is None:
        return list(table)
    by_id = {entry.id.upper(): entry for entry in table}
    selected = []
    for entry_id in entries:
        entry = by_id.get(str(entry_id).upper())
        if entry is None:
            known = ', '.join(e.id for e in table)
            raise ValueError(f"Unknown entry '{entry_id}' (expected one of: {known})")
        selected.append(entry)
    return selected


def build_option_set(
    table: Sequence[TaxonomyEntry],
    groups: Sequence[int],
    include_universal: bool = True,
    universal_pattern: str = DEFAULT_UNIVERSAL,
    entries: Optional[Iterable[str]] = None,
) -> tuple[SubmatcherSpec, ...]:
    """
    One option submatcher per table entry.

    Args:
        table: Taxonomy table to expand
        groups: Capture groups every option is tested against
        include_universal: Also accept universal_pattern ("all characters")
        universal_pattern: Alternative accepted by every option
        entries: Restrict to these entry ids, in this order

    Raises:
        ValueError: If entries names an id the table does not have
    """
    groups = tuple(groups)
    options = []
    for entry in _select(table, entries):
        source = entry.match_fragment
        if include_universal and universal_pattern:
            source = f"{source}|{universal_pattern}"
        options.append(SubmatcherSpec(
            kind=SubmatcherKind.OPTION,
            description=entry.label,
            groups=groups,
            pattern=re.compile(source, re.IGNORECASE),
            style_hints=(entry.width_hint,),
        ))
    return tuple(options)


def types_submatchers(
    groups: Sequence[int],
    include_universal: bool = True,
    universal_pattern: str = TYPES_UNIVERSAL,
) -> tuple[SubmatcherSpec, ...]:
    # "Captain's Type", "each Type" count as universal for types
    return build_option_set(TYPES, groups, include_universal, universal_pattern)


def classes_submatchers(
    groups: Sequence[int],
    include_universal: bool = True,
    universal_pattern: str = DEFAULT_UNIVERSAL,
) -> tuple[SubmatcherSpec, ...]:
    return build_option_set(CLASSES, groups, include_universal, universal_pattern)


def orbs_submatchers(
    orbs: Sequence[str],
    groups: Sequence[int],
    include_universal: bool = True,
    universal_pattern: str = DEFAULT_UNIVERSAL,
) -> tuple[SubmatcherSpec, ...]:
    """
    Options for the given orb ids, in the order given.

    Raises:
        ValueError: If orbs is empty or names an unknown orb
    """
    if not orbs:
        raise ValueError("orbs_submatchers needs at least one orb id")
    return build_option_set(ORBS, groups, include_universal, universal_pattern, entries=orbs)


def positions_submatchers(
    groups: Sequence[int],
    include_universal: bool = True,
    universal_pattern: str = DEFAULT_UNIVERSAL,
    exclude: Iterable[str] = (),
    use_rows_and_columns: bool = True,
) -> tuple[SubmatcherSpec, ...]:
    """
    Board position options.

    Simple mode lists rows then columns. Dense mode (use_rows_and_columns
    False) lists the six board cells instead, for texts such as "left
    column" or "top and bottom rows". Adjacent, Selected and Self follow in
    both modes. Any label in exclude is left out.
    """
    excluded = {label.lower() for label in exclude}
    if use_rows_and_columns:
        table = ROWS + COLUMNS + EXTRA_POSITIONS
    else:
        table = REGIONS + EXTRA_POSITIONS
    kept = [entry for entry in table if entry.label.lower() not in excluded]
    return build_option_set(kept, groups, include_universal, universal_pattern)


def universal_submatcher(
    groups: Sequence[int],
    universal_pattern: str = TYPES_UNIVERSAL,
    description: str = 'All',
) -> tuple[SubmatcherSpec, ...]:
    """Single option accepting only the universal pattern."""
    return (
        SubmatcherSpec(
            kind=SubmatcherKind.OPTION,
            description=description,
            groups=tuple(groups),
            pattern=re.compile(universal_pattern or TYPES_UNIVERSAL, re.IGNORECASE),
        ),
    )


GENERATORS: dict[str, Callable[..., tuple[SubmatcherSpec, ...]]] = {
    'types': types_submatchers,
    'classes': classes_submatchers,
    'orbs': orbs_submatchers,
    'positions': positions_submatchers,
    'universal': universal_submatcher,
}


__all__ = [
    'build_option_set',
    'types_submatchers',
    'classes_submatchers',
    'orbs_submatchers',
    'positions_submatchers',
    'universal_submatcher',
    'GENERATORS',
]
