# Path: ability_tags/dictionary/__init__.py
"""
Dictionary Module - Rule Definitions

YAML rule files describing how ability text is recognized and what gets
extracted from it. Adding or changing a rule needs no code changes.

Structure:
    dictionary/
    └── rules/
        ├── 01_damage.yaml        # group: Damage Dealers
        ├── 02_survival.yaml      # group: Survival
        ├── 03_orbs.yaml          # group: Orb Manipulation
        ├── 04_debuffs.yaml       # group: Enemy Debuffs
        ├── 05_misc.yaml          # group: Miscellaneous
        └── 06_uncategorized.yaml # group: Uncategorized

Files load in filename order; the order groups first appear in is the
order they are listed in.

Example:
    from process.tagger import RuleLoader
    from dictionary import RULES_DIR

    definitions = RuleLoader(RULES_DIR).load_all()
"""

from pathlib import Path

# Dictionary root path
DICTIONARY_ROOT = Path(__file__).parent

RULES_DIR = DICTIONARY_ROOT / 'rules'

__all__ = [
    'DICTIONARY_ROOT',
    'RULES_DIR',
]
