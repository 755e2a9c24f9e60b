# Path: ability_tags/__init__.py
"""
ability_tags application package.

Modules import each other from the application directory, the way they
do when run as `python main.py`. Importing the installed package puts
that directory on sys.path so the same imports resolve.

Example:
    import ability_tags
    from process.tagger import TaggingCoordinator
"""

import sys
from pathlib import Path

APP_DIR = Path(__file__).parent

if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

__all__ = ['APP_DIR']
