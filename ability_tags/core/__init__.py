# Path: ability_tags/core/__init__.py
"""
ability_tags Core Package

Core utilities shared by every layer of the tagger.

Submodules:
    - logger: IPO-aware logging system
"""
