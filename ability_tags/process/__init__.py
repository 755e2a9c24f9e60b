# Path: ability_tags/process/__init__.py
"""
ability_tags Process Layer

Everything between reading rule/ability text and writing reports:
rule compilation, the registry, matching and filter evaluation.
"""
