# Path: ability_tags/process/tagger/evaluators/__init__.py
"""
Submatcher Evaluators

One evaluator per submatcher kind, plus the filter evaluator that
combines them to answer user queries.
"""

from .base_evaluator import BaseEvaluator
from .number_evaluator import NumberEvaluator, parse_number
from .text_evaluator import TextEvaluator
from .option_evaluator import OptionEvaluator
from .filter_evaluator import FilterEvaluator

__all__ = [
    'BaseEvaluator',
    'NumberEvaluator',
    'parse_number',
    'TextEvaluator',
    'OptionEvaluator',
    'FilterEvaluator',
]
