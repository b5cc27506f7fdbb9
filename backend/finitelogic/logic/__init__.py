"""
Logic engine for finitelogic.

Provides the expression tree, token parsing and non-classical evaluation.
"""

from .expressions import (
    And,
    Expression,
    Not,
    Or,
    Predicate,
    RelevantImplication,
    atomic_predicates,
    structurally_equal,
    to_tree_string,
)
from .result import EvaluationResult, Heuristic
from .analyzer import ImplicationAnalysis, ImplicationAnalyzer
from .evaluator import ExpressionEvaluator, evaluate
from .parser import ExpressionParser, ParseError, ParseErrorKind

__all__ = [
    # Expression tree
    "Expression",
    "Predicate",
    "And",
    "Or",
    "Not",
    "RelevantImplication",
    "atomic_predicates",
    "structurally_equal",
    "to_tree_string",
    # Results
    "EvaluationResult",
    "Heuristic",
    # Analysis and evaluation
    "ImplicationAnalysis",
    "ImplicationAnalyzer",
    "ExpressionEvaluator",
    "evaluate",
    # Parsing
    "ExpressionParser",
    "ParseError",
    "ParseErrorKind",
]
