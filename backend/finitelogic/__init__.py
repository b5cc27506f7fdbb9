"""
finitelogic: Grounded finitist connexive logic engine.

A finite domain of objects and boolean facts, an expression tree with
relevant implication, a token parser and an evaluator that explains each
result and how it compares with classical logic.
"""

from .engine import Domain, DomainObject, DuplicateObjectError, ForAllResult
from .logic import (
    And,
    EvaluationResult,
    Expression,
    ExpressionEvaluator,
    ExpressionParser,
    Heuristic,
    Not,
    Or,
    ParseError,
    Predicate,
    RelevantImplication,
)

__version__ = "1.0.0"
__all__ = [
    "Domain",
    "DomainObject",
    "DuplicateObjectError",
    "ForAllResult",
    "Expression",
    "Predicate",
    "And",
    "Or",
    "Not",
    "RelevantImplication",
    "EvaluationResult",
    "Heuristic",
    "ExpressionEvaluator",
    "ExpressionParser",
    "ParseError",
]
