"""
Expression tree.

The tree is a closed union of five immutable node types. Operations over
the tree are plain functions that dispatch with exhaustive `match`
statements; the node classes expose them as methods for convenience.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Set, Union

if TYPE_CHECKING:
    from ..engine.domain import DomainObject
    from .result import EvaluationResult


class _ExpressionOps:
    """Method-style access to the module-level tree operations."""

    __slots__ = ()

    def evaluate(self, obj: "DomainObject") -> "EvaluationResult":
        from .evaluator import evaluate
        return evaluate(self, obj)

    def get_atomic_predicates(self) -> Set[str]:
        return atomic_predicates(self)

    def to_tree_string(self) -> str:
        return to_tree_string(self)

    def equals(self, other: object) -> bool:
        return structurally_equal(self, other)

    def __str__(self) -> str:
        return to_tree_string(self)


@dataclass(frozen=True)
class Predicate(_ExpressionOps):
    """An atomic, named fact about an object."""
    name: str


@dataclass(frozen=True)
class And(_ExpressionOps):
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or(_ExpressionOps):
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Not(_ExpressionOps):
    inner: "Expression"


@dataclass(frozen=True)
class RelevantImplication(_ExpressionOps):
    """Implication that must be classically true, relevant and connexive."""
    antecedent: "Expression"
    consequent: "Expression"


Expression = Union[Predicate, And, Or, Not, RelevantImplication]


def _unknown(expression: object) -> TypeError:
    return TypeError(f"Not an expression node: {type(expression).__name__}")


def atomic_predicates(expression: Expression) -> Set[str]:
    """
    Collect the atomic predicate names used in an expression.

    Names are lowercased, since facts are looked up case-insensitively.
    """
    match expression:
        case Predicate(name=name):
            return {name.lower()}
        case Not(inner=inner):
            return atomic_predicates(inner)
        case And(left=left, right=right) | Or(left=left, right=right):
            return atomic_predicates(left) | atomic_predicates(right)
        case RelevantImplication(antecedent=antecedent, consequent=consequent):
            return atomic_predicates(antecedent) | atomic_predicates(consequent)
    raise _unknown(expression)


def to_tree_string(expression: Expression) -> str:
    """Canonical, fully parenthesized rendering of an expression."""
    match expression:
        case Predicate(name=name):
            return f'"{name}"'
        case Not(inner=inner):
            return f"(NOT {to_tree_string(inner)})"
        case And(left=left, right=right):
            return f"({to_tree_string(left)} AND {to_tree_string(right)})"
        case Or(left=left, right=right):
            return f"({to_tree_string(left)} OR {to_tree_string(right)})"
        case RelevantImplication(antecedent=antecedent, consequent=consequent):
            return (
                f"({to_tree_string(antecedent)} RELEVANTLY_IMPLIES "
                f"{to_tree_string(consequent)})"
            )
    raise _unknown(expression)


def structurally_equal(first: object, second: object) -> bool:
    """
    Compare two trees by shape, ignoring predicate-name case.

    Anything that is not an expression node compares unequal.
    """
    match first, second:
        case Predicate(name=a), Predicate(name=b):
            return a.lower() == b.lower()
        case Not(inner=a), Not(inner=b):
            return structurally_equal(a, b)
        case ((And(left=al, right=ar), And(left=bl, right=br))
              | (Or(left=al, right=ar), Or(left=bl, right=br))):
            return structurally_equal(al, bl) and structurally_equal(ar, br)
        case (RelevantImplication(antecedent=al, consequent=ar),
              RelevantImplication(antecedent=bl, consequent=br)):
            return structurally_equal(al, bl) and structurally_equal(ar, br)
    return False
