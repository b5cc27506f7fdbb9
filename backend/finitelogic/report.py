"""
Plain-text reports for query results, universal checks and help.
"""

from __future__ import annotations

from typing import List

from .engine.domain import DomainObject, ForAllResult
from .logic.expressions import Expression
from .logic.result import EvaluationResult

WIDTH = 52


def _banner(title: str, fill: str) -> str:
    if not title:
        return fill * WIDTH
    side = (WIDTH - len(title) - 2) // 2
    return f"{fill * side} {title} {fill * (WIDTH - side - len(title) - 2)}"


def _verdict(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def render_query(
    expression: Expression,
    obj: DomainObject,
    result: EvaluationResult
) -> List[str]:
    """Render the result of evaluating an expression for one object."""
    lines = [
        "",
        _banner("QUERY RESULT", "="),
        f"Expression: {expression.to_tree_string()}",
        f"For Object: {obj.name}",
        f"Final Result: {_verdict(result.value)}",
    ]
    if result.classical_value is not None:
        note = " (non-classical result)" if result.is_non_classical else ""
        lines.append(f"Classical Result: {_verdict(result.classical_value)}{note}")
    lines.append(_banner("Derivation", "-"))
    lines.extend(result.derivation)
    lines.append(_banner("", "="))
    return lines


def render_for_all(expression: Expression, result: ForAllResult) -> List[str]:
    """Render the result of a bounded universal check."""
    lines = [
        f"Expression: {expression.to_tree_string()}",
        f"Result for ALL objects: {_verdict(result.value)}",
    ]
    if result.failing_objects:
        lines.append(f"Fails for: {', '.join(result.failing_objects)}")
    if result.reason:
        lines.extend(result.reason.splitlines())
    return lines


def render_help() -> List[str]:
    return [
        "",
        "--- Core Principles ---",
        "1. FINITE DOMAIN: The 'forall' quantifier is ALWAYS restricted to a known set.",
        "2. RELEVANT IMPLICATION: The system exclusively uses a stricter, multi-layered implication.",
        "",
        "--- Available Commands ---",
        "domain add <ObjectName>                  - Adds an object to the finite universe.",
        "fact <ObjectName> \"<predicate>\" [false]  - Defines an atomic predicate for an object (true by default).",
        "query <ObjectName> <Expression>?         - Evaluates an expression for a specific object.",
        "check forall <Expression>?               - Evaluates an expression for all objects in the domain.",
        "state                                    - Shows all objects and their facts.",
        "help                                     - Shows this help message.",
        "clear                                    - Clears the screen.",
        "exit                                     - Exits the program.",
        "",
        "--- Expression Syntax ---",
        "Use parentheses () for grouping.",
        "Predicates: \"is mortal\", etc. (use quotes for multi-word predicates).",
        "Operators (by precedence): NOT > AND > OR > RELEVANTLY_IMPLIES.",
        "  RELEVANTLY_IMPLIES is true if and only if:",
        "    a) the classical condition (NOT P OR Q) is true, AND",
        "    b) Q introduces no predicates absent from P (relevance), AND",
        "    c) the structure is coherent (Aristotle's and Boethius's Theses).",
        "",
        "Example: query socrates ( \"is human\" AND \"is greek\" ) RELEVANTLY_IMPLIES \"is human\" ?",
        _banner("", "-"),
    ]
