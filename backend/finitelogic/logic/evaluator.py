"""
Expression Evaluator.

Evaluates expression trees against a single domain object and records a
human-readable derivation for every step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .analyzer import ImplicationAnalyzer
from .expressions import And, Expression, Not, Or, Predicate, RelevantImplication
from .result import EvaluationResult, Heuristic

if TYPE_CHECKING:
    from ..engine.domain import DomainObject


CWA_RATIONALE = (
    "The fact was not explicitly set to TRUE, so it is assumed to be FALSE. "
    "Classical logic might consider its truth value 'unknown'."
)
RELEVANCE_RATIONALE = (
    "Implication failed. The consequent cannot introduce new topics "
    "(predicates) that were not present in the antecedent."
)
ARISTOTLE_RATIONALE = (
    "Implication failed. A proposition cannot be implied by its own "
    "negation (form: NOT P -> P)."
)
BOETHIUS_RATIONALE = (
    "Implication failed. An antecedent cannot imply both a proposition and "
    "its negation (form: (A -> C) and (A -> NOT C))."
)

INDENT = "    "


def _fmt(value: bool) -> str:
    return "true" if value else "false"


def _nested(label: str, result: EvaluationResult) -> List[str]:
    lines = [f"  - {label}..."]
    lines.extend(f"{INDENT}{line}" for line in result.derivation)
    return lines


class ExpressionEvaluator:
    """
    Evaluator for expression trees.

    Evaluation is pure: it reads facts from the object and never changes
    them, so one tree can be evaluated against many objects.
    """

    def __init__(self, analyzer: Optional[ImplicationAnalyzer] = None):
        self.analyzer = analyzer or ImplicationAnalyzer()

    def evaluate(self, expression: Expression, obj: "DomainObject") -> EvaluationResult:
        """
        Evaluate an expression for one object.

        Args:
            expression: The expression tree.
            obj: The object whose facts are consulted.

        Returns:
            The evaluation result with its derivation.
        """
        match expression:
            case Predicate():
                return self._eval_predicate(expression, obj)
            case And():
                return self._eval_and(expression, obj)
            case Or():
                return self._eval_or(expression, obj)
            case Not():
                return self._eval_not(expression, obj)
            case RelevantImplication():
                return self._eval_relevant_implication(expression, obj)
        raise TypeError(f"Not an expression node: {type(expression).__name__}")

    def _eval_predicate(self, expression: Predicate, obj: "DomainObject") -> EvaluationResult:
        """Look up a fact, applying the closed-world assumption."""
        value = obj.check_predicate(expression.name)
        result = EvaluationResult(
            value=value,
            derivation=[
                f"Fact '{expression.name}' is {'TRUE' if value else 'FALSE'} "
                f"for object '{obj.name}'"
            ],
        )
        if obj.get_raw_predicate_state(expression.name) is None:
            result.add_heuristic(Heuristic.CLOSED_WORLD_ASSUMPTION, CWA_RATIONALE)
        return result

    def _eval_binary(self, expression, obj, operator: str, value_of) -> EvaluationResult:
        # Both sides are always evaluated so both derivations are recorded.
        left = self.evaluate(expression.left, obj)
        right = self.evaluate(expression.right, obj)
        value = value_of(left.value, right.value)

        result = EvaluationResult(
            value=value,
            derivation=[f"({_fmt(left.value)} {operator} {_fmt(right.value)}) -> {_fmt(value)}"],
        )
        result.derivation.extend(_nested("Left Derivation", left))
        result.derivation.extend(_nested("Right Derivation", right))
        result.merge_heuristics(left.heuristics)
        result.merge_heuristics(right.heuristics)
        return result

    def _eval_and(self, expression: And, obj: "DomainObject") -> EvaluationResult:
        return self._eval_binary(expression, obj, "AND", lambda a, b: a and b)

    def _eval_or(self, expression: Or, obj: "DomainObject") -> EvaluationResult:
        return self._eval_binary(expression, obj, "OR", lambda a, b: a or b)

    def _eval_not(self, expression: Not, obj: "DomainObject") -> EvaluationResult:
        inner = self.evaluate(expression.inner, obj)
        value = not inner.value
        result = EvaluationResult(
            value=value,
            derivation=[
                f"NOT evaluates to {_fmt(value)} because its inner "
                f"expression is {_fmt(inner.value)}."
            ],
        )
        result.derivation.extend(_nested("Inner Derivation", inner))
        result.merge_heuristics(inner.heuristics)
        return result

    def _eval_relevant_implication(
        self,
        expression: RelevantImplication,
        obj: "DomainObject"
    ) -> EvaluationResult:
        """
        Evaluate a relevant, connexive implication.

        The implication holds only if all four conditions hold:
        1. Classical truth: material implication (NOT A OR C).
        2. Relevance: the consequent introduces no new predicates.
        3. Aristotle's Thesis: the form NOT P -> P is incoherent.
        4. Boethius's Thesis: an antecedent may not imply both a
           proposition and its negation.
        """
        antecedent = self.evaluate(expression.antecedent, obj)
        consequent = self.evaluate(expression.consequent, obj)

        classical_truth = not antecedent.value or consequent.value

        analysis = self.analyzer.analyze(expression.antecedent, expression.consequent)

        # NOT consequent is just the negated value; evaluate is pure.
        opposite_classical_truth = not antecedent.value or not consequent.value
        is_boethius_violation = classical_truth and opposite_classical_truth

        final_value = (
            classical_truth
            and analysis.is_relevant
            and analysis.is_aristotle_coherent
            and not is_boethius_violation
        )
        is_non_classical = final_value != classical_truth

        result = EvaluationResult(
            value=final_value,
            is_non_classical=is_non_classical,
            classical_value=classical_truth,
        )
        result.derivation.append(
            f"Classical: {_fmt(classical_truth)}, "
            f"Relevant: {_fmt(analysis.is_relevant)}, "
            f"Aristotle Coherent: {_fmt(analysis.is_aristotle_coherent)}, "
            f"Boethius Coherent: {_fmt(not is_boethius_violation)} "
            f"-> Final: {_fmt(final_value)}"
        )
        divergence = " (diverges from classical logic)" if is_non_classical else ""
        result.derivation.append(
            f"Classical material implication gives: {_fmt(classical_truth)}{divergence}"
        )
        result.derivation.extend(_nested("Antecedent Derivation", antecedent))
        result.derivation.extend(_nested("Consequent Derivation", consequent))
        result.merge_heuristics(antecedent.heuristics)
        result.merge_heuristics(consequent.heuristics)

        if not analysis.is_relevant:
            result.add_heuristic(Heuristic.RELEVANCE, RELEVANCE_RATIONALE)
        if not analysis.is_aristotle_coherent:
            result.add_heuristic(Heuristic.ARISTOTLE_THESIS, ARISTOTLE_RATIONALE)
        if is_boethius_violation:
            result.add_heuristic(Heuristic.BOETHIUS_THESIS, BOETHIUS_RATIONALE)

        return result


_default_evaluator = ExpressionEvaluator()


def evaluate(expression: Expression, obj: "DomainObject") -> EvaluationResult:
    """Evaluate with the module's shared, stateless evaluator."""
    return _default_evaluator.evaluate(expression, obj)
