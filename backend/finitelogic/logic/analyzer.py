"""
Implication Analyzer.

Structural checks for relevant implication: topic relevance and
Aristotle's Thesis. Both depend only on the shape of the expression,
never on the facts of an object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from .expressions import Expression, Not, atomic_predicates, structurally_equal


@dataclass
class ImplicationAnalysis:
    """Structural verdicts for one antecedent/consequent pair."""
    antecedent_predicates: Set[str] = field(default_factory=set)
    consequent_predicates: Set[str] = field(default_factory=set)
    is_relevant: bool = True
    is_aristotle_coherent: bool = True

    @property
    def new_topics(self) -> List[str]:
        """Consequent predicates that the antecedent never mentions."""
        return sorted(self.consequent_predicates - self.antecedent_predicates)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "antecedent_predicates": sorted(self.antecedent_predicates),
            "consequent_predicates": sorted(self.consequent_predicates),
            "is_relevant": self.is_relevant,
            "is_aristotle_coherent": self.is_aristotle_coherent,
            "new_topics": self.new_topics,
        }


class ImplicationAnalyzer:
    """
    Analyzes the structure of an implication.

    Provides:
    - Relevance: the consequent may not introduce new atomic predicates
    - Aristotle's Thesis: NOT P -> P is incoherent
    """

    def analyze(self, antecedent: Expression, consequent: Expression) -> ImplicationAnalysis:
        """
        Analyze an implication.

        Args:
            antecedent: Left-hand side of the implication.
            consequent: Right-hand side of the implication.

        Returns:
            ImplicationAnalysis with both structural verdicts.
        """
        antecedent_predicates = atomic_predicates(antecedent)
        consequent_predicates = atomic_predicates(consequent)

        return ImplicationAnalysis(
            antecedent_predicates=antecedent_predicates,
            consequent_predicates=consequent_predicates,
            is_relevant=consequent_predicates <= antecedent_predicates,
            is_aristotle_coherent=self.is_aristotle_coherent(antecedent, consequent),
        )

    def is_aristotle_coherent(self, antecedent: Expression, consequent: Expression) -> bool:
        """False exactly when the antecedent is the negation of the consequent."""
        if isinstance(antecedent, Not):
            return not structurally_equal(antecedent.inner, consequent)
        return True
