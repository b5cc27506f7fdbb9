"""
Evaluation results and heuristic annotations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class Heuristic(str, Enum):
    """Annotations marking where the logic departs from classical rules."""
    CLOSED_WORLD_ASSUMPTION = "Closed-World Assumption"
    VACUOUS_TRUTH_REJECTION = "Rejection of Vacuous Truth"
    RELEVANCE = "Relevance Logic"
    ARISTOTLE_THESIS = "Connexive Logic (Aristotle's Thesis)"
    BOETHIUS_THESIS = "Connexive Logic (Boethius's Thesis)"

    @property
    def tag(self) -> str:
        """The line that introduces this heuristic in a derivation."""
        return f"[Heuristic: {self.value}]"


@dataclass
class EvaluationResult:
    """
    Result of evaluating an expression against one object.

    `classical_value` and `is_non_classical` are only filled in by
    relevant implication; other expressions leave the defaults.
    """
    value: bool
    derivation: List[str] = field(default_factory=list)
    is_non_classical: bool = False
    classical_value: Optional[bool] = None
    heuristics: List[Heuristic] = field(default_factory=list)

    @property
    def explanation(self) -> str:
        """The derivation as a single newline-joined block."""
        return "\n".join(self.derivation)

    def has_heuristic(self, heuristic: Heuristic) -> bool:
        return heuristic in self.heuristics

    def add_heuristic(self, heuristic: Heuristic, rationale: str) -> None:
        """Append a tagged explanation block to the derivation."""
        self.derivation.append(heuristic.tag)
        self.derivation.append(rationale)
        self.merge_heuristics([heuristic])

    def merge_heuristics(self, heuristics: Iterable[Heuristic]) -> None:
        for heuristic in heuristics:
            if heuristic not in self.heuristics:
                self.heuristics.append(heuristic)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "value": self.value,
            "derivation": list(self.derivation),
            "is_non_classical": self.is_non_classical,
            "classical_value": self.classical_value,
            "heuristics": [h.name for h in self.heuristics],
        }
