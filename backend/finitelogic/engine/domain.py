"""
Finite domain of discourse.

A Domain holds an explicitly enumerated set of objects, and each
DomainObject stores the boolean facts known about it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from ..logic.result import Heuristic

if TYPE_CHECKING:
    from ..logic.expressions import Expression


VACUOUS_TRUTH_REASON = (
    "The result is FALSE because the domain of objects is empty. "
    "Universal claims about nothing are not considered true in this logic."
)


class DuplicateObjectError(ValueError):
    """Raised when an object name is already present in the domain."""

    def __init__(self, name: str):
        super().__init__(f"Object '{name}' already exists in the domain.")
        self.name = name


class DomainObject:
    """
    A single object within the logical universe.

    Facts are stored under lowercased predicate names. A predicate that
    was never set is absent from the store, which is distinct from being
    stored as False.
    """

    def __init__(self, name: str):
        self._name = name
        self._predicate_states: Dict[str, bool] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def predicate_states(self) -> Dict[str, bool]:
        """Copy of the explicitly set facts."""
        return dict(self._predicate_states)

    def set_predicate_state(self, predicate_name: str, value: bool) -> None:
        """Define the truth value of a predicate for this object."""
        self._predicate_states[predicate_name.lower()] = bool(value)

    def check_predicate(self, predicate_name: str) -> bool:
        """
        Check a predicate under the closed-world assumption.

        A predicate that was never set is FALSE rather than unknown.
        """
        return self._predicate_states.get(predicate_name.lower(), False)

    def get_raw_predicate_state(self, predicate_name: str) -> Optional[bool]:
        """Return the stored value, or None if the predicate was never set."""
        return self._predicate_states.get(predicate_name.lower())

    def __str__(self) -> str:
        if not self._predicate_states:
            return f"DomainObject{{name='{self._name}', states={{EMPTY}}}}"
        states = ", ".join(
            f"{key}={str(value).lower()}"
            for key, value in self._predicate_states.items()
        )
        return f"DomainObject{{name='{self._name}', states={{{states}}}}}"

    def __repr__(self) -> str:
        return f"DomainObject({self._name!r})"


@dataclass
class ForAllResult:
    """Outcome of a bounded universal check over the domain."""
    value: bool
    reason: Optional[str] = None
    failing_objects: List[str] = field(default_factory=list)

    @property
    def heuristics(self) -> List[Heuristic]:
        if self.reason is not None:
            return [Heuristic.VACUOUS_TRUTH_REJECTION]
        return []

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary."""
        return {
            "value": self.value,
            "reason": self.reason,
            "failing_objects": self.failing_objects,
        }


class Domain:
    """
    The universe of discourse: a finite, insertion-ordered set of objects.

    Names are unique under case-insensitive comparison.
    """

    def __init__(self):
        self._objects: Dict[str, DomainObject] = {}

    @property
    def objects(self) -> Tuple[DomainObject, ...]:
        return tuple(self._objects.values())

    def add_object(self, obj: DomainObject) -> None:
        """
        Add an object to the domain.

        Raises:
            DuplicateObjectError: If an object with the same name
                (ignoring case) is already present.
        """
        key = obj.name.lower()
        if key in self._objects:
            raise DuplicateObjectError(obj.name)
        self._objects[key] = obj

    def get_object(self, name: str) -> Optional[DomainObject]:
        """Case-insensitive lookup; None when the object is unknown."""
        return self._objects.get(name.lower())

    def check_for_all(self, expression: "Expression") -> ForAllResult:
        """
        Evaluate an expression for every known object.

        The quantifier ranges only over the finite set of known objects.
        An empty domain yields FALSE: vacuous truth is rejected.

        Args:
            expression: The expression to test.

        Returns:
            ForAllResult with the conjunction of per-object values.
        """
        if not self._objects:
            return ForAllResult(
                value=False,
                reason=f"{Heuristic.VACUOUS_TRUTH_REJECTION.tag}\n{VACUOUS_TRUTH_REASON}",
            )

        failing = [
            obj.name for obj in self._objects.values()
            if not expression.evaluate(obj).value
        ]
        return ForAllResult(value=not failing, failing_objects=failing)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[DomainObject]:
        return iter(self._objects.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._objects

    def __str__(self) -> str:
        if not self._objects:
            return "Domain is empty."
        lines = ["Domain State:"]
        lines.extend(f"  - {obj}" for obj in self._objects.values())
        return "\n".join(lines)
