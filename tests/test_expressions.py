"""
Tests for the expression tree and implication analysis.
"""

import dataclasses

import pytest

from backend.finitelogic.logic import (
    And,
    ImplicationAnalyzer,
    Not,
    Or,
    Predicate,
    RelevantImplication,
    atomic_predicates,
    structurally_equal,
    to_tree_string,
)


class TestAtomicPredicates:
    """Tests for atomic predicate collection."""

    def test_duplicates_collapse(self):
        """Test a repeated predicate appears once."""
        expr = And(Predicate("a"), Predicate("a"))
        assert expr.get_atomic_predicates() == {"a"}

    def test_not_returns_operand_set(self):
        """Test NOT adds nothing of its own."""
        assert Not(Predicate("a")).get_atomic_predicates() == {"a"}

    def test_binary_union(self):
        """Test binary nodes union both sides."""
        expr = RelevantImplication(
            Or(Predicate("a"), Predicate("b")),
            Not(Predicate("c")),
        )
        assert atomic_predicates(expr) == {"a", "b", "c"}

    def test_names_are_lowercased(self):
        """Test topic identity ignores case like the fact store."""
        expr = And(Predicate("IsHuman"), Predicate("ishuman"))
        assert expr.get_atomic_predicates() == {"ishuman"}


class TestTreeString:
    """Tests for canonical rendering."""

    def test_predicate_keeps_case(self):
        """Test predicate names render quoted with original case."""
        assert Predicate("Is Human").to_tree_string() == '"Is Human"'

    def test_nested(self):
        """Test full parenthesization."""
        expr = RelevantImplication(
            And(Predicate("a"), Not(Predicate("b"))),
            Or(Predicate("a"), Predicate("b")),
        )
        assert to_tree_string(expr) == (
            '(("a" AND (NOT "b")) RELEVANTLY_IMPLIES ("a" OR "b"))'
        )

    def test_str_matches_tree_string(self):
        """Test str() uses the canonical rendering."""
        expr = Not(Predicate("a"))
        assert str(expr) == expr.to_tree_string()


class TestStructuralEquality:
    """Tests for structural comparison."""

    def test_equal_trees(self):
        """Test separately built trees compare equal."""
        first = And(Not(Predicate("a")), Predicate("b"))
        second = And(Not(Predicate("a")), Predicate("b"))
        assert first is not second
        assert first.equals(second)
        assert first == second

    def test_predicate_case_ignored(self):
        """Test predicate names compare case-insensitively."""
        assert Predicate("A").equals(Predicate("a"))

    def test_different_operators(self):
        """Test AND and OR with the same children differ."""
        assert not structurally_equal(
            And(Predicate("a"), Predicate("b")),
            Or(Predicate("a"), Predicate("b")),
        )

    def test_operand_order_matters(self):
        """Test commuted operands are a different structure."""
        assert not And(Predicate("a"), Predicate("b")).equals(
            And(Predicate("b"), Predicate("a"))
        )

    def test_non_expression(self):
        """Test comparison with other values."""
        assert not Predicate("a").equals("a")

    def test_nodes_are_immutable(self):
        """Test expression nodes cannot be changed after construction."""
        expr = Predicate("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            expr.name = "b"


class TestImplicationAnalyzer:
    """Tests for the structural implication checks."""

    def test_relevant_when_consequent_topics_covered(self):
        """Test consequent predicates drawn from the antecedent."""
        analysis = ImplicationAnalyzer().analyze(
            And(Predicate("is human"), Predicate("is greek")),
            Predicate("is human"),
        )
        assert analysis.is_relevant is True
        assert analysis.new_topics == []

    def test_irrelevant_when_new_topic(self):
        """Test consequent introducing a new predicate."""
        analysis = ImplicationAnalyzer().analyze(Predicate("a"), Predicate("b"))
        assert analysis.is_relevant is False
        assert analysis.new_topics == ["b"]

    def test_aristotle_incoherent(self):
        """Test NOT P -> P is incoherent."""
        analyzer = ImplicationAnalyzer()
        assert analyzer.is_aristotle_coherent(Not(Predicate("a")), Predicate("a")) is False

    def test_aristotle_compound(self):
        """Test NOT (P AND Q) -> (P AND Q) is incoherent."""
        inner = And(Predicate("p"), Predicate("q"))
        assert ImplicationAnalyzer().is_aristotle_coherent(Not(inner), inner) is False

    def test_aristotle_coherent_otherwise(self):
        """Test other shapes are coherent."""
        analyzer = ImplicationAnalyzer()
        assert analyzer.is_aristotle_coherent(Predicate("a"), Predicate("a")) is True
        assert analyzer.is_aristotle_coherent(Not(Predicate("a")), Predicate("b")) is True
        assert analyzer.is_aristotle_coherent(Predicate("a"), Not(Predicate("a"))) is True

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = ImplicationAnalyzer().analyze(Predicate("a"), Predicate("b")).to_dict()
        assert data["antecedent_predicates"] == ["a"]
        assert data["consequent_predicates"] == ["b"]
        assert data["is_relevant"] is False
        assert data["is_aristotle_coherent"] is True
