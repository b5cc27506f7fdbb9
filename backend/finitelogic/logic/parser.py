"""
Expression Parser.

Builds an expression tree from a list of tokens using the shunting-yard
algorithm.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .expressions import And, Expression, Not, Or, Predicate, RelevantImplication


class ParseErrorKind(str, Enum):
    EMPTY_EXPRESSION = "empty_expression"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    INVALID_SYNTAX = "invalid_syntax"


class ParseError(ValueError):
    """Raised when a token list does not form a single expression."""

    def __init__(self, message: str, kind: ParseErrorKind, tokens: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.tokens = list(tokens)


class ExpressionParser:
    """
    Parser for logic expressions given as tokens.

    Converts token lists like:
        ["NOT", "a", "AND", "b"]
        ["(", "is human", "AND", "is greek", ")", "RELEVANTLY_IMPLIES", "is human"]

    Into expression trees:
        And(Not(Predicate("a")), Predicate("b"))
        RelevantImplication(And(...), Predicate("is human"))

    Operator keywords are case-insensitive. Every other token except the
    parentheses names an atomic predicate.
    """

    # Higher binds tighter
    PRECEDENCE: Dict[str, int] = {
        "NOT": 4,
        "AND": 3,
        "OR": 2,
        "RELEVANTLY_IMPLIES": 1,
    }

    BINARY_OPS = {
        "AND": And,
        "OR": Or,
        "RELEVANTLY_IMPLIES": RelevantImplication,
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def is_operator(self, token: str) -> bool:
        return token.upper() in self.PRECEDENCE

    def parse(self, tokens: Sequence[str]) -> Expression:
        """
        Parse tokens into an expression tree.

        Args:
            tokens: The expression tokens, parentheses as separate tokens.

        Returns:
            The root of the expression tree.

        Raises:
            ParseError: If the tokens are empty or malformed.
        """
        self.logger.debug("Parsing tokens: %s", list(tokens))

        if not tokens:
            raise ParseError(
                "Cannot parse an empty expression.",
                ParseErrorKind.EMPTY_EXPRESSION,
                tokens,
            )

        values: List[Expression] = []
        operators: List[str] = []

        for token in tokens:
            upper = token.upper()

            if upper in self.PRECEDENCE:
                while (
                    operators
                    and operators[-1] != "("
                    and self.PRECEDENCE[operators[-1]] >= self.PRECEDENCE[upper]
                ):
                    self._apply(values, operators.pop(), tokens)
                operators.append(upper)
            elif token == "(":
                operators.append(token)
            elif token == ")":
                while operators and operators[-1] != "(":
                    self._apply(values, operators.pop(), tokens)
                if not operators:
                    raise ParseError(
                        "Mismatched parentheses: no matching '(' found.",
                        ParseErrorKind.MISMATCHED_PARENTHESES,
                        tokens,
                    )
                operators.pop()
            else:
                values.append(Predicate(token))

            self.logger.debug(
                "After %r: values=%s operators=%s",
                token,
                [v.to_tree_string() for v in values],
                operators,
            )

        while operators:
            operator = operators.pop()
            if operator == "(":
                raise ParseError(
                    "Mismatched parentheses: remaining '(' on stack.",
                    ParseErrorKind.MISMATCHED_PARENTHESES,
                    tokens,
                )
            self._apply(values, operator, tokens)

        if len(values) != 1:
            self.logger.error(
                "Final parser check failed: %d values left (%s)",
                len(values),
                [v.to_tree_string() for v in values],
            )
            raise ParseError(
                "Invalid expression syntax: check operators and operands.",
                ParseErrorKind.INVALID_SYNTAX,
                tokens,
            )

        self.logger.debug("Parsed expression: %s", values[0].to_tree_string())
        return values[0]

    def _apply(self, values: List[Expression], operator: str, tokens: Sequence[str]) -> None:
        """Pop operands for an operator and push the combined node."""
        if operator == "NOT":
            if not values:
                raise ParseError(
                    "Invalid syntax for NOT operator.",
                    ParseErrorKind.INSUFFICIENT_OPERANDS,
                    tokens,
                )
            values.append(Not(values.pop()))
            return

        if len(values) < 2:
            raise ParseError(
                f"Invalid syntax for binary operator {operator}.",
                ParseErrorKind.INSUFFICIENT_OPERANDS,
                tokens,
            )
        right = values.pop()
        left = values.pop()
        values.append(self.BINARY_OPS[operator](left, right))

    def validate(self, tokens: Sequence[str]) -> Tuple[bool, Optional[str]]:
        """
        Check whether tokens parse, without keeping the tree.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            self.parse(tokens)
            return True, None
        except ParseError as e:
            return False, e.message
