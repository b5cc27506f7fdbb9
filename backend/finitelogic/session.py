"""
Command session.

Tokenizes command lines and dispatches them against one Domain. Output is
returned as plain lines; printing and colour are left to the caller.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .engine.domain import Domain, DomainObject
from .logic.parser import ExpressionParser
from .report import render_for_all, render_help, render_query

# A quoted phrase, a lone parenthesis, or a run of anything else
TOKEN_PATTERN = re.compile(r'"([^"]*)"|[()]|[^\s()"]+')

TRUTH_VALUES = {"true": True, "false": False}


class ObjectNotFoundError(LookupError):
    """Raised when a command names an object that is not in the domain."""

    def __init__(self, name: str):
        super().__init__(f"Object '{name}' not found.")
        self.name = name


class CommandUsageError(ValueError):
    """Raised when a command is given the wrong arguments."""


def tokenize(line: str) -> List[str]:
    """
    Split a command line into tokens.

    Double-quoted text becomes one token without its quotes, and
    parentheses are always tokens of their own.

    Raises:
        CommandUsageError: If a quote is left open or a quoted phrase
            is empty.
    """
    if line.count('"') % 2:
        raise CommandUsageError("Unbalanced quote in command.")

    tokens = []
    for match in TOKEN_PATTERN.finditer(line):
        quoted = match.group(1)
        if quoted is None:
            tokens.append(match.group(0))
        elif not quoted.strip():
            raise CommandUsageError("Empty predicate name in quotes.")
        else:
            tokens.append(quoted)
    return tokens


def clean_expression_tokens(tokens: List[str]) -> List[str]:
    """Strip a single trailing '?' from the last expression token."""
    cleaned = list(tokens)
    if cleaned and cleaned[-1].endswith("?"):
        last = cleaned[-1][:-1]
        if last:
            cleaned[-1] = last
        else:
            cleaned.pop()
    return cleaned


@dataclass
class CommandResult:
    """Output of one command."""
    lines: List[str] = field(default_factory=list)
    ok: bool = True
    exit_requested: bool = False
    clear_requested: bool = False


class Session:
    """
    Dispatcher for console commands over a single domain.

    A failed command reports an error and leaves the domain unchanged;
    the session keeps accepting commands.
    """

    def __init__(
        self,
        domain: Optional[Domain] = None,
        parser: Optional[ExpressionParser] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.domain = domain if domain is not None else Domain()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or ExpressionParser(logger=self.logger.getChild("parser"))
        self._commands: Dict[str, Callable[[List[str]], CommandResult]] = {
            "domain": self._cmd_domain,
            "fact": self._cmd_fact,
            "query": self._cmd_query,
            "check": self._cmd_check,
            "state": self._cmd_state,
            "help": self._cmd_help,
            "exit": self._cmd_exit,
            "quit": self._cmd_exit,
            "clear": self._cmd_clear,
        }

    def execute(self, line: str) -> CommandResult:
        """
        Run one command line.

        Args:
            line: Raw command text.

        Returns:
            CommandResult with the output lines.
        """
        try:
            parts = tokenize(line)
        except CommandUsageError as e:
            return CommandResult(lines=[f"Error: {e}"], ok=False)
        if not parts:
            return CommandResult()

        command = parts[0].lower()
        handler = self._commands.get(command)
        if handler is None:
            return CommandResult(
                lines=[f"Unknown command: '{command}'. Type 'help' for a list of commands."],
                ok=False,
            )

        self.logger.debug("Executing %s with %s", command, parts[1:])
        try:
            return handler(parts)
        except (LookupError, ValueError) as e:
            self.logger.info("Command %r failed: %s", line, e)
            return CommandResult(lines=[f"Error: {e}"], ok=False)

    def _require_object(self, name: str) -> DomainObject:
        obj = self.domain.get_object(name)
        if obj is None:
            raise ObjectNotFoundError(name)
        return obj

    def _cmd_domain(self, parts: List[str]) -> CommandResult:
        if len(parts) != 3 or parts[1].lower() != "add":
            raise CommandUsageError("Invalid 'domain' command. Use: domain add <ObjectName>")
        self.domain.add_object(DomainObject(parts[2]))
        return CommandResult(lines=[f"Object '{parts[2]}' added to the domain."])

    def _cmd_fact(self, parts: List[str]) -> CommandResult:
        if len(parts) not in (3, 4):
            raise CommandUsageError(
                "Invalid 'fact' command. Use: fact <ObjectName> \"<predicate>\" [true|false]"
            )
        value = True
        if len(parts) == 4:
            if parts[3].lower() not in TRUTH_VALUES:
                raise CommandUsageError(f"Invalid truth value '{parts[3]}'. Use true or false.")
            value = TRUTH_VALUES[parts[3].lower()]

        obj = self._require_object(parts[1])
        obj.set_predicate_state(parts[2], value)
        return CommandResult(
            lines=[f"Fact defined: {obj.name} -> '{parts[2]}' is {str(value).lower()}."]
        )

    def _cmd_query(self, parts: List[str]) -> CommandResult:
        if len(parts) < 3:
            raise CommandUsageError("Invalid 'query' command. Use: query <ObjectName> <Expression>?")
        obj = self._require_object(parts[1])
        expression = self.parser.parse(clean_expression_tokens(parts[2:]))
        result = expression.evaluate(obj)
        return CommandResult(lines=render_query(expression, obj, result))

    def _cmd_check(self, parts: List[str]) -> CommandResult:
        if len(parts) < 3 or parts[1].lower() != "forall":
            raise CommandUsageError("Invalid 'check' command. Use: check forall <Expression>?")
        expression = self.parser.parse(clean_expression_tokens(parts[2:]))
        result = self.domain.check_for_all(expression)
        return CommandResult(lines=render_for_all(expression, result))

    def _cmd_state(self, parts: List[str]) -> CommandResult:
        return CommandResult(lines=str(self.domain).splitlines())

    def _cmd_help(self, parts: List[str]) -> CommandResult:
        return CommandResult(lines=render_help())

    def _cmd_exit(self, parts: List[str]) -> CommandResult:
        return CommandResult(lines=["Goodbye!"], exit_requested=True)

    def _cmd_clear(self, parts: List[str]) -> CommandResult:
        return CommandResult(clear_requested=True)
