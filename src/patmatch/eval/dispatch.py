"""Ordered clause dispatch: match(value).with_(clauses...)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from loguru import logger

from patmatch.core.errors import ConstructionError, MatchExhausted
from patmatch.core.patterns import Pattern, Tuple, is_pattern
from patmatch.eval.matcher import PatternMatcher, get_default_matcher


@dataclass(frozen=True)
class Clause:
    """Match clause: pattern -> handler."""

    pattern: Pattern
    handler: Callable[..., Any]

    def __post_init__(self) -> None:
        if not is_pattern(self.pattern):
            raise ConstructionError(f"Clause expects a pattern, got {self.pattern!r}")
        if not callable(self.handler):
            raise ConstructionError(f"Clause handler must be callable, got {self.handler!r}")

    def __str__(self) -> str:
        name = getattr(self.handler, "__name__", type(self.handler).__name__)
        return f"{self.pattern} -> {name}"


ClauseLike = Union[Clause, Sequence[Any]]


def to_clause(raw: ClauseLike) -> Clause:
    """Normalize a clause given as Clause, (pattern, handler) or (p1, ..., pn, handler).

    Several patterns before the handler are shorthand for Tuple(p1, ..., pn).
    """
    if isinstance(raw, Clause):
        return raw
    if not isinstance(raw, (tuple, list)) or len(raw) < 2:
        raise ConstructionError(f"Clause must be (pattern, handler), got {raw!r}")
    *patterns, handler = raw
    for pattern in patterns:
        if not is_pattern(pattern):
            raise ConstructionError(f"Clause expects patterns before the handler, got {pattern!r}")
    if len(patterns) == 1:
        return Clause(patterns[0], handler)
    return Clause(Tuple(*patterns), handler)


class MatchExpression:
    """A subject value waiting for its clauses."""

    def __init__(self, value: Any, matcher: PatternMatcher | None = None) -> None:
        self.value = value
        self.matcher = matcher or get_default_matcher()

    def select(self, *clauses: ClauseLike) -> tuple[Clause, list[Any]]:
        """Select the first matching clause and return it with its bindings.

        Raises MatchExhausted if no clause matches.
        """
        if not clauses:
            raise ConstructionError("match needs at least one clause")
        normalized = [to_clause(raw) for raw in clauses]

        for index, clause in enumerate(normalized):
            result = self.matcher.match(self.value, clause.pattern)
            if result.success:
                logger.debug("match.select index={} clause={} bindings={}", index, clause, len(result.bindings))
                return clause, result.bindings
            if self.matcher.trace:
                logger.debug("match.miss index={} pattern={} value={!r}", index, clause.pattern, self.value)

        logger.debug("match.exhausted clauses={} value={!r}", len(normalized), self.value)
        raise MatchExhausted(self.value, len(normalized))

    def with_(self, *clauses: ClauseLike) -> Any:
        """Run the handler of the first matching clause with the bindings as arguments."""
        clause, bindings = self.select(*clauses)
        return clause.handler(*bindings)


def match(value: Any, *, matcher: PatternMatcher | None = None) -> MatchExpression:
    """Start a match on value; finish it with .with_(clauses...)."""
    return MatchExpression(value, matcher)
