"""Structural matching of values against patterns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from patmatch.config.settings import ConsSingleton, load_settings
from patmatch.core.patterns import (
    ConsPattern,
    ConstPattern,
    Pattern,
    RecordPattern,
    TuplePattern,
    VariablePattern,
    WildcardPattern,
)
from patmatch.core.values import ValueKind, classify


@dataclass(frozen=True)
class MatchResult:
    """Result of pattern matching."""

    success: bool
    bindings: list[Any] = field(default_factory=list)  # Values bound by the pattern (in order)


NO_MATCH = MatchResult(False)


class PatternMatcher:
    """Recursive structural matcher.

    Bindings come out depth-first, left to right: tuple components in order,
    record fields in the pattern's declaration order.
    """

    def __init__(self, cons_singleton: ConsSingleton = "exact", trace: bool = False) -> None:
        self.cons_singleton = cons_singleton
        self.trace = trace

    def match(self, value: Any, pattern: Pattern) -> MatchResult:
        """Match a value against a pattern.

        Returns bindings for the pattern on success. Any failing sub-pattern
        fails the whole match; no alternative decomposition is tried.
        """
        match pattern:
            case WildcardPattern():
                return MatchResult(True, [])
            case VariablePattern():
                return MatchResult(True, [value])
            case ConstPattern(literal):
                return self._match_const(value, literal)
            case ConsPattern(arity):
                return self._match_cons(value, arity)
            case TuplePattern(items):
                kind, components = classify(value)
                if kind is not ValueKind.TUPLE or len(items) != len(components):
                    return NO_MATCH
                return self._match_all(zip(components, items))
            case RecordPattern(fields):
                kind, data = classify(value)
                if kind is not ValueKind.RECORD:
                    return NO_MATCH
                if any(name not in data for name, _ in fields):
                    return NO_MATCH
                return self._match_all((data[name], sub) for name, sub in fields)
            case _:
                raise TypeError(f"Not a pattern: {pattern!r}")

    def _match_const(self, value: Any, literal: Any) -> MatchResult:
        kind, data = classify(value)
        literal_kind, _ = classify(literal)
        # bool is not a number here: True never matches Const(1)
        if kind is literal_kind and data == literal:
            return MatchResult(True, [])
        return NO_MATCH

    def _match_cons(self, value: Any, arity: int) -> MatchResult:
        kind, items = classify(value)
        if kind is not ValueKind.SEQUENCE:
            return NO_MATCH
        if arity == 0:
            return MatchResult(True, []) if len(items) == 0 else NO_MATCH
        if arity == 1:
            if self.cons_singleton == "tail":
                return MatchResult(True, [items])
            return MatchResult(True, [items[0]]) if len(items) == 1 else NO_MATCH
        heads = arity - 1
        if len(items) < heads:
            return NO_MATCH
        return MatchResult(True, [*items[:heads], items[heads:]])

    def _match_all(self, pairs: Iterable[tuple[Any, Pattern]]) -> MatchResult:
        bindings: list[Any] = []
        for value, pattern in pairs:
            result = self.match(value, pattern)
            if not result.success:
                return NO_MATCH
            bindings.extend(result.bindings)
        return MatchResult(True, bindings)


_default_matcher: PatternMatcher | None = None


def get_default_matcher() -> PatternMatcher:
    """Get the process-wide matcher, configured from settings on first use."""
    global _default_matcher
    if _default_matcher is None:
        settings = load_settings()
        _default_matcher = PatternMatcher(cons_singleton=settings.cons_singleton, trace=settings.trace)
    return _default_matcher


def reset_default_matcher() -> None:
    """Drop the process-wide matcher so the next use re-reads settings (useful for testing)."""
    global _default_matcher
    _default_matcher = None


def match_one(value: Any, pattern: Pattern, *, matcher: PatternMatcher | None = None) -> list[Any] | None:
    """Match one value against one pattern.

    Returns:
        The bindings on success, None when the value does not match.
    """
    result = (matcher or get_default_matcher()).match(value, pattern)
    return result.bindings if result.success else None
