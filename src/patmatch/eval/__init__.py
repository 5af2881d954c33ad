"""Matcher and clause dispatcher."""

from patmatch.eval.dispatch import Clause, MatchExpression, match, to_clause
from patmatch.eval.matcher import (
    NO_MATCH,
    MatchResult,
    PatternMatcher,
    get_default_matcher,
    match_one,
    reset_default_matcher,
)

__all__ = [
    "Clause",
    "MatchExpression",
    "match",
    "to_clause",
    "NO_MATCH",
    "MatchResult",
    "PatternMatcher",
    "get_default_matcher",
    "match_one",
    "reset_default_matcher",
]
