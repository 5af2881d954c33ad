"""ML-style structural pattern matching: patterns, values and ordered dispatch."""

from loguru import logger

from patmatch.config import MatchSettings, load_settings
from patmatch.core import (
    Cons,
    Const,
    ConstructionError,
    MakeTuple,
    MatchExhausted,
    Pattern,
    PatternMatchError,
    Record,
    Tuple,
    TupleValue,
    ValueKind,
    Variable,
    Wildcard,
    classify,
)
from patmatch.eval import Clause, MatchExpression, MatchResult, PatternMatcher, match, match_one
from patmatch.logging_utils import configure_logging

# Silent until the application opts in via configure_logging()
logger.disable("patmatch")

__all__ = [
    "MatchSettings",
    "load_settings",
    "Cons",
    "Const",
    "ConstructionError",
    "MakeTuple",
    "MatchExhausted",
    "Pattern",
    "PatternMatchError",
    "Record",
    "Tuple",
    "TupleValue",
    "ValueKind",
    "Variable",
    "Wildcard",
    "classify",
    "Clause",
    "MatchExpression",
    "MatchResult",
    "PatternMatcher",
    "match",
    "match_one",
    "configure_logging",
]
