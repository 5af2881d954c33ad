"""Patterns, values and errors."""

from patmatch.core.errors import ConstructionError, MatchExhausted, PatternMatchError
from patmatch.core.patterns import (
    Cons,
    ConsPattern,
    Const,
    ConstPattern,
    Pattern,
    PatternTag,
    Record,
    RecordPattern,
    Tuple,
    TuplePattern,
    Variable,
    VariablePattern,
    Wildcard,
    WildcardPattern,
    is_pattern,
)
from patmatch.core.values import MakeTuple, TupleValue, ValueKind, classify, is_scalar

__all__ = [
    "ConstructionError",
    "MatchExhausted",
    "PatternMatchError",
    "Cons",
    "ConsPattern",
    "Const",
    "ConstPattern",
    "Pattern",
    "PatternTag",
    "Record",
    "RecordPattern",
    "Tuple",
    "TuplePattern",
    "Variable",
    "VariablePattern",
    "Wildcard",
    "WildcardPattern",
    "is_pattern",
    "MakeTuple",
    "TupleValue",
    "ValueKind",
    "classify",
    "is_scalar",
]
