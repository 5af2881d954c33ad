"""Error types for the pattern matching engine."""

from typing import Any


class PatternMatchError(Exception):
    """Base class for pattern matching errors."""


class ConstructionError(PatternMatchError):
    """A pattern, tuple value or clause was built from invalid arguments."""


class MatchExhausted(PatternMatchError):
    """No clause matched the subject value."""

    def __init__(self, value: Any, clause_count: int):
        self.value = value
        self.clause_count = clause_count
        super().__init__(
            f"Pattern match failed: none of {clause_count} clause(s) matches {value!r}. Maybe you forgot Wildcard?"
        )
