"""Runtime value shapes and the value classifier."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from patmatch.core.errors import ConstructionError


class ValueKind(Enum):
    """Matching strategy selected for a runtime value."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    TUPLE = "tuple"
    RECORD = "record"
    OTHER = "other"


_SCALAR_KINDS = frozenset({ValueKind.NUMBER, ValueKind.STRING, ValueKind.BOOLEAN})


@dataclass(frozen=True)
class TupleValue:
    """Fixed-size tuple value: (v₁, ..., vₙ) with n ≥ 2.

    Kept apart from native sequences (lists and Python tuples alike) so that
    Tuple patterns and Cons patterns never compete for the same value.
    """

    components: tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.components)

    def __str__(self) -> str:
        return f"({', '.join(repr(c) for c in self.components)})"


def MakeTuple(*components: Any) -> TupleValue:
    """Build a tuple value from two or more components."""
    if len(components) < 2:
        raise ConstructionError(f"Tuple should have more than 1 component, got {len(components)}")
    return TupleValue(tuple(components))


def is_scalar(kind: ValueKind) -> bool:
    return kind in _SCALAR_KINDS


def classify(value: Any) -> tuple[ValueKind, Any]:
    """Determine how a value's shape should be inspected.

    Only the value's type is consulted, never its contents. bool is checked
    before numbers since it subclasses int.

    Returns:
        (kind, data) where data is the component tuple for tuple values and
        the value itself otherwise.
    """
    if isinstance(value, TupleValue):
        return ValueKind.TUPLE, value.components
    if isinstance(value, bool):
        return ValueKind.BOOLEAN, value
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER, value
    if isinstance(value, str):
        return ValueKind.STRING, value
    if isinstance(value, Mapping):
        return ValueKind.RECORD, value
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE, value
    return ValueKind.OTHER, value
