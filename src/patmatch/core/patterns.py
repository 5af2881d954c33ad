"""Pattern descriptors and their constructors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from patmatch.core.errors import ConstructionError
from patmatch.core.values import classify, is_scalar


class PatternTag(Enum):
    """Discriminant carried by every pattern."""

    CONST = "const"
    VARIABLE = "variable"
    WILDCARD = "wildcard"
    CONS = "cons"
    TUPLE = "tuple"
    RECORD = "record"


class Pattern:
    """Base class for patterns."""

    tag: ClassVar[PatternTag]


@dataclass(frozen=True)
class ConstPattern(Pattern):
    """Literal pattern: matches a scalar equal to value."""

    tag: ClassVar[PatternTag] = PatternTag.CONST

    value: int | float | str | bool

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class VariablePattern(Pattern):
    """Binding pattern: matches anything and binds it.

    The label only shows up in str(); bindings are positional.
    """

    tag: ClassVar[PatternTag] = PatternTag.VARIABLE

    label: str | None = None

    def __str__(self) -> str:
        return self.label or "?"


@dataclass(frozen=True)
class WildcardPattern(Pattern):
    """Matches anything, binds nothing."""

    tag: ClassVar[PatternTag] = PatternTag.WILDCARD

    def __str__(self) -> str:
        return "_"


@dataclass(frozen=True)
class ConsPattern(Pattern):
    """Sequence pattern: arity-1 heads plus one tail, or [] when arity is 0.

    Example: Cons('h', 't') on [1, 2, 3]  =>  bindings [1, [2, 3]]
    """

    tag: ClassVar[PatternTag] = PatternTag.CONS

    arity: int
    slots: tuple[str, ...]

    def __str__(self) -> str:
        if not self.slots:
            return "[]"
        return " :: ".join(self.slots)


@dataclass(frozen=True)
class TuplePattern(Pattern):
    """Tuple pattern: one sub-pattern per tuple component."""

    tag: ClassVar[PatternTag] = PatternTag.TUPLE

    items: tuple[Pattern, ...]

    def __str__(self) -> str:
        return f"({', '.join(str(item) for item in self.items)})"


@dataclass(frozen=True)
class RecordPattern(Pattern):
    """Record pattern: named fields, each with a sub-pattern.

    Field order is the declaration order and fixes the binding order.
    """

    tag: ClassVar[PatternTag] = PatternTag.RECORD

    fields: tuple[tuple[str, Pattern], ...]

    def __str__(self) -> str:
        return "{" + ", ".join(f"{name}: {pattern}" for name, pattern in self.fields) + "}"


Wildcard = WildcardPattern()


def is_pattern(obj: Any) -> bool:
    return isinstance(obj, Pattern)


def Const(value: int | float | str | bool) -> ConstPattern:
    kind, _ = classify(value)
    if not is_scalar(kind):
        raise ConstructionError(f"Const expects a number, string or boolean, got {value!r}")
    return ConstPattern(value)


def Variable(label: str | None = None) -> VariablePattern:
    return VariablePattern(label)


def Cons(*slots: str) -> ConsPattern:
    """Build a sequence pattern whose arity is the number of slot names."""
    for slot in slots:
        if not isinstance(slot, str):
            raise ConstructionError(f"Cons slot names must be strings, got {slot!r}")
    return ConsPattern(len(slots), tuple(slots))


def Tuple(*items: Pattern) -> TuplePattern:
    if not items:
        raise ConstructionError("Tuple pattern needs at least one sub-pattern")
    for item in items:
        if not is_pattern(item):
            raise ConstructionError(f"Tuple expects patterns, got {item!r}")
    return TuplePattern(tuple(items))


def Record(fields: Mapping[str, Pattern] | None = None, /, **named: Pattern) -> RecordPattern:
    """Build a record pattern from a mapping and/or keyword fields.

    Mapping entries come first, then keyword entries, each in insertion order.
    A keyword repeating a mapping key replaces its pattern in place.
    """
    merged: dict[str, Pattern] = dict(fields or {})
    merged.update(named)
    for name, pattern in merged.items():
        if not isinstance(name, str):
            raise ConstructionError(f"Record field names must be strings, got {name!r}")
        if not is_pattern(pattern):
            raise ConstructionError(f"Record field {name!r} expects a pattern, got {pattern!r}")
    return RecordPattern(tuple(merged.items()))
