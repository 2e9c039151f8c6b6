#!/usr/bin/env python3
"""
YAMDOC CORE MODELS
------------------
Defines the typed document model produced by the parsing pipeline.
Every node is a Scalar, including the List and Map containers, so that
each value can carry its own source comment uniformly.

The model is a strict tree built once per parse. All classes are frozen.

Author: YamDoc Team
Date: 2026-01-16
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class NullValue:
    """Explicit `null`, `~` or an omitted value."""

    def to_python(self) -> Any:
        return None


@dataclass(frozen=True)
class StringValue:
    text: str

    def to_python(self) -> Any:
        return self.text


@dataclass(frozen=True)
class IntegerValue:
    value: int  # Signed 64-bit range, enforced by the decoder

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class FloatValue:
    value: float  # May be +inf, -inf or nan

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ListValue:
    items: Tuple["Scalar", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> Any:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class MapValue:
    """
    Ordered map entries. Source order is kept and duplicate keys are
    stored as separate entries.
    """
    items: Tuple["MapItem", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def keys(self) -> Tuple[str, ...]:
        return tuple(item.key for item in self.items)

    def to_python(self) -> Any:
        # Later duplicates win in the dict projection only
        return {item.key: item.value.to_python() for item in self.items}


ScalarType = Union[NullValue, StringValue, IntegerValue, FloatValue, BooleanValue, ListValue, MapValue]

CONTAINER_TYPES = (ListValue, MapValue)


@dataclass(frozen=True)
class Scalar:
    """
    The universal value node: a typed value plus an optional comment.
    The comment is already trimmed and stripped of its '#' marker.
    """
    value: ScalarType
    comment: Optional[str] = None

    @property
    def is_container(self) -> bool:
        return isinstance(self.value, CONTAINER_TYPES)

    def to_python(self) -> Any:
        return self.value.to_python()


@dataclass(frozen=True)
class MapItem:
    key: str
    value: Scalar


@dataclass(frozen=True)
class Document:
    """The single top-level value of a source text."""
    root: Scalar

    def to_python(self) -> Any:
        return self.root.to_python()


def format_float(value: float) -> str:
    """
    Renders a float the way YAML spells it: `.inf`, `-.inf`, `.nan`.
    Integral values drop the fraction (1.0 -> "1").
    """
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_key(scalar: Scalar) -> Optional[str]:
    """
    Coerces a decoded key scalar to its string form.
    Returns None for List/Map, which cannot be used as keys.
    """
    value = scalar.value
    if isinstance(value, StringValue):
        return value.text
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, IntegerValue):
        return str(value.value)
    if isinstance(value, FloatValue):
        return format_float(value.value)
    if isinstance(value, NullValue):
        return "null"
    return None
