#!/usr/bin/env python3
"""
YAMDOC SCALAR DECODER
---------------------
Pure functions turning a raw text span plus the subkind the grammar
assigned to it into a typed value. The grammar has already classified
the literal; these functions only convert it, and raise DecodeError with
the source position when the text does not fit the claimed kind.

Quoted strings are only stripped of their delimiters: escape sequences
stay in the text as written. Block scalars only lose their header line;
folding and chomping are not applied.

Author: YamDoc Team
Date: 2026-01-16
"""

import re
from typing import Optional

from yamdoc.core.errors import DecodeError
from yamdoc.core.models import (
    BooleanValue, FloatValue, IntegerValue, NullValue, StringValue,
)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# (prefix, base, format name)
RADIX_PREFIXES = (
    ("0x", 16, "hexadecimal"),
    ("0o", 8, "octal"),
)

DECIMAL_PATTERN = re.compile(r'^[-+]?[0-9]+$')
DIGITS_PATTERN = {
    16: re.compile(r'^[0-9a-fA-F]+$'),
    8: re.compile(r'^[0-7]+$'),
}
FLOAT_PATTERN = re.compile(r'^[-+]?(\.[0-9]+|[0-9]+(\.[0-9]*)?)([eE][-+]?[0-9]+)?$')

SPECIAL_FLOATS = {
    ".inf": float("inf"),
    "+.inf": float("inf"),
    "-.inf": float("-inf"),
    ".nan": float("nan"),
}


def decode_integer(text: str, line: Optional[int] = None, column: Optional[int] = None) -> IntegerValue:
    """Decimal by default; `0x` and `0o` prefixes (any case) select base 16 and 8."""
    lowered = text.lower()
    for prefix, base, name in RADIX_PREFIXES:
        if lowered.startswith(prefix):
            digits = text[len(prefix):]
            if not DIGITS_PATTERN[base].match(digits):
                raise DecodeError(name, text, line, column)
            return _in_range(int(digits, base), name, text, line, column)

    if not DECIMAL_PATTERN.match(text):
        raise DecodeError("integer", text, line, column)
    return _in_range(int(text, 10), "integer", text, line, column)


def _in_range(value: int, name: str, text: str, line: Optional[int], column: Optional[int]) -> IntegerValue:
    if not INT64_MIN <= value <= INT64_MAX:
        raise DecodeError(name, text, line, column)
    return IntegerValue(value)


def decode_float(text: str, line: Optional[int] = None, column: Optional[int] = None) -> FloatValue:
    """Accepts .inf, .nan and their signed forms in any case, else a YAML float literal."""
    special = SPECIAL_FLOATS.get(text.lower())
    if special is not None:
        return FloatValue(special)
    # float() alone would also take 'inf', 'nan' and underscores
    if not FLOAT_PATTERN.match(text):
        raise DecodeError("float", text, line, column)
    return FloatValue(float(text))


def decode_boolean(text: str, line: Optional[int] = None, column: Optional[int] = None,
                   strict: bool = True) -> BooleanValue:
    """
    Only `true` and `false` by default; any casing when strict is False.
    """
    spelling = text if strict else text.lower()
    if spelling == "true":
        return BooleanValue(True)
    if spelling == "false":
        return BooleanValue(False)
    raise DecodeError("boolean", text, line, column)


def decode_quoted(text: str) -> StringValue:
    """Drops exactly the first and last character, the quote delimiters."""
    return StringValue(text[1:-1])


def decode_block(text: str) -> StringValue:
    """Drops the header line (`|`, `>`, plus indicators) and keeps the rest verbatim."""
    _, newline, body = text.partition("\n")
    return StringValue(body if newline else "")


def decode_null() -> NullValue:
    return NullValue()


def decode_string(text: str) -> StringValue:
    return StringValue(text)
