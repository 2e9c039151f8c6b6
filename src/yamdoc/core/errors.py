#!/usr/bin/env python3
"""
YAMDOC ERRORS
-------------
Failure taxonomy for the parsing pipeline. An empty document is not an
error and has no class here: the pipeline returns None for it.

Author: YamDoc Team
Date: 2026-01-16
"""

from typing import Optional


class YamDocError(Exception):
    """Base class for every error raised by yamdoc."""


class BackendError(YamDocError):
    """The CST producer could not be loaded or returned no tree."""


class PositionedError(YamDocError):
    """An error tied to a 1-based line/column in the source text."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}, column {self.column}"


class DecodeError(PositionedError):
    """A scalar literal is malformed for the kind the grammar assigned to it."""

    def __init__(self, expected: str, text: str, line: Optional[int] = None, column: Optional[int] = None):
        self.expected = expected
        self.text = text
        super().__init__(f"invalid {expected} literal {text!r}", line, column)


class StructuralError(PositionedError):
    """An unexpected node kind, or a non-scalar used as a map key."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None,
                 kind: Optional[str] = None):
        self.kind = kind
        super().__init__(message, line, column)
