#!/usr/bin/env python3
"""
YAMDOC PARSE CONTEXT
--------------------
Read-only state shared by one parse: the source text, the comment index
built by the collector, and the options the caller chose. Each parse gets
its own context, so independent parses never share anything.

Author: YamDoc Team
Date: 2026-01-16
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class ParseOptions:
    lenient_booleans: bool = False   # Accept True, FALSE and other casings as booleans


@dataclass(frozen=True)
class ParseContext:
    source: str                                           # The normalised input text
    comments: Dict[int, str] = field(default_factory=dict)  # Zero-based line -> merged comment
    options: ParseOptions = field(default_factory=ParseOptions)

    def comment_for_line(self, line: int) -> Optional[str]:
        """Same-line comment first, then the comment ending on the line above."""
        comment = self.comments.get(line)
        if comment is None and line > 0:
            comment = self.comments.get(line - 1)
        return comment
