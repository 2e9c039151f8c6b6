#!/usr/bin/env python3
"""
YAMDOC CST NODE - Backend Boundary
----------------------------------
The transformer never touches a parser library directly. Backends convert
their own trees into CstNode objects, and every grammar label is mapped to
a NodeKind through KIND_BY_LABEL. Supporting a different grammar means
writing a new converter and, where labels differ, a new table.

Author: YamDoc Team
Date: 2026-01-16
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class NodeKind(Enum):
    STREAM = "stream"
    DOCUMENT = "document"
    BLOCK_NODE = "block_node"
    FLOW_NODE = "flow_node"

    BLOCK_MAPPING = "block_mapping"
    BLOCK_MAPPING_PAIR = "block_mapping_pair"
    FLOW_MAPPING = "flow_mapping"
    FLOW_PAIR = "flow_pair"
    BLOCK_SEQUENCE = "block_sequence"
    BLOCK_SEQUENCE_ITEM = "block_sequence_item"
    FLOW_SEQUENCE = "flow_sequence"

    PLAIN_SCALAR = "plain_scalar"
    SINGLE_QUOTE_SCALAR = "single_quote_scalar"
    DOUBLE_QUOTE_SCALAR = "double_quote_scalar"
    BLOCK_SCALAR = "block_scalar"

    # Subkinds assigned by the grammar below a plain scalar
    STRING_SCALAR = "string_scalar"
    INTEGER_SCALAR = "integer_scalar"
    FLOAT_SCALAR = "float_scalar"
    BOOLEAN_SCALAR = "boolean_scalar"
    NULL_SCALAR = "null_scalar"

    COMMENT = "comment"
    SEQUENCE_DASH = "-"
    DOCUMENT_START = "---"
    DOCUMENT_END = "..."
    DIRECTIVE = "directive"
    PUNCTUATION = "punctuation"

    ERROR = "ERROR"      # Text the grammar could not place
    UNKNOWN = "unknown"


KIND_BY_LABEL: Dict[str, NodeKind] = {
    kind.value: kind for kind in NodeKind
    if kind not in (NodeKind.DIRECTIVE, NodeKind.PUNCTUATION, NodeKind.UNKNOWN)
}
KIND_BY_LABEL.update({label: NodeKind.PUNCTUATION for label in ("[", "]", "{", "}", ",", ":", "?")})
KIND_BY_LABEL.update({label: NodeKind.DIRECTIVE for label in ("yaml_directive", "tag_directive", "reserved_directive")})

# Tokens that never hold a value of their own
MARKER_KINDS = frozenset({
    NodeKind.SEQUENCE_DASH,
    NodeKind.DOCUMENT_START,
    NodeKind.DOCUMENT_END,
    NodeKind.DIRECTIVE,
    NodeKind.PUNCTUATION,
    NodeKind.COMMENT,
})

SCALAR_SUBKINDS = frozenset({
    NodeKind.STRING_SCALAR,
    NodeKind.INTEGER_SCALAR,
    NodeKind.FLOAT_SCALAR,
    NodeKind.BOOLEAN_SCALAR,
    NodeKind.NULL_SCALAR,
})


def kind_for_label(label: str) -> NodeKind:
    return KIND_BY_LABEL.get(label, NodeKind.UNKNOWN)


@dataclass(frozen=True)
class CstNode:
    """
    A backend-independent concrete syntax tree node.

    Positions are zero-based (row, column) pairs as most parser libraries
    report them; `line` and `column` give the 1-based form for messages.
    `text` is filled for scalar, subkind and comment nodes only.
    """
    kind: NodeKind
    label: str
    start: Tuple[int, int] = (0, 0)
    end: Tuple[int, int] = (0, 0)
    byte_range: Tuple[int, int] = (0, 0)
    children: Tuple["CstNode", ...] = ()
    fields: Dict[str, "CstNode"] = field(default_factory=dict, compare=False)
    text: str = ""

    @property
    def start_line(self) -> int:
        return self.start[0]

    @property
    def end_line(self) -> int:
        return self.end[0]

    @property
    def line(self) -> int:
        return self.start[0] + 1

    @property
    def column(self) -> int:
        return self.start[1] + 1

    def field(self, name: str) -> Optional["CstNode"]:
        return self.fields.get(name)
