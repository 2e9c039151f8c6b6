#!/usr/bin/env python3
"""
YAMDOC TREE-SITTER BACKEND
--------------------------
Runs the tree-sitter YAML grammar and converts its tree into CstNode
objects. This is the only module that imports tree-sitter.

Author: YamDoc Team
Date: 2026-01-16
"""

import logging
from typing import List, Dict, Optional

import tree_sitter
import tree_sitter_yaml

from yamdoc.core.errors import BackendError, StructuralError
from yamdoc.cst.node import CstNode, NodeKind, SCALAR_SUBKINDS, kind_for_label

logger = logging.getLogger("yamdoc.cst")

# Nodes whose source text the transformer or the comment collector reads
TEXT_KINDS = SCALAR_SUBKINDS | {
    NodeKind.SINGLE_QUOTE_SCALAR,
    NodeKind.DOUBLE_QUOTE_SCALAR,
    NodeKind.BLOCK_SCALAR,
    NodeKind.COMMENT,
}


class TreeSitterBackend:
    """Produces a CstNode tree from YAML source text."""

    def __init__(self):
        """Loads the YAML grammar; raises BackendError if it cannot be loaded."""
        try:
            self.language = tree_sitter.Language(tree_sitter_yaml.language())
            self.parser = tree_sitter.Parser(self.language)
        except (TypeError, ValueError) as e:
            raise BackendError(f"failed to load the YAML grammar: {e}") from e

    def parse(self, text: str) -> CstNode:
        """
        Parses source text into a CstNode tree.
        Raises StructuralError at the first spot the grammar could not parse.
        """
        source = text.encode("utf-8")
        tree = self.parser.parse(source)
        if tree is None:
            raise BackendError("failed to parse YAML document")

        root = tree.root_node
        if root.has_error:
            raise self._syntax_error(root)
        return self._convert(root.walk(), source)

    def _syntax_error(self, root: "tree_sitter.Node") -> StructuralError:
        """Locates the first ERROR or missing node, depth first."""
        node = root
        while True:
            if node.type == "ERROR" or node.is_missing:
                break
            broken = [child for child in node.children if child.has_error or child.is_missing]
            if not broken:
                break
            node = broken[0]

        line, column = node.start_point[0] + 1, node.start_point[1] + 1
        if node.is_missing:
            message = f"invalid YAML syntax: missing {node.type!r}"
        else:
            message = "invalid YAML syntax"
        logger.debug("Grammar error node %s at %d:%d", node.type, line, column)
        return StructuralError(message, line, column, kind=node.type)

    def _convert(self, cursor: "tree_sitter.TreeCursor", source: bytes) -> CstNode:
        """
        Converts the node under the cursor. A cursor walk is used instead of
        Node.children because only the cursor reports each child's field name.
        """
        node = cursor.node
        kind = kind_for_label(node.type)

        children: List[CstNode] = []
        fields: Dict[str, CstNode] = {}
        if cursor.goto_first_child():
            while True:
                field_name: Optional[str] = cursor.field_name
                child = self._convert(cursor, source)
                children.append(child)
                if field_name and field_name not in fields:
                    fields[field_name] = child
                if not cursor.goto_next_sibling():
                    break
            cursor.goto_parent()

        text = ""
        if kind in TEXT_KINDS:
            text = source[node.start_byte:node.end_byte].decode("utf-8")

        return CstNode(
            kind=kind,
            label=node.type,
            start=(node.start_point[0], node.start_point[1]),
            end=(node.end_point[0], node.end_point[1]),
            byte_range=(node.start_byte, node.end_byte),
            children=tuple(children),
            fields=fields,
            text=text,
        )
