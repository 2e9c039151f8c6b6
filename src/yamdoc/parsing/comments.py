#!/usr/bin/env python3
"""
YAMDOC COMMENT COLLECTOR
------------------------
The grammar exposes comments as sibling tokens, not as attributes of the
value they document. Before the transformer runs, this pass walks the
whole tree once and builds a read-only index:

    line of the last comment in a run -> merged comment text

A run is a sequence of comment siblings with no other node between them.
The transformer later looks a value up by its own line (inline comment)
and by the line above it (comment written on top).

Author: YamDoc Team
Date: 2026-01-16
"""

from typing import Dict, List, Sequence

from yamdoc.cst.node import CstNode, NodeKind

CommentIndex = Dict[int, str]


def clean_comment(text: str) -> str:
    """Removes the '#' marker(s) and surrounding whitespace."""
    return text.strip().lstrip('#').strip()


def merge_comments(run: Sequence[CstNode]) -> str:
    parts = [clean_comment(node.text) for node in run]
    return " ".join(part for part in parts if part)


class CommentCollector:
    """Builds the line-indexed comment table for one CST."""

    def collect(self, root: CstNode) -> CommentIndex:
        """Returns line -> merged comment text for every comment run in the tree."""
        index: CommentIndex = {}
        self._walk(root, index)
        return index

    def _walk(self, node: CstNode, index: CommentIndex):
        children = node.children
        i = 0
        while i < len(children):
            child = children[i]
            if child.kind is not NodeKind.COMMENT:
                self._walk(child, index)
                i += 1
                continue

            run: List[CstNode] = [child]
            i += 1
            while i < len(children) and children[i].kind is NodeKind.COMMENT:
                run.append(children[i])
                i += 1

            merged = merge_comments(run)
            if merged:
                index[run[-1].end_line] = merged


def collect_comments(root: CstNode) -> CommentIndex:
    return CommentCollector().collect(root)
