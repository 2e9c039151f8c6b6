#!/usr/bin/env python3
"""
YAMDOC VALUE TRANSFORMER - Phase 2
----------------------------------
Maps CST nodes onto the typed document model in a single recursive walk.
Scalars are delegated to the decoder; comments come from the read-only
index held by the ParseContext. Any error aborts the whole walk, so there
is never a partially built document.

Author: YamDoc Team
Date: 2026-01-16
"""

from dataclasses import replace
from typing import List, Optional

from yamdoc.core.errors import StructuralError
from yamdoc.core.models import ListValue, MapItem, MapValue, NullValue, Scalar, format_key
from yamdoc.cst.node import CstNode, NodeKind, MARKER_KINDS
from yamdoc.parsing import scalars
from yamdoc.parsing.context import ParseContext

WRAPPER_KINDS = (NodeKind.STREAM, NodeKind.DOCUMENT)
INDIRECTION_KINDS = (NodeKind.FLOW_NODE, NodeKind.BLOCK_NODE)
QUOTED_KINDS = (NodeKind.SINGLE_QUOTE_SCALAR, NodeKind.DOUBLE_QUOTE_SCALAR)


class ValueTransformer:
    """
    Turns one CST into Scalars. Holds nothing but the shared context, so a
    transformer can be reused for any number of nodes of the same parse.
    """

    def __init__(self, context: ParseContext):
        self.context = context

    def resolve(self, node: CstNode) -> Optional[Scalar]:
        """
        Finds the real content below a stream, document or sequence item.
        Markers and comments are skipped and the first content child wins,
        so only the first document of a stream is ever read.
        Returns None when that first document holds no content at all.
        """
        if node.kind is NodeKind.ERROR:
            raise self._syntax(node)

        for child in node.children:
            if child.kind in WRAPPER_KINDS:
                return self.resolve(child)
            if child.kind in MARKER_KINDS:
                continue
            return self.value(child)
        return None

    def value(self, node: CstNode) -> Scalar:
        """Transforms a content node and attaches its comment."""
        scalar = self.transform(node)
        if scalar.comment is not None or scalar.is_container:
            return scalar

        comment = self.context.comment_for_line(node.start_line)
        if comment is None:
            return scalar
        return replace(scalar, comment=comment)

    def transform(self, node: CstNode) -> Scalar:
        """
        Maps one content node onto a Scalar without looking at comments.
        Raises StructuralError for kinds that cannot hold a value.
        """
        kind = node.kind

        if kind in INDIRECTION_KINDS:
            if not node.children:
                raise self._unexpected(node, f"{node.label} has no child")
            return self.transform(node.children[0])

        if kind is NodeKind.PLAIN_SCALAR:
            return self._plain(node)
        if kind in QUOTED_KINDS:
            return Scalar(scalars.decode_quoted(node.text))
        if kind is NodeKind.BLOCK_SCALAR:
            return Scalar(scalars.decode_block(node.text))

        if kind is NodeKind.BLOCK_SEQUENCE:
            return Scalar(ListValue(tuple(self._block_items(node))))
        if kind is NodeKind.FLOW_SEQUENCE:
            return Scalar(ListValue(tuple(self._flow_items(node))))
        if kind is NodeKind.BLOCK_MAPPING:
            return Scalar(MapValue(tuple(self._block_pairs(node))))
        if kind is NodeKind.FLOW_MAPPING:
            return Scalar(MapValue(tuple(self._flow_pairs(node))))

        if kind is NodeKind.ERROR:
            raise self._syntax(node)

        raise self._unexpected(node)

    def _plain(self, node: CstNode) -> Scalar:
        if not node.children:
            raise self._unexpected(node, "plain scalar has no subkind")

        sub = node.children[0]
        text, line, column = sub.text, sub.line, sub.column
        if sub.kind is NodeKind.STRING_SCALAR:
            return Scalar(scalars.decode_string(text))
        if sub.kind is NodeKind.INTEGER_SCALAR:
            return Scalar(scalars.decode_integer(text, line, column))
        if sub.kind is NodeKind.FLOAT_SCALAR:
            return Scalar(scalars.decode_float(text, line, column))
        if sub.kind is NodeKind.BOOLEAN_SCALAR:
            strict = not self.context.options.lenient_booleans
            return Scalar(scalars.decode_boolean(text, line, column, strict=strict))
        if sub.kind is NodeKind.NULL_SCALAR:
            return Scalar(scalars.decode_null())
        raise self._unexpected(sub)

    def _block_items(self, node: CstNode) -> List[Scalar]:
        items = []
        for child in node.children:
            if child.kind in MARKER_KINDS:
                continue
            if child.kind is not NodeKind.BLOCK_SEQUENCE_ITEM:
                raise self._unexpected(child)
            item = self.resolve(child)
            # `- ` with nothing after the dash
            items.append(item if item is not None else Scalar(NullValue()))
        return items

    def _flow_items(self, node: CstNode) -> List[Scalar]:
        items = []
        for child in node.children:
            if child.kind in MARKER_KINDS:
                continue
            if child.kind is NodeKind.FLOW_PAIR:
                # [a: 1] is a sequence holding a single-pair map
                items.append(Scalar(MapValue((self._pair(child),))))
            else:
                items.append(self.value(child))
        return items

    def _block_pairs(self, node: CstNode) -> List[MapItem]:
        pairs = []
        for child in node.children:
            if child.kind in MARKER_KINDS:
                continue
            if child.kind is not NodeKind.BLOCK_MAPPING_PAIR:
                raise self._unexpected(child)
            pairs.append(self._pair(child))
        return pairs

    def _flow_pairs(self, node: CstNode) -> List[MapItem]:
        pairs = []
        for child in node.children:
            if child.kind is NodeKind.FLOW_PAIR:
                pairs.append(self._pair(child))
            elif child.kind is NodeKind.FLOW_NODE:
                # Key-only entry such as `x` in {x, y:}
                pairs.append(MapItem(self._key(child), Scalar(NullValue())))
            elif child.kind not in MARKER_KINDS:
                raise self._unexpected(child)
        return pairs

    def _pair(self, node: CstNode) -> MapItem:
        key_node = node.field("key")
        if key_node is None:
            raise StructuralError("mandatory map key is missing", node.line, node.column, kind=node.label)

        value_node = node.field("value")
        value = self.value(value_node) if value_node is not None else Scalar(NullValue())
        return MapItem(self._key(key_node), value)

    def _key(self, node: CstNode) -> str:
        key = format_key(self.transform(node))
        if key is None:
            raise StructuralError("complex types cannot be used as map keys",
                                  node.line, node.column, kind=node.label)
        return key

    def _unexpected(self, node: CstNode, message: Optional[str] = None) -> StructuralError:
        return StructuralError(message or f"unexpected node kind {node.label!r}",
                               node.line, node.column, kind=node.label)

    def _syntax(self, node: CstNode) -> StructuralError:
        return StructuralError("invalid YAML syntax", node.line, node.column, kind=node.label)
