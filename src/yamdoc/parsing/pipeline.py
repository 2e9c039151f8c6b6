#!/usr/bin/env python3
"""
YAMDOC PIPELINE - Document Assembler
------------------------------------
Runs one source text through the fixed sequence of phases:

    1. CST build         (backend, e.g. tree-sitter)
    2. Comment capture   (CommentCollector, full-tree walk)
    3. Transformation    (ValueTransformer, single recursive walk)
    4. Classification    (Document, empty, or a raised YamDocError)

An empty result is returned as None and is never an error: callers must
keep "nothing to render" apart from "malformed input".

Author: YamDoc Team
Date: 2026-01-16
"""

import logging
from typing import Optional

from yamdoc.core.models import Document
from yamdoc.parsing.comments import CommentCollector
from yamdoc.parsing.context import ParseContext, ParseOptions
from yamdoc.parsing.transformer import ValueTransformer

logger = logging.getLogger("yamdoc.pipeline")


def normalize_source(text: str) -> str:
    """Strips a UTF-8 BOM and standardises line endings to LF."""
    text = text.lstrip('\ufeff')
    return text.replace('\r\n', '\n')


class DocumentPipeline:
    """
    The orchestrator. A backend is anything with `parse(text) -> CstNode`;
    the tree-sitter backend is created lazily when none is given.
    """

    def __init__(self, backend=None, options: Optional[ParseOptions] = None):
        if backend is None:
            from yamdoc.cst.treesitter import TreeSitterBackend
            backend = TreeSitterBackend()
        self.backend = backend
        self.options = options or ParseOptions()
        self.collector = CommentCollector()

    def run(self, text: str) -> Optional[Document]:
        """
        Parses one source text. Returns None when the first document is empty;
        raises YamDocError subclasses on malformed input.
        """
        source = normalize_source(text)

        # --- PHASE 1: CST ---
        root = self.backend.parse(source)
        logger.debug("CST built: root kind %s with %d children", root.label, len(root.children))

        # --- PHASE 2: COMMENT CAPTURE ---
        comments = self.collector.collect(root)
        logger.debug("Indexed %d comment run(s)", len(comments))

        # --- PHASE 3: TRANSFORMATION ---
        context = ParseContext(source=source, comments=comments, options=self.options)
        root_scalar = ValueTransformer(context).resolve(root)

        # --- PHASE 4: CLASSIFICATION ---
        if root_scalar is None:
            logger.debug("No content node found, document is empty")
            return None
        return Document(root=root_scalar)


def parse(text: str, options: Optional[ParseOptions] = None) -> Optional[Document]:
    """
    Parses YAML text into a Document.
    Returns None for blank or comment-only input; raises YamDocError otherwise.
    """
    return DocumentPipeline(options=options).run(text)
