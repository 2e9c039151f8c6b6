#!/usr/bin/env python3
"""
YAMDOC CLI
----------
Reads a YAML file (or stdin with '-'), parses it, and prints a Markdown
table documenting every value together with its comment.

Author: YamDoc Team
Date: 2026-01-16
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from yamdoc.core.errors import YamDocError
from yamdoc.parsing.context import ParseOptions
from yamdoc.parsing.pipeline import DocumentPipeline
from yamdoc.render.markdown import flatten_document, render_rows
from yamdoc.cli.formatter import YamDocFormatter

VERSION = "0.1.0"

logger = logging.getLogger("yamdoc.cli")


class YamDocCLI:
    """Translates command-line arguments into a pipeline run."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="yamdoc",
            description="yamdoc - document YAML values and their comments as a Markdown table",
        )
        self.formatter = YamDocFormatter()
        self._setup_args()

    def _setup_args(self):
        """Defines the FILE argument and the output and parsing flags."""
        self.parser.add_argument("-v", "--version", action="version", version=f"yamdoc v{VERSION}")
        self.parser.add_argument("file", metavar="FILE", help="YAML file to document, or '-' for stdin")
        self.parser.add_argument("-o", "--output", help="Write the Markdown table to this path")
        self.parser.add_argument("--table", action="store_true", help="Show a terminal table instead of Markdown")
        self.parser.add_argument("--lenient-booleans", action="store_true",
                                 help="Accept True, FALSE and other casings as booleans")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    def _read_source(self, file_arg: str) -> str:
        """Reads FILE, or stdin when FILE is '-'. A UTF-8 BOM is dropped."""
        if file_arg == "-":
            return sys.stdin.read()
        return Path(file_arg).read_text(encoding='utf-8-sig')

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Parses arguments, runs the pipeline and writes the result.
        Returns the process exit code: 0 on success or empty input, 1 on any error.
        """
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        try:
            content = self._read_source(args.file)
        except OSError as e:
            self.formatter.print_error(f"failed to read file: {args.file} ({e})")
            return 1

        pipeline = DocumentPipeline(options=ParseOptions(lenient_booleans=args.lenient_booleans))
        try:
            document = pipeline.run(content)
        except YamDocError as e:
            self.formatter.print_error(str(e))
            return 1

        if document is None:
            logger.info("Nothing to render for %s", args.file)
            return 0

        rows = flatten_document(document)
        if args.table:
            self.formatter.print_table(rows, title=args.file)
            return 0

        markdown = render_rows(rows)
        if args.output:
            try:
                Path(args.output).write_text(markdown + "\n", encoding='utf-8')
            except OSError as e:
                self.formatter.print_error(f"failed to write file: {args.output} ({e})")
                return 1
        else:
            sys.stdout.write(markdown + "\n")
        return 0


def main():
    """Application entry point."""
    try:
        sys.exit(YamDocCLI().run())
    except KeyboardInterrupt:
        YamDocFormatter().print_error("Terminated by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
