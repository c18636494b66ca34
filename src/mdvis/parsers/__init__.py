#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn source documents into the mdvis AST."""

from mdvis.parsers.base import BaseParser, ParserInput
from mdvis.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["BaseParser", "MarkdownParser", "ParserInput", "markdown_to_ast"]
