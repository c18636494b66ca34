#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/mdvis/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from mdvis.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    preserve_html : bool, default True
        Whether to keep raw HTML as HTMLBlock/HTMLInline nodes. When False,
        raw HTML is dropped from the AST.

    """

    parse_strikethrough: bool = field(
        default=True,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "importance": "core",
        },
    )
    preserve_html: bool = field(
        default=True,
        metadata={
            "help": "Keep raw HTML blocks and inline HTML in the AST",
            "importance": "security",
        },
    )
