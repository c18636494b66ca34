#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the mdvis AST into output formats."""

from mdvis.renderers.base import BaseRenderer, InlineContentMixin
from mdvis.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin"]
