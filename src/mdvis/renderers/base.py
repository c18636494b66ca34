#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/renderers/base.py
"""Renderer base class and shared helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdvis.ast import Document
from mdvis.ast.nodes import Node
from mdvis.exceptions import InvalidOptionsError
from mdvis.options.base import BaseRendererOptions
from mdvis.utils.io_utils import write_content

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Turn a ``Document`` into text.

    Subclasses implement ``render_to_string``; ``render`` writes that text
    to a path or stream.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Return the rendered document.

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render ``doc`` and write the result to ``output``.

        A ``str`` or ``Path`` is a file to (over)write as UTF-8; a text or
        binary stream is written to directly.
        """
        write_content(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Raise InvalidOptionsError unless ``options`` is None or an ``expected_type``."""
        if options is None or isinstance(options, expected_type):
            return
        raise InvalidOptionsError(
            component_name=renderer_name, expected_type=expected_type, received_type=type(options)
        )


class InlineContentMixin:
    """Render inline nodes to a string for visitors that append to ``_output``."""

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        outer, self._output = self._output, []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = outer


__all__ = ["BaseRenderer", "InlineContentMixin", "OutputTarget"]
