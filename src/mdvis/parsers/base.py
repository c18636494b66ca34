#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/parsers/base.py
"""Parser base class and input loading."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdvis.ast import Document
from mdvis.exceptions import InvalidOptionsError, ParsingError
from mdvis.options.base import BaseParserOptions

ParserInput = Union[str, bytes, Path, IO[bytes], IO[str]]


class BaseParser(ABC):
    """Turn source text into a ``Document``.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    A ``str`` given to ``parse`` is always document text, never a file name.
    Pass a ``pathlib.Path`` to read from disk.

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Raise InvalidOptionsError unless ``options`` is None or an ``expected_type``."""
        if options is None or isinstance(options, expected_type):
            return
        raise InvalidOptionsError(component_name=parser_name, expected_type=expected_type, received_type=type(options))

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse text, UTF-8 bytes, a path or an open stream into a Document.

        Raises
        ------
        ParsingError
            If the input cannot be read, decoded or parsed

        """

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Return the text behind ``input_data``.

        Bytes from any source are decoded as UTF-8 with an optional BOM.
        Failures surface as ``ParsingError`` with ``parsing_stage`` set to
        ``"input_loading"`` or ``"decoding"``.
        """
        if isinstance(input_data, str):
            return input_data

        if isinstance(input_data, bytes):
            raw = input_data
        elif isinstance(input_data, Path):
            try:
                raw = input_data.read_bytes()
            except OSError as e:
                raise ParsingError(
                    f"Failed to read input file: {input_data}", parsing_stage="input_loading", original_error=e
                ) from e
        elif callable(getattr(input_data, "read", None)):
            content = input_data.read()
            if isinstance(content, str):
                return content
            raw = content
        else:
            raise ParsingError(f"Unsupported input type: {type(input_data).__name__}", parsing_stage="input_loading")

        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParsingError("Input is not valid UTF-8", parsing_stage="decoding", original_error=e) from e


__all__ = ["BaseParser", "ParserInput"]
