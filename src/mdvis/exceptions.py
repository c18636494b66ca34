#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by mdvis.

Every error the library raises on purpose derives from ``MdvisError``::

    MdvisError
      ValidationError
        InvalidOptionsError
      ParsingError
        ChartParseError
      RenderingError
      TransformError

Each carries the human-readable ``message`` and, when it wraps a lower level
failure, that exception as ``original_error``. Callers raising from an
``except`` block should also chain with ``raise ... from e``.

"""

from __future__ import annotations

from enum import Enum
from typing import Any


class MdvisError(Exception):
    """Root of the mdvis exception hierarchy.

    Parameters
    ----------
    message : str
        Human-readable description
    original_error : Exception, optional
        Lower level exception being wrapped

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdvisError):
    """A parameter or option has an unacceptable value."""

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A parser or renderer was given the options class of another component.

    ``parameter_value`` holds the class that was received.

    Examples
    --------
        >>> HtmlRenderer(MarkdownParserOptions())
        Traceback (most recent call last):
        ...
        InvalidOptionsError: html expected options of type 'HtmlRendererOptions' but received 'MarkdownParserOptions'.

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type
        super().__init__(
            message
            or f"{component_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'.",
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )


class ParsingError(MdvisError):
    """Input could not be turned into an AST.

    ``parsing_stage`` names where it failed: ``"input_loading"``,
    ``"decoding"`` or ``"chart"``.
    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class ChartErrorKind(Enum):
    """Why a chart description was rejected."""

    MISSING_FIELD = "missing_field"
    MALFORMED_DATA = "malformed_data"


class ChartParseError(ParsingError):
    """A chart description is incomplete or its data cannot be decoded.

    Parameters
    ----------
    message : str
        e.g. ``"layout not found"``
    kind : ChartErrorKind
        Failure category
    field : str, optional
        The absent field, for ``MISSING_FIELD``
    original_error : Exception, optional
        The JSON decoding error, for ``MALFORMED_DATA``

    """

    def __init__(
        self,
        message: str,
        kind: ChartErrorKind,
        field: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, parsing_stage="chart", original_error=original_error)
        self.kind = kind
        self.field = field

    @property
    def cause(self) -> str | None:
        """Text of the wrapped decoding error, or None."""
        return None if self.original_error is None else str(self.original_error)


class RenderingError(MdvisError):
    """Output could not be produced; ``rendering_stage`` is ``"chart"`` for chart failures."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class TransformError(MdvisError):
    """A transform in a pipeline returned something other than a ``Document``."""

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.transform_name = transform_name


__all__ = [
    "ChartErrorKind",
    "ChartParseError",
    "InvalidOptionsError",
    "MdvisError",
    "ParsingError",
    "RenderingError",
    "TransformError",
    "ValidationError",
]
