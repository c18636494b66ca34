#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/charts/normalize.py
"""Normalization of the lenient chart data dialect into strict JSON.

Chart authors write the ``data:`` array in a relaxed form: bare ``key``/``value``
object keys, single-quoted strings, trailing commas and an optional closing
bracket. Each rule below rewrites one of those forms. The rules interact, so
they are applied in the fixed order given by ``DATA_NORMALIZERS``.

Examples
--------
    >>> normalize_data_text("{key: 'a', value: 1},")
    '[{"key": "a", "value": 1}]'

"""

from __future__ import annotations

import json
import logging
import math
import numbers
import re
from typing import Any, Callable

from mdvis.charts.models import ChartKey, ChartPoint
from mdvis.constants import DATA_OBJECT_KEYS

logger = logging.getLogger(__name__)

_BARE_KEY_PATTERN = re.compile(r"(?<![\w\"'])(" + "|".join(DATA_OBJECT_KEYS) + r")\s*:")
_TRAILING_COMMA_PATTERN = re.compile(r",\s*([}\]])")
_NUMERIC_LITERAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def rewrap_brackets(text: str) -> str:
    """Ensure the data text is wrapped in exactly one pair of square brackets.

    One trailing ``]`` is removed, surrounding whitespace is stripped, and
    the brackets are then added back where missing. Applying the rule to its
    own output gives the same result.

    Parameters
    ----------
    text : str
        Raw data buffer

    Returns
    -------
    str
        Text starting with ``[`` and ending with ``]``

    """
    text = text.strip()
    if text.endswith("]"):
        text = text[:-1]
    text = text.strip()
    if not text.startswith("["):
        text = "[" + text
    return text + "]"


def quote_bare_keys(text: str) -> str:
    """Quote bare ``key:`` and ``value:`` object keys."""
    return _BARE_KEY_PATTERN.sub(r'"\1":', text)


def convert_single_quotes(text: str) -> str:
    """Replace every single quote with a double quote."""
    return text.replace("'", '"')


def strip_trailing_commas(text: str) -> str:
    """Remove commas that directly precede a closing brace or bracket."""
    return _TRAILING_COMMA_PATTERN.sub(r"\1", text)


DATA_NORMALIZERS: tuple[Callable[[str], str], ...] = (
    rewrap_brackets,
    quote_bare_keys,
    convert_single_quotes,
    strip_trailing_commas,
)


def normalize_data_text(text: str) -> str:
    """Apply every rule in ``DATA_NORMALIZERS`` in order."""
    for normalizer in DATA_NORMALIZERS:
        text = normalizer(text)
    return text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed")


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _require_finite(value: Any, what: str) -> float:
    try:
        number = float(value)
    except OverflowError as exc:
        raise ValueError(f"{what} is out of range") from exc
    if not math.isfinite(number):
        raise ValueError(f"{what} is not finite")
    return number


def decode_points(text: str) -> list[ChartPoint]:
    """Decode normalized data text into chart points.

    Parameters
    ----------
    text : str
        Output of ``normalize_data_text``

    Returns
    -------
    list of ChartPoint
        Points in source order

    Raises
    ------
    ValueError
        If the text is not valid JSON (``json.JSONDecodeError`` is a subclass),
        is nested deeper than the decoder allows, contains NaN or Infinity, or
        is not a non-empty array of objects with a string or numeric ``key``
        and a numeric ``value``

    """
    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("data is nested too deeply") from exc
    if not isinstance(decoded, list):
        raise ValueError(f"expected an array of points, got {type(decoded).__name__}")
    if not decoded:
        raise ValueError("data array is empty")

    points = []
    for index, entry in enumerate(decoded):
        if not isinstance(entry, dict):
            raise ValueError(f"point {index} is not an object")
        if "key" not in entry:
            raise ValueError(f"point {index} has no key")
        if "value" not in entry:
            raise ValueError(f"point {index} has no value")

        key = entry["key"]
        value = entry["value"]
        if not isinstance(key, str) and not _is_number(key):
            raise ValueError(f"point {index} key must be a string or number, got {type(key).__name__}")
        if not _is_number(value):
            raise ValueError(f"point {index} value must be a number, got {type(value).__name__}")
        if not isinstance(key, str):
            _require_finite(key, f"point {index} key")

        points.append(ChartPoint(key=key, value=_require_finite(value, f"point {index} value")))

    logger.debug("Decoded %d chart points", len(points))
    return points


def is_numeric_key(key: ChartKey) -> bool:
    """Return True if a key is a number or a string holding a numeric literal.

    Examples
    --------
    >>> is_numeric_key("3.5"), is_numeric_key(" 1e3 "), is_numeric_key("abc")
    (True, True, False)

    """
    if isinstance(key, str):
        return _NUMERIC_LITERAL_PATTERN.match(key.strip()) is not None
    return _is_number(key)


def keys_are_numeric(points: list[ChartPoint]) -> bool:
    """Return True if every point key is numeric."""
    return all(is_numeric_key(point.key) for point in points)
