"""HTML-related utility helpers."""

from __future__ import annotations

import json
import re
from html import escape as _html_escape
from typing import Any

# Characters that must not appear literally inside an inline <script> element
_SCRIPT_UNSAFE_CHARS = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}
_SCRIPT_UNSAFE_PATTERN = re.compile("[<>&]")


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def to_script_literal(value: Any) -> str:
    """Serialize a value as a JavaScript literal safe to embed in a <script> element.

    The value is encoded as JSON with non-ASCII characters escaped, which
    covers U+2028 and U+2029. ``<``, ``>`` and ``&`` are then replaced by
    their ``\\uXXXX`` escapes so that text such as ``</script>`` or ``<!--``
    inside user-supplied strings cannot end the script element.

    Parameters
    ----------
    value : Any
        JSON-serializable value

    Returns
    -------
    str
        JavaScript literal text

    Examples
    --------
    >>> to_script_literal({"title": "</script>"})
    '{"title": "\\\\u003c/script\\\\u003e"}'

    """
    encoded = json.dumps(value, ensure_ascii=True, allow_nan=False)
    return _SCRIPT_UNSAFE_PATTERN.sub(lambda match: _SCRIPT_UNSAFE_CHARS[match.group(0)], encoded)


__all__ = ["escape_html", "to_script_literal"]
