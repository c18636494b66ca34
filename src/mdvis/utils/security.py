#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/utils/security.py
"""Input sanitization helpers for parsed Markdown."""

from __future__ import annotations

import logging
import re

from mdvis.constants import MAX_LANGUAGE_IDENTIFIER_LENGTH, SAFE_LANGUAGE_IDENTIFIER_PATTERN

logger = logging.getLogger(__name__)

_SAFE_LANGUAGE = re.compile(SAFE_LANGUAGE_IDENTIFIER_PATTERN)


def sanitize_language_identifier(language: str) -> str:
    r"""Return the stripped fence language, or "" if it is unsafe.

    The identifier lands in a ``class`` attribute and selects chart blocks,
    so only letters, digits, ``_``, ``-`` and ``+`` are allowed.

    Examples
    --------
    >>> sanitize_language_identifier("c++")
    'c++'
    >>> sanitize_language_identifier("vis\"onclick")
    ''

    """
    candidate = (language or "").strip()
    if len(candidate) > MAX_LANGUAGE_IDENTIFIER_LENGTH:
        logger.warning(
            "Language identifier exceeds maximum length (%d): %s...", MAX_LANGUAGE_IDENTIFIER_LENGTH, candidate[:50]
        )
        return ""
    if candidate and not _SAFE_LANGUAGE.match(candidate):
        logger.warning("Blocked language identifier containing invalid characters: %s", candidate[:50])
        return ""
    return candidate
