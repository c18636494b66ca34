#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/utils/text.py
"""Text helpers for generated HTML identifiers."""

from __future__ import annotations

import itertools
import re
import unicodedata
from typing import Set

_SEPARATORS = re.compile(r"[\s_-]+")
_DISALLOWED = re.compile(r"[^a-z0-9\s_-]")
FALLBACK_SLUG = "section"


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = 100) -> str:
    """Make a lowercase ASCII anchor from ``text``.

    Accents are stripped, runs of whitespace, underscores and hyphens
    collapse to one hyphen, and any other punctuation is removed. Text
    with nothing left becomes ``"section"``.

    Parameters
    ----------
    text : str
        Heading text or similar
    seen_slugs : Set[str] or None, default = None
        Slugs already handed out. On a collision ``-2``, ``-3``... is
        appended; the returned slug is added to the set.
    max_length : int, default = 100
        Length cap applied before any collision suffix

    Examples
    --------
        >>> slugify("Café résumé")
        'cafe-resume'
        >>> seen = set()
        >>> slugify("Intro", seen_slugs=seen), slugify("Intro", seen_slugs=seen)
        ('intro', 'intro-2')

    """
    ascii_text = "".join(c for c in unicodedata.normalize("NFD", text) if unicodedata.category(c) != "Mn")
    slug = _SEPARATORS.sub("-", _DISALLOWED.sub("", ascii_text.lower())).strip("-")
    slug = slug[:max_length].rstrip("-") or FALLBACK_SLUG

    if seen_slugs is None:
        return slug
    if slug in seen_slugs:
        slug = next(f"{slug}-{n}" for n in itertools.count(2) if f"{slug}-{n}" not in seen_slugs)
    seen_slugs.add(slug)
    return slug


__all__ = ["slugify"]
