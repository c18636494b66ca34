"""Common bases for the frozen options dataclasses."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Adds ``create_updated`` to a frozen dataclass."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields changed.

        The copy goes through ``__post_init__`` again, so invalid values are
        rejected just as in the constructor.
        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options shared by every renderer.

    Parameters
    ----------
    fail_on_chart_errors : bool, default=False
        Raise ``RenderingError`` for a chart block that cannot be decoded.
        Otherwise the block is left out with a logged warning and the rest
        of the document still renders.

    """

    fail_on_chart_errors: bool = field(
        default=False,
        metadata={
            "help": "Raise RenderingError on malformed chart blocks instead of logging warnings",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Hook for field validation; subclasses extend it and call super()."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Options shared by every parser."""
