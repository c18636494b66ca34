#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdvis.constants import DEFAULT_CHART_LIBRARY_URL, DEFAULT_HTML_LANGUAGE
from mdvis.options.base import BaseRendererOptions
from mdvis.options.chart import ChartOptions


# src/mdvis/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """How HtmlRenderer writes HTML.

    Parameters
    ----------
    standalone : bool, default False
        Emit a full page (doctype, head and body) rather than a fragment.
    syntax_highlighting : bool, default True
        Put a ``language-*`` class on code blocks with a language.
    escape_html : bool, default True
        Escape text and code content. Raw HTML nodes are never escaped.
    language : str, default "en"
        ``lang`` of the page; ``Document.metadata["language"]`` wins.
    allow_remote_scripts : bool, default False
        Let standalone pages load Chart.js from ``chart_library_url``. When
        off and the page has charts, a warning is logged and the host page
        must supply Chart.js.
    chart_library_url : str
        Chart.js script URL for standalone pages.
    chart : ChartOptions
        Chart block selection and markup.

    Examples
    --------
        >>> HtmlRendererOptions(standalone=True, allow_remote_scripts=True)
        >>> HtmlRendererOptions(fail_on_chart_errors=True)

    """

    standalone: bool = field(
        default=False,
        metadata={
            "help": "Generate complete HTML document (vs content fragment)",
            "importance": "core",
        },
    )
    syntax_highlighting: bool = field(
        default=True,
        metadata={
            "help": "Add language classes for syntax highlighting",
            "importance": "core",
        },
    )
    escape_html: bool = field(
        default=True,
        metadata={
            "help": "Escape HTML special characters in text",
            "importance": "security",
        },
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code (ISO 639-1) for HTML lang attribute", "importance": "advanced"},
    )
    allow_remote_scripts: bool = field(
        default=False,
        metadata={
            "help": "Allow loading the Chart.js library from a CDN in standalone documents. "
            "Off by default; standalone pages then rely on the host page for Chart.js.",
            "importance": "security",
        },
    )
    chart_library_url: str = field(
        default=DEFAULT_CHART_LIBRARY_URL,
        metadata={"help": "URL of the Chart.js script for standalone documents", "importance": "advanced"},
    )
    chart: ChartOptions = field(
        default_factory=ChartOptions,
        metadata={"help": "Chart block options", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Reject remote script loading without a library URL."""
        super().__post_init__()

        if self.allow_remote_scripts and not self.chart_library_url:
            raise ValueError("allow_remote_scripts=True requires chart_library_url to be set")
