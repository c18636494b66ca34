#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/transforms/_builtin_metadata.py
"""Metadata definitions for built-in transforms.

These metadata objects are registered directly by the transform registry
and also exported via the ``mdvis.transforms`` entry point group in
pyproject.toml.

"""

from __future__ import annotations

from mdvis.constants import DEFAULT_CHART_MARKER
from mdvis.transforms.chart_blocks import ChartBlockTransform
from mdvis.transforms.metadata import ParameterSpec, TransformMetadata

CHART_BLOCKS_METADATA = TransformMetadata(
    name="chart-blocks",
    description="Replace fenced code blocks tagged with the chart marker by chart blocks",
    transformer_class=ChartBlockTransform,
    parameters={
        "marker": ParameterSpec(
            type=str,
            default=DEFAULT_CHART_MARKER,
            help="Code block language that marks a chart description",
            validator=lambda value: bool(value.strip()),
        )
    },
    priority=50,
    tags=["charts", "structure"],
    version="1.0.0",
    author="mdvis",
)

BUILTIN_TRANSFORMS: tuple[TransformMetadata, ...] = (CHART_BLOCKS_METADATA,)

__all__ = [
    "BUILTIN_TRANSFORMS",
    "CHART_BLOCKS_METADATA",
]
