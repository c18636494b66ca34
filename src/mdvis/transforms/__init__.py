#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/transforms/__init__.py
"""AST transforms, the transform registry and the render pipeline.

Examples
--------
    >>> from mdvis.transforms import ChartBlockTransform, transform_registry
    >>> doc = ChartBlockTransform(marker="vis").transform(doc)
    >>> transform_registry.list_transforms()
    ['chart-blocks']

"""

from __future__ import annotations

from mdvis.transforms._builtin_metadata import CHART_BLOCKS_METADATA
from mdvis.transforms.chart_blocks import ChartBlockTransform
from mdvis.transforms.metadata import ParameterSpec, TransformMetadata
from mdvis.transforms.pipeline import Pipeline, TransformSpec, apply, render
from mdvis.transforms.registry import TransformRegistry, transform_registry

__all__ = [
    "CHART_BLOCKS_METADATA",
    "ChartBlockTransform",
    "ParameterSpec",
    "Pipeline",
    "TransformMetadata",
    "TransformRegistry",
    "TransformSpec",
    "apply",
    "render",
    "transform_registry",
]
