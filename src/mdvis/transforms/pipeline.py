#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/transforms/pipeline.py
"""Pipeline orchestration for AST transformation and rendering.

The pipeline resolves transforms by name or instance, applies them in order
and renders the result to HTML.

Examples
--------
Apply the chart transform only:

    >>> from mdvis.transforms import apply
    >>> doc = apply(doc, transforms=["chart-blocks"])

Transform and render:

    >>> from mdvis.transforms import render
    >>> html = render(doc, transforms=["chart-blocks"])

"""

from __future__ import annotations

import logging
from typing import Optional, Union

from mdvis.ast.nodes import Document
from mdvis.ast.transforms import NodeTransformer
from mdvis.exceptions import TransformError
from mdvis.options.html import HtmlRendererOptions
from mdvis.renderers.html import HtmlRenderer
from mdvis.transforms.registry import transform_registry

logger = logging.getLogger(__name__)

TransformSpec = Union[str, NodeTransformer]


class Pipeline:
    """Pipeline for transforming and rendering AST documents.

    Parameters
    ----------
    transforms : list, optional
        Transforms to apply, as registered names or NodeTransformer instances.
        Named transforms are expanded in place with their dependencies.
    renderer : HtmlRenderer, optional
        Renderer to use. Defaults to an HtmlRenderer built from ``options``.
    options : HtmlRendererOptions, optional
        Options for the default renderer (ignored when ``renderer`` is given)

    Examples
    --------
        >>> pipeline = Pipeline(transforms=["chart-blocks"])
        >>> html = pipeline.execute(document)

    """

    def __init__(
        self,
        transforms: Optional[list[TransformSpec]] = None,
        renderer: Optional[HtmlRenderer] = None,
        options: Optional[HtmlRendererOptions] = None,
    ):
        """Initialize pipeline with transforms and renderer."""
        self.transforms = transforms or []
        self.registry = transform_registry
        self.renderer = renderer if renderer is not None else HtmlRenderer(options or HtmlRendererOptions())

    def _resolve_transforms(self) -> list[NodeTransformer]:
        """Resolve transform names/instances to an ordered list of instances.

        Raises
        ------
        TypeError
            If a transform is not a string or NodeTransformer
        ValueError
            If a transform name is not registered

        """
        result: list[NodeTransformer] = []
        seen_names: set[str] = set()

        for t in self.transforms:
            if isinstance(t, NodeTransformer):
                result.append(t)
            elif isinstance(t, str):
                if t in seen_names:
                    continue
                for name in self.registry.resolve_dependencies([t]):
                    if name not in seen_names:
                        result.append(self.registry.get_transform(name))
                        seen_names.add(name)
            else:
                raise TypeError(f"Transform must be str or NodeTransformer, got {type(t).__name__}")

        logger.debug("Resolved %d transform(s) for execution", len(result))
        return result

    def apply_transforms(self, document: Document) -> Document:
        """Apply all transforms in order.

        Raises
        ------
        TransformError
            If a transform does not return a Document

        """
        result = document
        for transformer in self._resolve_transforms():
            transform_name = transformer.__class__.__name__
            logger.debug("Applying transform: %s", transform_name)

            transformed = transformer.transform(result)
            if not isinstance(transformed, Document):
                raise TransformError(
                    f"Transform {transform_name} must return Document, got {type(transformed).__name__}",
                    transform_name=transform_name,
                )
            result = transformed

        return result

    def execute(self, document: Document) -> str:
        """Apply transforms and render the document to HTML."""
        return self.renderer.render_to_string(self.apply_transforms(document))


def apply(document: Document, transforms: Optional[list[TransformSpec]] = None) -> Document:
    """Apply transforms to a document without rendering.

    Parameters
    ----------
    document : Document
        AST document to process
    transforms : list, optional
        Transform names or NodeTransformer instances

    Returns
    -------
    Document
        Transformed document

    """
    return Pipeline(transforms=transforms).apply_transforms(document)


def render(
    document: Document,
    transforms: Optional[list[TransformSpec]] = None,
    renderer: Optional[HtmlRenderer] = None,
    options: Optional[HtmlRendererOptions] = None,
) -> str:
    """Apply transforms to a document and render it to HTML.

    Parameters
    ----------
    document : Document
        AST document to process
    transforms : list, optional
        Transform names or NodeTransformer instances
    renderer : HtmlRenderer, optional
        Pre-configured renderer
    options : HtmlRendererOptions, optional
        Options for the default renderer

    Returns
    -------
    str
        Rendered HTML

    """
    return Pipeline(transforms=transforms, renderer=renderer, options=options).execute(document)


__all__ = [
    "Pipeline",
    "TransformSpec",
    "apply",
    "render",
]
