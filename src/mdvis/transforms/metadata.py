#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/transforms/metadata.py
"""Descriptions of registrable transforms.

A ``TransformMetadata`` names a ``NodeTransformer`` subclass and declares
the constructor parameters it accepts, so the transform can be created by
name from the registry or from a plugin's ``mdvis.transforms`` entry point.

Examples
--------
    >>> class DropHtmlTransform(NodeTransformer):
    ...     def visit_html_block(self, node):
    ...         return None
    ...
    >>> METADATA = TransformMetadata(
    ...     name="drop-html",
    ...     description="Remove raw HTML blocks",
    ...     transformer_class=DropHtmlTransform,
    ... )

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type

from mdvis.ast.transforms import NodeTransformer

logger = logging.getLogger(__name__)


@dataclass
class ParameterSpec:
    """A constructor parameter accepted by a transform.

    Parameters
    ----------
    type : type
        Expected Python type of the value
    default : Any, optional
        Value passed when the caller omits the parameter; None passes nothing
    help : str, optional
        One-line description
    required : bool, default = False
        Whether the caller must supply the parameter
    choices : list, optional
        Allowed values
    validator : callable, optional
        Extra check returning False (or raising ValueError) for bad values

    Examples
    --------
        >>> marker = ParameterSpec(type=str, default="vis", help="Chart block marker")

    """

    type: Type
    default: Any = None
    help: str = ""
    required: bool = False
    choices: Optional[list[Any]] = None
    validator: Optional[Callable[[Any], bool]] = None

    def validate(self, value: Any) -> bool:
        """Check ``value`` against the type, the choices and the validator.

        Returns True for a valid value and raises ValueError otherwise.
        """
        problem = None
        if not isinstance(value, self.type):
            problem = f"Expected type {self.type.__name__}, got {type(value).__name__}"
        elif self.choices is not None and value not in self.choices:
            problem = f"Value must be one of {self.choices}, got {value!r}"
        elif self.validator is not None and not self.validator(value):
            problem = f"Validation failed for value: {value!r}"

        if problem:
            raise ValueError(problem)
        return True


@dataclass
class TransformMetadata:
    """Registration record for a transform.

    Parameters
    ----------
    name : str
        Unique registry name, e.g. ``"chart-blocks"``
    description : str
        What the transform does
    transformer_class : type[NodeTransformer]
        Class instantiated by ``create_instance``
    parameters : dict[str, ParameterSpec], default = empty dict
        Accepted constructor parameters
    priority : int, default = 100
        Ordering hint, lower first, between transforms with no dependency
        relation
    dependencies : list[str], default = empty list
        Transforms that must run first
    version : str, default = "1.0.0"
    author : str, optional
    tags : list[str], default = empty list
        Labels used by ``TransformRegistry.list_transforms``

    """

    name: str
    description: str
    transformer_class: Type[NodeTransformer]
    parameters: dict[str, ParameterSpec] = field(default_factory=dict)
    priority: int = 100
    dependencies: list[str] = field(default_factory=list)
    version: str = "1.0.0"
    author: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Reject unnamed transforms, non-transformer classes and negative priorities."""
        if not self.name:
            raise ValueError("Transform name cannot be empty")
        if not (isinstance(self.transformer_class, type) and issubclass(self.transformer_class, NodeTransformer)):
            raise ValueError(f"transformer_class must inherit from NodeTransformer, got {self.transformer_class!r}")
        if self.priority < 0:
            raise ValueError(f"Priority must be non-negative, got {self.priority}")

    def create_instance(self, **kwargs: Any) -> NodeTransformer:
        """Instantiate the transform.

        Supplied values are validated against their ``ParameterSpec``;
        omitted ones fall back to the ParameterSpec default. Names not declared in
        ``parameters`` are dropped with a warning.

        Raises
        ------
        ValueError
            If a required parameter is missing, a value is invalid, or the
            constructor rejects the arguments

        """
        unknown = sorted(set(kwargs) - set(self.parameters))
        if unknown:
            logger.warning(
                "Transform '%s' received unknown parameter(s): %s", self.name, ", ".join(unknown)
            )

        arguments: dict[str, Any] = {}
        for param_name, spec in self.parameters.items():
            if param_name not in kwargs:
                if spec.required:
                    raise ValueError(f"Required parameter '{param_name}' not provided for '{self.name}'")
                if spec.default is not None:
                    arguments[param_name] = spec.default
                continue
            spec.validate(kwargs[param_name])
            arguments[param_name] = kwargs[param_name]

        try:
            return self.transformer_class(**arguments)
        except TypeError as e:
            raise ValueError(f"Failed to create transform '{self.name}': {e}") from e


__all__ = [
    "ParameterSpec",
    "TransformMetadata",
]
