#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/transforms/registry.py
"""Registry of named transforms.

The built-in chart transform is registered the first time the registry is
queried, together with any plugin published under the ``mdvis.transforms``
entry point group.

Examples
--------
    >>> from mdvis.transforms import transform_registry
    >>> transformer = transform_registry.get_transform("chart-blocks", marker="chart")
    >>> transform_registry.list_transforms(tags=["charts"])
    ['chart-blocks']

"""

from __future__ import annotations

import graphlib
import heapq
import importlib.metadata
import logging
from typing import TYPE_CHECKING, Any, Optional

from mdvis.ast.transforms import NodeTransformer

if TYPE_CHECKING:
    from mdvis.transforms.metadata import TransformMetadata

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "mdvis.transforms"


class TransformRegistry:
    """Process-wide map from transform name to ``TransformMetadata``.

    ``TransformRegistry()`` always returns the same object; use the module
    level ``transform_registry``.
    """

    _instance: Optional[TransformRegistry] = None
    _transforms: dict[str, TransformMetadata]
    _initialized: bool

    def __new__(cls) -> TransformRegistry:
        """Return the shared registry, creating it on first use."""
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._transforms = {}
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self._initialized = True
            self.discover_plugins()

    def register(self, metadata: TransformMetadata) -> None:
        """Add a transform under ``metadata.name``.

        Registering the same object twice is a no-op. A different object
        under a taken name replaces the old one with a warning.
        """
        current = self._transforms.get(metadata.name)
        if current is metadata:
            return
        if current is not None:
            logger.warning("Transform '%s' already registered, replacing it", metadata.name)
        self._transforms[metadata.name] = metadata
        logger.debug("Registered transform: %s", metadata.name)

    def unregister(self, name: str) -> bool:
        """Remove a transform; return False if it was not registered."""
        removed = self._transforms.pop(name, None)
        if removed is None:
            return False
        logger.debug("Unregistered transform: %s", name)
        return True

    def get_metadata(self, name: str) -> TransformMetadata:
        """Return the metadata registered under ``name``.

        Raises
        ------
        KeyError
            If no transform has that name

        """
        self._ensure_initialized()
        try:
            return self._transforms[name]
        except KeyError:
            raise KeyError(f"Transform '{name}' not registered") from None

    def get_transform(self, name: str, **kwargs: Any) -> NodeTransformer:
        """Create the transform registered under ``name``.

        Parameters
        ----------
        name : str
            Registered transform name
        **kwargs
            Constructor parameters, validated against the metadata

        Returns
        -------
        NodeTransformer
            New transform instance

        Raises
        ------
        KeyError
            If no transform has that name
        ValueError
            If a parameter is missing or invalid

        """
        return self.get_metadata(name).create_instance(**kwargs)

    def has_transform(self, name: str) -> bool:
        """Return True if a transform is registered under ``name``."""
        self._ensure_initialized()
        return name in self._transforms

    def list_transforms(self, tags: Optional[list[str]] = None) -> list[str]:
        """Return registered names in alphabetical order.

        With ``tags``, only transforms carrying at least one of them are listed.
        """
        self._ensure_initialized()
        wanted = set(tags) if tags is not None else None
        return sorted(
            name for name, metadata in self._transforms.items() if wanted is None or wanted.intersection(metadata.tags)
        )

    def discover_plugins(self) -> int:
        """Register the built-in transforms, then entry-point plugins.

        Entry points that fail to load or do not yield ``TransformMetadata``
        are skipped with a warning.

        Returns
        -------
        int
            Number of plugins registered from entry points

        """
        from mdvis.transforms._builtin_metadata import BUILTIN_TRANSFORMS
        from mdvis.transforms.metadata import TransformMetadata

        for builtin in BUILTIN_TRANSFORMS:
            self.register(builtin)

        loaded = 0
        for entry_point in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
            try:
                metadata = entry_point.load()
            except Exception as e:
                logger.warning("Failed to load transform entry point '%s': %s", entry_point.name, e)
                continue
            if not isinstance(metadata, TransformMetadata):
                logger.warning("Entry point '%s' is not a TransformMetadata, skipping", entry_point.name)
                continue
            self.register(metadata)
            loaded += 1

        logger.debug("Loaded %d transform(s) from entry points", loaded)
        return loaded

    def resolve_dependencies(self, transform_names: list[str]) -> list[str]:
        """Order transforms so that each runs after its dependencies.

        Dependencies are pulled in even when not listed. Among transforms
        that are ready at the same time, lower ``priority`` runs first.

        Parameters
        ----------
        transform_names : list[str]
            Transforms requested by the caller

        Returns
        -------
        list[str]
            Execution order, dependencies first

        Raises
        ------
        ValueError
            If a transform or dependency is unknown, or the dependencies form a cycle

        """
        self._ensure_initialized()

        sorter: graphlib.TopologicalSorter[str] = graphlib.TopologicalSorter()
        priorities: dict[str, int] = {}
        pending = list(transform_names)
        while pending:
            name = pending.pop()
            if name in priorities:
                continue
            if name not in self._transforms:
                raise ValueError(f"Dependency '{name}' not found")
            metadata = self._transforms[name]
            priorities[name] = metadata.priority
            sorter.add(name, *metadata.dependencies)
            pending.extend(metadata.dependencies)

        try:
            sorter.prepare()
        except graphlib.CycleError as e:
            raise ValueError(f"Circular dependency detected involving: {', '.join(sorted(set(e.args[1])))}") from e

        order: list[str] = []
        ready: list[tuple[int, str]] = []
        while sorter.is_active():
            for name in sorter.get_ready():
                heapq.heappush(ready, (priorities[name], name))
            _, name = heapq.heappop(ready)
            order.append(name)
            sorter.done(name)
        return order

    def clear(self) -> None:
        """Forget every transform; discovery runs again on next use."""
        self._transforms.clear()
        self._initialized = False
        logger.debug("Cleared transform registry")


transform_registry = TransformRegistry()

__all__ = [
    "ENTRY_POINT_GROUP",
    "TransformRegistry",
    "transform_registry",
]
