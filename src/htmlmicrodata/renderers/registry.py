#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/registry.py
"""Renderer registry with most-recent-registration-wins resolution.

The registry is an ordered list of renderers. :meth:`RendererRegistry.resolve`
walks it from the most recently registered renderer backwards and returns
the first one that supports the requested type or any of its ancestors. A
late registration therefore overrides a built-in for its types, and a single
registration for a base class or ABC covers the whole family. When nothing
matches, the default reflective renderer is returned, so resolution never
fails.

Registries are configured during application startup and frozen on first
use by a formatter; after that they are read-only and may be shared by
concurrent render calls.

Examples
--------
Build the standard registry and override one type:

    >>> from htmlmicrodata.renderers.registry import create_default_registry
    >>> registry = create_default_registry()
    >>> registry.register(MoneyRenderer())
    >>> registry.resolve(Money)
    MoneyRenderer()

Third-party packages can contribute renderers through entry points in the
``htmlmicrodata.renderers`` group:

    [project.entry-points."htmlmicrodata.renderers"]
    money = "money_renderers:MoneyRenderer"

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Annotated, Any, Optional, get_args, get_origin

from htmlmicrodata.constants import DEFAULT_PLUGIN_GROUP
from htmlmicrodata.exceptions import RendererRegistrationError
from htmlmicrodata.renderers.base import BaseRenderer
from htmlmicrodata.renderers.default import DefaultRenderer

logger = logging.getLogger(__name__)


class RendererRegistry:
    """Ordered collection of renderers.

    Parameters
    ----------
    fallback : BaseRenderer or None, default None
        Renderer returned when no registration matches. A
        :class:`DefaultRenderer` when None.

    """

    def __init__(self, fallback: Optional[BaseRenderer] = None):
        self._renderers: list[BaseRenderer] = []
        self._fallback = fallback or DefaultRenderer()
        self._frozen = False
        self._cache: dict[Any, BaseRenderer] = {}

    @property
    def renderers(self) -> tuple[BaseRenderer, ...]:
        """Registered renderers in registration order."""
        return tuple(self._renderers)

    @property
    def fallback(self) -> BaseRenderer:
        return self._fallback

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only. Idempotent."""
        if not self._frozen:
            self._frozen = True
            logger.debug("Renderer registry frozen with %d renderer(s)", len(self._renderers))

    def register(self, renderer: BaseRenderer | type[BaseRenderer]) -> BaseRenderer:
        """Append a renderer. It takes precedence over every earlier registration.

        Parameters
        ----------
        renderer : BaseRenderer or BaseRenderer subclass
            Instance to register. A class is instantiated without arguments.

        Returns
        -------
        BaseRenderer
            The registered instance

        Raises
        ------
        RendererRegistrationError
            If the registry is frozen or ``renderer`` is not a renderer

        """
        if self._frozen:
            raise RendererRegistrationError(
                f"Cannot register {renderer!r}: the registry is in use and no longer accepts renderers",
                renderer=renderer,
            )

        if isinstance(renderer, type) and issubclass(renderer, BaseRenderer):
            renderer = renderer()
        if not isinstance(renderer, BaseRenderer):
            raise RendererRegistrationError(
                f"Expected a BaseRenderer instance or subclass, got {type(renderer).__name__}",
                renderer=renderer,
            )

        self._renderers.append(renderer)
        logger.debug(
            "Registered renderer %s for %s",
            type(renderer).__name__,
            ", ".join(t.__name__ for t in renderer.supported_types) or "custom predicate",
        )
        return renderer

    def resolve(self, tp: Any) -> BaseRenderer:
        """Return the renderer for a type.

        Parameters
        ----------
        tp : Any
            A class, or a typing construct such as ``list[int]`` or
            ``Optional[Task]``

        Returns
        -------
        BaseRenderer
            The most recently registered renderer supporting ``tp``, or the
            fallback renderer

        """
        tp = _strip_annotated(tp)

        if self._frozen:
            try:
                return self._cache[tp]
            except KeyError:
                pass
            except TypeError:
                # unhashable typing construct
                return self._lookup(tp)
            renderer = self._lookup(tp)
            self._cache[tp] = renderer
            return renderer

        return self._lookup(tp)

    def _lookup(self, tp: Any) -> BaseRenderer:
        for renderer in reversed(self._renderers):
            if renderer.supports(tp):
                return renderer
        return self._fallback

    def discover_plugins(self, group: str = DEFAULT_PLUGIN_GROUP) -> int:
        """Register renderers advertised by installed packages.

        Each entry point in ``group`` must load to a :class:`BaseRenderer`
        subclass or instance. Entry points that fail to load or load to
        something else are logged and skipped.

        Parameters
        ----------
        group : str, default "htmlmicrodata.renderers"
            Entry point group to scan

        Returns
        -------
        int
            Number of renderers registered

        """
        discovered_count = 0

        for ep in importlib.metadata.entry_points().select(group=group):
            try:
                loaded = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load renderer entry point '{ep.name}': {e}")
                continue

            if not (isinstance(loaded, BaseRenderer) or (isinstance(loaded, type) and issubclass(loaded, BaseRenderer))):
                logger.warning(f"Entry point '{ep.name}' did not provide a BaseRenderer, skipping")
                continue

            self.register(loaded)
            discovered_count += 1
            logger.debug(f"Discovered renderer from entry point: {ep.name}")

        logger.info(f"Discovered {discovered_count} renderer(s) from entry points")
        return discovered_count


def _strip_annotated(tp: Any) -> Any:
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def create_default_registry(discover_plugins: bool = False) -> RendererRegistry:
    """Build a registry holding every built-in renderer.

    Registration order (later wins): reflective default, collection,
    mapping, nullable, scalar, display-string, URI, hyperlink, date-time,
    duration, route group, action.

    Parameters
    ----------
    discover_plugins : bool, default False
        Also register renderers from installed entry points, after the
        built-ins so they can override them

    Returns
    -------
    RendererRegistry
        A new, unfrozen registry

    """
    from htmlmicrodata.renderers.collections import CollectionRenderer, MappingRenderer
    from htmlmicrodata.renderers.documentation import ApiActionRenderer, ApiGroupRenderer
    from htmlmicrodata.renderers.nullable import NullableRenderer
    from htmlmicrodata.renderers.scalars import (
        DateTimeRenderer,
        DisplayStringRenderer,
        DurationRenderer,
        LinkRenderer,
        ScalarRenderer,
        UriRenderer,
    )

    registry = RendererRegistry()
    for renderer in (
        DefaultRenderer(),
        CollectionRenderer(),
        MappingRenderer(),
        NullableRenderer(),
        ScalarRenderer(),
        DisplayStringRenderer(),
        UriRenderer(),
        LinkRenderer(),
        DateTimeRenderer(),
        DurationRenderer(),
        ApiGroupRenderer(),
        ApiActionRenderer(),
    ):
        registry.register(renderer)

    if discover_plugins:
        registry.discover_plugins()

    return registry
