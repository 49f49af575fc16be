#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/context.py
"""Per-call rendering state.

A :class:`RenderingContext` is created for every top-level render call and
threaded through every renderer. It is the only way renderers re-enter the
registry for child values, which lets it:

- resolve the renderer from the runtime type (declared type for ``None``)
- cut cycles: a reference-typed value already being rendered further up the
  stack is replaced by a terminal placeholder
- isolate faults: a value that raises while rendering becomes an error
  placeholder and its siblings still render
- track nesting depth

Contexts are not thread-safe and are never shared between calls.

"""

from __future__ import annotations

import logging
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from htmlmicrodata.constants import (
    CYCLE_MARKER_ATTRIBUTE,
    ITEMPROP_ATTRIBUTE,
    ITEMTYPE_ANNOTATION,
    RENDER_ERROR_ATTRIBUTE,
)
from htmlmicrodata.exceptions import ConfigurationError, RenderingError
from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Element, Node
from htmlmicrodata.options import MicrodataOptions

if TYPE_CHECKING:
    from htmlmicrodata.renderers.registry import RendererRegistry

logger = logging.getLogger(__name__)

# Values of these types cannot reference their ancestors, so they never
# enter the visited set.
VALUE_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
    Enum,
    date,
    time,
    timedelta,
    Decimal,
    Fraction,
    UUID,
)


def is_value_type(value: Any) -> bool:
    """Return True if ``value`` is an immutable scalar with no object references."""
    return value is None or isinstance(value, VALUE_TYPES)


class RenderingContext:
    """State of one render call.

    Parameters
    ----------
    registry : RendererRegistry
        Registry used to resolve renderers for every value in the graph
    options : MicrodataOptions or None, default None
        Ambient configuration, read-only

    Attributes
    ----------
    depth : int
        Number of values currently being rendered on the call stack

    """

    def __init__(self, registry: RendererRegistry, options: MicrodataOptions | None = None):
        self.registry = registry
        self.options = options or MicrodataOptions()
        self.depth = 0
        self._property_name_policy = self.options.resolved_property_name_policy
        self._visited: set[int] = set()

    def render(self, property_name: Optional[str], value: Any, declared_type: Any = None) -> list[Node]:
        """Render a value through the registry.

        Parameters
        ----------
        property_name : str or None
            Raw member name, or None when the value is not a property
        value : Any
            Value to render
        declared_type : Any, optional
            Declared type, used to resolve a renderer when ``value`` is None

        Returns
        -------
        list of Node
            Rendered nodes. A single placeholder element for a cut cycle or
            an isolated fault.

        Raises
        ------
        RenderingError
            If rendering fails and ``options.isolate_faults`` is False, or the
            object graph is nested deeper than the interpreter recursion limit
        ConfigurationError
            Always propagated, never isolated

        """
        if value is not None:
            target = type(value)
        elif declared_type is not None:
            target = declared_type
        else:
            target = type(None)
        renderer = self.registry.resolve(target)

        tracked = not is_value_type(value)
        key = id(value)
        if tracked:
            if key in self._visited:
                logger.debug("Cutting cycle at %s (%s)", property_name, type(value).__name__)
                return [self.cycle_placeholder(property_name)]
            self._visited.add(key)

        self.depth += 1
        try:
            return list(renderer.render(property_name, value, self, declared_type))
        except ConfigurationError:
            raise
        except Exception as exc:
            return self.fault_placeholder(property_name, exc, subject=value)
        finally:
            self.depth -= 1
            if tracked:
                self._visited.discard(key)

    def is_visited(self, value: Any) -> bool:
        """Return True if ``value`` is an ancestor in the current descent."""
        return id(value) in self._visited

    def format_property_name(self, property_name: str) -> str:
        """Apply the property-name policy."""
        return self._property_name_policy(property_name)

    def tag_property(self, node: Element, property_name: Optional[str]) -> None:
        """Add the formatted ``itemprop`` of ``property_name`` to ``node``.

        Names the policy maps to an empty string (``"_"``, ``" "``) are not tagged.
        """
        if not property_name:
            return
        formatted = self.format_property_name(property_name).strip()
        if formatted:
            node.append_attribute(ITEMPROP_ATTRIBUTE, formatted)

    def item_type_for(self, cls: type) -> str:
        """Return the ``itemtype`` URI for a class."""
        declared = getattr(cls, ITEMTYPE_ANNOTATION, None)
        if declared:
            return str(declared)
        return f"{self.options.item_type_namespace}{cls.__module__}.{cls.__qualname__}"

    def documentation(self, key: str) -> Optional[str]:
        """Look up documentation text, or None when there is no provider or entry."""
        provider = self.options.documentation_provider
        if provider is None:
            return None
        return provider.get_documentation(key) or None

    def cycle_placeholder(self, property_name: Optional[str]) -> Element:
        """Terminal element standing in for a back-reference to an ancestor."""
        marker = element("span", attributes={CYCLE_MARKER_ATTRIBUTE: "true"})
        self.tag_property(marker, property_name)
        return marker

    def fault_placeholder(self, property_name: Optional[str], error: Exception, subject: Any = None) -> list[Node]:
        """Isolate a failure to the smallest subtree, or propagate it.

        Parameters
        ----------
        property_name : str or None
            Member that failed
        error : Exception
            The failure
        subject : Any, optional
            The value being rendered, for the log message

        Returns
        -------
        list of Node
            A single error placeholder element

        Raises
        ------
        ConfigurationError
            Re-raised unchanged
        RenderingError
            If fault isolation is disabled, or the graph exceeds the recursion limit

        """
        if isinstance(error, ConfigurationError):
            raise error
        # A graph nested deeper than the interpreter can descend is never
        # truncated silently, whatever the isolation setting.
        if isinstance(error, RecursionError):
            raise RenderingError(
                f"Object graph is nested too deeply to render at {property_name or type(subject).__name__}",
                rendering_stage=property_name,
                original_error=error,
            ) from error
        if isinstance(error, RenderingError) and isinstance(error.original_error, RecursionError):
            raise error
        if not self.options.isolate_faults:
            if isinstance(error, RenderingError):
                raise error
            raise RenderingError(
                f"Failed to render {property_name or type(subject).__name__}: {error}",
                rendering_stage=property_name,
                original_error=error,
            ) from error

        logger.warning(
            "Failed to render %s (%s): %s: %s",
            property_name or "<root>",
            type(subject).__name__,
            type(error).__name__,
            error,
        )
        placeholder = element("span", attributes={RENDER_ERROR_ATTRIBUTE: type(error).__name__})
        self.tag_property(placeholder, property_name)
        return [placeholder]
