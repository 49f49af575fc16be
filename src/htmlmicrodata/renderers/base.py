#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/base.py
"""Base class for value renderers.

A renderer turns one value of a family of types into markup nodes. It is
the extension contract of the library: third parties subclass
:class:`BaseRenderer`, declare the types they handle and register an
instance with a formatter. Resolution, cycle detection and fault isolation
are handled by the registry and the rendering context, so a renderer only
describes its markup shape.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, get_origin

from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Element, Node

if TYPE_CHECKING:
    from htmlmicrodata.context import RenderingContext


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Subclasses set :attr:`supported_types` and implement :meth:`render_value`.
    A renderer supports a type when the type (or the origin of a generic
    alias such as ``list[int]``) is a subclass of any supported type, which
    includes abstract base classes like ``collections.abc.Iterable``.

    Attributes
    ----------
    supported_types : tuple of type
        Classes or ABCs handled by this renderer
    empty_tag : str
        Tag of the element emitted for ``None``

    Examples
    --------
    A renderer for a money type:

        >>> from htmlmicrodata.markup import element
        >>> class MoneyRenderer(BaseRenderer):
        ...     supported_types = (Money,)
        ...
        ...     def render_value(self, property_name, value, context, declared_type=None):
        ...         span = element("span", f"{value.amount} {value.currency}", class_="money")
        ...         self.set_property_name(span, property_name, context)
        ...         return [span]

    """

    supported_types: tuple[type, ...] = ()
    empty_tag: str = "span"

    def supports(self, tp: Any) -> bool:
        """Return True if this renderer handles values of type ``tp``.

        Parameters
        ----------
        tp : Any
            A class or a typing construct

        Returns
        -------
        bool
            Whether ``tp`` or any of its ancestors is a supported type

        """
        origin = get_origin(tp) or tp
        if not isinstance(origin, type):
            return False
        try:
            return issubclass(origin, self.supported_types)
        except TypeError:
            return False

    def render(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        """Render ``value`` into zero or more markup nodes.

        ``None`` is routed to :meth:`render_empty`; everything else to
        :meth:`render_value`.

        Parameters
        ----------
        property_name : str or None
            Raw member name this value is rendered for, or None at top level
        value : Any
            The value to render
        context : RenderingContext
            Per-call state; use :meth:`RenderingContext.render` for children
        declared_type : Any, optional
            Declared type of the member, if known

        Returns
        -------
        list of Node
            Detached nodes, ready to be attached by the caller

        """
        if value is None:
            return self.render_empty(property_name, context, declared_type)
        return self.render_value(property_name, value, context, declared_type)

    @abstractmethod
    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        """Render a non-null value."""
        pass

    def render_empty(
        self,
        property_name: Optional[str],
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        """Render the explicit empty representation for ``None``."""
        empty = element(self.empty_tag)
        self.set_property_name(empty, property_name, context)
        return [empty]

    @staticmethod
    def set_property_name(node: Element, property_name: Optional[str], context: RenderingContext) -> None:
        """Tag ``node`` with ``itemprop`` derived from ``property_name`` by the context's policy."""
        context.tag_property(node, property_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
