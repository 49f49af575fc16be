#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/formatter.py
"""Rendering entry point.

:class:`MicrodataFormatter` owns one renderer registry and one set of
options. Each render call gets a fresh :class:`RenderingContext`, renders
the value through the registry and hands the result to the document
assembler. The first render freezes the registry; from then on a formatter
can be shared by concurrent callers.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from htmlmicrodata.context import RenderingContext
from htmlmicrodata.document import DocumentAssembler
from htmlmicrodata.exceptions import InvalidOptionsError
from htmlmicrodata.markup.html import HtmlWriter
from htmlmicrodata.markup.nodes import Element, Node
from htmlmicrodata.options import MicrodataOptions
from htmlmicrodata.renderers.base import BaseRenderer
from htmlmicrodata.renderers.registry import RendererRegistry, create_default_registry

logger = logging.getLogger(__name__)


class MicrodataFormatter:
    """Render values to microdata-annotated HTML documents.

    Parameters
    ----------
    options : MicrodataOptions or None, default None
        Rendering options. Defaults are used when None.
    registry : RendererRegistry or None, default None
        Renderer registry. A new registry with every built-in renderer
        (see :func:`create_default_registry`) when None.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`MicrodataOptions`

    Examples
    --------
    Render a dataclass:

        >>> formatter = MicrodataFormatter(MicrodataOptions(title="Tasks"))
        >>> html = formatter.render_to_string(Task(name="Finish this app"))

    Override a built-in renderer before the first render:

        >>> formatter.register_renderer(MoneyRenderer())

    """

    def __init__(self, options: MicrodataOptions | None = None, registry: RendererRegistry | None = None):
        """Initialize the formatter with options and a registry."""
        if options is not None and not isinstance(options, MicrodataOptions):
            raise InvalidOptionsError(
                component_name=type(self).__name__,
                expected_type=MicrodataOptions,
                received_type=type(options),
            )
        self.options = options or MicrodataOptions()
        self.registry = registry if registry is not None else create_default_registry()
        self._assembler = DocumentAssembler(self.options)

    def register_renderer(self, renderer: BaseRenderer | type[BaseRenderer]) -> BaseRenderer:
        """Add a renderer that takes precedence over all earlier ones.

        Raises
        ------
        RendererRegistrationError
            If the formatter has already rendered, or ``renderer`` is not a renderer

        """
        return self.registry.register(renderer)

    def create_context(self) -> RenderingContext:
        """Create the state for one render call."""
        return RenderingContext(self.registry, self.options)

    def render_fragment(
        self,
        value: Any,
        declared_type: Any = None,
        property_name: Optional[str] = None,
    ) -> list[Node]:
        """Render ``value`` without the outer document.

        Parameters
        ----------
        value : Any
            Value to render
        declared_type : Any, optional
            Declared type, used when ``value`` is None and for element types
            of collections
        property_name : str, optional
            Member name to tag the top-level node with

        Returns
        -------
        list of Node
            Detached nodes

        """
        self.registry.freeze()
        context = self.create_context()
        logger.debug("Rendering %s (declared %s)", type(value).__name__, declared_type)
        return context.render(property_name, value, declared_type)

    def render(self, value: Any, declared_type: Any = None) -> Element:
        """Render ``value`` into a complete ``<html>`` document tree."""
        return self._assembler.assemble(self.render_fragment(value, declared_type))

    def render_to_string(self, value: Any, declared_type: Any = None) -> str:
        """Render ``value`` and serialize the document to HTML text."""
        return HtmlWriter().render_to_string(self.render(value, declared_type))

    def render_to_bytes(self, value: Any, declared_type: Any = None, encoding: Optional[str] = None) -> bytes:
        """Render ``value`` and encode the document, by default in ``options.charset``."""
        return HtmlWriter().render_to_bytes(self.render(value, declared_type), encoding or self.options.charset)


def render(value: Any, declared_type: Any = None, options: MicrodataOptions | None = None) -> Element:
    """Render ``value`` with the built-in renderers into a document tree.

    Examples
    --------
    >>> from htmlmicrodata import render, to_html
    >>> to_html(render(["a", "b"]), doctype=False)  # doctest: +ELLIPSIS
    '<html lang="en"><head>...</head><body><ol><li><span>a</span></li><li><span>b</span></li></ol></body></html>'

    """
    return MicrodataFormatter(options).render(value, declared_type)


def render_to_string(value: Any, declared_type: Any = None, options: MicrodataOptions | None = None) -> str:
    """Render ``value`` with the built-in renderers and serialize it to HTML."""
    return MicrodataFormatter(options).render_to_string(value, declared_type)
