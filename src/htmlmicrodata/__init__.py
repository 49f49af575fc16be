"""htmlmicrodata - render object graphs as microdata-annotated HTML.

htmlmicrodata turns arbitrary Python values into HTML documents whose
markup carries microdata (``itemscope``, ``itemtype``, ``itemprop``), and
turns route metadata into the hyperlinks and forms a client needs to move
to the next application state. Responses carry their data and their
affordances together, so clients need not hard-code URIs.

Rendering is type-directed: a registry of renderers is searched from the
most recently registered backwards for one supporting the value's runtime
type (or, for ``None``, its declared type) or any ancestor of it. Objects
without a specialized renderer are rendered reflectively, member by member,
with cycles in the object graph cut by a terminal placeholder.

Examples
--------
Render a dataclass:

    >>> from dataclasses import dataclass
    >>> from datetime import datetime, timezone
    >>> from htmlmicrodata import render_to_string
    >>>
    >>> @dataclass
    ... class Task:
    ...     name: str
    ...     due: datetime
    >>>
    >>> html = render_to_string(Task("Finish this app", datetime(2013, 9, 4, 12, 59, 31, tzinfo=timezone.utc)))

Plug in a renderer for your own type:

    >>> from htmlmicrodata import MicrodataFormatter
    >>> formatter = MicrodataFormatter()
    >>> formatter.register_renderer(MoneyRenderer())

See Also
--------
htmlmicrodata.renderers : built-in renderers and the registry
htmlmicrodata.markup : the markup tree and its HTML writer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from htmlmicrodata.api_description import (
    ApiActionDescription,
    ApiGroupDescription,
    ApiParameterDescription,
    DocumentationProvider,
    MappingDocumentationProvider,
    ParameterSource,
)
from htmlmicrodata.context import RenderingContext
from htmlmicrodata.document import DocumentAssembler
from htmlmicrodata.exceptions import (
    ConfigurationError,
    HtmlMicrodataError,
    InvalidOptionsError,
    MarkupError,
    RendererRegistrationError,
    RenderingError,
    RouteTemplateError,
    ValidationError,
)
from htmlmicrodata.formatter import MicrodataFormatter, render, render_to_string
from htmlmicrodata.links import Link, Uri
from htmlmicrodata.markup import Element, HtmlWriter, Node, Text, element, to_html
from htmlmicrodata.options import MicrodataOptions
from htmlmicrodata.renderers import BaseRenderer, RendererRegistry, create_default_registry

__version__ = "0.1.0"

__all__ = [
    "ApiActionDescription",
    "ApiGroupDescription",
    "ApiParameterDescription",
    "BaseRenderer",
    "ConfigurationError",
    "DocumentAssembler",
    "DocumentationProvider",
    "Element",
    "HtmlMicrodataError",
    "HtmlWriter",
    "InvalidOptionsError",
    "Link",
    "MappingDocumentationProvider",
    "MarkupError",
    "MicrodataFormatter",
    "MicrodataOptions",
    "Node",
    "ParameterSource",
    "RendererRegistrationError",
    "RendererRegistry",
    "RenderingContext",
    "RenderingError",
    "RouteTemplateError",
    "Text",
    "Uri",
    "ValidationError",
    "create_default_registry",
    "element",
    "render",
    "render_to_string",
    "to_html",
]
