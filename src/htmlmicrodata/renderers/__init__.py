#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/__init__.py
"""Renderers and the renderer registry.

All renderers inherit from :class:`BaseRenderer`. Built-ins:

- DefaultRenderer: reflective definition-list item for any object
- CollectionRenderer / MappingRenderer: lists and dictionaries
- NullableRenderer: ``Optional[T]`` pass-through
- ScalarRenderer: strings, numbers, booleans, enums
- DisplayStringRenderer: opt-in ``str()`` rendering
- UriRenderer / LinkRenderer: hyperlinks
- DateTimeRenderer / DurationRenderer: ``<time>`` elements
- ApiGroupRenderer / ApiActionRenderer: route documentation as links and forms

"""

from htmlmicrodata.renderers.base import BaseRenderer
from htmlmicrodata.renderers.collections import CollectionRenderer, MappingRenderer
from htmlmicrodata.renderers.default import DefaultRenderer
from htmlmicrodata.renderers.documentation import ApiActionRenderer, ApiGroupRenderer
from htmlmicrodata.renderers.nullable import NullableRenderer
from htmlmicrodata.renderers.registry import RendererRegistry, create_default_registry
from htmlmicrodata.renderers.scalars import (
    DateTimeRenderer,
    DisplayStringRenderer,
    DurationRenderer,
    LinkRenderer,
    ScalarRenderer,
    UriRenderer,
)

__all__ = [
    "ApiActionRenderer",
    "ApiGroupRenderer",
    "BaseRenderer",
    "CollectionRenderer",
    "DateTimeRenderer",
    "DefaultRenderer",
    "DisplayStringRenderer",
    "DurationRenderer",
    "LinkRenderer",
    "MappingRenderer",
    "NullableRenderer",
    "RendererRegistry",
    "ScalarRenderer",
    "UriRenderer",
    "create_default_registry",
]
