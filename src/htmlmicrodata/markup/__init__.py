#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/markup/__init__.py
"""Markup tree module.

The common currency of the library: every renderer produces markup nodes and
the transport layer serializes them.

- nodes: :class:`Element` and :class:`Text`
- builder: the :func:`element` factory and :func:`attribute_name`
- visitors: :class:`NodeVisitor`, :func:`walk`, :func:`find_elements`
- html: :class:`HtmlWriter` serializer

Examples
--------
    >>> from htmlmicrodata.markup import element, to_html
    >>> to_html(element("span", "Finish this app", itemprop="name"))
    '<span itemprop="name">Finish this app</span>'

"""

from __future__ import annotations

from htmlmicrodata.markup.builder import attribute_name, element
from htmlmicrodata.markup.html import HtmlWriter, to_html
from htmlmicrodata.markup.nodes import Element, Node, Text
from htmlmicrodata.markup.visitors import NodeVisitor, find_elements, walk

__all__ = [
    "Element",
    "HtmlWriter",
    "Node",
    "NodeVisitor",
    "Text",
    "attribute_name",
    "element",
    "find_elements",
    "to_html",
    "walk",
]
