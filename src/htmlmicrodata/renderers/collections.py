#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/collections.py
"""Renderers for collections and mappings.

Collections render as lists, one ``<li>`` per element. Every element is
resolved on its own runtime type, so a heterogeneous list renders each
member in its own shape, and every element carries the same ``itemprop``:
microdata consumers read repeated properties as an ordered sequence.

    <ol>
      <li><span itemprop="tags">urgent</span></li>
      <li><span itemprop="tags">home</span></li>
    </ol>

Sequences (lists, tuples) render as ``<ol>``; sets and other iterables as
``<ul>``. Mappings render as a ``<dl>`` keyed by their keys; the mapping is
an anonymous item (``itemscope`` without ``itemtype``).

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional, get_args

from htmlmicrodata.constants import ITEMSCOPE_ATTRIBUTE
from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Node
from htmlmicrodata.renderers.base import BaseRenderer

if TYPE_CHECKING:
    from htmlmicrodata.context import RenderingContext


def _element_type(declared_type: Any) -> Any:
    """Declared element type of ``list[T]``, ``set[T]``, ``tuple[T, ...]``; None if unknown."""
    args = get_args(declared_type)
    if len(args) == 1 or (len(args) == 2 and args[1] is Ellipsis):
        return args[0]
    return None


class CollectionRenderer(BaseRenderer):
    """Render any iterable as a list of independently rendered items.

    Named tuples are records, not collections, and are left to the
    reflective renderer.
    """

    supported_types = (Iterable,)
    empty_tag = "ul"

    def supports(self, tp: Any) -> bool:
        if not super().supports(tp):
            return False
        return not (isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields"))

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        element_type = _element_type(declared_type)
        container = element("ol" if isinstance(value, Sequence) else "ul")
        for item in value:
            entry = element("li")
            entry.extend(context.render(property_name, item, element_type))
            container.append(entry)
        return [container]


class MappingRenderer(BaseRenderer):
    """Render a mapping as an anonymous item listing its entries."""

    supported_types = (Mapping,)
    empty_tag = "dl"

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        args = get_args(declared_type)
        value_type = args[1] if len(args) == 2 else None

        entries = element("dl", attributes={ITEMSCOPE_ATTRIBUTE: ITEMSCOPE_ATTRIBUTE})
        self.set_property_name(entries, property_name, context)
        for key, item in value.items():
            name = str(key)
            entries.append(element("dt", name))
            description = element("dd")
            description.extend(context.render(name, item, value_type))
            entries.append(description)
        return [entries]
