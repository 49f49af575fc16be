#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/default.py
"""Reflective renderer for objects without a specialized renderer.

An object renders as a definition list that is also a microdata item::

    <dl itemscope="itemscope" itemtype="urn:python:app.Task">
      <dt>name</dt><dd><span itemprop="name">Finish this app</span></dd>
      <dt>due</dt><dd><time itemprop="due" datetime="...">...</time></dd>
    </dl>

Each member value is rendered back through the context, so nested objects
become nested items (their ``<dl>`` carries both ``itemscope`` and the
parent's ``itemprop``) and cycles are cut by the context's visited set.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from htmlmicrodata.constants import ITEMSCOPE_ATTRIBUTE, ITEMTYPE_ATTRIBUTE
from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Node
from htmlmicrodata.members import iter_members
from htmlmicrodata.renderers.base import BaseRenderer

if TYPE_CHECKING:
    from htmlmicrodata.context import RenderingContext


class DefaultRenderer(BaseRenderer):
    """Render any object by enumerating its members.

    Supports every type and is the registry's fallback.
    """

    supported_types = (object,)

    def supports(self, tp: Any) -> bool:
        return True

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        item = element(
            "dl",
            attributes={
                ITEMSCOPE_ATTRIBUTE: ITEMSCOPE_ATTRIBUTE,
                ITEMTYPE_ATTRIBUTE: context.item_type_for(type(value)),
            },
        )
        self.set_property_name(item, property_name, context)

        for member in iter_members(value):
            try:
                member_value = getattr(value, member.name)
            except Exception as exc:
                rendered = context.fault_placeholder(member.name, exc, subject=value)
            else:
                rendered = context.render(member.name, member_value, member.declared_type)

            item.append(element("dt", member.name))
            description = element("dd")
            description.extend(rendered)
            item.append(description)

        return [item]
