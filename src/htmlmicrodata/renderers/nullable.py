#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/nullable.py
"""Pass-through renderer for ``Optional[T]`` declared types."""

from __future__ import annotations

import types
from typing import TYPE_CHECKING, Any, Optional, Union, get_args, get_origin

from htmlmicrodata.markup.nodes import Node
from htmlmicrodata.renderers.base import BaseRenderer

if TYPE_CHECKING:
    from htmlmicrodata.context import RenderingContext

NoneType = type(None)


def unwrap_optional(tp: Any) -> Any:
    """Return ``T`` for ``Optional[T]`` / ``T | None``; other types unchanged.

    ``Optional[A | B]`` becomes ``Union[A, B]``.
    """
    if get_origin(tp) not in (Union, types.UnionType):
        return tp
    remaining = tuple(arg for arg in get_args(tp) if arg is not NoneType)
    if len(remaining) == 1:
        return remaining[0]
    return Union[remaining]


class NullableRenderer(BaseRenderer):
    """Delegate ``Optional[T]`` to the renderer of ``T``.

    A present value is rendered by the renderer of its runtime type; an
    absent one by the renderer of ``T``, which emits its empty
    representation. This renderer never produces markup of its own.
    """

    def supports(self, tp: Any) -> bool:
        return get_origin(tp) in (Union, types.UnionType) and NoneType in get_args(tp)

    def render(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        inner = unwrap_optional(declared_type) if declared_type is not None else NoneType
        target = type(value) if value is not None else inner
        return context.registry.resolve(target).render(property_name, value, context, inner)

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        return self.render(property_name, value, context, declared_type)
