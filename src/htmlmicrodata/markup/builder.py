#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/markup/builder.py
"""Factory helpers for constructing markup trees tersely.

Renderers build many small elements; these helpers keep that code readable.

"""

from __future__ import annotations

from typing import Any, Mapping, Union

from htmlmicrodata.markup.nodes import Element, Node, Text

ChildLike = Union[Node, str, None]


def attribute_name(keyword: str) -> str:
    """Map a Python keyword argument name to an HTML attribute name.

    A trailing underscore is dropped (``class_`` -> ``class``) and the
    remaining underscores become hyphens (``data_required`` -> ``data-required``).
    """
    return keyword.rstrip("_").replace("_", "-")


def element(
    tag: str,
    *children: ChildLike,
    attributes: Mapping[str, Any] | None = None,
    **attrs: Any,
) -> Element:
    """Create an element.

    Parameters
    ----------
    tag : str
        Element name
    *children : Node, str or None
        Child nodes. Strings become :class:`Text` nodes; ``None`` is skipped.
    attributes : Mapping, optional
        Attributes copied verbatim, in order, before ``attrs``
    **attrs : Any
        Additional attributes named per :func:`attribute_name`. ``None``
        values are skipped.

    Returns
    -------
    Element
        The new, detached element

    Examples
    --------
    >>> element("input", type="text", name="id", data_required="true")
    Element(tag='input', attributes={'type': 'text', 'name': 'id', 'data-required': 'true'}, children=[])

    """
    merged: dict[str, Any] = dict(attributes or {})
    for keyword, value in attrs.items():
        if value is not None:
            merged[attribute_name(keyword)] = value

    nodes = [Text(child) if isinstance(child, str) else child for child in children if child is not None]
    return Element(tag, merged, nodes)
