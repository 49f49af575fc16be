#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/markup/visitors.py
"""Visitor pattern and traversal helpers for markup trees.

Writers (see :mod:`htmlmicrodata.markup.html`) implement :class:`NodeVisitor`;
tests and consumers that only need to look things up use :func:`walk` and
:func:`find_elements`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator

from htmlmicrodata.markup.builder import attribute_name
from htmlmicrodata.markup.nodes import Element, Node, Text


class NodeVisitor(ABC):
    """Abstract base class for markup node visitors.

    Examples
    --------
    Count the elements of a tree:

        >>> class ElementCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_element(self, node):
        ...         self.count += 1
        ...         for child in node.children:
        ...             child.accept(self)
        ...
        ...     def visit_text(self, node):
        ...         pass

    """

    @abstractmethod
    def visit_element(self, node: Element) -> Any:
        """Visit an Element node.

        Parameters
        ----------
        node : Element
            The element to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document order."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Element):
            stack.extend(reversed(current.children))


def find_elements(node: Node, tag: str | None = None, **attributes: str) -> list[Element]:
    """Return descendant-or-self elements matching a tag and attribute values.

    Parameters
    ----------
    node : Node
        Root of the search
    tag : str, optional
        Element name to match. Any tag when omitted.
    **attributes : str
        Attribute values that must match exactly. Keyword names are mapped
        with :func:`~htmlmicrodata.markup.builder.attribute_name`, so
        ``data_templated="true"`` matches ``data-templated`` and ``class_``
        matches ``class``.

    Returns
    -------
    list of Element
        Matching elements in document order

    """
    wanted = {attribute_name(name): value for name, value in attributes.items()}
    matches = []
    for current in walk(node):
        if not isinstance(current, Element):
            continue
        if tag is not None and current.tag != tag:
            continue
        if all(current.attributes.get(name) == value for name, value in wanted.items()):
            matches.append(current)
    return matches
