#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/markup/nodes.py
"""Markup node classes.

Every renderer produces these nodes; the transport layer (or
:class:`htmlmicrodata.markup.html.HtmlWriter`) serializes them. The model is
deliberately small: an element with ordered attributes and children, and a
text node.

Node Hierarchy
--------------
    - Node (abstract, visitor pattern)
        - Element: tag, ordered attributes, ordered children
        - Text: character data

A node belongs to at most one parent. Attaching a node that already has a
parent raises :class:`~htmlmicrodata.exceptions.MarkupError`, so a finished
tree can never turn into a DAG. Use :meth:`Node.clone` to reuse a subtree.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from htmlmicrodata.exceptions import MarkupError

# Characters the HTML attribute-name grammar excludes, plus controls
_INVALID_ATTRIBUTE_NAME = re.compile(r"[\s\"'>/=\x00-\x1f\x7f]")


def check_attribute_name(name: Any) -> str:
    """Return ``name`` as a string, or raise if it is not a valid attribute name.

    Raises
    ------
    MarkupError
        If the name is empty or contains whitespace, quotes, ``>``, ``/``,
        ``=`` or control characters

    """
    name = str(name)
    if not name or _INVALID_ATTRIBUTE_NAME.search(name):
        raise MarkupError(f"Invalid attribute name: {name!r}")
    return name


class Node(ABC):
    """Base class for all markup nodes.

    Attributes
    ----------
    parent : Element or None
        The element this node is attached to, if any

    """

    parent: Optional[Element]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass

    @abstractmethod
    def clone(self) -> Node:
        """Return a detached deep copy of this node."""
        pass

    @property
    @abstractmethod
    def text_content(self) -> str:
        """Concatenated character data of this node and its descendants."""
        pass

    def detach(self) -> Node:
        """Remove this node from its parent, if any, and return it."""
        if self.parent is not None:
            siblings = self.parent.children
            # identity, not equality: equal siblings are distinct nodes
            index = next(i for i, sibling in enumerate(siblings) if sibling is self)
            del siblings[index]
            self.parent = None
        return self


@dataclass
class Text(Node):
    """Character data.

    Parameters
    ----------
    content : str
        The text. Non-string values are converted with ``str()``.

    """

    content: str = ""
    parent: Optional[Element] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            self.content = str(self.content)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text node."""
        return visitor.visit_text(self)

    def clone(self) -> Text:
        """Return a detached copy of this text node."""
        return Text(self.content)

    @property
    def text_content(self) -> str:
        """The text itself."""
        return self.content


@dataclass
class Element(Node):
    """An element with ordered attributes and children.

    Parameters
    ----------
    tag : str
        Element name, e.g. ``"dl"``
    attributes : dict of str to str, default = empty dict
        Attributes in insertion order. Values are converted with ``str()``.
    children : list of Node, default = empty list
        Child nodes. Each child is attached to this element on construction.

    Raises
    ------
    ValueError
        If ``tag`` is empty
    MarkupError
        If any child already has a parent, or an attribute name is invalid

    Examples
    --------
    >>> dl = Element("dl", {"itemscope": "itemscope"})
    >>> dl.append(Element("dt", children=[Text("name")]))
    Element(tag='dt', attributes={}, children=[Text(content='name')])
    >>> dl.set_attribute("itemtype", "urn:python:app.Task")

    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Element] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("Element tag must be a non-empty string")
        self.attributes = {check_attribute_name(name): str(value) for name, value in self.attributes.items()}
        initial = self.children
        self.children = []
        self.extend(initial)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this element."""
        return visitor.visit_element(self)

    def clone(self) -> Element:
        """Return a detached deep copy of this element and its subtree."""
        return Element(self.tag, dict(self.attributes), [child.clone() for child in self.children])

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes."""
        return "".join(child.text_content for child in self.children)

    def append(self, child: Node) -> Node:
        """Attach ``child`` as the last child of this element.

        Parameters
        ----------
        child : Node
            A detached node

        Returns
        -------
        Node
            The attached child, for chaining

        Raises
        ------
        MarkupError
            If the child is already attached somewhere, or if attaching it
            would make an element its own descendant

        """
        if not isinstance(child, Node):
            raise MarkupError(f"Cannot attach {type(child).__name__} to <{self.tag}>; expected a markup Node")
        if child.parent is not None:
            raise MarkupError(f"<{getattr(child, 'tag', '#text')}> is already attached to <{child.parent.tag}>")

        ancestor: Optional[Element] = self
        while ancestor is not None:
            if ancestor is child:
                raise MarkupError(f"Cannot attach <{self.tag}> inside itself")
            ancestor = ancestor.parent

        child.parent = self
        self.children.append(child)
        return child

    def extend(self, children: Iterable[Node]) -> None:
        """Attach each node in ``children`` in order."""
        for child in children:
            self.append(child)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value, or ``default`` when absent."""
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: Any) -> None:
        """Set an attribute, overwriting any existing value in place."""
        self.attributes[check_attribute_name(name)] = str(value)

    def append_attribute(self, name: str, value: Any) -> None:
        """Add a token to a space-separated attribute such as ``itemprop`` or ``class``.

        Tokens already present are not repeated.
        """
        name = check_attribute_name(name)
        token = str(value)
        existing = self.attributes.get(name)
        if not existing:
            self.attributes[name] = token
        elif token not in existing.split():
            self.attributes[name] = f"{existing} {token}"

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute if present."""
        self.attributes.pop(name, None)
