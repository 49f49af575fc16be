#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/markup/html.py
"""HTML serialization of markup trees.

The rendering engine hands a finished tree to the transport layer, which
owns byte serialization. :class:`HtmlWriter` is the serializer shipped with
the library for transports (and tests) that have no writer of their own.

"""

from __future__ import annotations

import logging
from html import escape

from htmlmicrodata.constants import DEFAULT_CHARSET, VOID_ELEMENTS
from htmlmicrodata.markup.nodes import Element, Node, Text
from htmlmicrodata.markup.visitors import NodeVisitor

logger = logging.getLogger(__name__)


class HtmlWriter(NodeVisitor):
    """Serialize markup nodes to HTML text.

    Parameters
    ----------
    doctype : bool, default True
        Emit ``<!DOCTYPE html>`` before a root ``<html>`` element.

    Examples
    --------
    >>> from htmlmicrodata.markup.builder import element
    >>> HtmlWriter().render_to_string(element("a", "home", href="/"))
    '<a href="/">home</a>'

    """

    def __init__(self, doctype: bool = True):
        """Initialize the writer."""
        self.doctype = doctype
        self._output: list[str] = []

    def render_to_string(self, node: Node) -> str:
        """Serialize a markup tree to a string.

        Parameters
        ----------
        node : Node
            Root of the tree

        Returns
        -------
        str
            HTML text

        """
        self._output = []
        if self.doctype and isinstance(node, Element) and node.tag == "html":
            self._output.append("<!DOCTYPE html>")
        node.accept(self)
        return "".join(self._output)

    def render_to_bytes(self, node: Node, encoding: str = DEFAULT_CHARSET) -> bytes:
        """Serialize a markup tree and encode it.

        Characters the encoding cannot represent become numeric character
        references, so the result is always valid HTML.
        """
        logger.debug("Serializing <%s> as %s", getattr(node, "tag", "#text"), encoding)
        return self.render_to_string(node).encode(encoding, errors="xmlcharrefreplace")

    def visit_element(self, node: Element) -> None:
        """Write an element, its attributes and its subtree.

        The subtree is walked with an explicit stack of pending nodes and
        end tags, so nesting depth is not bounded by the interpreter's
        recursion limit.
        """
        pending: list[Node | str] = [node]
        while pending:
            current = pending.pop()
            if isinstance(current, str):
                self._output.append(current)
            elif isinstance(current, Element):
                self._output.append(self.start_tag(current))
                if current.tag in VOID_ELEMENTS:
                    if current.children:
                        logger.warning(
                            "Dropping %d child node(s) of void element <%s>", len(current.children), current.tag
                        )
                    continue
                pending.append(f"</{current.tag}>")
                pending.extend(reversed(current.children))
            else:
                current.accept(self)

    @staticmethod
    def start_tag(node: Element) -> str:
        """Return the start tag of ``node`` with its escaped attribute values."""
        parts = [f"<{node.tag}"]
        for name, value in node.attributes.items():
            parts.append(f' {name}="{escape(value, quote=True)}"')
        parts.append(">")
        return "".join(parts)

    def visit_text(self, node: Text) -> None:
        """Write escaped character data."""
        self._output.append(escape(node.content, quote=False))


def to_html(node: Node, doctype: bool = True) -> str:
    """Serialize ``node`` with a fresh :class:`HtmlWriter`."""
    return HtmlWriter(doctype=doctype).render_to_string(node)
