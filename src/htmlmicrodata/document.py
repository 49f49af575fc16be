#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/document.py
"""Document assembly: wrap rendered content in ``<html>``, ``<head>`` and ``<body>``."""

from __future__ import annotations

from typing import Iterable

from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Element, Node
from htmlmicrodata.options import MicrodataOptions


class DocumentAssembler:
    """Build the outer document around rendered nodes.

    The head holds a ``<meta charset>``, the optional ``<title>`` and a fresh
    copy of every node in ``options.head_content``, in that order.

    Parameters
    ----------
    options : MicrodataOptions or None, default None
        Supplies charset, title, language and head content

    """

    def __init__(self, options: MicrodataOptions | None = None):
        self.options = options or MicrodataOptions()

    def assemble(self, body_content: Iterable[Node]) -> Element:
        """Return an ``<html>`` element with ``body_content`` in its body.

        Parameters
        ----------
        body_content : iterable of Node
            Detached nodes; they are attached to the new body

        Returns
        -------
        Element
            The document root

        """
        head = element("head", element("meta", charset=self.options.charset))
        if self.options.title:
            head.append(element("title", self.options.title))
        head.extend(node.clone() for node in self.options.head_content)

        body = element("body")
        body.extend(body_content)

        return element("html", head, body, lang=self.options.language)
