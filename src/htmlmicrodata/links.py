#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/links.py
"""Hyperlink value objects.

Application code returns these from its resources so that responses carry
their own affordances. :class:`Link` renders as an anchor with its
attributes copied verbatim; :class:`Uri` marks a string as a URI so it
renders as an anchor instead of plain text.

Examples
--------
    >>> Link("/tasks/7", "Next task", rel="next").all_attributes
    {'href': '/tasks/7', 'rel': 'next'}

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class Uri(str):
    """A string that is a URI.

    Behaves exactly like ``str``; its type selects the URI renderer.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Uri({str.__repr__(self)})"


@dataclass(frozen=True)
class Link:
    """A hyperlink: target, display body and extra attributes.

    Parameters
    ----------
    href : str
        Target URI
    body : str, default ""
        Display text. Falls back to ``href`` when empty.
    rel : str or None, default None
        Relation type
    attributes : Mapping of str to str, default = empty
        Further attributes (``type``, ``hreflang``, ``data-*`` ...) copied
        verbatim onto the rendered anchor

    """

    href: str
    body: str = ""
    rel: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.href:
            raise ValueError("Link href must be a non-empty string")
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def display_text(self) -> str:
        """The text shown to humans."""
        return self.body or self.href

    @property
    def all_attributes(self) -> dict[str, str]:
        """Every attribute of the anchor, ``href`` first and ``rel`` second."""
        merged = {"href": str(self.href)}
        if self.rel:
            merged["rel"] = self.rel
        for name, value in self.attributes.items():
            if name not in merged:
                merged[name] = str(value)
        return merged
