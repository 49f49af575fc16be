#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for microdata rendering.

This module defines the options carried into every render call: the
property-name policy, injected head content and the ambient settings the
built-in renderers read.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from htmlmicrodata.constants import (
    DEFAULT_CHARSET,
    DEFAULT_DATETIME_DISPLAY_FORMAT,
    DEFAULT_ISOLATE_FAULTS,
    DEFAULT_ITEM_TYPE_NAMESPACE,
    DEFAULT_LANGUAGE,
    DEFAULT_PROPERTY_NAME_POLICY,
)
from htmlmicrodata.markup.nodes import Node
from htmlmicrodata.naming import PropertyNamePolicy, get_property_name_policy
from htmlmicrodata.options.base import CloneFrozenMixin

if TYPE_CHECKING:
    from htmlmicrodata.api_description import DocumentationProvider


# src/htmlmicrodata/options/microdata.py
@dataclass(frozen=True)
class MicrodataOptions(CloneFrozenMixin):
    """Configuration options for rendering values to microdata HTML.

    Parameters
    ----------
    property_name_policy : {"camel", "snake", "kebab", "identity"} or callable, default "camel"
        Maps member names to ``itemprop`` values.
    item_type_namespace : str, default "urn:python:"
        Prefix for ``itemtype`` URIs derived from a class's module and
        qualified name. Classes may override with ``__microdata_itemtype__``.
    head_content : tuple of Node, default ()
        Nodes appended to ``<head>`` of every assembled document. Each
        document receives its own copy.
    title : str or None, default None
        Document ``<title>``. Omitted when None.
    language : str, default "en"
        Value of ``<html lang="...">``.
    charset : str, default "utf-8"
        Character encoding declared by ``<meta charset>``.
    datetime_display_format : str, default "%A, %B %d, %Y %H:%M:%S %Z"
        ``strftime`` format for the human-readable body of ``<time>`` elements.
    isolate_faults : bool, default True
        Replace a member that fails to render with an error placeholder and
        keep rendering its siblings. When False the failure propagates as
        :class:`~htmlmicrodata.exceptions.RenderingError`.
    documentation_provider : DocumentationProvider or None, default None
        Source of human-readable descriptions for the documentation renderers.

    Examples
    --------
    >>> options = MicrodataOptions(title="Tasks", property_name_policy="kebab")
    >>> strict = options.create_updated(isolate_faults=False)

    """

    property_name_policy: Union[str, PropertyNamePolicy] = field(
        default=DEFAULT_PROPERTY_NAME_POLICY,
        metadata={"help": "Member-name to itemprop conversion: camel, snake, kebab, identity or a callable"},
    )
    item_type_namespace: str = field(
        default=DEFAULT_ITEM_TYPE_NAMESPACE,
        metadata={"help": "Prefix for derived itemtype URIs"},
    )
    head_content: tuple[Node, ...] = field(
        default=(),
        metadata={"help": "Markup nodes injected into <head> of every document"},
    )
    title: Optional[str] = field(
        default=None,
        metadata={"help": "Document title"},
    )
    language: str = field(
        default=DEFAULT_LANGUAGE,
        metadata={"help": "Document language code for <html lang>"},
    )
    charset: str = field(
        default=DEFAULT_CHARSET,
        metadata={"help": "Declared character encoding"},
    )
    datetime_display_format: str = field(
        default=DEFAULT_DATETIME_DISPLAY_FORMAT,
        metadata={"help": "strftime format for the readable body of <time> elements"},
    )
    isolate_faults: bool = field(
        default=DEFAULT_ISOLATE_FAULTS,
        metadata={"help": "Replace members that fail to render with a placeholder instead of aborting"},
    )
    documentation_provider: Optional["DocumentationProvider"] = field(
        default=None,
        metadata={"help": "Provider of descriptions for API documentation renderers"},
        compare=False,
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the charset is unknown or head content contains non-node values
        ValidationError
            If the property name policy cannot be resolved

        """
        get_property_name_policy(self.property_name_policy)

        try:
            codecs.lookup(self.charset)
        except LookupError:
            raise ValueError(f"Unknown charset: {self.charset!r}") from None

        if not isinstance(self.head_content, tuple):
            object.__setattr__(self, "head_content", tuple(self.head_content))
        for node in self.head_content:
            if not isinstance(node, Node):
                raise ValueError(f"head_content must contain markup nodes, got {type(node).__name__}")

    @property
    def resolved_property_name_policy(self) -> PropertyNamePolicy:
        """The property-name policy as a callable."""
        return get_property_name_policy(self.property_name_policy)
