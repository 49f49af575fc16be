#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/api_description.py
"""Route metadata value objects consumed by the documentation renderers.

The web framework's reflection layer harvests controllers, actions and
parameters and hands them over as these read-only descriptions. Rendering
an :class:`ApiGroupDescription` yields a section of forms and links that
clients can follow without knowing any URI in advance.

Documentation text is looked up separately through a
:class:`DocumentationProvider`, keyed by ``Group``, ``Group.action`` and
``Group.action.parameter``. Missing entries simply render nothing.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable


class ParameterSource(Enum):
    """Where a request parameter's value travels (its calling convention)."""

    PATH = "path"
    QUERY = "query-string"
    BODY = "body"


@dataclass(frozen=True)
class ApiParameterDescription:
    """A single action parameter.

    Parameters
    ----------
    name : str
        Parameter name as the action expects it
    declared_type : Any, default str
        Declared Python type; drives the inferred input kind
    required : bool, default True
        Whether the action requires a value
    source : ParameterSource, default ParameterSource.QUERY
        Calling convention
    default : Any, default None
        Default value, rendered as the input's initial value when not None

    """

    name: str
    declared_type: Any = str
    required: bool = True
    source: ParameterSource = ParameterSource.QUERY
    default: Any = None


@dataclass(frozen=True)
class ApiActionDescription:
    """A single routed action.

    Parameters
    ----------
    group_name : str
        Name of the owning route group (controller)
    name : str
        Action name
    http_method : str
        HTTP verb, e.g. ``"GET"``
    route_template : str
        URI template, possibly with ``{placeholder}`` segments
    parameters : sequence of ApiParameterDescription
        Parameters in declaration order

    """

    group_name: str
    name: str
    http_method: str
    route_template: str
    parameters: Sequence[ApiParameterDescription] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "http_method", self.http_method.upper())
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def documentation_key(self) -> str:
        return f"{self.group_name}.{self.name}"


@dataclass(frozen=True)
class ApiGroupDescription:
    """A named group of actions, usually one controller."""

    name: str
    actions: Sequence[ApiActionDescription] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", tuple(self.actions))


@runtime_checkable
class DocumentationProvider(Protocol):
    """Source of human-readable documentation text."""

    def get_documentation(self, key: str) -> Optional[str]:
        """Return the text for ``key``, or None when nothing is documented."""
        ...


class MappingDocumentationProvider:
    """Documentation provider backed by a plain mapping.

    Examples
    --------
    >>> provider = MappingDocumentationProvider({"Tasks.get": "Fetch one task."})
    >>> provider.get_documentation("Tasks.get")
    'Fetch one task.'
    >>> provider.get_documentation("Tasks.delete") is None
    True

    """

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries = dict(entries or {})

    def get_documentation(self, key: str) -> Optional[str]:
        return self._entries.get(key)


def parameter_documentation_key(action: ApiActionDescription, parameter: ApiParameterDescription) -> str:
    """Documentation key of an action parameter."""
    return f"{action.documentation_key}.{parameter.name}"
