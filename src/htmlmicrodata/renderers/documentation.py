#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/documentation.py
"""Renderers that turn route metadata into links and forms.

A route group renders as a section holding one rendering per action. Each
action is rendered back through the registry, so the action renderer can be
replaced on its own.

An action without parameters is a plain hyperlink. An action with
parameters is a form a client can fill in and submit::

    <form name="get" action="/records/{id}" method="GET" data-templated="true">
      <h2>get</h2>
      <label>id<input name="id" type="number" data-required="true"
                      data-calling-convention="path"></label>
      <input type="submit" value="get">
    </form>

``data-templated`` tells clients to expand the URI template before
submitting. Route templates are validated the first time they are rendered;
a malformed one raises :class:`~htmlmicrodata.exceptions.RouteTemplateError`,
which fault isolation never swallows.

"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from htmlmicrodata.api_description import (
    ApiActionDescription,
    ApiGroupDescription,
    ApiParameterDescription,
    parameter_documentation_key,
)
from htmlmicrodata.constants import (
    CALLING_CONVENTION_ATTRIBUTE,
    METHOD_ATTRIBUTE,
    REQUIRED_ATTRIBUTE,
    TEMPLATED_ATTRIBUTE,
)
from htmlmicrodata.exceptions import RouteTemplateError
from htmlmicrodata.links import Uri
from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Element, Node
from htmlmicrodata.renderers.base import BaseRenderer
from htmlmicrodata.renderers.nullable import unwrap_optional

if TYPE_CHECKING:
    from htmlmicrodata.context import RenderingContext

logger = logging.getLogger(__name__)

# Checked in order: bool before int, datetime before date.
INPUT_KINDS: tuple[tuple[type, str], ...] = (
    (bool, "checkbox"),
    (datetime, "datetime-local"),
    (date, "date"),
    (time, "time"),
    (Uri, "url"),
    (int, "number"),
    (float, "number"),
    (Decimal, "number"),
)


def bool_attribute(flag: bool) -> str:
    return "true" if flag else "false"


def validate_route_template(template: str) -> bool:
    """Check a route template and report whether it has placeholders.

    Parameters
    ----------
    template : str
        Route template such as ``/records/{id}``

    Returns
    -------
    bool
        True if the template contains at least one ``{expression}``

    Raises
    ------
    RouteTemplateError
        For a nested, unclosed, unmatched or empty expression

    Examples
    --------
    >>> validate_route_template("/records/{id}")
    True
    >>> validate_route_template("/records")
    False

    """
    templated = False
    opened_at: Optional[int] = None
    for position, char in enumerate(template):
        if char == "{":
            if opened_at is not None:
                raise RouteTemplateError(template, position, "nested '{'")
            opened_at = position
        elif char == "}":
            if opened_at is None:
                raise RouteTemplateError(template, position, "'}' without matching '{'")
            if position == opened_at + 1:
                raise RouteTemplateError(template, opened_at, "empty template expression")
            opened_at = None
            templated = True
    if opened_at is not None:
        raise RouteTemplateError(template, opened_at, "unclosed '{'")
    return templated


def input_value(value: Any) -> str:
    """Format a parameter default as an HTML input value.

    Dates and times use the ISO forms ``date``, ``time`` and
    ``datetime-local`` inputs accept: no offset, at most millisecond
    precision. Aware date-times keep their wall-clock time.

    Examples
    --------
    >>> input_value(datetime(2013, 9, 4, 12, 59, 31))
    '2013-09-04T12:59:31'
    >>> input_value(time(8, 30, 0, 250000))
    '08:30:00.250'

    """
    if isinstance(value, (datetime, time)):
        timespec = "milliseconds" if value.microsecond else "seconds"
        return value.replace(tzinfo=None).isoformat(timespec=timespec)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.name
    return str(value)


def input_kind(declared_type: Any) -> str:
    """Infer an HTML input type from a parameter's declared type."""
    tp = unwrap_optional(declared_type)
    if isinstance(tp, type):
        for candidate, kind in INPUT_KINDS:
            if issubclass(tp, candidate):
                return kind
    return "text"


class ApiGroupRenderer(BaseRenderer):
    """Render a route group as a section of its actions."""

    supported_types = (ApiGroupDescription,)
    empty_tag = "section"

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        section = element("section", element("h1", value.name), id=value.name)
        self.set_property_name(section, property_name, context)

        documentation = context.documentation(value.name)
        if documentation:
            section.append(element("p", documentation, class_="documentation"))

        for action in value.actions:
            section.extend(context.render(None, action, ApiActionDescription))
        return [section]


class ApiActionRenderer(BaseRenderer):
    """Render an action as a hyperlink (no parameters) or a form."""

    supported_types = (ApiActionDescription,)
    empty_tag = "form"

    def __init__(self) -> None:
        self._templates: dict[str, bool] = {}

    def is_templated(self, template: str) -> bool:
        """Validate ``template`` once and remember whether it has placeholders."""
        try:
            return self._templates[template]
        except KeyError:
            pass
        templated = validate_route_template(template)
        self._templates[template] = templated
        logger.debug("Validated route template %s (templated=%s)", template, templated)
        return templated

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        templated = bool_attribute(self.is_templated(value.route_template))
        documentation = context.documentation(value.documentation_key)

        if not value.parameters:
            anchor = element(
                "a",
                value.name,
                href=value.route_template,
                rel=value.name,
                title=documentation,
                attributes={METHOD_ATTRIBUTE: value.http_method, TEMPLATED_ATTRIBUTE: templated},
            )
            self.set_property_name(anchor, property_name, context)
            return [anchor]

        form = element(
            "form",
            element("h2", value.name),
            name=value.name,
            action=value.route_template,
            method=value.http_method,
            attributes={TEMPLATED_ATTRIBUTE: templated},
        )
        self.set_property_name(form, property_name, context)
        if documentation:
            form.append(element("p", documentation, class_="documentation"))

        for parameter in value.parameters:
            form.append(self.render_parameter(value, parameter, context))

        form.append(element("input", type="submit", value=value.name))
        return [form]

    def render_parameter(
        self,
        action: ApiActionDescription,
        parameter: ApiParameterDescription,
        context: RenderingContext,
    ) -> Element:
        """Render one labeled input for ``parameter``."""
        label = element("label", parameter.name)
        documentation = context.documentation(parameter_documentation_key(action, parameter))
        if documentation:
            label.append(element("span", documentation, class_="documentation"))
        label.append(self.render_control(parameter))
        return label

    def render_control(self, parameter: ApiParameterDescription) -> Element:
        """Render the input (or select, for enums) of a parameter."""
        attributes = {
            "name": parameter.name,
            REQUIRED_ATTRIBUTE: bool_attribute(parameter.required),
            CALLING_CONVENTION_ATTRIBUTE: parameter.source.value,
        }

        tp = unwrap_optional(parameter.declared_type)
        if isinstance(tp, type) and issubclass(tp, Enum):
            select = element("select", attributes=attributes)
            for member in tp:
                option = element("option", member.name, value=member.name)
                if parameter.default is member:
                    option.set_attribute("selected", "selected")
                select.append(option)
            return select

        kind = input_kind(tp)
        control = element("input", attributes={"type": kind, **attributes})
        if parameter.default is not None:
            if kind == "checkbox":
                control.set_attribute("value", "true")
                if parameter.default:
                    control.set_attribute("checked", "checked")
            else:
                control.set_attribute("value", input_value(parameter.default))
        return control
