#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/renderers/scalars.py
"""Renderers for scalar values.

| Type family                  | Shape                                              |
|------------------------------|----------------------------------------------------|
| str, numbers, bool, Enum     | ``<span itemprop>text</span>``                     |
| display-string types         | ``<span itemprop>str(value)</span>``               |
| Uri, parsed URLs             | ``<a href="uri" itemprop>uri</a>``                 |
| Link                         | ``<a {link attributes} itemprop>body</a>``         |
| datetime, date, time         | ``<time datetime="ISO 8601" itemprop>readable</time>`` |
| timedelta                    | ``<time datetime="P1DT2H" itemprop>readable</time>`` |

Date-times render their exact instant: naive values are taken as UTC,
UTC renders with a ``Z`` suffix and other offsets are kept as written, so
:func:`parse_datetime_attribute` gives back an equal instant.

"""

from __future__ import annotations

import ipaddress
import re
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Iterable, Optional
from urllib.parse import ParseResult, SplitResult
from uuid import UUID

from htmlmicrodata.links import Link, Uri
from htmlmicrodata.markup.builder import element
from htmlmicrodata.markup.nodes import Node
from htmlmicrodata.renderers.base import BaseRenderer

if TYPE_CHECKING:
    from htmlmicrodata.context import RenderingContext

DEFAULT_DISPLAY_STRING_TYPES: tuple[type, ...] = (
    UUID,
    Decimal,
    Fraction,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    PurePath,
)

_DURATION = re.compile(
    r"^(?P<sign>-)?P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$"
)
_MICROSECONDS_PER_SECOND = 1_000_000


class ScalarRenderer(BaseRenderer):
    """Render strings, numbers, booleans and enum members as text spans."""

    supported_types = (str, bytes, bytearray, int, float, complex, bool, Enum)

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        span = element("span", self.display_text(value))
        self.set_property_name(span, property_name, context)
        return [span]

    @staticmethod
    def display_text(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return value.name
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        return str(value)


class DisplayStringRenderer(BaseRenderer):
    """Render opted-in types through their ``str()`` conversion.

    Only the types passed in are affected; anything else keeps its
    structure through the reflective renderer.

    Parameters
    ----------
    types : iterable of type, optional
        Types rendered as display strings. Defaults to UUIDs, decimals,
        fractions, IP addresses/networks and paths.

    Examples
    --------
    >>> formatter.register_renderer(DisplayStringRenderer([Money]))

    """

    def __init__(self, types: Iterable[type] | None = None):
        self.supported_types = tuple(types) if types is not None else DEFAULT_DISPLAY_STRING_TYPES

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        span = element("span", str(value))
        self.set_property_name(span, property_name, context)
        return [span]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[t.__name__ for t in self.supported_types]})"


class UriRenderer(BaseRenderer):
    """Render a URI as an anchor pointing at itself."""

    supported_types = (Uri, ParseResult, SplitResult)
    empty_tag = "a"

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        uri = value.geturl() if isinstance(value, (ParseResult, SplitResult)) else str(value)
        anchor = element("a", uri, href=uri)
        self.set_property_name(anchor, property_name, context)
        return [anchor]


class LinkRenderer(BaseRenderer):
    """Render a :class:`~htmlmicrodata.links.Link` with its attributes copied verbatim."""

    supported_types = (Link,)
    empty_tag = "a"

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        anchor = element("a", value.display_text, attributes=value.all_attributes)
        self.set_property_name(anchor, property_name, context)
        return [anchor]


class DateTimeRenderer(BaseRenderer):
    """Render dates and times as ``<time>`` with a machine-readable ``datetime``."""

    supported_types = (datetime, date, time)
    empty_tag = "time"

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        if isinstance(value, datetime):
            instant = as_aware(value)
            machine = format_datetime_attribute(instant)
            readable = instant.strftime(context.options.datetime_display_format)
        elif isinstance(value, date):
            machine = value.isoformat()
            readable = value.strftime("%A, %B %d, %Y")
        else:
            machine = value.isoformat()
            readable = value.strftime("%H:%M:%S")

        node = element("time", readable.strip(), datetime=machine)
        self.set_property_name(node, property_name, context)
        return [node]


class DurationRenderer(BaseRenderer):
    """Render a ``timedelta`` as ``<time>`` with an ISO 8601 duration."""

    supported_types = (timedelta,)
    empty_tag = "time"

    def render_value(
        self,
        property_name: Optional[str],
        value: Any,
        context: RenderingContext,
        declared_type: Any = None,
    ) -> list[Node]:
        node = element("time", str(value), datetime=format_duration(value))
        self.set_property_name(node, property_name, context)
        return [node]


def as_aware(value: datetime) -> datetime:
    """Return ``value`` with UTC attached when it is naive."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_datetime_attribute(value: datetime) -> str:
    """Format an instant for a ``datetime`` attribute.

    Examples
    --------
    >>> format_datetime_attribute(datetime(2013, 9, 4, 12, 59, 31))
    '2013-09-04T12:59:31Z'

    """
    value = as_aware(value)
    text = value.isoformat()
    if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_datetime_attribute(text: str) -> datetime:
    """Parse a value produced by :func:`format_datetime_attribute`."""
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_duration(value: timedelta) -> str:
    """Format a ``timedelta`` as an ISO 8601 duration.

    Days are not folded into months or years, so the result is exact.

    Examples
    --------
    >>> format_duration(timedelta(days=1, hours=2, seconds=3.5))
    'P1DT2H3.5S'
    >>> format_duration(timedelta(0))
    'PT0S'

    """
    total = (value.days * 86_400 + value.seconds) * _MICROSECONDS_PER_SECOND + value.microseconds
    sign = "-" if total < 0 else ""
    total = abs(total)

    days, remainder = divmod(total, 86_400 * _MICROSECONDS_PER_SECOND)
    hours, remainder = divmod(remainder, 3_600 * _MICROSECONDS_PER_SECOND)
    minutes, remainder = divmod(remainder, 60 * _MICROSECONDS_PER_SECOND)
    seconds, microseconds = divmod(remainder, _MICROSECONDS_PER_SECOND)

    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if seconds or microseconds:
        if microseconds:
            time_part += f"{seconds}.{microseconds:06d}".rstrip("0") + "S"
        else:
            time_part += f"{seconds}S"

    if not days and not time_part:
        return "PT0S"
    return f"{sign}P{f'{days}D' if days else ''}{'T' + time_part if time_part else ''}"


def parse_duration(text: str) -> timedelta:
    """Parse a duration produced by :func:`format_duration`.

    Raises
    ------
    ValueError
        If ``text`` is not a day/time ISO 8601 duration

    """
    match = _DURATION.match(text)
    if match is None or text in ("P", "-P") or text.endswith("T"):
        raise ValueError(f"Invalid ISO 8601 duration: {text!r}")

    seconds = Decimal(match["seconds"] or 0)
    result = timedelta(
        days=int(match["days"] or 0),
        hours=int(match["hours"] or 0),
        minutes=int(match["minutes"] or 0),
        microseconds=int(seconds * _MICROSECONDS_PER_SECOND),
    )
    return -result if match["sign"] else result
