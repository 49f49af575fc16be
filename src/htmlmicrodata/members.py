#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/members.py
"""Structural member enumeration for the reflective renderer.

Members are enumerated in a stable, deterministic order:

1. ``__microdata_members__`` on the class, if present: an explicit ordered
   list of member names
2. dataclass fields, in declaration order
3. named-tuple fields, in declaration order
4. otherwise public instance attributes (insertion order), then public
   ``__slots__``, then public properties, base classes first

Names starting with an underscore are never members. Declared member types
come from the class's type hints and default to ``object``.

"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterator, get_type_hints

from htmlmicrodata.constants import MEMBERS_ANNOTATION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Member:
    """A readable member of an object: its name and declared type."""

    name: str
    declared_type: Any = object


def iter_members(value: Any) -> Iterator[Member]:
    """Yield the members of ``value`` in rendering order."""
    cls = type(value)
    hints = class_type_hints(cls)
    for name in member_names(value):
        yield Member(name, hints.get(name, object))


def member_names(value: Any) -> list[str]:
    """Return the member names of ``value`` in rendering order."""
    cls = type(value)

    explicit = getattr(cls, MEMBERS_ANNOTATION, None)
    if explicit is not None:
        return list(explicit)

    if dataclasses.is_dataclass(value):
        return [f.name for f in dataclasses.fields(value) if _is_public(f.name)]

    if isinstance(value, tuple) and hasattr(cls, "_fields"):
        return [name for name in cls._fields if _is_public(name)]

    names: list[str] = []
    seen: set[str] = set()

    def add(name: str) -> None:
        if _is_public(name) and name not in seen:
            seen.add(name)
            names.append(name)

    for name in getattr(value, "__dict__", {}):
        add(name)
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if hasattr(value, name):
                add(name)
    for name in _property_names(cls):
        add(name)
    return names


@lru_cache(maxsize=None)
def _property_names(cls: type) -> tuple[str, ...]:
    names = []
    for klass in reversed(cls.__mro__):
        for name, attribute in vars(klass).items():
            if isinstance(attribute, property) and name not in names:
                names.append(name)
    return tuple(names)


@lru_cache(maxsize=None)
def class_type_hints(cls: type) -> dict[str, Any]:
    """Return resolved type hints for ``cls`` and its properties.

    Hints that cannot be resolved (unknown forward references and the like)
    are dropped, never raised.
    """
    hints: dict[str, Any] = {}
    for name in _property_names(cls):
        getter = getattr(cls, name).fget
        try:
            returned = get_type_hints(getter).get("return")
        except Exception:
            returned = None
        if returned is not None:
            hints[name] = returned

    try:
        hints.update(get_type_hints(cls))
    except Exception as exc:
        logger.debug("Could not resolve type hints of %s: %s", cls.__qualname__, exc)
    return hints


def _is_public(name: str) -> bool:
    return not name.startswith("_")
