#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlmicrodata/naming.py
"""Property-name policies.

A property-name policy maps a structural member name (``due_date``,
``DueDate``) to the string used in ``itemprop`` attributes. The default is
lower camel case, matching schema.org vocabulary.

Functions
---------
lower_camel_case : ``due_date`` -> ``dueDate`` (default)
snake_case : ``DueDate`` -> ``due_date``
kebab_case : ``DueDate`` -> ``due-date``
identity : returns the name unchanged
get_property_name_policy : resolve a policy name or callable

Examples
--------
    >>> lower_camel_case("due_date")
    'dueDate'
    >>> lower_camel_case("URLPath")
    'urlPath'
    >>> kebab_case("dueDate")
    'due-date'

"""

from __future__ import annotations

import re
from typing import Callable, Union

from htmlmicrodata.exceptions import ValidationError

PropertyNamePolicy = Callable[[str], str]

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s_\-]+")


def split_words(name: str) -> list[str]:
    """Split an identifier into lowercase words at case and separator boundaries."""
    spaced = _ACRONYM_WORD.sub(r"\1 \2", _LOWER_UPPER.sub(r"\1 \2", name))
    return [word.lower() for word in _SEPARATORS.split(spaced) if word]


def lower_camel_case(name: str) -> str:
    """Convert a member name to lower camel case."""
    words = split_words(name)
    if not words:
        return ""
    return words[0] + "".join(word[:1].upper() + word[1:] for word in words[1:])


def snake_case(name: str) -> str:
    """Convert a member name to snake case."""
    return "_".join(split_words(name))


def kebab_case(name: str) -> str:
    """Convert a member name to kebab case."""
    return "-".join(split_words(name))


def identity(name: str) -> str:
    """Return the member name unchanged."""
    return name


POLICIES: dict[str, PropertyNamePolicy] = {
    "camel": lower_camel_case,
    "snake": snake_case,
    "kebab": kebab_case,
    "identity": identity,
}


def get_property_name_policy(policy: Union[str, PropertyNamePolicy]) -> PropertyNamePolicy:
    """Resolve a policy given by name or as a callable.

    Parameters
    ----------
    policy : str or callable
        One of the names in :data:`POLICIES`, or any ``str -> str`` callable

    Returns
    -------
    callable
        The policy function

    Raises
    ------
    ValidationError
        If ``policy`` is an unknown name or not callable

    """
    if callable(policy):
        return policy
    try:
        return POLICIES[policy]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown property name policy {policy!r}; expected one of {sorted(POLICIES)} or a callable",
            parameter_name="property_name_policy",
            parameter_value=policy,
        ) from None
