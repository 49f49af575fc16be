#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the htmlmicrodata library.

Constants are organized by category:
1. Type Definitions - Literal types
2. Microdata and data-attribute names
3. Rendering defaults
4. HTML serialization
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

PropertyNamePolicyName = Literal["camel", "snake", "kebab", "identity"]

# =============================================================================
# Microdata and data-attribute names
# =============================================================================

ITEMSCOPE_ATTRIBUTE = "itemscope"
ITEMTYPE_ATTRIBUTE = "itemtype"
ITEMPROP_ATTRIBUTE = "itemprop"

CYCLE_MARKER_ATTRIBUTE = "data-cyclic-reference"
RENDER_ERROR_ATTRIBUTE = "data-render-error"
TEMPLATED_ATTRIBUTE = "data-templated"
REQUIRED_ATTRIBUTE = "data-required"
CALLING_CONVENTION_ATTRIBUTE = "data-calling-convention"
METHOD_ATTRIBUTE = "data-method"

# =============================================================================
# Rendering defaults
# =============================================================================

DEFAULT_PROPERTY_NAME_POLICY: PropertyNamePolicyName = "camel"
DEFAULT_ITEM_TYPE_NAMESPACE = "urn:python:"
DEFAULT_LANGUAGE = "en"
DEFAULT_CHARSET = "utf-8"
DEFAULT_DATETIME_DISPLAY_FORMAT = "%A, %B %d, %Y %H:%M:%S %Z"
DEFAULT_ISOLATE_FAULTS = True
DEFAULT_PLUGIN_GROUP = "htmlmicrodata.renderers"

# Class attributes a renderable type may define to steer the default renderer
MEMBERS_ANNOTATION = "__microdata_members__"
ITEMTYPE_ANNOTATION = "__microdata_itemtype__"

# =============================================================================
# HTML serialization
# =============================================================================

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)
