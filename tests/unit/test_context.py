#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_context.py
"""Unit tests for RenderingContext.

Tests cover:
- Cycle detection for self-references and longer ancestor chains
- Shared (non-cyclic) references rendered in full
- Fault isolation and its opt-out
- Configuration errors are never isolated

"""

import sys
from dataclasses import dataclass, field
from typing import Optional

import pytest

from htmlmicrodata.context import RenderingContext, is_value_type
from htmlmicrodata.exceptions import ConfigurationError, RenderingError
from htmlmicrodata.markup import Element, find_elements, walk
from htmlmicrodata.options import MicrodataOptions
from htmlmicrodata.renderers import BaseRenderer, DisplayStringRenderer


@dataclass(eq=False)
class Chain:
    label: str
    next: Optional["Chain"] = None


@dataclass(eq=False)
class Pair:
    left: object
    right: object


@dataclass(eq=False)
class Folder:
    name: str
    children: list = field(default_factory=list)
    parent: Optional["Folder"] = None


class Unprintable:
    def __str__(self):
        raise RuntimeError("cannot print")


class Exploding:
    name = "ok"

    @property
    def broken(self):
        raise KeyError("broken")


class Misconfigured:
    pass


class MisconfiguredRenderer(BaseRenderer):
    supported_types = (Misconfigured,)

    def render_value(self, property_name, value, context, declared_type=None):
        raise ConfigurationError("renderer is misconfigured")


def build_chain(length):
    head = Chain("0")
    for index in range(1, length):
        head = Chain(str(index), head)
    return head


def cycle_markers(nodes):
    return [m for node in nodes for m in find_elements(node, data_cyclic_reference="true")]


def error_markers(nodes):
    return [m for node in nodes for m in walk(node) if isinstance(m, Element) and "data-render-error" in m.attributes]


@pytest.mark.unit
class TestCycles:
    """Cycles terminate with a placeholder and shared references do not."""

    def test_self_reference(self, context):
        node = Chain("self")
        node.next = node

        rendered = context.render(None, node)

        markers = cycle_markers(rendered)
        assert len(markers) == 1
        assert markers[0].get_attribute("itemprop") == "next"

    def test_two_node_cycle(self, context):
        first, second = Chain("first"), Chain("second")
        first.next, second.next = second, first

        rendered = context.render(None, first)

        assert len(cycle_markers(rendered)) == 1
        # the second item is rendered in full before the back-reference
        assert len(find_elements(rendered[0], tag="dl")) == 2

    def test_parent_back_reference_through_collection(self, context):
        root = Folder("root")
        root.children.append(Folder("docs", parent=root))
        root.children.append(Folder("src", parent=root))

        rendered = context.render(None, root)

        assert len(cycle_markers(rendered)) == 2

    def test_shared_sibling_is_not_a_cycle(self, context):
        shared = Chain("shared")
        rendered = context.render(None, Pair(shared, shared))

        assert cycle_markers(rendered) == []
        assert len(find_elements(rendered[0], tag="dl", itemprop="left")) == 1
        assert len(find_elements(rendered[0], tag="dl", itemprop="right")) == 1

    def test_repeated_value_types_are_not_cycles(self, context):
        rendered = context.render(None, [1, 1, "a", "a"])
        assert cycle_markers(rendered) == []
        assert len(find_elements(rendered[0], tag="span")) == 4

    def test_visited_set_is_unwound(self, context):
        node = Chain("a", Chain("b"))
        context.render(None, node)
        assert not context.is_visited(node)
        assert context.depth == 0


@pytest.mark.unit
class TestFaultIsolation:
    """A failing member renders as an error placeholder."""

    def test_failing_str_conversion(self, registry, options):
        registry.register(DisplayStringRenderer([Unprintable]))
        context = RenderingContext(registry, options)

        rendered = context.render(None, Pair(Unprintable(), "fine"))

        markers = error_markers(rendered)
        assert len(markers) == 1
        assert markers[0].get_attribute("data-render-error") == "RuntimeError"
        assert markers[0].get_attribute("itemprop") == "left"
        assert find_elements(rendered[0], tag="span", itemprop="right")[0].text_content == "fine"

    def test_failing_property(self, context, caplog):
        rendered = context.render(None, Exploding())

        markers = error_markers(rendered)
        assert [m.get_attribute("itemprop") for m in markers] == ["broken"]
        assert "broken" in caplog.text

    def test_isolation_disabled_raises(self, registry):
        context = RenderingContext(registry, MicrodataOptions(isolate_faults=False))
        with pytest.raises(RenderingError) as exc_info:
            context.render(None, Exploding())
        assert isinstance(exc_info.value.original_error, KeyError)
        assert exc_info.value.rendering_stage == "broken"

    def test_configuration_error_propagates(self, registry, options):
        registry.register(MisconfiguredRenderer())
        context = RenderingContext(registry, options)
        with pytest.raises(ConfigurationError):
            context.render(None, Pair(Misconfigured(), 1))

    def test_depth_restored_after_fault(self, context):
        context.render(None, Exploding())
        assert context.depth == 0


@pytest.mark.unit
class TestDeepGraphs:
    """Acyclic graphs are rendered in full or not at all."""

    def test_deep_chain_renders_completely(self, context):
        rendered = context.render(None, build_chain(100))

        assert error_markers(rendered) == []
        assert len(find_elements(rendered[0], tag="dl")) == 100

    @pytest.mark.parametrize("isolate_faults", [True, False])
    def test_chain_beyond_recursion_limit_raises(self, registry, isolate_faults):
        context = RenderingContext(registry, MicrodataOptions(isolate_faults=isolate_faults))
        chain = build_chain(sys.getrecursionlimit() * 2)

        with pytest.raises(RenderingError) as exc_info:
            context.render(None, chain)

        assert isinstance(exc_info.value.original_error, RecursionError)
        assert context.depth == 0
        assert not context.is_visited(chain)


@pytest.mark.unit
class TestHelpers:
    """Tests for the smaller context helpers."""

    @pytest.mark.parametrize("value", [None, 1, "a", b"x", 1.5, True])
    def test_value_types(self, value):
        assert is_value_type(value)

    @pytest.mark.parametrize("value", [[], {}, object(), Chain("x")])
    def test_reference_types(self, value):
        assert not is_value_type(value)

    def test_item_type_defaults_to_namespace(self, context):
        assert context.item_type_for(Chain) == f"urn:python:{__name__}.Chain"

    def test_item_type_override(self, context):
        class Task:
            __microdata_itemtype__ = "https://schema.org/Action"

        assert context.item_type_for(Task) == "https://schema.org/Action"

    def test_documentation_without_provider(self, context):
        assert context.documentation("Records") is None

    def test_format_property_name_uses_policy(self, registry):
        context = RenderingContext(registry, MicrodataOptions(property_name_policy="kebab"))
        assert context.format_property_name("due_date") == "due-date"
