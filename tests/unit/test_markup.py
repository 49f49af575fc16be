#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markup.py
"""Unit tests for the markup tree.

Tests cover:
- Element and Text construction
- Single-parent ownership of nodes
- Attribute overwrite and token append
- Builder helpers and traversal
- HTML serialization

"""

import sys

import pytest

from htmlmicrodata.exceptions import MarkupError
from htmlmicrodata.markup import (
    Element,
    HtmlWriter,
    NodeVisitor,
    Text,
    attribute_name,
    element,
    find_elements,
    to_html,
    walk,
)


@pytest.mark.unit
class TestNodes:
    """Tests for Element and Text."""

    def test_text_converts_non_strings(self):
        assert Text(42).content == "42"

    def test_element_requires_tag(self):
        with pytest.raises(ValueError):
            Element("")

    def test_children_attached_on_construction(self):
        child = Text("x")
        parent = Element("span", children=[child])
        assert child.parent is parent

    def test_attribute_order_preserved(self):
        node = Element("a", {"href": "/", "rel": "self"})
        node.set_attribute("title", "Home")
        assert list(node.attributes) == ["href", "rel", "title"]

    def test_set_attribute_overwrites_in_place(self):
        node = Element("a", {"href": "/old", "rel": "self"})
        node.set_attribute("href", "/new")
        assert node.attributes == {"href": "/new", "rel": "self"}
        assert list(node.attributes) == ["href", "rel"]

    def test_append_attribute_adds_tokens_once(self):
        node = Element("span")
        node.append_attribute("itemprop", "name")
        node.append_attribute("itemprop", "title")
        node.append_attribute("itemprop", "name")
        assert node.get_attribute("itemprop") == "name title"

    def test_remove_attribute(self):
        node = Element("span", {"class": "x"})
        node.remove_attribute("class")
        node.remove_attribute("missing")
        assert node.attributes == {}

    def test_text_content_concatenates_descendants(self):
        node = element("p", "Hello ", element("b", "world"))
        assert node.text_content == "Hello world"


@pytest.mark.unit
class TestOwnership:
    """A node has at most one parent, so trees never become DAGs."""

    def test_attaching_attached_node_raises(self):
        shared = Text("shared")
        Element("p", children=[shared])
        with pytest.raises(MarkupError):
            Element("div", children=[shared])

    def test_element_cannot_contain_itself(self):
        node = Element("div")
        with pytest.raises(MarkupError):
            node.append(node)

    def test_element_cannot_contain_ancestor(self):
        outer = Element("div")
        inner = Element("span")
        outer.append(inner)
        outer.detach()
        with pytest.raises(MarkupError):
            inner.append(outer)

    def test_append_rejects_non_nodes(self):
        with pytest.raises(MarkupError):
            Element("div").append("text")

    def test_detach_then_reattach(self):
        child = Text("moved")
        first = Element("p", children=[child])
        second = Element("p")
        second.append(child.detach())
        assert first.children == []
        assert child.parent is second

    def test_detach_removes_by_identity(self):
        a, b = Text("same"), Text("same")
        parent = Element("p", children=[a, b])
        b.detach()
        assert len(parent.children) == 1
        assert parent.children[0] is a

    def test_clone_is_detached_deep_copy(self):
        original = element("ul", element("li", "one"))
        Element("body", children=[original])
        copy = original.clone()
        assert copy == original
        assert copy.parent is None
        assert copy.children[0] is not original.children[0]


@pytest.mark.unit
class TestBuilder:
    """Tests for element() and attribute_name()."""

    def test_attribute_name_mapping(self):
        assert attribute_name("class_") == "class"
        assert attribute_name("data_calling_convention") == "data-calling-convention"

    def test_strings_become_text_and_none_is_skipped(self):
        node = element("span", "a", None, Text("b"))
        assert [child.content for child in node.children] == ["a", "b"]

    def test_none_attribute_values_are_skipped(self):
        node = element("a", href="/", title=None)
        assert node.attributes == {"href": "/"}

    def test_explicit_attributes_come_first(self):
        node = element("form", attributes={"data-templated": "true"}, method="GET")
        assert list(node.attributes) == ["data-templated", "method"]


@pytest.mark.unit
class TestTraversal:
    """Tests for walk(), find_elements() and NodeVisitor."""

    def test_walk_is_document_order(self):
        tree = element("dl", element("dt", "a"), element("dd", element("span", "b")))
        tags = [getattr(node, "tag", "#text") for node in walk(tree)]
        assert tags == ["dl", "dt", "#text", "dd", "span", "#text"]

    def test_find_elements_by_tag_and_attribute(self):
        tree = element(
            "form",
            element("input", name="id", data_required="true"),
            element("input", type="submit"),
        )
        assert len(find_elements(tree, "input")) == 2
        found = find_elements(tree, "input", data_required="true")
        assert [node.get_attribute("name") for node in found] == ["id"]

    def test_custom_visitor(self):
        class ElementCounter(NodeVisitor):
            def __init__(self):
                self.count = 0

            def visit_element(self, node):
                self.count += 1
                for child in node.children:
                    child.accept(self)

            def visit_text(self, node):
                pass

        counter = ElementCounter()
        element("ul", element("li", "a"), element("li", "b")).accept(counter)
        assert counter.count == 3


@pytest.mark.unit
class TestHtmlWriter:
    """Tests for HTML serialization."""

    def test_text_is_escaped(self):
        assert to_html(element("span", "<b> & co")) == "<span>&lt;b&gt; &amp; co</span>"

    def test_attribute_values_are_escaped(self):
        assert to_html(element("a", href='/x?a=1&b="2"')) == '<a href="/x?a=1&amp;b=&quot;2&quot;"></a>'

    def test_void_elements_have_no_end_tag(self):
        assert to_html(element("input", name="id")) == '<input name="id">'

    def test_doctype_for_html_root(self):
        assert to_html(element("html")).startswith("<!DOCTYPE html><html>")
        assert to_html(element("html"), doctype=False) == "<html></html>"

    def test_render_to_bytes_uses_character_references_when_needed(self):
        data = HtmlWriter().render_to_bytes(element("span", "café ✓"), encoding="ascii")
        assert data == b"<span>caf&#233; &#10003;</span>"

    def test_render_to_bytes_utf8(self):
        assert HtmlWriter().render_to_bytes(element("span", "café")) == "<span>café</span>".encode("utf-8")

    def test_siblings_and_nesting_order(self):
        tree = element("dl", element("dt", "a"), element("dd", element("span", "1")), element("br"))
        assert to_html(tree) == "<dl><dt>a</dt><dd><span>1</span></dd><br></dl>"

    def test_deep_tree_beyond_recursion_limit(self):
        depth = sys.getrecursionlimit() * 3
        node = element("span", "leaf")
        for _ in range(depth):
            node = Element("dd", children=[Element("dl", children=[node])])

        html = to_html(node)

        assert html.startswith("<dd><dl>" * 3)
        assert html.count("<dl>") == depth
        assert html.endswith("<span>leaf</span>" + "</dl></dd>" * depth)


@pytest.mark.unit
class TestAttributeNames:
    """Attribute names are checked against the HTML attribute-name grammar."""

    @pytest.mark.parametrize(
        "name",
        ["", 'a onclick="evil()" b', "a b", "x=y", "say'hi", 'q"', "a>b", "a/b", "tab\there", "nul\x00"],
    )
    def test_invalid_names_rejected_on_construction(self, name):
        with pytest.raises(MarkupError):
            Element("a", {name: "1"})

    def test_invalid_name_rejected_by_set_attribute(self):
        node = Element("a")
        with pytest.raises(MarkupError):
            node.set_attribute("on click", "x")
        assert node.attributes == {}

    def test_invalid_name_rejected_by_append_attribute(self):
        with pytest.raises(MarkupError):
            Element("a").append_attribute("item prop", "x")

    @pytest.mark.parametrize("name", ["data-id", "itemprop", "aria-label", "xml:lang", "data-ünïcode"])
    def test_valid_names(self, name):
        node = Element("a", {name: "1"})
        assert node.get_attribute(name) == "1"
