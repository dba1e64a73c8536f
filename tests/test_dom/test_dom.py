"""Tests for the element/stylesheet model."""

import pytest

from egrab.dom import (
    Declaration,
    ElementNode,
    PageDocument,
    ScriptBlock,
    StyleRule,
    StyleSheet,
    is_engine_element,
    parse_declarations,
)


# ---------------------------------------------------------------------------
# ElementNode
# ---------------------------------------------------------------------------


class TestElementNode:
    def test_empty_tag_rejected(self):
        with pytest.raises(ValueError):
            ElementNode("")

    def test_children_get_parent(self):
        child = ElementNode("span")
        root = ElementNode("div", children=[child])
        assert child.parent is root

    def test_descendants_in_document_order(self):
        tree = ElementNode("div", id="a", children=[
            ElementNode("ul", id="b", children=[ElementNode("li", id="c"), ElementNode("li", id="d")]),
            ElementNode("p", id="e"),
        ])
        assert [n.id for n in tree.descendants()] == ["b", "c", "d", "e"]

    def test_class_list_of_non_string_class(self):
        assert ElementNode("svg", class_name=object()).class_list == []

    def test_class_list_prefers_reported_tokens(self):
        path = ElementNode("path", class_name=None, classes=["a", "b"])
        assert path.class_list == ["a", "b"]

    def test_class_list_splits_whitespace(self):
        assert ElementNode("div", class_name=" a  b\tc ").class_list == ["a", "b", "c"]


# ---------------------------------------------------------------------------
# Inline declarations
# ---------------------------------------------------------------------------


class TestParseDeclarations:
    def test_order_preserved(self):
        decls = parse_declarations("color: red; margin: 0")
        assert decls == [Declaration("color", "red"), Declaration("margin", "0")]

    def test_important(self):
        decls = parse_declarations("color: red !important;")
        assert decls == [Declaration("color", "red", True)]

    def test_empty(self):
        assert parse_declarations("") == []
        assert parse_declarations(" ; ;") == []

    def test_render(self):
        assert Declaration("color", "red", True).render() == "color: red !important;"
        assert Declaration("color", "red").render() == "color: red;"


# ---------------------------------------------------------------------------
# Engine-owned UI
# ---------------------------------------------------------------------------


class TestEngineElement:
    def test_id_prefix(self):
        assert is_engine_element(ElementNode("div", id="egrab-overlay"))

    def test_engine_class(self):
        assert is_engine_element(ElementNode("div", class_name="egrab-element egrab-toast"))

    def test_inside_toast(self):
        message = ElementNode("span", class_name="message")
        ElementNode("div", id="egrab-toast", children=[message])
        assert is_engine_element(message)

    def test_engine_class_on_svg_node(self):
        icon = ElementNode("svg", class_name=None, classes=["egrab-element", "icon"])
        assert is_engine_element(icon)

    def test_regular_element(self):
        assert not is_engine_element(ElementNode("div", id="card", class_name="egrabbed"))

    def test_none(self):
        assert not is_engine_element(None)


# ---------------------------------------------------------------------------
# Stylesheets and scripts
# ---------------------------------------------------------------------------


class TestStyleSheet:
    def test_inaccessible_sheet_has_no_rules(self):
        sheet = StyleSheet(href="https://cdn.example.com/a.css", rules=None, error="SecurityError")
        assert not sheet.accessible
        assert sheet.style_rules() == []

    def test_style_rules_skip_other_kinds(self):
        rule = StyleRule(".a", [Declaration("color", "red")])
        sheet = StyleSheet(rules=[StyleRule("", kind="other"), rule])
        assert sheet.style_rules() == [rule]


class TestPageDocument:
    def test_inline_scripts(self):
        doc = PageDocument(scripts=[
            ScriptBlock(text="a"),
            ScriptBlock(text="", src="app.js"),
            ScriptBlock(text="b", src=""),
        ])
        assert [s.text for s in doc.inline_scripts()] == ["a", "b"]

    def test_default_matcher_uses_reported_selectors(self):
        node = ElementNode("div", matched_selectors={".a"})
        doc = PageDocument()
        assert doc.matches(node, ".a")
        assert not doc.matches(node, ".b")
