"""Tests for markup re-indentation."""

from egrab.dom import ElementNode
from egrab.markup import extract_markup, format_html
from egrab.report import ErrorKind


def _flatten(formatted: str) -> str:
    return "".join(line.strip() for line in formatted.split("\n"))


# ---------------------------------------------------------------------------
# Indentation
# ---------------------------------------------------------------------------


class TestFormatHtml:
    def test_text_stays_on_its_tag_line(self):
        # Adjacent tags are split, text between an open and close tag is not,
        # so the inner span is one line and does not open a level.
        assert format_html("<div><span>x</span></div>") == "<div>\n  <span>x</span>\n</div>"

    def test_nested_levels(self):
        html = "<div><section><p>x</p></section></div>"
        assert format_html(html) == "<div>\n  <section>\n    <p>x</p>\n  </section>\n</div>"

    def test_siblings(self):
        html = "<ul><li>one</li><li>two</li></ul>"
        assert format_html(html) == "<ul>\n  <li>one</li>\n  <li>two</li>\n</ul>"

    def test_void_tags_do_not_indent(self):
        html = '<div><img src="a.png"><br><input type="text"></div>'
        assert format_html(html) == '<div>\n  <img src="a.png">\n  <br>\n  <input type="text">\n</div>'

    def test_void_tags_case_insensitive(self):
        assert format_html("<DIV><BR><IMG></DIV>") == "<DIV>\n  <BR>\n  <IMG>\n</DIV>"

    def test_self_closing_does_not_indent(self):
        assert format_html("<div><custom-el/></div>") == "<div>\n  <custom-el/>\n</div>"

    def test_single_letter_tags_do_not_open_a_level(self):
        # The opening-tag pattern needs at least two characters inside the brackets
        assert format_html("<p><b>x</b></p>") == "<p>\n<b>x</b>\n</p>"

    def test_blank_lines_and_padding_dropped(self):
        html = "  <div>\n\n   <span>a</span>\n</div>  "
        assert format_html(html) == "<div>\n  <span>a</span>\n</div>"

    def test_indent_never_negative(self):
        assert format_html("</div></div><div>") == "</div>\n</div>\n<div>"

    def test_empty(self):
        assert format_html("") == ""


class TestIdempotence:
    def test_reformatting_flattened_output(self):
        html = '<main class="m"><div><section><span>a</span><img src="x"></section></div></main>'
        once = format_html(html)
        assert format_html(_flatten(once)) == once


# ---------------------------------------------------------------------------
# extract_markup
# ---------------------------------------------------------------------------


class TestExtractMarkup:
    def test_no_selection(self):
        report = extract_markup(None)
        assert not report.success
        assert report.error is ErrorKind.NO_SELECTION
        assert report.message == "No element selected"

    def test_formats_outer_html(self):
        node = ElementNode("div", outer_html="<div><span>x</span></div>")
        report = extract_markup(node)
        assert report.success
        assert report.data == "<div>\n  <span>x</span>\n</div>"

    def test_unreadable_markup(self):
        node = ElementNode("div", outer_html=None)
        report = extract_markup(node)
        assert not report.success
        assert report.error is ErrorKind.SERIALIZATION_FAILURE
