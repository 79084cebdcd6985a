"""Tests for the HTML parser.

Well-formed documents are also parsed with BeautifulSoup's html.parser
and the two trees compared.
"""

import pytest
from bs4 import BeautifulSoup, Tag

from style_engine.dom import elem, text
from style_engine.parser import (HTMLParser, MismatchedClosingTag, ParseError, UnexpectedCharacter,
                                 UnexpectedEndOfInput, parse_html)


def dom_tree(node):
    if node.is_text:
        return node.text
    return (node.tag_name, node.element.attributes, [dom_tree(child) for child in node.children])


def soup_tree(tag):
    children = [soup_tree(child) if isinstance(child, Tag) else str(child) for child in tag.children]
    return (tag.name, dict(tag.attrs), children)


class TestWellFormed:
    """Parsing documents the grammar accepts."""

    @pytest.mark.parametrize("tag", ["a", "div", "h1", "P", "x9"])
    def test_single_element_round_trip(self, tag: str) -> None:
        root = parse_html(f"<{tag}><b>x</b></{tag}>")
        assert root.tag_name == tag
        assert root.children == [elem("b", {}, [text("x")])]

    def test_siblings_in_order(self) -> None:
        root = parse_html("<a><b></b><c></c></a>")
        assert root.tag_name == "a"
        assert [child.tag_name for child in root.children] == ["b", "c"]

    def test_attributes_with_either_quote(self) -> None:
        root = parse_html("<div id=\"main\" class='a b' title='say \"hi\"'></div>")
        assert root.element.attributes == {"id": "main", "class": "a b", "title": 'say "hi"'}

    def test_text_node(self) -> None:
        root = parse_html("<p>Hello world</p>")
        assert root.children == [text("Hello world")]

    def test_whitespace_between_nodes_is_skipped(self) -> None:
        root = parse_html("<ul>\n  <li>One</li>\n  <li>Two</li>\n</ul>\n")
        assert root == elem("ul", {}, [
            elem("li", {}, [text("One")]),
            elem("li", {}, [text("Two")]),
        ])

    def test_text_keeps_trailing_whitespace(self) -> None:
        root = parse_html("<p>Hello <b>there</b></p>")
        assert root.children[0] == text("Hello ")

    def test_unicode_text_and_attributes(self) -> None:
        root = parse_html("<p title='ünï'>héllo ☃ 😀</p>")
        assert root.element.attributes["title"] == "ünï"
        assert root.children == [text("héllo ☃ 😀")]

    def test_multiple_roots_are_wrapped_in_html(self) -> None:
        root = parse_html("<a></a><b></b>")
        assert root == elem("html", {}, [elem("a"), elem("b")])

    def test_empty_document_is_empty_html(self) -> None:
        assert parse_html("") == elem("html")
        assert parse_html("  \n ") == elem("html")

    def test_single_text_root(self) -> None:
        root = parse_html("just text")
        assert root.is_text
        assert root.text == "just text"

    def test_parser_class(self) -> None:
        assert HTMLParser("<a></a>").parse() == elem("a")

    @pytest.mark.parametrize("source", [
        '<div id="main" class="note wide"><p>Hello</p><span>World</span></div>',
        "<ul><li>One</li><li class='x'>Two</li><li><b>Three</b></li></ul>",
        "<html><head><title>T</title></head><body><h1>Hi</h1></body></html>",
    ])
    def test_matches_reference_parser(self, source: str) -> None:
        soup = BeautifulSoup(source, "html.parser", multi_valued_attributes=None)
        assert dom_tree(parse_html(source)) == soup_tree(soup.contents[0])


class TestMalformed:
    """Malformed input aborts the parse."""

    def test_mismatched_closing_tag(self) -> None:
        with pytest.raises(MismatchedClosingTag) as excinfo:
            parse_html("<a></b>")
        assert excinfo.value.expected == "a"
        assert excinfo.value.found == "b"
        assert (excinfo.value.line, excinfo.value.column) == (1, 6)

    def test_tag_names_are_case_sensitive(self) -> None:
        with pytest.raises(MismatchedClosingTag):
            parse_html("<Div></div>")

    def test_nested_mismatch(self) -> None:
        with pytest.raises(MismatchedClosingTag):
            parse_html("<a><b></a></b>")

    @pytest.mark.parametrize("source", [
        "<div",
        "<div id='x'",
        "<div><p>text</p>",
        "<div></div",
        "<div></",
    ])
    def test_unexpected_end_of_input(self, source: str) -> None:
        with pytest.raises(UnexpectedEndOfInput):
            parse_html(source)

    def test_unterminated_attribute_quote(self) -> None:
        with pytest.raises(UnexpectedEndOfInput):
            parse_html('<a href="foo></a>')

    def test_unquoted_attribute_value(self) -> None:
        with pytest.raises(UnexpectedCharacter):
            parse_html("<a href=foo></a>")

    def test_attribute_without_value(self) -> None:
        with pytest.raises(UnexpectedCharacter):
            parse_html("<input disabled></input>")

    def test_self_closing_tag_is_rejected(self) -> None:
        with pytest.raises(UnexpectedCharacter):
            parse_html("<br/>")

    def test_empty_tag_name(self) -> None:
        with pytest.raises(UnexpectedCharacter):
            parse_html("<></>")

    def test_stray_closing_tag_at_top_level(self) -> None:
        with pytest.raises(UnexpectedCharacter):
            parse_html("<a></a></b>")

    def test_all_errors_are_parse_errors(self) -> None:
        for source in ["<a></b>", "<a", "<a b=c></a>"]:
            with pytest.raises(ParseError):
                parse_html(source)
