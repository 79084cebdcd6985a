"""
HTML parser implementation.
This module parses a tiny, well-formed subset of HTML into a DOM tree.

Supported: opening and closing tags, quoted attributes and text nodes.
Not supported: comments, doctypes, processing instructions, self-closing
tags, character entities and any kind of error recovery.
"""

import logging
from typing import Dict, List, Tuple

from ..dom import Node, elem, text
from .cursor import CharCursor
from .errors import MismatchedClosingTag, UnexpectedCharacter, UnexpectedEndOfInput

logger = logging.getLogger(__name__)

# Wrapper element for documents without a single root
DEFAULT_ROOT_TAG = "html"

QUOTE_CHARS = ('"', "'")


def is_tag_name_char(c: str) -> bool:
    """ASCII letters and digits."""
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or ('0' <= c <= '9')


class HTMLParser:
    """Recursive-descent parser over a character cursor."""

    def __init__(self, source: str):
        """
        Initialize the HTML parser.

        Args:
            source: The HTML text to parse
        """
        self.cursor = CharCursor(source)

    def parse(self) -> Node:
        """
        Parse the whole input and return the document root.

        Returns:
            The single top-level node, or an `<html>` element wrapping
            all top-level nodes when there is not exactly one

        Raises:
            ParseError: If the markup is malformed
        """
        nodes = self.parse_nodes()

        if not self.cursor.eof():
            # parse_nodes only stops early at a closing tag
            raise self.cursor.error(UnexpectedCharacter, "Closing tag without a matching opening tag")

        if len(nodes) == 1:
            return nodes[0]

        logger.debug(f"Wrapping {len(nodes)} top-level nodes in <{DEFAULT_ROOT_TAG}>")
        return elem(DEFAULT_ROOT_TAG, {}, nodes)

    def parse_nodes(self) -> List[Node]:
        """Parse a sequence of sibling nodes."""
        nodes: List[Node] = []
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.eof() or self.cursor.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        """Parse a single element or text node."""
        if self.cursor.next_char() == '<':
            return self.parse_element()
        return self.parse_text()

    def parse_element(self) -> Node:
        """
        Parse a single element, including its open tag, contents, and closing tag.

        Raises:
            MismatchedClosingTag: If the closing tag names another element
        """
        # Opening tag
        self.cursor.expect('<')
        tag_name = self.parse_tag_name()
        attrs = self.parse_attributes()
        self.cursor.expect('>')

        children = self.parse_nodes()

        # Closing tag
        self.cursor.expect('<')
        self.cursor.expect('/')
        start = self.cursor.pos
        closing_name = self.cursor.consume_while(is_tag_name_char)
        if self.cursor.eof():
            raise self.cursor.error(UnexpectedEndOfInput, f"Unterminated closing tag for <{tag_name}>")
        if closing_name != tag_name:
            raise MismatchedClosingTag(tag_name, closing_name, *self.cursor.location(start))
        self.cursor.expect('>')

        return elem(tag_name, attrs, children)

    def parse_tag_name(self) -> str:
        """
        Parse a tag or attribute name.

        Raises:
            UnexpectedCharacter: If no name characters are present
        """
        name = self.cursor.consume_while(is_tag_name_char)
        if not name:
            raise self.cursor.error(
                UnexpectedCharacter, f"Expected a name but found {self.cursor.next_char()!r}")
        return name

    def parse_attributes(self) -> Dict[str, str]:
        """Parse a list of name="value" pairs, separated by whitespace."""
        attributes: Dict[str, str] = {}
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.next_char() == '>':
                break
            name, value = self.parse_attr()
            attributes[name] = value
        return attributes

    def parse_attr(self) -> Tuple[str, str]:
        """Parse a single name="value" pair."""
        name = self.parse_tag_name()
        self.cursor.expect('=')
        value = self.parse_attr_value()
        return name, value

    def parse_attr_value(self) -> str:
        """
        Parse a quoted value; the closing quote must match the opening one.

        Raises:
            UnexpectedCharacter: If the value does not start with a quote
            UnexpectedEndOfInput: If the quote is never closed
        """
        open_quote = self.cursor.next_char()
        if open_quote not in QUOTE_CHARS:
            raise self.cursor.error(UnexpectedCharacter, f"Expected a quote but found {open_quote!r}")
        self.cursor.consume_char()

        value = self.cursor.consume_while(lambda c: c != open_quote)
        if self.cursor.eof():
            raise self.cursor.error(UnexpectedEndOfInput, "Unterminated attribute value")
        self.cursor.consume_char()
        return value

    def parse_text(self) -> Node:
        """Parse a text node running up to the next `<` or end of input."""
        return text(self.cursor.consume_while(lambda c: c != '<'))


def parse_html(source: str) -> Node:
    """
    Parse an HTML document and return the root node.

    Args:
        source: HTML text

    Returns:
        The document root

    Raises:
        ParseError: If the markup is malformed
    """
    root = HTMLParser(source).parse()
    logger.debug(f"Parsed HTML document ({root.node_type.value} root, {len(root.children)} children)")
    return root
