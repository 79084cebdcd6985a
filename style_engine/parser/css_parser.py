"""
CSS parser implementation.
This module parses a tiny subset of CSS into a Stylesheet.

A stylesheet is a list of rules; each rule is a comma-separated list of
simple selectors followed by a `{ name: value; ... }` block. Values are
keywords, px lengths, or `#rrggbb` colors. @-rules, comments and
combinators are not supported.
"""

import logging
import string
from typing import List

from ..css import (Color, ColorValue, Declaration, Keyword, Length, Rule,
                   SimpleSelector, Stylesheet, Unit, Value)
from .cursor import CharCursor
from .errors import InvalidHexDigit, InvalidUnit, MalformedDeclaration, UnexpectedCharacter

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)


def valid_identifier_char(c: str) -> bool:
    """ASCII letters, digits, `-` and `_`."""
    # TODO: accept U+00A0 and above once selectors and keywords need them
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or ('0' <= c <= '9') or c in '-_'


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


class CSSParser:
    """Recursive-descent parser over a character cursor."""

    def __init__(self, source: str):
        """
        Initialize the CSS parser.

        Args:
            source: The CSS text to parse
        """
        self.cursor = CharCursor(source)

    def parse(self) -> Stylesheet:
        """
        Parse the whole input.

        Raises:
            ParseError: If the stylesheet is malformed
        """
        return Stylesheet(self.parse_rules())

    def parse_rules(self) -> List[Rule]:
        """Parse a list of rule sets, separated by optional whitespace."""
        rules: List[Rule] = []
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.eof():
                break
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        """Parse a rule set: `<selectors> { <declarations> }`."""
        return Rule(self.parse_selectors(), self.parse_declarations())

    def parse_selectors(self) -> List[SimpleSelector]:
        """
        Parse a comma-separated list of selectors.

        Returns:
            The selectors, highest specificity first

        Raises:
            UnexpectedCharacter: If a selector is empty or followed by
                anything but `,` or `{`
        """
        selectors: List[SimpleSelector] = []
        while True:
            start = self.cursor.pos
            selector = self.parse_simple_selector()
            if self.cursor.pos == start:
                # an empty selector would match every element
                raise self.cursor.error(
                    UnexpectedCharacter, f"Expected a selector but found {self.cursor.next_char()!r}")
            selectors.append(selector)
            self.cursor.consume_whitespace()
            c = self.cursor.next_char()
            if c == ',':
                self.cursor.consume_char()
                self.cursor.consume_whitespace()
            elif c == '{':
                break
            else:
                raise self.cursor.error(UnexpectedCharacter, f"Unexpected character {c!r} in selector list")

        # sort() is stable, so equal specificities keep source order
        selectors.sort(key=lambda selector: selector.specificity(), reverse=True)
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        """Parse one simple selector, e.g.: `type#id.class1.class2.class3`."""
        selector = SimpleSelector()
        while not self.cursor.eof():
            c = self.cursor.next_char()
            if c == '#':
                self.cursor.consume_char()
                selector.id = self._parse_selector_name()
            elif c == '.':
                self.cursor.consume_char()
                selector.classes.add(self._parse_selector_name())
            elif c == '*':
                # universal selector
                self.cursor.consume_char()
            elif valid_identifier_char(c):
                selector.tag_name = self.parse_identifier()
            else:
                break
        return selector

    def _parse_selector_name(self) -> str:
        name = self.parse_identifier()
        if not name:
            raise self.cursor.error(
                UnexpectedCharacter, f"Expected an identifier but found {self.cursor.next_char()!r}")
        return name

    def parse_declarations(self) -> List[Declaration]:
        """Parse a list of declarations enclosed in `{ ... }`."""
        self.cursor.expect('{')
        declarations: List[Declaration] = []
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.next_char() == '}':
                self.cursor.consume_char()
                break
            declarations.append(self.parse_declaration())
        return declarations

    def parse_declaration(self) -> Declaration:
        """
        Parse one `<property>: <value>;` declaration.

        Raises:
            MalformedDeclaration: If the name, `:` or `;` is missing
        """
        property_name = self.parse_identifier()
        if not property_name:
            raise self.cursor.error(
                MalformedDeclaration, f"Expected a property name but found {self.cursor.next_char()!r}")
        self.cursor.consume_whitespace()
        self.cursor.expect(':', MalformedDeclaration)
        self.cursor.consume_whitespace()
        value = self.parse_value()
        self.cursor.consume_whitespace()
        self.cursor.expect(';', MalformedDeclaration)
        return Declaration(property_name, value)

    # Methods for parsing values:

    def parse_value(self) -> Value:
        c = self.cursor.next_char()
        if is_digit(c):
            return self.parse_length()
        if c == '#':
            return self.parse_color()

        keyword = self.parse_identifier()
        if not keyword:
            raise self.cursor.error(MalformedDeclaration, f"Expected a value but found {c!r}")
        return Keyword(keyword)

    def parse_length(self) -> Length:
        return Length(self.parse_float(), self.parse_unit())

    def parse_float(self) -> float:
        start = self.cursor.pos
        digits = self.cursor.consume_while(lambda c: is_digit(c) or c == '.')
        try:
            return float(digits)
        except ValueError:
            raise self.cursor.error(MalformedDeclaration, f"Invalid number {digits!r}", start) from None

    def parse_unit(self) -> Unit:
        """
        Parse a length unit.

        Raises:
            InvalidUnit: For anything other than `px` (any case)
        """
        start = self.cursor.pos
        unit = self.parse_identifier()
        if unit.lower() == 'px':
            return Unit.PX
        raise self.cursor.error(InvalidUnit, f"Unrecognized unit {unit!r}", start)

    def parse_color(self) -> ColorValue:
        self.cursor.expect('#')
        return ColorValue(Color(
            self.parse_hex_pair(),
            self.parse_hex_pair(),
            self.parse_hex_pair(),
            255))

    def parse_hex_pair(self) -> int:
        """
        Parse two hexadecimal digits.

        Raises:
            InvalidHexDigit: If either character is not a hex digit
        """
        digits = ''
        for _ in range(2):
            c = self.cursor.next_char()
            if c not in HEX_DIGITS:
                raise self.cursor.error(InvalidHexDigit, f"Invalid hex digit {c!r} in color")
            digits += self.cursor.consume_char()
        return int(digits, 16)

    def parse_identifier(self) -> str:
        """Parse a property name or keyword."""
        return self.cursor.consume_while(valid_identifier_char)


def parse_css(source: str) -> Stylesheet:
    """
    Parse a whole CSS stylesheet.

    Args:
        source: CSS text

    Returns:
        The parsed Stylesheet, rules in source order

    Raises:
        ParseError: If the stylesheet is malformed
    """
    stylesheet = CSSParser(source).parse()
    logger.debug(f"Parsed stylesheet with {len(stylesheet.rules)} rules")
    return stylesheet
