"""
Parsers for the style engine.
This package provides the character cursor and the HTML and CSS recursive-descent parsers.
"""

from .cursor import CharCursor
from .errors import (ParseError, UnexpectedCharacter, UnexpectedEndOfInput,
                     MismatchedClosingTag, InvalidUnit, InvalidHexDigit,
                     MalformedDeclaration)
from .html_parser import HTMLParser, parse_html
from .css_parser import CSSParser, parse_css, valid_identifier_char

__all__ = [
    'CharCursor', 'HTMLParser', 'CSSParser', 'parse_html', 'parse_css',
    'valid_identifier_char', 'ParseError', 'UnexpectedCharacter',
    'UnexpectedEndOfInput', 'MismatchedClosingTag', 'InvalidUnit',
    'InvalidHexDigit', 'MalformedDeclaration'
]
