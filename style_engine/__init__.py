"""
Style Engine - HTML and CSS parsing and style resolution in Python.

parse_html() turns markup into a DOM tree, parse_css() turns a stylesheet
into rules, and style_tree() matches the two into a tree of specified
values for layout to consume.
"""

import logging

from style_engine.dom import Node, NodeType, ElementData, text, elem
from style_engine.css import (Stylesheet, Rule, Declaration, Selector, SimpleSelector,
                              Specificity, Value, Keyword, Length, ColorValue, Color, Unit)
from style_engine.parser import (parse_html, parse_css, ParseError, UnexpectedCharacter,
                                 UnexpectedEndOfInput, MismatchedClosingTag, InvalidUnit,
                                 InvalidHexDigit, MalformedDeclaration)
from style_engine.style import StyledNode, Display, PropertyMap, style_tree, specified_values
from style_engine.core import StyleEngine

# Package information
__version__ = "0.1.0"
__description__ = "HTML and CSS parsing and style resolution in Python"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    'Node', 'NodeType', 'ElementData', 'text', 'elem',
    'Stylesheet', 'Rule', 'Declaration', 'Selector', 'SimpleSelector', 'Specificity',
    'Value', 'Keyword', 'Length', 'ColorValue', 'Color', 'Unit',
    'parse_html', 'parse_css', 'style_tree', 'specified_values',
    'StyledNode', 'Display', 'PropertyMap', 'StyleEngine',
    'ParseError', 'UnexpectedCharacter', 'UnexpectedEndOfInput', 'MismatchedClosingTag',
    'InvalidUnit', 'InvalidHexDigit', 'MalformedDeclaration',
]
