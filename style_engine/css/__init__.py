"""
CSS object model for the style engine.
This package provides stylesheets, rules, selectors and declaration values.
"""

from .values import Value, Keyword, Length, ColorValue, Color, Unit
from .selector import Selector, SimpleSelector, Specificity, matches_simple_selector
from .stylesheet import Stylesheet, Rule, Declaration

__all__ = [
    'Value', 'Keyword', 'Length', 'ColorValue', 'Color', 'Unit',
    'Selector', 'SimpleSelector', 'Specificity', 'matches_simple_selector',
    'Stylesheet', 'Rule', 'Declaration'
]
