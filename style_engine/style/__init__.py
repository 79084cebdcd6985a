"""
Style resolution for the style engine.
This package matches stylesheet rules against the DOM and builds the styled tree.
"""

from .styled_node import StyledNode, Display, PropertyMap
from .cascade import (MatchedRule, matches, match_rule, matching_rules,
                      specified_values, style_tree)
from ..css import matches_simple_selector

__all__ = [
    'StyledNode', 'Display', 'PropertyMap', 'MatchedRule', 'matches',
    'matches_simple_selector', 'match_rule', 'matching_rules',
    'specified_values', 'style_tree'
]
