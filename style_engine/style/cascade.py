"""
Applying CSS styles to the DOM.

Rules are matched against each element, ordered by the specificity of
their best matching selector (source order breaking ties), and their
declarations applied lowest first so that later ones win.
"""

import logging
from typing import List, Optional, Tuple

from ..css import Rule, Selector, SimpleSelector, Specificity, Stylesheet, matches_simple_selector
from ..dom import ElementData, Node
from .styled_node import PropertyMap, StyledNode

logger = logging.getLogger(__name__)

# A rule and the specificity of its most specific matching selector
MatchedRule = Tuple[Specificity, Rule]


def matches(element: ElementData, selector: Selector) -> bool:
    """
    Check if an element matches a selector.

    Args:
        element: The element to check
        selector: The selector to match

    Returns:
        True if the element matches the selector, False otherwise
    """
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(element, selector)
    return selector.matches(element)


def match_rule(element: ElementData, rule: Rule) -> Optional[MatchedRule]:
    """
    If `rule` matches `element`, return a MatchedRule. Otherwise return None.

    A rule matches when any of its selectors does; the specificity used is
    the highest among the selectors that match.
    """
    specificities = [selector.specificity() for selector in rule.selectors if matches(element, selector)]
    if not specificities:
        return None
    return max(specificities), rule


def matching_rules(element: ElementData, stylesheet: Stylesheet) -> List[MatchedRule]:
    """Find all CSS rules that match the given element, in source order."""
    # Linear scan; indexing rules by tag/id/class is left for large stylesheets
    matched = []
    for rule in stylesheet.rules:
        matched_rule = match_rule(element, rule)
        if matched_rule is not None:
            matched.append(matched_rule)
    return matched


def specified_values(element: ElementData, stylesheet: Stylesheet) -> PropertyMap:
    """
    Apply styles to a single element, returning the specified values.

    Args:
        element: The element to style
        stylesheet: The stylesheet to apply

    Returns:
        Property name to value, after the cascade
    """
    values: PropertyMap = {}
    rules = matching_rules(element, stylesheet)

    # Go through the rules from lowest to highest specificity. The sort is
    # stable, so equal specificities stay in source order.
    rules.sort(key=lambda matched_rule: matched_rule[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    return values


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Apply a stylesheet to an entire DOM tree, returning a StyledNode tree.

    Only specified values are computed; nothing is inherited.

    Args:
        root: The DOM root
        stylesheet: The stylesheet to apply

    Returns:
        A StyledNode tree mirroring the DOM
    """
    if root.is_element:
        values = specified_values(root.element, stylesheet)
    else:
        values = {}

    return StyledNode(
        root,
        values,
        [style_tree(child, stylesheet) for child in root.children])
