"""
CSS selectors.
This module defines selectors, their specificity, and how they match DOM elements.
"""

from typing import Iterable, Optional, Set, Tuple, Any

from ..dom import ElementData

# (id count, class count, tag count), compared lexicographically
Specificity = Tuple[int, int, int]


class Selector:
    """
    Base class for CSS selectors.

    Concrete selectors report their specificity and decide whether they
    match an element. Only simple selectors exist today; combinator
    selectors would subclass this too.
    """

    def specificity(self) -> Specificity:
        raise NotImplementedError

    def matches(self, element: ElementData) -> bool:
        raise NotImplementedError


class SimpleSelector(Selector):
    """
    A selector without combinators, e.g. `div#main.note.wide`.

    Every present constraint must hold for the selector to match; an empty
    selector (written `*`) matches any element.
    """

    def __init__(self,
                 tag_name: Optional[str] = None,
                 id: Optional[str] = None,
                 classes: Optional[Iterable[str]] = None):
        """
        Initialize a simple selector.

        Args:
            tag_name: Required tag name, or None for any
            id: Required id, or None for any
            classes: Class names the element must all carry
        """
        self.tag_name = tag_name
        self.id = id
        self.classes: Set[str] = set(classes or ())

    def specificity(self) -> Specificity:
        a = 1 if self.id is not None else 0
        b = len(self.classes)
        c = 1 if self.tag_name is not None else 0
        return (a, b, c)

    def matches(self, element: ElementData) -> bool:
        return matches_simple_selector(element, self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (self.tag_name == other.tag_name
                and self.id == other.id
                and self.classes == other.classes)

    def __repr__(self) -> str:
        return f"SimpleSelector(tag_name={self.tag_name!r}, id={self.id!r}, classes={sorted(self.classes)!r})"


def matches_simple_selector(element: ElementData, selector: SimpleSelector) -> bool:
    """
    Check if an element matches a simple selector.

    Args:
        element: The element to match against
        selector: The selector to check

    Returns:
        True if every constraint of the selector holds for the element
    """
    if selector.tag_name is not None and element.tag_name != selector.tag_name:
        return False

    if selector.id is not None and element.id() != selector.id:
        return False

    if selector.classes and not selector.classes <= element.classes():
        return False

    return True
