"""
Styled nodes: DOM nodes annotated with their specified values.
"""

from enum import Enum
from typing import Dict, List, Optional

from ..css import Keyword, Value
from ..dom import Node

# Map from CSS property names to values
PropertyMap = Dict[str, Value]


class Display(Enum):
    """Values of the `display` property understood by layout."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A DOM node with associated style data.

    `node` is the source DOM node itself, not a copy; `children` parallels
    `node.children`.
    """

    def __init__(self, node: Node,
                 specified_values: Optional[PropertyMap] = None,
                 children: Optional[List['StyledNode']] = None):
        self.node = node
        self.specified_values: PropertyMap = dict(specified_values or {})
        self.children: List['StyledNode'] = list(children or [])

    def value(self, name: str) -> Optional[Value]:
        """Return the specified value of a property if it exists, otherwise None."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return the specified value of `name`, else of `fallback_name`, else `default`.

        Args:
            name: Property to look up first (e.g. `margin-left`)
            fallback_name: Property to try next (e.g. `margin`)
            default: Value used when neither is specified
        """
        value = self.value(name)
        if value is not None:
            return value
        value = self.value(fallback_name)
        if value is not None:
            return value
        return default

    def display(self) -> Display:
        """The value of the `display` property (defaults to inline)."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.keyword == 'block':
                return Display.BLOCK
            if value.keyword == 'none':
                return Display.NONE
        return Display.INLINE

    def __repr__(self) -> str:
        return f"StyledNode({self.node!r}, {self.specified_values!r}, children={len(self.children)})"
