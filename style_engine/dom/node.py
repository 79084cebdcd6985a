"""
Node implementation for the DOM.
This module implements the element and text nodes produced by the HTML parser.
"""

from enum import Enum
from typing import Dict, List, Optional, Set, Any


class NodeType(Enum):
    """The kinds of node the DOM can hold."""
    ELEMENT = "element"
    TEXT = "text"


class ElementData:
    """
    Tag name and attributes of an element node.

    Tag names are kept exactly as parsed; no case normalization is applied.
    """

    def __init__(self, tag_name: str, attributes: Optional[Dict[str, str]] = None):
        """
        Initialize element data.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Mapping of attribute names to values
        """
        self.tag_name = tag_name
        self.attributes: Dict[str, str] = dict(attributes or {})

    def id(self) -> Optional[str]:
        """Get the value of the `id` attribute, if any."""
        return self.attributes.get('id')

    def classes(self) -> Set[str]:
        """Get the set of class names from the whitespace-separated `class` attribute."""
        class_attr = self.attributes.get('class')
        if not class_attr:
            return set()
        return set(class_attr.split())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ElementData):
            return NotImplemented
        return self.tag_name == other.tag_name and self.attributes == other.attributes

    def __repr__(self) -> str:
        return f"ElementData({self.tag_name!r}, {self.attributes!r})"


class Node:
    """
    A DOM node.

    Every node owns its children in document order. Element nodes carry
    an `ElementData` payload in `element`; text nodes carry their
    character data in `text`. There are no parent references.
    """

    def __init__(self,
                 node_type: NodeType,
                 children: Optional[List['Node']] = None,
                 element: Optional[ElementData] = None,
                 text: Optional[str] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            children: Child nodes in document order
            element: Element payload, required for element nodes
            text: Character data, required for text nodes
        """
        if node_type == NodeType.ELEMENT and element is None:
            raise ValueError("Element nodes need ElementData")
        if node_type == NodeType.TEXT and text is None:
            raise ValueError("Text nodes need character data")

        self.node_type = node_type
        self.children: List['Node'] = list(children or [])
        self.element = element
        self.text = text

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT

    @property
    def tag_name(self) -> Optional[str]:
        """Tag name of an element node, None for text nodes."""
        return self.element.tag_name if self.element is not None else None

    def __eq__(self, other: Any) -> bool:
        """
        Structural equality: same type, same payload, equal children.

        Args:
            other: The node to compare with

        Returns:
            True if the trees are equal, False otherwise
        """
        if not isinstance(other, Node):
            return NotImplemented
        return (self.node_type == other.node_type
                and self.element == other.element
                and self.text == other.text
                and self.children == other.children)

    def __repr__(self) -> str:
        if self.is_text:
            return f"Node(text={self.text!r})"
        return f"Node({self.element!r}, children={self.children!r})"


def text(data: str) -> Node:
    """Create a text node."""
    return Node(NodeType.TEXT, text=data)


def elem(name: str, attrs: Optional[Dict[str, str]] = None, children: Optional[List[Node]] = None) -> Node:
    """
    Create an element node.

    Args:
        name: Tag name
        attrs: Attribute mapping
        children: Child nodes in document order

    Returns:
        The new element node
    """
    return Node(NodeType.ELEMENT, children=children, element=ElementData(name, attrs))
