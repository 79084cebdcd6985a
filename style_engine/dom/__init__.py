"""
DOM model for the style engine.
This package provides the passive element and text node structures built by the HTML parser.
"""

from .node import Node, NodeType, ElementData, text, elem

__all__ = [
    'Node', 'NodeType', 'ElementData', 'text', 'elem'
]
