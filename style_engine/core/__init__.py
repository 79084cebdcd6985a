"""
Core engine for the style engine package.
"""

from .engine import StyleEngine

__all__ = ['StyleEngine']
