"""
Stylesheet structures produced by the CSS parser.
"""

from typing import List, Optional, Any

from .selector import Selector
from .values import Value


class Declaration:
    """A single `name: value` pair."""

    def __init__(self, name: str, value: Value):
        self.name = name
        self.value = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self) -> str:
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """A comma-separated selector list and the declarations it applies."""

    def __init__(self, selectors: List[Selector], declarations: List[Declaration]):
        self.selectors = selectors
        self.declarations = declarations

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.selectors == other.selectors and self.declarations == other.declarations

    def __repr__(self) -> str:
        return f"Rule({self.selectors!r}, {self.declarations!r})"


class Stylesheet:
    """
    An ordered list of rules.

    Source order is preserved because it breaks ties between rules of
    equal specificity during the cascade.
    """

    def __init__(self, rules: Optional[List[Rule]] = None):
        self.rules: List[Rule] = list(rules or [])

    def __len__(self) -> int:
        return len(self.rules)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Stylesheet):
            return NotImplemented
        return self.rules == other.rules

    def __repr__(self) -> str:
        return f"Stylesheet({len(self.rules)} rules)"
