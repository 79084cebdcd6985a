"""Parser error types.

Every parse failure is fatal: the parser raises one of these and no
partial document or stylesheet is returned.
"""

from typing import Optional


class ParseError(Exception):
    """Raised when HTML or CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        self.message = message
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class UnexpectedCharacter(ParseError):
    """A character not allowed at the current grammar position."""


class UnexpectedEndOfInput(ParseError):
    """The input ended while a token was still required."""


class MismatchedClosingTag(ParseError):
    """An HTML closing tag names a different element than the one open."""

    def __init__(self, expected: str, found: str,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected </{expected}> but found </{found}>", line, column)


class InvalidUnit(ParseError):
    """A CSS length used a unit other than px."""


class InvalidHexDigit(ParseError):
    """A `#rrggbb` color contained a non-hex character."""


class MalformedDeclaration(ParseError):
    """A CSS declaration is missing its `:` or `;`, or has no name or value."""
