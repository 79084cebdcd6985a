"""
Character cursor shared by the HTML and CSS parsers.
"""

from typing import Callable, Optional, Tuple, Type

from .errors import ParseError, UnexpectedCharacter, UnexpectedEndOfInput


class CharCursor:
    """
    A forward-only position over a string of Unicode code points.

    Python strings index by code point, so advancing by one position never
    splits a multi-byte character.
    """

    def __init__(self, source: str):
        """
        Initialize the cursor at the start of `source`.

        Args:
            source: The text to scan
        """
        self.input = source
        self.pos = 0

    def eof(self) -> bool:
        """Return True if all input is consumed."""
        return self.pos >= len(self.input)

    def next_char(self) -> str:
        """
        Read the current character without consuming it.

        Raises:
            UnexpectedEndOfInput: If the input is exhausted
        """
        if self.eof():
            raise self.error(UnexpectedEndOfInput, "Unexpected end of input")
        return self.input[self.pos]

    def consume_char(self) -> str:
        """Return the current character and advance past it."""
        char = self.next_char()
        self.pos += 1
        return char

    def starts_with(self, s: str) -> bool:
        """Does the remaining input start with `s`?"""
        return self.input.startswith(s, self.pos)

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """
        Consume characters while `test` holds.

        Args:
            test: Predicate applied to each character

        Returns:
            The consumed characters, possibly empty
        """
        start = self.pos
        while not self.eof() and test(self.input[self.pos]):
            self.pos += 1
        return self.input[start:self.pos]

    def consume_whitespace(self) -> None:
        """Consume and discard zero or more whitespace characters."""
        self.consume_while(str.isspace)

    def expect(self, expected: str, error_class: Type[ParseError] = UnexpectedCharacter) -> str:
        """
        Consume one character, which must equal `expected`.

        Args:
            expected: The required character
            error_class: Error raised when a different character is found

        Returns:
            The consumed character

        Raises:
            UnexpectedEndOfInput: If the input is exhausted
            ParseError: `error_class` if the character differs
        """
        found = self.next_char()
        if found != expected:
            raise self.error(error_class, f"Expected {expected!r} but found {found!r}")
        self.pos += 1
        return found

    def location(self, pos: Optional[int] = None) -> Tuple[int, int]:
        """
        1-based line and column of `pos` (default: the current position).

        Scans the input up to `pos`, so it is only called when reporting.
        """
        if pos is None:
            pos = self.pos
        line = self.input.count('\n', 0, pos) + 1
        column = pos - (self.input.rfind('\n', 0, pos) + 1) + 1
        return line, column

    @property
    def line(self) -> int:
        """1-based line number of the current position."""
        return self.location()[0]

    @property
    def column(self) -> int:
        """1-based column number of the current position."""
        return self.location()[1]

    def error(self, error_class: Type[ParseError], message: str, pos: Optional[int] = None) -> ParseError:
        """
        Build an error located at `pos`.

        Args:
            error_class: The taxonomy error to build
            message: Description of the problem
            pos: Input offset to report; defaults to the current position
        """
        line, column = self.location(pos)
        return error_class(message, line, column)
