"""
Cursor primitives and the JSON number grammar.

The scanner works on raw bytes. ``peek`` yields the byte under the cursor
as an ``int``, or ``END`` once the input is exhausted; scanning never moves
past the end.
"""

from enum import Enum

from ._errors import Position

END = -1

WHITESPACE = frozenset(b" \t\r\n")
DIGITS = frozenset(b"0123456789")
DIGITS_1_TO_9 = frozenset(b"123456789")

MINUS = ord("-")
PLUS = ord("+")
ZERO = ord("0")
DOT = ord(".")
EXPONENT_MARKERS = frozenset(b"eE")


class NumberState(Enum):
    """
    States of the number validator.

    Each state inspects the byte at the current position and either
    consumes it or hands off to the next state.
    """

    BEGIN = "begin"
    INTEGER = "integer"
    IN_INTEGER = "in_integer"
    FRACTION = "fraction"
    IN_FRACTION = "in_fraction"
    EXPONENT = "exponent"
    IN_EXPONENT = "in_exponent"
    END = "end"
    INVALID = "invalid"


def _byte_at(data: bytes, pos: Position) -> int:
    return data[pos] if pos < len(data) else END


def validate_number(data: bytes, start: Position) -> Position:  # noqa: PLR0912
    """
    Matches the longest valid JSON number beginning at ``start``.

    Returns the position just past the number, or ``start`` itself when no
    number begins there. A valid prefix followed by more digits (``0123``)
    matches only the prefix; rejecting the rest is the caller's job.
    """
    pos = start
    state = NumberState.BEGIN

    while True:
        if state is NumberState.BEGIN:
            if _byte_at(data, pos) == MINUS:
                pos += 1
            if _byte_at(data, pos) in DIGITS:
                state = NumberState.INTEGER
            else:
                state = NumberState.INVALID

        elif state is NumberState.INTEGER:
            char = _byte_at(data, pos)
            if char == ZERO:
                pos += 1
                state = NumberState.FRACTION
            elif char in DIGITS_1_TO_9:
                pos += 1
                state = NumberState.IN_INTEGER
            else:
                state = NumberState.INVALID

        elif state is NumberState.IN_INTEGER:
            while _byte_at(data, pos) in DIGITS:
                pos += 1
            state = NumberState.FRACTION

        elif state is NumberState.FRACTION:
            if _byte_at(data, pos) == DOT:
                pos += 1
                state = NumberState.IN_FRACTION
            else:
                state = NumberState.EXPONENT

        elif state is NumberState.IN_FRACTION:
            if _byte_at(data, pos) not in DIGITS:
                state = NumberState.INVALID
            else:
                while _byte_at(data, pos) in DIGITS:
                    pos += 1
                state = NumberState.EXPONENT

        elif state is NumberState.EXPONENT:
            if _byte_at(data, pos) not in EXPONENT_MARKERS:
                state = NumberState.END
            else:
                pos += 1
                if _byte_at(data, pos) in (PLUS, MINUS):
                    pos += 1
                state = NumberState.IN_EXPONENT

        elif state is NumberState.IN_EXPONENT:
            if _byte_at(data, pos) not in DIGITS:
                state = NumberState.INVALID
            else:
                while _byte_at(data, pos) in DIGITS:
                    pos += 1
                state = NumberState.END

        elif state is NumberState.END:
            return pos

        else:
            return start


class Scanner:
    """
    Read-only cursor over a JSON document.

    The input is never modified; only ``pos`` moves.
    """

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0
        self.length = len(data)

    def peek(self) -> int:
        """Returns current byte without advancing."""
        return self.data[self.pos] if self.pos < self.length else END

    def advance(self) -> int:
        """Returns current byte and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= self.length

    def skip_whitespace(self) -> None:
        """Skips space, tab, carriage return and line feed."""
        while self.pos < self.length and self.data[self.pos] in WHITESPACE:
            self.pos += 1

    def startswith(self, literal: bytes) -> bool:
        return self.data.startswith(literal, self.pos)

    def match_number(self) -> Position:
        """Validates a number at the cursor without moving it."""
        return validate_number(self.data, self.pos)
