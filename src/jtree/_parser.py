"""
JSON parser over a byte ``Scanner``.

Values are filled into caller-supplied ``Value`` nodes, and a container is
only set once it has been closed, so a failure never leaves a half-built
container attached to its parent. Nesting is tracked with an explicit stack
of open frames instead of recursion.
"""

import math
import re
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from ._buffer import DEFAULT_CAPACITY
from ._buffer import ByteBuffer
from ._errors import ParseError
from ._errors import ParseErrorCode
from ._errors import Position
from ._profile import ProfileContext
from ._scanner import DIGITS
from ._scanner import END
from ._scanner import MINUS
from ._scanner import Scanner
from ._value import Member
from ._value import Value
from ._value import ValueType

QUOTE = ord('"')
BACKSLASH = ord("\\")
OPEN_BRACKET = ord("[")
CLOSE_BRACKET = ord("]")
OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")
COMMA = ord(",")
COLON = ord(":")

ESCAPES = {
    ord("b"): b"\b",
    ord("f"): b"\f",
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
    QUOTE: b'"',
    BACKSLASH: b"\\",
    ord("/"): b"/",
}
UNICODE_ESCAPE = ord("u")
HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)

# Longest run of bytes that can be copied without interpretation
_PLAIN_RUN = re.compile(rb'[^"\\]+')


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``unicode_escapes`` enables ``\\uXXXX`` decoding (off by default, in
    which case such escapes are invalid values). ``string_buffer_capacity``
    is the starting size of the string decode buffer.
    """

    unicode_escapes: bool = False
    string_buffer_capacity: int = DEFAULT_CAPACITY

    def __post_init__(self) -> None:
        if not isinstance(self.unicode_escapes, bool):
            raise TypeError("unicode_escapes must be a boolean")
        if (
            not isinstance(self.string_buffer_capacity, int)
            or isinstance(self.string_buffer_capacity, bool)
            or self.string_buffer_capacity < 1
        ):
            raise ValueError("string_buffer_capacity must be a positive int")


def convert_number(
    lexeme: bytes, doc: bytes = b"", pos: Position = 0
) -> float:
    """
    Converts a validated number lexeme to a float.

    Magnitudes that round to infinity are reported as ``NUMBER_TOO_BIG``;
    underflow quietly yields zero.
    """
    with ProfileContext("convert_number", len(lexeme)):
        n = float(lexeme.decode("ascii"))
        if math.isinf(n):
            raise ParseError(ParseErrorCode.NUMBER_TOO_BIG, doc, pos)
        return n


class JsonParser:
    """
    JSON parser over a ``Scanner`` with an explicit container stack.

    Errors propagate unchanged as ``ParseError``; the parser itself never
    resets the root, that is left to the top-level driver.
    """

    def __init__(self, scanner: Scanner, config: ParseConfig):
        self.scanner = scanner
        self.config = config

    def _error(
        self, code: ParseErrorCode, pos: Position | None = None
    ) -> ParseError:
        return ParseError(
            code, self.scanner.data, self.scanner.pos if pos is None else pos
        )

    def parse_root(self, target: Value) -> None:
        """Parses exactly one value surrounded by optional whitespace."""
        scanner = self.scanner
        with ProfileContext("parse_root", scanner.length):
            scanner.skip_whitespace()
            self.parse_value(target)
            scanner.skip_whitespace()
            if not scanner.at_end():
                raise self._error(ParseErrorCode.ROOT_NOT_SINGULAR)

    def parse_value(self, target: Value) -> None:
        """
        Parses the value at the cursor into ``target``.

        Open arrays and objects are kept on an explicit stack of frames, so
        nesting depth is bounded by memory rather than by the interpreter's
        recursion limit. On failure every open frame releases what it has
        accumulated, innermost first, and ``target`` is left untouched.
        """
        scanner = self.scanner
        stack: list[_Frame] = []
        node = target

        try:
            while True:
                char = scanner.peek()
                if char == OPEN_BRACKET or char == OPEN_BRACE:
                    scanner.advance()
                    closing = (
                        CLOSE_BRACKET if char == OPEN_BRACKET else CLOSE_BRACE
                    )
                    frame = _Frame(node, closing)
                    stack.append(frame)
                    if not self._begin_member(frame):
                        node = Value()
                        continue
                    stack.pop()
                    frame.close()
                else:
                    self._parse_scalar(node)

                # node is complete: attach it and close finished containers
                while stack:
                    frame = stack[-1]
                    frame.add(node)
                    if not (
                        self._end_of_member(frame.closing)
                        or self._begin_member(frame)
                    ):
                        break
                    stack.pop()
                    frame.close()
                    node = frame.target

                if not stack:
                    return
                node = Value()
        except ParseError:
            for frame in reversed(stack):
                frame.release()
            raise

    def _parse_scalar(self, target: Value) -> None:
        """Dispatches on the lookahead byte for every non-container value."""
        char = self.scanner.peek()

        if char == ord("n"):
            self._parse_literal(target, b"null", ValueType.NULL)
        elif char == ord("t"):
            self._parse_literal(target, b"true", ValueType.TRUE)
        elif char == ord("f"):
            self._parse_literal(target, b"false", ValueType.FALSE)
        elif char == QUOTE:
            target.set_string(self._parse_raw_string())
        elif char in DIGITS or char == MINUS:
            self._parse_number(target)
        elif char in (END, CLOSE_BRACKET, CLOSE_BRACE):
            raise self._error(ParseErrorCode.EXPECT_VALUE)
        else:
            raise self._error(ParseErrorCode.INVALID_VALUE)

    def _parse_literal(
        self, target: Value, literal: bytes, value_type: ValueType
    ) -> None:
        if not self.scanner.startswith(literal):
            raise self._error(ParseErrorCode.INVALID_VALUE)
        self.scanner.pos += len(literal)
        if value_type is ValueType.NULL:
            target.set_null()
        else:
            target.set_boolean(value_type is ValueType.TRUE)

    def _parse_number(self, target: Value) -> None:
        start = self.scanner.pos
        end = self.scanner.match_number()
        if end == start:
            raise self._error(ParseErrorCode.INVALID_VALUE)

        data = self.scanner.data
        target.set_number(convert_number(data[start:end], data, start))
        self.scanner.pos = end

    def _parse_raw_string(self) -> bytes:
        """
        Decodes a quoted string at the cursor into its exact bytes.

        Also used for object keys. The partial buffer is discarded on any
        failure.
        """
        scanner = self.scanner
        data = scanner.data
        start = scanner.pos
        scanner.advance()
        buffer = ByteBuffer(self.config.string_buffer_capacity)

        with ProfileContext("parse_string"):
            try:
                while True:
                    run = _PLAIN_RUN.match(data, scanner.pos)
                    if run:
                        buffer.write(run.group())
                        scanner.pos = run.end()

                    char = scanner.peek()
                    if char == END:
                        raise self._error(
                            ParseErrorCode.UNCLOSED_QUOTES, start
                        )
                    if char == QUOTE:
                        scanner.advance()
                        return buffer.getvalue()

                    scanner.advance()
                    self._decode_escape(buffer)
            except ParseError:
                buffer.discard()
                raise

    def _decode_escape(self, buffer: ByteBuffer) -> None:
        """Decodes the escape whose backslash was just consumed."""
        scanner = self.scanner
        escape_pos = scanner.pos - 1
        char = scanner.peek()

        if char in ESCAPES:
            buffer.write(ESCAPES[char])
            scanner.advance()
        elif char == UNICODE_ESCAPE and self.config.unicode_escapes:
            scanner.advance()
            buffer.write(self._decode_unicode_escape(escape_pos))
        else:
            raise self._error(ParseErrorCode.INVALID_VALUE, escape_pos)

    def _read_hex4(self, escape_pos: Position) -> int:
        scanner = self.scanner
        digits = scanner.data[scanner.pos : scanner.pos + 4]
        if len(digits) != 4 or not all(c in HEX_DIGITS for c in digits):
            raise self._error(ParseErrorCode.INVALID_VALUE, escape_pos)
        scanner.pos += 4
        return int(digits, 16)

    def _decode_unicode_escape(self, escape_pos: Position) -> bytes:
        """Decodes ``XXXX`` after ``\\u``, joining surrogate pairs."""
        code_point = self._read_hex4(escape_pos)

        if code_point in LOW_SURROGATES:
            raise self._error(ParseErrorCode.INVALID_VALUE, escape_pos)
        if code_point in HIGH_SURROGATES:
            if not self.scanner.startswith(b"\\u"):
                raise self._error(ParseErrorCode.INVALID_VALUE, escape_pos)
            self.scanner.pos += 2
            low = self._read_hex4(escape_pos)
            if low not in LOW_SURROGATES:
                raise self._error(ParseErrorCode.INVALID_VALUE, escape_pos)
            code_point = (
                0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
            )

        return chr(code_point).encode("utf-8")

    def _end_of_member(self, closing: int) -> bool:
        """
        Consumes the separator after a member.

        Returns True when the container is closed, False after a comma.
        """
        self.scanner.skip_whitespace()
        char = self.scanner.peek()
        if char == closing:
            self.scanner.advance()
            return True
        if char == COMMA:
            self.scanner.advance()
            return False
        raise self._error(ParseErrorCode.UNCLOSED_BRACKETS)

    def _begin_member(self, frame: "_Frame") -> bool:
        """
        Positions the cursor on the next member's value.

        Returns True instead when the closing delimiter comes first, which
        covers both empty containers and a trailing comma. For objects the
        key and colon are consumed here.
        """
        scanner = self.scanner
        scanner.skip_whitespace()
        if scanner.peek() == frame.closing:
            scanner.advance()
            return True
        if frame.closing == CLOSE_BRACE:
            frame.key = self._parse_key()
        return False

    def _parse_key(self) -> bytes:
        scanner = self.scanner
        if scanner.peek() != QUOTE:
            raise self._error(ParseErrorCode.INVALID_VALUE)
        key = self._parse_raw_string()
        scanner.skip_whitespace()
        if scanner.peek() != COLON:
            raise self._error(ParseErrorCode.EXPECT_VALUE)
        scanner.advance()
        scanner.skip_whitespace()
        return key


@dataclass
class _Frame:
    """An open array or object and the members it has accumulated."""

    target: Value
    closing: int
    entries: list[Any] = field(default_factory=list)
    key: bytes = b""

    def add(self, value: Value) -> None:
        if self.closing == CLOSE_BRACKET:
            self.entries.append(value)
        else:
            self.entries.append(Member(self.key, value))

    def close(self) -> None:
        """Hands the accumulated members to the target."""
        if self.closing == CLOSE_BRACKET:
            self.target.set_array(self.entries)
        else:
            self.target.set_object(self.entries)

    def release(self) -> None:
        for entry in self.entries:
            if isinstance(entry, Member):
                entry.value.release()
            else:
                entry.release()
        self.entries.clear()
