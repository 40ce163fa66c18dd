"""
Error taxonomy for parsing and loading JSON documents.

Every failure carries a ``ParseErrorCode`` so callers can branch on the
exact syntactic condition instead of matching message text.
"""

from enum import Enum

type Position = int


class ParseErrorCode(Enum):
    """Closed set of parse and load failure conditions."""

    EXPECT_VALUE = "expect_value"
    INVALID_VALUE = "invalid_value"
    UNCLOSED_QUOTES = "unclosed_quotes"
    UNCLOSED_BRACKETS = "unclosed_brackets"
    ROOT_NOT_SINGULAR = "root_not_singular"
    NUMBER_TOO_BIG = "number_too_big"
    FILE_CANNOT_OPEN = "file_cannot_open"
    FILE_READ_ERROR = "file_read_error"


_DEFAULT_MESSAGES = {
    ParseErrorCode.EXPECT_VALUE: "Expecting value",
    ParseErrorCode.INVALID_VALUE: "Invalid value",
    ParseErrorCode.UNCLOSED_QUOTES: "Unterminated string",
    ParseErrorCode.UNCLOSED_BRACKETS: "Expecting ',' or closing bracket",
    ParseErrorCode.ROOT_NOT_SINGULAR: "Extra data",
    ParseErrorCode.NUMBER_TOO_BIG: "Number too big",
    ParseErrorCode.FILE_CANNOT_OPEN: "Cannot open file",
    ParseErrorCode.FILE_READ_ERROR: "Short read",
}


class ParseError(ValueError):
    """
    Reports the first syntactic failure found in a JSON document.

    ``pos`` is a byte offset into ``doc``; ``lineno`` and ``colno`` are
    derived from it so messages point at the offending byte.
    """

    def __init__(
        self,
        code: ParseErrorCode,
        doc: bytes = b"",
        pos: Position = 0,
        msg: str | None = None,
    ) -> None:
        if not isinstance(code, ParseErrorCode):
            raise TypeError("code must be a ParseErrorCode")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.code = code
        self.msg = msg if msg is not None else _DEFAULT_MESSAGES[code]
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count(b"\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind(b"\n", 0, pos) if doc else pos + 1

        super().__init__(
            f"{self.msg} at line {self.lineno}, column {self.colno}"
        )


class FileLoadError(ParseError):
    """Raised when a document cannot be read from disk."""

    def __init__(self, code: ParseErrorCode, path: str, msg: str) -> None:
        self.path = path
        super().__init__(code, msg=f"{msg}: {path}")

    def __str__(self) -> str:
        return self.msg
