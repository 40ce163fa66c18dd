"""
Strict JSON parser producing a tagged value tree.

Parses a complete JSON document held in memory (or read from a file) into a
``Value`` tree, or raises ``ParseError`` naming the first syntactic failure.
"""

import logging
import os
from typing import IO
from typing import Any

from ._buffer import ByteBuffer
from ._errors import FileLoadError
from ._errors import ParseError
from ._errors import ParseErrorCode
from ._parser import JsonParser
from ._parser import ParseConfig
from ._parser import convert_number
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._reader import read_file
from ._render import render
from ._scanner import NumberState
from ._scanner import Scanner
from ._scanner import validate_number
from ._value import Member
from ._value import Value
from ._value import ValueType

__version__ = "0.1.0"

type Document = bytes | bytearray | memoryview | str

logger = logging.getLogger(__name__)


def _as_bytes(data: Any) -> bytes:
    """Normalizes accepted document types to ``bytes``."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, bytearray | memoryview):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise TypeError(
        f"the JSON document must be bytes or str, not {type(data).__name__}"
    )


def parse_into(
    target: Value, data: Document, config: ParseConfig | None = None
) -> None:
    """
    Parses ``data`` into ``target``.

    Whatever ``target`` held before is released first. If parsing fails the
    target is left ``UNKNOWN`` and the ``ParseError`` propagates, so a
    half-built root is never observable.
    """
    doc = _as_bytes(data)
    parser = JsonParser(Scanner(doc), config or ParseConfig())
    target.release()

    try:
        parser.parse_root(target)
    except ParseError as e:
        target.release()
        logger.debug("Parse failed with %s: %s", e.code.name, e)
        raise


def parse(data: Document, config: ParseConfig | None = None) -> Value:
    """Parses a complete JSON document into a new ``Value``."""
    value = Value()
    parse_into(value, data, config)
    return value


def parse_file(
    path: str | os.PathLike[str], config: ParseConfig | None = None
) -> Value:
    """
    Reads ``path`` and parses its contents.

    I/O failures raise ``FileLoadError`` with ``FILE_CANNOT_OPEN`` or
    ``FILE_READ_ERROR``; syntax errors raise ``ParseError`` as for ``parse``.
    """
    return parse(read_file(path), config)


def load(fp: IO[bytes], config: ParseConfig | None = None) -> Value:
    """Parses JSON from a binary file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), config)


__all__ = [
    "ByteBuffer",
    "FileLoadError",
    "HotPathStats",
    "JsonParser",
    "Member",
    "NumberState",
    "ParseConfig",
    "ParseError",
    "ParseErrorCode",
    "Scanner",
    "Value",
    "ValueType",
    "clear_hot_path_stats",
    "convert_number",
    "get_hot_path_stats",
    "load",
    "parse",
    "parse_file",
    "parse_into",
    "read_file",
    "render",
    "validate_number",
]
