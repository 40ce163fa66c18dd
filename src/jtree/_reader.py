"""Reads a whole document from disk for the parser."""

import logging
import os

from ._errors import FileLoadError
from ._errors import ParseErrorCode

logger = logging.getLogger(__name__)


def read_file(path: str | os.PathLike[str]) -> bytes:
    """
    Returns the full contents of ``path``.

    Raises ``FileLoadError`` with ``FILE_CANNOT_OPEN`` if the file cannot be
    opened, or ``FILE_READ_ERROR`` if fewer bytes arrive than the size the
    filesystem reported.
    """
    name = os.fspath(path)
    try:
        fp = open(name, "rb")  # noqa: SIM115
    except OSError as e:
        logger.debug("Cannot open %s: %s", name, e)
        raise FileLoadError(
            ParseErrorCode.FILE_CANNOT_OPEN, name, "Cannot open file"
        ) from e

    with fp:
        try:
            expected = os.fstat(fp.fileno()).st_size
            data = fp.read()
        except OSError as e:
            logger.debug("Read of %s failed: %s", name, e)
            raise FileLoadError(
                ParseErrorCode.FILE_READ_ERROR, name, "Cannot read file"
            ) from e

    if len(data) < expected:
        logger.debug(
            "Short read of %s: got %d of %d bytes", name, len(data), expected
        )
        raise FileLoadError(
            ParseErrorCode.FILE_READ_ERROR,
            name,
            f"Short read ({len(data)} of {expected} bytes)",
        )

    logger.debug("Read %d bytes from %s", len(data), name)
    return data
