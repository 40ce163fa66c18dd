"""Growable byte buffer used by the string decoder."""

DEFAULT_CAPACITY = 16


class ByteBuffer:
    """
    Byte buffer with explicit capacity that doubles on overflow.

    Already-written bytes are preserved across every regrowth. Once
    ``discard`` is called the contents are gone and the buffer is empty.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._data = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self._length

    def _reserve(self, extra: int) -> None:
        """Doubles capacity until ``extra`` more bytes fit."""
        needed = self._length + extra
        capacity = len(self._data)
        if needed <= capacity:
            return
        while capacity < needed:
            capacity *= 2
        self._data.extend(bytes(capacity - len(self._data)))

    def push(self, byte: int) -> None:
        """Appends a single byte."""
        self._reserve(1)
        self._data[self._length] = byte
        self._length += 1

    def write(self, chunk: bytes) -> None:
        """Appends a run of bytes."""
        size = len(chunk)
        if not size:
            return
        self._reserve(size)
        self._data[self._length : self._length + size] = chunk
        self._length += size

    def getvalue(self) -> bytes:
        """Returns exactly the bytes written so far."""
        return bytes(self._data[: self._length])

    def discard(self) -> None:
        """Drops everything written so far."""
        self._data = bytearray(1)
        self._length = 0
