"""
Bounds-checked reading over an in-memory byte buffer.
"""

import struct
from typing import Type

from drumsplice.utils.validation import SpliceFormatError


class ByteCursor:
    """
    Sequential reader that checks the remaining length before every read.

    Each read either returns the requested field and advances, or raises
    the configured error without moving. Nothing is ever sliced past the
    end of the buffer.

    Example:
        cursor = ByteCursor(data, start=50)
        sample_id = cursor.read_u8()
    """

    def __init__(
        self,
        data: bytes,
        start: int = 0,
        error: Type[SpliceFormatError] = SpliceFormatError,
    ):
        if not 0 <= start <= len(data):
            raise ValueError(f"Start offset {start} outside buffer of {len(data)} bytes")
        self.data = data
        self.position = start
        self.error = error

    @property
    def remaining(self) -> int:
        return len(self.data) - self.position

    @property
    def at_end(self) -> bool:
        return self.remaining == 0

    def require(self, size: int, what: str = "field") -> None:
        """
        Ensure at least size bytes remain.

        Raises:
            The cursor's error type if fewer bytes remain
        """
        if size > self.remaining:
            raise self.error(
                f"{what} needs {size} bytes at offset {self.position}, "
                f"only {self.remaining} remain",
                offset=self.position,
            )

    def read_bytes(self, size: int, what: str = "field") -> bytes:
        self.require(size, what)
        chunk = self.data[self.position : self.position + size]
        self.position += size
        return chunk

    def read_u8(self, what: str = "byte") -> int:
        self.require(1, what)
        value = self.data[self.position]
        self.position += 1
        return value

    def read_f32le(self, what: str = "float") -> float:
        return struct.unpack("<f", self.read_bytes(4, what))[0]

    def skip(self, size: int, what: str = "padding") -> None:
        self.require(size, what)
        self.position += size
