from __future__ import annotations

import struct

from loxlink.errors import TruncatedRecord

_INT32 = struct.Struct("<i")
_UINT32 = struct.Struct("<I")
_FLOAT64 = struct.Struct("<d")


def padding_for(length: int, boundary: int = 4) -> int:
    return (boundary - length % boundary) % boundary


class ByteReader:
    """
    Little-endian cursor over an in-memory buffer.

    Every read checks the remaining byte count first and raises
    ``TruncatedRecord`` instead of returning a short slice.
    """

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._pos = 0

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def has(self, size: int) -> bool:
        return self.remaining >= size

    def _require(self, size: int) -> None:
        if size < 0 or self.remaining < size:
            raise TruncatedRecord(needed=size, remaining=self.remaining, offset=self._pos)

    def read_bytes(self, size: int) -> bytes:
        self._require(size)
        chunk = self._data[self._pos: self._pos + size].tobytes()
        self._pos += size
        return chunk

    def skip(self, size: int) -> None:
        self._require(size)
        self._pos += size

    def _unpack(self, fmt: struct.Struct):
        self._require(fmt.size)
        (value,) = fmt.unpack_from(self._data, self._pos)
        self._pos += fmt.size
        return value

    def read_int32(self) -> int:
        return self._unpack(_INT32)

    def read_uint32(self) -> int:
        return self._unpack(_UINT32)

    def read_float64(self) -> float:
        return self._unpack(_FLOAT64)

    def rest(self) -> bytes:
        chunk = self._data[self._pos:].tobytes()
        self._pos = len(self._data)
        return chunk
