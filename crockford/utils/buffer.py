from typing import Optional, Tuple


class ByteBuffer:
    """Caller-owned growable byte buffer with explicit spare capacity.

    Appends go through ``extend(n)``, which hands back a writable view onto
    exactly the new region. Spare capacity is reused in place; when it runs
    out the storage is reallocated and the prior bytes copied over, so views
    returned earlier must not be kept across appends.
    """

    def __init__(self, data: bytes = b"", capacity: Optional[int] = None):
        size = len(data)
        if capacity is None or capacity < size:
            capacity = size
        self._data = bytearray(capacity)
        self._data[:size] = data
        self._len = size

    def __len__(self) -> int:
        return self._len

    def __bytes__(self) -> bytes:
        return bytes(self._data[:self._len])

    def __eq__(self, other):
        if isinstance(other, ByteBuffer):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self) == bytes(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ByteBuffer({bytes(self)!r}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return len(self._data)

    def getvalue(self) -> bytes:
        return bytes(self)

    def decode(self, encoding: str = "ascii") -> str:
        return bytes(self).decode(encoding)

    def reserve(self, n: int) -> None:
        """Make room for n more bytes without changing the length."""
        needed = self._len + n
        if needed <= self.capacity:
            return
        grown = bytearray(max(needed, 2 * self.capacity))
        grown[:self._len] = memoryview(self._data)[:self._len]
        self._data = grown

    def extend(self, n: int) -> memoryview:
        """Append n zeroed bytes and return a writable view onto them."""
        if n < 0:
            raise ValueError("cannot extend by a negative size")
        self.reserve(n)
        start = self._len
        self._len += n
        view = memoryview(self._data)[start:self._len]
        # spare capacity may hold bytes left over from reset()
        view[:] = bytes(n)
        return view

    def append(self, data: bytes) -> None:
        self.extend(len(data))[:] = data

    def reset(self) -> None:
        """Drop the contents but keep the capacity."""
        self._len = 0


def ensure(size: int, buf: Optional[ByteBuffer] = None) -> Tuple[ByteBuffer, memoryview]:
    """Grow buf by size bytes; return it with a view onto the new region."""
    if buf is None:
        buf = ByteBuffer(capacity=size)
    return buf, buf.extend(size)
