"""Fixed-capacity byte buffer used by every capacity-bounded writer."""

from .errors import BufferCapacityError
from .models import DEFAULT_CAPACITY


class StringBuf:
    """Owned byte region with a hard capacity and a separate logical length.

    The whole capacity is allocated up front. Writes never grow it: anything
    that would end past the capacity raises BufferCapacityError instead of
    truncating. A buffer emptied by steal() is null (falsy, capacity 0).
    """

    def __init__(self, length: int = -1) -> None:
        capacity = DEFAULT_CAPACITY if length < 0 else length
        self._data: bytearray | None = bytearray(capacity)
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._data) if self._data is not None else 0

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._data is not None

    def __bytes__(self) -> bytes:
        if self._data is None:
            return b""
        return bytes(self._data[: self._len])

    def __getitem__(self, index):
        return bytes(self)[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, StringBuf):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray)):
            return bytes(self) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"StringBuf({bytes(self)!r}, capacity={self.capacity})"

    def view(self) -> memoryview:
        """Writable view over the full capacity for direct writes."""
        if self._data is None:
            return memoryview(bytearray())
        return memoryview(self._data)

    def decode(self) -> str:
        return bytes(self).decode("utf-8", "surrogateescape")

    def _check(self, requested: int) -> None:
        if self._data is None or requested < 0 or requested > self.capacity:
            raise BufferCapacityError(self.capacity, requested)

    def resize(self, new_length: int) -> None:
        """Set the logical length.

        Bytes exposed by growing are whatever was last written there through
        view(), or zero.
        """
        self._check(new_length)
        self._len = new_length

    def append(self, data: bytes) -> None:
        end = self._len + len(data)
        self._check(end)
        self._data[self._len : end] = data
        self._len = end

    def insert(self, at: int, data: bytes) -> None:
        """Splice data in at offset at, shifting the tail right."""
        if at < 0 or at > self._len:
            raise IndexError(f"insert offset {at} outside 0..{self._len}")
        end = self._len + len(data)
        self._check(end)
        self._data[at + len(data) : end] = self._data[at : self._len]
        self._data[at : at + len(data)] = data
        self._len = end

    def remove(self, at: int, count: int = -1) -> None:
        """Cut count bytes at offset at (to the end when count is -1)."""
        self._check(self._len)
        if at < 0 or at > self._len:
            raise IndexError(f"remove offset {at} outside 0..{self._len}")
        if count < 0:
            count = self._len - at
        if at + count > self._len:
            raise IndexError(f"remove of {count} bytes at {at} past length {self._len}")
        tail = self._data[at + count : self._len]
        self._data[at : at + len(tail)] = tail
        self._len -= count

    def steal(self, other: "StringBuf") -> None:
        """Take over other's storage; other becomes null."""
        self._data, self._len = other._data, other._len
        other._data, other._len = None, 0

    def find(self, sub: bytes, start: int = 0) -> int:
        if self._data is None:
            return -1
        return self._data.find(sub, start, self._len)

    def rfind(self, sub: bytes, end: int | None = None) -> int:
        if self._data is None:
            return -1
        return self._data.rfind(sub, 0, self._len if end is None else end)

    def endswith(self, suffix: bytes) -> bool:
        return bytes(self).endswith(suffix)
