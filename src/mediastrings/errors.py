"""Exception hierarchy for mediastrings."""


class MediaStringsError(Exception):
    """Base exception for all mediastrings errors."""


class ConfigError(MediaStringsError):
    """Unknown or invalid configuration."""


class BufferCapacityError(MediaStringsError, MemoryError):
    """A StringBuf write or resize went past the buffer's fixed capacity.

    Always a caller bug (undersized allocation), never a data error.
    """

    def __init__(self, capacity: int, requested: int) -> None:
        super().__init__(
            f"buffer capacity {capacity} exceeded: {requested} bytes requested"
        )
        self.capacity = capacity
        self.requested = requested
