"""Tests for errors.py -- exception hierarchy."""

import pytest

from mediastrings.errors import BufferCapacityError, ConfigError, MediaStringsError


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(ConfigError, MediaStringsError)
        assert issubclass(BufferCapacityError, MediaStringsError)

    def test_base_is_exception(self):
        assert issubclass(MediaStringsError, Exception)

    def test_capacity_error_is_memory_error(self):
        with pytest.raises(MemoryError):
            raise BufferCapacityError(capacity=4, requested=8)


class TestBufferCapacityError:
    def test_attributes(self):
        err = BufferCapacityError(capacity=4096, requested=5000)
        assert err.capacity == 4096
        assert err.requested == 5000
        assert "4096" in str(err)
        assert "5000" in str(err)
