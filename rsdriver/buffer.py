"""A fixed-size byte buffer holding one received packet."""

from __future__ import annotations


class Buffer:
    """A byte buffer with a marked data region inside it."""

    def __init__(self, buf_size: int) -> None:
        if buf_size < 0:
            raise ValueError(f"buffer size must not be negative: {buf_size}")
        self.buf = bytearray(buf_size)
        self._data_off = 0
        self._data_size = 0

    @property
    def buf_size(self) -> int:
        return len(self.buf)

    @property
    def data_off(self) -> int:
        return self._data_off

    @property
    def data_size(self) -> int:
        return self._data_size

    def set_data(self, data_off: int, data_size: int) -> None:
        """Mark ``data_size`` bytes starting at ``data_off`` as the payload."""
        if data_off < 0 or data_size < 0 or data_off + data_size > len(self.buf):
            raise ValueError(
                f"data region [{data_off}, {data_off + data_size}) "
                f"outside buffer of {len(self.buf)} bytes"
            )
        self._data_off = data_off
        self._data_size = data_size

    def data(self) -> memoryview:
        """Return a view of the payload region."""
        return memoryview(self.buf)[self._data_off:self._data_off + self._data_size]