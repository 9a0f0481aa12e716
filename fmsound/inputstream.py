"""Byte streams over files or memory used when reading sound files."""

from __future__ import annotations

import os

from .errors import AlutError, AlutErrorCode


class InputStream:
    """A readable sound source that tracks how many bytes remain."""

    def __init__(self, *, file=None, data=None, filename=None, remaining_length=0):
        self._file = file
        self._data = memoryview(bytes(data)) if data is not None else None
        self._pos = 0
        self.filename = filename
        self.remaining_length = remaining_length

    @classmethod
    def from_file(cls, filename):
        """Open a stream over the named file."""
        try:
            size = os.stat(filename).st_size
            handle = open(filename, "rb")
        except OSError as exc:
            raise AlutError(AlutErrorCode.IO_ERROR) from exc
        return cls(file=handle, filename=os.fspath(filename), remaining_length=size)

    @classmethod
    def from_memory(cls, data):
        """Open a stream over an in-memory file image."""
        return cls(data=data, remaining_length=len(data))

    @property
    def is_file_stream(self):
        return self._file is not None

    def close(self):
        """Release the underlying file, if any."""
        if self._file is not None and not self._file.closed:
            try:
                self._file.close()
            except OSError as exc:
                raise AlutError(AlutErrorCode.IO_ERROR) from exc

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def eof(self):
        """Return True when no more bytes can be read."""
        if self._file is not None:
            return not self._file.peek(1)
        return self.remaining_length == 0

    def _read_exact(self, count):
        if self._file is not None:
            try:
                chunk = self._file.read(count)
            except OSError as exc:
                raise AlutError(AlutErrorCode.IO_ERROR) from exc
            if len(chunk) != count:
                raise AlutError(AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA)
        else:
            if self.remaining_length < count:
                raise AlutError(AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA)
            chunk = bytes(self._data[self._pos:self._pos + count])
            self._pos += count
        self.remaining_length -= count
        return chunk

    def read(self, length):
        """Read exactly ``length`` bytes."""
        return self._read_exact(length)

    def skip(self, count):
        """Skip ``count`` bytes."""
        if count:
            self._read_exact(count)

    def read_uint16_le(self):
        return int.from_bytes(self._read_exact(2), "little")

    def read_int32_be(self):
        return int.from_bytes(self._read_exact(4), "big", signed=True)

    def read_uint32_le(self):
        return int.from_bytes(self._read_exact(4), "little")