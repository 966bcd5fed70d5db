"""Line-at-a-time reading from file descriptors, keeping separate state per descriptor."""

from __future__ import annotations

import os

DEFAULT_BUFFER_SIZE = 1024


class LineReader:
    """Reads newline-terminated lines from raw file descriptors.

    Data read past the end of a line is kept per descriptor and handed out
    by the next call for that descriptor.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def _fill(self, fd: int, data: bytes) -> bytes:
        chunks = [data]
        found = b"\n" in data
        while not found:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            chunks.append(chunk)
            found = b"\n" in chunk
        return b"".join(chunks)

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, newline included.

        The last line may lack a newline. Returns None once nothing is left,
        or if the descriptor cannot be read; its state is then dropped.
        """
        data = self._fill(fd, self._pending.get(fd, b""))
        if not data:
            self.forget(fd)
            return None
        line, newline, rest = data.partition(b"\n")
        if newline:
            self._pending[fd] = rest
            return line + newline
        self._pending[fd] = b""
        return line

    def forget(self, fd: int) -> None:
        """Discard anything buffered for ``fd``."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Read the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)