"""Line-by-line reading from raw file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os

MAX_FD = 1024
DEFAULT_BUFFER_SIZE = 4


class LineReader:
    """Read lines from file descriptors, keeping unread data for each one.

    Several descriptors can be read in turns; each keeps its own remainder.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._saved: dict[int, bytes] = {}

    def _fill(self, fd: int, saved: bytes) -> bytes:
        chunks = [saved]
        while True:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            chunks.append(chunk)
            if b"\n" in chunk:
                break
        return b"".join(chunks)

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, newline included, or None at the end."""
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        saved = self._fill(fd, self._saved.pop(fd, b""))
        if not saved:
            return None
        line, newline, rest = saved.partition(b"\n")
        if newline:
            self._saved[fd] = rest
            return line + newline
        return line