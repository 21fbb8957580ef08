"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import codecs
import operator
import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42


class LineReader:
    """Reads lines from a file descriptor in chunks of *buffer_size* bytes.

    Lines keep their trailing newline; the last line of the input may lack
    one. Text is decoded as UTF-8, with undecodable bytes kept as
    surrogate escapes.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        fd = operator.index(fd)
        buffer_size = operator.index(buffer_size)
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(
            errors="surrogateescape"
        )

    def readline(self) -> Optional[str]:
        """The next line, or ``None`` when nothing is left to read.

        Read errors raise ``OSError``.
        """
        while "\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                self._pending += self._decoder.decode(b"", final=True)
                break
            self._pending += self._decoder.decode(chunk)
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line of *fd*, or ``None`` at the end of the input.

    Text read past the returned line is kept for the next call on the
    same descriptor.
    """
    fd = operator.index(fd)
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    line = reader.readline()
    if line is None:
        del _readers[fd]
    return line