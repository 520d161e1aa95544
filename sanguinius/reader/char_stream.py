from __future__ import annotations

import io
from typing import TextIO


class CharStream:
    """A character source with pushback, over a string or any text stream.

    End of input is reported as the empty string. An EOF that has been
    pushed back is replayed without touching the underlying stream again,
    so an interactive stdin is never asked twice for the same EOF.
    """

    __slots__ = ("_source", "_pushback", "position")

    def __init__(self, source: str | TextIO):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._source: TextIO = source
        self._pushback: list[str] = []
        self.position = 0

    def next(self) -> str:
        if self._pushback:
            c = self._pushback.pop()
        else:
            c = self._source.read(1)
        if c:
            self.position += 1
        return c

    def unread(self, c: str) -> None:
        self._pushback.append(c)
        if c:
            self.position -= 1

    def peek(self) -> str:
        c = self.next()
        self.unread(c)
        return c

    def skip_line(self) -> None:
        """Discard input up to and including the next newline."""
        c = self.next()
        while c and c != "\n":
            c = self.next()
