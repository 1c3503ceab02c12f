"""Reading lines from a stream with extra lines injected ahead of it."""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Optional, TextIO


class LineInjector:
    """Line source that yields injected lines before those of its stream.

    While no stream is attached, injected lines are written to ``output``.
    """

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.output = output
        self._stream: Optional[TextIO] = None
        self._injected: Deque[str] = deque()
        self._pending: Optional[str] = None

    def inject_into(self, stream: TextIO) -> None:
        """Attach ``stream`` and discard any lines still waiting."""
        self._stream = stream
        self._injected.clear()
        self._pending = None

    def _next_raw(self) -> str:
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        if self._stream is None:
            return ""
        return self._stream.readline()

    def getline(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        if self._injected:
            return self._injected.popleft()
        raw = self._next_raw()
        if not raw:
            return None
        return raw[:-1] if raw.endswith("\n") else raw

    def peek(self) -> Optional[str]:
        """Return the first character of the next line without consuming it.

        An empty injected line gives ``""``; None means end of input.
        """
        if self._injected:
            return self._injected[0][:1]
        if self._pending is None:
            self._pending = self._next_raw()
        return self._pending[:1] or None

    def inject(self, line: str) -> None:
        """Queue ``line`` to be read next, or print it if no stream is attached."""
        if self._stream is None:
            out = self.output if self.output is not None else sys.stdout
            out.write(line + "\n")
        else:
            self._injected.append(line)