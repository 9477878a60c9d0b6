"""Destinations – ConsoleDestination."""
from __future__ import annotations

import sys
from typing import TextIO


class ConsoleDestination:
    """Writes each message as one line to a text stream (default stdout)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved lazily so pytest's capsys replacement of sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def deliver(self, formatted_message: str) -> None:
        stream = self.stream
        stream.write(formatted_message + "\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"ConsoleDestination(stream={getattr(self.stream, 'name', self.stream)!r})"


__all__ = ["ConsoleDestination"]
