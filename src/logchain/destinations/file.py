"""Destinations – FileDestination."""
from __future__ import annotations

import threading
from pathlib import Path


class FileDestination:
    """Appends one line per message to a text file.

    The parent directory is created on construction.  Writes are serialised
    with a lock so concurrent callers never interleave partial lines.

    Parameters
    ----------
    path:
        Target file; opened lazily in append mode on first delivery.
    encoding:
        Text encoding of the file.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._lock = threading.Lock()
        self._file = None
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def deliver(self, formatted_message: str) -> None:
        with self._lock:
            if self._file is None:
                self._file = open(self._path, "a", encoding=self._encoding)  # noqa: SIM115
            self._file.write(formatted_message + "\n")
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        return f"FileDestination(path={str(self._path)!r})"


__all__ = ["FileDestination"]
