"""File streams that open on construction and close when released."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any, Iterable


class FileStream:
    """A file opened on construction; a failed open leaves the stream closed."""

    def __init__(self, path: str | os.PathLike[str], mode: str) -> None:
        self._path = Path(path)
        self._binary = "b" in mode
        self._error: str | None = None
        self._file: IO[Any] | None
        try:
            if self._binary:
                self._file = open(self._path, mode)
            else:
                self._file = open(self._path, mode, encoding="utf-8", newline="")
        except OSError as exc:
            self._file = None
            self._error = exc.strerror or str(exc)

    @property
    def path(self) -> Path:
        return self._path

    def is_open(self) -> bool:
        """True while the underlying file is open."""
        return self._file is not None and not self._file.closed

    def _require_open(self) -> IO[Any]:
        if self._file is None or self._file.closed:
            raise ValueError(f"file is not open: {self._path}")
        return self._file

    def size(self) -> int:
        """Size of the file in bytes; the current position is left unchanged."""
        handle = self._require_open()
        if handle.writable():
            handle.flush()
        return os.fstat(handle.fileno()).st_size

    def close(self) -> None:
        """Close the file; closing twice does nothing."""
        if self._file is not None:
            self._file.close()

    def __enter__(self) -> FileStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class OutputFileStream(FileStream):
    """Stream for writing chunks of text or bytes to a file."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        binary: bool = False,
        append: bool = False,
    ) -> None:
        mode = ("a" if append else "w") + ("b" if binary else "")
        super().__init__(path, mode)

    def write(self, data: bytes | str | Iterable[Any]) -> None:
        """Write a chunk: bytes or ints for binary streams, strings for text streams."""
        handle = self._require_open()
        if isinstance(data, int):
            raise TypeError("a chunk must be a sequence, not a single integer")
        if self._binary:
            handle.write(bytes(data))
        else:
            handle.write(data if isinstance(data, str) else "".join(data))


class InputFileStream(FileStream):
    """Stream for reading a whole file of text or bytes."""

    def __init__(self, path: str | os.PathLike[str], binary: bool = False) -> None:
        super().__init__(path, "rb" if binary else "r")

    def read_all(self) -> bytes | str:
        """Read the entire file from its beginning; raise RuntimeError on failure."""
        if self._file is None or self._file.closed:
            reason = self._error or "file is not open"
            raise RuntimeError(f"{reason}: {self._path}")
        try:
            self._file.seek(0)
            return self._file.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise RuntimeError(str(exc)) from exc