"""Directory listing cached in memory and refreshed in a background thread."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Iterator, TextIO

from .aothread import TaskThread


def _walk(root: str | os.PathLike[str]) -> Iterator[os.DirEntry]:
    """Yield every entry below ``root``, each directory before its contents."""
    with os.scandir(root) as entries:
        for entry in entries:
            yield entry
            if entry.is_dir():
                yield from _walk(entry.path)


def _quoted(path: object) -> str:
    text = str(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


class Directory:
    """Subdirectories and regular files below a root, scanned on first use."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root)
        self._lock = threading.Lock()
        self._sync_once = threading.Lock()
        self._synced = False
        self._closed = False
        self._directories: list[Path] = []
        self._files: list[Path] = []
        self._worker = TaskThread()
        self._worker.start()

    @property
    def root(self) -> Path:
        return self._root

    def _scan(self) -> None:
        directories: list[Path] = []
        files: list[Path] = []
        for entry in _walk(self._root):
            if entry.is_dir():
                directories.append(Path(entry.path))
            elif entry.is_file():
                files.append(Path(entry.path))
        with self._lock:
            self._directories, self._files = directories, files

    def force_sync(self) -> Future:
        """Rescan the tree in the background; the future completes when done."""
        if self._closed:
            raise RuntimeError("directory is closed")
        return self._worker.enqueue(self._scan)

    def _ensure_synced(self) -> None:
        with self._sync_once:
            if not self._synced:
                self.force_sync().exception()
                self._synced = True

    def subdirectories(self) -> list[Path]:
        """All directories below the root, scanning once if needed."""
        self._ensure_synced()
        with self._lock:
            return list(self._directories)

    def files(self) -> list[Path]:
        """All regular files below the root, scanning once if needed."""
        self._ensure_synced()
        with self._lock:
            return list(self._files)

    def close(self) -> None:
        """Stop the background thread."""
        self._closed = True
        self._worker.stop()

    def __enter__(self) -> Directory:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def print_directory_entries(directory: Directory, out: TextIO | None = None) -> None:
    """Print the directory's subdirectories and then its files."""
    stream = out if out is not None else sys.stdout
    stream.write("\n<Directories>:\n\n")
    for path in directory.subdirectories():
        stream.write(_quoted(path) + "\n")
    stream.write("\n<Files>:\n\n")
    for path in directory.files():
        stream.write(_quoted(path) + "\n")


def main(argv: list[str] | None = None) -> int:
    """List the directories and files below each given root."""
    parser = argparse.ArgumentParser(description="List directories and files below roots.")
    parser.add_argument("roots", nargs="*", default=["."], help="root directories")
    args = parser.parse_args(argv)
    for root in args.roots:
        print(f"Root: {_quoted(root)}")
        with Directory(root) as directory:
            print_directory_entries(directory)
    return 0