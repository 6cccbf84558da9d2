"""
Text sources: where the host reads the current text of a file.

An editor integration overlays its unsaved buffers with BufferTextSource;
the command line uses the filesystem directly.
"""

from pathlib import Path
from typing import Dict, Optional


class TextSource:
    """Capability interface: read the current text of a path, tell whether it is open."""

    def read_text(self, path: Path) -> str:
        raise NotImplementedError

    def is_open(self, path: Path) -> bool:
        raise NotImplementedError


class FileSystemTextSource(TextSource):
    """Reads files from disk; nothing is ever open."""

    def read_text(self, path: Path) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def is_open(self, path: Path) -> bool:
        return False


class BufferTextSource(TextSource):
    """
    In-memory buffers layered over another source.

    Paths are compared resolved and case-insensitively, like editor documents.
    """

    def __init__(self, fallback: Optional[TextSource] = None):
        self.fallback = fallback or FileSystemTextSource()
        self._buffers: Dict[str, str] = {}

    @staticmethod
    def _key(path: Path) -> str:
        return str(Path(path).resolve()).lower()

    def open(self, path: Path, text: str) -> None:
        self._buffers[self._key(path)] = text

    def close(self, path: Path) -> None:
        self._buffers.pop(self._key(path), None)

    def read_text(self, path: Path) -> str:
        key = self._key(path)
        if key in self._buffers:
            return self._buffers[key]
        return self.fallback.read_text(path)

    def is_open(self, path: Path) -> bool:
        return self._key(path) in self._buffers
