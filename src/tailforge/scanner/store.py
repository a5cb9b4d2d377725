"""Thread-safe accumulated candidate store shared across scans."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable

from tailforge.model.candidate import CandidateToken

# (mtime_ns, size) of a file when it was last scanned.
FileSignature = tuple[int, int]


class CandidateStore:
    """Per-file candidate sets plus their union.

    The store is an explicit object rather than module state so tests and
    concurrent builds in one process each get their own.  All public methods
    hold the lock only for the in-memory update; file reads happen outside.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: dict[Path, tuple[FileSignature, frozenset[CandidateToken]]] = {}
        self._union: frozenset[CandidateToken] | None = frozenset()

    @classmethod
    def init_empty(cls) -> CandidateStore:
        return cls()

    # --- write ----------------------------------------------------------------

    def merge_file(
        self,
        path: Path,
        signature: FileSignature,
        tokens: Iterable[CandidateToken],
    ) -> bool:
        """Record the tokens extracted from *path*.

        Returns True if the file's token set changed.
        """
        tokens = frozenset(tokens)
        with self._lock:
            previous = self._files.get(path)
            self._files[path] = (signature, tokens)
            if previous is not None and previous[1] == tokens:
                return False
            if previous is None and self._union is not None:
                self._union = self._union | tokens
            else:
                # Tokens may have been removed; recompute lazily.
                self._union = None
            return True

    def remove_file(self, path: Path) -> bool:
        """Forget *path*; returns True if it was known."""
        with self._lock:
            if self._files.pop(path, None) is None:
                return False
            self._union = None
            return True

    def clear(self) -> None:
        with self._lock:
            self._files.clear()
            self._union = frozenset()

    # --- read -----------------------------------------------------------------

    def signature(self, path: Path) -> FileSignature | None:
        with self._lock:
            entry = self._files.get(path)
            return entry[0] if entry else None

    def tokens_for(self, path: Path) -> frozenset[CandidateToken]:
        with self._lock:
            entry = self._files.get(path)
            return entry[1] if entry else frozenset()

    def snapshot(self) -> frozenset[CandidateToken]:
        """Return the union of all files' candidate tokens."""
        with self._lock:
            if self._union is None:
                union: set[CandidateToken] = set()
                for _, tokens in self._files.values():
                    union.update(tokens)
                self._union = frozenset(union)
            return self._union

    @property
    def paths(self) -> list[Path]:
        with self._lock:
            return sorted(self._files)

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)

    def __repr__(self) -> str:
        with self._lock:
            return f"CandidateStore(files={len(self._files)})"
