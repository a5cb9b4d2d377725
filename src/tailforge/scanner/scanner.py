"""Content scanner: resolve content globs and extract candidate tokens."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from tailforge.errors import ScanCancelled, ScanIOError
from tailforge.events import types as events
from tailforge.events.bus import EventBus
from tailforge.model.candidate import CandidateToken
from tailforge.model.diagnostic import WarningReport
from tailforge.scanner.store import CandidateStore, FileSignature
from tailforge.scanner.tokenizer import extract_candidates

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pattern resolution
# ---------------------------------------------------------------------------


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternation groups in a glob pattern.

    ``src/**/*.{rs,html}`` becomes ``src/**/*.rs`` and ``src/**/*.html``.
    Groups may nest.  A group without a comma or without a closing brace is
    left as literal text.
    """
    start = pattern.find("{")
    while start != -1:
        depth = 0
        last = start + 1
        alternatives: list[str] = []
        for index in range(start, len(pattern)):
            char = pattern[index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    alternatives.append(pattern[last:index])
                    break
            elif char == "," and depth == 1:
                alternatives.append(pattern[last:index])
                last = index + 1
        else:
            return [pattern]
        if len(alternatives) > 1:
            head, tail = pattern[:start], pattern[index + 1:]
            expanded: dict[str, None] = {}
            for alternative in alternatives:
                for item in expand_braces(head + alternative + tail):
                    expanded[item] = None
            return list(expanded)
        start = pattern.find("{", start + 1)
    return [pattern]


def _glob(root: Path, pattern: str) -> Iterator[Path]:
    if pattern.startswith("./"):
        pattern = pattern[2:]
    path = Path(pattern)
    if path.is_absolute():
        anchor = Path(path.anchor)
        yield from anchor.glob(str(path.relative_to(anchor)))
    else:
        yield from root.glob(pattern)


def _glob_all(root: Path, pattern: str) -> Iterator[Path]:
    for expanded in expand_braces(pattern):
        yield from _glob(root, expanded)


def resolve_patterns(
    patterns: Sequence[str], root: Path
) -> tuple[list[Path], list[str]]:
    """Expand *patterns* relative to *root*.

    Patterns prefixed with ``!`` exclude what they match; ``{a,b}`` groups
    expand to one glob per alternative.  Returns the sorted list of matched
    files and the include patterns that matched nothing.
    """
    includes = [p for p in patterns if not p.startswith("!")]
    excludes = [p[1:] for p in patterns if p.startswith("!")]

    matched: set[Path] = set()
    unmatched: list[str] = []
    for pattern in includes:
        hits = {p for p in _glob_all(root, pattern) if p.is_file()}
        if not hits:
            unmatched.append(pattern)
        matched.update(hits)

    for pattern in excludes:
        matched.difference_update(_glob_all(root, pattern))

    return sorted(matched), unmatched


def read_candidates(path: Path) -> tuple[FileSignature, frozenset[CandidateToken]]:
    """Read *path* as raw text and extract its candidates.

    Raises ScanIOError when the file cannot be stat'ed or read.
    """
    try:
        stat = path.stat()
        text = path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        raise ScanIOError(path, exc.strerror or str(exc)) from exc
    return (stat.st_mtime_ns, stat.st_size), extract_candidates(text)


# ---------------------------------------------------------------------------
# Lazy scan
# ---------------------------------------------------------------------------


class CandidateStream:
    """A lazy, finite, restartable sequence of candidate tokens.

    Each iteration re-resolves the patterns and re-reads the files, so a
    second pass reflects the current file contents.  Unreadable files are
    logged and skipped.
    """

    def __init__(
        self,
        patterns: Sequence[str],
        root: Path | str,
        report: WarningReport | None = None,
    ) -> None:
        self.patterns = tuple(patterns)
        self.root = Path(root)
        self._report = report

    def __iter__(self) -> Iterator[CandidateToken]:
        files, _ = resolve_patterns(self.patterns, self.root)
        for path in files:
            try:
                _, tokens = read_candidates(path)
            except ScanIOError as exc:
                logger.warning("Skipping %s: %s", path, exc.reason)
                if self._report is not None:
                    self._report.warn("scan_io", str(exc), path=str(path))
                continue
            yield from sorted(tokens)


def scan(
    patterns: Sequence[str],
    root: Path | str = ".",
    report: WarningReport | None = None,
) -> CandidateStream:
    """Return a lazy stream of the candidate tokens found under *root*."""
    return CandidateStream(patterns, root, report=report)


# ---------------------------------------------------------------------------
# Stateful scanner
# ---------------------------------------------------------------------------


class ContentScanner:
    """Scans content files into a :class:`CandidateStore`.

    ``scan_all`` performs a cold scan with one thread-pool task per file;
    ``rescan`` re-reads only files whose ``(mtime_ns, size)`` signature
    changed since they were last merged.
    """

    def __init__(
        self,
        root: Path | str,
        patterns: Sequence[str],
        *,
        store: CandidateStore | None = None,
        report: WarningReport | None = None,
        event_bus: EventBus | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.root = Path(root).resolve()
        self.patterns = tuple(patterns)
        self.store = store if store is not None else CandidateStore.init_empty()
        self.report = report if report is not None else WarningReport()
        self._event_bus = event_bus or EventBus()
        self._max_workers = max_workers
        self._unmatched: list[str] = []
        self._matched_count = 0

    # --- file set -------------------------------------------------------------

    def resolve_files(self) -> list[Path]:
        files, self._unmatched = resolve_patterns(self.patterns, self.root)
        self._matched_count = len(files)
        return files

    @property
    def unmatched_patterns(self) -> list[str]:
        """Include patterns that matched nothing on the last resolution."""
        return list(self._unmatched)

    @property
    def matched_count(self) -> int:
        return self._matched_count

    # --- scanning -------------------------------------------------------------

    def scan_all(self, cancel: threading.Event | None = None) -> frozenset[CandidateToken]:
        """Scan every matched file and return the store snapshot.

        Files that vanished since the previous scan are dropped from the store.
        Raises ScanCancelled if *cancel* is set before all reads started.
        """
        files = self.resolve_files()
        current = set(files)
        for known in self.store.paths:
            if known not in current:
                self.store.remove_file(known)
        self._scan_files(files, cancel, force=True)
        return self.store.snapshot()

    def rescan(
        self, paths: Iterable[Path | str], cancel: threading.Event | None = None
    ) -> bool:
        """Incrementally re-scan *paths*; returns True if the candidate set changed."""
        matched = set(self.resolve_files())
        changed = False
        pending: list[Path] = []
        for raw in paths:
            path = Path(raw)
            if not path.is_absolute():
                path = self.root / path
            path = path.resolve()
            if path not in matched:
                if self.store.remove_file(path):
                    logger.debug("Dropped %s from candidate store", path)
                    changed = True
                continue
            pending.append(path)
        if pending:
            changed = self._scan_files(sorted(set(pending)), cancel, force=False) or changed
        return changed

    def _scan_files(
        self, files: list[Path], cancel: threading.Event | None, force: bool
    ) -> bool:
        if not files:
            return False
        changed = False
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = {
                pool.submit(self._scan_file, path, cancel, force): path for path in files
            }
            try:
                for future in as_completed(futures):
                    changed = future.result() or changed
            except ScanCancelled:
                for future in futures:
                    future.cancel()
                raise
        return changed

    def _scan_file(
        self, path: Path, cancel: threading.Event | None, force: bool
    ) -> bool:
        if cancel is not None and cancel.is_set():
            raise ScanCancelled(f"Scan cancelled before reading {path}")

        if not force:
            try:
                stat = path.stat()
            except OSError:
                stat = None
            if stat is not None and self.store.signature(path) == (
                stat.st_mtime_ns,
                stat.st_size,
            ):
                return False

        try:
            signature, tokens = read_candidates(path)
        except ScanIOError as exc:
            logger.warning("Skipping %s: %s", path, exc.reason)
            self.report.warn("scan_io", str(exc), path=str(path))
            self._event_bus.emit(events.FileSkipped(path=str(path), reason=exc.reason))
            return self.store.remove_file(path)

        self._event_bus.emit(events.FileScanned(path=str(path), token_count=len(tokens)))
        return self.store.merge_file(path, signature, tokens)
