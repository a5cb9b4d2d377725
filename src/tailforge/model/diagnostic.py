"""Diagnostic model: structured messages for non-fatal build findings."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported during a build.

    Attributes:
        rule: Identifier for the check that produced this diagnostic
            (``scan_io``, ``unknown_variant``, ``unmatched_pattern`` ...).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        path: The content file involved, if applicable.
        token: The candidate token or theme token involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    path: str | None = None
    token: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.path:
            location = f" [file={self.path}]"
        elif self.token:
            location = f" [token={self.token}]"
        return f"{self.severity.value}{location}: {self.message}"


class WarningReport:
    """Thread-safe collector for non-fatal diagnostics raised during a build.

    Findings are aggregated here instead of being logged one by one, and
    summarized once when the build ends.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._items.append(diagnostic)

    def warn(
        self,
        rule: str,
        message: str,
        *,
        path: str | None = None,
        token: str | None = None,
        fix: str | None = None,
    ) -> Diagnostic:
        """Record a WARNING diagnostic and return it."""
        diagnostic = Diagnostic(
            rule=rule,
            severity=Severity.WARNING,
            message=message,
            path=path,
            token=token,
            fix=fix,
        )
        self.add(diagnostic)
        return diagnostic

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        with self._lock:
            self._items.extend(diagnostics)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        with self._lock:
            return list(self._items)

    def counts(self) -> dict[str, int]:
        """Return the number of diagnostics per rule, in first-seen order."""
        counts: dict[str, int] = {}
        for diagnostic in self.diagnostics:
            counts[diagnostic.rule] = counts.get(diagnostic.rule, 0) + 1
        return counts

    def summary(self) -> str:
        """One-line summary such as ``3 warning(s): scan_io=1, unknown_variant=2``."""
        items = self.diagnostics
        if not items:
            return "0 warning(s)"
        parts = ", ".join(f"{rule}={n}" for rule, n in self.counts().items())
        return f"{len(items)} warning(s): {parts}"

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0
