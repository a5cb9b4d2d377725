"""Event types emitted during a build."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildStarted:
    sequence: int
    changed_paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class BuildCompleted:
    sequence: int
    retained_count: int
    warning_count: int


@dataclass(frozen=True)
class BuildCancelled:
    sequence: int


@dataclass(frozen=True)
class BuildFailed:
    sequence: int
    error: str


@dataclass(frozen=True)
class FileScanned:
    path: str
    token_count: int


@dataclass(frozen=True)
class FileSkipped:
    path: str
    reason: str


@dataclass(frozen=True)
class StylesheetEmitted:
    sequence: int
    path: str
    size: int
