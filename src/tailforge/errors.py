"""Error taxonomy for the utility-CSS build pipeline.

Fatal errors (abort the build):
    InvalidTokenError, GlobResolutionError, ConfigError

Non-fatal errors (isolated, collected into the end-of-build warning summary):
    ScanIOError (per file), UnknownVariantError (per candidate token)
"""

from __future__ import annotations

from pathlib import Path


class TailforgeError(Exception):
    """Base class for every error raised by tailforge."""

    fatal: bool = True


class ConfigError(TailforgeError):
    """Raised when the build configuration object is malformed."""


class InvalidTokenError(TailforgeError):
    """Raised when a theme token value violates its category's shape."""

    def __init__(
        self, category: str, token: str, value: object, reason: str = ""
    ) -> None:
        self.category = category
        self.token = token
        self.value = value
        self.reason = reason
        message = f"Invalid {category} token {token!r}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ScanIOError(TailforgeError):
    """Raised when a matched content path cannot be read."""

    fatal = False

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownVariantError(TailforgeError):
    """Raised when a candidate uses a variant prefix nobody registered."""

    fatal = False

    def __init__(self, variant: str, candidate: str = "") -> None:
        self.variant = variant
        self.candidate = candidate
        message = f"Unknown variant {variant!r}"
        if candidate:
            message += f" in {candidate!r}"
        super().__init__(message)


class GlobResolutionError(TailforgeError):
    """Raised when no content pattern matches any file."""

    def __init__(self, patterns: list[str] | tuple[str, ...]) -> None:
        self.patterns = tuple(patterns)
        super().__init__(
            "No files matched content patterns: " + ", ".join(self.patterns)
        )


class ScanCancelled(TailforgeError):
    """Raised inside a scan that was superseded by a newer change set."""

    fatal = False
