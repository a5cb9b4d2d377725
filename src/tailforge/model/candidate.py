"""Candidate model: raw scanned tokens and their parsed form."""

from __future__ import annotations

from dataclasses import dataclass

# A raw substring extracted from a content file, e.g. "md:hover:bg-brand-500".
CandidateToken = str


@dataclass(frozen=True)
class ParsedCandidate:
    """A candidate split into variant chain and utility name.

    For arbitrary values (``w-[32rem]``) ``utility`` holds the prefix (``w``)
    and ``arbitrary`` the bracketed text (``32rem``).
    """

    raw: str
    variants: tuple[str, ...]
    utility: str
    important: bool = False
    arbitrary: str | None = None

    @property
    def base_name(self) -> str:
        """The utility name as the generator would register it."""
        if self.arbitrary is not None:
            return f"{self.utility}-[{self.arbitrary}]"
        return self.utility

    @property
    def is_plain(self) -> bool:
        return not self.variants and not self.important and self.arbitrary is None
