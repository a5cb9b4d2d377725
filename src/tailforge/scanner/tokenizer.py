"""Lexical candidate extraction.

Content files are never parsed as HTML, Rust, JSX or anything else: the text
is split on whitespace, quote, brace, angle-bracket, equals and semicolon
boundaries and every piece that looks like a utility token is kept.  Extra
candidates are harmless (they fail to match a utility and are discarded by
the purge step); missing ones are not, so the token grammar is permissive.
"""

from __future__ import annotations

import re
from typing import Iterator

from tailforge.model.candidate import CandidateToken

__all__ = ["extract_candidates", "is_candidate", "iter_candidates"]

_SPLIT_RE = re.compile(r"""[\s"'`<>{}=;]+""")

# (variant:)* !? -? name (-[arbitrary])?
_CANDIDATE_RE = re.compile(
    r"""
    ^(?:[A-Za-z0-9][A-Za-z0-9_-]*:)*     # variant chain
    !?                                  # important modifier
    -?[A-Za-z0-9_]                      # utility name start
    (?:[A-Za-z0-9_./-]*[A-Za-z0-9_.%])?  # utility name rest
    (?:-\[[^\[\]\s]+\])?$               # arbitrary value segment
    """,
    re.VERBOSE,
)

# Punctuation that sticks to a class name in prose or code but is never part of it.
_STRIP_LEADING = "(,"
_STRIP_TRAILING = "),.:"

_MAX_TOKEN_LENGTH = 200


def is_candidate(token: str) -> bool:
    """Return True if *token* matches the utility candidate grammar."""
    return 0 < len(token) <= _MAX_TOKEN_LENGTH and bool(_CANDIDATE_RE.match(token))


def iter_candidates(text: str) -> Iterator[CandidateToken]:
    """Yield candidate tokens from *text* in order of appearance (duplicates included)."""
    for piece in _SPLIT_RE.split(text):
        if not piece:
            continue
        token = piece.lstrip(_STRIP_LEADING).rstrip(_STRIP_TRAILING)
        if token and is_candidate(token):
            yield token


def extract_candidates(text: str) -> frozenset[CandidateToken]:
    """Return the distinct candidate tokens found in *text*."""
    return frozenset(iter_candidates(text))
