"""Lark grammar and transformer for utility candidate tokens."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from tailforge.model.candidate import ParsedCandidate

GRAMMAR_PATH = Path(__file__).parent / "candidate.lark"

__all__ = ["parse_candidate", "CandidateTransformer"]


class _Important:
    """Marker returned by the ``important`` rule."""


class _Utility:
    def __init__(self, name: str, arbitrary: str | None):
        self.name = name
        self.arbitrary = arbitrary


class CandidateTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a candidate parse tree into a ParsedCandidate (minus ``raw``)."""

    def variant(self, items: list[Token]) -> str:
        return str(items[0])

    def important(self, items: list[Token]) -> _Important:
        return _Important()

    def utility(self, items: list[Token]) -> _Utility:
        name = str(items[0])
        arbitrary = None
        if len(items) > 1:
            # "-[value]" -> "value"
            arbitrary = str(items[1])[2:-1]
        return _Utility(name, arbitrary)

    def start(self, items: list[object]) -> ParsedCandidate:
        variants: list[str] = []
        important = False
        utility: _Utility | None = None
        for item in items:
            if isinstance(item, _Important):
                important = True
            elif isinstance(item, _Utility):
                utility = item
            else:
                variants.append(str(item))
        if utility is None:
            raise ValueError("candidate has no utility segment")
        return ParsedCandidate(
            raw="",
            variants=tuple(variants),
            utility=utility.name,
            important=important,
            arbitrary=utility.arbitrary,
        )


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


@lru_cache(maxsize=65536)
def parse_candidate(raw: str) -> ParsedCandidate | None:
    """Parse a raw candidate token.

    Returns None when *raw* does not follow the candidate grammar; such
    tokens simply never match a utility.
    """
    try:
        tree = _parser().parse(raw)
        parsed = CandidateTransformer().transform(tree)
    except (UnexpectedInput, VisitError):
        return None
    return ParsedCandidate(
        raw=raw,
        variants=parsed.variants,
        utility=parsed.utility,
        important=parsed.important,
        arbitrary=parsed.arbitrary,
    )
