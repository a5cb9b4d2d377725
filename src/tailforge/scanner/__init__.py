from tailforge.scanner.grammar import parse_candidate
from tailforge.scanner.scanner import (
    CandidateStream,
    ContentScanner,
    expand_braces,
    read_candidates,
    resolve_patterns,
    scan,
)
from tailforge.scanner.store import CandidateStore
from tailforge.scanner.tokenizer import extract_candidates, is_candidate

__all__ = [
    "CandidateStore",
    "CandidateStream",
    "ContentScanner",
    "expand_braces",
    "extract_candidates",
    "is_candidate",
    "parse_candidate",
    "read_candidates",
    "resolve_patterns",
    "scan",
]
