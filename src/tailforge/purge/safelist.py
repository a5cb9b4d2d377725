"""Safelist: class names and patterns that always survive purging."""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

from tailforge.errors import ConfigError

_GLOB_CHARS = frozenset("*?")


@dataclass(frozen=True)
class SafelistEntry:
    """A single safelist entry.

    ``kind`` is ``"exact"`` (plain class name), ``"glob"`` (``bg-dynamic-*``)
    or ``"regex"`` (anchored with ``re.search`` semantics).  ``variants``
    additionally retains ``<variant>:<class>`` for every match.
    """

    pattern: str
    kind: str = "exact"
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind == "regex":
            try:
                re.compile(self.pattern)
            except re.error as exc:
                raise ConfigError(f"Invalid safelist pattern {self.pattern!r}: {exc}") from exc

    def matches(self, class_name: str) -> bool:
        if self.kind == "exact":
            return class_name == self.pattern
        if self.kind == "glob":
            return fnmatch.fnmatchcase(class_name, self.pattern)
        return re.search(self.pattern, class_name) is not None


def _entry_from_config(item: Any) -> SafelistEntry:
    if isinstance(item, str):
        kind = "glob" if _GLOB_CHARS & set(item) else "exact"
        return SafelistEntry(pattern=item, kind=kind)
    if isinstance(item, Mapping) and isinstance(item.get("pattern"), str):
        variants = item.get("variants", ())
        if isinstance(variants, str) or not all(isinstance(v, str) for v in variants):
            raise ConfigError(f"Safelist variants must be a list of names: {item!r}")
        return SafelistEntry(pattern=item["pattern"], kind="regex", variants=tuple(variants))
    raise ConfigError(f"Invalid safelist entry: {item!r}")


class Safelist:
    """An ordered collection of :class:`SafelistEntry`."""

    def __init__(self, entries: Iterable[SafelistEntry] = ()) -> None:
        self.entries: tuple[SafelistEntry, ...] = tuple(entries)

    @classmethod
    def from_config(cls, items: Iterable[Any] | None) -> Safelist:
        """Build from config items: strings (exact or glob) or
        ``{"pattern": regex, "variants": [...]}`` objects."""
        return cls(_entry_from_config(item) for item in (items or ()))

    def matches(self, class_name: str) -> bool:
        return any(entry.matches(class_name) for entry in self.entries)

    def variant_requests(self, class_name: str) -> list[str]:
        """Variant names to retain alongside *class_name*, in entry order."""
        requested: list[str] = []
        for entry in self.entries:
            if entry.variants and entry.matches(class_name):
                requested.extend(v for v in entry.variants if v not in requested)
        return requested

    def __iter__(self) -> Iterator[SafelistEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Safelist(entries={len(self.entries)})"
