"""Theme model: an immutable category -> token -> value table."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

# Closed set of token categories, in generation order.
CATEGORIES: tuple[str, ...] = (
    "screens",
    "colors",
    "spacing",
    "width",
    "height",
    "minWidth",
    "minHeight",
    "maxWidth",
    "maxHeight",
    "borderRadius",
    "borderWidth",
    "boxShadow",
    "fontFamily",
    "fontSize",
    "fontWeight",
    "opacity",
    "keyframes",
    "animation",
    "display",
)


def freeze(value: Any) -> Any:
    """Return a read-only copy of *value* (dicts -> mappingproxy, lists -> tuple)."""
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of :func:`freeze`, producing plain JSON-compatible containers."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class Theme:
    """A resolved design-token table.

    Attributes:
        categories: Mapping of category name to a mapping of token name to
            value.  Token order is the order utilities are generated in.
        dark_mode: Dark-mode strategy chosen at resolution time
            (``"class"`` or ``"media"``).
    """

    categories: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    dark_mode: str = "class"

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", freeze(self.categories))

    def __getitem__(self, category: str) -> Mapping[str, Any]:
        return self.categories[category]

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __hash__(self) -> int:
        return hash(self.fingerprint)

    def tokens(self, category: str) -> Mapping[str, Any]:
        """Return the tokens of *category*, or an empty mapping."""
        return self.categories.get(category, MappingProxyType({}))

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return thaw(self.categories)

    @property
    def fingerprint(self) -> str:
        """Stable content hash used to key build caches."""
        payload = json.dumps(
            {"categories": self.to_dict(), "dark_mode": self.dark_mode},
            sort_keys=True,
            separators=(",", ":"),
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()
