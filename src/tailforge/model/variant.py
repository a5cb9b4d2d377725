"""Variant model: VariantKind, RuleTarget, and VariantModifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class VariantKind(Enum):
    PSEUDO_CLASS = "pseudo-class"
    MEDIA_BREAKPOINT = "media-breakpoint"
    PARENT_STATE = "parent-state"
    MEDIA_FEATURE = "media-feature"


@dataclass(frozen=True)
class RuleTarget:
    """The selector and at-rule chain a variant wraps."""

    selector: str
    at_rules: tuple[str, ...] = ()  # outermost first
    screen: int = 0


@dataclass(frozen=True)
class VariantModifier:
    """A named modifier prefix such as ``hover``, ``md`` or ``dark``.

    ``wrap`` maps the target produced by the modifiers to its right onto a
    new, qualified target.  ``order`` is the registration order and breaks
    ties when the emitter sorts variant rules.
    """

    name: str
    kind: VariantKind
    wrap: Callable[[RuleTarget], RuleTarget] = field(compare=False, repr=False)
    order: int = 0
