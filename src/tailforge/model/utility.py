"""Utility model: Layer and UtilityDefinition dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Layer(Enum):
    """Cascade layer a definition is emitted into."""

    BASE = "base"
    COMPONENTS = "components"
    UTILITIES = "utilities"

    @property
    def rank(self) -> int:
        return _LAYER_RANK[self]


_LAYER_RANK = {Layer.BASE: 0, Layer.COMPONENTS: 1, Layer.UTILITIES: 2}


@dataclass(frozen=True)
class UtilityDefinition:
    """A single class-addressable CSS rule.

    ``class_name`` is the identity used by purging and safelisting.  Plain
    definitions produced by the generator leave ``selector`` empty and the
    emitter derives ``.<escaped class_name>``; variant-expanded definitions
    and base-layer resets carry an explicit selector.

    Attributes:
        class_name: Full written class, variants included (``md:p-4``).
        category: Theme category (or plugin name) the rule came from.
        properties: Ordered ``(property, value)`` declarations.
        layer: Cascade layer.
        order: Generation order, used for stable emission.
        selector: Explicit selector; empty means derive from class_name.
        suffix: Combinator appended after the (possibly qualified) class
            selector, e.g. ``" > :not([hidden]) ~ :not([hidden])"``.
        at_rules: Wrapping at-rules, outermost first.
        variants: Variant names applied, in written order.
        variant_order: Registration order of each applied variant.
        screen: Breakpoint rank, 0 for unconditional rules.
        important: Emit every declaration with ``!important``.
        preamble: Companion blocks (``@keyframes``) emitted once before use.
    """

    class_name: str
    category: str
    properties: tuple[tuple[str, str], ...]
    layer: Layer = Layer.UTILITIES
    order: int = 0
    selector: str = ""
    suffix: str = ""
    at_rules: tuple[str, ...] = ()
    variants: tuple[str, ...] = ()
    variant_order: tuple[int, ...] = ()
    screen: int = 0
    important: bool = False
    preamble: tuple[str, ...] = ()

    @property
    def is_addressable(self) -> bool:
        """Base-layer resets have no class name and bypass purging."""
        return bool(self.class_name)

    @property
    def class_selector(self) -> str:
        """The selector without suffix: explicit, or ``.<escaped class_name>``."""
        return self.selector or "." + escape_class(self.class_name)

    def with_order(self, order: int) -> UtilityDefinition:
        return replace(self, order=order)


def escape_class(name: str) -> str:
    """Escape *name* for use as a CSS class selector (without the dot).

    Follows CSSOM ``CSS.escape``: a leading digit (or hyphen + digit) becomes
    a code-point escape and every other ASCII non-identifier character is
    backslash-escaped.
    """
    out: list[str] = []
    for index, char in enumerate(name):
        if not char.isascii():
            out.append(char)
        elif char.isalnum() or char in "_-":
            leading_digit = char.isdigit() and (
                index == 0 or (index == 1 and name[0] == "-")
            )
            out.append(f"\\3{char} " if leading_digit else char)
        else:
            out.append("\\" + char)
    return "".join(out)
