"""Variant registry: built-in state, breakpoint and dark-mode modifiers."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from tailforge.errors import UnknownVariantError
from tailforge.model.theme import Theme
from tailforge.model.variant import RuleTarget, VariantKind, VariantModifier
from tailforge.theme.validators import screen_width_px

logger = logging.getLogger(__name__)

# name -> pseudo selector appended to the class selector
PSEUDO_CLASSES: tuple[tuple[str, str], ...] = (
    ("first", ":first-child"),
    ("last", ":last-child"),
    ("odd", ":nth-child(odd)"),
    ("even", ":nth-child(even)"),
    ("visited", ":visited"),
    ("focus-within", ":focus-within"),
    ("hover", ":hover"),
    ("focus", ":focus"),
    ("focus-visible", ":focus-visible"),
    ("active", ":active"),
    ("disabled", ":disabled"),
)

# name -> selector template requiring an ancestor or preceding-sibling marker
PARENT_STATES: tuple[tuple[str, str], ...] = (
    ("group-hover", ".group:hover {selector}"),
    ("group-focus", ".group:focus {selector}"),
    ("peer-hover", ".peer:hover ~ {selector}"),
    ("peer-focus", ".peer:focus ~ {selector}"),
    ("peer-checked", ".peer:checked ~ {selector}"),
)

MEDIA_FEATURES: tuple[tuple[str, str], ...] = (
    ("motion-safe", "@media (prefers-reduced-motion: no-preference)"),
    ("motion-reduce", "@media (prefers-reduced-motion: reduce)"),
)

DARK_CLASS_TEMPLATE = ".dark {selector}"
DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"
PRINT_QUERY = "@media print"


# ---------------------------------------------------------------------------
# Wrap factories
# ---------------------------------------------------------------------------


def pseudo_class_wrap(pseudo: str) -> Callable[[RuleTarget], RuleTarget]:
    def wrap(target: RuleTarget) -> RuleTarget:
        return RuleTarget(target.selector + pseudo, target.at_rules, target.screen)

    return wrap


def parent_state_wrap(template: str) -> Callable[[RuleTarget], RuleTarget]:
    def wrap(target: RuleTarget) -> RuleTarget:
        return RuleTarget(
            template.format(selector=target.selector), target.at_rules, target.screen
        )

    return wrap


def at_rule_wrap(at_rule: str, screen: int = 0) -> Callable[[RuleTarget], RuleTarget]:
    def wrap(target: RuleTarget) -> RuleTarget:
        return RuleTarget(
            target.selector,
            (at_rule,) + target.at_rules,
            max(target.screen, screen),
        )

    return wrap


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class VariantRegistry:
    """Maps variant names to modifiers, preserving registration order."""

    def __init__(self) -> None:
        self._variants: dict[str, VariantModifier] = {}

    def register(
        self,
        name: str,
        kind: VariantKind,
        wrap: Callable[[RuleTarget], RuleTarget],
    ) -> VariantModifier:
        """Register (or replace) a modifier called *name*."""
        if name in self._variants:
            logger.debug("Variant %s re-registered", name)
        modifier = VariantModifier(name=name, kind=kind, wrap=wrap, order=len(self._variants))
        self._variants[name] = modifier
        return modifier

    def add(self, modifier: VariantModifier) -> VariantModifier:
        """Register a modifier built elsewhere (plugins), renumbering its order."""
        return self.register(modifier.name, modifier.kind, modifier.wrap)

    def lookup(self, name: str, candidate: str = "") -> VariantModifier:
        """Return the modifier for *name*; raises UnknownVariantError."""
        try:
            return self._variants[name]
        except KeyError:
            raise UnknownVariantError(name, candidate) from None

    def resolve_chain(
        self, names: Sequence[str], candidate: str = ""
    ) -> list[VariantModifier]:
        return [self.lookup(name, candidate) for name in names]

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    @property
    def names(self) -> list[str]:
        return list(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    @classmethod
    def for_theme(
        cls,
        theme: Theme,
        extra: Iterable[VariantModifier] = (),
    ) -> VariantRegistry:
        """Build the registry for *theme*.

        Dark mode is a single pre-registered modifier whose shape depends on
        the theme's strategy: an ancestor ``.dark`` class, or a
        ``prefers-color-scheme`` media query.  Breakpoints come from
        ``theme.screens`` in ascending width; their rank orders media groups
        in the emitted stylesheet.
        """
        registry = cls()
        for name, pseudo in PSEUDO_CLASSES:
            registry.register(name, VariantKind.PSEUDO_CLASS, pseudo_class_wrap(pseudo))
        for name, template in PARENT_STATES:
            registry.register(name, VariantKind.PARENT_STATE, parent_state_wrap(template))
        for name, query in MEDIA_FEATURES:
            registry.register(name, VariantKind.MEDIA_FEATURE, at_rule_wrap(query))

        if theme.dark_mode == "media":
            registry.register("dark", VariantKind.MEDIA_FEATURE, at_rule_wrap(DARK_MEDIA_QUERY))
        else:
            registry.register("dark", VariantKind.PARENT_STATE, parent_state_wrap(DARK_CLASS_TEMPLATE))
        registry.register("print", VariantKind.MEDIA_FEATURE, at_rule_wrap(PRINT_QUERY))

        for rank, (name, width) in enumerate(sorted_screens(theme), start=1):
            registry.register(
                name,
                VariantKind.MEDIA_BREAKPOINT,
                at_rule_wrap(f"@media (min-width: {width})", screen=rank),
            )

        for modifier in extra:
            registry.add(modifier)
        return registry


def sorted_screens(theme: Theme) -> list[tuple[str, str]]:
    """Return ``(name, width)`` pairs in ascending width, name as tie-break."""
    screens = theme.tokens("screens")
    return sorted(screens.items(), key=lambda item: (screen_width_px(item[1]), item[0]))
