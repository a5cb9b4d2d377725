"""Variant expansion: qualify a base utility with a modifier chain."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from tailforge.model.candidate import ParsedCandidate
from tailforge.model.utility import UtilityDefinition, escape_class
from tailforge.model.variant import RuleTarget, VariantModifier
from tailforge.variants.registry import VariantRegistry


def expand(
    base: UtilityDefinition,
    modifiers: Sequence[VariantModifier],
    *,
    class_name: str | None = None,
) -> UtilityDefinition:
    """Wrap *base* in *modifiers*, written order (outermost first).

    Modifiers are folded right to left, so the rightmost one sits closest to
    the class: ``md:hover:p-4`` first appends ``:hover`` and then wraps the
    result in the ``md`` media query.  The returned definition's class name is
    the full written token.
    """
    if class_name is None:
        class_name = ":".join([m.name for m in modifiers] + [base.class_name])
    target = RuleTarget(
        selector="." + escape_class(class_name),
        at_rules=base.at_rules,
        screen=base.screen,
    )
    for modifier in reversed(modifiers):
        target = modifier.wrap(target)
    return replace(
        base,
        class_name=class_name,
        selector=target.selector,
        at_rules=target.at_rules,
        screen=target.screen,
        variants=tuple(m.name for m in modifiers) + base.variants,
        variant_order=tuple(m.order for m in modifiers) + base.variant_order,
    )


class VariantExpander:
    """Resolves candidate variant chains against a :class:`VariantRegistry`."""

    def __init__(self, registry: VariantRegistry) -> None:
        self.registry = registry

    def expand(
        self, base: UtilityDefinition, names: Sequence[str], class_name: str | None = None
    ) -> UtilityDefinition:
        """Expand *base* with the named variants.

        Raises UnknownVariantError when any name is unregistered.
        """
        modifiers = self.registry.resolve_chain(names, class_name or "")
        return expand(base, modifiers, class_name=class_name)

    def expand_candidate(
        self, base: UtilityDefinition, candidate: ParsedCandidate
    ) -> UtilityDefinition:
        """Materialize *candidate* (variants, ``!``) on top of *base*."""
        if candidate.important:
            base = replace(base, important=True)
        if not candidate.variants:
            return replace(base, class_name=candidate.raw)
        return self.expand(base, candidate.variants, class_name=candidate.raw)
