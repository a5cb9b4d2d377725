"""Utility generation: theme -> full utility universe."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from tailforge.generator.rules import DEFAULT_RULES, STATIC_UTILITIES, Declarations, UtilityRule
from tailforge.generator.universe import UtilityUniverse
from tailforge.model.theme import CATEGORIES, Theme
from tailforge.model.utility import Layer, UtilityDefinition
from tailforge.plugins.base import Plugin

logger = logging.getLogger(__name__)


def generate(
    theme: Theme,
    plugins: Sequence[Plugin] = (),
    rules: dict[str, list[UtilityRule]] | None = None,
    static: Mapping[str, Sequence[tuple[str, Declarations]]] | None = None,
) -> UtilityUniverse:
    """Apply every category rule to every theme token.

    Static keyword families (position, alignment, cursor ...) come first.
    Theme categories are then visited in canonical order, each category's
    rules in registration order, tokens in theme order; this visiting order
    is the generation order the emitter preserves.  Plugin utilities are
    added last.
    """
    rules = DEFAULT_RULES if rules is None else rules
    static = STATIC_UTILITIES if static is None else static
    universe = UtilityUniverse(theme)

    for family, entries in static.items():
        for class_name, properties in entries:
            universe.add(
                UtilityDefinition(class_name, family, tuple(properties), layer=Layer.UTILITIES)
            )

    for category in CATEGORIES:
        tokens = theme.tokens(category)
        for rule in rules.get(category, []):
            universe.register_arbitrary(rule)
            for token, value in tokens.items():
                for definition in rule.build(token, value, theme):
                    universe.add(definition)

    for plugin in plugins:
        contributed = 0
        for definition in plugin.contributes_utilities(theme):
            universe.add(definition)
            contributed += 1
        logger.debug("Plugin %s contributed %d utilities", plugin.name, contributed)

    logger.debug("Generated %d utilities", len(universe))
    return universe
