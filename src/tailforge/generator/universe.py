"""The utility universe: every class the theme can produce, in generation order."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator

from tailforge.generator.rules import UtilityRule
from tailforge.model.theme import Theme
from tailforge.model.utility import UtilityDefinition

logger = logging.getLogger(__name__)

# Arbitrary-value definitions sort after every generated definition of the
# same layer; the offset keeps their order stable and rule-relative.
_ARBITRARY_ORDER_BASE = 1_000_000


class UtilityUniverse:
    """Ordered index of utility definitions keyed by class name.

    Definitions are numbered as they are added.  Adding a class name that is
    already present replaces the earlier definition (last registered wins)
    and moves it to the end of the generation order.
    """

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self._definitions: dict[str, UtilityDefinition] = {}
        self._arbitrary: dict[str, list[tuple[int, UtilityRule]]] = {}
        self._next_order = 0
        self._next_rule = 0

    # --- registration ---------------------------------------------------------

    def add(self, definition: UtilityDefinition) -> UtilityDefinition:
        """Register *definition*, assigning its generation order."""
        previous = self._definitions.pop(definition.class_name, None)
        if previous is not None:
            logger.debug(
                "Utility %s from %s replaced by %s",
                definition.class_name,
                previous.category,
                definition.category,
            )
        numbered = definition.with_order(self._next_order)
        self._next_order += 1
        self._definitions[definition.class_name] = numbered
        return numbered

    def register_arbitrary(self, rule: UtilityRule) -> None:
        """Allow ``<rule.prefix>-[value]`` candidates to materialize via *rule*."""
        if rule.accepts is None or not rule.prefix:
            return
        self._arbitrary.setdefault(rule.prefix, []).append((self._next_rule, rule))
        self._next_rule += 1

    # --- lookup ---------------------------------------------------------------

    def get(self, class_name: str) -> UtilityDefinition | None:
        return self._definitions.get(class_name)

    def resolve_arbitrary(self, prefix: str, raw: str) -> UtilityDefinition | None:
        """Materialize an arbitrary-value utility such as ``w-[32rem]``.

        The first registered rule for *prefix* whose value predicate accepts
        the value wins (so ``text-[#fff]`` is a color, ``text-[14px]`` a size).
        """
        for index, rule in self._arbitrary.get(prefix, []):
            definition = rule.build_arbitrary(raw, self.theme)
            if definition is not None:
                return replace(definition, order=_ARBITRARY_ORDER_BASE + index)
        return None

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._definitions

    def __iter__(self) -> Iterator[UtilityDefinition]:
        return iter(list(self._definitions.values()))

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def class_names(self) -> list[str]:
        return list(self._definitions)

    @property
    def arbitrary_prefixes(self) -> list[str]:
        return list(self._arbitrary)

    def __repr__(self) -> str:
        return f"UtilityUniverse(definitions={len(self._definitions)})"
