"""CSS emitter: serialize retained definitions into stylesheet text."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable

from tailforge.model.utility import UtilityDefinition


def _sort_key(definition: UtilityDefinition) -> tuple:
    return (
        definition.layer.rank,
        definition.screen,
        definition.order,
        definition.variant_order,
        definition.class_name,
        definition.selector,
    )


def render_declarations(definition: UtilityDefinition) -> str:
    suffix = " !important" if definition.important else ""
    return ";".join(f"{prop}:{value}{suffix}" for prop, value in definition.properties)


def render_rule(definition: UtilityDefinition) -> str:
    """Render one rule without its at-rule wrappers: ``.p-4{padding:1rem}``."""
    selector = definition.class_selector + definition.suffix
    return f"{selector}{{{render_declarations(definition)}}}"


def _render_group(at_rules: tuple[str, ...], rules: list[str]) -> list[str]:
    if not at_rules:
        return rules
    lines = [f"{at_rule}{{" for at_rule in at_rules]
    lines.extend(rules)
    lines.extend("}" for _ in at_rules)
    return lines


def emit(retained: Iterable[UtilityDefinition]) -> str:
    """Serialize *retained* into stylesheet text.

    Layers come in fixed order (base, components, utilities).  Inside a layer
    unconditional rules come first, then each breakpoint in ascending width;
    within a group rules keep generation order so later rules are not
    shadowed by earlier ones.  Consecutive rules sharing the same at-rule
    chain share one block.  Companion blocks (``@keyframes``) are written
    once, at the head of the layer that first needs them.

    The output is byte-stable for equal inputs.
    """
    ordered = sorted(set(retained), key=_sort_key)
    lines: list[str] = []
    seen_preamble: set[str] = set()

    for layer, members in groupby(ordered, key=lambda d: d.layer):
        members = list(members)
        lines.append(f"/* {layer.value} */")

        for definition in members:
            for block in definition.preamble:
                if block not in seen_preamble:
                    seen_preamble.add(block)
                    lines.append(block)

        for at_rules, run in groupby(members, key=lambda d: d.at_rules):
            lines.extend(_render_group(at_rules, [render_rule(d) for d in run]))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
