"""Purge: intersect the utility universe with the scanned candidate set."""

from __future__ import annotations

import difflib
import logging
from typing import Iterable

from tailforge.errors import UnknownVariantError
from tailforge.model.candidate import CandidateToken
from tailforge.model.diagnostic import WarningReport
from tailforge.model.utility import UtilityDefinition
from tailforge.purge.safelist import Safelist
from tailforge.scanner.grammar import parse_candidate
from tailforge.variants.expander import VariantExpander
from tailforge.variants.registry import VariantRegistry

logger = logging.getLogger(__name__)


def _unqualified_name(definition: UtilityDefinition) -> str:
    """Strip the written variant prefix from a variant-expanded class name."""
    if not definition.variants:
        return definition.class_name
    prefix = ":".join(definition.variants) + ":"
    name = definition.class_name
    return name[len(prefix):] if name.startswith(prefix) else name


def _variant_fix(expander: VariantExpander, variant: str) -> str:
    close = difflib.get_close_matches(variant, expander.registry.names, n=1)
    if close:
        return f"Did you mean {close[0]!r}?"
    return f"Define {variant!r} as a screen or plugin variant, or drop the prefix"


def _safelisted(definition: UtilityDefinition, safelist: Safelist) -> bool:
    if safelist.matches(definition.class_name):
        return True
    if len(definition.variants) == 1:
        base_name = _unqualified_name(definition)
        return definition.variants[0] in safelist.variant_requests(base_name)
    return False


def purge(
    universe: Iterable[UtilityDefinition],
    candidates: Iterable[CandidateToken],
    safelist: Safelist | None = None,
    expander: VariantExpander | None = None,
    report: WarningReport | None = None,
) -> frozenset[UtilityDefinition]:
    """Return the definitions that are referenced or safelisted.

    A definition survives iff its class name equals a candidate token or it
    matches the safelist.  Candidates carrying variants, ``!`` or an
    arbitrary value are materialized from their base utility (through
    *expander*) so that the materialized class name equals the candidate;
    purging the result again with the same inputs returns it unchanged.
    Base-layer rules carry no class name and always survive.

    Unknown variants drop only the candidate that uses them and are recorded
    in *report*.
    """
    safelist = safelist if safelist is not None else Safelist()
    expander = expander if expander is not None else VariantExpander(VariantRegistry())
    candidate_set = frozenset(candidates)

    definitions = list(universe)
    index: dict[str, UtilityDefinition] = {}
    retained: dict[str, UtilityDefinition] = {}
    unaddressed: set[UtilityDefinition] = set()
    for definition in definitions:
        if definition.is_addressable:
            index[definition.class_name] = definition
        else:
            unaddressed.add(definition)

    for name, definition in index.items():
        if name in candidate_set or _safelisted(definition, safelist):
            retained[name] = definition
        if definition.variants:
            continue
        for variant in safelist.variant_requests(name):
            qualified = f"{variant}:{name}"
            if qualified in index or qualified in retained:
                continue
            try:
                retained[qualified] = expander.expand(definition, [variant], class_name=qualified)
            except UnknownVariantError as exc:
                logger.debug("Safelist variant dropped: %s", exc)
                if report is not None:
                    report.warn(
                        "unknown_variant",
                        str(exc),
                        token=qualified,
                        fix=_variant_fix(expander, exc.variant),
                    )

    resolve_arbitrary = getattr(universe, "resolve_arbitrary", None)
    for raw in sorted(candidate_set):
        if raw in retained or raw in index:
            continue
        parsed = parse_candidate(raw)
        if parsed is None or parsed.is_plain:
            continue
        base = index.get(parsed.base_name)
        if base is None and parsed.arbitrary is not None and resolve_arbitrary is not None:
            base = resolve_arbitrary(parsed.utility, parsed.arbitrary)
        if base is None or base.variants:
            continue
        try:
            retained[raw] = expander.expand_candidate(base, parsed)
        except UnknownVariantError as exc:
            logger.debug("Candidate dropped: %s", exc)
            if report is not None:
                report.warn(
                    "unknown_variant",
                    str(exc),
                    token=raw,
                    fix=_variant_fix(expander, exc.variant),
                )

    return frozenset(retained.values()) | frozenset(unaddressed)
