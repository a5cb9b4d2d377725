"""Tests for the variant registry and expander."""

from __future__ import annotations

import pytest

from tailforge.errors import UnknownVariantError
from tailforge.model.candidate import ParsedCandidate
from tailforge.model.utility import UtilityDefinition
from tailforge.model.variant import RuleTarget, VariantKind, VariantModifier
from tailforge.theme import default_theme, resolve
from tailforge.variants import VariantExpander, VariantRegistry, expand, sorted_screens
from tailforge.variants.registry import at_rule_wrap, parent_state_wrap, pseudo_class_wrap

P4 = UtilityDefinition("p-4", "spacing", (("padding", "1rem"),), order=7)
BG = UtilityDefinition("bg-black", "colors", (("background-color", "#000"),), order=3)


@pytest.fixture
def registry() -> VariantRegistry:
    return VariantRegistry.for_theme(default_theme())


@pytest.fixture
def expander(registry: VariantRegistry) -> VariantExpander:
    return VariantExpander(registry)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_builtin_names(self, registry: VariantRegistry) -> None:
        for name in ("hover", "focus", "group-hover", "peer-checked", "dark", "print",
                     "motion-safe", "sm", "md", "lg", "xl", "2xl"):
            assert name in registry

    def test_breakpoints_registered_last_in_width_order(self, registry: VariantRegistry) -> None:
        assert registry.names[-5:] == ["sm", "md", "lg", "xl", "2xl"]

    def test_lookup_unknown_raises(self, registry: VariantRegistry) -> None:
        with pytest.raises(UnknownVariantError) as info:
            registry.lookup("foo", "foo:p-4")
        assert info.value.variant == "foo"
        assert info.value.candidate == "foo:p-4"
        assert not info.value.fatal

    def test_screens_sorted_by_width(self) -> None:
        theme = resolve({"screens": {"wide": "90rem", "tablet": "640px", "phone": "20em"}})
        assert sorted_screens(theme) == [("phone", "20em"), ("tablet", "640px"), ("wide", "90rem")]

    def test_breakpoint_rank(self) -> None:
        theme = resolve({"screens": {"lg": "1024px", "sm": "640px"}})
        registry = VariantRegistry.for_theme(theme)
        sm = registry.lookup("sm").wrap(RuleTarget(".x"))
        lg = registry.lookup("lg").wrap(RuleTarget(".x"))
        assert (sm.screen, lg.screen) == (1, 2)
        assert lg.at_rules == ("@media (min-width: 1024px)",)

    def test_extra_modifiers_appended(self) -> None:
        busy = VariantModifier(
            "aria-busy", VariantKind.PARENT_STATE, parent_state_wrap('[aria-busy="true"] {selector}')
        )
        registry = VariantRegistry.for_theme(default_theme(), [busy])
        modifier = registry.lookup("aria-busy")
        assert modifier.order == len(registry) - 1

    def test_register_replaces(self) -> None:
        registry = VariantRegistry()
        registry.register("hover", VariantKind.PSEUDO_CLASS, pseudo_class_wrap(":hover"))
        registry.register("hover", VariantKind.PSEUDO_CLASS, pseudo_class_wrap(":focus"))
        assert len(registry) == 1
        assert registry.lookup("hover").wrap(RuleTarget(".x")).selector == ".x:focus"


class TestWraps:
    def test_pseudo(self) -> None:
        assert pseudo_class_wrap(":hover")(RuleTarget(".a")).selector == ".a:hover"

    def test_parent_state(self) -> None:
        target = parent_state_wrap(".group:hover {selector}")(RuleTarget(".a"))
        assert target.selector == ".group:hover .a"

    def test_at_rule_prepends_and_keeps_max_screen(self) -> None:
        inner = RuleTarget(".a", ("@media print",), 0)
        target = at_rule_wrap("@media (min-width: 768px)", screen=2)(inner)
        assert target.at_rules == ("@media (min-width: 768px)", "@media print")
        assert target.screen == 2


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


class TestExpand:
    def test_hover(self, expander: VariantExpander) -> None:
        result = expander.expand(P4, ["hover"])
        assert result.class_name == "hover:p-4"
        assert result.selector == ".hover\\:p-4:hover"
        assert result.at_rules == ()
        assert result.order == P4.order
        assert result.properties == P4.properties

    def test_md_hover_composition(self, expander: VariantExpander, registry: VariantRegistry) -> None:
        result = expander.expand(P4, ["md", "hover"])
        assert result.selector == ".md\\:hover\\:p-4:hover"
        assert result.at_rules == ("@media (min-width: 768px)",)
        assert result.screen == 2
        assert result.variants == ("md", "hover")

        hovered = expand(P4, [registry.lookup("hover")], class_name="md:hover:p-4")
        md = registry.lookup("md").wrap(
            RuleTarget(hovered.selector, hovered.at_rules, hovered.screen)
        )
        assert (md.selector, md.at_rules, md.screen) == (
            result.selector, result.at_rules, result.screen,
        )

    def test_hover_md_is_same_rule_differently_named(self, expander: VariantExpander) -> None:
        result = expander.expand(P4, ["hover", "md"])
        assert result.selector == ".hover\\:md\\:p-4:hover"
        assert result.at_rules == ("@media (min-width: 768px)",)

    def test_dark_class_strategy(self, expander: VariantExpander) -> None:
        result = expander.expand(BG, ["dark"])
        assert result.selector == ".dark .dark\\:bg-black"
        assert result.at_rules == ()

    def test_dark_media_strategy(self) -> None:
        expander = VariantExpander(VariantRegistry.for_theme(resolve({}, dark_mode="media")))
        result = expander.expand(BG, ["dark"])
        assert result.selector == ".dark\\:bg-black"
        assert result.at_rules == ("@media (prefers-color-scheme: dark)",)
        assert result.screen == 0

    def test_group_hover(self, expander: VariantExpander) -> None:
        result = expander.expand(P4, ["group-hover"])
        assert result.selector == ".group:hover .group-hover\\:p-4"

    def test_peer_checked(self, expander: VariantExpander) -> None:
        result = expander.expand(P4, ["peer-checked"])
        assert result.selector == ".peer:checked ~ .peer-checked\\:p-4"

    def test_dark_md_hover(self, expander: VariantExpander) -> None:
        result = expander.expand(BG, ["dark", "md", "hover"])
        assert result.selector == ".dark .dark\\:md\\:hover\\:bg-black:hover"
        assert result.at_rules == ("@media (min-width: 768px)",)

    def test_unknown_variant(self, expander: VariantExpander) -> None:
        with pytest.raises(UnknownVariantError):
            expander.expand(P4, ["hover", "foo"])

    def test_variant_order_recorded(self, expander: VariantExpander, registry: VariantRegistry) -> None:
        result = expander.expand(P4, ["md", "hover"])
        assert result.variant_order == (registry.lookup("md").order, registry.lookup("hover").order)


class TestExpandCandidate:
    def test_important_without_variants(self, expander: VariantExpander) -> None:
        parsed = ParsedCandidate(raw="!p-4", variants=(), utility="p-4", important=True)
        result = expander.expand_candidate(P4, parsed)
        assert result.class_name == "!p-4"
        assert result.important
        assert result.class_selector == ".\\!p-4"

    def test_variant_and_important(self, expander: VariantExpander) -> None:
        parsed = ParsedCandidate(raw="hover:!p-4", variants=("hover",), utility="p-4", important=True)
        result = expander.expand_candidate(P4, parsed)
        assert result.selector == ".hover\\:\\!p-4:hover"
        assert result.important
