"""Generation rules: how each theme category turns into utility classes.

A rule is a pure function of ``(token, value)`` (plus the theme, for rules
that need companion data such as keyframes) producing declarations for the
class ``<prefix>-<token>``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from tailforge.model.theme import Theme
from tailforge.model.utility import Layer, UtilityDefinition
from tailforge.theme.validators import is_color, is_length, is_size

Declarations = tuple[tuple[str, str], ...]

# Generic families are CSS keywords and must not be quoted.
_GENERIC_FAMILIES = frozenset({
    "serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui",
    "ui-serif", "ui-sans-serif", "ui-monospace", "ui-rounded", "emoji",
    "math", "fangsong", "inherit", "initial", "unset",
})

_IDENT_RE = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")

SPACE_BETWEEN_SUFFIX = " > :not([hidden]) ~ :not([hidden])"


@dataclass(frozen=True)
class UtilityRule:
    """One utility family generated from one theme category.

    Attributes:
        category: Theme category the rule reads.
        prefix: Class prefix; empty for bare-keyword families (``flex``).
        declare: Maps a token value to ordered declarations.
        accepts: Predicate over arbitrary values (``p-[3px]``); None disables
            arbitrary values for this family.
        negative: Also generate ``-<prefix>-<token>`` with negated values.
        suffix: Selector combinator appended after the class selector.
        preamble: Companion blocks for a token value (e.g. ``@keyframes``).
    """

    category: str
    prefix: str
    declare: Callable[[Any], Declarations]
    accepts: Callable[[str], bool] | None = None
    negative: bool = False
    suffix: str = ""
    preamble: Callable[[Any, Theme], tuple[str, ...]] | None = field(
        default=None, compare=False
    )

    def class_name(self, token: str, negative: bool = False) -> str:
        if not self.prefix:
            name = token
        elif token == "DEFAULT":
            name = self.prefix
        else:
            name = f"{self.prefix}-{token}"
        return f"-{name}" if negative else name

    def build(self, token: str, value: Any, theme: Theme) -> list[UtilityDefinition]:
        """Return the definitions this rule produces for one token."""
        preamble = self.preamble(value, theme) if self.preamble else ()
        definitions = [
            UtilityDefinition(
                class_name=self.class_name(token),
                category=self.category,
                properties=self.declare(value),
                layer=Layer.UTILITIES,
                suffix=self.suffix,
                preamble=preamble,
            )
        ]
        if self.negative and token != "DEFAULT":
            negated = negate(str(value))
            if negated is not None:
                definitions.append(
                    UtilityDefinition(
                        class_name=self.class_name(token, negative=True),
                        category=self.category,
                        properties=self.declare(negated),
                        layer=Layer.UTILITIES,
                        suffix=self.suffix,
                    )
                )
        return definitions

    def build_arbitrary(self, raw: str, theme: Theme) -> UtilityDefinition | None:
        """Materialize ``<prefix>-[raw]``; None if the value is not accepted."""
        if self.accepts is None:
            return None
        value = raw.replace("_", " ")
        if not self.accepts(value):
            return None
        return UtilityDefinition(
            class_name=f"{self.prefix}-[{raw}]",
            category=self.category,
            properties=self.declare(value),
            layer=Layer.UTILITIES,
            suffix=self.suffix,
        )


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def negate(value: str) -> str | None:
    """Return the negated length, or None when negation is meaningless."""
    value = value.strip()
    if value in ("0", "auto") or re.match(r"^0(?:\.0+)?[a-z%]*$", value):
        return None
    if value.startswith(("calc(", "var(", "min(", "max(", "clamp(")):
        return f"calc({value} * -1)"
    if value.startswith("-"):
        return value[1:]
    return f"-{value}"


def format_font_family(families: tuple[str, ...] | str) -> str:
    if isinstance(families, str):
        families = (families,)
    parts = []
    for family in families:
        if family in _GENERIC_FAMILIES or _IDENT_RE.match(family) and " " not in family:
            parts.append(family)
        else:
            parts.append(f'"{family}"')
    return ",".join(parts)


def format_animation(value: Any) -> str:
    if isinstance(value, Mapping):
        order = (
            "name",
            "duration",
            "timing-function",
            "delay",
            "iteration-count",
            "direction",
            "fill-mode",
        )
        return " ".join(value[k] for k in order if value.get(k))
    return str(value)


def render_keyframes(name: str, steps: Mapping[str, Mapping[str, str]]) -> str:
    body = "".join(
        step + "{" + ";".join(f"{k}:{v}" for k, v in decls.items()) + "}"
        for step, decls in steps.items()
    )
    return f"@keyframes {name}{{{body}}}"


def animation_keyframes(value: Any, theme: Theme) -> tuple[str, ...]:
    """Attach the ``@keyframes`` block referenced by an animation, if themed."""
    text = format_animation(value)
    name = text.split(" ", 1)[0] if text else ""
    keyframes = theme.tokens("keyframes")
    if name in keyframes:
        return (render_keyframes(name, keyframes[name]),)
    return ()


def _set(*properties: str) -> Callable[[Any], Declarations]:
    """Declare every property in *properties* with the token value."""

    def declare(value: Any) -> Declarations:
        return tuple((prop, str(value)) for prop in properties)

    return declare


def _font_size(value: Any) -> Declarations:
    if isinstance(value, str):
        return (("font-size", value),)
    size, line_height = value
    if line_height:
        return (("font-size", size), ("line-height", line_height))
    return (("font-size", size),)


def _font_family(value: Any) -> Declarations:
    return (("font-family", format_font_family(value)),)


def _animation(value: Any) -> Declarations:
    return (("animation", format_animation(value)),)


def _is_font_weight(value: str) -> bool:
    return value.isdigit() and 1 <= int(value) <= 1000


def _is_opacity(value: str) -> bool:
    try:
        return 0.0 <= float(value) <= 1.0
    except ValueError:
        return False


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

_SPACING_FAMILIES: tuple[tuple[str, tuple[str, ...], bool], ...] = (
    ("p", ("padding",), False),
    ("px", ("padding-left", "padding-right"), False),
    ("py", ("padding-top", "padding-bottom"), False),
    ("pt", ("padding-top",), False),
    ("pr", ("padding-right",), False),
    ("pb", ("padding-bottom",), False),
    ("pl", ("padding-left",), False),
    ("m", ("margin",), True),
    ("mx", ("margin-left", "margin-right"), True),
    ("my", ("margin-top", "margin-bottom"), True),
    ("mt", ("margin-top",), True),
    ("mr", ("margin-right",), True),
    ("mb", ("margin-bottom",), True),
    ("ml", ("margin-left",), True),
    ("gap", ("gap",), False),
    ("w", ("width",), False),
    ("h", ("height",), False),
    ("max-h", ("max-height",), False),
    ("inset", ("inset",), True),
    ("top", ("top",), True),
    ("right", ("right",), True),
    ("bottom", ("bottom",), True),
    ("left", ("left",), True),
)

_SIZE_FAMILIES: tuple[tuple[str, str, str], ...] = (
    ("width", "w", "width"),
    ("height", "h", "height"),
    ("minWidth", "min-w", "min-width"),
    ("minHeight", "min-h", "min-height"),
    ("maxWidth", "max-w", "max-width"),
    ("maxHeight", "max-h", "max-height"),
)

_BORDER_SIDES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("border", ("border-width",)),
    ("border-x", ("border-left-width", "border-right-width")),
    ("border-y", ("border-top-width", "border-bottom-width")),
    ("border-t", ("border-top-width",)),
    ("border-r", ("border-right-width",)),
    ("border-b", ("border-bottom-width",)),
    ("border-l", ("border-left-width",)),
)


def _spacing_rules() -> list[UtilityRule]:
    rules = [
        UtilityRule("spacing", prefix, _set(*props), accepts=is_length, negative=neg)
        for prefix, props, neg in _SPACING_FAMILIES
    ]
    rules.append(
        UtilityRule(
            "spacing", "space-x", _set("margin-left"),
            accepts=is_length, negative=True, suffix=SPACE_BETWEEN_SUFFIX,
        )
    )
    rules.append(
        UtilityRule(
            "spacing", "space-y", _set("margin-top"),
            accepts=is_length, negative=True, suffix=SPACE_BETWEEN_SUFFIX,
        )
    )
    return rules


DEFAULT_RULES: dict[str, list[UtilityRule]] = {
    "screens": [],
    "colors": [
        UtilityRule("colors", "bg", _set("background-color"), accepts=is_color),
        UtilityRule("colors", "text", _set("color"), accepts=is_color),
        UtilityRule("colors", "border", _set("border-color"), accepts=is_color),
    ],
    "spacing": _spacing_rules(),
    **{
        category: [UtilityRule(category, prefix, _set(prop), accepts=is_size)]
        for category, prefix, prop in _SIZE_FAMILIES
    },
    "borderRadius": [
        UtilityRule("borderRadius", "rounded", _set("border-radius"), accepts=is_length),
    ],
    "borderWidth": [
        UtilityRule("borderWidth", prefix, _set(*props), accepts=is_length)
        for prefix, props in _BORDER_SIDES
    ],
    "boxShadow": [UtilityRule("boxShadow", "shadow", _set("box-shadow"))],
    "fontFamily": [UtilityRule("fontFamily", "font", _font_family)],
    "fontSize": [UtilityRule("fontSize", "text", _font_size, accepts=is_length)],
    "fontWeight": [
        UtilityRule("fontWeight", "font", _set("font-weight"), accepts=_is_font_weight),
    ],
    "opacity": [UtilityRule("opacity", "opacity", _set("opacity"), accepts=_is_opacity)],
    "keyframes": [],
    "animation": [
        UtilityRule("animation", "animate", _animation, preamble=animation_keyframes),
    ],
    "display": [UtilityRule("display", "", _set("display"))],
}


# ---------------------------------------------------------------------------
# Static utilities
# ---------------------------------------------------------------------------


def _keywords(prefix: str, prop: str, values: tuple[str, ...]) -> tuple[tuple[str, Declarations], ...]:
    """``<prefix>-<value>`` classes declaring ``prop: value``; bare value when *prefix* is empty."""
    return tuple(
        (f"{prefix}-{value}" if prefix else value, ((prop, value),)) for value in values
    )


def _mapped(prefix: str, prop: str, values: Mapping[str, str]) -> tuple[tuple[str, Declarations], ...]:
    return tuple((f"{prefix}-{name}", ((prop, value),)) for name, value in values.items())


# Keyword families that no theme token drives, grouped by the CSS property
# they set.  Generated ahead of the themed categories.
STATIC_UTILITIES: dict[str, tuple[tuple[str, Declarations], ...]] = {
    "position": _keywords("", "position", ("static", "fixed", "absolute", "relative", "sticky")),
    "zIndex": _keywords("z", "z-index", ("0", "10", "20", "30", "40", "50", "auto")),
    "flexDirection": _mapped(
        "flex",
        "flex-direction",
        {"row": "row", "row-reverse": "row-reverse", "col": "column", "col-reverse": "column-reverse"},
    ),
    "flexWrap": _keywords("flex", "flex-wrap", ("wrap", "wrap-reverse", "nowrap")),
    "flex": _mapped(
        "flex",
        "flex",
        {"1": "1 1 0%", "auto": "1 1 auto", "initial": "0 1 auto", "none": "none"},
    ),
    "flexGrow": (("grow", (("flex-grow", "1"),)), ("grow-0", (("flex-grow", "0"),))),
    "flexShrink": (("shrink", (("flex-shrink", "1"),)), ("shrink-0", (("flex-shrink", "0"),))),
    "alignItems": _mapped(
        "items",
        "align-items",
        {
            "start": "flex-start",
            "end": "flex-end",
            "center": "center",
            "baseline": "baseline",
            "stretch": "stretch",
        },
    ),
    "justifyContent": _mapped(
        "justify",
        "justify-content",
        {
            "start": "flex-start",
            "end": "flex-end",
            "center": "center",
            "between": "space-between",
            "around": "space-around",
            "evenly": "space-evenly",
        },
    ),
    "overflow": (
        _keywords("overflow", "overflow", ("auto", "hidden", "clip", "visible", "scroll"))
        + _keywords("overflow-x", "overflow-x", ("auto", "hidden", "clip", "visible", "scroll"))
        + _keywords("overflow-y", "overflow-y", ("auto", "hidden", "clip", "visible", "scroll"))
    ),
    "whitespace": _keywords(
        "whitespace", "white-space", ("normal", "nowrap", "pre", "pre-line", "pre-wrap")
    ),
    "textOverflow": (
        (
            "truncate",
            (("overflow", "hidden"), ("text-overflow", "ellipsis"), ("white-space", "nowrap")),
        ),
    ),
    "textAlign": _keywords("text", "text-align", ("left", "center", "right", "justify")),
    "fontStyle": (("italic", (("font-style", "italic"),)), ("not-italic", (("font-style", "normal"),))),
    "textDecoration": (
        ("underline", (("text-decoration-line", "underline"),)),
        ("line-through", (("text-decoration-line", "line-through"),)),
        ("no-underline", (("text-decoration-line", "none"),)),
    ),
    "textTransform": (
        ("uppercase", (("text-transform", "uppercase"),)),
        ("lowercase", (("text-transform", "lowercase"),)),
        ("capitalize", (("text-transform", "capitalize"),)),
        ("normal-case", (("text-transform", "none"),)),
    ),
    "cursor": _keywords(
        "cursor", "cursor", ("auto", "default", "pointer", "wait", "text", "move", "not-allowed")
    ),
    "pointerEvents": _keywords("pointer-events", "pointer-events", ("none", "auto")),
    "userSelect": _keywords("select", "user-select", ("none", "text", "all", "auto")),
}
