"""Per-category token shape checks.

Each validator takes ``(token_name, raw_value)`` and returns the normalized
value, or raises :class:`InvalidTokenError` when the value does not have the
shape its category requires.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

from tailforge.errors import InvalidTokenError


# ---------------------------------------------------------------------------
# Value grammars
# ---------------------------------------------------------------------------

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_COLOR_FUNC_RE = re.compile(
    r"^(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\(\s*[^()]*\)$", re.IGNORECASE
)

# var(--name) with an optional fallback
_VAR_RE = re.compile(r"^var\(--[A-Za-z0-9_-]+(?:\s*,.*)?\)$")

_MATH_RE = re.compile(r"^(?:calc|min|max|clamp)\(.+\)$")

_LENGTH_RE = re.compile(
    r"""
    ^-?(?:\d+|\d*\.\d+)                        # number
    (?:px|rem|em|%|vh|vw|vmin|vmax|svh|lvh|dvh|ch|ex|pt|pc|cm|mm|in)$
    """,
    re.VERBOSE,
)

_SCREEN_RE = re.compile(r"^(?P<num>\d+(?:\.\d+)?)(?P<unit>px|em|rem)$")

_TOKEN_NAME_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_./-]*$")

_KEYWORD_RE = re.compile(r"^[a-z][a-z-]*$")

COLOR_KEYWORDS = frozenset({
    "transparent", "currentcolor", "inherit", "initial", "unset", "revert",
})

NAMED_COLORS = frozenset({
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige",
    "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown",
    "burlywood", "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink", "deepskyblue",
    "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "fuchsia", "gainsboro", "ghostwhite", "gold", "goldenrod",
    "gray", "green", "greenyellow", "grey", "honeydew", "hotpink",
    "indianred", "indigo", "ivory", "khaki", "lavender", "lavenderblush",
    "lawngreen", "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
    "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
    "lime", "limegreen", "linen", "magenta", "maroon", "mediumaquamarine",
    "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace", "olive", "olivedrab", "orange",
    "orangered", "orchid", "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink", "plum",
    "powderblue", "purple", "rebeccapurple", "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell", "sienna",
    "silver", "skyblue", "slateblue", "slategray", "slategrey", "snow",
    "springgreen", "steelblue", "tan", "teal", "thistle", "tomato",
    "turquoise", "violet", "wheat", "white", "whitesmoke", "yellow",
    "yellowgreen",
})

ANIMATION_KEYS = frozenset({
    "name",
    "duration",
    "timing-function",
    "delay",
    "iteration-count",
    "direction",
    "fill-mode",
})

SIZE_KEYWORDS = frozenset({"none", "min-content", "max-content", "fit-content"})


# ---------------------------------------------------------------------------
# Shape predicates
# ---------------------------------------------------------------------------


def is_color(value: str) -> bool:
    """Return True if *value* is a CSS color literal."""
    value = value.strip()
    if _HEX_RE.match(value) or _COLOR_FUNC_RE.match(value) or _VAR_RE.match(value):
        return True
    return value.lower() in COLOR_KEYWORDS or value.lower() in NAMED_COLORS


def is_length(value: str) -> bool:
    """Return True if *value* is a CSS length, ``0``, ``auto`` or a math/var expression."""
    value = value.strip()
    if value in ("0", "auto"):
        return True
    return bool(_LENGTH_RE.match(value) or _MATH_RE.match(value) or _VAR_RE.match(value))


def screen_width_px(value: str) -> float:
    """Return a breakpoint width in pixels (em/rem at 16px) for ordering."""
    match = _SCREEN_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Not a screen width: {value!r}")
    number = float(match.group("num"))
    return number if match.group("unit") == "px" else number * 16


def _scalar(category: str, name: str, value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidTokenError(category, name, value, "expected a string or number")
    text = str(value).strip()
    if not text:
        raise InvalidTokenError(category, name, value, "empty value")
    return text


# ---------------------------------------------------------------------------
# Category validators
# ---------------------------------------------------------------------------


def validate_color(name: str, value: Any) -> str:
    text = _scalar("colors", name, value)
    if not is_color(text):
        raise InvalidTokenError("colors", name, value, "not a color literal")
    return text


def _length_validator(category: str) -> Callable[[str, Any], str]:
    def validate(name: str, value: Any) -> str:
        text = _scalar(category, name, value)
        if not is_length(text):
            raise InvalidTokenError(category, name, value, "not a CSS length")
        return text

    validate.__name__ = f"validate_{category}"
    return validate


validate_spacing = _length_validator("spacing")
validate_border_radius = _length_validator("borderRadius")
validate_border_width = _length_validator("borderWidth")


def is_size(value: str) -> bool:
    """Return True for a length or an intrinsic sizing keyword (``fit-content`` ...)."""
    return is_length(value) or value.strip() in SIZE_KEYWORDS


def _size_validator(category: str) -> Callable[[str, Any], str]:
    def validate(name: str, value: Any) -> str:
        text = _scalar(category, name, value)
        if not is_size(text):
            raise InvalidTokenError(category, name, value, "not a CSS size")
        return text

    validate.__name__ = f"validate_{category}"
    return validate


def validate_box_shadow(name: str, value: Any) -> str:
    text = _scalar("boxShadow", name, value)
    if text.count("(") != text.count(")"):
        raise InvalidTokenError("boxShadow", name, value, "unbalanced parentheses")
    return text


def validate_screen(name: str, value: Any) -> str:
    text = _scalar("screens", name, value)
    if not _SCREEN_RE.match(text):
        raise InvalidTokenError("screens", name, value, "expected px, em or rem width")
    return text


def validate_font_family(name: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        families = [part.strip() for part in value.split(",")]
    elif isinstance(value, (list, tuple)):
        families = [str(part).strip() for part in value]
    else:
        raise InvalidTokenError("fontFamily", name, value, "expected a string or list")
    families = [f.strip("'\"") for f in families if f]
    if not families:
        raise InvalidTokenError("fontFamily", name, value, "empty font list")
    return tuple(families)


def validate_font_size(name: str, value: Any) -> tuple[str, str]:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        size, line_height = _scalar("fontSize", name, value), ""
    elif isinstance(value, (list, tuple)) and 1 <= len(value) <= 2:
        size = _scalar("fontSize", name, value[0])
        line_height = ""
        if len(value) == 2:
            extra = value[1]
            if isinstance(extra, Mapping):
                extra = extra.get("lineHeight", "")
            line_height = str(extra).strip() if extra not in (None, "") else ""
    else:
        raise InvalidTokenError("fontSize", name, value, "expected size or [size, lineHeight]")
    if not is_length(size):
        raise InvalidTokenError("fontSize", name, value, "font size is not a CSS length")
    return (size, line_height)


def validate_font_weight(name: str, value: Any) -> str:
    text = _scalar("fontWeight", name, value)
    try:
        weight = int(text)
    except ValueError:
        raise InvalidTokenError("fontWeight", name, value, "expected an integer weight") from None
    if not 1 <= weight <= 1000:
        raise InvalidTokenError("fontWeight", name, value, "weight must be within 1..1000")
    return str(weight)


def validate_opacity(name: str, value: Any) -> str:
    text = _scalar("opacity", name, value)
    try:
        number = float(text)
    except ValueError:
        raise InvalidTokenError("opacity", name, value, "expected a number") from None
    if not 0.0 <= number <= 1.0:
        raise InvalidTokenError("opacity", name, value, "opacity must be within 0..1")
    return text


def validate_animation(name: str, value: Any) -> Any:
    if isinstance(value, Mapping):
        unknown = set(value) - ANIMATION_KEYS
        if unknown:
            raise InvalidTokenError(
                "animation", name, value, f"unknown keys {sorted(unknown)}"
            )
        for required in ("name", "duration"):
            if not str(value.get(required, "")).strip():
                raise InvalidTokenError("animation", name, value, f"missing {required!r}")
        return {k: str(v).strip() for k, v in value.items()}
    return _scalar("animation", name, value)


def validate_keyframes(name: str, value: Any) -> dict[str, dict[str, str]]:
    if not isinstance(value, Mapping) or not value:
        raise InvalidTokenError("keyframes", name, value, "expected step -> declarations mapping")
    steps: dict[str, dict[str, str]] = {}
    for step, declarations in value.items():
        if not isinstance(declarations, Mapping) or not declarations:
            raise InvalidTokenError(
                "keyframes", name, value, f"step {step!r} has no declarations"
            )
        steps[str(step)] = {str(k): str(v) for k, v in declarations.items()}
    return steps


def validate_display(name: str, value: Any) -> str:
    text = _scalar("display", name, value)
    if not _KEYWORD_RE.match(text):
        raise InvalidTokenError("display", name, value, "expected a CSS keyword")
    return text


VALIDATORS: dict[str, Callable[[str, Any], Any]] = {
    "screens": validate_screen,
    "colors": validate_color,
    "spacing": validate_spacing,
    "width": _size_validator("width"),
    "height": _size_validator("height"),
    "minWidth": _size_validator("minWidth"),
    "minHeight": _size_validator("minHeight"),
    "maxWidth": _size_validator("maxWidth"),
    "maxHeight": _size_validator("maxHeight"),
    "borderRadius": validate_border_radius,
    "borderWidth": validate_border_width,
    "boxShadow": validate_box_shadow,
    "fontFamily": validate_font_family,
    "fontSize": validate_font_size,
    "fontWeight": validate_font_weight,
    "opacity": validate_opacity,
    "keyframes": validate_keyframes,
    "animation": validate_animation,
    "display": validate_display,
}


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def flatten_colors(tokens: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested palettes: ``{brand: {500: x}}`` -> ``{"brand-500": x}``.

    A ``DEFAULT`` key maps to the palette name itself.
    """
    flat: dict[str, Any] = {}
    for key, value in tokens.items():
        key = str(key)
        if key == "DEFAULT":
            name = prefix or key
        else:
            name = f"{prefix}-{key}" if prefix else key
        if isinstance(value, Mapping):
            flat.update(flatten_colors(value, name))
        else:
            flat[name] = value
    return flat


def normalize_category(category: str, tokens: Mapping[str, Any]) -> dict[str, Any]:
    """Validate and normalize every token in *category*."""
    validator = VALIDATORS.get(category)
    if validator is None:
        raise InvalidTokenError(category, "*", tokens, "unknown theme category")
    if not isinstance(tokens, Mapping):
        raise InvalidTokenError(category, "*", tokens, "expected a token mapping")
    if category == "colors":
        tokens = flatten_colors(tokens)
    normalized: dict[str, Any] = {}
    for name, value in tokens.items():
        name = str(name)
        if not _TOKEN_NAME_RE.match(name):
            raise InvalidTokenError(category, name, value, "invalid token name")
        normalized[name] = validator(name, value)
    return normalized
