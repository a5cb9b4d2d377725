"""Base-layer reset rules emitted when preflight is enabled."""

from __future__ import annotations

from tailforge.generator.rules import format_font_family
from tailforge.model.theme import Theme
from tailforge.model.utility import Layer, UtilityDefinition

_RESETS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "*,::before,::after",
        (
            ("box-sizing", "border-box"),
            ("border-width", "0"),
            ("border-style", "solid"),
            ("border-color", "currentColor"),
        ),
    ),
    ("html", (("line-height", "1.5"), ("-webkit-text-size-adjust", "100%"), ("tab-size", "4"))),
    ("body", (("margin", "0"), ("line-height", "inherit"))),
    ("h1,h2,h3,h4,h5,h6", (("font-size", "inherit"), ("font-weight", "inherit"))),
    ("a", (("color", "inherit"), ("text-decoration", "inherit"))),
    ("b,strong", (("font-weight", "bolder"),)),
    (
        "button,input,optgroup,select,textarea",
        (
            ("font-family", "inherit"),
            ("font-size", "100%"),
            ("line-height", "inherit"),
            ("color", "inherit"),
            ("margin", "0"),
            ("padding", "0"),
        ),
    ),
    (
        "blockquote,dl,dd,h1,h2,h3,h4,h5,h6,hr,figure,p,pre",
        (("margin", "0"),),
    ),
    ("ol,ul,menu", (("list-style", "none"), ("margin", "0"), ("padding", "0"))),
    (
        "img,svg,video,canvas,audio,iframe,embed,object",
        (("display", "block"), ("vertical-align", "middle")),
    ),
    ("img,video", (("max-width", "100%"), ("height", "auto"))),
    ("[hidden]", (("display", "none"),)),
)


def preflight_rules(theme: Theme) -> list[UtilityDefinition]:
    """Return the base-layer resets, using the theme's ``sans`` and ``mono`` families."""
    rules: list[UtilityDefinition] = []
    for selector, declarations in _RESETS:
        if selector == "html" and "sans" in theme.tokens("fontFamily"):
            family = format_font_family(theme["fontFamily"]["sans"])
            declarations = declarations + (("font-family", family),)
        rules.append(
            UtilityDefinition(
                class_name="",
                category="preflight",
                properties=declarations,
                layer=Layer.BASE,
                order=len(rules),
                selector=selector,
            )
        )
    if "mono" in theme.tokens("fontFamily"):
        rules.append(
            UtilityDefinition(
                class_name="",
                category="preflight",
                properties=(
                    ("font-family", format_font_family(theme["fontFamily"]["mono"])),
                    ("font-size", "1em"),
                ),
                layer=Layer.BASE,
                order=len(rules),
                selector="code,kbd,samp,pre",
            )
        )
    return rules
