"""Theme resolution: merge a base token table with user extensions."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from tailforge.errors import ConfigError
from tailforge.model.theme import CATEGORIES, Theme
from tailforge.theme.defaults import BASE_THEME
from tailforge.theme.validators import normalize_category

logger = logging.getLogger(__name__)

PartialTheme = Mapping[str, Mapping[str, Any]]

DARK_MODE_STRATEGIES = ("class", "media")


def _ordered(categories: Mapping[str, Mapping[str, Any]]) -> dict[str, Mapping[str, Any]]:
    """Return categories in canonical generation order."""
    return {c: categories[c] for c in CATEGORIES if c in categories}


def _as_categories(base: Theme | PartialTheme) -> dict[str, dict[str, Any]]:
    if isinstance(base, Theme):
        # Already normalized; copy so the merge never touches the frozen input.
        return {cat: dict(tokens) for cat, tokens in base.categories.items()}
    return {cat: normalize_category(cat, tokens) for cat, tokens in base.items()}


def resolve(
    base: Theme | PartialTheme,
    extension: PartialTheme | None = None,
    *,
    dark_mode: str | None = None,
) -> Theme:
    """Merge *extension* into *base* and return an immutable Theme.

    For each category in *extension* tokens are merged by name, with the
    extension winning on collision.  Categories absent from *extension* pass
    through unchanged; categories present only in *extension* are added.

    Raises InvalidTokenError when any token fails its category's shape check,
    including tokens of an unknown category.
    """
    if dark_mode is None:
        dark_mode = base.dark_mode if isinstance(base, Theme) else "class"
    if dark_mode not in DARK_MODE_STRATEGIES:
        raise ConfigError(f"Unknown dark mode strategy: {dark_mode!r}")

    merged = _as_categories(base)
    for category, tokens in (extension or {}).items():
        normalized = normalize_category(category, tokens)
        target = merged.setdefault(category, {})
        for name, value in normalized.items():
            if name in target:
                logger.debug("Theme override: %s.%s", category, name)
            target[name] = value
    return Theme(categories=_ordered(merged), dark_mode=dark_mode)


def resolve_config_theme(
    theme_config: Mapping[str, Any] | None,
    *,
    base: Theme | PartialTheme | None = None,
    dark_mode: str = "class",
) -> Theme:
    """Resolve a config-level ``theme`` object.

    Top-level categories replace the base category wholesale; the ``extend``
    object is then merged on top with :func:`resolve`.
    """
    theme_config = dict(theme_config or {})
    extension = theme_config.pop("extend", None) or {}
    if not isinstance(extension, Mapping):
        raise ConfigError("theme.extend must be an object")

    categories = _as_categories(BASE_THEME if base is None else base)
    for category, tokens in theme_config.items():
        logger.debug("Theme category replaced: %s", category)
        categories[category] = normalize_category(category, tokens)

    replaced = Theme(categories=_ordered(categories), dark_mode=dark_mode)
    return resolve(replaced, extension, dark_mode=dark_mode)


def default_theme(dark_mode: str = "class") -> Theme:
    """Return the base theme with no user extensions."""
    return resolve(BASE_THEME, None, dark_mode=dark_mode)
