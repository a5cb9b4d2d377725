"""Build configuration: the already-parsed config object as a frozen dataclass."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from tailforge.errors import ConfigError

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({
    "contentPatterns", "content", "theme", "plugins", "darkModeStrategy",
    "darkMode", "safelist", "preflight", "corePlugins",
})


@dataclass(frozen=True)
class BuildConfig:
    content_patterns: tuple[str, ...] = ()
    theme: Mapping[str, Any] = field(default_factory=dict)
    plugins: tuple[Any, ...] = ()
    dark_mode: str = "class"
    safelist: tuple[Any, ...] = ()
    preflight: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BuildConfig:
        """Build a config from a plain mapping.

        Accepts ``contentPatterns``/``content`` (a list, or ``{"files": [...]}``),
        ``darkModeStrategy``/``darkMode`` (``"class"``, ``"media"``, or
        ``["class", ...]``), and ``preflight``/``corePlugins.preflight``.
        """
        if not isinstance(data, Mapping):
            raise ConfigError("Configuration must be an object")
        for key in data:
            if key not in _KNOWN_KEYS:
                logger.debug("Ignoring unknown config key %r", key)

        content = data.get("contentPatterns", data.get("content", []))
        if isinstance(content, Mapping):
            content = content.get("files", [])
        if isinstance(content, str) or not isinstance(content, (list, tuple)):
            raise ConfigError("contentPatterns must be a list of glob strings")
        if not all(isinstance(p, str) and p for p in content):
            raise ConfigError("contentPatterns must contain non-empty strings")

        theme = data.get("theme", {}) or {}
        if not isinstance(theme, Mapping):
            raise ConfigError("theme must be an object")

        dark_mode = data.get("darkModeStrategy", data.get("darkMode", "class"))
        if isinstance(dark_mode, (list, tuple)) and dark_mode:
            dark_mode = dark_mode[0]
        if dark_mode == "selector":
            dark_mode = "class"
        if dark_mode not in ("class", "media"):
            raise ConfigError(f"darkModeStrategy must be 'class' or 'media', got {dark_mode!r}")

        plugins = data.get("plugins", []) or []
        safelist = data.get("safelist", []) or []
        if not isinstance(plugins, (list, tuple)):
            raise ConfigError("plugins must be a list")
        if not isinstance(safelist, (list, tuple)):
            raise ConfigError("safelist must be a list")

        preflight = data.get("preflight")
        if preflight is None:
            core = data.get("corePlugins", {}) or {}
            preflight = core.get("preflight", True) if isinstance(core, Mapping) else True

        return cls(
            content_patterns=tuple(content),
            theme=dict(theme),
            plugins=tuple(plugins),
            dark_mode=dark_mode,
            safelist=tuple(safelist),
            preflight=bool(preflight),
        )


def load_config(path: Path | str) -> BuildConfig:
    """Load a JSON configuration file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    return BuildConfig.from_dict(data)
