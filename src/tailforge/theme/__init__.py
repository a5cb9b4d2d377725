from tailforge.theme.defaults import BASE_THEME
from tailforge.theme.resolver import default_theme, resolve, resolve_config_theme

__all__ = ["BASE_THEME", "default_theme", "resolve", "resolve_config_theme"]
