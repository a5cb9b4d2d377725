from tailforge.plugins.base import ComponentPlugin, Plugin, load_plugin, load_plugins

__all__ = ["ComponentPlugin", "Plugin", "load_plugin", "load_plugins"]
