"""Plugin capability interface and loading."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from tailforge.errors import ConfigError
from tailforge.model.theme import Theme
from tailforge.model.utility import Layer, UtilityDefinition
from tailforge.model.variant import VariantModifier


@runtime_checkable
class Plugin(Protocol):
    """Contributes utilities and/or variants before generation runs."""

    name: str

    def contributes_utilities(self, theme: Theme) -> Iterable[UtilityDefinition]: ...

    def contributes_variants(self, theme: Theme) -> Iterable[VariantModifier]: ...


@dataclass(frozen=True)
class ComponentPlugin:
    """Plugin registering fixed component classes (``.btn { ... }``).

    ``components`` maps a class name to its ordered declarations.
    """

    name: str
    components: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    variants: tuple[VariantModifier, ...] = ()
    layer: Layer = Layer.COMPONENTS

    def contributes_utilities(self, theme: Theme) -> Iterable[UtilityDefinition]:
        for class_name, declarations in self.components.items():
            yield UtilityDefinition(
                class_name=class_name,
                category=self.name,
                properties=tuple((k, str(v)) for k, v in declarations.items()),
                layer=self.layer,
            )

    def contributes_variants(self, theme: Theme) -> Iterable[VariantModifier]:
        return self.variants


def load_plugin(ref: Any) -> Plugin:
    """Resolve a plugin reference.

    *ref* is either a plugin object or a ``"package.module:attribute"``
    string.  A callable attribute that is not itself a plugin is called with
    no arguments (plugin classes and factories).
    """
    if not isinstance(ref, str):
        obj = ref
    else:
        module_name, sep, attr = ref.partition(":")
        if not sep or not module_name or not attr:
            raise ConfigError(f"Plugin reference must look like 'module:attr': {ref!r}")
        try:
            module = importlib.import_module(module_name)
            obj = getattr(module, attr)
        except (ImportError, AttributeError) as exc:
            raise ConfigError(f"Cannot load plugin {ref!r}: {exc}") from exc
    if isinstance(obj, type) or (not isinstance(obj, Plugin) and callable(obj)):
        try:
            obj = obj()
        except TypeError as exc:
            raise ConfigError(f"Cannot instantiate plugin {ref!r}: {exc}") from exc
    if not isinstance(obj, Plugin):
        raise ConfigError(f"Plugin {ref!r} does not implement the plugin interface")
    return obj


def load_plugins(refs: Iterable[Any]) -> list[Plugin]:
    return [load_plugin(ref) for ref in refs]
