"""
Component registry for distance metrics, linkage rules, classifiers, and clusterers.

Allows plug-and-play registration of new components by name.
"""

from typing import Dict, Type, Any, Callable


class Registry:
    """
    Generic registry for named components.

    Usage:
        registry = Registry("distances")
        registry.register("jaccard", factory=jaccard_distance)
        fn = registry.get("jaccard")
        d = fn("a b", "b c")
    """

    def __init__(self, name: str):
        self.name = name
        self._registry: Dict[str, Type] = {}
        self._factories: Dict[str, Callable] = {}

    def register(self, name: str, cls: Type = None, factory: Callable = None):
        """Register a component class or a factory function."""
        if cls is not None:
            self._registry[name] = cls
            return cls
        if factory is not None:
            self._factories[name] = factory
            return factory
        raise ValueError(f"register() needs a class or a factory for '{name}'")

    def get(self, name: str) -> Any:
        """Get a registered class or function by name."""
        if name in self._registry:
            return self._registry[name]
        if name in self._factories:
            return self._factories[name]
        raise KeyError(f"'{name}' not found in {self.name} registry. "
                      f"Available: {self.list()}")

    def resolve(self, name: str, fallback: str) -> Any:
        """Get a component by name, using `fallback` for unknown names."""
        if name in self:
            return self.get(name)
        return self.get(fallback)

    def create(self, name: str, **kwargs) -> Any:
        """Create an instance of a registered component."""
        cls_or_factory = self.get(name)
        return cls_or_factory(**kwargs)

    def list(self) -> list:
        """List all registered component names."""
        return list(self._registry.keys()) + list(self._factories.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._registry or name in self._factories


# Global registries
_registries: Dict[str, Registry] = {}


def get_registry(name: str) -> Registry:
    """Get or create a named registry."""
    if name not in _registries:
        _registries[name] = Registry(name)
    return _registries[name]


# Convenience accessors
distances = get_registry("distances")
linkages = get_registry("linkages")
classifiers = get_registry("classifiers")
clusterers = get_registry("clusterers")
