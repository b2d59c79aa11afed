"""netbar — network bandwidth sampler for status bars.

Each output surface is a BaseView subclass that lives in its own module.
Import a view module to register it in REGISTRY.
"""

from netbar.base import BaseView

REGISTRY: dict[str, type[BaseView]] = {}

# Short aliases → canonical name
ALIASES: dict[str, str] = {
    "status": "bar",
    "plot": "graph",
}

DEFAULT_VIEW = "bar"


def register(cls: type[BaseView]) -> type[BaseView]:
    """Decorator that adds a view class to the global registry."""
    REGISTRY[cls.name] = cls
    return cls


def resolve(name: str) -> str:
    """Resolve a view name, supporting aliases."""
    return ALIASES.get(name, name)
