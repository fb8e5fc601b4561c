"""
Entity registry.

Audit rows name the entity they describe by a string
(subject_type). The registry maps those strings to mapped
model classes so they can be queried. It is built once at
startup, usually straight from Base.
"""

from sqlalchemy.orm import DeclarativeBase


class EntityRegistry:

    def __init__(self):
        self._kinds: dict[str, type] = {}

    @classmethod
    def from_base(cls, base: type[DeclarativeBase]) -> "EntityRegistry":
        """
        Register every class mapped on base.

        Each class is reachable by its class name and by its
        dotted module path, e.g. "Order" and "shop.models.Order".
        """
        registry = cls()
        for mapper in base.registry.mappers:
            registry.register(mapper.class_)
        return registry

    def register(self, model: type, *names: str) -> type:
        """Register model under its default names plus any aliases."""
        keys = (
            model.__name__,
            f"{model.__module__}.{model.__qualname__}",
            *names,
        )
        for key in keys:
            self._kinds[key] = model
        return model

    def resolve(self, name: str | None) -> type | None:
        """Return the class registered under name, or None."""
        if not name:
            return None
        return self._kinds.get(name)

    def names_of(self, model: type) -> list[str]:
        """Every name model is registered under."""
        return [key for key, kind in self._kinds.items() if kind is model]

    def __contains__(self, name) -> bool:
        return self.resolve(name) is not None

    def __len__(self) -> int:
        return len(set(self._kinds.values()))
