"""
Tests for the entity registry.
"""

from auditable.models.audit import Audit
from auditable.models.base import Base
from auditable.registry import EntityRegistry

from sample_models import Customer, Order


class TestEntityRegistry:

    def test_from_base_registers_mapped_classes(self):
        registry = EntityRegistry.from_base(Base)
        assert registry.resolve("Order") is Order
        assert registry.resolve("Audit") is Audit
        assert "Customer" in registry

    def test_dotted_name(self):
        registry = EntityRegistry.from_base(Base)
        assert registry.resolve("sample_models.Customer") is Customer

    def test_alias(self):
        registry = EntityRegistry()
        registry.register(Order, "App\\Models\\Order")
        assert registry.resolve("App\\Models\\Order") is Order
        assert len(registry) == 1

    def test_unknown_and_empty_names(self):
        registry = EntityRegistry.from_base(Base)
        assert registry.resolve("Spaceship") is None
        assert registry.resolve("") is None
        assert registry.resolve(None) is None
        assert None not in registry

    def test_names_of(self):
        registry = EntityRegistry()
        registry.register(Order)
        assert sorted(registry.names_of(Order)) == [
            "Order", "sample_models.Order",
        ]
        assert registry.names_of(Customer) == []
