"""
Tests for field display names.
"""

from auditable.services.field_names import (
    is_foreign_key,
    resolve_field_name,
    strip_foreign_key,
)

from sample_models import Order, Carrier


class TestResolveFieldName:

    def test_plain_field_unchanged(self):
        assert resolve_field_name(Order, "public") == "public"

    def test_foreign_key_suffix_stripped(self):
        assert resolve_field_name(Order, "status_id") == "status"

    def test_only_first_marker_removed(self):
        assert resolve_field_name(Order, "user_id_id") == "user_id"

    def test_override_wins(self):
        assert resolve_field_name(Order, "minimum") == "Minimum order"

    def test_model_without_audit_config(self):
        assert resolve_field_name(Carrier, "name") == "name"
        assert resolve_field_name(Carrier, "owner_id") == "owner"


class TestForeignKeyConvention:

    def test_detects_marker_anywhere(self):
        assert is_foreign_key("customer_id")
        assert is_foreign_key("customer_identifier")
        assert not is_foreign_key("customer")

    def test_strip(self):
        assert strip_foreign_key("published_status_id") == "published_status"
