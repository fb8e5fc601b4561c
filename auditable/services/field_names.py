"""
Display names for changed fields.
"""

from auditable.models.mixins import audit_config

FOREIGN_KEY_MARKER = "_id"


def is_foreign_key(field_key: str) -> bool:
    return FOREIGN_KEY_MARKER in field_key


def strip_foreign_key(field_key: str) -> str:
    """status_id -> status. Only the first "_id" is removed."""
    return field_key.replace(FOREIGN_KEY_MARKER, "", 1)


def resolve_field_name(model: type, field_key: str) -> str:
    """
    Name to show for field_key on model.

    An override in audit_formatted_field_names wins. Otherwise
    a foreign key loses its "_id", and anything else is
    returned as-is.
    """
    overrides = audit_config(model).field_names
    if field_key in overrides:
        return overrides[field_key]
    if is_foreign_key(field_key):
        return strip_foreign_key(field_key)
    return field_key
