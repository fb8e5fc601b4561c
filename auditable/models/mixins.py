"""
Audit configuration carried by tracked models.

A model opts into readable audit history by mixing in
AuditableMixin and overriding the class attributes below.
Anything the audit service needs to know about a model
(display overrides, formatting rules, fallback strings,
relations) is read through this module.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, ClassVar, Mapping

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable

from auditable.config import get_settings


class AuditableMixin:
    """
    Mixin for models whose changes are recorded in the audit table.

    Example:

        class Order(AuditableMixin, Base):
            audit_formatted_field_names = {"customer_id": "buyer"}
            audit_formatted_fields = {
                "public": "boolean:Yes|No",
                "minimum": "string:Min: %s",
            }

    A model may also define get_<field>_display(value) to
    turn a stored value into something readable.
    """

    # Read-only: models replace these, never edit them in place
    audit_formatted_field_names: ClassVar[Mapping[str, str]] = MappingProxyType({})
    audit_formatted_fields: ClassVar[Mapping[str, str]] = MappingProxyType({})
    audit_null_string: ClassVar[str] = get_settings().AUDIT_NULL_STRING
    audit_unknown_string: ClassVar[str] = get_settings().AUDIT_UNKNOWN_STRING

    def identifiable_name(self) -> str:
        """Human readable label; the primary key unless overridden."""
        identity = inspect(self).identity
        if not identity:
            return ""
        return "-".join(str(part) for part in identity)


@dataclass(frozen=True)
class AuditConfig:
    """The audit settings of one entity kind."""
    field_names: dict[str, str] = field(default_factory=dict)
    formatted_fields: dict[str, str] = field(default_factory=dict)
    null_string: str = "nothing"
    unknown_string: str = "unknown"


def audit_config(model: type) -> AuditConfig:
    """
    Read the audit settings of a model class.

    Models without AuditableMixin get the configured defaults,
    so a relation to an untracked table still has fallbacks.
    """
    settings = get_settings()
    return AuditConfig(
        field_names=dict(getattr(model, "audit_formatted_field_names", {})),
        formatted_fields=dict(getattr(model, "audit_formatted_fields", {})),
        null_string=getattr(
            model, "audit_null_string", settings.AUDIT_NULL_STRING
        ),
        unknown_string=getattr(
            model, "audit_unknown_string", settings.AUDIT_UNKNOWN_STRING
        ),
    )


def field_accessor(obj, field_key: str) -> Callable | None:
    """Return obj.get_<field_key>_display if it exists and is callable."""
    accessor = getattr(obj, f"get_{field_key}_display", None)
    return accessor if callable(accessor) else None


def blank_instance(model: type):
    """
    An instance of model built without calling its __init__.

    Used only to reach per-field display accessors, so a
    constructor with required arguments doesn't get in the way.
    """
    return inspect(model).class_manager.new_instance()


def relation_target(model: type, name: str) -> type | None:
    """Return the class a named relationship of model points at, if any."""
    try:
        mapper = inspect(model)
    except NoInspectionAvailable:
        return None
    relationship = mapper.relationships.get(name)
    if relationship is None:
        return None
    return relationship.mapper.class_
