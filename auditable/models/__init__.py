"""
Database models package.

The audit table and the mixin tracked models use live here.
All models must be imported here so that they are registered
on Base.metadata.
"""

from auditable.models.base import Base
from auditable.models.enums import AuditEvent
from auditable.models.audit import Audit, AuditImmutableError
from auditable.models.mixins import AuditableMixin, AuditConfig, audit_config

__all__ = [
    "Base",
    "AuditEvent",
    "Audit",
    "AuditImmutableError",
    "AuditableMixin",
    "AuditConfig",
    "audit_config",
]
