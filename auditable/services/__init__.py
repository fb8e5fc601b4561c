"""Audit read services."""

from auditable.services.audit_service import AuditService
from auditable.services.identity import ActorResolver, IdentityConfig, IdentityProvider
from auditable.services.repository import EntityRepository

__all__ = [
    "AuditService",
    "ActorResolver",
    "IdentityConfig",
    "IdentityProvider",
    "EntityRepository",
]
