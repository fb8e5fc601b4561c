"""
Shared enumerations for database models.

Mapped to a database enum so only known event types
can be stored in the audit table.
"""

import enum


class AuditEvent(str, enum.Enum):
    """Nature of the change an audit row records."""
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
