"""
Pydantic schemas for audit history.

These are the read shape of an audit row: the stored
columns plus the resolved, human-readable values. They are
separate from the database model because the stored values
are raw and the displayed ones are computed.
"""

from datetime import datetime

from pydantic import BaseModel

from auditable.models.enums import AuditEvent


class AuditEntry(BaseModel):
    """
    One audit row, ready to display.

    old_value and new_value are text, or None when there is
    nothing to show.
    """
    id: int
    subject_type: str
    subject_id: str
    field_key: str
    field_name: str
    old_value: str | None
    new_value: str | None
    actor_id: str | None
    event_type: AuditEvent
    created_at: datetime

    model_config = {"from_attributes": True}
