"""
Audit model.

One row per changed field of a tracked entity. The row keeps
the raw values exactly as they were persisted; turning them
into something a person can read happens on every read, in
AuditService, because related rows may have changed since.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, Text, Enum as SAEnum, event
from sqlalchemy.orm import Mapped, mapped_column, object_session, validates

from auditable.models.base import Base
from auditable.models.enums import AuditEvent


class AuditImmutableError(RuntimeError):
    """Raised when something tries to update or delete an audit row."""


class Audit(Base):
    """
    Immutable record of a single field change.

    Audit rows are append-only: the change-tracking code
    inserts them and nothing ever updates or deletes them.
    """

    __tablename__ = "audits"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_type: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    subject_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    field_key: Mapped[str] = mapped_column(String(100), nullable=False)
    old_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    new_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    actor_id: Mapped[str | None] = mapped_column(
        String(64), nullable=True, default=None
    )
    event_type: Mapped[AuditEvent] = mapped_column(
        SAEnum(AuditEvent, name="audit_event_enum", create_constraint=True),
        nullable=False,
        default=AuditEvent.UPDATED,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    @validates("field_key")
    def validate_field_key(self, key, value):
        if not value:
            raise ValueError("field_key must not be empty")
        return value

    def _service(self):
        from auditable.services.audit_service import AuditService

        session = object_session(self)
        if session is None:
            raise ValueError("Audit is not attached to a session")
        return AuditService(session)

    def field_name(self) -> str:
        """Display name of the changed field."""
        return self._service().field_name(self)

    def formatted_old_value(self):
        """Readable value before the change."""
        return self._service().old_value(self)

    def formatted_new_value(self):
        """Readable value after the change."""
        return self._service().new_value(self)

    def user_responsible(self):
        """The actor who made the change, or None."""
        return self._service().user_responsible(self)

    def history_of(self):
        """The entity this row describes a change to, or None."""
        return self._service().history_of(self)

    def __repr__(self) -> str:
        # event_type is only filled in by the default at flush
        event_type = getattr(self.event_type, "value", self.event_type)
        return (
            f"<Audit {self.subject_type}:{self.subject_id} "
            f"{self.field_key} ({event_type})>"
        )


@event.listens_for(Audit, "before_update")
def _reject_update(mapper, connection, target):
    raise AuditImmutableError(f"Audit {target.id} cannot be modified")


@event.listens_for(Audit, "before_delete")
def _reject_delete(mapper, connection, target):
    raise AuditImmutableError(f"Audit {target.id} cannot be deleted")
