"""
Audit service — turns raw audit rows into readable history.

For a changed field this service works out:
1. A display name for the field
2. Readable old and new values, following foreign keys to
   the related entity when the field is one
3. Who made the change and which entity it was made to

Reading never fails because data moved underneath it. A
dangling foreign key, a missing relationship or an unknown
entity kind degrades the output to the next best string:
null string -> unknown string -> formatted scalar -> raw
value. Only a broken formatting rule is raised.
"""

import logging

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from auditable.formatter import FieldFormatter, FormatError
from auditable.models.audit import Audit
from auditable.models.base import Base
from auditable.models.mixins import (
    audit_config,
    blank_instance,
    field_accessor,
)
from auditable.registry import EntityRegistry
from auditable.schemas.audit import AuditEntry
from auditable.services.field_names import is_foreign_key, resolve_field_name
from auditable.services.identity import ActorResolver, IdentityConfig
from auditable.services.relations import try_resolve_relation
from auditable.services.repository import EntityRepository

logger = logging.getLogger(__name__)

SIDES = ("old", "new")


class AuditService:
    """
    Read-side operations on audit rows.

    Like the other services, it takes a database session and
    leaves the transaction boundary to the caller. Nothing is
    cached: every call reads the related rows as they are now.
    """

    def __init__(
        self,
        db: Session,
        registry: EntityRegistry | None = None,
        identity: IdentityConfig | None = None,
    ):
        self.db = db
        self.registry = registry or EntityRegistry.from_base(Base)
        self.repository = EntityRepository(db, self.registry)
        self.actors = ActorResolver(
            self.repository, identity or IdentityConfig.from_settings()
        )

    def field_name(self, audit: Audit) -> str:
        """Display name of the changed field."""
        model = self.repository.kind(audit.subject_type)
        if model is None:
            return resolve_field_name(object, audit.field_key)
        return resolve_field_name(model, audit.field_key)

    def old_value(self, audit: Audit):
        return self.resolve_value(audit, "old")

    def new_value(self, audit: Audit):
        return self.resolve_value(audit, "new")

    def resolve_value(self, audit: Audit, which: str = "new"):
        """
        Readable value for one side of the change.

        which is "old" or "new". Raises FormatError if the
        model declares a broken formatting rule; every other
        failure falls back to a less specific value.
        """
        if which not in SIDES:
            raise ValueError(f"which must be 'old' or 'new', got '{which}'")
        raw_value = getattr(audit, f"{which}_value")

        model = self.repository.kind(audit.subject_type)
        if model is None:
            return raw_value

        key = audit.field_key
        if is_foreign_key(key):
            try:
                related = try_resolve_relation(model, key)
                if related is not None:
                    return self._related_value(model, related.model, key, raw_value)
            except FormatError:
                raise
            except Exception:
                # The data isn't set up as expected; show the scalar instead.
                logger.info(
                    "Auditable: could not resolve %s on %s",
                    key, model.__name__, exc_info=True,
                )

        # Plain value, or a foreign key that could not be followed
        accessor = field_accessor(blank_instance(model), key)
        if accessor is not None:
            return self.format(model, key, accessor(raw_value))
        return self.format(model, key, raw_value)

    def _related_value(self, model: type, related_model: type, key: str, raw_value):
        if raw_value is None or raw_value == "":
            return audit_config(related_model).null_string

        item = self.repository.find_by_id(related_model, raw_value)
        if item is None:
            return self.format(
                model, key, audit_config(related_model).unknown_string
            )

        accessor = field_accessor(item, key)
        if accessor is not None:
            return self.format(model, accessor(key), item.identifiable_name())
        return self.format(model, key, item.identifiable_name())

    def format(self, model: type, key: str, value):
        """Apply the formatting rule model declares for key, if any."""
        return FieldFormatter.format(
            key, value, audit_config(model).formatted_fields
        )

    def user_responsible(self, audit: Audit):
        """The actor who made the change, or None."""
        return self.actors.find(audit.actor_id)

    def history_of(self, audit: Audit):
        """The entity the audit row describes, or None."""
        model = self.repository.kind(audit.subject_type)
        if model is None:
            return None
        return self.repository.find_by_id(model, audit.subject_id)

    def history(self, subject) -> list[Audit]:
        """All audit rows recorded for subject, oldest first."""
        identity = inspect(subject).identity
        if not identity:
            return []
        subject_id = "-".join(str(part) for part in identity)

        kinds = self.registry.names_of(type(subject))
        audits = self.db.execute(
            select(Audit)
            .where(
                Audit.subject_type.in_(kinds),
                Audit.subject_id == subject_id,
            )
            .order_by(Audit.created_at, Audit.id)
        ).scalars().all()
        return list(audits)

    def describe(self, audit: Audit) -> AuditEntry:
        """
        Resolve everything about an audit row into one schema.

        Resolved values are shown as text: whatever a display
        accessor returns is passed through str(), except None,
        which stays None.
        """
        return AuditEntry(
            id=audit.id,
            subject_type=audit.subject_type,
            subject_id=audit.subject_id,
            field_key=audit.field_key,
            field_name=self.field_name(audit),
            old_value=_as_text(self.old_value(audit)),
            new_value=_as_text(self.new_value(audit)),
            actor_id=audit.actor_id,
            event_type=audit.event_type,
            created_at=audit.created_at,
        )


def _as_text(value) -> str | None:
    return None if value is None else str(value)
