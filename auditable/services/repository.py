"""
Entity repository — loads tracked entities by kind name and id.

Audit rows store ids as strings, so ids are converted to the
primary key's Python type before querying. An id that cannot
be converted simply matches nothing.
"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from auditable.registry import EntityRegistry


class EntityRepository:

    def __init__(self, db: Session, registry: EntityRegistry):
        self.db = db
        self.registry = registry

    def entity_kind_exists(self, name: str | None) -> bool:
        return name in self.registry

    def kind(self, name: str | None) -> type | None:
        """Return the model class registered under name, or None."""
        return self.registry.resolve(name)

    def find_by_id(self, model: type, raw_id):
        """Load one entity of model by id, or None if absent."""
        entity_id = self._coerce_id(model, raw_id)
        if entity_id is None:
            return None
        return self.db.get(model, entity_id)

    def _coerce_id(self, model: type, raw_id):
        if raw_id is None or raw_id == "":
            return None

        primary_key = inspect(model).primary_key
        if len(primary_key) != 1:
            return raw_id
        try:
            python_type = primary_key[0].type.python_type
        except NotImplementedError:
            return raw_id

        if isinstance(raw_id, python_type):
            return raw_id
        try:
            return python_type(raw_id)
        except (TypeError, ValueError):
            return None
