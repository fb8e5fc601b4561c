"""
Relation lookup for foreign-key fields.

A field such as customer_id is expected to have a matching
relationship, customer, on the tracked model. Some models
name multi-word relationships in camel case
(published_status_id -> publishedStatus), so that spelling
is tried second.
"""

import logging
from dataclasses import dataclass

from auditable.models.mixins import relation_target
from auditable.services.field_names import is_foreign_key, strip_foreign_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelatedKind:
    """A resolved relationship: its attribute name and target model."""
    name: str
    model: type


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def try_resolve_relation(model: type, field_key: str) -> RelatedKind | None:
    """
    Find the relationship a foreign-key field points through.

    Returns None when field_key is not a foreign key or when
    model declares no matching relationship. The latter is
    logged, since it usually means a naming mismatch.
    """
    if not is_foreign_key(field_key):
        return None

    name = strip_foreign_key(field_key)
    target = relation_target(model, name)
    if target is None:
        name = camel_case(name)
        target = relation_target(model, name)
    if target is None:
        logger.info(
            "Auditable: relation %s does not exist for %s",
            name, model.__name__,
        )
        return None

    return RelatedKind(name=name, model=target)
