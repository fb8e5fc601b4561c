"""
Actor lookup for audit rows.

Who made a change is answered by an identity provider. An
application either plugs in its own provider (anything with
find_actor_by_id) or names the model that holds its users,
in which case the actor is loaded like any other entity.
"""

from dataclasses import dataclass
from typing import Protocol

from auditable.config import Settings, get_settings
from auditable.services.repository import EntityRepository


class IdentityProvider(Protocol):
    def find_actor_by_id(self, actor_id: str):
        ...


@dataclass(frozen=True)
class IdentityConfig:
    """
    How to find the actor behind an audit row.

    provider takes precedence over actor_kind. With neither
    set, no actor is ever resolved.
    """
    actor_kind: str | None = None
    provider: IdentityProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "IdentityConfig":
        settings = settings or get_settings()
        return cls(actor_kind=settings.AUDIT_ACTOR_MODEL or None)


class ActorResolver:

    def __init__(self, repository: EntityRepository, config: IdentityConfig):
        self.repository = repository
        self.config = config

    def find(self, actor_id: str | None):
        """Return the actor with actor_id, or None."""
        if not actor_id:
            return None
        if self.config.provider is not None:
            return self.config.provider.find_actor_by_id(actor_id)

        model = self.repository.kind(self.config.actor_kind)
        if model is None:
            return None
        return self.repository.find_by_id(model, actor_id)
