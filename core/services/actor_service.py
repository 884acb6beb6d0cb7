# =============================================================================
# core/services/actor_service.py - Actor Business Logic
# =============================================================================

from sqlalchemy.orm import Session

from app.exceptions import ActorNotFoundError
from core.models.tables import Actor
from lib.store import EntityStore

from .resource_service import ResourceService


class ActorService(ResourceService[Actor]):
    """CRUD for actors. Updates copy only the name."""

    resource_name = "actor"
    update_fields = ("name",)
    not_found_error = ActorNotFoundError

    def __init__(self, session: Session):
        super().__init__(EntityStore(session, Actor))
