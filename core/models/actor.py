# =============================================================================
# core/models/actor.py - Actor Schemas
# =============================================================================
# These models define the API contract for actor operations:
# - ActorCreate: body of POST /api/actors
# - ActorUpdate: body of PUT /api/actors/{id} (only `name` is copied)
# - ActorResponse: an actor as returned to clients
# =============================================================================

from pydantic import Field

from .base import ApiModel


class ActorCreate(ApiModel):
    """
    Schema for creating a new actor.

    Any `id` in the body is ignored; the store assigns one.

    Example:
        {"name": "Jane Doe"}
    """

    name: str | None = Field(
        default=None,
        description="Display name of the actor"
    )


class ActorUpdate(ActorCreate):
    """Schema for overwriting an actor's name."""


class ActorResponse(ApiModel):
    """
    Schema for returning actor data to clients.

    Example:
        {"id": 1, "name": "Oksana Shalovynska"}
    """

    id: int = Field(..., description="Store-assigned actor identifier")
    name: str | None = Field(default=None, description="Display name of the actor")
