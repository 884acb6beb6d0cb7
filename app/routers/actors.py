# =============================================================================
# app/routers/actors.py - Actor CRUD Endpoints
# =============================================================================
# GET is open; POST/PUT/DELETE need the API token (see app/auth).
# A write conflict answers 204 No Content instead of an error.
# Handlers are plain functions so SQLAlchemy calls run in FastAPI's threadpool.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from app.dependencies import ActorServiceDep
from core.models import ActorCreate, ActorResponse, ActorUpdate

router = APIRouter()

ActorId = Annotated[int, Path(description="Actor id")]

CONFLICT_RESPONSE = {
    status.HTTP_204_NO_CONTENT: {"description": "Write conflict; nothing returned"},
}


@router.get("", response_model=list[ActorResponse])
def list_actors(service: ActorServiceDep):
    """List all actors."""
    return [ActorResponse.model_validate(actor) for actor in service.list_all()]


@router.get("/{actor_id}", response_model=ActorResponse, name="get_actor")
def get_actor(actor_id: ActorId, service: ActorServiceDep):
    """Get a single actor."""
    return ActorResponse.model_validate(service.get(actor_id))


@router.post(
    "",
    response_model=ActorResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT_RESPONSE,
)
def create_actor(
    request: Request,
    response: Response,
    service: ActorServiceDep,
    actor: ActorCreate | None = None,
):
    """Create an actor and return it with its new id."""
    result = service.create(actor)
    if result.is_conflict:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    response.headers["Location"] = str(request.url_for("get_actor", actor_id=result.record.id))
    return ActorResponse.model_validate(result.record)


@router.put("/{actor_id}", response_model=ActorResponse, responses=CONFLICT_RESPONSE)
def update_actor(actor_id: ActorId, actor: ActorUpdate, service: ActorServiceDep):
    """Overwrite an actor's name."""
    result = service.update(actor_id, actor)
    if result.is_conflict:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return ActorResponse.model_validate(result.record)


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_actor(actor_id: ActorId, service: ActorServiceDep):
    """
    Delete an actor.

    Movies that list this actor keep the id in their actorIds.
    """
    service.delete(actor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
