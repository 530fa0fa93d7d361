"""Lofty View Routes: list, fetch and create lofty views.

Invariants:
    - {id} validated by the resource_id dependency before the service runs
    - Body validated against ViewCreate by FastAPI; failures become 400 envelopes
    - Routes hold no logic: call the service, translate its envelope

Design Decisions:
    - response_model documents the envelope in OpenAPI; the JSONResponse returned
      by to_http_response is sent as-is
"""

from fastapi import APIRouter, Depends, status

from lofty_api.api.dependencies import get_view_service, to_http_response
from lofty_api.api.validation import resource_id
from lofty_api.core.domain_types import RecordId, View
from lofty_api.core.service_response import ServiceResponse
from lofty_api.schemas.requests import ViewCreate
from lofty_api.services.resource_service import ViewService

router = APIRouter(prefix="/lofty-views", tags=["LoftyView"])

_ERRORS = {
    400: {"model": ServiceResponse[None], "description": "Invalid input"},
    500: {"model": ServiceResponse[None], "description": "Internal server error"},
}


@router.get(
    "", response_model=ServiceResponse[list[View]],
    responses={500: _ERRORS[500]},
)
async def list_lofty_views(service: ViewService = Depends(get_view_service)):
    """List all lofty views."""
    return to_http_response(await service.list_all())


@router.get(
    "/{id}", response_model=ServiceResponse[View],
    responses={
        **_ERRORS,
        404: {"model": ServiceResponse[None], "description": "Lofty view not found"},
    },
)
async def get_lofty_view(
    record_id: RecordId = Depends(resource_id),
    service: ViewService = Depends(get_view_service),
):
    """Fetch one lofty view by id."""
    return to_http_response(await service.get_by_id(record_id))


@router.post(
    "", response_model=ServiceResponse[View],
    status_code=status.HTTP_201_CREATED, responses=_ERRORS,
)
async def create_lofty_view(
    body: ViewCreate, service: ViewService = Depends(get_view_service),
):
    """Create a lofty view; id, hearts and timestamps are assigned by the server."""
    return to_http_response(await service.create(body.model_dump()))
