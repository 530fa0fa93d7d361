"""User Routes: list, fetch, create and delete users.

Invariants:
    - {id} validated by the resource_id dependency before the service runs
    - Duplicate email (case-insensitive) → 409, collection unchanged
    - DELETE answers 204 with an empty body, 404 when the id is unknown
"""

from fastapi import APIRouter, Depends, status

from lofty_api.api.dependencies import get_user_service, to_http_response
from lofty_api.api.validation import resource_id
from lofty_api.core.domain_types import RecordId, User
from lofty_api.core.service_response import ServiceResponse
from lofty_api.schemas.requests import UserCreate
from lofty_api.services.resource_service import UserService

router = APIRouter(prefix="/users", tags=["User"])

_FAILURE = {"model": ServiceResponse[None]}


@router.get(
    "", response_model=ServiceResponse[list[User]],
    responses={500: {**_FAILURE, "description": "Internal server error"}},
)
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    return to_http_response(await service.list_all())


@router.get(
    "/{id}", response_model=ServiceResponse[User],
    responses={
        400: {**_FAILURE, "description": "Invalid user ID"},
        404: {**_FAILURE, "description": "User not found"},
    },
)
async def get_user(
    record_id: RecordId = Depends(resource_id),
    service: UserService = Depends(get_user_service),
):
    """Fetch one user by id."""
    return to_http_response(await service.get_by_id(record_id))


@router.post(
    "", response_model=ServiceResponse[User],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {**_FAILURE, "description": "Invalid input"},
        409: {**_FAILURE, "description": "User with this email already exists"},
        500: {**_FAILURE, "description": "Internal server error"},
    },
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    """Create a user; emails are unique regardless of case."""
    return to_http_response(await service.create(body.model_dump()))


@router.delete(
    "/{id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "User deleted successfully"},
        400: {**_FAILURE, "description": "Invalid user ID"},
        404: {**_FAILURE, "description": "User not found"},
        500: {**_FAILURE, "description": "Internal server error"},
    },
)
async def delete_user(
    record_id: RecordId = Depends(resource_id),
    service: UserService = Depends(get_user_service),
):
    """Delete a user by id."""
    return to_http_response(await service.delete_by_id(record_id))
