"""Route Dependencies: service lookup and envelope → HTTP response translation.

Invariants:
    - Services come from app.state (built once in create_app), never from module globals
    - HTTP status always equals envelope.status_code
    - 204 responses carry an empty body regardless of envelope contents
"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from lofty_api.core.service_response import ServiceResponse
from lofty_api.services.resource_service import UserService, ViewService


def get_view_service(request: Request) -> ViewService:
    return request.app.state.view_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def to_http_response(envelope: ServiceResponse) -> Response:
    """Translate a ServiceResponse into the HTTP response sent to the client."""
    if envelope.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(
        status_code=envelope.status_code, content=envelope.to_body(),
    )
