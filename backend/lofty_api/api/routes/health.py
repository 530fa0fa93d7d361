"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health-check always returns 200 if the process is up
    - Answers with the same envelope shape as every other route
"""

from fastapi import APIRouter

from lofty_api.api.dependencies import to_http_response
from lofty_api.core.service_response import ServiceResponse, success

router = APIRouter(prefix="/health-check", tags=["Health Check"])


@router.get("", response_model=ServiceResponse[None])
async def health_check():
    """Basic liveness probe."""
    return to_http_response(success("Service is healthy", None))
