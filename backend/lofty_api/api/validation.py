"""Validation Gate: schema checks that run before any service method.

Invariants:
    - Every malformed request yields the same envelope: success=False,
      statusCode=400, responseObject=null, message "Invalid input: ..."
    - The message concatenates every field error, not just the first
    - Path ids are validated here, so storage only ever sees positive ints

Design Decisions:
    - Raise RequestValidationError (not a custom type): FastAPI's own body
      validation raises it too, so one handler formats both paths
    - Path params declared as str and validated through ResourceIdParams:
      gives the domain messages instead of pydantic's generic int parsing error
"""

from typing import Any, Sequence, TypeVar

from fastapi import Path
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from lofty_api.core.domain_types import RecordId
from lofty_api.core.service_response import ServiceResponse, failure
from lofty_api.schemas.requests import ResourceIdParams

M = TypeVar("M", bound=BaseModel)

INVALID_INPUT_PREFIX = "Invalid input"


def validate_request(schema: type[M], data: Any, location: str) -> M:
    """Validate one request part (path, query, body) against its schema."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": (location, *err["loc"])}
            for err in e.errors(include_url=False)
        ])


def format_validation_errors(errors: Sequence[dict]) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'Invalid value')}"
        for err in errors
    )
    return f"{INVALID_INPUT_PREFIX}: {details}" if details else INVALID_INPUT_PREFIX


def validation_failure(errors: Sequence[dict]) -> ServiceResponse:
    return failure(format_validation_errors(errors), status_code=400)


async def resource_id(
    id: str = Path(description="Record id (positive integer)", examples=["1"]),  # noqa: A002
) -> RecordId:
    """FastAPI dependency: the validated `{id}` path parameter."""
    return RecordId(validate_request(ResourceIdParams, {"id": id}, "path").id)
