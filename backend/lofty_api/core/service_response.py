"""Service Response: the uniform envelope every service operation returns.

Invariants:
    - success == (status_code < 400)
    - response_object is None whenever success is False (no partial data on error)
    - Frozen once constructed; serialized verbatim as the HTTP response body

Design Decisions:
    - Module-level success()/failure() constructors: a classmethod named
      `success` would shadow the `success` field on the pydantic model
    - camelCase aliases on the wire, snake_case attributes in Python
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ServiceResponse(BaseModel, Generic[T]):
    """Envelope: success flag, message, payload and status code."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True,
    )

    success: bool
    message: str
    response_object: T | None = None
    status_code: int = Field(ge=100, le=599)

    @model_validator(mode="after")
    def check_consistency(self):
        if self.success != (self.status_code < 400):
            raise ValueError(
                f"success={self.success} contradicts status_code={self.status_code}",
            )
        if not self.success and self.response_object is not None:
            raise ValueError("failure responses must not carry a payload")
        return self

    def to_body(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


def success(
    message: str, payload: Any = None, status_code: int = 200,
) -> ServiceResponse:
    return ServiceResponse(
        success=True, message=message,
        response_object=payload, status_code=status_code,
    )


def failure(
    message: str, payload: Any = None, status_code: int = 400,
) -> ServiceResponse:
    return ServiceResponse(
        success=False, message=message,
        response_object=payload, status_code=status_code,
    )
