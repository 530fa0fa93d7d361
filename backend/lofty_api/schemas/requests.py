"""Request Schemas: field-level validation for path parameters and request bodies.

Invariants:
    - ResourceIdParams.id: ASCII decimal digits and > 0 ("0_2", "1.5", 0 never reach storage)
    - ViewCreate.name / UserCreate.name: non-empty string
    - UserCreate.email: email-shaped, no empty domain labels ("x@b..c" rejected)
    - UserCreate.age: integral JSON number >= 0 (30.0 accepted; "30", 30.5, true rejected)
    - Defined once at import, immutable, shared across requests

Design Decisions:
    - PydanticCustomError over ValueError: the message reaches the client verbatim,
      without pydantic's "Value error, " prefix
    - Unknown body fields ignored, never stored (id/hearts/timestamps are server-owned)
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+$")
_ID_RE = re.compile(r"[+-]?[0-9]+")


class ResourceIdParams(BaseModel):
    """Path parameters for /{resource}/{id} routes."""

    model_config = ConfigDict(frozen=True)

    id: int

    @field_validator("id", mode="before")
    @classmethod
    def id_is_numeric(cls, v: object) -> int:
        if isinstance(v, bool):
            raise PydanticCustomError("id_numeric", "ID must be a numeric value")
        if isinstance(v, int):
            return v
        text = str(v).strip()
        if not _ID_RE.fullmatch(text):
            raise PydanticCustomError("id_numeric", "ID must be a numeric value")
        return int(text)

    @field_validator("id")
    @classmethod
    def id_is_positive(cls, v: int) -> int:
        if v <= 0:
            raise PydanticCustomError("id_positive", "ID must be a positive number")
        return v


class ViewCreate(BaseModel):
    """Body for POST /lofty-views."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    location: str | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("name_required", "Name is required")
        return v


class UserCreate(BaseModel):
    """Body for POST /users."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    age: int

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("name_required", "Name is required")
        return v

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        if not _EMAIL_RE.match(v):
            raise PydanticCustomError("email_invalid", "Valid email is required")
        return v

    @field_validator("age", mode="before")
    @classmethod
    def age_is_integer(cls, v: object) -> object:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise PydanticCustomError(
                "age_integer", "Age must be a non-negative integer",
            )
        if isinstance(v, float):
            if not v.is_integer():
                raise PydanticCustomError(
                    "age_integer", "Age must be a non-negative integer",
                )
            return int(v)
        return v

    @field_validator("age")
    @classmethod
    def age_non_negative(cls, v: int) -> int:
        if v < 0:
            raise PydanticCustomError(
                "age_negative", "Age must be a non-negative integer",
            )
        return v
