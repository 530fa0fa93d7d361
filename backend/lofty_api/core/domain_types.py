"""Domain Types: record shapes and resource names shared across layers.

Invariants:
    - id is a positive integer assigned by storage, never by the caller
    - created_at == updated_at at creation
    - View.hearts is never negative (new views start at 0)
    - JSON field names are camelCase (createdAt, updatedAt); Python attributes are snake_case

Design Decisions:
    - Frozen pydantic models over dicts: records handed out by storage cannot be
      mutated by services or routes
    - str Enum for resource names: serializes without custom encoders
"""

from datetime import datetime
from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


RecordId = NewType("RecordId", int)


class ResourceName(str, Enum):
    """Resources exposed by the API, with their human-readable labels."""
    LOFTY_VIEW = "lofty_view"
    USER = "user"

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def plural(self) -> str:
        return _LABELS[self][1]


_LABELS = {
    ResourceName.LOFTY_VIEW: ("Lofty view", "Lofty views"),
    ResourceName.USER: ("User", "Users"),
}


class Record(BaseModel):
    """Fields every stored record carries."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: int = Field(gt=0)
    created_at: datetime
    updated_at: datetime


class View(Record):
    """A lofty view: a named scenic spot that collects hearts."""
    name: str
    description: str | None = None
    location: str | None = None
    hearts: int = Field(default=0, ge=0)


class User(Record):
    name: str
    email: str
    age: int = Field(ge=0)
