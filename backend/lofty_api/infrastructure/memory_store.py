"""In-Memory Record Store: owns each resource's records, ids and timestamps.

Invariants:
    - new id = max(existing ids, default 0) + 1
    - created_at == updated_at == now (UTC) on every created record
    - A unique field collision (case-insensitive) raises DuplicateRecordError
      and leaves the collection unchanged
    - Mutations hold _lock: one completes fully before the next begins
    - list_all() returns a snapshot; callers never see later mutations

Design Decisions:
    - One store instance per application (constructed in create_app), no module
      globals: tests build isolated stores instead of resetting shared state
    - Records are frozen pydantic models, so snapshots can share instances
"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, Iterable, TypeVar

from pydantic import ValidationError

from lofty_api.core.domain_types import (
    Record, RecordId, ResourceName, User, View,
)
from lofty_api.core.errors import DuplicateRecordError, StorageError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

_SERVER_FIELDS = ("id", "created_at", "updated_at")


class InMemoryRepository(Generic[R]):
    """List-backed store satisfying ViewRepository / UserRepository."""

    def __init__(
        self,
        resource: ResourceName,
        model: type[R],
        unique_field: str | None = None,
        server_defaults: dict[str, Any] | None = None,
        records: Iterable[R] = (),
    ):
        self.resource = resource
        self._model = model
        self._unique_field = unique_field
        self._server_defaults = server_defaults or {}
        self._records: list[R] = list(records)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    async def list_all(self) -> list[R]:
        with self._lock:
            return list(self._records)

    async def find_by_id(self, record_id: RecordId) -> R | None:
        with self._lock:
            return next((r for r in self._records if r.id == record_id), None)

    async def create(self, fields: dict[str, Any]) -> R:
        with self._lock:
            self._check_unique(fields)
            now = datetime.now(timezone.utc)
            data = {k: v for k, v in fields.items() if k not in _SERVER_FIELDS}
            data.update(self._server_defaults)
            data.update(id=self._next_id(), created_at=now, updated_at=now)
            try:
                record = self._model(**data)
            except ValidationError as e:
                raise StorageError(str(e), "create") from e
            self._records.append(record)
        logger.info(
            f"Created {self.resource.label} {record.id}",
            extra={"resource": self.resource.value, "record_id": record.id},
        )
        return record

    async def delete_by_id(self, record_id: RecordId) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    del self._records[index]
                    break
            else:
                return False
        logger.info(
            f"Deleted {self.resource.label} {record_id}",
            extra={"resource": self.resource.value, "record_id": record_id},
        )
        return True

    def _next_id(self) -> RecordId:
        return RecordId(max((r.id for r in self._records), default=0) + 1)

    def _check_unique(self, fields: dict[str, Any]) -> None:
        if self._unique_field is None:
            return
        value = fields.get(self._unique_field)
        if not isinstance(value, str):
            return
        wanted = value.casefold()
        for record in self._records:
            if getattr(record, self._unique_field).casefold() == wanted:
                raise DuplicateRecordError(
                    self.resource.label, self._unique_field,
                )


# ─── Factories ───────────────────────────────────────────────────

def create_view_repository(seed: bool = True) -> InMemoryRepository[View]:
    return InMemoryRepository(
        ResourceName.LOFTY_VIEW, View,
        server_defaults={"hearts": 0},
        records=seed_views() if seed else (),
    )


def create_user_repository(seed: bool = True) -> InMemoryRepository[User]:
    return InMemoryRepository(
        ResourceName.USER, User,
        unique_field="email",
        records=seed_users() if seed else (),
    )


def seed_views() -> list[View]:
    """Demo views loaded on startup unless SEED_DEMO_DATA is off."""
    return [
        View(
            id=1, name="Golden Gate Bridge",
            description="Iconic suspension bridge in San Francisco",
            location="San Francisco, CA", hearts=42,
            created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        ),
        View(
            id=2, name="Grand Canyon Sunrise",
            description="Breathtaking sunrise view from the South Rim",
            location="Grand Canyon National Park, AZ", hearts=87,
            created_at=datetime(2024, 2, 20, 6, 15, tzinfo=timezone.utc),
            updated_at=datetime(2024, 2, 20, 6, 15, tzinfo=timezone.utc),
        ),
        View(
            id=3, name="Mount Fuji", location="Honshu, Japan", hearts=156,
            created_at=datetime(2024, 3, 10, 14, 45, tzinfo=timezone.utc),
            updated_at=datetime(2024, 3, 10, 14, 45, tzinfo=timezone.utc),
        ),
    ]


def seed_users() -> list[User]:
    """Demo users; updated_at trails created_at by five days."""
    now = datetime.now(timezone.utc)
    later = now + timedelta(days=5)
    return [
        User(
            id=1, name="Alice", email="alice@example.com", age=42,
            created_at=now, updated_at=later,
        ),
        User(
            id=2, name="Robert", email="Robert@example.com", age=21,
            created_at=now, updated_at=later,
        ),
    ]
