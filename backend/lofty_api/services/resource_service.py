"""Resource Services: one storage call per operation, wrapped in a ServiceResponse.

Invariants:
    - Every method returns a ServiceResponse; no storage exception escapes
    - Empty list is success (200, []) for every resource
    - get/delete of an absent record → 404 "<Resource> not found"
    - DuplicateRecordError → 409 with its message; any other failure → 500 with
      a generic message (details only in logs)
    - Services never mutate records; only the repository does

Design Decisions:
    - Classification by exception type, never by message substring
    - Repository injected via constructor: tests pass fakes, app passes the
      in-memory store built in create_app (no module-level singletons)
"""

import logging
from typing import Any

from lofty_api.core.domain_types import RecordId, ResourceName
from lofty_api.core.errors import DuplicateRecordError, RecordNotFoundError
from lofty_api.core.repository_protocols import UserRepository, ViewRepository
from lofty_api.core.service_response import ServiceResponse, failure, success

logger = logging.getLogger(__name__)


class ResourceService:
    """list / get / create / delete for a single resource."""

    # Object of the create failure message; falls back to the label.
    create_subject: str | None = None

    def __init__(self, resource: ResourceName, repository):
        self.resource = resource
        self.repository = repository

    @property
    def _label(self) -> str:
        return self.resource.label

    @property
    def _plural(self) -> str:
        return self.resource.plural

    async def list_all(self) -> ServiceResponse:
        try:
            records = await self.repository.list_all()
        except Exception as e:
            self._log_error("listing", e)
            return failure(
                f"An error occurred while retrieving {self._plural.lower()}.",
                status_code=500,
            )
        return success(f"{self._plural} found", list(records or []))

    async def get_by_id(self, record_id: RecordId) -> ServiceResponse:
        try:
            record = await self.repository.find_by_id(record_id)
        except Exception as e:
            self._log_error("finding", e, record_id)
            return failure(
                f"An error occurred while finding {self._label.lower()}.",
                status_code=500,
            )
        if record is None:
            return RecordNotFoundError(self._label, record_id).to_envelope()
        return success(f"{self._label} found", record)

    async def create(self, fields: dict[str, Any]) -> ServiceResponse:
        try:
            record = await self.repository.create(fields)
        except DuplicateRecordError as e:
            logger.warning(
                f"Rejected duplicate {self._label.lower()}: {e.message}",
                extra={"resource": self.resource.value, "error_code": e.code},
            )
            return e.to_envelope()
        except Exception as e:
            self._log_error("creating", e)
            subject = self.create_subject or self._label.lower()
            return failure(
                f"An error occurred while creating {subject}.",
                status_code=500,
            )
        return success(
            f"{self._label} created successfully", record, status_code=201,
        )

    async def delete_by_id(self, record_id: RecordId) -> ServiceResponse:
        try:
            deleted = await self.repository.delete_by_id(record_id)
        except Exception as e:
            self._log_error("deleting", e, record_id)
            return failure(
                f"An error occurred while deleting {self._label.lower()}.",
                status_code=500,
            )
        if not deleted:
            return RecordNotFoundError(self._label, record_id).to_envelope()
        return success(
            f"{self._label} deleted successfully", None, status_code=204,
        )

    def _log_error(
        self, action: str, exc: Exception, record_id: RecordId | None = None,
    ) -> None:
        logger.error(
            f"Error {action} {self._label.lower()}: {exc}",
            extra={"resource": self.resource.value, "record_id": record_id},
            exc_info=True,
        )


class ViewService(ResourceService):
    """Lofty views: list, get, create."""

    create_subject = "the lofty view"

    def __init__(self, repository: ViewRepository):
        super().__init__(ResourceName.LOFTY_VIEW, repository)


class UserService(ResourceService):
    """Users: list, get, create (unique email), delete."""

    def __init__(self, repository: UserRepository):
        super().__init__(ResourceName.USER, repository)
