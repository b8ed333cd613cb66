from __future__ import annotations

from typing import Any, Optional


class ServiceError(Exception):
    """Base class for domain/service layer failures."""


class NotFoundError(ServiceError):
    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} '{identifier}' not found")


class BadRequestError(ServiceError):
    """Raised when request data is semantically invalid for the service."""


class RemoteFailure(ServiceError):
    """A storage call failed; local state was left untouched."""
    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class PartialFlushFailure(ServiceError):
    """Some draft slots were persisted before one failed; the course is kept."""
    def __init__(self, course_id: str, failed_index: int, persisted: int, not_attempted: int, cause: Optional[Exception]):
        self.course_id = course_id
        self.failed_index = failed_index
        self.persisted = persisted
        self.not_attempted = not_attempted
        self.cause = cause
        super().__init__(
            f"Slot flush for course '{course_id}' stopped at slot {failed_index}: "
            f"{persisted} persisted, {not_attempted} not attempted ({cause})"
        )


class MalformedResponseError(ServiceError):
    """The store accepted the call but its response could not be read."""
    def __init__(self, operation: str, payload: Any, cause: Exception):
        self.operation = operation
        self.payload = payload
        self.cause = cause
        super().__init__(f"{operation} returned an unreadable response: {cause}")
